"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from reaction import lift as L   # Recommended
    from reaction import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в Reaction
- L.down.*  - выполнение LazyReaction и извлечение значения
- L.call()  - вызов функций с лифтингом

Examples:
    from reaction import lift as L

    user = L.up.pure(User(id=42))
    maybe = L.up.optional(db_result, error=NotFound)

    port = L.call(int, raw_port)
    user = L.call_async(client.get_user, 42)

    value = await L.down.unsafe(user)

    @L.lifted
    async def fetch(): ...
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# From up namespace - подъем значений
from .up import catching, fail, from_result, on, on_async, optional, pure

# From call namespace - вызов функций
from .call import call, call_async, lifted

# From down namespace - выполнение
from .down import or_else, to_reaction, to_result, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "optional",
    "from_result",
    "catching",
    "on",
    "on_async",
    # Call
    "call",
    "call_async",
    "lifted",
    # Down
    "to_reaction",
    "unsafe",
    "or_else",
    "to_result",
)
