"""
Опускание Reaction в значение.

Корутины для выполнения LazyReaction и извлечения результата.
Принимают и уже готовый Reaction, чтобы call site не различал их.
"""

from __future__ import annotations

from kungfu import Result

from .._types import Failure
from ..core import Reaction
from ..lazy import LazyReaction

type Runnable[T] = Reaction[T] | LazyReaction[T]


async def to_reaction[T](source: Runnable[T]) -> Reaction[T]:
    """
    Run source and return its Reaction.

    Example:
        reaction = await L.down.to_reaction(L.call_async(fetch_user, 42))
    """
    if isinstance(source, LazyReaction):
        return await source()
    return source


async def unsafe[T](source: Runnable[T]) -> T:
    """
    Run and unwrap, raises the captured failure on Error.

    **When to use:** When you want to propagate failures as exceptions.
    """
    reaction = await to_reaction(source)
    return reaction.get()


async def or_else[T](source: Runnable[T], default: T) -> T:
    """
    Run and return value or default.

    Example:
        user = await L.down.or_else(fetch_user(42), default=User.guest())
    """
    reaction = await to_reaction(source)
    return reaction.take_or_default(lambda: default)


async def to_result[T](source: Runnable[T]) -> Result[T, Failure]:
    """Run and convert into kungfu Result."""
    reaction = await to_reaction(source)
    return reaction.to_result()


__all__ = (
    "to_reaction",
    "unsafe",
    "or_else",
    "to_result",
)
