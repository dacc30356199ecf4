"""
Вызов функций с автоматическим лифтингом.

Функции и декораторы для вызова sync/async функций с подъемом
результата в Reaction / LazyReaction.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable
from functools import wraps

from ..core import Reaction
from ..lazy import LazyReaction


def call[T, **P](
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Reaction[T]:
    """
    Call sync function with arguments and capture the outcome.

    **When to use:** Preferred pattern for locality. Write plain functions that
    raise, lift them at the call site.

    Example:
        from reaction import lift as L

        def parse_port(raw: str) -> int:
            return int(raw)

        port = L.call(parse_port, "8080")  # Success(8080)

    **Grammar:** `L.call(func, *args, **kwargs)` reads as "call function with args"
    """
    return Reaction.on(lambda: func(*args, **kwargs))


def call_async[T, **P](
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> LazyReaction[T]:
    """
    Call async function with arguments, lazily.

    Example:
        user = await L.call_async(client.get_user, user_id=42)

    NOTE: Automatically creates a thunk, the coroutine is only created
          when the LazyReaction is awaited.
    """
    return LazyReaction.on(lambda: func(*args, **kwargs))


@typing.overload
def lifted[T, **P](func: Callable[P, Awaitable[T]]) -> Callable[P, LazyReaction[T]]: ...


@typing.overload
def lifted[T, **P](func: Callable[P, T]) -> Callable[P, Reaction[T]]: ...


def lifted(func: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
    """
    Decorator: the function returns Reaction (or LazyReaction for coroutines).

    Example:
        @L.lifted
        def get_data() -> str:
            return repository.load()

        @L.lifted
        async def fetch_user(user_id: int) -> User:
            return await client.get_user(user_id)

        get_data()        # Reaction[str]
        await fetch_user(42)  # Reaction[User]

    **Grammar:** `@L.lifted` reads as "lifted function"
    """
    if inspect.iscoroutinefunction(func):

        @wraps(func)
        def async_wrapper(*args: typing.Any, **kwargs: typing.Any) -> LazyReaction[typing.Any]:
            return call_async(func, *args, **kwargs)

        return async_wrapper

    @wraps(func)
    def wrapper(*args: typing.Any, **kwargs: typing.Any) -> Reaction[typing.Any]:
        return call(func, *args, **kwargs)

    return wrapper


__all__ = (
    "call",
    "call_async",
    "lifted",
)
