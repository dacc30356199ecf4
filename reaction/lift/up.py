"""
Подъем значений в Reaction.

Функции для преобразования обычных значений, Optional, kungfu Result и
exception-based кода в Reaction / LazyReaction.
"""

from __future__ import annotations

import typing
from typing import Never

import kungfu

from .._types import AsyncThunk, Failure, Thunk
from ..core import Reaction
from ..lazy import LazyReaction


def pure[T](value: T) -> Reaction[T]:
    """
    Lift pure value into Success.

    Example:
        from reaction import lift as L

        user = L.up.pure(User(id=42))  # Success(User(id=42))

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return Reaction.success(value)


def fail(failure: Failure) -> Reaction[Never]:
    """
    Create Error from a failure. Dual of pure().

    Example:
        error = L.up.fail(ValidationError("bad input"))
    """
    return Reaction.error(failure)


def optional[T](
    value: T | None,
    *,
    error: Thunk[Failure],
) -> Reaction[T]:
    """
    Convert Optional to Reaction. None becomes Error(error()).

    **When to use:** Database lookups, cache checks, config reads.

    Example:
        def get_user(user_id: int) -> Reaction[User]:
            return L.up.optional(db.find(user_id), error=lambda: NotFoundError(user_id))
    """
    return Reaction.from_optional(value, error=error)


def from_result[T](result: kungfu.Result[T, typing.Any]) -> Reaction[T]:
    """
    Lift an already computed kungfu Result.

    Example:
        L.up.from_result(Ok(42))  # Success(42)
    """
    return Reaction.from_result(result)


def catching[T](thunk: Thunk[T], *types: type[Exception]) -> Reaction[T]:
    """
    Evaluate thunk, capturing only the given exception types.

    Example:
        port = L.up.catching(lambda: int(raw_port), ValueError)

    NOTE: Without types every Exception is captured, same as on().
    """
    return Reaction.catching(thunk, *types)


def on[T](thunk: Thunk[T | Reaction[T]]) -> Reaction[T]:
    """Evaluate thunk, capturing raised failures. Alias for Reaction.on()."""
    return Reaction.on(thunk)


def on_async[T](thunk: AsyncThunk[T | Reaction[T] | LazyReaction[T]]) -> LazyReaction[T]:
    """
    Async version of on(): nothing runs until the result is awaited.

    Example:
        user = await L.up.on_async(lambda: client.get_user(42))
    """
    return LazyReaction.on(thunk)


__all__ = (
    "pure",
    "fail",
    "optional",
    "from_result",
    "catching",
    "on",
    "on_async",
)
