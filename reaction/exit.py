"""
Non-local exit for take_or_return.

escape() raises EarlyReturn, @returns_early turns it back into a plain
return of the decorated function. EarlyReturn derives from BaseException
so no combinator ever captures it on the way out.

Example:
    from reaction import escape, returns_early

    @returns_early
    async def load(self) -> None:
        data = (await repository.get_data()).take_or_return(lambda e: escape())
        self.state.post(data)
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from functools import wraps
from typing import Never


class EarlyReturn(BaseException):
    """Leave the nearest @returns_early function with `value`."""

    value: typing.Any

    def __init__(self, value: typing.Any = None) -> None:
        self.value = value
        super().__init__(value)


def escape(value: typing.Any = None) -> Never:
    raise EarlyReturn(value)


def returns_early[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """
    Decorator: an EarlyReturn raised in the body becomes the return value.

    Works with plain and coroutine functions.
    """
    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> typing.Any:
            try:
                return await func(*args, **kwargs)  # type: ignore[misc]
            except EarlyReturn as early:
                return early.value

        return typing.cast(Callable[P, R], async_wrapper)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except EarlyReturn as early:
            return early.value

    return wrapper


__all__ = ("EarlyReturn", "escape", "returns_early")
