"""
Core type definitions for reaction.

Aliases shared by the sync and lazy combinators.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg deferred computation
type Thunk[T] = Callable[[], T]

# AsyncThunk = zero-arg deferred coroutine
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# Failure = payload held by the Error variant
# NOTE: Python exceptions already carry a message and a cause chain
#       (__cause__ / __context__), so no wrapper type is needed.
type Failure = Exception

# ErrorHandler = function that receives the captured failure
type ErrorHandler[R] = Callable[[Failure], R]

__all__ = (
    "AsyncThunk",
    "ErrorHandler",
    "Failure",
    "Predicate",
    "Thunk",
)
