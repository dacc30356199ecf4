"""
Reaction - success value or captured failure
============================================

Reaction[T] is a two-variant tagged union:
- Success(value): the computation produced a value
- Error(failure): the computation raised, failure is the exception

Combinators never raise for business failures: an exception raised by a
user function is captured into Error and the chain keeps going.
Cooperative-cancellation signals (see reaction.config) are the exception,
they are always re-raised.

Propagated on purpose (not captured):
- get() re-raises the failure
- do_on_complete() callback failures
- take_or_return() contract violation
- fold/zip/handle/map_reaction/flat_handle callbacks (terminal operations)
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Never, assert_never

import kungfu

from . import config
from ._errors import CheckFailedError, InvalidStateError, MissingExitError
from ._types import ErrorHandler, Failure, Predicate, Thunk

if typing.TYPE_CHECKING:
    from .lazy import LazyReaction

logger = logging.getLogger(__name__)


def capture(exc: Exception) -> Error:
    """
    Turn a raised exception into Error.

    Cancellation signals of the active policy are re-raised unchanged.
    """
    if config.current_policy().is_cancellation(exc):
        logger.debug("propagating cancellation signal %r", exc)
        raise exc
    logger.debug("captured failure %r", exc)
    return Error(exc)


class Reaction[T]:
    """
    Successful value of type T or a captured failure.

    Example:
        Reaction.on(lambda: repository.get_data())
            .map(str.upper)
            .check("must be non-empty", predicate=bool)
            .fold(success=State.ok, error=lambda e: State.failed())
    """

    __slots__ = ()

    def __new__(cls, *args: typing.Any, **kwargs: typing.Any) -> typing.Self:
        _ = (args, kwargs)
        if cls is Reaction:
            raise TypeError("Reaction is a union: construct Success or Error")
        return super().__new__(cls)

    # Construction

    @staticmethod
    def on[V](f: Thunk[V | Reaction[V]], /) -> Reaction[V]:
        """
        Evaluate f and classify its outcome.

        A returned Reaction is not wrapped again:
            Reaction.on(lambda: Reaction.on(lambda: 1)) == Success(1)

        NOTE: f is called synchronously. A coroutine function would end up as
              Success(<coroutine>), use LazyReaction.on / L.up.on_async instead.
        """
        try:
            result = f()
        except Exception as exc:
            return capture(exc)
        if isinstance(result, Reaction):
            return typing.cast(Reaction[V], result)
        return Success(result)

    of = on

    @staticmethod
    def try_reaction[V](f: Thunk[Reaction[V]], /) -> Reaction[V]:
        """Evaluate f, which already returns a Reaction, capturing raised failures."""
        try:
            result = f()
        except Exception as exc:
            return capture(exc)
        if not isinstance(result, Reaction):
            return Error(TypeError(f"expected a Reaction, got {type(result).__name__}"))
        return result

    @staticmethod
    def on_condition(predicate: Thunk[bool], /) -> Reaction[None]:
        """Success(None) when predicate holds, Error(InvalidStateError) otherwise."""
        try:
            holds = predicate()
        except Exception as exc:
            return capture(exc)
        if holds:
            return Success(None)
        return Error(InvalidStateError("condition is not satisfied"))

    @staticmethod
    def success[V](value: V, /) -> Reaction[V]:
        return Success(value)

    @staticmethod
    def error(failure: Failure, /) -> Reaction[Never]:
        return Error(failure)

    @staticmethod
    def from_optional[V](
        value: V | None,
        /,
        *,
        error: Thunk[Failure] | None = None,
    ) -> Reaction[V]:
        """
        None becomes Error(error()), anything else Success(value).

        NOTE: error is a thunk so the failure is only built when needed.
        """
        if value is None:
            return Error(error() if error is not None else InvalidStateError("value is absent"))
        return Success(value)

    @staticmethod
    def catching[V](f: Thunk[V | Reaction[V]], /, *types: type[Exception]) -> Reaction[V]:
        """
        Like on(), but only the listed exception types are captured.

        Anything else propagates to the caller:
            Reaction.catching(lambda: int(raw), ValueError)
        """
        catch = types or (Exception,)
        try:
            result = f()
        except catch as exc:
            return capture(exc)
        if isinstance(result, Reaction):
            return typing.cast(Reaction[V], result)
        return Success(result)

    @staticmethod
    def from_result[V](result: kungfu.Result[V, typing.Any], /) -> Reaction[V]:
        """
        Convert kungfu Result into Reaction.

        Error payloads that are not exceptions are wrapped in InvalidStateError
        (the original payload is kept in args[0]).
        """
        match result:
            case kungfu.Ok(value):
                return Success(value)
            case kungfu.Error(err):
                return Error(err if isinstance(err, Exception) else InvalidStateError(err))
            case _:
                raise TypeError(f"expected kungfu Result, got {type(result).__name__}")

    # Unwrapping

    def get(self) -> T:
        """Return the value, or raise the captured failure."""
        match self:
            case Success(value):
                return value
            case Error(failure):
                raise failure
            case _ as unreachable:
                assert_never(unreachable)

    def take_or_return(self, on_error: ErrorHandler[Never], /) -> T:
        """
        Return the value, or hand the failure to on_error which must exit.

        Python has no non-local return, so on_error leaves the enclosing scope
        by raising, or with escape() inside a @returns_early function:

            @returns_early
            def load() -> None:
                data = repository.get_data().take_or_return(lambda e: escape())
                ...
        """
        match self:
            case Success(value):
                return value
            case Error(failure):
                on_error(failure)
                raise MissingExitError()
            case _ as unreachable:
                assert_never(unreachable)

    def take_or_default(self, default: Thunk[T], /) -> T:
        """Return the value, or default() on Error (evaluated lazily)."""
        match self:
            case Success(value):
                return value
            case _:
                return default()

    def take_or_none(self) -> T | None:
        match self:
            case Success(value):
                return value
            case _:
                return None

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_error(self) -> bool:
        return isinstance(self, Error)

    # Transformation

    def map[R](self, f: Callable[[T], R], /) -> Reaction[R]:
        """Apply f to the success value."""
        match self:
            case Success(value):
                try:
                    return Success(f(value))
                except Exception as exc:
                    return capture(exc)
            case Error() as error:
                return error
            case _ as unreachable:
                assert_never(unreachable)

    def flat_map[R](self, f: Callable[[T], Reaction[R]], /) -> Reaction[R]:
        """Chain a function that returns a Reaction itself."""
        match self:
            case Success(value):
                try:
                    result = f(value)
                except Exception as exc:
                    return capture(exc)
                if not isinstance(result, Reaction):
                    return Error(TypeError(f"flat_map expects a Reaction, got {type(result).__name__}"))
                return result
            case Error() as error:
                return error
            case _ as unreachable:
                assert_never(unreachable)

    def map_reaction[R](self, f: Callable[[T | None, Failure | None], R], /) -> R:
        """Call f with (value, None) or (None, failure) and return its result."""
        match self:
            case Success(value):
                return f(value, None)
            case Error(failure):
                return f(None, failure)
            case _ as unreachable:
                assert_never(unreachable)

    def error_map(self, f: Callable[[Failure], Failure], /) -> Reaction[T]:
        """Replace the failure with f(failure)."""
        match self:
            case Success():
                return self
            case Error(failure):
                try:
                    return Error(f(failure))
                except Exception as exc:
                    return capture(exc)
            case _ as unreachable:
                assert_never(unreachable)

    def recover(self, transform: Callable[[Failure], T | Reaction[T]], /) -> Reaction[T]:
        """
        Turn Error into the outcome of transform(failure).

        Goes through Reaction.on, so a raised failure yields a new Error
        and a returned Reaction is flattened.
        """
        match self:
            case Success():
                return self
            case Error(failure):
                return Reaction.on(lambda: transform(failure))
            case _ as unreachable:
                assert_never(unreachable)

    def fold[R](self, success: Callable[[T], R], error: Callable[[Failure], R]) -> R:
        """Dispatch to exactly one branch and return its result."""
        match self:
            case Success(value):
                return success(value)
            case Error(failure):
                return error(failure)
            case _ as unreachable:
                assert_never(unreachable)

    zip = fold

    def handle(self, success: Callable[[T], object], error: Callable[[Failure], object]) -> None:
        """Side-effecting fold."""
        self.fold(success, error)

    def flat_handle(self, f: Callable[[T | None, Failure | None], object], /) -> None:
        """Side-effecting map_reaction."""
        self.map_reaction(f)

    def do_on_success(self, f: Callable[[T], object], /) -> Reaction[T]:
        match self:
            case Success(value):
                try:
                    f(value)
                except Exception as exc:
                    return capture(exc)
                return self
            case _:
                return self

    def do_on_error(self, f: Callable[[Failure], object], /) -> Reaction[T]:
        """
        Run f on the failure and pass self through.

        NOTE: if f raises, its failure replaces the original one.
        """
        match self:
            case Error(failure):
                try:
                    f(failure)
                except Exception as exc:
                    return capture(exc)
                return self
            case _:
                return self

    def do_on_complete(self, f: Callable[[], object], /) -> Reaction[T]:
        """Run f whatever the variant. Failures raised by f propagate."""
        f()
        return self

    def check(self, message: str = "", *, predicate: Predicate[T]) -> Reaction[T]:
        """Turn Success into Error(CheckFailedError(message)) if predicate fails."""
        match self:
            case Success(value):
                try:
                    if not predicate(value):
                        raise CheckFailedError(message)
                except Exception as exc:
                    return capture(exc)
                return self
            case _:
                return self

    # Interop

    def to_result(self) -> kungfu.Result[T, Failure]:
        """Convert into kungfu Result (Ok / Error)."""
        match self:
            case Success(value):
                return kungfu.Ok(value)
            case Error(failure):
                return kungfu.Error(failure)
            case _ as unreachable:
                assert_never(unreachable)

    def to_lazy(self) -> LazyReaction[T]:
        """Lift into LazyReaction to continue with async combinators."""
        from .lazy import LazyReaction

        return LazyReaction.from_reaction(self)

    # Protocol methods

    def __iter__(self) -> Iterator[T | Failure | None]:
        """Destructure: value, failure = reaction"""
        match self:
            case Success(value):
                return iter((value, None))
            case Error(failure):
                return iter((None, failure))
            case _ as unreachable:
                assert_never(unreachable)


@dataclass(frozen=True, slots=True, repr=False)
class Success[T](Reaction[T]):
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Error(Reaction[Never]):
    failure: Failure

    def __repr__(self) -> str:
        return f"Error({self.failure!r})"


__all__ = (
    "Error",
    "Reaction",
    "Success",
    "capture",
)
