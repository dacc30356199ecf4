"""LazyReaction

Lazy coroutine producing a Reaction[T]:
- Lazy (nothing runs until awaited)
- Coro (user functions may suspend)
- Reaction[T] (success/captured failure)

Capture rules are the same as for Reaction. asyncio.CancelledError is a
BaseException and is never captured, so cancelling the awaiting task
always propagates."""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Awaitable, Callable, Coroutine

from kungfu import LazyCoroResult, Result
from kungfu.library.caching import acache

from . import config
from ._types import AsyncThunk, Failure, Predicate
from .core import Error, Reaction, Success, capture

logger = logging.getLogger(__name__)

type Settles[T] = T | Awaitable[T]


async def _settle(value: typing.Any) -> typing.Any:
    """Await until a plain value remains."""
    while inspect.isawaitable(value):
        value = await value
    return value


class LazyReaction[T]:
    """Lazy Coroutine Reaction.

    Example:
        profile = await (
            LazyReaction.on(lambda: api.fetch_user(42))
            .map(lambda user: user.profile)
            .recover(lambda e: Profile.guest())
        )
    """

    __slots__ = ("_value",)

    def __init__(self, value: Callable[[], Coroutine[typing.Any, typing.Any, Reaction[T]]], /) -> None:
        """Create LazyReaction from a fn returning coroutine."""
        self._value = value

    # Constructors

    @staticmethod
    def on[V](thunk: AsyncThunk[V | Reaction[V] | LazyReaction[V]], /) -> LazyReaction[V]:
        """
        Await thunk() and classify its outcome.

        A Reaction or LazyReaction produced by thunk is flattened.
        """

        async def run() -> Reaction[V]:
            try:
                result = await _settle(thunk())
            except Exception as exc:
                return capture(exc)
            if isinstance(result, Reaction):
                return typing.cast(Reaction[V], result)
            return Success(result)

        return LazyReaction(run)

    @staticmethod
    def try_reaction[V](thunk: AsyncThunk[Reaction[V]], /) -> LazyReaction[V]:
        """Await thunk(), which already yields a Reaction, capturing raised failures."""

        async def run() -> Reaction[V]:
            try:
                result = await _settle(thunk())
            except Exception as exc:
                return capture(exc)
            if not isinstance(result, Reaction):
                return Error(TypeError(f"expected a Reaction, got {type(result).__name__}"))
            return result

        return LazyReaction(run)

    @staticmethod
    def pure[V](value: V, /) -> LazyReaction[V]:
        """Lift a value into an always-succeeding LazyReaction."""

        async def run() -> Reaction[V]:
            return Success(value)

        return LazyReaction(run)

    @staticmethod
    def fail(failure: Failure, /) -> LazyReaction[typing.Never]:
        """Create an always-failing LazyReaction. Dual of pure()."""

        async def run() -> Reaction[typing.Never]:
            return Error(failure)

        return LazyReaction(run)

    @staticmethod
    def from_reaction[V](reaction: Reaction[V], /) -> LazyReaction[V]:
        async def run() -> Reaction[V]:
            return reaction

        return LazyReaction(run)

    @staticmethod
    def from_lazy_coro_result[V](lazy: LazyCoroResult[V, typing.Any], /) -> LazyReaction[V]:
        """Convert kungfu LazyCoroResult to LazyReaction."""

        async def run() -> Reaction[V]:
            try:
                result = await lazy()
            except Exception as exc:
                return capture(exc)
            return Reaction.from_result(result)

        return LazyReaction(run)

    # Functor operations

    def map[R](self, f: Callable[[T], R], /) -> LazyReaction[R]:
        """Apply sync f to the success value."""

        async def run() -> Reaction[R]:
            reaction = await self()
            return reaction.map(f)

        return LazyReaction(run)

    def map_async[R](self, f: Callable[[T], Awaitable[R]], /) -> LazyReaction[R]:
        """Apply async f to the success value."""

        async def run() -> Reaction[R]:
            reaction = await self()
            match reaction:
                case Success(value):
                    try:
                        return Success(await f(value))
                    except Exception as exc:
                        return capture(exc)
                case Error() as error:
                    return error
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return LazyReaction(run)

    def error_map(self, f: Callable[[Failure], Failure], /) -> LazyReaction[T]:
        async def run() -> Reaction[T]:
            reaction = await self()
            return reaction.error_map(f)

        return LazyReaction(run)

    # Monad operations

    def flat_map[R](
        self,
        f: Callable[[T], Settles[Reaction[R]] | LazyReaction[R]],
        /,
    ) -> LazyReaction[R]:
        """
        Monadic bind.

        f may return a Reaction, a LazyReaction or an awaitable of a Reaction.
        """

        async def run() -> Reaction[R]:
            reaction = await self()
            match reaction:
                case Success(value):
                    try:
                        result = await _settle(f(value))
                    except Exception as exc:
                        return capture(exc)
                    if not isinstance(result, Reaction):
                        return Error(TypeError(f"flat_map expects a Reaction, got {type(result).__name__}"))
                    return typing.cast(Reaction[R], result)
                case Error() as error:
                    return error
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return LazyReaction(run)

    def recover(self, transform: Callable[[Failure], T | Reaction[T]], /) -> LazyReaction[T]:
        async def run() -> Reaction[T]:
            reaction = await self()
            return reaction.recover(transform)

        return LazyReaction(run)

    def recover_async(
        self,
        transform: Callable[[Failure], Awaitable[T | Reaction[T] | LazyReaction[T]]],
        /,
    ) -> LazyReaction[T]:
        """Turn Error into the outcome of await transform(failure)."""

        async def run() -> Reaction[T]:
            reaction = await self()
            match reaction:
                case Success():
                    return reaction
                case Error(failure):
                    return await LazyReaction.on(lambda: transform(failure))
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return LazyReaction(run)

    # Guards and effects

    def check(self, message: str = "", *, predicate: Predicate[T]) -> LazyReaction[T]:
        async def run() -> Reaction[T]:
            reaction = await self()
            return reaction.check(message, predicate=predicate)

        return LazyReaction(run)

    def do_on_success(self, f: Callable[[T], object], /) -> LazyReaction[T]:
        async def run() -> Reaction[T]:
            reaction = await self()
            return reaction.do_on_success(f)

        return LazyReaction(run)

    def do_on_error(self, f: Callable[[Failure], object], /) -> LazyReaction[T]:
        async def run() -> Reaction[T]:
            reaction = await self()
            return reaction.do_on_error(f)

        return LazyReaction(run)

    def do_on_complete(self, f: Callable[[], object], /) -> LazyReaction[T]:
        """
        Run f after the upstream finishes, even if it was cancelled.

        NOTE: while a cancellation signal is propagating, a failure raised by f
              is attached to the signal as a note and the signal wins.
        """

        async def run() -> Reaction[T]:
            try:
                reaction = await self()
            except BaseException as exc:
                if not config.current_policy().is_cancellation(exc):
                    f()
                    raise
                try:
                    f()
                except Exception as callback_exc:
                    logger.debug("do_on_complete callback failed during cancellation", exc_info=callback_exc)
                    exc.add_note(f"do_on_complete callback failed: {callback_exc!r}")
                raise
            f()
            return reaction

        return LazyReaction(run)

    # Terminals

    async def get(self) -> T:
        """Run and unwrap, raises the captured failure on Error."""
        reaction = await self()
        return reaction.get()

    async def take_or_default(self, default: Callable[[], T], /) -> T:
        reaction = await self()
        return reaction.take_or_default(default)

    async def take_or_none(self) -> T | None:
        reaction = await self()
        return reaction.take_or_none()

    async def fold[R](self, success: Callable[[T], R], error: Callable[[Failure], R]) -> R:
        reaction = await self()
        return reaction.fold(success, error)

    # Utility operations

    def cache(self) -> LazyReaction[T]:
        """Cache the outcome - only compute once."""
        return LazyReaction(acache(self))

    def to_lazy_coro_result(self) -> LazyCoroResult[T, Failure]:
        """Convert to kungfu LazyCoroResult."""

        async def run() -> Result[T, Failure]:
            reaction = await self()
            return reaction.to_result()

        return LazyCoroResult(run)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Reaction[T]]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, Reaction[T]]:
        """Allow direct await."""
        return self().__await__()


__all__ = ("LazyReaction",)
