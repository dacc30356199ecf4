"""
Cancellation policy
===================

Decides which raised exceptions are cooperative-cancellation signals.
Such signals are re-raised by every capturing combinator instead of
being turned into an Error.

The active policy lives in a ContextVar, so an override made inside
an asyncio task does not leak into sibling tasks.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import contextlib
import contextvars
import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass


def _default_signals() -> tuple[type[BaseException], ...]:
    return (asyncio.CancelledError, concurrent.futures.CancelledError)


@dataclass(frozen=True, slots=True)
class CancellationPolicy:
    """
    Set of exception types treated as cancellation.

    Example:
        import anyio
        from reaction import config

        policy = config.current_policy().with_signals(anyio.get_cancelled_exc_class())
        with config.using_policy(policy):
            ...
    """

    signals: tuple[type[BaseException], ...] = dataclasses.field(default_factory=_default_signals)

    def is_cancellation(self, exc: BaseException) -> bool:
        return isinstance(exc, self.signals)

    def with_signals(self, *signals: type[BaseException]) -> CancellationPolicy:
        """Return a copy that also treats `signals` as cancellation."""
        merged = self.signals + tuple(s for s in signals if s not in self.signals)
        return dataclasses.replace(self, signals=merged)


_policy: contextvars.ContextVar[CancellationPolicy] = contextvars.ContextVar(
    "reaction_cancellation_policy",
    default=CancellationPolicy(),
)


def current_policy() -> CancellationPolicy:
    return _policy.get()


def set_policy(policy: CancellationPolicy) -> contextvars.Token[CancellationPolicy]:
    """Install `policy` for the current context. Undo with reset_policy(token)."""
    return _policy.set(policy)


def reset_policy(token: contextvars.Token[CancellationPolicy]) -> None:
    _policy.reset(token)


@contextlib.contextmanager
def using_policy(policy: CancellationPolicy) -> Iterator[CancellationPolicy]:
    """Temporarily install `policy` for the current context."""
    token = set_policy(policy)
    try:
        yield policy
    finally:
        reset_policy(token)


__all__ = (
    "CancellationPolicy",
    "current_policy",
    "reset_policy",
    "set_policy",
    "using_policy",
)
