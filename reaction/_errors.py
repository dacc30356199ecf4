from __future__ import annotations

class InvalidStateError(Exception):
    """A condition required by the computation does not hold."""

class CheckFailedError(InvalidStateError):
    """Predicate passed to check() returned False."""

    message: str

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

class MissingExitError(RuntimeError):
    """take_or_return callback returned instead of leaving the enclosing scope."""

    def __init__(self) -> None:
        super().__init__(
            "take_or_return error handler must exit: raise, or call escape() "
            "inside a @returns_early function"
        )

__all__ = ("CheckFailedError", "InvalidStateError", "MissingExitError")
