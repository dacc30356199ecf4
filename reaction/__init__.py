"""
Reaction library for composing fallible computations without raising.

A Reaction[T] is either Success(value) or Error(failure). Combinators
capture exceptions raised by user functions into Error and keep the chain
going; cooperative-cancellation signals always propagate.

Architecture:
- Reaction / Success / Error - sync tagged union with fluent combinators
- LazyReaction - lazy coroutine yielding a Reaction, for async call sites
- lift - namespaced helpers (L.up, L.call, L.down)
- escape / returns_early - non-local exit for take_or_return
"""

import logging

# Core types
from ._types import AsyncThunk, ErrorHandler, Failure, Predicate, Thunk
from .core import Error, Reaction, Success, capture
from .lazy import LazyReaction

# Non-local exit
from .exit import EarlyReturn, escape, returns_early

# Cancellation policy
from . import config
from .config import CancellationPolicy, current_policy, using_policy

# Lift helpers
from . import lift
from .lift import call, call_async, lifted

# Errors
from ._errors import CheckFailedError, InvalidStateError, MissingExitError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncThunk",
    "ErrorHandler",
    "Failure",
    "Predicate",
    "Thunk",
    # Core
    "Error",
    "LazyReaction",
    "Reaction",
    "Success",
    "capture",
    # Exit
    "EarlyReturn",
    "escape",
    "returns_early",
    # Config
    "config",
    "CancellationPolicy",
    "current_policy",
    "using_policy",
    # Lift
    "lift",
    "call",
    "call_async",
    "lifted",
    # Errors
    "CheckFailedError",
    "InvalidStateError",
    "MissingExitError",
)
