"""Test doubles shared across the suite."""

from __future__ import annotations

from dataclasses import dataclass, field


class Boom(Exception):
    """Business failure raised by test functions."""


@dataclass
class Recorder:
    """Collects side-effect calls made by combinator callbacks."""

    calls: list[object] = field(default_factory=list)

    def __call__(self, *args: object) -> None:
        self.calls.append(args[0] if len(args) == 1 else args)


def raise_(exc: BaseException) -> object:
    raise exc
