from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class RepositoryError(Exception):
    """Raised by the fake repository when the backend is unavailable."""


@dataclass(slots=True)
class FakeRepository:
    """Plain exception-raising data source, no Reaction inside."""

    name: str
    delay_seconds: float = 0.0
    failures_before_ok: int = 0

    async def get_data(self) -> str:
        await asyncio.sleep(self.delay_seconds)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise RepositoryError(f"{self.name}: unavailable")
        return "some calculating"

    async def get_another_data(self, first: str) -> str:
        await asyncio.sleep(self.delay_seconds)
        return f"some another calculating by {first}"


@dataclass(slots=True)
class LiveData[T]:
    """Observable value holder a UI layer would subscribe to."""

    values: list[T] = field(default_factory=list)

    def post(self, value: T) -> None:
        self.values.append(value)
        print(f"  posted: {value!r}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
