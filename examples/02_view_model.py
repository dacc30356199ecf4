from __future__ import annotations

import logging
from dataclasses import dataclass

from _infra import FakeRepository, LiveData, banner, run

from reaction import Reaction, escape, lift as L, returns_early

log = logging.getLogger("view_model")


@dataclass(frozen=True, slots=True)
class State:
    data: str | None
    failed: bool = False


class MainViewModel:
    """UI-facing consumer: wraps repository calls and posts states."""

    def __init__(self, repository: FakeRepository) -> None:
        self.repository = repository
        self.live_data: LiveData[State] = LiveData()

    async def get_data(self) -> None:
        state = await (
            L.call_async(self.repository.get_data)
            .map(lambda _: "convert to another string")
            .do_on_error(lambda e: log.warning("it is an error: %s", e))
            .fold(success=State, error=lambda _: State(None, failed=True))
        )
        self.live_data.post(state)

    @returns_early
    async def get_another_data(self) -> None:
        first = await (
            L.call_async(self.repository.get_data)
            .check(predicate=bool)
            .flat_map(lambda _: Reaction.on(lambda: "flatmapped data"))
        )
        data = first.take_or_return(lambda e: escape(log.warning("it is an error again: %s", e)))

        another = await L.call_async(self.repository.get_another_data, data)
        another.handle(
            success=lambda value: self.live_data.post(State(value)),
            error=lambda e: log.warning("error too: %s", e),
        )


async def main() -> None:
    banner("02_view_model: async call sites + take_or_return")
    logging.basicConfig(level=logging.INFO, format="  %(name)s: %(message)s")

    healthy = MainViewModel(FakeRepository(name="api", delay_seconds=0.01))
    await healthy.get_data()
    await healthy.get_another_data()

    flaky = MainViewModel(FakeRepository(name="api", delay_seconds=0.01, failures_before_ok=2))
    await flaky.get_data()
    await flaky.get_another_data()


if __name__ == "__main__":
    run(main)
