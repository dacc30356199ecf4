from __future__ import annotations

import asyncio

import pytest

from reaction import EarlyReturn, Error, LazyReaction, Reaction, Success, escape, returns_early

from tests.helpers import Boom, Recorder


def test_escape_raises_early_return() -> None:
    with pytest.raises(EarlyReturn) as info:
        escape(5)
    assert info.value.value == 5


def test_early_return_is_not_captured() -> None:
    with pytest.raises(EarlyReturn):
        Reaction.on(lambda: escape())

    with pytest.raises(EarlyReturn):
        Success(1).map(lambda _: escape())


def test_returns_early_sync(recorder: Recorder) -> None:
    @returns_early
    def handler(reaction: Reaction[str]) -> None:
        data = reaction.take_or_return(lambda e: escape(recorder("error", e)))
        recorder("posted", data)

    handler(Success("x"))
    failure = Boom()
    handler(Error(failure))

    assert recorder.calls == [("posted", "x"), ("error", failure)]


def test_returns_early_keeps_metadata() -> None:
    @returns_early
    def documented() -> int:
        """Doc."""
        return 1

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Doc."


@pytest.mark.asyncio
async def test_returns_early_async(boom: Boom, recorder: Recorder) -> None:
    @returns_early
    async def load(lazy: LazyReaction[str]) -> str:
        reaction = await lazy
        data = reaction.take_or_return(lambda e: escape("default"))
        await asyncio.sleep(0)
        recorder(data)
        return data

    assert await load(LazyReaction.pure("data")) == "data"
    assert await load(LazyReaction.fail(boom)) == "default"
    assert recorder.calls == ["data"]


def test_nested_returns_early_exits_innermost() -> None:
    @returns_early
    def inner() -> str:
        escape("inner")

    @returns_early
    def outer() -> str:
        return f"outer saw {inner()}"

    assert outer() == "outer saw inner"
