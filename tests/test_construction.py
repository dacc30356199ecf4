from __future__ import annotations

import asyncio

import pytest

from reaction import Error, InvalidStateError, Reaction, Success

from tests.helpers import Boom, raise_


def test_on_wraps_value() -> None:
    result = Reaction.on(lambda: "value")

    assert result == Success("value")
    assert result.get() == "value"


def test_on_captures_raised_failure(boom: Boom) -> None:
    result = Reaction.on(lambda: raise_(boom))

    assert result == Error(boom)
    with pytest.raises(Boom) as info:
        result.get()
    assert info.value is boom


def test_on_flattens_nested_reaction() -> None:
    result = Reaction.on(lambda: Reaction.on(lambda: 5))

    assert result == Success(5)
    assert not isinstance(result.get(), Reaction)


def test_of_is_alias_for_on() -> None:
    assert Reaction.of(lambda: 1) == Success(1)


def test_on_keeps_none_as_success() -> None:
    assert Reaction.on(lambda: None) == Success(None)


def test_try_reaction_returns_inner_reaction() -> None:
    inner = Error(Boom("inner"))

    assert Reaction.try_reaction(lambda: inner) is inner


def test_try_reaction_captures_raised_failure(boom: Boom) -> None:
    assert Reaction.try_reaction(lambda: raise_(boom)) == Error(boom)


def test_try_reaction_rejects_plain_value() -> None:
    result = Reaction.try_reaction(lambda: 1)  # type: ignore[arg-type, return-value]

    _, failure = result
    assert isinstance(failure, TypeError)


def test_on_condition() -> None:
    assert Reaction.on_condition(lambda: True) == Success(None)

    failed = Reaction.on_condition(lambda: False)
    _, failure = failed
    assert isinstance(failure, InvalidStateError)


def test_on_condition_captures_raised_failure(boom: Boom) -> None:
    assert Reaction.on_condition(lambda: bool(raise_(boom))) == Error(boom)


def test_from_optional() -> None:
    assert Reaction.from_optional(0) == Success(0)

    missing = Reaction.from_optional(None, error=lambda: KeyError("user"))
    _, failure = missing
    assert isinstance(failure, KeyError)

    _, default_failure = Reaction.from_optional(None)
    assert isinstance(default_failure, InvalidStateError)


def test_catching_only_listed_types() -> None:
    assert Reaction.catching(lambda: int("12"), ValueError) == Success(12)
    assert Reaction.catching(lambda: int("x"), ValueError).is_error()

    with pytest.raises(KeyError):
        Reaction.catching(lambda: {}["missing"], ValueError)


def test_catching_defaults_to_any_exception(boom: Boom) -> None:
    assert Reaction.catching(lambda: raise_(boom)) == Error(boom)


def test_reaction_base_is_not_constructible() -> None:
    with pytest.raises(TypeError):
        Reaction()


def test_structural_equality_and_hash(boom: Boom) -> None:
    assert Success(1) == Success(1)
    assert hash(Success("a")) == hash(Success("a"))
    assert Success(1) != Success(2)
    assert Error(boom) == Error(boom)
    assert Error(boom) != Error(Boom("boom"))
    assert Success(None) != Error(boom)


def test_destructuring(boom: Boom) -> None:
    value, failure = Success(3)
    assert (value, failure) == (3, None)

    value, failure = Error(boom)
    assert value is None
    assert failure is boom


def test_pattern_matching(boom: Boom) -> None:
    match Reaction.on(lambda: raise_(boom)):
        case Success(_):
            pytest.fail("expected Error")
        case Error(failure):
            assert failure is boom


def test_repr(boom: Boom) -> None:
    assert repr(Success("x")) == "Success('x')"
    assert repr(Error(boom)) == f"Error({boom!r})"


def test_on_does_not_await_coroutine_functions() -> None:
    async def fetch() -> int:
        return 1

    result = Reaction.on(fetch)

    coroutine = result.get()
    assert result.is_success()
    assert asyncio.iscoroutine(coroutine)
    coroutine.close()
