"""Pytest fixtures for reaction tests."""

from __future__ import annotations

import pytest

from tests.helpers import Boom, Recorder


@pytest.fixture
def boom() -> Boom:
    return Boom("boom")


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
