"""
tests/conftest.py
=================
Shared fixtures: scripted randomness sources and a log-silent engine.
"""
from typing import Iterable

import pytest

from shared.config import GuardConfig
from shared.logger import GuardLogger

from passguard.core.engine import GuardEngine
from passguard.generators.random_source import SeededRandomSource


class ScriptedRandomSource:
    """Replays a fixed list of indexes; fails loudly when one is out of range."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randbelow(self, n: int) -> int:
        if not self._values:
            raise AssertionError("scripted random source exhausted")
        value = self._values.pop(0)
        assert 0 <= value < n, f"scripted value {value} out of range [0, {n})"
        self.calls.append(n)
        return value


class ConstantRandomSource:
    """Always returns 0: every draw picks the first character of its pool."""

    def randbelow(self, n: int) -> int:
        return 0


# Class picks (A, a, 0, @), eight fill picks from the combined pool
# (B c 1 # D e 3 %), then an identity Fisher-Yates shuffle.
IDENTITY_SCRIPT = [0, 0, 0, 0, 1, 28, 53, 63, 3, 30, 55, 65] + list(range(11, 0, -1))
IDENTITY_PASSWORD = "Aa0@Bc1#De3%"


@pytest.fixture
def identity_source():
    return ScriptedRandomSource(IDENTITY_SCRIPT)


@pytest.fixture
def quiet_logger():
    return GuardLogger("tests", console_output=False)


@pytest.fixture
def config():
    return GuardConfig()


@pytest.fixture
def engine(config, quiet_logger):
    return GuardEngine(config, source=SeededRandomSource(1234), logger=quiet_logger)
