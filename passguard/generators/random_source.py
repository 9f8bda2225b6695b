"""
Randomness Sources
===================

The password generator never touches a global random generator; it asks
an injected :class:`RandomSource` for uniform indexes. Production wiring
uses :class:`SystemRandomSource` (operating-system entropy via
:mod:`secrets`); :class:`SeededRandomSource` gives reproducible output for
demos and tests.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Provider of uniformly random indexes."""

    def randbelow(self, n: int) -> int:
        """Return a uniformly random integer in ``[0, n)``."""
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by :func:`secrets.randbelow`."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource:
    """Deterministic source for reproducible sequences. Not for production."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self._rng.randrange(n)


def default_source(seed: int | None = None) -> RandomSource:
    """System entropy, or a seeded stream when *seed* is given."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
