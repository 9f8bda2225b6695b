"""
Random Password Generator
==========================

Produces 12-character passwords that satisfy the sign-up password rules
by construction:

1. draw one uppercase letter, one lowercase letter, one digit and one
   symbol, so every class is covered;
2. draw the remaining 8 characters uniformly from the union of the four
   pools;
3. apply a Fisher-Yates shuffle so the guaranteed characters do not sit
   at predictable positions.

A candidate that contains a repeated character run or a repeated
two-character sequence would classify as weak, so it is discarded and a
new one drawn. With a healthy randomness source that happens for well
under one candidate in a hundred.
"""

from __future__ import annotations

from passguard.analyzers.patterns import PatternDetector
from passguard.core.constants import (
    DIGITS,
    GENERATED_PASSWORD_LENGTH,
    GENERATOR_SPECIAL_CHARACTERS,
    LOWERCASE,
    UPPERCASE,
)
from passguard.generators.random_source import RandomSource, SystemRandomSource

_POOLS: tuple[str, ...] = (
    UPPERCASE,
    LOWERCASE,
    DIGITS,
    GENERATOR_SPECIAL_CHARACTERS,
)
_ALL_CHARACTERS = "".join(_POOLS)


class PasswordGenerator:
    """Generates policy-compliant random passwords.

    Usage::

        generator = PasswordGenerator()
        password = generator.generate()

    Args:
        source: Randomness provider; defaults to OS entropy.
        detector: Pattern detector used to reject weak candidates.
        max_attempts: Candidates drawn before giving up. Only a degenerate
            source (one that keeps returning the same index) gets there.
    """

    length: int = GENERATED_PASSWORD_LENGTH

    def __init__(
        self,
        source: RandomSource | None = None,
        *,
        detector: PatternDetector | None = None,
        max_attempts: int = 64,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._source = source or SystemRandomSource()
        self._detector = detector or PatternDetector()
        self._max_attempts = max_attempts

    def generate(self) -> str:
        """Return a fresh 12-character password.

        Raises:
            RuntimeError: ``max_attempts`` candidates in a row contained a
                repeated pattern.
        """
        for _ in range(self._max_attempts):
            candidate = self._candidate()
            if not self._detector.has_repeated_patterns(candidate):
                return candidate
        raise RuntimeError(
            f"No pattern-free password after {self._max_attempts} attempts; "
            "the randomness source is not producing uniform values"
        )

    def _candidate(self) -> str:
        chars = [self._choice(pool) for pool in _POOLS]
        while len(chars) < self.length:
            chars.append(self._choice(_ALL_CHARACTERS))
        self._shuffle(chars)
        return "".join(chars)

    def _choice(self, pool: str) -> str:
        return pool[self._source.randbelow(len(pool))]

    def _shuffle(self, chars: list[str]) -> None:
        """In-place Fisher-Yates shuffle; every permutation is equally likely."""
        for i in range(len(chars) - 1, 0, -1):
            j = self._source.randbelow(i + 1)
            chars[i], chars[j] = chars[j], chars[i]
