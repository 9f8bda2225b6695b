"""
Repeated Pattern Detector
==========================

Detects two low-entropy signatures in a password:

1. A single character repeated three or more times in a row
   (``aaa``, ``111``).
2. A two-character sequence that appears again at least two positions
   after its first occurrence (``abab``, ``xy12xy``).

Only pairs starting at indexes ``0 .. len - 4`` are used as the source of
the duplicate search; a later occurrence may sit anywhere after the
source, including the last two characters. A pair anchored in the final
three characters has no room for a non-overlapping repeat after it, so
the window loses no detections.
"""

from __future__ import annotations

import re

from passguard.core.models import PatternMatch

_REPEATED_CHAR = re.compile(r"(.)\1{2,}")


class PatternDetector:
    """Finds repeated characters and repeated two-character sequences.

    Usage::

        detector = PatternDetector()
        detector.has_repeated_patterns("aaab")     # True
        detector.has_repeated_patterns("abcdef")   # False
    """

    def has_repeated_patterns(self, password: str) -> bool:
        if _REPEATED_CHAR.search(password):
            return True
        return self._first_repeated_pair(password) is not None

    def find_repeated_patterns(self, password: str) -> list[PatternMatch]:
        """Return every repeated run plus the first repeated pair.

        The list is non-empty exactly when :meth:`has_repeated_patterns`
        is true.
        """
        matches = [
            PatternMatch(
                kind="repeated_char",
                value=match.group(),
                position=match.start(),
            )
            for match in _REPEATED_CHAR.finditer(password)
        ]

        pair = self._first_repeated_pair(password)
        if pair is not None:
            matches.append(pair)

        return matches

    @staticmethod
    def _first_repeated_pair(password: str) -> PatternMatch | None:
        for i in range(len(password) - 3):
            pair = password[i : i + 2]
            found = password.find(pair, i + 2)
            if found != -1:
                return PatternMatch(
                    kind="repeated_pair",
                    value=pair,
                    position=i,
                    repeat_position=found,
                )
        return None
