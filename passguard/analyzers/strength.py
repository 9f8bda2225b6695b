"""
Password Strength Classifier
=============================

Snaps a password to one of three tiers (weak, medium, strong) using an
ordered decision list. The first rule that matches wins:

1. Empty password                                          -> weak
2. Repeated characters or repeated two-character sequences -> weak
3. Password embeds the display name (case-insensitive,
   whitespace removed from the name)                       -> weak
4. (count digits and special characters)
5. Length 13-15                                            -> strong
6. Length 9-12 with at most 3 digits and 2 specials        -> medium
7. Length 8-15 covering upper, lower, digit and special    -> medium
8. Anything else                                           -> weak

This is a heuristic scoring policy, not an entropy estimate. Length
dominates near the upper bound (rule 5); mid-length passwords only reach
medium when they are not overloaded with digits and symbols (rule 6) or
when they cover every character class (rule 7). A 9-12 character
password that exceeds rule 6's caps falls through to rule 7 rather than
failing outright.

The classifier accepts any string, including ones the field validator
would reject, and never raises on them.
"""

from __future__ import annotations

import re

from passguard.analyzers.patterns import PatternDetector
from passguard.core.constants import (
    DIGITS,
    LOWERCASE,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    SPECIAL_CHARACTERS,
    UPPERCASE,
)
from passguard.core.models import StrengthAssessment, StrengthTier

_STRONG_MIN_LENGTH = 13
_MEDIUM_MIN_LENGTH = 9
_MEDIUM_MAX_LENGTH = 12
_MEDIUM_MAX_DIGITS = 3
_MEDIUM_MAX_SPECIALS = 2

_REASONS: dict[int, str] = {
    1: "Password is empty",
    2: "Password contains repeated characters or sequences",
    3: "Password contains your name",
    5: "Password is 13 to 15 characters long",
    6: "Password is 9 to 12 characters with few digits and symbols",
    7: "Password covers every character class",
    8: "Password does not meet the medium criteria",
}


def normalize_name(full_name: str) -> str:
    """Lower-case *full_name* and remove every whitespace character."""
    return re.sub(r"\s", "", full_name.lower())


class StrengthClassifier:
    """Classifies passwords into :class:`StrengthTier` values.

    Usage::

        classifier = StrengthClassifier()
        classifier.classify("Abcdefgh12!@", "John Doe")   # StrengthTier.MEDIUM
        classifier.assess("johndoe123!A", "John Doe").rule  # 3
    """

    def __init__(self, detector: PatternDetector | None = None) -> None:
        self._detector = detector or PatternDetector()

    def classify(self, password: str, full_name: str = "") -> StrengthTier:
        return self.assess(password, full_name).tier

    def assess(self, password: str, full_name: str = "") -> StrengthAssessment:
        """Run the decision list and keep the evidence that decided it.

        Args:
            password: Candidate password, in any state of validity.
            full_name: Display name typed into the same form; may be empty.

        Returns:
            StrengthAssessment with the tier and the number of the
            deciding rule.
        """
        if not password:
            return self._verdict(StrengthAssessment(), StrengthTier.WEAK, 1)

        assessment = StrengthAssessment(
            length=len(password),
            digit_count=sum(1 for c in password if c in DIGITS),
            special_count=sum(1 for c in password if c in SPECIAL_CHARACTERS),
            has_uppercase=any(c in UPPERCASE for c in password),
            has_lowercase=any(c in LOWERCASE for c in password),
            patterns=self._detector.find_repeated_patterns(password),
        )
        assessment.has_digit = assessment.digit_count > 0
        assessment.has_special = assessment.special_count > 0

        if assessment.patterns:
            return self._verdict(assessment, StrengthTier.WEAK, 2)

        # Gated on the raw name: a whitespace-only name normalizes to "",
        # which every password contains.
        if full_name and normalize_name(full_name) in password.lower():
            assessment.contains_name = True
            return self._verdict(assessment, StrengthTier.WEAK, 3)

        length = assessment.length
        if _STRONG_MIN_LENGTH <= length <= PASSWORD_MAX_LENGTH:
            return self._verdict(assessment, StrengthTier.STRONG, 5)

        if (
            _MEDIUM_MIN_LENGTH <= length <= _MEDIUM_MAX_LENGTH
            and assessment.digit_count <= _MEDIUM_MAX_DIGITS
            and assessment.special_count <= _MEDIUM_MAX_SPECIALS
        ):
            return self._verdict(assessment, StrengthTier.MEDIUM, 6)

        if PASSWORD_MIN_LENGTH <= length <= PASSWORD_MAX_LENGTH and all(
            (
                assessment.has_uppercase,
                assessment.has_lowercase,
                assessment.has_digit,
                assessment.has_special,
            )
        ):
            return self._verdict(assessment, StrengthTier.MEDIUM, 7)

        return self._verdict(assessment, StrengthTier.WEAK, 8)

    @staticmethod
    def _verdict(
        assessment: StrengthAssessment, tier: StrengthTier, rule: int
    ) -> StrengthAssessment:
        assessment.tier = tier
        assessment.rule = rule
        assessment.reason = _REASONS[rule]
        return assessment
