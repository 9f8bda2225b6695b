"""
PassGuard Core Data Models
===========================

Pydantic models for the PassGuard credential engine: the raw form inputs
handed over by the UI, the validation outcome returned for them, and the
strength classification results.

Form inputs are *strict*: a non-string text field or a non-boolean
``rememberMe`` is a caller bug, not a validation failure, and is rejected
when the model is built. Field constraints (lengths, patterns) are not
expressed here; they belong to the rule sets in :mod:`passguard.validators`
so that every failure is reported as a message instead of an exception.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthTier(str, enum.Enum):
    """Coarse, non-cryptographic password quality classification.

    Tiers are totally ordered ``WEAK < MEDIUM < STRONG``.
    """

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_RANK: dict[StrengthTier, int] = {
    StrengthTier.WEAK: 0,
    StrengthTier.MEDIUM: 1,
    StrengthTier.STRONG: 2,
}


class FormKind(str, enum.Enum):
    """Which rule set applies to a form."""

    REGISTRATION = "registration"
    LOGIN = "login"


# ===================================================================== #
#  Form Inputs
# ===================================================================== #

_FORM_CONFIG = ConfigDict(
    strict=True,
    frozen=True,
    populate_by_name=True,
    extra="ignore",
)


class RegistrationInput(BaseModel):
    """Raw sign-up form values, untrimmed.

    Accepts both the snake_case attribute names and the camelCase field
    identifiers used by the UI (``fullName``, ``confirmPassword``).
    """

    model_config = _FORM_CONFIG

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    password: str = ""
    confirm_password: str = Field(default="", alias="confirmPassword")


class LoginInput(BaseModel):
    """Raw sign-in form values, untrimmed."""

    model_config = _FORM_CONFIG

    email: str = ""
    password: str = ""
    remember_me: bool = Field(default=False, alias="rememberMe")


# ===================================================================== #
#  Validation Outcome
# ===================================================================== #


class ValidationOutcome(BaseModel):
    """Result of validating one form.

    Exactly one of the two halves is meaningful: ``values`` holds the
    cleaned field values when ``errors`` is empty; otherwise ``errors``
    maps each failing field name to its ordered, non-empty message list.

    Attributes:
        form: Which rule set produced this outcome.
        values: Cleaned values keyed by field name (empty when invalid).
        errors: Field name to ordered error messages.
    """

    form: FormKind
    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def first_error(self, field_name: str) -> Optional[str]:
        """The message the UI shows under *field_name*, if any."""
        messages = self.errors.get(field_name)
        return messages[0] if messages else None

    def first_errors(self) -> dict[str, str]:
        """First message per failing field, in field order."""
        return {name: messages[0] for name, messages in self.errors.items()}


# ===================================================================== #
#  Strength Models
# ===================================================================== #


class PatternMatch(BaseModel):
    """A low-entropy structure found in a password.

    Attributes:
        kind: ``"repeated_char"`` or ``"repeated_pair"``.
        value: The repeated run or two-character sequence.
        position: Index where the source occurrence starts.
        repeat_position: Index of the later occurrence (pairs only).
    """

    kind: str
    value: str
    position: int = 0
    repeat_position: Optional[int] = None


class StrengthAssessment(BaseModel):
    """Classification of a password together with the evidence behind it.

    Attributes:
        tier: The strength tier.
        rule: Number of the decision rule that produced the tier (1-8).
        reason: One-line explanation of that rule.
        length: Password length.
        digit_count: Number of ASCII digits.
        special_count: Number of characters from the special set.
        has_uppercase / has_lowercase / has_digit / has_special: class coverage.
        contains_name: Whether the password embeds the display name.
        patterns: Repeated patterns that were detected.
    """

    tier: StrengthTier = StrengthTier.WEAK
    rule: int = 1
    reason: str = ""
    length: int = 0
    digit_count: int = 0
    special_count: int = 0
    has_uppercase: bool = False
    has_lowercase: bool = False
    has_digit: bool = False
    has_special: bool = False
    contains_name: bool = False
    patterns: list[PatternMatch] = Field(default_factory=list)


class PasswordSuggestion(BaseModel):
    """A generated password, ready to fill both password fields."""

    password: str
    confirm_password: str
    tier: StrengthTier
