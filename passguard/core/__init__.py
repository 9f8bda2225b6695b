"""
PassGuard Core Module
======================

Policy constants, data models and the engine that orchestrates the
validation, strength and generation components.
"""

from passguard.core.engine import GuardEngine, mask_password
from passguard.core.models import (
    FormKind,
    LoginInput,
    PasswordSuggestion,
    PatternMatch,
    RegistrationInput,
    StrengthAssessment,
    StrengthTier,
    ValidationOutcome,
)

__all__ = [
    "FormKind",
    "GuardEngine",
    "LoginInput",
    "PasswordSuggestion",
    "PatternMatch",
    "RegistrationInput",
    "StrengthAssessment",
    "StrengthTier",
    "ValidationOutcome",
    "mask_password",
]
