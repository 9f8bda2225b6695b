"""
PassGuard Policy Constants
===========================

Single source of truth for the credential policy shared by the field
validator, the strength classifier, and the password generator.
"""

from __future__ import annotations

import re
import string

# Characters that satisfy the "special character" class.
SPECIAL_CHARACTERS: str = "@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

# Symbols the generator draws from. Must stay a subset of SPECIAL_CHARACTERS.
GENERATOR_SPECIAL_CHARACTERS: str = "@#$%^&*()_+-=[]{}"

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits

# local-part "@" domain, with at least one dot in the domain
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

FULL_NAME_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z ]+")
WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s")

FULL_NAME_MIN_LENGTH: int = 2
FULL_NAME_MAX_LENGTH: int = 30

PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_LENGTH: int = 15

GENERATED_PASSWORD_LENGTH: int = 12

# Form field identifiers, as supplied by the UI collaborator.
FIELD_FULL_NAME = "fullName"
FIELD_EMAIL = "email"
FIELD_PASSWORD = "password"
FIELD_CONFIRM_PASSWORD = "confirmPassword"
FIELD_REMEMBER_ME = "rememberMe"
