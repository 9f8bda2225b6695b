"""
PassGuard Validators
=====================

Declarative field rules and the form validator built on them.
"""

from passguard.validators.forms import (
    LOGIN_SCHEMA,
    REGISTRATION_SCHEMA,
    FieldValidator,
    parse_form,
)
from passguard.validators.rules import (
    CrossFieldRule,
    FieldRule,
    FieldSchema,
    FormSchema,
    run_schema,
)

__all__ = [
    "CrossFieldRule",
    "FieldRule",
    "FieldSchema",
    "FieldValidator",
    "FormSchema",
    "LOGIN_SCHEMA",
    "REGISTRATION_SCHEMA",
    "parse_form",
    "run_schema",
]
