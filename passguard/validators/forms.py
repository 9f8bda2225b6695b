"""
Registration and Login Field Validation
========================================

Rule sets for the sign-up and sign-in forms and the
:class:`FieldValidator` that applies them.

Sign-up passwords are checked strictly: length 8-15, at least one
uppercase letter, lowercase letter, digit and special character, and no
whitespace. Sign-in passwords only need the length band, since accounts
may predate the current policy. Validation failures are returned as
field-keyed messages; only a caller passing values of the wrong type
raises (:class:`TypeError`).
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, ValidationError

from passguard.core.constants import (
    DIGITS,
    EMAIL_PATTERN,
    FIELD_CONFIRM_PASSWORD,
    FIELD_EMAIL,
    FIELD_FULL_NAME,
    FIELD_PASSWORD,
    FIELD_REMEMBER_ME,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    FULL_NAME_PATTERN,
    LOWERCASE,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    SPECIAL_CHARACTERS,
    UPPERCASE,
    WHITESPACE_PATTERN,
)
from passguard.core.models import (
    FormKind,
    LoginInput,
    RegistrationInput,
    ValidationOutcome,
)
from passguard.validators.rules import (
    CrossFieldRule,
    FieldSchema,
    FormSchema,
    contains_any,
    excludes,
    matches,
    max_length,
    min_length,
    required,
    run_schema,
)

FormInput = Union[RegistrationInput, LoginInput]


# ===================================================================== #
#  Field Schemas
# ===================================================================== #

FULL_NAME_FIELD = FieldSchema(
    FIELD_FULL_NAME,
    rules=(
        required("Full name is required"),
        min_length(FULL_NAME_MIN_LENGTH, "Name must be at least 2 characters"),
        max_length(FULL_NAME_MAX_LENGTH, "Name must be less than 30 characters"),
        matches(
            "letters_only",
            FULL_NAME_PATTERN,
            "Name can only contain letters and spaces",
        ),
    ),
    strip=True,
)

EMAIL_FIELD = FieldSchema(
    FIELD_EMAIL,
    rules=(
        required("Email is required"),
        matches("email_format", EMAIL_PATTERN, "Please enter a valid email address"),
    ),
    strip=True,
)

_PASSWORD_PRESENCE = (
    required("Password is required"),
    min_length(PASSWORD_MIN_LENGTH, "Password must be at least 8 characters"),
    max_length(PASSWORD_MAX_LENGTH, "Password must be at most 15 characters"),
)

SIGNUP_PASSWORD_FIELD = FieldSchema(
    FIELD_PASSWORD,
    rules=_PASSWORD_PRESENCE
    + (
        contains_any(
            "uppercase",
            UPPERCASE,
            "Password must contain at least one uppercase letter",
        ),
        contains_any(
            "lowercase",
            LOWERCASE,
            "Password must contain at least one lowercase letter",
        ),
        contains_any("digit", DIGITS, "Password must contain at least one number"),
        contains_any(
            "special",
            SPECIAL_CHARACTERS,
            "Password must contain at least one special character",
        ),
        excludes("no_whitespace", WHITESPACE_PATTERN, "Password cannot contain spaces"),
    ),
)

LOGIN_PASSWORD_FIELD = FieldSchema(FIELD_PASSWORD, rules=_PASSWORD_PRESENCE)

CONFIRM_PASSWORD_FIELD = FieldSchema(
    FIELD_CONFIRM_PASSWORD,
    rules=(required("Please confirm your password"),),
)

PASSWORDS_MATCH = CrossFieldRule(
    "passwords_match",
    target=FIELD_CONFIRM_PASSWORD,
    message="Passwords don't match",
    check=lambda values: values[FIELD_PASSWORD] == values[FIELD_CONFIRM_PASSWORD],
)

REGISTRATION_SCHEMA = FormSchema(
    fields=(
        FULL_NAME_FIELD,
        EMAIL_FIELD,
        SIGNUP_PASSWORD_FIELD,
        CONFIRM_PASSWORD_FIELD,
    ),
    refinements=(PASSWORDS_MATCH,),
)

LOGIN_SCHEMA = FormSchema(fields=(EMAIL_FIELD, LOGIN_PASSWORD_FIELD))

_SCHEMAS: dict[FormKind, FormSchema] = {
    FormKind.REGISTRATION: REGISTRATION_SCHEMA,
    FormKind.LOGIN: LOGIN_SCHEMA,
}

_INPUT_MODELS: dict[FormKind, type[BaseModel]] = {
    FormKind.REGISTRATION: RegistrationInput,
    FormKind.LOGIN: LoginInput,
}


# ===================================================================== #
#  Validator
# ===================================================================== #


class FieldValidator:
    """Validates registration and login forms against their rule sets.

    The validator is stateless; one instance can serve any number of
    concurrent callers.

    Usage::

        validator = FieldValidator()
        outcome = validator.validate(RegistrationInput(
            full_name="Jane Doe",
            email="jane@example.com",
            password="Abcdef12!@",
            confirm_password="Abcdef12!#",
        ))
        outcome.first_error("confirmPassword")   # "Passwords don't match"
    """

    def validate(self, form: FormInput) -> ValidationOutcome:
        if isinstance(form, RegistrationInput):
            kind = FormKind.REGISTRATION
            raw: dict[str, Any] = {
                FIELD_FULL_NAME: form.full_name,
                FIELD_EMAIL: form.email,
                FIELD_PASSWORD: form.password,
                FIELD_CONFIRM_PASSWORD: form.confirm_password,
            }
        elif isinstance(form, LoginInput):
            kind = FormKind.LOGIN
            raw = {
                FIELD_EMAIL: form.email,
                FIELD_PASSWORD: form.password,
                FIELD_REMEMBER_ME: form.remember_me,
            }
        else:
            raise TypeError(
                f"Expected RegistrationInput or LoginInput, got {type(form).__name__}"
            )

        values, errors = run_schema(_SCHEMAS[kind], raw)
        if errors:
            return ValidationOutcome(form=kind, errors=errors)
        return ValidationOutcome(form=kind, values=values)

    def validate_data(
        self, kind: FormKind, data: Mapping[str, Any]
    ) -> ValidationOutcome:
        """Validate a raw mapping of field values for *kind*.

        Raises:
            TypeError: A field value has the wrong type.
        """
        return self.validate(parse_form(kind, data))

    @staticmethod
    def field_names(kind: FormKind) -> tuple[str, ...]:
        return _SCHEMAS[kind].field_names


def parse_form(kind: FormKind, data: Mapping[str, Any]) -> FormInput:
    """Build the strict input model for *kind* from a field mapping.

    Raises:
        TypeError: A field value has the wrong type. This is a caller bug
            and is never reported as a validation message.
    """
    model = _INPUT_MODELS[kind]
    try:
        return model.model_validate(dict(data))  # type: ignore[return-value]
    except ValidationError as exc:
        bad_fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise TypeError(
            f"Invalid {kind.value} form field types: {bad_fields}"
        ) from exc
