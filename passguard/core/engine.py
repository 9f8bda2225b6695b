"""
PassGuard Engine
=================

Central orchestrator for the PassGuard credential toolkit. The
:class:`GuardEngine` wires the field validator, pattern detector,
strength classifier and password generator together and returns unified
:class:`~shared.models.CheckResult` objects for the CLI and report layers.

Architecture follows the Facade pattern (Gamma et al., 1994): callers that
only need one component can use it directly, everything user-facing goes
through the engine so that logging, masking and findings stay consistent.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from shared.config import GuardConfig
from shared.logger import GuardLogger
from shared.models import CheckResult, Finding, Severity

from passguard.analyzers.patterns import PatternDetector
from passguard.analyzers.strength import StrengthClassifier
from passguard.core.constants import (
    FIELD_CONFIRM_PASSWORD,
    FIELD_PASSWORD,
)
from passguard.core.models import (
    FormKind,
    LoginInput,
    PasswordSuggestion,
    RegistrationInput,
    StrengthAssessment,
    StrengthTier,
    ValidationOutcome,
)
from passguard.generators.password import PasswordGenerator
from passguard.generators.random_source import RandomSource, default_source
from passguard.validators.forms import FieldValidator, parse_form

_PASSWORD_FIELDS = (FIELD_PASSWORD, FIELD_CONFIRM_PASSWORD)

_FIELD_LABELS: dict[str, str] = {
    "fullName": "Full name",
    "email": "Email",
    "password": "Password",
    "confirmPassword": "Confirm password",
}

_FORM_MODELS: dict[FormKind, type] = {
    FormKind.REGISTRATION: RegistrationInput,
    FormKind.LOGIN: LoginInput,
}


def mask_password(password: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class GuardEngine:
    """Orchestrates validation, strength assessment and generation.

    Usage::

        engine = GuardEngine()
        result = engine.validate_registration({
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "password": "Abcdef12!@",
            "confirmPassword": "Abcdef12!@",
        })
        result = engine.assess_password("Abcdefgh12!@", "John Doe")
        result = engine.suggest_passwords(count=3)

    Attributes:
        config: PassGuard configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[GuardConfig] = None,
        *,
        source: Optional[RandomSource] = None,
        logger: Optional[GuardLogger] = None,
    ) -> None:
        self.config = config or GuardConfig()
        self.logger = logger or GuardLogger.from_config(
            "engine", self.config.global_settings
        )

        detector = PatternDetector()
        self.validator = FieldValidator()
        self.classifier = StrengthClassifier(detector)
        self.generator = PasswordGenerator(
            source or default_source(self.config.generator.seed),
            detector=detector,
            max_attempts=self.config.generator.max_attempts,
        )

    # ------------------------------------------------------------------ #
    #  Form Validation
    # ------------------------------------------------------------------ #

    def validate_registration(
        self, form: Union[RegistrationInput, Mapping[str, Any]]
    ) -> CheckResult:
        """Validate a sign-up form and rate its password.

        Args:
            form: A :class:`RegistrationInput` or a mapping keyed by the
                form's field names.

        Returns:
            CheckResult with one HIGH finding per failing field, plus a
            strength finding when a password was entered.

        Raises:
            TypeError: A field value has the wrong type.
        """
        form = self._coerce(FormKind.REGISTRATION, form)
        with self.logger.operation("validate_registration"):
            outcome = self.validator.validate(form)
            result = self._validation_result("signup", form.email.strip(), outcome)

            if form.password:
                assessment = self.classifier.assess(form.password, form.full_name)
                result.metadata["strength"] = self._assessment_dump(assessment)
                result.add_finding(self._strength_finding(assessment))

            self._log_outcome(outcome)
        return result.finalize(self._validation_summary(outcome))

    def validate_login(
        self, form: Union[LoginInput, Mapping[str, Any]]
    ) -> CheckResult:
        """Validate a sign-in form.

        Raises:
            TypeError: A field value has the wrong type.
        """
        form = self._coerce(FormKind.LOGIN, form)
        with self.logger.operation("validate_login"):
            outcome = self.validator.validate(form)
            result = self._validation_result("login", form.email.strip(), outcome)
            self._log_outcome(outcome)
        return result.finalize(self._validation_summary(outcome))

    def validate(self, form: Union[RegistrationInput, LoginInput]) -> ValidationOutcome:
        """Plain validation without the result envelope."""
        return self.validator.validate(form)

    # ------------------------------------------------------------------ #
    #  Strength Assessment
    # ------------------------------------------------------------------ #

    def classify(self, password: str, full_name: str = "") -> StrengthTier:
        """Tier only; the call the UI makes on every keystroke."""
        return self.classifier.classify(password, full_name)

    def assess_password(self, password: str, full_name: str = "") -> CheckResult:
        """Classify *password* and explain the verdict.

        Args:
            password: Password to rate.
            full_name: Display name entered alongside it, may be empty.

        Returns:
            CheckResult whose ``metadata`` holds the StrengthAssessment.
        """
        with self.logger.operation("assess_password"), self.logger.timed(
            "strength classification"
        ):
            assessment = self.classifier.assess(password, full_name)

        result = CheckResult(
            check="strength",
            target=self._display_password(password),
            passed=assessment.tier is not StrengthTier.WEAK,
            metadata={"strength": self._assessment_dump(assessment)},
        )
        result.add_finding(self._strength_finding(assessment))

        for pattern in assessment.patterns:
            where = f"position {pattern.position}"
            if pattern.repeat_position is not None:
                where += f" and again at {pattern.repeat_position}"
            result.add_finding(Finding(
                severity=Severity.LOW,
                title=f"Pattern Detected: {pattern.kind.replace('_', ' ')}",
                description=(
                    f"A {len(pattern.value)}-character repetition was found at "
                    f"{where}. Repeated sequences make a password easier to guess."
                ),
                field=FIELD_PASSWORD,
                recommendation="Avoid repeating characters or character pairs.",
            ))

        if assessment.contains_name:
            result.add_finding(Finding(
                severity=Severity.MEDIUM,
                title="Password Contains Name",
                description="The password includes the account holder's name.",
                field=FIELD_PASSWORD,
                recommendation="Do not use your name in your password.",
            ))

        self.logger.debug(
            "Password classified",
            tier=assessment.tier.value,
            rule=assessment.rule,
            length=assessment.length,
        )
        return result.finalize(
            f"Password strength: {assessment.tier.value} ({assessment.reason})"
        )

    # ------------------------------------------------------------------ #
    #  Password Generation
    # ------------------------------------------------------------------ #

    def generate_password(self) -> PasswordSuggestion:
        """One generated password, duplicated for the confirmation field."""
        password = self.generator.generate()
        return PasswordSuggestion(
            password=password,
            confirm_password=password,
            tier=self.classifier.classify(password),
        )

    def suggest_passwords(self, count: Optional[int] = None) -> CheckResult:
        """Generate *count* passwords (default from ``[generator] count``).

        Raises:
            ValueError: *count* is smaller than 1.
            RuntimeError: The randomness source is degenerate.
        """
        count = self.config.generator.count if count is None else count
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        with self.logger.operation("suggest_passwords"):
            try:
                suggestions = [self.generate_password() for _ in range(count)]
            except RuntimeError:
                self.logger.exception("Password generation failed")
                raise
            self.logger.info("Generated passwords", count=count)

        result = CheckResult(
            check="generate",
            target=f"{count} password(s)",
            metadata={"suggestions": [s.model_dump(mode="json") for s in suggestions]},
        )
        for suggestion in suggestions:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Generated Password",
                description=(
                    f"{len(suggestion.password)} characters, "
                    f"strength: {suggestion.tier.value}"
                ),
            ))
        return result.finalize(f"Generated {count} password(s)")

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce(kind: FormKind, form: Any) -> Any:
        model = _FORM_MODELS[kind]
        if isinstance(form, model):
            return form
        if isinstance(form, Mapping):
            return parse_form(kind, form)
        raise TypeError(
            f"Expected {model.__name__} or a mapping for a {kind.value} form, "
            f"got {type(form).__name__}"
        )

    def _validation_result(
        self, check: str, target: str, outcome: ValidationOutcome
    ) -> CheckResult:
        result = CheckResult(
            check=check,
            target=target or "[no email]",
            passed=outcome.is_valid,
            metadata={"validation": self._outcome_dump(outcome)},
        )
        for field_name, messages in outcome.errors.items():
            result.add_finding(Finding(
                severity=Severity.HIGH,
                title=f"Invalid {_FIELD_LABELS.get(field_name, field_name)}",
                description=messages[0],
                field=field_name,
                evidence=messages,
            ))
        return result

    def _outcome_dump(self, outcome: ValidationOutcome) -> dict[str, Any]:
        data = outcome.model_dump(mode="json")
        for name in _PASSWORD_FIELDS:
            if name in data["values"]:
                data["values"][name] = self._display_password(data["values"][name])
        return data

    def _assessment_dump(self, assessment: StrengthAssessment) -> dict[str, Any]:
        data = assessment.model_dump(mode="json")
        if self.config.display.mask_passwords:
            for pattern in data["patterns"]:
                pattern["value"] = "*" * len(pattern["value"])
        return data

    def _display_password(self, password: str) -> str:
        if self.config.display.mask_passwords:
            return mask_password(password)
        return password

    @staticmethod
    def _strength_finding(assessment: StrengthAssessment) -> Finding:
        severity = {
            StrengthTier.WEAK: Severity.MEDIUM,
            StrengthTier.MEDIUM: Severity.LOW,
            StrengthTier.STRONG: Severity.INFO,
        }[assessment.tier]
        return Finding(
            severity=severity,
            title=f"Password Strength: {assessment.tier.value.title()}",
            description=(
                f"{assessment.reason}. Length: {assessment.length}, "
                f"digits: {assessment.digit_count}, "
                f"special characters: {assessment.special_count}."
            ),
            field=FIELD_PASSWORD,
            evidence={"tier": assessment.tier.value, "rule": assessment.rule},
        )

    @staticmethod
    def _validation_summary(outcome: ValidationOutcome) -> str:
        if outcome.is_valid:
            return "All fields are valid"
        return f"{len(outcome.errors)} field(s) need attention: " + ", ".join(
            outcome.errors
        )

    def _log_outcome(self, outcome: ValidationOutcome) -> None:
        if outcome.is_valid:
            self.logger.info("Form accepted", form=outcome.form.value)
        else:
            self.logger.info(
                "Form rejected",
                form=outcome.form.value,
                fields=list(outcome.errors),
            )

