"""
Tests for the GuardEngine facade.
"""
import json

import pytest

from shared.config import GuardConfig
from shared.models import Severity

from passguard.core.engine import GuardEngine, mask_password
from passguard.core.models import LoginInput, RegistrationInput, StrengthTier
from passguard.generators.random_source import SeededRandomSource

from tests.conftest import ConstantRandomSource

VALID_SIGNUP = {
    "fullName": "Jane Doe",
    "email": "jane@example.com",
    "password": "Abcdef12!@",
    "confirmPassword": "Abcdef12!@",
}


class TestMaskPassword:
    @pytest.mark.parametrize(
        "password, expected",
        [("", ""), ("a", "*"), ("ab", "**"), ("abc", "a*c"), ("Abcdef12!@", "A********@")],
    )
    def test_mask(self, password, expected):
        assert mask_password(password) == expected


class TestValidateRegistration:
    def test_valid_form(self, engine):
        result = engine.validate_registration(VALID_SIGNUP)
        assert result.passed
        assert result.check == "signup"
        assert result.target == "jane@example.com"
        assert result.summary == "All fields are valid"
        assert result.end_time is not None
        assert result.metadata["strength"]["tier"] == "medium"

    def test_password_is_masked_in_metadata(self, engine):
        result = engine.validate_registration(VALID_SIGNUP)
        values = result.metadata["validation"]["values"]
        assert values["password"] == "A********@"
        assert values["confirmPassword"] == "A********@"

    def test_passwords_shown_when_masking_disabled(self, quiet_logger):
        config = GuardConfig()
        config.display.mask_passwords = False
        engine = GuardEngine(config, logger=quiet_logger)
        result = engine.validate_registration(VALID_SIGNUP)
        assert result.metadata["validation"]["values"]["password"] == "Abcdef12!@"

    def test_accepts_input_model(self, engine):
        form = RegistrationInput(
            full_name="Jane Doe",
            email="jane@example.com",
            password="Abcdef12!@",
            confirm_password="Abcdef12!#",
        )
        result = engine.validate_registration(form)
        assert not result.passed
        high = [f for f in result.findings if f.severity is Severity.HIGH]
        assert len(high) == 1
        assert high[0].field == "confirmPassword"
        assert high[0].description == "Passwords don't match"

    def test_invalid_form_findings(self, engine):
        result = engine.validate_registration({})
        assert not result.passed
        assert result.target == "[no email]"
        fields = [f.field for f in result.findings if f.severity is Severity.HIGH]
        assert fields == ["fullName", "email", "password", "confirmPassword"]
        assert "strength" not in result.metadata
        assert result.summary.startswith("4 field(s) need attention")

    def test_evidence_lists_every_message(self, engine):
        data = dict(VALID_SIGNUP, password="abcdefgh", confirmPassword="abcdefgh")
        result = engine.validate_registration(data)
        finding = next(f for f in result.findings if f.title == "Invalid Password")
        assert len(json.loads(finding.evidence)) == 3

    def test_wrong_type_raises(self, engine):
        with pytest.raises(TypeError):
            engine.validate_registration(dict(VALID_SIGNUP, email=42))
        with pytest.raises(TypeError):
            engine.validate_registration(["not", "a", "form"])


class TestValidateLogin:
    def test_valid_login(self, engine):
        result = engine.validate_login(
            {"email": "jane@example.com", "password": "abcdefgh", "rememberMe": True}
        )
        assert result.passed
        assert result.check == "login"
        assert result.metadata["validation"]["values"]["rememberMe"] is True

    def test_invalid_login(self, engine):
        result = engine.validate_login({"email": "nope", "password": "abcdefgh"})
        assert not result.passed
        assert result.findings[0].description == "Please enter a valid email address"

    def test_login_model(self, engine):
        result = engine.validate_login(
            LoginInput(email="jane@example.com", password="abcdefgh")
        )
        assert result.passed
        assert result.metadata["validation"]["form"] == "login"

    def test_registration_model_is_rejected(self, engine):
        form = RegistrationInput(
            full_name="Jane Doe",
            email="jane@example.com",
            password="Abcdef12@",
            confirm_password="Abcdef12@",
        )
        with pytest.raises(TypeError):
            engine.validate_login(form)

    def test_login_model_is_rejected_for_signup(self, engine):
        with pytest.raises(TypeError):
            engine.validate_registration(
                LoginInput(email="jane@example.com", password="abcdefgh")
            )


class TestAssessPassword:
    def test_medium(self, engine):
        result = engine.assess_password("Abcdefgh12!@", "John Doe")
        assert result.passed
        assert result.metadata["strength"]["tier"] == "medium"
        assert result.summary.startswith("Password strength: medium")
        assert result.target == "A**********@"

    def test_pattern_findings(self, engine):
        result = engine.assess_password("abcabc123XY!")
        assert not result.passed
        patterns = [f for f in result.findings if f.title.startswith("Pattern Detected")]
        assert len(patterns) == 1
        assert patterns[0].severity is Severity.LOW

    def test_pattern_values_are_masked(self, engine):
        result = engine.assess_password("abcabc123XY!")
        assert result.metadata["strength"]["patterns"][0]["value"] == "**"

    def test_name_finding(self, engine):
        result = engine.assess_password("johndoe123!A", "John Doe")
        titles = [f.title for f in result.findings]
        assert "Password Contains Name" in titles
        assert result.metadata["strength"]["rule"] == 3

    def test_strength_severity(self, engine):
        strong = engine.assess_password("Abcdefghijkl1")
        assert strong.findings[0].severity is Severity.INFO
        weak = engine.assess_password("")
        assert weak.findings[0].severity is Severity.MEDIUM

    def test_classify(self, engine):
        assert engine.classify("Abcdefgh12!@", "John Doe") is StrengthTier.MEDIUM


class TestSuggestPasswords:
    def test_default_count(self, engine):
        result = engine.suggest_passwords()
        assert len(result.metadata["suggestions"]) == 1

    def test_suggestions(self, engine):
        result = engine.suggest_passwords(count=3)
        suggestions = result.metadata["suggestions"]
        assert len(suggestions) == 3
        for suggestion in suggestions:
            assert suggestion["password"] == suggestion["confirm_password"]
            assert len(suggestion["password"]) == 12
            assert suggestion["tier"] in ("medium", "strong")
        assert result.summary == "Generated 3 password(s)"

    def test_generate_password(self, engine):
        suggestion = engine.generate_password()
        assert suggestion.tier > StrengthTier.WEAK
        assert suggestion.confirm_password == suggestion.password

    def test_count_must_be_positive(self, engine):
        with pytest.raises(ValueError):
            engine.suggest_passwords(count=0)

    def test_seed_from_config(self, quiet_logger):
        config = GuardConfig()
        config.generator.seed = 99
        first = GuardEngine(config, logger=quiet_logger).generate_password()
        second = GuardEngine(config, logger=quiet_logger).generate_password()
        assert first.password == second.password

    def test_explicit_source_wins(self, quiet_logger):
        a = GuardEngine(source=SeededRandomSource(5), logger=quiet_logger)
        b = GuardEngine(source=SeededRandomSource(5), logger=quiet_logger)
        assert a.generate_password() == b.generate_password()

    def test_degenerate_source_propagates(self, quiet_logger):
        config = GuardConfig()
        config.generator.max_attempts = 3
        engine = GuardEngine(config, source=ConstantRandomSource(), logger=quiet_logger)
        with pytest.raises(RuntimeError):
            engine.suggest_passwords()
