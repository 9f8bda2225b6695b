"""
Tests for the Rich console renderers.
"""
import pytest

from shared.config import DisplayConfig
from shared.console import GuardConsole

from passguard.output.console import GuardConsoleOutput


@pytest.fixture
def recorded():
    console = GuardConsole(record=True)
    console.rich.width = 120
    return console


class TestDisplayResult:
    def test_strength_meter(self, engine, recorded):
        GuardConsoleOutput(recorded).display_result(
            engine.assess_password("Abcdefghijklm1!")
        )
        text = recorded.export_text()
        assert "Password strength: strong" in text
        assert "Rule 5" not in text

    def test_rule_line(self, engine, recorded):
        display = GuardConsoleOutput(recorded, DisplayConfig(show_rules=True))
        display.display_result(engine.assess_password("Short1!"))
        text = recorded.export_text()
        assert "Password strength: weak" in text
        assert "Rule 8" in text

    def test_validation_errors(self, engine, recorded):
        GuardConsoleOutput(recorded).display_result(
            engine.validate_login({"email": "", "password": "abc"})
        )
        text = recorded.export_text()
        assert "Email is required" in text
        assert "Password must be at least 8 characters" in text

    def test_valid_form(self, engine, recorded):
        GuardConsoleOutput(recorded).display_result(
            engine.validate_login({"email": "jane@example.com", "password": "abcdefgh"})
        )
        assert "All fields are valid" in recorded.export_text()

    def test_suggestions(self, engine, recorded):
        result = engine.suggest_passwords(count=2)
        GuardConsoleOutput(recorded).display_result(result)
        text = recorded.export_text()
        for suggestion in result.metadata["suggestions"]:
            assert suggestion["password"] in text


class TestGuardConsole:
    def test_quiet_records_nothing(self):
        console = GuardConsole(quiet=True, record=True)
        console.banner("1.0.0")
        console.error("boom")
        assert console.export_text() == ""

    def test_banner_shows_version(self, recorded):
        recorded.banner("9.9.9")
        assert "Version: 9.9.9" in recorded.export_text()

    def test_empty_findings_table(self, recorded):
        recorded.findings_table([])
        assert recorded.export_text() == ""
