"""
Tests for JSON and HTML report generation.
"""
import json

import pytest

from shared.models import CheckResult, Finding, Severity

from passguard.output.report import GuardReportGenerator


@pytest.fixture
def result():
    result = CheckResult(check="signup", target="<jane>@example.com", passed=False)
    result.add_finding(Finding(
        severity=Severity.HIGH,
        title="Invalid Email",
        description="Please enter a valid email address",
        field="email",
        evidence=["Please enter a valid email address"],
        recommendation="Use <name>@<domain>",
    ))
    result.metadata["validation"] = {"errors": {"email": ["bad"]}}
    return result.finalize("1 field(s) need attention: email")


class TestJsonReport:
    def test_structure(self, result):
        data = GuardReportGenerator(version="9.9").to_dict(result)
        assert data["report_metadata"]["check"] == "signup"
        assert data["report_metadata"]["version"] == "9.9"
        assert data["summary"]["passed"] is False
        assert data["summary"]["total_findings"] == 1
        assert data["summary"]["severity_counts"]["HIGH"] == 1
        assert data["findings"][0]["field"] == "email"
        assert data["metadata"] == {"validation": {"errors": {"email": ["bad"]}}}

    def test_generate_json_creates_parents(self, result, tmp_path):
        path = GuardReportGenerator().generate_json(result, tmp_path / "a" / "r.json")
        assert json.loads(path.read_text(encoding="utf-8"))["summary"]["passed"] is False


class TestHtmlReport:
    def test_escapes_content(self, result):
        html = GuardReportGenerator().render_html(result)
        assert "&lt;jane&gt;@example.com" in html
        assert "&lt;name&gt;@&lt;domain&gt;" in html
        assert "<jane>" not in html
        assert "status-failed" in html

    def test_no_findings(self):
        empty = CheckResult(check="generate").finalize("Generated 1 password(s)")
        html = GuardReportGenerator().render_html(empty, title="Passwords")
        assert "No findings." in html
        assert "<title>PassGuard Report - Passwords</title>" in html

    def test_generate_html(self, result, tmp_path):
        path = GuardReportGenerator().generate_html(result, tmp_path / "r.html")
        assert "Invalid Email" in path.read_text(encoding="utf-8")
