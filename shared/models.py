"""
PassGuard Result Models
========================

Pydantic v2 models shared by every PassGuard command. A
:class:`CheckResult` is the envelope the engine returns for a validation,
strength assessment, or generation request; it bundles the findings, a
summary line, and the raw component output under ``metadata`` so the
console and report layers never have to know which component ran.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        HIGH:   The input is rejected (a field failed validation).
        MEDIUM: The input is accepted but weak.
        LOW:    The input is acceptable with room for improvement.
        INFO:   Informational observation.
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """Return a CSS class name for severity-based styling."""
        return f"severity-{self.value.lower()}"


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by a PassGuard check.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        field:          Form field the finding is attached to, if any.
        evidence:       Data supporting the finding (never a raw password).
        recommendation: Suggested corrective action.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    field: Optional[str] = Field(default=None, description="Form field name")
    evidence: str = Field(default="")
    recommendation: str = Field(default="")

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class CheckResult(BaseModel):
    """Aggregated result of a single engine call.

    Attributes:
        check:      Name of the check that ran (``signup``, ``strength`` ...).
        target:     Masked description of what was checked.
        passed:     Whether the input was accepted.
        start_time: UTC timestamp when the check started.
        end_time:   UTC timestamp when the check ended.
        findings:   Individual findings.
        summary:    Human-readable summary line.
        metadata:   Raw component output (validation outcome, assessment...).
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    check: str = Field(..., min_length=1)
    target: str = Field(default="")
    passed: bool = True
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity name."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> CheckResult:
        """Mark the check as complete by setting *end_time* and *summary*.

        If *summary* is ``None`` a default is generated from severity counts.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [
                f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt
            ]
            self.summary = (
                f"{'Passed' if self.passed else 'Failed'}. "
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
