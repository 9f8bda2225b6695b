"""
PassGuard Report Generator
===========================

Generates JSON and HTML reports from PassGuard check results.

The JSON report is machine-readable and suitable for CI pipelines or for
handing to a UI that renders messages itself. The HTML report uses inline
CSS so the file is self-contained.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import CheckResult

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>PassGuard Report - {title}</title>
    <style>
        body {{
            font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: #0d1117; color: #c9d1d9; padding: 2rem; line-height: 1.5;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        h1 {{ color: #58a6ff; }}
        .meta {{ color: #8b949e; font-size: 0.9rem; }}
        .status-passed {{ color: #3fb950; }}
        .status-failed {{ color: #f85149; }}
        .finding {{
            border: 1px solid #30363d; border-left-width: 4px;
            border-radius: 4px; padding: 0.75rem 1rem; margin: 0.75rem 0;
            background: #161b22;
        }}
        .severity-high {{ border-left-color: #f85149; }}
        .severity-medium {{ border-left-color: #d29922; }}
        .severity-low {{ border-left-color: #58a6ff; }}
        .severity-info {{ border-left-color: #8b949e; }}
        .badge {{ font-size: 0.75rem; font-weight: bold; margin-right: 0.5rem; }}
        pre {{ background: #21262d; padding: 1rem; border-radius: 4px; overflow-x: auto; }}
    </style>
</head>
<body>
<div class="container">
    <h1>{title}</h1>
    <p class="meta">Check: {check} | Target: {target} | Generated: {timestamp}</p>
    <h2 class="{status_class}">{status}</h2>
    <p>{summary}</p>
    <h2>Findings ({finding_count})</h2>
    {findings_html}
    <h2>Details</h2>
    <pre>{details}</pre>
</div>
</body>
</html>
"""


class GuardReportGenerator:
    """Writes :class:`CheckResult` objects as JSON or HTML files.

    Usage::

        reporter = GuardReportGenerator()
        reporter.generate_json(result, Path("signup.json"))
        reporter.generate_html(result, Path("signup.html"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def to_dict(self, result: CheckResult) -> dict[str, Any]:
        """Build the JSON report payload for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "check": result.check,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "passed": result.passed,
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                finding.model_dump(mode="json") for finding in result.findings
            ],
            "metadata": result.metadata,
        }

    def render_json(self, result: CheckResult) -> str:
        return json.dumps(
            self.to_dict(result), indent=2, ensure_ascii=False, default=str
        )

    def generate_json(self, result: CheckResult, output_path: Path) -> Path:
        """Write the JSON report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    def render_html(self, result: CheckResult, title: Optional[str] = None) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        return _HTML_TEMPLATE.format(
            title=html.escape(title or f"{result.check.title()} check"),
            check=html.escape(result.check),
            target=html.escape(result.target),
            timestamp=timestamp,
            status="Passed" if result.passed else "Failed",
            status_class="status-passed" if result.passed else "status-failed",
            summary=html.escape(result.summary),
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            details=html.escape(
                json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
            ),
        )

    def generate_html(
        self,
        result: CheckResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write the HTML report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_html(result, title), encoding="utf-8")
        return output_path

    @staticmethod
    def _build_findings_html(result: CheckResult) -> str:
        if not result.findings:
            return "<p class=\"meta\">No findings.</p>"

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f'<span class="badge">{finding.severity.value}</span>'
                f"<strong>{html.escape(finding.title)}</strong>"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><em>Recommendation:</em> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            parts.append("</div>")
        return "\n".join(parts)
