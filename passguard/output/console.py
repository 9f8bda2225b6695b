"""
PassGuard Console Output
=========================

Rich-based renderers for PassGuard results: the three-step strength
meter shown under a password field, the validation error table, and the
generated password panel.

Uses the shared console infrastructure for consistent styling.
"""

from __future__ import annotations

from typing import Any, Mapping

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.config import DisplayConfig
from shared.console import GuardConsole
from shared.models import CheckResult, Severity

from passguard.core.models import StrengthAssessment, StrengthTier, ValidationOutcome

_TIER_COLOURS: dict[str, str] = {
    "weak": "bold red",
    "medium": "bold yellow",
    "strong": "bold green",
}

_METER_WIDTH = 30


class GuardConsoleOutput:
    """Console renderers for PassGuard results.

    Usage::

        display = GuardConsoleOutput(GuardConsole())
        display.display_strength(assessment)
    """

    def __init__(
        self,
        console: GuardConsole | None = None,
        display: DisplayConfig | None = None,
    ) -> None:
        self.console = console or GuardConsole()
        self.settings = display or DisplayConfig()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength meter
    # ------------------------------------------------------------------ #

    def display_strength(self, assessment: StrengthAssessment) -> None:
        """Render the strength meter for *assessment*."""
        tier = assessment.tier
        colour = _TIER_COLOURS[tier.value]
        segments = len(StrengthTier)
        filled = _METER_WIDTH * (tier.rank + 1) // segments

        meter = Text()
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour.replace("bold ", ""))
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]  ", style="dim")
        meter.append("Password strength: ")
        meter.append(tier.value, style=colour)

        if self.settings.show_rules:
            meter.append(f"\nRule {assessment.rule}: {assessment.reason}", style="dim")

        self._rich.print(Panel(meter, title="Strength", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Length", str(assessment.length))
        tbl.add_row("Digits", str(assessment.digit_count))
        tbl.add_row("Special characters", str(assessment.special_count))
        tbl.add_row("Character classes", self._classes(assessment))
        tbl.add_row("Repeated patterns", "Yes" if assessment.patterns else "No")
        tbl.add_row("Contains name", "Yes" if assessment.contains_name else "No")
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Validation errors
    # ------------------------------------------------------------------ #

    def display_validation(self, outcome: ValidationOutcome) -> None:
        """Render field errors, first message highlighted as the UI shows it."""
        if outcome.is_valid:
            self.console.success("All fields are valid")
            return

        tbl = Table(
            title="Validation Errors",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Field", style="bold")
        tbl.add_column("Message")
        tbl.add_column("Also failing", style="dim")

        for field_name, messages in outcome.errors.items():
            tbl.add_row(
                field_name,
                f"[bold red]{messages[0]}[/bold red]",
                "\n".join(messages[1:]),
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Generated passwords
    # ------------------------------------------------------------------ #

    def display_suggestions(self, suggestions: list[Mapping[str, Any]]) -> None:
        """Render generated passwords with their tiers."""
        body = Text()
        for idx, suggestion in enumerate(suggestions):
            if idx:
                body.append("\n")
            tier = suggestion["tier"]
            body.append(suggestion["password"], style="bold bright_white")
            body.append("   ")
            body.append(tier, style=_TIER_COLOURS.get(tier, "white"))
        self._rich.print(
            Panel(body, title="Generated Password", border_style="green")
        )

    # ------------------------------------------------------------------ #
    #  Dispatch
    # ------------------------------------------------------------------ #

    def display_result(self, result: CheckResult) -> None:
        """Render whichever component output *result* carries."""
        self.console.section(result.check.title())
        raw = result.metadata

        if "validation" in raw:
            self.display_validation(ValidationOutcome(**raw["validation"]))
        if "strength" in raw:
            self.display_strength(StrengthAssessment(**raw["strength"]))
        if "suggestions" in raw:
            self.display_suggestions(raw["suggestions"])

        self.console.findings_table(
            [f for f in result.findings if f.severity is not Severity.INFO]
        )
        if result.passed:
            self.console.info(result.summary)
        else:
            self.console.warning(result.summary)

    @staticmethod
    def _classes(assessment: StrengthAssessment) -> str:
        present = [
            label
            for label, flag in (
                ("upper", assessment.has_uppercase),
                ("lower", assessment.has_lowercase),
                ("digit", assessment.has_digit),
                ("special", assessment.has_special),
            )
            if flag
        ]
        return ", ".join(present) or "none"
