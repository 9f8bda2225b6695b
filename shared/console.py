"""
PassGuard Console Interface
============================

Rich-powered console abstraction providing one presentation layer for
every PassGuard command.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, severity-coloured messages and tables,
all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_GUARD_THEME = Theme(
    {
        "guard.banner": "bold bright_cyan",
        "guard.section": "bold bright_magenta",
        "guard.success": "bold green",
        "guard.warning": "bold yellow",
        "guard.error": "bold red",
        "guard.info": "bold bright_blue",
        "guard.dim": "dim white",
        "guard.high": "bold red",
        "guard.medium": "bold yellow",
        "guard.low": "bold bright_cyan",
        "guard.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___               ___                  _
 | _ \__ _ ______  / __|_  _ __ _ _ _ __| |
 |  _/ _` (_-<_-< | (_ | || / _` | '_/ _` |
 |_| \__,_/__/__/  \___|\_,_\__,_|_| \__,_|
[/bright_cyan]"""

_TAGLINE = "Credential validation and password strength toolkit"


class GuardConsole:
    """Unified console interface for all PassGuard commands.

    Usage::

        con = GuardConsole()
        con.banner()
        con.section("Sign-up Validation")
        con.success("All fields are valid")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_GUARD_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassGuard ASCII-art banner."""
        subtitle = (
            f"[guard.info]{_TAGLINE}[/guard.info]\n"
            f"[guard.dim]Version: {version}[/guard.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="guard.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[guard.success][✔] SUCCESS:[/guard.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[guard.warning][⚠] WARNING:[/guard.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[guard.error][✘] ERROR:[/guard.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[guard.info][ℹ] INFO:[/guard.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Findings
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g., :class:`~shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "HIGH": "guard.high",
            "MEDIUM": "guard.medium",
            "LOW": "guard.low",
            "INFO": "guard.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = (
                f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            )
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
