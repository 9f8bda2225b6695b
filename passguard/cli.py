"""
PassGuard CLI
==============

Click-based command-line interface for the PassGuard credential toolkit.
Provides subcommands for sign-up and sign-in form validation, password
strength assessment, and random password generation.

Usage::

    python -m passguard signup --full-name "Jane Doe" --email jane@example.com
    python -m passguard login --email jane@example.com --remember-me
    python -m passguard strength "Abcdefgh12!@" --name "John Doe"
    python -m passguard generate --count 3

Password options are prompted with hidden input when omitted.
Validation commands exit with status 1 when the form is rejected.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import GuardConfig
from shared.console import GuardConsole
from shared.models import CheckResult

from passguard import __version__
from passguard.core.engine import GuardEngine
from passguard.generators.random_source import SeededRandomSource
from passguard.output.console import GuardConsoleOutput
from passguard.output.report import GuardReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassGuard configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="passguard")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """PassGuard -- credential validation and password strength toolkit.

    Validate sign-up and sign-in forms, rate password strength, and
    generate passwords that satisfy the sign-up policy.
    """
    ctx.ensure_object(dict)

    guard_config = GuardConfig.load(config)
    ctx.obj["config"] = guard_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = GuardConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = GuardEngine(guard_config)
    ctx.obj["display"] = GuardConsoleOutput(console, guard_config.display)
    ctx.obj["reporter"] = GuardReportGenerator(version=__version__)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: CheckResult) -> None:
    """Render *result* in the format selected on the command group."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: GuardReportGenerator = ctx.obj["reporter"]
    console: GuardConsole = ctx.obj["console"]

    if output_format == "console":
        display: GuardConsoleOutput = ctx.obj["display"]
        display.display_result(result)
    elif output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
    else:
        config: GuardConfig = ctx.obj["config"]
        default_path = Path(config.global_settings.output_dir) / (
            f"passguard_{result.check}.html"
        )
        path = reporter.generate_html(
            result, Path(output_file) if output_file else default_path
        )
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option("--full-name", "-n", default="", help="Full name as typed.")
@click.option("--email", "-e", default="", help="Email address.")
@click.option(
    "--password", "-p",
    prompt=True, hide_input=True, default="", show_default=False,
    help="Password (prompted when omitted).",
)
@click.option(
    "--confirm-password",
    prompt="Confirm password", hide_input=True, default="", show_default=False,
    help="Password confirmation (prompted when omitted).",
)
@click.pass_context
def signup(
    ctx: click.Context,
    full_name: str,
    email: str,
    password: str,
    confirm_password: str,
) -> None:
    """Validate a sign-up form and rate its password."""
    engine: GuardEngine = ctx.obj["engine"]
    result = engine.validate_registration({
        "fullName": full_name,
        "email": email,
        "password": password,
        "confirmPassword": confirm_password,
    })
    _handle_output(ctx, result)
    if not result.passed:
        ctx.exit(1)


@cli.command()
@click.option("--email", "-e", default="", help="Email address.")
@click.option(
    "--password", "-p",
    prompt=True, hide_input=True, default="", show_default=False,
    help="Password (prompted when omitted).",
)
@click.option("--remember-me", is_flag=True, default=False, help="Keep me signed in.")
@click.pass_context
def login(ctx: click.Context, email: str, password: str, remember_me: bool) -> None:
    """Validate a sign-in form."""
    engine: GuardEngine = ctx.obj["engine"]
    result = engine.validate_login({
        "email": email,
        "password": password,
        "rememberMe": remember_me,
    })
    _handle_output(ctx, result)
    if not result.passed:
        ctx.exit(1)


@cli.command()
@click.argument("password")
@click.option("--name", "-n", "full_name", default="", help="Account holder's full name.")
@click.pass_context
def strength(ctx: click.Context, password: str, full_name: str) -> None:
    """Rate the strength of PASSWORD as weak, medium or strong."""
    engine: GuardEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.assess_password(password, full_name))


@cli.command()
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of passwords to generate (default from config).",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible output. Never use seeded passwords for real accounts.",
)
@click.pass_context
def generate(ctx: click.Context, count: Optional[int], seed: Optional[int]) -> None:
    """Generate passwords that satisfy the sign-up policy."""
    engine: GuardEngine = ctx.obj["engine"]
    if seed is not None:
        engine = GuardEngine(
            ctx.obj["config"],
            source=SeededRandomSource(seed),
            logger=engine.logger,
        )
    try:
        result = engine.suggest_passwords(count)
    except RuntimeError as exc:
        ctx.obj["console"].error(str(exc))
        ctx.exit(1)
    _handle_output(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassGuard CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
