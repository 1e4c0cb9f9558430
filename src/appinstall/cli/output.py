"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr. machine_output() is for
structured data and goes to stdout, so `--json` output can be piped.
"""

import click
from rich.panel import Panel
from rich.text import Text

from appinstall.core.events import EventKind
from appinstall.core.report import FinalStatus, InstallOutcome, OutcomeStatus


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a message intended for a person (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write structured output intended for another program (stdout)."""
    click.echo(message, nl=nl)


_STATUS_LINES: dict[OutcomeStatus, tuple[str, str]] = {
    OutcomeStatus.INSTALLED: ("✅ Status: Installed", "green"),
    OutcomeStatus.ALREADY_CURRENT: ("✅ Status: Already current", "green"),
    OutcomeStatus.NOT_FOUND: ("❌ Status: Source package or version not found", "red"),
    OutcomeStatus.UPGRADE_FAILED: ("❌ Status: Install failed", "red"),
}


def format_install_summary(outcome: InstallOutcome) -> Panel:
    """Format the final summary box for an install run.

    Example:
        >>> panel = format_install_summary(outcome)
        >>> Console(stderr=True).print(panel)
    """
    status_text, status_style = _STATUS_LINES[outcome.status]
    lines: list[Text] = [Text(status_text, style=status_style)]

    if outcome.source_version is not None:
        lines.append(Text(f"📦 Source version: {outcome.source_version}"))
    if outcome.installed_version is not None:
        lines.append(Text(f"📂 Installed version: {outcome.installed_version}"))

    restart = "yes" if outcome.restart_performed else "no"
    lines.append(Text(f"🔄 Service restart attempted: {restart}"))

    if outcome.warnings_count:
        lines.append(Text(f"⚠️  Warnings: {outcome.warnings_count}", style="yellow"))
        for record in outcome.events:
            if record.kind is EventKind.RUN_COMPLETE_WITH_WARNINGS:
                continue
            if record.severity == "warning":
                lines.append(Text(f"  • {record.message}", style="yellow"))

    errors = [record for record in outcome.events if record.severity == "error"]
    if errors:
        lines.append(Text(""))
        for record in errors:
            lines.append(Text(f"[{record.code}] {record.message}", style="red"))

    failed = not outcome.status.is_success
    if failed:
        border = "red"
    elif outcome.final_status is FinalStatus.OK_WITH_WARNINGS:
        border = "yellow"
    else:
        border = "green"

    return Panel(
        Text("\n").join(lines),
        title=f"{outcome.app_name}: install {'failed' if failed else 'complete'}",
        border_style=border,
        padding=(1, 2),
    )
