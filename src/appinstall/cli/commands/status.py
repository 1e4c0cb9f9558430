"""Status command: show source and installed versions without changing anything."""

from pathlib import Path

import click

from appinstall.cli.commands.install import resolve_source_path
from appinstall.cli.ensure import Ensure
from appinstall.cli.json_output import StatusResponse, emit_json
from appinstall.cli.output import user_output
from appinstall.core.context import InstallerContext
from appinstall.core.pipeline import InstallRequest, InstallStatus, inspect_install
from appinstall.core.versions import (
    InstallState,
    VersionAmbiguous,
    VersionFound,
    VersionProbeResult,
    VersionUnreadable,
)

_STATE_DESCRIPTIONS = {
    InstallState.NOT_INSTALLED: ("not installed", "yellow"),
    InstallState.SAME_VERSION: ("up to date", "green"),
    InstallState.DIFFERENT_VERSION: ("upgrade available", "yellow"),
}


def _format_probe(probe: VersionProbeResult | None) -> str:
    if probe is None:
        return click.style("package not found", fg="red")
    if isinstance(probe, VersionFound):
        return click.style(probe.version.value, fg="cyan")
    if isinstance(probe, VersionAmbiguous):
        names = ", ".join(p.name for p in probe.marker_paths)
        return click.style(f"ambiguous ({names})", fg="red")
    if isinstance(probe, VersionUnreadable):
        return click.style(f"unreadable ({probe.error})", fg="red")
    return click.style("no version marker", fg="yellow")


def _render_status(status: InstallStatus) -> None:
    user_output(f"Source:    {status.source_dir}")
    user_output(f"  version: {_format_probe(status.source)}")
    user_output(f"Installed: {status.target_dir}")
    user_output(f"  version: {_format_probe(status.installed)}")
    if status.state is None:
        user_output(click.style("State:     cannot install (source version unknown)", fg="red"))
        return
    text, color = _STATE_DESCRIPTIONS[status.state]
    user_output("State:     " + click.style(text, fg=color))


@click.command("status")
@click.argument("app_folder_name")
@click.option(
    "--source",
    "app_source_path",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory containing the app folder. Defaults to the current directory.",
)
@click.option(
    "--install-root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Agent app directory to inspect.",
)
@click.option("--json", "output_json", is_flag=True, help="Print the result as JSON on stdout.")
@click.pass_obj
def status_cmd(
    ctx: InstallerContext,
    app_folder_name: str,
    app_source_path: Path | None,
    install_root: Path | None,
    output_json: bool,
) -> None:
    """Compare the source and installed versions of APP_FOLDER_NAME.

    Writes no events and touches no files.
    """
    Ensure.valid_app_name(app_folder_name)
    request = InstallRequest(
        app_folder_name=app_folder_name,
        app_source_path=resolve_source_path(ctx, app_source_path),
        config=ctx.config.with_overrides(install_root=install_root),
    )
    status = inspect_install(request)

    if output_json:
        emit_json(StatusResponse.from_status(status).model_dump(mode="json"))
    else:
        _render_status(status)
