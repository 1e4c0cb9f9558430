"""Install command implementation."""

from pathlib import Path

import click
from rich.console import Console

from appinstall.cli.ensure import Ensure
from appinstall.cli.json_output import InstallOutcomeResponse, emit_json
from appinstall.cli.output import format_install_summary
from appinstall.core.context import InstallerContext
from appinstall.core.pipeline import InstallRequest, run_install


def resolve_source_path(ctx: InstallerContext, app_source_path: Path | None) -> Path:
    """Source root relative to the invocation directory; defaults to it."""
    if app_source_path is None:
        return ctx.cwd
    if app_source_path.is_absolute():
        return app_source_path
    return ctx.cwd / app_source_path


@click.command("install")
@click.argument("app_folder_name")
@click.option(
    "--source",
    "app_source_path",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory containing the app folder. Defaults to the current directory.",
)
@click.option(
    "--event-log-source",
    default=None,
    help="Event log source name to write events under.",
)
@click.option(
    "--unblock/--no-unblock",
    "unblock_files",
    default=None,
    help="Clear quarantine markers on installed files (default: on).",
)
@click.option(
    "--install-root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Agent app directory to install into.",
)
@click.option("--service-name", default=None, help="Agent service to restart after install.")
@click.option("--json", "output_json", is_flag=True, help="Print the result as JSON on stdout.")
@click.pass_obj
def install_cmd(
    ctx: InstallerContext,
    app_folder_name: str,
    app_source_path: Path | None,
    event_log_source: str | None,
    unblock_files: bool | None,
    install_root: Path | None,
    service_name: str | None,
    output_json: bool,
) -> None:
    """Install or upgrade APP_FOLDER_NAME into the agent app directory.

    Re-running with an unchanged package is a no-op. Exits 1 when the source
    package or its version marker is missing, or when the copy fails.
    """
    Ensure.valid_app_name(app_folder_name)

    config = ctx.config.with_overrides(
        event_log_source=event_log_source,
        unblock_files=unblock_files,
        install_root=install_root,
        service_name=service_name,
    )
    Ensure.invariant(bool(config.event_log_source.strip()), "Event log source must not be empty")
    ctx.event_log.ensure_source(config.event_log_source)

    request = InstallRequest(
        app_folder_name=app_folder_name,
        app_source_path=resolve_source_path(ctx, app_source_path),
        config=config,
    )
    outcome = run_install(ctx, request)

    if output_json:
        emit_json(InstallOutcomeResponse.from_outcome(outcome).model_dump(mode="json"))
    else:
        Console(stderr=True).print(format_install_summary(outcome))

    if not outcome.status.is_success:
        raise SystemExit(1)
