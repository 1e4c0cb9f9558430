"""Install pipeline: probe, resolve, copy, unblock, restart, report.

Each stage returns a result value that the next stage consumes. The only
early exits are a missing source package and a missing, ambiguous or
unreadable source version marker; every other path reaches the closing
report.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from appinstall.core.config_store import InstallerConfig
from appinstall.core.context import InstallerContext
from appinstall.core.events import EventEmitter, EventKind
from appinstall.core.installer import (
    InstallFailed,
    InstallSucceeded,
    install_package,
    remove_stale_markers,
)
from appinstall.core.report import (
    FinalStatus,
    InstallOutcome,
    OutcomeStatus,
    finalize_report,
    report_install_failed,
)
from appinstall.core.sanitizer import sanitize_artifacts
from appinstall.core.service_reconciler import RestartAttempted, reconcile_service
from appinstall.core.versions import (
    InstallState,
    VersionAmbiguous,
    VersionFound,
    VersionNotFound,
    VersionProbeResult,
    VersionUnreadable,
    probe_version,
    resolve_install_state,
    stale_markers,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallRequest:
    """One install invocation.

    Attributes:
        app_folder_name: Package folder name, identical at source and target
        app_source_path: Directory that contains the package folder
        config: Effective configuration after CLI overrides
    """

    app_folder_name: str
    app_source_path: Path
    config: InstallerConfig

    @property
    def source_dir(self) -> Path:
        return self.app_source_path / self.app_folder_name

    @property
    def target_dir(self) -> Path:
        return self.config.install_root / self.app_folder_name


@dataclass(frozen=True)
class InstallStatus:
    """Read-only view of source and installed versions."""

    source_dir: Path
    target_dir: Path
    source: VersionProbeResult | None
    installed: VersionProbeResult
    state: InstallState | None


def _describe_probe(probe: VersionProbeResult | None) -> str:
    if isinstance(probe, VersionFound):
        return probe.version.value
    if isinstance(probe, VersionAmbiguous):
        return "ambiguous (" + ", ".join(p.name for p in probe.marker_paths) + ")"
    if isinstance(probe, VersionUnreadable):
        return "unreadable"
    return "none"


def inspect_install(request: InstallRequest) -> InstallStatus:
    """Probe both sides and resolve the state without changing anything."""
    source: VersionProbeResult | None = None
    if request.source_dir.is_dir():
        source = probe_version(request.source_dir)
    installed = probe_version(request.target_dir)
    state = None
    if isinstance(source, VersionFound):
        state = resolve_install_state(source.version, installed)
    return InstallStatus(
        source_dir=request.source_dir,
        target_dir=request.target_dir,
        source=source,
        installed=installed,
        state=state,
    )


def _outcome(
    request: InstallRequest,
    emitter: EventEmitter,
    status: OutcomeStatus,
    *,
    source_version: str | None = None,
    installed_version: str | None = None,
    restart_performed: bool = False,
    final_status: FinalStatus | None = None,
) -> InstallOutcome:
    return InstallOutcome(
        app_name=request.app_folder_name,
        status=status,
        source_version=source_version,
        installed_version=installed_version,
        warnings_count=emitter.warnings_count,
        restart_performed=restart_performed,
        final_status=final_status,
        events=tuple(emitter.records),
    )


def run_install(ctx: InstallerContext, request: InstallRequest) -> InstallOutcome:
    """Install or upgrade one package.

    The event source named in request.config must already be registered
    with ctx.event_log.

    Returns:
        InstallOutcome describing what happened; never raises for expected
        failures (missing source, copy errors, restart errors)
    """
    config = request.config
    app_name = request.app_folder_name
    emitter = EventEmitter(ctx.event_log, config.event_log_source)

    emitter.emit(
        EventKind.RUN_STARTED,
        f"Installing {app_name} from {request.app_source_path} into {config.install_root}",
    )

    source_dir = request.source_dir
    if not source_dir.is_dir():
        emitter.emit(EventKind.SOURCE_NOT_FOUND, f"Source package not found: {source_dir}")
        report_install_failed(emitter, app_name, "source package not found")
        return _outcome(request, emitter, OutcomeStatus.NOT_FOUND)

    source_probe = probe_version(source_dir)
    if isinstance(source_probe, VersionNotFound):
        emitter.emit(
            EventKind.SOURCE_VERSION_NOT_FOUND,
            f"No *.version marker found in {source_probe.search_dir}",
        )
        report_install_failed(emitter, app_name, "source version marker not found")
        return _outcome(request, emitter, OutcomeStatus.NOT_FOUND)
    if isinstance(source_probe, VersionAmbiguous):
        names = ", ".join(p.name for p in source_probe.marker_paths)
        emitter.emit(
            EventKind.SOURCE_VERSION_AMBIGUOUS,
            f"Multiple version markers found in {source_dir}: {names}",
        )
        report_install_failed(emitter, app_name, "source version marker is ambiguous")
        return _outcome(request, emitter, OutcomeStatus.NOT_FOUND)
    if isinstance(source_probe, VersionUnreadable):
        emitter.emit(
            EventKind.SOURCE_VERSION_NOT_FOUND,
            f"Could not read version markers in {source_probe.search_dir}: {source_probe.error}",
        )
        report_install_failed(emitter, app_name, "source version marker could not be read")
        return _outcome(request, emitter, OutcomeStatus.NOT_FOUND)

    source_version = source_probe.version
    emitter.emit(EventKind.VERSION_DETECTED, f"Source version of {app_name} is {source_version}")

    installed_probe = probe_version(request.target_dir)
    state = resolve_install_state(source_version, installed_probe)
    logger.debug("Install state for %s: %s", app_name, state)

    if state is InstallState.SAME_VERSION:
        emitter.emit(
            EventKind.ALREADY_CURRENT,
            f"{app_name} {source_version} is already installed; nothing to do",
        )
        final_status = finalize_report(emitter, app_name)
        return _outcome(
            request,
            emitter,
            OutcomeStatus.ALREADY_CURRENT,
            source_version=source_version.value,
            installed_version=source_version.value,
            final_status=final_status,
        )

    if state is InstallState.DIFFERENT_VERSION:
        emitter.emit(
            EventKind.UPGRADE_REQUIRED,
            f"Upgrading {app_name} from {_describe_probe(installed_probe)} to {source_version}",
        )
        remove_stale_markers(stale_markers(installed_probe), emitter)
    else:
        emitter.emit(EventKind.NOT_INSTALLED, f"{app_name} is not installed yet")

    install_result = install_package(source_dir, config.install_root)
    if isinstance(install_result, InstallFailed):
        emitter.emit(
            EventKind.COPY_FAILED,
            f"Copying {source_dir} to {install_result.target_dir} failed: {install_result.cause}",
        )
        report_install_failed(emitter, app_name, "copy failed")
    else:
        emitter.emit(
            EventKind.COPY_SUCCEEDED,
            f"Installed {app_name} version {install_result.installed_version} "
            f"to {install_result.target_dir}",
        )
        sanitize_artifacts(
            install_result.target_dir,
            ctx.quarantine,
            emitter,
            enabled=config.unblock_files,
        )

    restart = reconcile_service(
        install_result,
        ctx.services,
        ctx.time,
        emitter,
        service_name=config.service_name,
        grace_seconds=config.restart_grace_seconds,
    )
    final_status = finalize_report(emitter, app_name)

    if isinstance(install_result, InstallSucceeded):
        status = OutcomeStatus.INSTALLED
        installed_version: str | None = install_result.installed_version
    else:
        status = OutcomeStatus.UPGRADE_FAILED
        installed_version = None
    return _outcome(
        request,
        emitter,
        status,
        source_version=source_version.value,
        installed_version=installed_version,
        restart_performed=isinstance(restart, RestartAttempted),
        final_status=final_status,
    )
