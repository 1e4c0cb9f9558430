"""Run outcome and the closing report records."""

from dataclasses import dataclass
from enum import Enum

from appinstall.core.events import EventEmitter, EventKind, EventRecord


class OutcomeStatus(Enum):
    NOT_FOUND = "not-found"
    ALREADY_CURRENT = "already-current"
    INSTALLED = "installed"
    UPGRADE_FAILED = "upgrade-failed"

    @property
    def is_success(self) -> bool:
        return self in (OutcomeStatus.ALREADY_CURRENT, OutcomeStatus.INSTALLED)


class FinalStatus(Enum):
    OK = "ok"
    OK_WITH_WARNINGS = "ok-with-warnings"


@dataclass(frozen=True)
class InstallOutcome:
    """Result of one install run. Not persisted."""

    app_name: str
    status: OutcomeStatus
    source_version: str | None
    installed_version: str | None
    warnings_count: int
    restart_performed: bool
    final_status: FinalStatus | None
    events: tuple[EventRecord, ...]


def report_install_failed(emitter: EventEmitter, app_name: str, reason: str) -> None:
    """Emit the dedicated failure summary that follows every error record."""
    emitter.emit(EventKind.INSTALL_FAILED, f"Install of {app_name} failed: {reason}")


def finalize_report(emitter: EventEmitter, app_name: str) -> FinalStatus:
    """Emit the closing record for a run that reached the end of the pipeline."""
    warnings = emitter.warnings_count
    if warnings == 0:
        emitter.emit(EventKind.RUN_COMPLETE_CLEAN, f"Install run for {app_name} completed")
        return FinalStatus.OK
    plural = "warning" if warnings == 1 else "warnings"
    emitter.emit(
        EventKind.RUN_COMPLETE_WITH_WARNINGS,
        f"Install run for {app_name} completed with {warnings} {plural}",
    )
    return FinalStatus.OK_WITH_WARNINGS
