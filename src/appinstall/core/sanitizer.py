"""Clear quarantine markers from freshly installed files."""

from dataclasses import dataclass
from pathlib import Path

from appinstall.core.events import EventEmitter, EventKind
from appinstall.integrations.quarantine.abc import Quarantine


@dataclass(frozen=True)
class SanitizeSkipped:
    """Sanitizing was disabled by configuration."""


@dataclass(frozen=True)
class SanitizeChecked:
    """Files were scanned.

    ``flagged_count == 0`` means no unquarantine call was made at all, which
    is distinct from files being found and every one of them cleared.
    """

    flagged_count: int
    unblocked_count: int
    failed: tuple[Path, ...]

    @property
    def attempted(self) -> bool:
        return self.flagged_count > 0


SanitizeResult = SanitizeSkipped | SanitizeChecked


def sanitize_artifacts(
    package_root: Path,
    quarantine: Quarantine,
    emitter: EventEmitter,
    *,
    enabled: bool,
) -> SanitizeResult:
    """Find quarantined files under package_root and clear their markers.

    Failures are warnings only: a quarantined config file is still readable
    by the agent in most setups.
    """
    if not enabled:
        emitter.emit(EventKind.UNBLOCK_SKIPPED, "File unblocking disabled; skipping check")
        return SanitizeSkipped()

    try:
        flagged = quarantine.list_quarantined(package_root)
    except (OSError, RuntimeError) as e:
        emitter.emit(
            EventKind.UNBLOCK_FAILED, f"Could not check {package_root} for blocked files: {e}"
        )
        return SanitizeChecked(flagged_count=0, unblocked_count=0, failed=())

    if not flagged:
        emitter.emit(EventKind.BLOCKED_FILES_NONE, f"No blocked files found in {package_root}")
        return SanitizeChecked(flagged_count=0, unblocked_count=0, failed=())

    emitter.emit(
        EventKind.BLOCKED_FILES_FOUND,
        f"Found {len(flagged)} blocked file(s) in {package_root}; unblocking",
    )

    failed: list[Path] = []
    for path in flagged:
        try:
            cleared = quarantine.unquarantine(path)
        except (OSError, RuntimeError):
            cleared = False
        if not cleared:
            failed.append(path)

    unblocked = len(flagged) - len(failed)
    if failed:
        listing = ", ".join(str(p) for p in failed)
        emitter.emit(
            EventKind.UNBLOCK_FAILED,
            f"Could not unblock {len(failed)} of {len(flagged)} file(s): {listing}",
        )
    else:
        emitter.emit(EventKind.UNBLOCK_SUCCEEDED, f"Unblocked {unblocked} file(s)")

    return SanitizeChecked(
        flagged_count=len(flagged), unblocked_count=unblocked, failed=tuple(failed)
    )
