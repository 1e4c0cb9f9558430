"""Copy a package into the agent's app directory.

The copy is an overlay: every file in the source tree is added to or replaces
the file at the same relative path in the target, and files that only exist
in the target are left alone. There is no rollback; a re-run copies the same
files again.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from appinstall.core.events import EventEmitter, EventKind
from appinstall.core.versions import UNKNOWN_VERSION, VersionFound, probe_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaleMarkerCleanup:
    removed: tuple[Path, ...]
    failed: tuple[Path, ...]


@dataclass(frozen=True)
class InstallSucceeded:
    target_dir: Path
    installed_version: str


@dataclass(frozen=True)
class InstallFailed:
    target_dir: Path
    cause: str


InstallResult = InstallSucceeded | InstallFailed


def remove_stale_markers(markers: list[Path], emitter: EventEmitter) -> StaleMarkerCleanup:
    """Delete version markers left by a previously installed version.

    Best effort: each marker that cannot be deleted is reported as a warning
    and the install continues.
    """
    removed: list[Path] = []
    failed: list[Path] = []
    for marker in markers:
        try:
            marker.unlink()
        except OSError as e:
            failed.append(marker)
            emitter.emit(
                EventKind.STALE_MARKER_REMOVAL_FAILED,
                f"Could not remove old version marker {marker}: {e}",
            )
            continue
        removed.append(marker)
        emitter.emit(EventKind.STALE_MARKER_REMOVED, f"Removed old version marker {marker}")
    return StaleMarkerCleanup(removed=tuple(removed), failed=tuple(failed))


def install_package(source_dir: Path, target_root: Path) -> InstallResult:
    """Overlay-copy source_dir into target_root/<source_dir.name>.

    Args:
        source_dir: Package directory to install
        target_root: Agent app directory that holds installed packages

    Returns:
        InstallSucceeded with the version read back from the target, or
        InstallFailed with a description of the I/O error
    """
    target_dir = target_root / source_dir.name

    if not target_root.is_dir():
        return InstallFailed(target_dir=target_dir, cause=f"Install root not found: {target_root}")

    logger.debug("Copying %s -> %s", source_dir, target_dir)
    try:
        shutil.copytree(source_dir, target_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        return InstallFailed(target_dir=target_dir, cause=str(e))

    probe = probe_version(target_dir)
    if isinstance(probe, VersionFound):
        installed_version = probe.version.value
    else:
        logger.debug("Installed version marker unreadable after copy: %s", probe)
        installed_version = UNKNOWN_VERSION
    return InstallSucceeded(target_dir=target_dir, installed_version=installed_version)
