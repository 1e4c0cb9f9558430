"""Version discovery from marker files and install state resolution.

A package's version of record is the name of a single empty file in its
``default`` directory: ``default/2.1.0.version`` means version ``2.1.0``.
Versions are opaque strings compared by exact equality only.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

VERSION_SUFFIX = ".version"
DEFAULT_DIR_NAME = "default"
UNKNOWN_VERSION = "unknown"


@dataclass(frozen=True)
class VersionId:
    """Opaque version identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VersionFound:
    version: VersionId
    marker_path: Path


@dataclass(frozen=True)
class VersionNotFound:
    search_dir: Path


@dataclass(frozen=True)
class VersionAmbiguous:
    """More than one marker exists; no version can be chosen."""

    marker_paths: tuple[Path, ...]


@dataclass(frozen=True)
class VersionUnreadable:
    """The marker directory exists but could not be listed."""

    search_dir: Path
    error: str


VersionProbeResult = VersionFound | VersionNotFound | VersionAmbiguous | VersionUnreadable


class InstallState(Enum):
    NOT_INSTALLED = "not-installed"
    SAME_VERSION = "same-version"
    DIFFERENT_VERSION = "different-version"


def parse_version_marker(filename: str) -> VersionId | None:
    """Extract the version from a marker filename.

    Returns None when the name does not end in ``.version`` or nothing
    precedes the suffix.

    Example:
        >>> parse_version_marker("2.1.0.version")
        VersionId(value='2.1.0')
        >>> parse_version_marker("inputs.conf") is None
        True
    """
    if not filename.endswith(VERSION_SUFFIX):
        return None
    value = filename[: -len(VERSION_SUFFIX)]
    if not value:
        return None
    return VersionId(value)


def probe_version(package_dir: Path) -> VersionProbeResult:
    """Find the version marker of a package.

    Scans ``<package_dir>/default`` for files named ``*.version``. A missing
    ``default`` directory is the same as having no marker.

    Args:
        package_dir: Root of the package (source or installed)

    Returns:
        VersionFound for exactly one marker, VersionAmbiguous for several,
        VersionNotFound for none, VersionUnreadable when listing the
        directory raises OSError
    """
    default_dir = package_dir / DEFAULT_DIR_NAME
    try:
        if not default_dir.is_dir():
            return VersionNotFound(search_dir=default_dir)
        markers = sorted(
            entry
            for entry in default_dir.iterdir()
            if entry.is_file() and parse_version_marker(entry.name) is not None
        )
    except OSError as e:
        return VersionUnreadable(search_dir=default_dir, error=str(e))
    if not markers:
        return VersionNotFound(search_dir=default_dir)
    if len(markers) > 1:
        return VersionAmbiguous(marker_paths=tuple(markers))

    version = parse_version_marker(markers[0].name)
    assert version is not None
    return VersionFound(version=version, marker_path=markers[0])


def resolve_install_state(source_version: VersionId, installed: VersionProbeResult) -> InstallState:
    """Decide what an install run has to do.

    Ambiguous installed markers resolve to DIFFERENT_VERSION so the upgrade
    path clears every stale marker and leaves exactly one behind. An
    unreadable installed marker directory also resolves to DIFFERENT_VERSION:
    the installed version cannot be confirmed, so the copy runs again.
    """
    if isinstance(installed, VersionNotFound):
        return InstallState.NOT_INSTALLED
    if isinstance(installed, VersionFound) and installed.version == source_version:
        return InstallState.SAME_VERSION
    return InstallState.DIFFERENT_VERSION


def stale_markers(installed: VersionProbeResult) -> list[Path]:
    """Marker files that must go before a different version is copied in."""
    if isinstance(installed, VersionFound):
        return [installed.marker_path]
    if isinstance(installed, VersionAmbiguous):
        return list(installed.marker_paths)
    return []
