"""Real quarantine handling for Windows and macOS.

Windows records download origin in the ``Zone.Identifier`` alternate data
stream. macOS uses the ``com.apple.quarantine`` extended attribute. Other
platforms have no such marker, so nothing is ever reported as flagged.
"""

import logging
import os
import sys
from pathlib import Path

from appinstall.integrations.quarantine.abc import Quarantine
from appinstall.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

ZONE_IDENTIFIER_STREAM = "Zone.Identifier"
MACOS_QUARANTINE_ATTRIBUTE = "com.apple.quarantine"


def _iter_files(root: Path) -> list[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


class RealQuarantine(Quarantine):
    """Platform-dispatching quarantine implementation."""

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform if platform is not None else sys.platform

    def list_quarantined(self, root: Path) -> list[Path]:
        if not root.is_dir():
            raise FileNotFoundError(f"Package directory not found: {root}")
        if self._platform.startswith("win"):
            return [p for p in _iter_files(root) if self._has_zone_identifier(p)]
        if self._platform == "darwin":
            return [p for p in _iter_files(root) if self._has_quarantine_attribute(p)]
        logger.debug("No quarantine mechanism on %s; skipping scan", self._platform)
        return []

    def unquarantine(self, path: Path) -> bool:
        if self._platform.startswith("win"):
            try:
                os.remove(f"{path}:{ZONE_IDENTIFIER_STREAM}")
            except FileNotFoundError:
                return True
            except OSError as e:
                logger.debug(
                    "Could not remove %s stream from %s: %s", ZONE_IDENTIFIER_STREAM, path, e
                )
                return False
            return True
        if self._platform == "darwin":
            result = run_subprocess_with_context(
                ["xattr", "-d", MACOS_QUARANTINE_ATTRIBUTE, str(path)],
                operation_context=f"clear quarantine attribute on {path}",
                check=False,
            )
            return result.returncode == 0 or not self._has_quarantine_attribute(path)
        return True

    def _has_zone_identifier(self, path: Path) -> bool:
        return os.path.exists(f"{path}:{ZONE_IDENTIFIER_STREAM}")

    def _has_quarantine_attribute(self, path: Path) -> bool:
        result = run_subprocess_with_context(
            ["xattr", "-p", MACOS_QUARANTINE_ATTRIBUTE, str(path)],
            operation_context=f"read quarantine attribute on {path}",
            check=False,
        )
        return result.returncode == 0
