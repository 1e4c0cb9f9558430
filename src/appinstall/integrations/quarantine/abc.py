"""Quarantine marker interface.

Files fetched from a network share or download can carry a platform flag
marking them as untrusted. The flag lives beside the file content (an
alternate data stream on Windows, an extended attribute on macOS), so it is
modelled as its own integration.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Quarantine(ABC):
    """Abstract interface for finding and clearing quarantine markers."""

    @abstractmethod
    def list_quarantined(self, root: Path) -> list[Path]:
        """Recursively list files under root that carry a quarantine marker.

        Args:
            root: Directory to scan

        Returns:
            Flagged files, sorted by path

        Raises:
            OSError: If root cannot be walked
        """
        ...

    @abstractmethod
    def unquarantine(self, path: Path) -> bool:
        """Clear the quarantine marker on a single file.

        Returns:
            True if the marker is gone afterwards, False otherwise
        """
        ...
