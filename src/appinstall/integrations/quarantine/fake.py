"""Fake Quarantine implementation for testing."""

from pathlib import Path

from appinstall.integrations.quarantine.abc import Quarantine


class FakeQuarantine(Quarantine):
    """In-memory fake with a preset set of flagged files.

    Flagged files are reported by list_quarantined() when they live under the
    scanned root. Files listed in ``stuck`` refuse to be unquarantined.

    Examples:
        >>> quarantine = FakeQuarantine(
        ...     flagged=[Path("/apps/pluginA/default/inputs.conf")],
        ...     stuck=[Path("/apps/pluginA/default/inputs.conf")],
        ... )
    """

    def __init__(
        self,
        *,
        flagged: list[Path] | None = None,
        stuck: list[Path] | None = None,
        list_error: OSError | None = None,
    ) -> None:
        self._flagged = set(flagged or [])
        self._stuck = set(stuck or [])
        self._list_error = list_error
        self._list_calls: list[Path] = []
        self._unquarantine_calls: list[Path] = []

    @property
    def list_calls(self) -> list[Path]:
        return self._list_calls

    @property
    def unquarantine_calls(self) -> list[Path]:
        return self._unquarantine_calls

    @property
    def flagged(self) -> set[Path]:
        """Files still carrying a marker."""
        return self._flagged

    def list_quarantined(self, root: Path) -> list[Path]:
        self._list_calls.append(root)
        if self._list_error is not None:
            raise self._list_error
        return sorted(p for p in self._flagged if p.is_relative_to(root))

    def unquarantine(self, path: Path) -> bool:
        self._unquarantine_calls.append(path)
        if path in self._stuck:
            return False
        self._flagged.discard(path)
        return True
