"""Event kinds emitted by the installer and the emitter that records them.

Each kind maps to exactly one numeric code and one severity. Codes are part of
the external contract: monitoring alerts on them, so existing values must not
be renumbered.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from appinstall.integrations.event_log.abc import EventLog, Severity

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Event kinds as ``(code, severity)`` pairs."""

    RUN_STARTED = (1000, "info")
    SOURCE_NOT_FOUND = (1001, "error")
    SOURCE_VERSION_NOT_FOUND = (1002, "error")
    SOURCE_VERSION_AMBIGUOUS = (1003, "error")
    VERSION_DETECTED = (1004, "info")
    NOT_INSTALLED = (1005, "info")
    ALREADY_CURRENT = (1006, "info")
    UPGRADE_REQUIRED = (1007, "info")
    STALE_MARKER_REMOVED = (1008, "info")
    STALE_MARKER_REMOVAL_FAILED = (1009, "warning")
    COPY_SUCCEEDED = (1010, "info")
    COPY_FAILED = (1011, "error")
    BLOCKED_FILES_FOUND = (1012, "info")
    BLOCKED_FILES_NONE = (1013, "info")
    UNBLOCK_SUCCEEDED = (1014, "info")
    UNBLOCK_FAILED = (1015, "warning")
    UNBLOCK_SKIPPED = (1016, "info")
    RESTART_SUCCEEDED = (1017, "info")
    RESTART_FAILED = (1018, "warning")
    RESTART_SKIPPED = (1019, "info")
    RUN_COMPLETE_CLEAN = (1020, "info")
    RUN_COMPLETE_WITH_WARNINGS = (1021, "warning")
    INSTALL_FAILED = (1099, "error")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def severity(self) -> Severity:
        return self.value[1]


@dataclass(frozen=True)
class EventRecord:
    """A single emitted event."""

    kind: EventKind
    message: str

    @property
    def code(self) -> int:
        return self.kind.code

    @property
    def severity(self) -> Severity:
        return self.kind.severity


class EventEmitter:
    """Writes events for one run to the event log and keeps them in order.

    The warning count is derived from emitted records, so every warning-severity
    event counts exactly once. The final summary events are not warnings about
    the run itself and are excluded.
    """

    def __init__(self, event_log: EventLog, source: str) -> None:
        self._event_log = event_log
        self._source = source
        self._records: list[EventRecord] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def records(self) -> list[EventRecord]:
        return list(self._records)

    @property
    def warnings_count(self) -> int:
        return sum(
            1
            for record in self._records
            if record.severity == "warning"
            and record.kind is not EventKind.RUN_COMPLETE_WITH_WARNINGS
        )

    def emit(self, kind: EventKind, message: str) -> EventRecord:
        record = EventRecord(kind=kind, message=message)
        logger.debug("event %d (%s): %s", kind.code, kind.severity, message)
        self._event_log.write(self._source, kind.severity, kind.code, message)
        self._records.append(record)
        return record

    def count(self, kind: EventKind) -> int:
        """Number of times kind was emitted during this run."""
        return sum(1 for record in self._records if record.kind is kind)
