"""Fake EventLog implementation for testing."""

from dataclasses import dataclass

from appinstall.integrations.event_log.abc import EventLog, Severity


@dataclass(frozen=True)
class WrittenEvent:
    """One record captured by FakeEventLog."""

    source: str
    severity: Severity
    code: int
    message: str


class FakeEventLog(EventLog):
    """In-memory event log capturing registrations and writes.

    Writes to a source that was never registered raise, mirroring hosts where
    writing to an unknown source fails.
    """

    def __init__(self, *, registered: list[str] | None = None) -> None:
        self._sources: list[str] = list(registered or [])
        self._ensure_calls: list[str] = []
        self._events: list[WrittenEvent] = []

    @property
    def sources(self) -> list[str]:
        return self._sources

    @property
    def ensure_calls(self) -> list[str]:
        return self._ensure_calls

    @property
    def events(self) -> list[WrittenEvent]:
        return self._events

    @property
    def codes(self) -> list[int]:
        """Codes of every written record, in order."""
        return [event.code for event in self._events]

    def ensure_source(self, source: str) -> None:
        self._ensure_calls.append(source)
        if source not in self._sources:
            self._sources.append(source)

    def write(self, source: str, severity: Severity, code: int, message: str) -> None:
        if source not in self._sources:
            raise RuntimeError(f"Event source not registered: {source}")
        self._events.append(WrittenEvent(source, severity, code, message))
