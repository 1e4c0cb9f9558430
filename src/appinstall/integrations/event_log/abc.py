"""Structured event log sink.

Every notable installer step is written as one ``(severity, code, message)``
record under a named source. Monitoring alerts on the numeric code, so the
sink must preserve it rather than folding it into the message text.
"""

from abc import ABC, abstractmethod
from typing import Literal

Severity = Literal["info", "warning", "error"]


class EventLog(ABC):
    """Abstract interface for the observability sink."""

    @abstractmethod
    def ensure_source(self, source: str) -> None:
        """Register an event source if it is not registered yet.

        Must be idempotent. Called once at process start, before any write().
        """
        ...

    @abstractmethod
    def write(self, source: str, severity: Severity, code: int, message: str) -> None:
        """Write a single event record.

        Args:
            source: Registered source name
            severity: Record severity
            code: Stable numeric identifier of the event kind
            message: Human-readable detail
        """
        ...
