from appinstall.integrations.event_log.abc import EventLog, Severity
from appinstall.integrations.event_log.real import RealEventLog

__all__ = [
    "EventLog",
    "RealEventLog",
    "Severity",
]
