"""Event log backed by the standard logging module."""

import logging
import sys
from pathlib import Path

from appinstall.integrations.event_log.abc import EventLog, Severity

EVENT_LOGGER_NAME = "appinstall.events"
EVENT_FORMAT = "%(asctime)s %(levelname)s [%(event_source)s:%(event_code)d] %(message)s"

_LEVELS: dict[Severity, int] = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _handler_name(source: str) -> str:
    return f"{EVENT_LOGGER_NAME}:{source}"


class RealEventLog(EventLog):
    """Writes events through a per-source child logger of ``appinstall.events``.

    Each record carries ``event_source`` and ``event_code`` as extra fields so
    any handler or formatter downstream can route on them. ensure_source()
    attaches exactly one handler per source: a file handler when a log path is
    configured, stderr otherwise.
    """

    def __init__(self, log_path: Path | None = None) -> None:
        self._log_path = log_path

    def _logger(self, source: str) -> logging.Logger:
        return logging.getLogger(f"{EVENT_LOGGER_NAME}.{source}")

    def ensure_source(self, source: str) -> None:
        logger = self._logger(source)
        name = _handler_name(source)
        if any(h.get_name() == name for h in logger.handlers):
            return

        if self._log_path is not None:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(self._log_path, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.set_name(name)
        handler.setFormatter(logging.Formatter(EVENT_FORMAT))

        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    def write(self, source: str, severity: Severity, code: int, message: str) -> None:
        self._logger(source).log(
            _LEVELS[severity],
            message,
            extra={"event_source": source, "event_code": code},
        )
