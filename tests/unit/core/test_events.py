"""Tests for event kinds and the per-run emitter."""

import pytest

from appinstall.core.events import EventEmitter, EventKind
from appinstall.integrations.event_log.fake import FakeEventLog


def test_event_codes_are_unique() -> None:
    codes = [kind.code for kind in EventKind]

    assert len(codes) == len(set(codes))


@pytest.mark.parametrize(
    "kind",
    [
        EventKind.STALE_MARKER_REMOVAL_FAILED,
        EventKind.UNBLOCK_FAILED,
        EventKind.RESTART_FAILED,
    ],
)
def test_recoverable_failures_are_warnings(kind: EventKind) -> None:
    assert kind.severity == "warning"


@pytest.mark.parametrize(
    "kind",
    [
        EventKind.SOURCE_NOT_FOUND,
        EventKind.SOURCE_VERSION_NOT_FOUND,
        EventKind.SOURCE_VERSION_AMBIGUOUS,
        EventKind.COPY_FAILED,
        EventKind.INSTALL_FAILED,
    ],
)
def test_failures_are_errors(kind: EventKind) -> None:
    assert kind.severity == "error"


def test_emit_writes_to_event_log_under_source() -> None:
    event_log = FakeEventLog(registered=["AppInstaller"])
    emitter = EventEmitter(event_log, "AppInstaller")

    emitter.emit(EventKind.RUN_STARTED, "starting")

    assert len(event_log.events) == 1
    written = event_log.events[0]
    assert written.source == "AppInstaller"
    assert written.severity == "info"
    assert written.code == 1000
    assert written.message == "starting"


def test_warnings_count_excludes_summary_record() -> None:
    event_log = FakeEventLog(registered=["src"])
    emitter = EventEmitter(event_log, "src")

    emitter.emit(EventKind.RESTART_FAILED, "restart failed")
    emitter.emit(EventKind.UNBLOCK_FAILED, "unblock failed")
    emitter.emit(EventKind.RUN_COMPLETE_WITH_WARNINGS, "done")

    assert emitter.warnings_count == 2


def test_count_and_records_preserve_order() -> None:
    emitter = EventEmitter(FakeEventLog(registered=["src"]), "src")

    emitter.emit(EventKind.STALE_MARKER_REMOVED, "a")
    emitter.emit(EventKind.STALE_MARKER_REMOVED, "b")
    emitter.emit(EventKind.COPY_SUCCEEDED, "c")

    assert emitter.count(EventKind.STALE_MARKER_REMOVED) == 2
    assert [r.message for r in emitter.records] == ["a", "b", "c"]
