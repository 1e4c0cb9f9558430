"""Tests for FakeQuarantine test infrastructure."""

from pathlib import Path

import pytest

from appinstall.integrations.quarantine.fake import FakeQuarantine


def test_lists_only_files_under_root() -> None:
    inside = Path("/apps/pluginA/default/inputs.conf")
    outside = Path("/apps/pluginB/default/inputs.conf")
    quarantine = FakeQuarantine(flagged=[outside, inside])

    assert quarantine.list_quarantined(Path("/apps/pluginA")) == [inside]
    assert quarantine.list_calls == [Path("/apps/pluginA")]


def test_unquarantine_clears_flag() -> None:
    path = Path("/apps/pluginA/default/inputs.conf")
    quarantine = FakeQuarantine(flagged=[path])

    assert quarantine.unquarantine(path) is True
    assert quarantine.list_quarantined(Path("/apps/pluginA")) == []


def test_stuck_files_stay_flagged() -> None:
    path = Path("/apps/pluginA/default/inputs.conf")
    quarantine = FakeQuarantine(flagged=[path], stuck=[path])

    assert quarantine.unquarantine(path) is False
    assert quarantine.flagged == {path}


def test_list_error_is_raised() -> None:
    quarantine = FakeQuarantine(list_error=PermissionError("denied"))

    with pytest.raises(PermissionError):
        quarantine.list_quarantined(Path("/apps"))
