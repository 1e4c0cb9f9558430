"""Tests for RealQuarantine on platforms without a quarantine marker."""

from pathlib import Path

import pytest

from appinstall.integrations.quarantine.real import RealQuarantine


def test_linux_reports_nothing_flagged(tmp_path: Path) -> None:
    (tmp_path / "default").mkdir()
    (tmp_path / "default" / "inputs.conf").write_text("[x]", encoding="utf-8")

    assert RealQuarantine(platform="linux").list_quarantined(tmp_path) == []


def test_linux_unquarantine_is_noop(tmp_path: Path) -> None:
    path = tmp_path / "inputs.conf"
    path.write_text("[x]", encoding="utf-8")

    assert RealQuarantine(platform="linux").unquarantine(path) is True


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        RealQuarantine(platform="linux").list_quarantined(tmp_path / "missing")
