"""CLI tests for the status command."""

import json
from pathlib import Path

from click.testing import CliRunner

from appinstall.cli.cli import cli
from appinstall.core.context import InstallerContext
from appinstall.integrations.event_log.fake import FakeEventLog


def test_status_json_upgrade_available(
    source_root: Path, install_root: Path, config, make_package
) -> None:
    make_package(source_root, "pluginA", "2.0.0")
    make_package(install_root, "pluginA", "1.0.0")
    event_log = FakeEventLog()
    ctx = InstallerContext.for_test(config=config, cwd=source_root, event_log=event_log)

    result = CliRunner().invoke(cli, ["status", "pluginA", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["source_version"] == "2.0.0"
    assert data["installed_version"] == "1.0.0"
    assert data["installed_markers"] == ["1.0.0.version"]
    assert data["state"] == "different-version"
    assert event_log.events == []
    assert event_log.ensure_calls == []


def test_status_not_installed(source_root: Path, config, make_package) -> None:
    make_package(source_root, "pluginA", "2.0.0")
    ctx = InstallerContext.for_test(config=config, cwd=source_root)

    result = CliRunner().invoke(cli, ["status", "pluginA"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "not installed" in result.output


def test_status_missing_source(source_root: Path, config) -> None:
    ctx = InstallerContext.for_test(config=config, cwd=source_root)

    result = CliRunner().invoke(cli, ["status", "pluginA", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["source_found"] is False
    assert data["state"] is None
