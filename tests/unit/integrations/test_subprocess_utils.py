"""Tests for run_subprocess_with_context error enrichment."""

import subprocess

import pytest

from appinstall.subprocess_utils import run_subprocess_with_context


def test_called_process_error_becomes_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(cmd, **kwargs):
        raise subprocess.CalledProcessError(3, cmd, output="out", stderr="access denied")

    monkeypatch.setattr(subprocess, "run", run)

    with pytest.raises(RuntimeError) as excinfo:
        run_subprocess_with_context(["systemctl", "restart", "x"], "restart service 'x'")

    message = str(excinfo.value)
    assert "Failed to restart service 'x'" in message
    assert "Exit code: 3" in message
    assert "stderr: access denied" in message


def test_timeout_becomes_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, 120)

    monkeypatch.setattr(subprocess, "run", run)

    with pytest.raises(RuntimeError, match="Timed out after 120s"):
        run_subprocess_with_context(["systemctl", "restart", "x"], "restart service 'x'")


def test_check_false_returns_result(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="nope")

    monkeypatch.setattr(subprocess, "run", run)

    result = run_subprocess_with_context(["false"], "run false", check=False)

    assert result.returncode == 1
