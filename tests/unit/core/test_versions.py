"""Tests for version marker probing and install state resolution."""

from pathlib import Path

import pytest

from appinstall.core.versions import (
    InstallState,
    VersionAmbiguous,
    VersionFound,
    VersionId,
    VersionNotFound,
    VersionUnreadable,
    parse_version_marker,
    probe_version,
    resolve_install_state,
    stale_markers,
)


def test_parse_version_marker_strips_suffix() -> None:
    assert parse_version_marker("2.1.0.version") == VersionId("2.1.0")


def test_parse_version_marker_keeps_opaque_strings() -> None:
    """Versions are not parsed as semver; anything before the suffix counts."""
    assert parse_version_marker("release-7b.version") == VersionId("release-7b")
    assert parse_version_marker("1.0.version.version") == VersionId("1.0.version")


def test_parse_version_marker_rejects_other_files() -> None:
    assert parse_version_marker("inputs.conf") is None
    assert parse_version_marker(".version") is None
    assert parse_version_marker("2.1.0.version.bak") is None


def test_version_id_equality_is_exact() -> None:
    assert VersionId("2.1.0") == VersionId("2.1.0")
    assert VersionId("2.1.0") != VersionId("2.1")
    assert VersionId("2.1.0") != VersionId("v2.1.0")


def test_probe_version_found(tmp_path: Path, make_package) -> None:
    package = make_package(tmp_path, "pluginA", "2.1.0", {"default/inputs.conf": "[x]"})

    result = probe_version(package)

    assert isinstance(result, VersionFound)
    assert result.version == VersionId("2.1.0")
    assert result.marker_path == package / "default" / "2.1.0.version"


def test_probe_version_missing_package(tmp_path: Path) -> None:
    result = probe_version(tmp_path / "nope")

    assert isinstance(result, VersionNotFound)
    assert result.search_dir == tmp_path / "nope" / "default"


def test_probe_version_no_marker(tmp_path: Path, make_package) -> None:
    package = make_package(tmp_path, "pluginA", None, {"default/inputs.conf": "[x]"})

    assert isinstance(probe_version(package), VersionNotFound)


def test_probe_version_ignores_markers_outside_default(tmp_path: Path, make_package) -> None:
    package = make_package(tmp_path, "pluginA", None, {"local/9.9.version": ""})

    assert isinstance(probe_version(package), VersionNotFound)


def test_probe_version_ignores_directories_named_like_markers(tmp_path: Path, make_package) -> None:
    package = make_package(tmp_path, "pluginA", "1.0")
    (package / "default" / "2.0.version").mkdir()

    result = probe_version(package)

    assert isinstance(result, VersionFound)
    assert result.version == VersionId("1.0")


def test_probe_version_multiple_markers_is_ambiguous(tmp_path: Path, make_package) -> None:
    package = make_package(tmp_path, "pluginA", "1.0")
    (package / "default" / "2.0.version").write_text("", encoding="utf-8")

    result = probe_version(package)

    assert isinstance(result, VersionAmbiguous)
    assert [p.name for p in result.marker_paths] == ["1.0.version", "2.0.version"]


def test_resolve_not_installed() -> None:
    state = resolve_install_state(VersionId("2.1.0"), VersionNotFound(Path("/apps/x/default")))

    assert state is InstallState.NOT_INSTALLED


def test_resolve_same_version() -> None:
    installed = VersionFound(VersionId("2.1.0"), Path("/apps/x/default/2.1.0.version"))

    assert resolve_install_state(VersionId("2.1.0"), installed) is InstallState.SAME_VERSION


def test_resolve_different_version() -> None:
    installed = VersionFound(VersionId("2.0.0"), Path("/apps/x/default/2.0.0.version"))

    assert resolve_install_state(VersionId("2.1.0"), installed) is InstallState.DIFFERENT_VERSION


def test_resolve_ambiguous_installed_is_different_version() -> None:
    installed = VersionAmbiguous(
        (Path("/apps/x/default/1.0.version"), Path("/apps/x/default/2.1.0.version"))
    )

    assert resolve_install_state(VersionId("2.1.0"), installed) is InstallState.DIFFERENT_VERSION


def test_stale_markers_for_each_probe_result() -> None:
    marker = Path("/apps/x/default/1.0.version")
    other = Path("/apps/x/default/1.1.version")

    assert stale_markers(VersionFound(VersionId("1.0"), marker)) == [marker]
    assert stale_markers(VersionAmbiguous((marker, other))) == [marker, other]
    assert stale_markers(VersionNotFound(Path("/apps/x/default"))) == []


def test_probe_version_unlistable_default_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_package
) -> None:
    package = make_package(tmp_path, "pluginA", "1.0")

    def _iterdir(self: Path):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", _iterdir)

    result = probe_version(package)

    assert isinstance(result, VersionUnreadable)
    assert result.search_dir == package / "default"
    assert "Permission denied" in result.error


def test_resolve_unreadable_installed_is_different_version() -> None:
    installed = VersionUnreadable(Path("/apps/x/default"), "Permission denied")

    assert resolve_install_state(VersionId("2.1.0"), installed) is InstallState.DIFFERENT_VERSION
    assert stale_markers(installed) == []
