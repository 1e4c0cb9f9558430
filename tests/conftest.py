"""Shared fixtures for appinstall tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from appinstall.core.config_store import InstallerConfig

PackageFactory = Callable[..., Path]


def _write_package(
    root: Path,
    name: str,
    version: str | None,
    files: dict[str, str] | None = None,
) -> Path:
    """Create a package directory with a version marker and config files.

    Args:
        root: Directory that will contain the package folder
        name: Package folder name
        version: Marker version, or None for no marker
        files: Relative path -> content of extra files
    """
    package_dir = root / name
    default_dir = package_dir / "default"
    default_dir.mkdir(parents=True, exist_ok=True)
    if version is not None:
        (default_dir / f"{version}.version").write_text("", encoding="utf-8")
    for relative, content in (files or {}).items():
        path = package_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return package_dir


@pytest.fixture
def make_package() -> PackageFactory:
    return _write_package


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    path = tmp_path / "apps"
    path.mkdir()
    return path


@pytest.fixture
def config(install_root: Path) -> InstallerConfig:
    return InstallerConfig.defaults().with_overrides(install_root=install_root)
