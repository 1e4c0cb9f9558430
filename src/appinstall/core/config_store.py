"""Installer configuration data structures and loading.

Provides immutable configuration loaded once from ~/.appinstall/config.toml
at the CLI entry point. Every field has a built-in default, so the file is
optional.
"""

import os
import sys
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import tomlkit

from appinstall.core.service_reconciler import DEFAULT_RESTART_GRACE_SECONDS

DEFAULT_SERVICE_NAME = "SplunkForwarder"
DEFAULT_EVENT_LOG_SOURCE = "AppInstaller"
CONFIG_PATH_ENV_VAR = "APPINSTALL_CONFIG"


def default_install_root(platform: str | None = None) -> Path:
    """Agent app directory for the current platform."""
    platform = platform if platform is not None else sys.platform
    if platform.startswith("win"):
        return Path(r"C:\Program Files\SplunkUniversalForwarder\etc\apps")
    return Path("/opt/splunkforwarder/etc/apps")


@dataclass(frozen=True)
class InstallerConfig:
    """Immutable installer configuration.

    Loaded once at CLI entry point and stored in InstallerContext.
    """

    install_root: Path
    service_name: str
    event_log_source: str
    unblock_files: bool
    restart_grace_seconds: float
    event_log_path: Path | None

    @staticmethod
    def defaults() -> "InstallerConfig":
        return InstallerConfig(
            install_root=default_install_root(),
            service_name=DEFAULT_SERVICE_NAME,
            event_log_source=DEFAULT_EVENT_LOG_SOURCE,
            unblock_files=True,
            restart_grace_seconds=DEFAULT_RESTART_GRACE_SECONDS,
            event_log_path=None,
        )

    def with_overrides(self, **overrides: Any) -> "InstallerConfig":
        """Return a copy with every non-None override applied.

        CLI options that were not passed arrive as None and keep the
        configured value.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _require_type(data: dict[str, Any], key: str, expected: type, config_path: Path) -> None:
    if key in data and not isinstance(data[key], expected):
        raise ValueError(
            f"Invalid '{key}' in {config_path}: expected {expected.__name__}, "
            f"got {type(data[key]).__name__}"
        )


def parse_config(data: dict[str, Any], config_path: Path) -> InstallerConfig:
    """Build an InstallerConfig from parsed TOML, filling gaps with defaults.

    Raises:
        ValueError: If a field has the wrong type or an invalid value
    """
    for key in ("install_root", "service_name", "event_log_source", "event_log_path"):
        _require_type(data, key, str, config_path)
    _require_type(data, "unblock_files", bool, config_path)

    grace = data.get("restart_grace_seconds", DEFAULT_RESTART_GRACE_SECONDS)
    if isinstance(grace, bool) or not isinstance(grace, (int, float)) or grace < 0:
        raise ValueError(
            f"Invalid 'restart_grace_seconds' in {config_path}: "
            f"expected a non-negative number, got {grace!r}"
        )

    defaults = InstallerConfig.defaults()
    install_root = data.get("install_root")
    event_log_path = data.get("event_log_path")
    return InstallerConfig(
        install_root=Path(install_root).expanduser() if install_root else defaults.install_root,
        service_name=data.get("service_name") or defaults.service_name,
        event_log_source=data.get("event_log_source") or defaults.event_log_source,
        unblock_files=data.get("unblock_files", defaults.unblock_files),
        restart_grace_seconds=float(grace),
        event_log_path=Path(event_log_path).expanduser() if event_log_path else None,
    )


def render_config(config: InstallerConfig) -> str:
    """Serialize config as a commented TOML document."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("appinstall configuration"))
    doc["install_root"] = str(config.install_root)
    doc["service_name"] = config.service_name
    doc["event_log_source"] = config.event_log_source
    doc["unblock_files"] = config.unblock_files
    doc["restart_grace_seconds"] = config.restart_grace_seconds
    if config.event_log_path is not None:
        doc["event_log_path"] = str(config.event_log_path)
    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for config file access.

    Enables in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> InstallerConfig:
        """Load config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: InstallerConfig) -> None:
        """Save config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the config file (for messages)."""
        ...

    def load_or_defaults(self) -> InstallerConfig:
        if not self.exists():
            return InstallerConfig.defaults()
        return self.load()


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.appinstall/config.toml.

    The APPINSTALL_CONFIG environment variable points at an alternate file.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> InstallerConfig:
        config_path = self.path()
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed TOML in {config_path}: {e}") from e
        return parse_config(data, config_path)

    def save(self, config: InstallerConfig) -> None:
        config_path = self.path()
        parent = config_path.parent

        try:
            parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise PermissionError(
                f"Cannot create directory: {parent}\n"
                f"To fix this manually:\n"
                f"  1. Create the directory: mkdir -p {parent}\n"
                f"  2. Run appinstall config init again"
            ) from None

        if config_path.exists() and not os.access(config_path, os.W_OK):
            raise PermissionError(f"Cannot write to file: {config_path}")

        config_path.write_text(render_config(config), encoding="utf-8")

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        override = os.environ.get(CONFIG_PATH_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".appinstall" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory."""

    def __init__(self, config: InstallerConfig | None = None) -> None:
        """Initialize in-memory store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> InstallerConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: InstallerConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/appinstall/config.toml")
