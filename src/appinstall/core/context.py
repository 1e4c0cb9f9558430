"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from appinstall.core.config_store import ConfigStore, FilesystemConfigStore, InstallerConfig
from appinstall.integrations.event_log.abc import EventLog
from appinstall.integrations.event_log.real import RealEventLog
from appinstall.integrations.quarantine.abc import Quarantine
from appinstall.integrations.quarantine.real import RealQuarantine
from appinstall.integrations.service.abc import ServiceManager
from appinstall.integrations.service.real import RealServiceManager
from appinstall.integrations.time.abc import Time
from appinstall.integrations.time.real import RealTime


@dataclass(frozen=True)
class InstallerContext:
    """Immutable context holding all dependencies for installer operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    event_log: EventLog
    services: ServiceManager
    quarantine: Quarantine
    time: Time
    config_store: ConfigStore
    config: InstallerConfig
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        event_log: EventLog | None = None,
        services: ServiceManager | None = None,
        quarantine: Quarantine | None = None,
        time: Time | None = None,
        config_store: ConfigStore | None = None,
        config: InstallerConfig | None = None,
        cwd: Path | None = None,
    ) -> "InstallerContext":
        """Create test context with optional pre-configured integration classes.

        Unspecified integrations default to their in-memory fakes, and an
        unspecified config uses the built-in defaults.

        Example:
            >>> services = FakeServiceManager(restart_succeeds=False)
            >>> ctx = InstallerContext.for_test(services=services, cwd=tmp_path)
        """
        from appinstall.core.config_store import InMemoryConfigStore
        from appinstall.integrations.event_log.fake import FakeEventLog
        from appinstall.integrations.quarantine.fake import FakeQuarantine
        from appinstall.integrations.service.fake import FakeServiceManager
        from appinstall.integrations.time.fake import FakeTime

        if config is None:
            config = InstallerConfig.defaults()

        return InstallerContext(
            event_log=event_log if event_log is not None else FakeEventLog(),
            services=services if services is not None else FakeServiceManager(),
            quarantine=quarantine if quarantine is not None else FakeQuarantine(),
            time=time if time is not None else FakeTime(),
            config_store=(
                config_store if config_store is not None else InMemoryConfigStore(config=config)
            ),
            config=config,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(config_store: ConfigStore | None = None) -> InstallerContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Raises:
        ValueError: If the config file exists but is malformed
    """
    if config_store is None:
        config_store = FilesystemConfigStore()
    config = config_store.load_or_defaults()

    return InstallerContext(
        event_log=RealEventLog(log_path=config.event_log_path),
        services=RealServiceManager(),
        quarantine=RealQuarantine(),
        time=RealTime(),
        config_store=config_store,
        config=config,
        cwd=Path.cwd(),
    )
