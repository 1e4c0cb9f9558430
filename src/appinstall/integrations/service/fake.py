"""Fake ServiceManager implementation for testing."""

from appinstall.integrations.service.abc import ServiceManager


class FakeServiceManager(ServiceManager):
    """In-memory fake that records restart requests.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Restart calls are captured for assertions

    Examples:
        # Restart reported as failed by the service manager
        >>> services = FakeServiceManager(restart_succeeds=False)
        >>> services.restart("SplunkForwarder")
        False

        # Service manager unavailable
        >>> services = FakeServiceManager(restart_error=RuntimeError("no systemctl"))
    """

    def __init__(
        self,
        *,
        restart_succeeds: bool = True,
        restart_error: Exception | None = None,
    ) -> None:
        """Initialize fake with predetermined restart behavior.

        Args:
            restart_succeeds: Value returned from restart()
            restart_error: If set, restart() raises this instead of returning
        """
        self._restart_succeeds = restart_succeeds
        self._restart_error = restart_error
        self._restart_calls: list[str] = []

    @property
    def restart_calls(self) -> list[str]:
        """Service names passed to restart(), in call order."""
        return self._restart_calls

    def restart(self, service_name: str) -> bool:
        self._restart_calls.append(service_name)
        if self._restart_error is not None:
            raise self._restart_error
        return self._restart_succeeds
