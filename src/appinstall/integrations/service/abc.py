"""Service control interface for the host agent service.

This module defines the abstract interface for restarting the service that
loads installed packages, following the ABC-based dependency injection used
by every other integration.
"""

from abc import ABC, abstractmethod


class ServiceManager(ABC):
    """Abstract interface for host service control.

    Real implementations call the platform service manager. Fake
    implementations are pure in-memory for unit tests.
    """

    @abstractmethod
    def restart(self, service_name: str) -> bool:
        """Restart a service.

        Args:
            service_name: Name of the service as known to the host

        Returns:
            True if the service manager reported success, False otherwise

        Raises:
            RuntimeError: If the service manager cannot be invoked at all
        """
        ...
