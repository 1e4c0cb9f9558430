"""Time operations abstraction for testing.

The installer waits a fixed grace period before restarting the agent service.
Routing that wait through this ABC keeps tests from actually sleeping.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
