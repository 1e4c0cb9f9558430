"""Fake Time implementation for testing.

FakeTime is an in-memory implementation that tracks sleep() calls without
actually sleeping, enabling fast tests.
"""

from appinstall.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation that tracks calls without sleeping.

    This class has NO public setup methods. All state is captured during execution.
    """

    def __init__(self) -> None:
        self._sleep_calls: list[float] = []

    @property
    def sleep_calls(self) -> list[float]:
        """Seconds values passed to sleep(), for test assertions."""
        return self._sleep_calls

    def sleep(self, seconds: float) -> None:
        self._sleep_calls.append(seconds)
