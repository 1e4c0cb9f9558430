from appinstall.integrations.time.abc import Time
from appinstall.integrations.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
