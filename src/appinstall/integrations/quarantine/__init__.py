from appinstall.integrations.quarantine.abc import Quarantine
from appinstall.integrations.quarantine.real import RealQuarantine

__all__ = [
    "Quarantine",
    "RealQuarantine",
]
