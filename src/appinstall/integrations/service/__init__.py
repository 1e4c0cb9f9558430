from appinstall.integrations.service.abc import ServiceManager
from appinstall.integrations.service.real import RealServiceManager

__all__ = [
    "RealServiceManager",
    "ServiceManager",
]
