"""Real service control using the host service manager CLI."""

import logging
import sys

from appinstall.integrations.service.abc import ServiceManager
from appinstall.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

RESTART_TIMEOUT_SECONDS = 120

# PowerShell treats typographic single quotes like the ASCII one
_POWERSHELL_SINGLE_QUOTES = "'\u2018\u2019\u201a\u201b"


def _quote_powershell_literal(value: str) -> str:
    """Escape value for use inside a single-quoted PowerShell string."""
    return "".join(ch + ch if ch in _POWERSHELL_SINGLE_QUOTES else ch for ch in value)


class RealServiceManager(ServiceManager):
    """Restarts services through systemctl, or PowerShell on Windows.

    A non-zero exit from the service manager is reported as False. A missing
    service manager binary or a timeout surfaces as RuntimeError.
    """

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform if platform is not None else sys.platform

    def restart_command(self, service_name: str) -> list[str]:
        """Build the platform-specific restart command."""
        if self._platform.startswith("win"):
            quoted = _quote_powershell_literal(service_name)
            return [
                "powershell.exe",
                "-NoProfile",
                "-NonInteractive",
                "-Command",
                f"Restart-Service -Name '{quoted}' -Force -ErrorAction Stop",
            ]
        return ["systemctl", "restart", service_name]

    def restart(self, service_name: str) -> bool:
        cmd = self.restart_command(service_name)
        logger.debug("Restarting service %s: %s", service_name, cmd)
        result = run_subprocess_with_context(
            cmd,
            operation_context=f"restart service '{service_name}'",
            check=False,
            timeout=RESTART_TIMEOUT_SECONDS,
        )
        if result.returncode != 0:
            logger.debug(
                "Restart of %s exited %d: %s", service_name, result.returncode, result.stderr
            )
            return False
        return True
