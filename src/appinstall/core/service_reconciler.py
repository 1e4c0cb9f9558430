"""Restart the agent service after a successful install."""

from dataclasses import dataclass

from appinstall.core.events import EventEmitter, EventKind
from appinstall.core.installer import InstallResult, InstallSucceeded
from appinstall.integrations.service.abc import ServiceManager
from appinstall.integrations.time.abc import Time

DEFAULT_RESTART_GRACE_SECONDS = 2.0


@dataclass(frozen=True)
class RestartNotAttempted:
    reason: str


@dataclass(frozen=True)
class RestartAttempted:
    succeeded: bool


RestartResult = RestartNotAttempted | RestartAttempted


def reconcile_service(
    install_result: InstallResult,
    services: ServiceManager,
    time: Time,
    emitter: EventEmitter,
    *,
    service_name: str,
    grace_seconds: float = DEFAULT_RESTART_GRACE_SECONDS,
) -> RestartResult:
    """Restart service_name if and only if the install succeeded.

    Waits grace_seconds first so pending filesystem writes settle. A failed
    restart is a warning: the package stays installed and the operator can
    restart the service by hand.
    """
    if not isinstance(install_result, InstallSucceeded):
        reason = "install did not succeed"
        emitter.emit(EventKind.RESTART_SKIPPED, f"Not restarting {service_name}: {reason}")
        return RestartNotAttempted(reason=reason)

    time.sleep(grace_seconds)

    try:
        succeeded = services.restart(service_name)
        detail = "service manager reported failure"
    except RuntimeError as e:
        succeeded = False
        detail = str(e)

    if succeeded:
        emitter.emit(EventKind.RESTART_SUCCEEDED, f"Restarted service {service_name}")
    else:
        emitter.emit(
            EventKind.RESTART_FAILED,
            f"Could not restart service {service_name} ({detail}); restart it manually",
        )
    return RestartAttempted(succeeded=succeeded)
