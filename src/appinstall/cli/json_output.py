"""JSON output models for --json mode."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from appinstall.cli.output import machine_output
from appinstall.core.pipeline import InstallStatus
from appinstall.core.report import InstallOutcome
from appinstall.core.versions import VersionAmbiguous, VersionFound, VersionProbeResult


class EventResponse(BaseModel):
    model_config = ConfigDict(strict=True)

    severity: str
    code: int
    kind: str
    message: str


class InstallOutcomeResponse(BaseModel):
    """Machine-readable install result."""

    model_config = ConfigDict(strict=True)

    app: str
    status: str
    source_version: str | None
    installed_version: str | None
    warnings_count: int
    restart_performed: bool
    final_status: str | None
    events: list[EventResponse]

    @classmethod
    def from_outcome(cls, outcome: InstallOutcome) -> "InstallOutcomeResponse":
        return cls(
            app=outcome.app_name,
            status=outcome.status.value,
            source_version=outcome.source_version,
            installed_version=outcome.installed_version,
            warnings_count=outcome.warnings_count,
            restart_performed=outcome.restart_performed,
            final_status=outcome.final_status.value if outcome.final_status else None,
            events=[
                EventResponse(
                    severity=record.severity,
                    code=record.code,
                    kind=record.kind.name,
                    message=record.message,
                )
                for record in outcome.events
            ],
        )


def _probe_version(probe: VersionProbeResult | None) -> str | None:
    if isinstance(probe, VersionFound):
        return probe.version.value
    return None


class StatusResponse(BaseModel):
    """Machine-readable result of `appinstall status`."""

    model_config = ConfigDict(strict=True)

    source_dir: str
    target_dir: str
    source_found: bool
    source_version: str | None
    installed_version: str | None
    installed_markers: list[str]
    state: str | None

    @classmethod
    def from_status(cls, status: InstallStatus) -> "StatusResponse":
        if isinstance(status.installed, VersionAmbiguous):
            markers = [p.name for p in status.installed.marker_paths]
        elif isinstance(status.installed, VersionFound):
            markers = [status.installed.marker_path.name]
        else:
            markers = []
        return cls(
            source_dir=str(status.source_dir),
            target_dir=str(status.target_dir),
            source_found=status.source is not None,
            source_version=_probe_version(status.source),
            installed_version=_probe_version(status.installed),
            installed_markers=markers,
            state=status.state.value if status.state else None,
        )


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption."""
    machine_output(json.dumps(data, indent=2))
