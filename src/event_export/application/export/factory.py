"""Application export – wiring a pipeline from ``EVENT_EXPORT_*`` settings."""
from __future__ import annotations

from event_export.application.export.authorization import AuthorizationGate
from event_export.application.export.pipeline import ExportPipeline
from event_export.application.export.ports import (
    DomainResolver,
    EventSource,
    FolderPermissions,
    LinkResolver,
)
from event_export.config.settings import EnvSettingsLoader, ExportSettings, SettingsLoader
from event_export.kernel.time import Clock
from event_export.observability.logging import configure_logging


def build_export_pipeline(
    source: EventSource,
    domains: DomainResolver,
    links: LinkResolver,
    folders: FolderPermissions,
    *,
    settings: ExportSettings | None = None,
    loader: SettingsLoader | None = None,
    clock: Clock | None = None,
    json_logs: bool = True,
) -> ExportPipeline:
    """Build the gate and pipeline from one :class:`ExportSettings`.

    Without *settings* they are read through *loader* (the environment by
    default).  Logging is configured at ``settings.log_level`` and the gate
    defaults to ``settings.default_interval``.
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(ExportSettings)
    configure_logging(settings.log_level, json=json_logs)
    gate = AuthorizationGate(
        domains,
        links,
        folders,
        clock=clock,
        default_interval=settings.default_interval,
    )
    return ExportPipeline(gate, source, settings=settings)


__all__ = ["build_export_pipeline"]
