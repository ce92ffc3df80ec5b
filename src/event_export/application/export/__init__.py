"""Application export – workspace analytics events as CSV."""
from event_export.application.export.authorization import (
    AuthorizationContext,
    AuthorizationGate,
    AuthorizedScope,
    check_workspace_access,
)
from event_export.application.export.columns import (
    COLUMN_LABELS,
    ColumnProjector,
    capitalize,
    column_label,
    column_value,
    country_name,
    display_value,
)
from event_export.application.export.csv_export import CsvEncoder
from event_export.application.export.factory import build_export_pipeline
from event_export.application.export.limits import (
    TimeWindow,
    check_click_usage,
    resolve_time_window,
    validate_date_range_for_plan,
)
from event_export.application.export.pipeline import ExportPipeline, ExportResult, PipelineStage
from event_export.application.export.ports import (
    DomainResolver,
    EventQuery,
    EventSource,
    FolderPermissions,
    LinkResolver,
)
from event_export.application.export.request import (
    ExportRequest,
    parse_columns,
    parse_export_request,
)

__all__ = [
    "COLUMN_LABELS",
    "AuthorizationContext",
    "AuthorizationGate",
    "AuthorizedScope",
    "ColumnProjector",
    "CsvEncoder",
    "DomainResolver",
    "EventQuery",
    "EventSource",
    "ExportPipeline",
    "ExportRequest",
    "ExportResult",
    "FolderPermissions",
    "LinkResolver",
    "PipelineStage",
    "TimeWindow",
    "build_export_pipeline",
    "capitalize",
    "check_click_usage",
    "check_workspace_access",
    "column_label",
    "column_value",
    "country_name",
    "display_value",
    "parse_columns",
    "parse_export_request",
    "resolve_time_window",
    "validate_date_range_for_plan",
]
