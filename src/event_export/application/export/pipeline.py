"""Application export – ExportPipeline.

``RECEIVED → VALIDATED → AUTHORIZED → FETCHED → PROJECTED → ENCODED →
DELIVERED``; any error moves the run to ``REJECTED`` and is re-raised
unchanged.  The CSV document is only returned once it is complete.
"""
from __future__ import annotations

import dataclasses
import itertools
from enum import Enum
from typing import Any, Mapping, Sequence

from event_export.application.export.authorization import (
    AuthorizationContext,
    AuthorizationGate,
    AuthorizedScope,
)
from event_export.application.export.columns import ColumnProjector
from event_export.application.export.csv_export import CsvEncoder
from event_export.application.export.ports import EventQuery, EventSource
from event_export.application.export.request import ExportRequest, parse_export_request
from event_export.config.settings import ExportSettings
from event_export.kernel.errors import BaseError, DataSourceError
from event_export.kernel.types import EventRecord
from event_export.observability.logging import get_logger

__all__ = ["ExportPipeline", "ExportResult", "PipelineStage"]

_log = get_logger(__name__)

CSV_MEDIA_TYPE = "application/csv"


class PipelineStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    AUTHORIZED = "authorized"
    FETCHED = "fetched"
    PROJECTED = "projected"
    ENCODED = "encoded"
    DELIVERED = "delivered"
    REJECTED = "rejected"


@dataclasses.dataclass(frozen=True)
class ExportResult:
    """A finished CSV export, ready to be sent as a download."""

    content: str
    filename: str
    row_count: int
    headers: tuple[str, ...]
    media_type: str = CSV_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f"attachment; filename={self.filename}"

    def http_headers(self) -> dict[str, str]:
        return {"Content-Disposition": self.content_disposition}


class ExportPipeline:
    """Validate → authorise → fetch once → project → encode.

    Parameters
    ----------
    gate:
        Runs the usage, domain, link, folder and plan checks.
    source:
        The event store; called at most once per :meth:`run`.
    encoder:
        CSV serialiser.  Defaults to one built from *settings*.
    settings:
        Row cap, CSV options and the default interval handed to the gate.
        Defaults to :class:`ExportSettings()`.
    """

    def __init__(
        self,
        gate: AuthorizationGate,
        source: EventSource,
        *,
        encoder: CsvEncoder | None = None,
        settings: ExportSettings | None = None,
    ) -> None:
        settings = settings or ExportSettings()
        self._settings = settings
        self._gate = gate
        self._source = source
        self._encoder = encoder or CsvEncoder(delimiter=settings.csv_delimiter, bom=settings.csv_bom)
        self._max_rows = settings.max_rows

    @property
    def max_rows(self) -> int:
        return self._max_rows

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    async def run(
        self, params: Mapping[str, Any], context: AuthorizationContext
    ) -> ExportResult:
        """Produce the CSV export for raw query *params*.

        Raises the originating :class:`~event_export.kernel.errors.BaseError`
        subclass on any failure; nothing is returned in that case.
        """
        log = _log.bind(workspace_id=context.workspace.id, user_id=context.user_id)
        stage = PipelineStage.RECEIVED
        try:
            # quota before anything else, even before the parameters are read
            self._gate.check_usage(context)
            request = parse_export_request(params)
            stage = self._advance(log, PipelineStage.VALIDATED)

            scope = await self._gate.authorize(
                request, context, default_interval=self._settings.default_interval
            )
            stage = self._advance(log, PipelineStage.AUTHORIZED)

            records = await self._fetch(self._build_query(request, scope, context))
            stage = self._advance(log, PipelineStage.FETCHED, rows=len(records))

            projector = ColumnProjector(request.columns)
            rows = projector.project(records)
            stage = self._advance(log, PipelineStage.PROJECTED)

            content = self._encoder.encode(rows, header=projector.headers)
            stage = self._advance(log, PipelineStage.ENCODED)
        except BaseError as exc:
            log.warning("export.rejected", stage=stage.value, **exc.log_fields())
            raise

        log.info(
            "export.delivered",
            event_type=request.event_type.value,
            rows=len(rows),
            columns=len(projector.headers),
            single_link=request.is_single_link,
        )
        return ExportResult(
            content=content,
            filename=request.filename,
            row_count=len(rows),
            headers=projector.headers,
        )

    @staticmethod
    def _advance(log: Any, stage: PipelineStage, **fields: Any) -> PipelineStage:
        log.debug("export.stage", stage=stage.value, **fields)
        return stage

    def _build_query(
        self,
        request: ExportRequest,
        scope: AuthorizedScope,
        context: AuthorizationContext,
    ) -> EventQuery:
        return EventQuery(
            workspace_id=context.workspace.id,
            event_type=request.event_type,
            start=scope.window.start,
            end=scope.window.end,
            limit=self._max_rows,
            link_id=scope.link.id if scope.link is not None else None,
            folder_id=request.folder_id,
            folder_ids=scope.folder_ids,
            filters=request.filters(),
            timezone=request.timezone,
        )

    async def _fetch(self, query: EventQuery) -> Sequence[EventRecord]:
        try:
            records = await self._source.fetch_events(query)
        except BaseError:
            raise
        except Exception as exc:
            raise DataSourceError(
                f"Failed to fetch {query.event_type.value} events",
                source=type(self._source).__name__,
                cause=exc,
            ) from exc
        return list(itertools.islice(records, query.limit))
