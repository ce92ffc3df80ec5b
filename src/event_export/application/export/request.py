"""Application export – ExportRequest and query-parameter parsing."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from event_export.application.export.limits import INTERVALS
from event_export.kernel.errors import ValidationError
from event_export.kernel.types import EventType

__all__ = ["ExportRequest", "parse_columns", "parse_export_request"]

_OPTIONAL_STRINGS = (
    "domain",
    "key",
    "interval",
    "folder_id",
    "country",
    "city",
    "device",
    "browser",
    "os",
    "referer",
    "tag_id",
    "timezone",
)


def parse_columns(raw: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma-separated column list, keeping first occurrences in order."""
    chunks = [raw] if isinstance(raw, str) else list(raw)
    keys = [part.strip() for chunk in chunks for part in str(chunk).split(",")]
    return tuple(dict.fromkeys(k for k in keys if k))


class ExportRequest(BaseModel):
    """Validated parameters of one CSV export.

    Field names are snake_case; the query string uses the aliases
    (``event``, ``folderId``, ``tagId``).  Parameters the model does not know
    are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    event_type: EventType = Field(alias="event")
    columns: tuple[str, ...]
    domain: str | None = None
    key: str | None = None
    interval: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    folder_id: str | None = Field(default=None, alias="folderId")

    # passed through to the data source untouched
    country: str | None = None
    city: str | None = None
    device: str | None = None
    browser: str | None = None
    os: str | None = None
    referer: str | None = None
    tag_id: str | None = Field(default=None, alias="tagId")
    timezone: str | None = None

    @field_validator("event_type", mode="before")
    @classmethod
    def _parse_event_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return EventType.parse(value)
            except ValueError:
                raise ValueError("must be one of 'click', 'lead' or 'sale'") from None
        return value

    @field_validator("columns", mode="before")
    @classmethod
    def _split_columns(cls, value: Any) -> Any:
        if isinstance(value, (str, list, tuple)):
            value = parse_columns(value)
            if not value:
                raise ValueError("at least one column is required")
        return value

    @field_validator(*_OPTIONAL_STRINGS, "start", "end", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("interval")
    @classmethod
    def _known_interval(cls, value: str | None) -> str | None:
        if value is not None and value not in INTERVALS:
            raise ValueError(f"must be one of {', '.join(sorted(INTERVALS))}")
        return value

    @field_validator("start", "end")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @field_validator("end")
    @classmethod
    def _end_after_start(cls, value: datetime | None, info: ValidationInfo) -> datetime | None:
        start = info.data.get("start")
        if value is not None and start is not None and start > value:
            raise ValueError("must not be before 'start'")
        return value

    @property
    def is_single_link(self) -> bool:
        return bool(self.domain and self.key)

    @property
    def filename(self) -> str:
        return f"{self.event_type.value}_export.csv"

    def filters(self) -> dict[str, str]:
        """The optional data-source filters that were supplied."""
        names = ("country", "city", "device", "browser", "os", "referer", "tag_id")
        return {n: getattr(self, n) for n in names if getattr(self, n) is not None}


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def parse_export_request(params: Mapping[str, Any]) -> ExportRequest:
    """Validate raw query parameters into an :class:`ExportRequest`.

    Raises
    ------
    ValidationError
        With one ``{"field", "message"}`` entry per offending parameter,
        named as it appears on the query string.
    """
    try:
        return ExportRequest.model_validate(dict(params))
    except pydantic.ValidationError as exc:
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"], "type": err["type"]}
            for err in exc.errors(include_url=False)
        ]
        raise ValidationError(errors=errors) from exc
