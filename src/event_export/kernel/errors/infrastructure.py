"""Infrastructure errors — failures of injected collaborators."""

from __future__ import annotations

from typing import Any

from event_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class DataSourceError(InfrastructureError):
    """The event store failed to return records.

    Callers may retry; the export pipeline itself never does.
    """

    default_code = "data_source_error"
    retryable = True

    def __init__(
        self,
        message: str = "Failed to fetch events",
        *,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.source = source


__all__ = ["DataSourceError", "InfrastructureError"]
