"""Config settings – Settings base class and the export settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from event_export.config.validation import InvalidSettingValueError

DEFAULT_MAX_ROWS = 100_000

ELIGIBLE_PLANS: tuple[str, ...] = (
    "business",
    "business plus",
    "business extra",
    "business max",
    "advanced",
    "enterprise",
)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Tunables for the CSV export endpoint (``EVENT_EXPORT_*`` env vars)."""

    _prefix: ClassVar[str] = "EVENT_EXPORT"

    max_rows: int = DEFAULT_MAX_ROWS
    default_interval: str = "24h"
    csv_delimiter: str = ","
    csv_bom: bool = False
    eligible_plans: list[str] = dataclasses.field(default_factory=lambda: list(ELIGIBLE_PLANS))
    log_level: str = "INFO"

    def _validate(self) -> None:
        from event_export.application.export.limits import INTERVALS

        if self.max_rows < 1:
            raise InvalidSettingValueError("max_rows", self.max_rows, "must be positive")
        if self.default_interval not in INTERVALS:
            raise InvalidSettingValueError(
                "default_interval", self.default_interval, f"must be one of {sorted(INTERVALS)}"
            )
        if len(self.csv_delimiter) != 1:
            raise InvalidSettingValueError(
                "csv_delimiter", self.csv_delimiter, "must be a single character"
            )


__all__ = ["DEFAULT_MAX_ROWS", "ELIGIBLE_PLANS", "ExportSettings", "Settings"]
