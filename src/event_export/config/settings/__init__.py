"""Config settings – 12-factor env-based configuration."""
from event_export.config.settings.base import (
    DEFAULT_MAX_ROWS,
    ELIGIBLE_PLANS,
    ExportSettings,
    Settings,
)
from event_export.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_MAX_ROWS",
    "ELIGIBLE_PLANS",
    "EnvSettingsLoader",
    "ExportSettings",
    "Settings",
    "SettingsLoader",
]
