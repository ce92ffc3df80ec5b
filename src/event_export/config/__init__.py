"""Config – 12-factor settings and loaders."""

from event_export.config.settings import EnvSettingsLoader, ExportSettings, Settings, SettingsLoader
from event_export.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


def load_settings() -> ExportSettings:
    """Build :class:`ExportSettings` from the process environment."""
    return EnvSettingsLoader().load(ExportSettings)


__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
