"""Config – environment settings and loaders."""

from resultkit.config.settings import (
    EnvSettingsLoader,
    ResultKitSettings,
    Settings,
    SettingsLoader,
    get_settings,
    reset_settings,
)
from resultkit.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResultKitSettings",
    "Settings",
    "SettingsLoader",
    "get_settings",
    "reset_settings",
]
