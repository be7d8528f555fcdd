"""Config settings – environment-based configuration."""
from resultkit.config.settings.base import Settings
from resultkit.config.settings.library import ResultKitSettings, get_settings, reset_settings
from resultkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EnvSettingsLoader",
    "ResultKitSettings",
    "Settings",
    "SettingsLoader",
    "get_settings",
    "reset_settings",
]
