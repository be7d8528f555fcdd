"""Config settings – resultkit's own settings and the cached accessor."""
from __future__ import annotations

import dataclasses
import functools
import logging

from resultkit.config.settings.base import Settings
from resultkit.config.settings.loaders import EnvSettingsLoader
from resultkit.config.validation import InvalidSettingValueError

_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class ResultKitSettings(Settings):
    """Settings read from ``RESULTKIT_*`` environment variables.

    * ``RESULTKIT_LOG_LEVEL`` – level applied by ``configure_logging()``.
    * ``RESULTKIT_LOG_JSON`` – render log lines as JSON instead of console text.
    * ``RESULTKIT_LOG_CAPTURED_EXCEPTIONS`` – emit a DEBUG record each time a
      ``Try``/``TryAsync`` converts an exception into a failure.
    """

    _prefix: dataclasses.ClassVar[str] = "RESULTKIT"

    log_level: str = "WARNING"
    log_json: bool = False
    log_captured_exceptions: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@functools.lru_cache(maxsize=1)
def get_settings() -> ResultKitSettings:
    """Return the process-wide settings, loaded from the environment once."""
    return EnvSettingsLoader().load(ResultKitSettings)


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["ResultKitSettings", "get_settings", "reset_settings"]
