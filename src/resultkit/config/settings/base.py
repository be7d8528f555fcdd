"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class Settings:
    """Dataclass base for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses declare defaulted fields, set ``_prefix`` and may override
    :meth:`_validate`, which runs after every construction.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Normalise fields or raise ``InvalidSettingValueError``."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["Settings"]
