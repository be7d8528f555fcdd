"""Default/null checks backing the ``is_default`` convenience flags."""

from __future__ import annotations

import dataclasses
import enum
from numbers import Number
from typing import Any

from resultkit.kernel.types.unit import Unit

_ZERO_CONSTRUCTIBLE = (
    Number,
    str,
    bytes,
    bytearray,
    tuple,
    list,
    dict,
    set,
    frozenset,
    Unit,
)


def is_null(value: Any) -> bool:
    return value is None


def is_default(value: Any) -> bool:
    """Return ``True`` when *value* equals the zero value of its own type.

    ``0``, ``0.0``, ``False``, ``""``, ``b""``, empty built-in collections and
    :class:`Unit` are defaults. A dataclass instance is a default when it
    equals an instance built from its field defaults. Enum members and other
    objects never are.
    """
    if value is None:
        return True
    if isinstance(value, enum.Enum):
        return False
    if isinstance(value, _ZERO_CONSTRUCTIBLE):
        try:
            return bool(value == type(value)())
        except TypeError:
            # Number subclasses that need constructor arguments
            return False
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = dataclasses.fields(value)
        if any(
            f.init
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
            for f in fields
        ):
            return False
        return bool(value == type(value)())
    return False


__all__ = ["is_default", "is_null"]
