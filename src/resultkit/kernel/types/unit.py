"""Unit – the type with exactly one value."""

from __future__ import annotations

from typing import Any


class Unit:
    """Stands in for "no meaningful value" in ``Result[Unit]``.

    Every instance is equal to every other and ordering is always equal.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Unit):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Unit)

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Unit):
            return False
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Unit):
            return True
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Unit):
            return False
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Unit):
            return True
        return NotImplemented

    def __repr__(self) -> str:
        return "()"


UNIT = Unit()

__all__ = ["UNIT", "Unit"]
