"""Argument guards shared by every factory and "with" mutator."""

from __future__ import annotations

from typing import TypeVar

from resultkit.kernel.errors.contract import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
)

T = TypeVar("T")


def throw_if_null(value: T | None, argument: str) -> T:
    if value is None:
        raise ArgumentNullError(argument)
    return value


def throw_if_null_or_whitespace(value: str | None, argument: str) -> str:
    if value is None:
        raise ArgumentNullError(argument)
    if not isinstance(value, str):
        raise ArgumentError(
            f"'{argument}' must be a string, got {type(value).__name__}",
            argument=argument,
        )
    if not value.strip():
        raise ArgumentError(f"'{argument}' cannot be empty or whitespace", argument=argument)
    return value


def throw_if_negative_or_zero(value: int, argument: str) -> int:
    # bool is an int subclass; True would silently become code 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(
            f"'{argument}' must be an integer, got {type(value).__name__}",
            argument=argument,
        )
    if value <= 0:
        raise ArgumentOutOfRangeError(argument, value, f"'{argument}' must be positive, got {value}")
    return value


__all__ = ["throw_if_negative_or_zero", "throw_if_null", "throw_if_null_or_whitespace"]
