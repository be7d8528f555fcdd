"""Unit tests for Unit and the default/null checks."""

from __future__ import annotations

import dataclasses
import enum
from decimal import Decimal
from fractions import Fraction

import pytest

from resultkit.kernel.types import UNIT, Unit, is_default, is_null


class Color(enum.Enum):
    RED = 0


@dataclasses.dataclass
class Config:
    retries: int = 0
    tags: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Required:
    name: str


class TestUnit:
    def test_all_instances_equal(self) -> None:
        assert Unit() == UNIT
        assert hash(Unit()) == hash(UNIT)

    def test_ordering_is_always_equal(self) -> None:
        assert not Unit() < UNIT
        assert Unit() <= UNIT
        assert Unit() >= UNIT
        assert not Unit() > UNIT

    def test_not_equal_to_other_types(self) -> None:
        assert UNIT != ()
        assert UNIT != None  # noqa: E711

    def test_repr(self) -> None:
        assert repr(UNIT) == "()"


class TestChecks:
    def test_is_null(self) -> None:
        assert is_null(None)
        assert not is_null(0)

    @pytest.mark.parametrize(
        "value",
        [None, 0, 0.0, 0j, False, "", b"", bytearray(), (), [], {}, set(), frozenset(), Decimal(0), Fraction(0), UNIT],
    )
    def test_defaults(self, value: object) -> None:
        assert is_default(value)

    @pytest.mark.parametrize("value", [1, -0.5, True, "a", b"a", (None,), [0], {"k": 0}, Decimal("0.1")])
    def test_non_defaults(self, value: object) -> None:
        assert not is_default(value)

    def test_enum_members_are_never_default(self) -> None:
        assert not is_default(Color.RED)

    def test_dataclass_with_defaults(self) -> None:
        assert is_default(Config())
        assert not is_default(Config(retries=1))
        assert not is_default(Config(tags=["x"]))

    def test_dataclass_without_defaults(self) -> None:
        assert not is_default(Required(name=""))

    def test_arbitrary_objects(self) -> None:
        assert not is_default(object())
