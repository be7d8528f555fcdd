"""Unit tests for Result, Ok and Err."""

from __future__ import annotations

import dataclasses

import pytest

from resultkit.kernel.errors import ArgumentError, ArgumentNullError, InvalidOperationError, ResultFailureError
from resultkit.kernel.types import (
    UNIT,
    Err,
    Maybe,
    Ok,
    Result,
    ResultError,
    Try,
    to_failure,
    to_success,
)

ERROR = ResultError.new("boom", code=13)


@dataclasses.dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


class Recorder:
    """Counts invocations of a handler."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[object] = []
        self._returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self._returns


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_success_holds_value(self) -> None:
        result = Result.success(5)
        assert isinstance(result, Ok)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value == 5

    def test_success_rejects_none(self) -> None:
        with pytest.raises(ArgumentNullError):
            Result.success(None)

    def test_ok_rejects_none(self) -> None:
        with pytest.raises(ArgumentNullError):
            Ok(None)

    def test_failure_holds_error(self) -> None:
        result = Result.failure(ERROR)
        assert isinstance(result, Err)
        assert result.is_failure()
        assert not result.is_success()
        assert result.error is ERROR

    def test_failure_from_exception_instance(self) -> None:
        exc = ValueError("bad")
        result = Result.failure(exc)
        assert result.error.exception is exc
        assert result.error.message == "bad"

    def test_from_exception(self) -> None:
        exc = OSError(5, "io")
        result = Result.from_exception(exc)
        assert result.error.code == 5
        assert result.error.exception is exc

    def test_failure_rejects_other_types(self) -> None:
        with pytest.raises(ArgumentError):
            Result.failure("boom")  # type: ignore[arg-type]
        with pytest.raises(ArgumentNullError):
            Result.failure(None)  # type: ignore[arg-type]

    def test_explicit_conversions(self) -> None:
        assert to_success("a") == Ok("a")
        assert to_failure(ERROR) == Err(ERROR)
        assert to_failure(KeyError("k")).error.message == "'k'"

    def test_pattern_matching(self) -> None:
        match Result.success(3):
            case Ok(value):
                assert value == 3
            case Err():
                pytest.fail("expected Ok")
        match Result.failure(ERROR):
            case Err(error):
                assert error is ERROR
            case _:
                pytest.fail("expected Err")


class TestAbstractBase:
    def test_result_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            Result()  # type: ignore[abstract]

    def test_partial_variant_cannot_be_instantiated(self) -> None:
        class Half(Result[int]):
            __slots__ = ()

            def is_success(self) -> bool:
                return True

        with pytest.raises(TypeError):
            Half()  # type: ignore[abstract]


class TestFlags:
    @pytest.mark.parametrize("value", [0, 0.0, "", False, (), [], {}, Point(), UNIT])
    def test_default_values(self, value: object) -> None:
        assert Result.success(value).is_default()

    @pytest.mark.parametrize("value", [1, "x", True, (0,), Point(1, 0)])
    def test_non_default_values(self, value: object) -> None:
        assert not Result.success(value).is_default()

    def test_failure_is_never_default(self) -> None:
        assert not Result.failure(ERROR).is_default()


class TestAccessors:
    def test_unwrap(self) -> None:
        assert Result.success(1).unwrap() == 1

    def test_unwrap_failure_raises(self) -> None:
        with pytest.raises(ResultFailureError) as info:
            Result.failure(ERROR).unwrap()
        assert info.value.error is ERROR

    def test_unwrap_failure_chains_captured_exception(self) -> None:
        exc = ZeroDivisionError("div")
        with pytest.raises(ResultFailureError) as info:
            Result.from_exception(exc).unwrap()
        assert info.value.__cause__ is exc

    def test_unwrap_or(self) -> None:
        assert Result.success(1).unwrap_or(9) == 1
        assert Result.failure(ERROR).unwrap_or(9) == 9

    def test_value_of_failure_raises(self) -> None:
        with pytest.raises(InvalidOperationError):
            _ = Result.failure(ERROR).value

    def test_equality_and_hash(self) -> None:
        assert Result.success(1) == Result.success(1)
        assert Result.success(1) != Result.success(2)
        assert Result.success(1) != Result.failure(ERROR)
        assert Result.failure(ERROR) == Result.failure(ERROR)
        assert len({Result.success(1), Result.success(1), Result.failure(ERROR)}) == 2

    def test_repr(self) -> None:
        assert repr(Result.success(1)) == "Ok(1)"
        assert repr(Result.failure(ERROR)).startswith("Err(ResultError(")


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestBind:
    def test_success_applies_function(self) -> None:
        assert Result.success(2).bind(lambda x: Result.success(x * 10)) == Ok(20)

    def test_result_is_not_nested(self) -> None:
        outcome = Result.success(2).bind(lambda x: Result.success(str(x)))
        assert outcome == Ok("2")
        assert not isinstance(outcome.unwrap(), Result)

    def test_failure_short_circuits(self) -> None:
        func = Recorder(Result.success(1))
        assert Result.failure(ERROR).bind(func) == Err(ERROR)
        assert func.calls == []

    def test_function_failure_propagates(self) -> None:
        other = ResultError.new("second")
        assert Result.success(1).bind(lambda _: Result.failure(other)) == Err(other)

    def test_try_returned_is_evaluated(self) -> None:
        outcome = Result.success(4).bind(lambda x: Try(lambda: 100 // x))
        assert outcome == Ok(25)

    def test_try_raising_becomes_failure(self) -> None:
        outcome = Result.success(0).bind(lambda x: Try(lambda: 100 // x))
        assert isinstance(outcome.error.exception, ZeroDivisionError)

    def test_handler_exception_propagates(self) -> None:
        def explode(_: int) -> Result[int]:
            raise RuntimeError("handler bug")

        with pytest.raises(RuntimeError, match="handler bug"):
            Result.success(1).bind(explode)

    def test_handler_must_return_result(self) -> None:
        with pytest.raises(TypeError):
            Result.success(1).bind(lambda x: x + 1)  # type: ignore[arg-type,return-value]


class TestMap:
    def test_success(self) -> None:
        assert Result.success(3).map(lambda x: x + 1) == Ok(4)

    def test_failure(self) -> None:
        func = Recorder(1)
        assert Result.failure(ERROR).map(func) == Err(ERROR)
        assert func.calls == []


class TestMatch:
    def test_success_branch(self) -> None:
        on_failure = Recorder("f")
        assert Result.success(2).match(lambda x: f"ok {x}", on_failure) == "ok 2"
        assert on_failure.calls == []

    def test_failure_branch_receives_error(self) -> None:
        on_success = Recorder("s")
        assert Result.failure(ERROR).match(on_success, lambda e: e.code) == 13
        assert on_success.calls == []

    def test_side_effecting_branches(self) -> None:
        seen: list[str] = []
        assert Result.success(1).match(lambda _: seen.append("s"), lambda _: seen.append("f")) is None
        Result.failure(ERROR).match(lambda _: seen.append("s"), lambda _: seen.append("f"))
        assert seen == ["s", "f"]

    def test_branch_exception_propagates(self) -> None:
        def boom(_: ResultError) -> None:
            raise LookupError("branch")

        with pytest.raises(LookupError):
            Result.failure(ERROR).match(lambda _: None, boom)


class TestTap:
    def test_success_runs_action_and_returns_same(self) -> None:
        action = Recorder()
        result = Result.success(7)
        assert result.tap(action) is result
        assert action.calls == [(7,)]

    def test_failure_is_noop(self) -> None:
        action = Recorder()
        result = Result.failure(ERROR)
        assert result.tap(action) is result
        assert action.calls == []

    def test_tap_error(self) -> None:
        action = Recorder()
        Result.failure(ERROR).tap_error(action)
        Result.success(1).tap_error(action)
        assert action.calls == [(ERROR,)]


class TestEnsure:
    def test_predicate_holds(self) -> None:
        result = Result.success(10)
        assert result.ensure(lambda x: x > 5, ERROR) is result

    def test_predicate_fails(self) -> None:
        assert Result.success(1).ensure(lambda x: x > 5, ERROR) == Err(ERROR)

    def test_failure_skips_predicate(self) -> None:
        predicate = Recorder(True)
        original = ResultError.new("original")
        assert Result.failure(original).ensure(predicate, ERROR) == Err(original)
        assert predicate.calls == []

    def test_error_required(self) -> None:
        with pytest.raises(ArgumentNullError):
            Result.success(1).ensure(lambda _: True, None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("error", ["boom", ValueError("boom"), 404])
    def test_error_must_be_result_error_even_when_predicate_holds(self, error: object) -> None:
        predicate = Recorder(True)
        with pytest.raises(ArgumentError):
            Result.success(1).ensure(predicate, error)  # type: ignore[arg-type]
        assert predicate.calls == []

    def test_error_checked_on_failure_too(self) -> None:
        with pytest.raises(ArgumentError):
            Result.failure(ERROR).ensure(lambda _: True, "boom")  # type: ignore[arg-type]


class TestConversions:
    def test_to_maybe_success(self) -> None:
        assert Result.success(5).to_maybe() == Maybe.some(5)

    def test_to_maybe_failure(self) -> None:
        assert Result.failure(ERROR).to_maybe() == Maybe.none()

    def test_to_unit_result(self) -> None:
        assert Result.success("x").to_unit_result() == Ok(UNIT)
        assert Result.failure(ERROR).to_unit_result() == Err(ERROR)
