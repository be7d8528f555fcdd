"""Unit tests for kernel contract errors and guards."""

from __future__ import annotations

import json

import pytest

from resultkit.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    BaseError,
    InvalidOperationError,
    ResultFailureError,
    throw_if_negative_or_zero,
    throw_if_null,
    throw_if_null_or_whitespace,
)
from resultkit.kernel.types import ResultError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_str_is_message(self) -> None:
        assert str(BaseError("boom")) == "boom"

    def test_to_json(self) -> None:
        payload = json.loads(BaseError("boom", detail={"k": 1}).to_json())
        assert payload == {"type": "BaseError", "code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_empty_detail_omitted(self) -> None:
        assert "detail" not in BaseError("m").to_dict()

    def test_cause_is_chained(self) -> None:
        cause = KeyError("x")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.cause is cause
        assert err.to_dict()["cause"] == "KeyError('x')"

    def test_captured_by_result_error_with_plain_message(self) -> None:
        descriptor = ResultError.from_exception(ArgumentNullError("value"))
        assert descriptor.message == "'value' cannot be None"


class TestContractErrors:
    def test_argument_error_is_value_error(self) -> None:
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(ArgumentNullError, ArgumentError)
        assert issubclass(ArgumentOutOfRangeError, ArgumentError)

    def test_invalid_operation_is_runtime_error(self) -> None:
        assert issubclass(InvalidOperationError, RuntimeError)

    def test_argument_null_names_argument(self) -> None:
        err = ArgumentNullError("value")
        assert err.argument == "value"
        assert err.code == "argument_null"
        assert err.to_dict()["argument"] == "value"

    def test_out_of_range_keeps_value(self) -> None:
        err = ArgumentOutOfRangeError("code", -3)
        assert err.value == -3
        assert err.code == "argument_out_of_range"

    def test_result_failure_error_carries_descriptor(self) -> None:
        cause = ValueError("bad")
        descriptor = ResultError.from_exception(cause)
        err = ResultFailureError(descriptor)
        assert err.error is descriptor
        assert err.__cause__ is cause
        assert err.detail["message"] == "bad"


class TestGuards:
    def test_throw_if_null_passes_value_through(self) -> None:
        assert throw_if_null(0, "x") == 0

    def test_throw_if_null_raises(self) -> None:
        with pytest.raises(ArgumentNullError):
            throw_if_null(None, "x")

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_strings_rejected(self, blank: str) -> None:
        with pytest.raises(ArgumentError):
            throw_if_null_or_whitespace(blank, "message")

    def test_none_string_is_null_error(self) -> None:
        with pytest.raises(ArgumentNullError):
            throw_if_null_or_whitespace(None, "message")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            throw_if_null_or_whitespace(42, "message")  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", [0, -1, -500])
    def test_non_positive_code_out_of_range(self, code: int) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            throw_if_negative_or_zero(code, "code")

    def test_bool_is_not_a_code(self) -> None:
        with pytest.raises(ArgumentError):
            throw_if_negative_or_zero(True, "code")

    def test_positive_code_accepted(self) -> None:
        assert throw_if_negative_or_zero(7, "code") == 7
