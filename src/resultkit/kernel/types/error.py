"""ResultError – the immutable failure descriptor carried by ``Err``."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any

from resultkit.kernel.errors.contract import ArgumentError
from resultkit.kernel.errors.guards import (
    throw_if_negative_or_zero,
    throw_if_null,
    throw_if_null_or_whitespace,
)
from resultkit.kernel.types.option import Maybe


class ResultErrorCode(enum.IntEnum):
    """Well-known error codes."""

    GENERIC = 1
    VALIDATION = 400
    NOT_FOUND = 404
    INTERNAL = 500


DEFAULT_CODE: int = ResultErrorCode.GENERIC.value
DEFAULT_NAME: str = "Error"


def native_error_code(exception: BaseException) -> int | None:
    """Return the exception's own positive integer code, if it carries one.

    ``OSError.errno`` wins over a generic ``code`` attribute.
    """
    for attr in ("errno", "code"):
        candidate = getattr(exception, attr, None)
        if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate > 0:
            return candidate
    return None


def _as_code(code: int) -> int:
    # plain ints keep repr and to_dict stable
    return int(code) if isinstance(code, enum.IntEnum) else code


@dataclasses.dataclass(frozen=True)
class ResultError:
    """Describes an expected failure.

    Build instances through :meth:`new` or :meth:`from_exception`; every
    field is validated on construction and on each ``with_*`` update::

        err = ResultError.new("Email format is invalid", name="ValidationError")
        err = err.with_code(ResultErrorCode.VALIDATION)
        assert err.is_validation_error()
    """

    code: int
    name: str
    message: str
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        throw_if_negative_or_zero(self.code, "code")
        throw_if_null_or_whitespace(self.name, "name")
        throw_if_null_or_whitespace(self.message, "message")
        if self.exception is not None and not isinstance(self.exception, BaseException):
            raise TypeError(f"'exception' must be an exception, got {type(self.exception).__name__}")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        message: str,
        *,
        code: int = DEFAULT_CODE,
        name: str = DEFAULT_NAME,
        exception: BaseException | None = None,
    ) -> ResultError:
        return cls(code=_as_code(code), name=name, message=message, exception=exception)

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        *,
        message: str | None = None,
        name: str = DEFAULT_NAME,
        code: int | None = None,
    ) -> ResultError:
        """Describe *exception*, deriving the code from it when none is given."""
        throw_if_null(exception, "exception")
        if message is None:
            message = str(exception).strip() or type(exception).__name__
        if code is None:
            code = native_error_code(exception) or DEFAULT_CODE
        return cls.new(message, code=code, name=name, exception=exception)

    # ------------------------------------------------------------------
    # Functional updates
    # ------------------------------------------------------------------

    def with_code(self, code: int) -> ResultError:
        return dataclasses.replace(self, code=_as_code(code))

    def with_message(self, message: str) -> ResultError:
        return dataclasses.replace(self, message=message)

    def with_name(self, name: str) -> ResultError:
        return dataclasses.replace(self, name=name)

    def with_exception(self, exception: BaseException) -> ResultError:
        throw_if_null(exception, "exception")
        return dataclasses.replace(self, exception=exception)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def has_exception(self) -> bool:
        return self.exception is not None

    def try_get_exception(self) -> Maybe[BaseException]:
        return Maybe.from_optional(self.exception)

    def is_error_code(self, code: int) -> bool:
        return self.code == int(code)

    def is_validation_error(self) -> bool:
        return self.is_error_code(ResultErrorCode.VALIDATION)

    def is_not_found_error(self) -> bool:
        return self.is_error_code(ResultErrorCode.NOT_FOUND)

    def is_internal_error(self) -> bool:
        return self.is_error_code(ResultErrorCode.INTERNAL)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "name": self.name,
            "message": self.message,
        }
        if self.exception is not None:
            payload["exception"] = repr(self.exception)
        return payload

    def __str__(self) -> str:
        return f"[{self.code}] {self.name}: {self.message}"


def throw_if_not_result_error(value: Any, argument: str) -> ResultError:
    """Reject anything but a ``ResultError`` at the call that received it."""
    throw_if_null(value, argument)
    if not isinstance(value, ResultError):
        raise ArgumentError(
            f"'{argument}' must be a ResultError, got {type(value).__name__}",
            argument=argument,
        )
    return value


__all__ = [
    "DEFAULT_CODE",
    "DEFAULT_NAME",
    "ResultError",
    "ResultErrorCode",
    "native_error_code",
    "throw_if_not_result_error",
]
