"""Contract violations – raised immediately at the offending call.

These never travel inside a ``Result``. Callers are expected to satisfy the
preconditions rather than catch them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resultkit.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from resultkit.kernel.types.error import ResultError


class ArgumentError(BaseError, ValueError):
    """An argument does not satisfy its precondition."""

    default_code = "argument_error"

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.argument is not None:
            base["argument"] = self.argument
        return base


class ArgumentNullError(ArgumentError):
    """A required argument was ``None``."""

    default_code = "argument_null"

    def __init__(self, argument: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"'{argument}' cannot be None", argument=argument, **kwargs)


class ArgumentOutOfRangeError(ArgumentError):
    """A numeric argument lies outside its accepted range."""

    default_code = "argument_out_of_range"

    def __init__(
        self,
        argument: str,
        value: object,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"'{argument}' is out of range: {value!r}",
            argument=argument,
            **kwargs,
        )
        self.value = value


class InvalidOperationError(BaseError, RuntimeError):
    """The operation is not valid for the object's current state."""

    default_code = "invalid_operation"


class ResultFailureError(InvalidOperationError):
    """Raised by ``Result.unwrap()`` when the result is a failure."""

    default_code = "result_failure"

    def __init__(self, error: ResultError) -> None:
        super().__init__(
            f"Called unwrap() on a failed result: {error}",
            detail=error.to_dict(),
            cause=error.exception,
        )
        self.error = error


__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "InvalidOperationError",
    "ResultFailureError",
]
