"""Result[T] monad – Ok and Err variants.

A failure is data, never an exception: every combinator routes an ``Err``
past the user-supplied handler untouched. Handlers themselves are not
guarded, so an exception raised inside one propagates to the caller.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar

from resultkit.kernel.errors.contract import (
    ArgumentError,
    InvalidOperationError,
    ResultFailureError,
)
from resultkit.kernel.errors.guards import throw_if_null
from resultkit.kernel.types.check import is_default
from resultkit.kernel.types.error import ResultError, throw_if_not_result_error
from resultkit.kernel.types.option import Maybe, Nothing, Some
from resultkit.kernel.types.unit import UNIT, Unit

if TYPE_CHECKING:
    from resultkit.kernel.types.deferred import Try

T = TypeVar("T")
U = TypeVar("U")


class Result(abc.ABC, Generic[T]):
    """Success/failure container. Exactly one of ``Ok``/``Err``."""

    __slots__ = ()

    @staticmethod
    def success(value: T) -> Ok[T]:
        return Ok(value)

    @staticmethod
    def failure(error: ResultError | BaseException) -> Err[Any]:
        """Wrap *error*; an exception is described via ``ResultError.from_exception``."""
        if isinstance(error, ResultError):
            return Err(error)
        if isinstance(error, BaseException):
            return Err(ResultError.from_exception(error))
        throw_if_null(error, "error")
        raise ArgumentError(
            f"'error' must be a ResultError or an exception, got {type(error).__name__}",
            argument="error",
        )

    @staticmethod
    def from_exception(exception: BaseException) -> Err[Any]:
        return Err(ResultError.from_exception(exception))

    @abc.abstractmethod
    def is_success(self) -> bool: ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abc.abstractmethod
    def is_default(self) -> bool: ...

    @abc.abstractmethod
    def unwrap(self) -> T: ...

    def unwrap_or(self, default: T) -> T:
        return self.unwrap() if self.is_success() else default

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def bind(self, func: Callable[[T], Result[U] | Try[U]]) -> Result[U]:
        """Chain *func* on success; a failure short-circuits untouched.

        A :class:`~resultkit.kernel.types.deferred.Try` returned by *func*
        is evaluated before being returned.
        """
        if isinstance(self, Err):
            return Err(self.error)
        return _flatten(func(self.unwrap()))

    def map(self, func: Callable[[T], U]) -> Result[U]:
        if isinstance(self, Err):
            return Err(self.error)
        return Ok(func(self.unwrap()))

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[ResultError], U]) -> U:
        """Run exactly one branch and return its value.

        Branches returning ``None`` make this the side-effecting form.
        """
        if isinstance(self, Err):
            return on_failure(self.error)
        return on_success(self.unwrap())

    def tap(self, action: Callable[[T], Any]) -> Result[T]:
        if self.is_success():
            action(self.unwrap())
        return self

    def tap_error(self, action: Callable[[ResultError], Any]) -> Result[T]:
        if isinstance(self, Err):
            action(self.error)
        return self

    def ensure(self, predicate: Callable[[T], bool], error: ResultError) -> Result[T]:
        """Turn a success into ``Err(error)`` when *predicate* does not hold."""
        throw_if_not_result_error(error, "error")
        if self.is_failure() or predicate(self.unwrap()):
            return self
        return Err(error)

    def to_maybe(self) -> Maybe[T]:
        if self.is_success():
            return Some(self.unwrap())
        return Nothing()

    def to_unit_result(self) -> Result[Unit]:
        if isinstance(self, Err):
            return Err(self.error)
        return Ok(UNIT)


class Ok(Result[T]):
    """Successful result variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = throw_if_null(value, "value")

    @property
    def value(self) -> T:
        return self._value

    def is_success(self) -> bool:
        return True

    def is_default(self) -> bool:
        return is_default(self._value)

    def unwrap(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return bool(self._value == other._value)
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Result[T]):
    """Error result variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: ResultError) -> None:
        self._error = throw_if_not_result_error(error, "error")

    @property
    def error(self) -> ResultError:
        return self._error

    @property
    def value(self) -> NoReturn:
        raise InvalidOperationError("A failed result has no value", detail=self._error.to_dict())

    def is_success(self) -> bool:
        return False

    def is_default(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise ResultFailureError(self._error)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Err):
            return self._error == other._error
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


def _flatten(outcome: Any) -> Result[Any]:
    from resultkit.kernel.types.deferred import Try

    if isinstance(outcome, Try):
        return outcome()
    if isinstance(outcome, Result):
        return outcome
    raise TypeError(f"handler must return a Result or a Try, got {type(outcome).__name__}")


def to_success(value: T) -> Ok[T]:
    """Explicit literal → ``Result`` conversion."""
    return Result.success(value)


def to_failure(error: ResultError | BaseException) -> Err[Any]:
    """Explicit error/exception → ``Result`` conversion."""
    return Result.failure(error)


__all__ = ["Err", "Ok", "Result", "to_failure", "to_success"]
