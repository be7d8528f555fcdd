"""Maybe[T] monad – Some and Nothing variants."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, NoReturn, TypeAlias, TypeVar

from resultkit.kernel.errors.contract import InvalidOperationError
from resultkit.kernel.errors.guards import throw_if_null
from resultkit.kernel.types.check import is_default

if TYPE_CHECKING:
    from resultkit.kernel.types.error import ResultError
    from resultkit.kernel.types.result import Result

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


class Maybe(abc.ABC, Generic[T]):
    """Presence/absence container.

    ``Nothing`` orders before every ``Some``; two ``Some`` values order by
    their content.
    """

    __slots__ = ()

    @staticmethod
    def some(value: T) -> Some[T]:
        return Some(value)

    @staticmethod
    def none() -> Nothing[Any]:
        return Nothing()

    @staticmethod
    def from_optional(value: T | None) -> Maybe[T]:
        """``None`` becomes ``Nothing``; anything else becomes ``Some``."""
        return Nothing() if value is None else Some(value)

    @abc.abstractmethod
    def is_some(self) -> bool: ...

    def is_none(self) -> bool:
        return not self.is_some()

    @abc.abstractmethod
    def is_default(self) -> bool: ...

    @abc.abstractmethod
    def unwrap(self) -> T: ...

    def unwrap_or(self, default: T) -> T:
        return self.unwrap() if self.is_some() else default

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def bind(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        if self.is_none():
            return Nothing()
        out = func(self.unwrap())
        if not isinstance(out, Maybe):
            raise TypeError(f"bind handler must return a Maybe, got {type(out).__name__}")
        return out

    def map(self, func: Callable[[T], U | None]) -> Maybe[U]:
        if self.is_none():
            return Nothing()
        return Maybe.from_optional(func(self.unwrap()))

    def match(self, some: Callable[[T], U], none: Callable[[], U]) -> U:
        if self.is_some():
            return some(self.unwrap())
        return none()

    def reduce(self, substitute: T) -> T:
        return self.unwrap() if self.is_some() else substitute

    def reduce_with(self, factory: Callable[[], T]) -> T:
        return self.unwrap() if self.is_some() else factory()

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        if self.is_some() and predicate(self.unwrap()):
            return self
        return Nothing()

    def holds(self, predicate: Callable[[T], bool]) -> bool:
        return self.is_some() and bool(predicate(self.unwrap()))

    def tap_if_some(self, action: Callable[[T], Any]) -> Maybe[T]:
        if self.is_some():
            action(self.unwrap())
        return self

    def tap_if_none(self, action: Callable[[], Any]) -> Maybe[T]:
        if self.is_none():
            action()
        return self

    def tap(self, some: Callable[[T], Any], none: Callable[[], Any]) -> Maybe[T]:
        if self.is_some():
            some(self.unwrap())
        else:
            none()
        return self

    def to_result(self, error: ResultError) -> Result[T]:
        from resultkit.kernel.types.result import Result

        if self.is_some():
            return Result.success(self.unwrap())
        return Result.failure(error)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_to(self, other: Maybe[T] | None) -> int:
        """Three-way comparison: negative, zero or positive."""
        if other is None:
            return 1
        if not isinstance(other, Maybe):
            raise TypeError(f"Cannot compare Maybe with {type(other).__name__}")
        if self.is_none() or other.is_none():
            return int(self.is_some()) - int(other.is_some())
        left, right = self.unwrap(), other.unwrap()
        if left < right:
            return -1
        if right < left:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) >= 0


class Some(Maybe[T]):
    """Maybe with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = throw_if_null(value, "value")

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_default(self) -> bool:
        return is_default(self._value)

    def unwrap(self) -> T:
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            return bool(self._value == other._value)
        if isinstance(other, Maybe):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Maybe[T]):
    """Empty maybe."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_default(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise InvalidOperationError("Called unwrap() on Nothing")

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Maybe):
            return isinstance(other, Nothing)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


# ---------------------------------------------------------------------------
# Sequence helpers
# ---------------------------------------------------------------------------


def where(items: Iterable[Maybe[T]], predicate: Callable[[T], bool]) -> Iterator[Maybe[T]]:
    """Keep the ``Some`` entries whose content satisfies *predicate*."""
    return (item for item in items if item.holds(predicate))


def flatten(
    items: Iterable[Maybe[T]],
    substitute: T = _MISSING,
    *,
    factory: Callable[[], T] | None = None,
) -> Iterator[T]:
    """Unwrap a sequence of maybes.

    ``Nothing`` entries are dropped unless a *substitute* value or a
    *factory* is given, in which case they are replaced in place.
    """
    if substitute is not _MISSING and factory is not None:
        raise TypeError("flatten() accepts either 'substitute' or 'factory', not both")
    if factory is not None:
        return (item.reduce_with(factory) for item in items)
    if substitute is not _MISSING:
        return (item.reduce(substitute) for item in items)
    return (item.unwrap() for item in items if item.is_some())


Option: TypeAlias = Some[T] | Nothing[T]

__all__ = ["Maybe", "Nothing", "Option", "Some", "flatten", "where"]
