"""Deferred fallible computations – ``Try`` and ``TryAsync``.

Invoking either wrapper is the one place where exceptions are converted into
``Err`` results. Only :class:`Exception` subclasses are captured, so
``KeyboardInterrupt``, ``SystemExit`` and ``asyncio.CancelledError`` still
propagate.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Generic, ParamSpec, TypeVar

from resultkit.config.settings import get_settings
from resultkit.config.validation import ConfigError
from resultkit.kernel.errors.guards import throw_if_null
from resultkit.kernel.types.error import ResultError
from resultkit.kernel.types.option import Maybe
from resultkit.kernel.types.result import Result

T = TypeVar("T")
U = TypeVar("U")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


def _log_captures() -> bool:
    if not logger.isEnabledFor(logging.DEBUG):
        return False
    try:
        return get_settings().log_captured_exceptions
    except ConfigError:
        # a broken environment must not turn a capture into a raise
        return True


def _capture(exc: Exception, func: Callable[..., Any]) -> Result[Any]:
    if _log_captures():
        logger.debug(
            "deferred computation failed computation=%s exc=%r",
            getattr(func, "__qualname__", repr(func)),
            exc,
            exc_info=exc,
        )
    return Result.from_exception(exc)


def _as_result(outcome: Any) -> Result[Any]:
    # plain values stand for a success, as a literal would
    if isinstance(outcome, Result):
        return outcome
    return Result.success(outcome)


class Try(Generic[T]):
    """Zero-argument computation producing a ``Result``; calling it never raises.

    ::

        parse = Try(lambda: int(raw))
        parse()            # Ok(42) or Err(ResultError(... exception=ValueError(...)))
        parse.bind(lookup) # evaluates once, then chains
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Result[T] | T]) -> None:
        throw_if_null(func, "func")
        if not callable(func):
            raise TypeError(f"Try expects a callable, got {type(func).__name__}")
        self._func = func

    def __call__(self) -> Result[T]:
        try:
            return _as_result(self._func())
        except Exception as exc:  # noqa: BLE001
            return _capture(exc, self._func)

    def to_async(self) -> TryAsync[T]:
        """Run synchronously when awaited, yielding an already-settled result."""

        async def run() -> Result[T]:
            return self()

        return TryAsync(run)

    def bind(self, func: Callable[[T], Any]) -> Result[Any]:
        return self().bind(func)

    def map(self, func: Callable[[T], U]) -> Result[U]:
        return self().map(func)

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[ResultError], U]) -> U:
        return self().match(on_success, on_failure)

    def tap(self, action: Callable[[T], Any]) -> Result[T]:
        return self().tap(action)

    def ensure(self, predicate: Callable[[T], bool], error: ResultError) -> Result[T]:
        return self().ensure(predicate, error)

    def to_maybe(self) -> Maybe[T]:
        return self().to_maybe()

    def __repr__(self) -> str:
        return f"Try({getattr(self._func, '__qualname__', self._func)!r})"


class TryAsync(Generic[T]):
    """Asynchronous counterpart of :class:`Try`; awaiting it never raises."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Awaitable[Result[T] | T]]) -> None:
        throw_if_null(func, "func")
        if not callable(func):
            raise TypeError(f"TryAsync expects a callable, got {type(func).__name__}")
        self._func = func

    async def __call__(self) -> Result[T]:
        try:
            outcome = self._func()
            if inspect.isawaitable(outcome):
                outcome = await outcome
            return _as_result(outcome)
        except Exception as exc:  # noqa: BLE001
            return _capture(exc, self._func)

    def __repr__(self) -> str:
        return f"TryAsync({getattr(self._func, '__qualname__', self._func)!r})"


def attempt(func: Callable[P, Result[T] | T]) -> Callable[P, Try[T]]:
    """Decorator: calling the function returns a ``Try`` bound to its arguments."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[T]:
        return Try(lambda: func(*args, **kwargs))

    return wrapper


def attempt_async(func: Callable[P, Awaitable[Result[T] | T]]) -> Callable[P, TryAsync[T]]:
    """Decorator: calling the coroutine function returns a ``TryAsync``."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> TryAsync[T]:
        return TryAsync(lambda: func(*args, **kwargs))

    return wrapper


__all__ = ["Try", "TryAsync", "attempt", "attempt_async"]
