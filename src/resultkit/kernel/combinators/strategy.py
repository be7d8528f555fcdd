"""Evaluation strategies shared by every combinator.

A *source* is anything a combinator can turn into a container:

* immediate – a ``Result``, a ``Maybe`` or a ``Try``;
* suspended – additionally a ``TryAsync`` or any awaitable resolving to a
  source (a coroutine, a task, a future).

Handler outputs go through :func:`settle`, which awaits them only when they
are awaitable, so each async combinator accepts sync and async handlers alike.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeAlias, TypeVar

from resultkit.kernel.types.deferred import Try, TryAsync
from resultkit.kernel.types.option import Maybe, Nothing, Some
from resultkit.kernel.types.result import Err, Ok, Result

T = TypeVar("T")

Container: TypeAlias = Result[Any] | Maybe[Any]


def evaluate(source: Any) -> Container:
    """Resolve an immediate source; ``Try`` computations are run here."""
    if isinstance(source, (Result, Maybe)):
        return source
    if isinstance(source, Try):
        return source()
    if isinstance(source, TryAsync) or inspect.isawaitable(source):
        raise TypeError(
            f"{type(source).__name__} is asynchronous; use the *_async combinator instead"
        )
    raise TypeError(f"Expected a Result, Maybe or Try, got {type(source).__name__}")


async def evaluate_async(source: Any) -> Container:
    """Resolve any source, suspending only on a ``TryAsync`` or awaitable."""
    while True:
        if isinstance(source, TryAsync):
            source = await source()
        elif inspect.isawaitable(source):
            source = await source
        else:
            return evaluate(source)


async def settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def is_present(container: Container) -> bool:
    return isinstance(container, (Ok, Some))


def absent_like(container: Container) -> Container:
    """The short-circuit value for a failed/empty container, re-wrapped."""
    if isinstance(container, Err):
        return Err(container.error)
    return Nothing()


def branch(
    container: Container,
    on_present: Callable[[Any], T],
    on_absent: Callable[..., T],
) -> T:
    """Call exactly one handler: the value branch, or the error/none branch."""
    match container:
        case Ok(value) | Some(value):
            return on_present(value)
        case Err(error):
            return on_absent(error)
        case _:
            return on_absent()


def require_same_kind(source: Container, outcome: Container, operation: str) -> Container:
    family = Result if isinstance(source, Result) else Maybe
    if not isinstance(outcome, family):
        raise TypeError(
            f"{operation} handler for a {family.__name__} must return a {family.__name__}, "
            f"got {type(outcome).__name__}"
        )
    return outcome


def require_result(container: Container, operation: str) -> Result[Any]:
    if not isinstance(container, Result):
        raise TypeError(f"{operation} requires a Result source, got {type(container).__name__}")
    return container


__all__ = [
    "Container",
    "absent_like",
    "branch",
    "evaluate",
    "evaluate_async",
    "is_present",
    "require_result",
    "require_same_kind",
    "settle",
]
