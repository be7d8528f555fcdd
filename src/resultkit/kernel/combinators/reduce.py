"""Reduce – collapse a ``Maybe`` (or a ``Result`` via ``to_maybe``) to a plain value."""

from __future__ import annotations

from typing import Any, Callable

from resultkit.kernel.combinators.strategy import Container, evaluate, evaluate_async, settle
from resultkit.kernel.types.option import Maybe
from resultkit.kernel.types.result import Result


def _as_maybe(container: Container) -> Maybe[Any]:
    if isinstance(container, Result):
        return container.to_maybe()
    return container


def reduce(source: Any, substitute: Any) -> Any:
    return _as_maybe(evaluate(source)).reduce(substitute)


def reduce_with(source: Any, factory: Callable[[], Any]) -> Any:
    """*factory* is called only when the source is empty or failed."""
    return _as_maybe(evaluate(source)).reduce_with(factory)


async def reduce_async(source: Any, substitute: Any) -> Any:
    return _as_maybe(await evaluate_async(source)).reduce(substitute)


async def reduce_with_async(source: Any, factory: Callable[[], Any]) -> Any:
    maybe = _as_maybe(await evaluate_async(source))
    if maybe.is_some():
        return maybe.unwrap()
    return await settle(factory())


__all__ = ["reduce", "reduce_async", "reduce_with", "reduce_with_async"]
