"""Tap – run a side effect on the value and hand the container back."""

from __future__ import annotations

from typing import Any, Callable

from resultkit.kernel.combinators.strategy import (
    Container,
    evaluate,
    evaluate_async,
    is_present,
    settle,
)


def tap(source: Any, action: Callable[[Any], Any]) -> Container:
    container = evaluate(source)
    if is_present(container):
        action(container.unwrap())
    return container


async def tap_async(source: Any, action: Callable[[Any], Any]) -> Container:
    container = await evaluate_async(source)
    if is_present(container):
        await settle(action(container.unwrap()))
    return container


__all__ = ["tap", "tap_async"]
