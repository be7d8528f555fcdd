"""Bind – chain a fallible step; failure or absence short-circuits.

The handler runs at most once, only on success/presence, and only after the
source has settled. Its outcome is returned flattened: a ``Try`` or
``TryAsync`` it returns is evaluated, and a failure it returns propagates
exactly like a failed source.
"""

from __future__ import annotations

from typing import Any, Callable

from resultkit.kernel.combinators.strategy import (
    Container,
    absent_like,
    evaluate,
    evaluate_async,
    is_present,
    require_same_kind,
    settle,
)


def bind(source: Any, func: Callable[[Any], Any]) -> Container:
    """Synchronous bind over a ``Result``, ``Maybe`` or ``Try`` source."""
    return evaluate(source).bind(func)


async def bind_async(source: Any, func: Callable[[Any], Any]) -> Container:
    """Asynchronous bind; *source* and *func* may each be sync or async.

    ::

        user = await bind_async(fetch_user(user_id), load_profile)
    """
    container = await evaluate_async(source)
    if not is_present(container):
        return absent_like(container)
    outcome = await settle(func(container.unwrap()))
    return require_same_kind(container, await evaluate_async(outcome), "bind")


__all__ = ["bind", "bind_async"]
