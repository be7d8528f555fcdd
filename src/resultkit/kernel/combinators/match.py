"""Match – collapse a container by running exactly one branch.

For a ``Result`` the failure branch receives the ``ResultError``; for a
``Maybe`` the none branch takes no argument. Exceptions raised inside a
branch propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Callable

from resultkit.kernel.combinators.strategy import branch, evaluate, evaluate_async, settle


def match(source: Any, on_success: Callable[[Any], Any], on_failure: Callable[..., Any]) -> Any:
    return branch(evaluate(source), on_success, on_failure)


async def match_async(
    source: Any,
    on_success: Callable[[Any], Any],
    on_failure: Callable[..., Any],
) -> Any:
    """Branches may be plain functions or coroutine functions."""
    container = await evaluate_async(source)
    return await settle(branch(container, on_success, on_failure))


__all__ = ["match", "match_async"]
