"""Join – fan-in of 2..10 independent results through one combiner.

Operands are scanned strictly left to right and the first failure wins: its
error is returned verbatim and the combiner is never called. Only when every
operand succeeded does the combiner run, receiving the unwrapped values
positionally; its own ``Result`` is the output, so it may fail too.

``join_async`` wraps every operand in a task, cold ``TryAsync`` operands and
bare coroutines included, and awaits them together (``asyncio.gather``) before
the positional scan. The scan order never depends on which operand settles
first. If any operand raises, or the call itself is cancelled, the remaining
tasks are cancelled and drained before the exception propagates, so no
operand outlives the call.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterable

from resultkit.kernel.combinators.strategy import (
    evaluate,
    evaluate_async,
    require_result,
    settle,
)
from resultkit.kernel.errors.contract import ArgumentOutOfRangeError
from resultkit.kernel.types.result import Err, Result

MIN_JOIN_ARITY = 2
MAX_JOIN_ARITY = 10

logger = logging.getLogger(__name__)


def _checked(operands: Iterable[Any]) -> list[Any]:
    items = list(operands)
    if not MIN_JOIN_ARITY <= len(items) <= MAX_JOIN_ARITY:
        raise ArgumentOutOfRangeError(
            "operands",
            len(items),
            f"join accepts {MIN_JOIN_ARITY}..{MAX_JOIN_ARITY} operands, got {len(items)}",
        )
    return items


def _first_failure(results: Iterable[Result[Any]]) -> tuple[Err[Any] | None, list[Any]]:
    values: list[Any] = []
    for position, result in enumerate(results):
        require_result(result, "join")
        if result.is_failure():
            logger.debug("join short-circuited position=%d error=%s", position, result.error)
            return Err(result.error), values
        values.append(result.unwrap())
    return None, values


async def _settle_all(items: list[Any]) -> list[Any]:
    """Await every operand concurrently; none outlives the call."""
    tasks = [asyncio.ensure_future(evaluate_async(item)) for item in items]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def join(operands: Iterable[Any], combiner: Callable[..., Any]) -> Result[Any]:
    """Synchronous join over ``Result``/``Try`` operands.

    ``Try`` operands after the first failure are never run::

        total = join([parse(a), parse(b)], lambda x, y: Result.success(x + y))
    """
    items = _checked(operands)
    failure, values = _first_failure(evaluate(item) for item in items)
    if failure is not None:
        return failure
    return require_result(evaluate(combiner(*values)), "join combiner")


async def join_async(operands: Iterable[Any], combiner: Callable[..., Any]) -> Result[Any]:
    """Asynchronous join; operands and the combiner may be sync or async."""
    items = _checked(operands)
    results = await _settle_all(items)
    failure, values = _first_failure(results)
    if failure is not None:
        return failure
    outcome = await settle(combiner(*values))
    return require_result(await evaluate_async(outcome), "join combiner")


__all__ = ["MAX_JOIN_ARITY", "MIN_JOIN_ARITY", "join", "join_async"]
