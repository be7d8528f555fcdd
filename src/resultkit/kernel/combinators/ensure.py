"""Ensure – gate a success on a predicate."""

from __future__ import annotations

from typing import Any, Callable

from resultkit.kernel.combinators.strategy import evaluate, evaluate_async, require_result, settle
from resultkit.kernel.types.error import ResultError, throw_if_not_result_error
from resultkit.kernel.types.result import Err, Result


def ensure(source: Any, predicate: Callable[[Any], bool], error: ResultError) -> Result[Any]:
    result = require_result(evaluate(source), "ensure")
    return result.ensure(predicate, error)


async def ensure_async(
    source: Any,
    predicate: Callable[[Any], Any],
    error: ResultError,
) -> Result[Any]:
    """Like :func:`ensure`; *predicate* may return an awaitable ``bool``.

    A failed source passes through and the predicate is never called.
    """
    throw_if_not_result_error(error, "error")
    result = require_result(await evaluate_async(source), "ensure")
    if result.is_failure():
        return result
    if await settle(predicate(result.unwrap())):
        return result
    return Err(error)


__all__ = ["ensure", "ensure_async"]
