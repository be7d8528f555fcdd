"""Combinator layer – one function per operation, sync and async.

Every ``*_async`` combinator accepts any source shape (``Result``, ``Maybe``,
``Try``, ``TryAsync``, or an awaitable of one) and any handler shape (plain
function or coroutine function).
"""

from resultkit.kernel.combinators.bind import bind, bind_async
from resultkit.kernel.combinators.ensure import ensure, ensure_async
from resultkit.kernel.combinators.join import MAX_JOIN_ARITY, MIN_JOIN_ARITY, join, join_async
from resultkit.kernel.combinators.match import match, match_async
from resultkit.kernel.combinators.reduce import reduce, reduce_async, reduce_with, reduce_with_async
from resultkit.kernel.combinators.strategy import evaluate, evaluate_async
from resultkit.kernel.combinators.tap import tap, tap_async

__all__ = [
    "MAX_JOIN_ARITY",
    "MIN_JOIN_ARITY",
    "bind",
    "bind_async",
    "ensure",
    "ensure_async",
    "evaluate",
    "evaluate_async",
    "join",
    "join_async",
    "match",
    "match_async",
    "reduce",
    "reduce_async",
    "reduce_with",
    "reduce_with_async",
    "tap",
    "tap_async",
]
