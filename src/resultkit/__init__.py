"""
resultkit – Result / Maybe containers and their combinators.

Import path convention::

    from resultkit import Result, ResultError, Maybe, Try
    from resultkit.kernel.combinators import bind_async, join_async
    from resultkit.observability import configure_logging
"""

from resultkit.kernel.combinators import (
    bind,
    bind_async,
    ensure,
    ensure_async,
    join,
    join_async,
    match,
    match_async,
    reduce,
    reduce_async,
    reduce_with,
    reduce_with_async,
    tap,
    tap_async,
)
from resultkit.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    InvalidOperationError,
    ResultFailureError,
)
from resultkit.kernel.types import (
    UNIT,
    Err,
    Maybe,
    Nothing,
    Ok,
    Result,
    ResultError,
    ResultErrorCode,
    Some,
    Try,
    TryAsync,
    Unit,
    attempt,
    attempt_async,
    flatten,
    to_failure,
    to_success,
    where,
)

__version__ = "0.1.0"
__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "Err",
    "InvalidOperationError",
    "Maybe",
    "Nothing",
    "Ok",
    "Result",
    "ResultError",
    "ResultErrorCode",
    "ResultFailureError",
    "Some",
    "Try",
    "TryAsync",
    "UNIT",
    "Unit",
    "__version__",
    "attempt",
    "attempt_async",
    "bind",
    "bind_async",
    "ensure",
    "ensure_async",
    "flatten",
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
    "to_failure",
    "to_success",
    "where",
]
