"""Kernel – containers, errors and combinators. No framework dependencies."""

from resultkit.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    BaseError,
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
)

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "BaseError",
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
]
