"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ArgumentError            (contract.py, also a ValueError)
    │   ├── ArgumentNullError
    │   └── ArgumentOutOfRangeError
    └── InvalidOperationError    (contract.py, also a RuntimeError)
        └── ResultFailureError

Expected failures never use these classes; they travel as ``Err(ResultError)``.
"""

from resultkit.kernel.errors.base import BaseError
from resultkit.kernel.errors.contract import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    InvalidOperationError,
    ResultFailureError,
)
from resultkit.kernel.errors.guards import (
    throw_if_negative_or_zero,
    throw_if_null,
    throw_if_null_or_whitespace,
)

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "BaseError",
    "InvalidOperationError",
    "ResultFailureError",
    "throw_if_negative_or_zero",
    "throw_if_null",
    "throw_if_null_or_whitespace",
]
