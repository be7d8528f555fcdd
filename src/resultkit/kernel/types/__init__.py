"""Kernel container types – public re-export surface.

Modules:
  error.py    – ResultError, ResultErrorCode
  result.py   – Result, Ok, Err
  option.py   – Maybe, Some, Nothing, where, flatten
  deferred.py – Try, TryAsync, attempt, attempt_async
  unit.py     – Unit, UNIT
  check.py    – is_default, is_null
"""

from resultkit.kernel.types.check import is_default, is_null
from resultkit.kernel.types.deferred import Try, TryAsync, attempt, attempt_async
from resultkit.kernel.types.error import (
    DEFAULT_CODE,
    DEFAULT_NAME,
    ResultError,
    ResultErrorCode,
)
from resultkit.kernel.types.option import Maybe, Nothing, Option, Some, flatten, where
from resultkit.kernel.types.result import Err, Ok, Result, to_failure, to_success
from resultkit.kernel.types.unit import UNIT, Unit

__all__ = [
    "DEFAULT_CODE",
    "DEFAULT_NAME",
    "Err",
    "Maybe",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "ResultError",
    "ResultErrorCode",
    "Some",
    "Try",
    "TryAsync",
    "UNIT",
    "Unit",
    "attempt",
    "attempt_async",
    "flatten",
    "is_default",
    "is_null",
    "to_failure",
    "to_success",
    "where",
]
