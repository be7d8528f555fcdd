"""Testing support – Hypothesis strategies for resultkit containers."""

from resultkit.testing.strategies import maybe_strategy, result_error_strategy, result_strategy

__all__ = ["maybe_strategy", "result_error_strategy", "result_strategy"]
