"""Observability – structured logging helpers."""
from resultkit.observability.logging.factory import configure_logging
from resultkit.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
