"""Observability – logging configuration for applications using resultkit."""
from resultkit.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
