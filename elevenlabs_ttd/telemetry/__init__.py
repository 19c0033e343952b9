"""Logging helpers for request observability."""

from .logger import RequestLogger, configure_logging

__all__ = ["RequestLogger", "configure_logging"]
