"""Logging infrastructure."""
from .setup import setup_logging, get_logger, console

__all__ = ["setup_logging", "get_logger", "console"]
