"""
Logging configuration for stepbar.

Provides:
- Rich console output on stderr, kept apart from the progress stream
- Optional rotating file logs in a human-readable format
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..core.config import get_config


# Global console instance (stderr, so stdout stays free for progress lines)
console = Console(stderr=True)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for file logs."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(name)-30s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> None:
    """
    Initialize the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); config default if None
        log_file: Also write logs to this file, rotated by size
    """
    config = get_config()
    level = level or config.log.level

    # Root logger for the application
    root_logger = logging.getLogger("stepbar")
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=True,
    )
    console_handler.setLevel(getattr(logging, level.upper()))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.log.max_file_size,
            backupCount=config.log.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # File captures everything
        file_handler.setFormatter(HumanFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (will be prefixed with 'stepbar.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"stepbar.{name}")
