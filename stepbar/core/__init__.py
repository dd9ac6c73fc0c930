"""Core configuration and errors."""
from .config import Config, DisplayConfig, LogConfig, get_config, set_config
from .exceptions import StepbarError, InvalidArgumentError

__all__ = [
    "Config",
    "DisplayConfig",
    "LogConfig",
    "get_config",
    "set_config",
    "StepbarError",
    "InvalidArgumentError",
]
