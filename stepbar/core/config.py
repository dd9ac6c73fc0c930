"""
Configuration management for stepbar.

Display defaults and logging settings, held in a process-wide instance.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DisplayConfig:
    """Progress line defaults."""
    bar_width: int = 21                  # Glyph cells between the brackets
    bar_glyph: str = "\u25aa"             # ▪
    max_update_frequency_hz: float = 10.0
    show_throughput: bool = False
    prefix: str = ""


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5


@dataclass
class Config:
    """Main application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Optional[Config]):
    """Set the global configuration instance (None restores defaults)."""
    global _config
    _config = config
