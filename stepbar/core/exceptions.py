"""
Custom exceptions for stepbar.

Provides meaningful error messages and suggestions for common issues.
"""
from typing import Any, List, Optional


class StepbarError(Exception):
    """Base exception for stepbar errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []


# Suggestions shown for each validated argument
ARGUMENT_SUGGESTIONS = {
    "total_steps": [
        "Pass the number of loop iterations, e.g. len(items)",
        "total_steps must be a finite number greater than zero",
    ],
    "max_update_frequency_hz": [
        "Use a positive redraw rate such as 10 (redraws per second)",
        "Pass float('inf') to redraw on every step",
    ],
    "prefix": [
        "Pass the prefix as a string, e.g. prefix='Loading '",
    ],
    "renderer": [
        "Use SimpleRenderer() or SubCellRenderer()",
        "Custom renderers must subclass BarRenderer",
    ],
    "glyph": [
        "Bar glyphs must be exactly one character, e.g. '#'",
    ],
}


class InvalidArgumentError(StepbarError, ValueError):
    """A tracker or renderer option failed validation."""

    def __init__(self, name: str, value: Any, requirement: str):
        super().__init__(
            f"Invalid value for '{name}': {value!r} ({requirement})",
            suggestions=ARGUMENT_SUGGESTIONS.get(name, []),
        )
        self.name = name
        self.value = value
        self.requirement = requirement
