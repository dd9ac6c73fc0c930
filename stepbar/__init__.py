"""
stepbar - in-place terminal progress bars

A single-line progress indicator for long-running loops, with throttled
redraws, ETA and throughput, redrawn in place with backspaces.
"""

__version__ = "1.0.0"

from .core.exceptions import StepbarError, InvalidArgumentError
from .progress import (
    ProgressTracker,
    StepOptions,
    BarRenderer,
    SimpleRenderer,
    SubCellRenderer,
)

__all__ = [
    "__version__",
    "ProgressTracker",
    "StepOptions",
    "BarRenderer",
    "SimpleRenderer",
    "SubCellRenderer",
    "StepbarError",
    "InvalidArgumentError",
]
