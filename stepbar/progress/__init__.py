"""Progress tracking system."""
from .tracker import ProgressTracker, StepOptions
from .renderers import BarRenderer, SimpleRenderer, SubCellRenderer
from .timefmt import format_duration

__all__ = [
    "ProgressTracker",
    "StepOptions",
    "BarRenderer",
    "SimpleRenderer",
    "SubCellRenderer",
    "format_duration",
]
