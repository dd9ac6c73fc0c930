"""
Progress tracking for iterative loops.

Renders a single progress line that is redrawn in place with backspaces,
throttled to a maximum update frequency, with ETA and optional throughput.
"""
import math
import numbers
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from ..core.config import get_config
from ..core.exceptions import InvalidArgumentError
from ..logging import get_logger
from .renderers import BarRenderer, SimpleRenderer
from .timefmt import format_duration

logger = get_logger("progress")

# Shown in place of the ETA before any step has completed
UNKNOWN_ETA = "--:--:--"

# Completion stamps carry milliseconds up to this many seconds
MILLISECOND_STAMP_LIMIT = 60.0


@dataclass(frozen=True)
class StepOptions:
    """Per-call options for :meth:`ProgressTracker.advance`."""
    force_display: bool = True          # False skips rendering for this call
    trailing_message: str = ""          # Appended after the metrics
    interleaved_message: str = ""       # Scrolls above the progress line
    manual_step: Optional[int] = None    # Absolute step instead of +1


def _require_positive(name: str, value, finite: bool) -> float:
    """Validate a positive real scalar."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(name, value, "must be a number")
    if not value > 0:
        raise InvalidArgumentError(name, value, "must be greater than zero")
    if finite and math.isinf(value):
        raise InvalidArgumentError(name, value, "must be finite")
    return value


class ProgressTracker:
    """
    Tracks a fixed number of steps and draws an in-place progress line.

    One caller owns a tracker and calls :meth:`advance` once per unit of
    work. Instances are not thread-safe; share one across threads only with
    external synchronization.

    Erasing relies on the terminal honouring backspace, so a line that wraps
    over several terminal rows is not fully erased.
    """

    def __init__(
        self,
        total_steps: float,
        show_throughput: Optional[bool] = None,
        prefix: Optional[str] = None,
        max_update_frequency_hz: Optional[float] = None,
        renderer: Optional[BarRenderer] = None,
        stream: Optional[TextIO] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize progress tracker.

        Args:
            total_steps: Expected number of steps (finite, > 0)
            show_throughput: Append iterations/second to the line
            prefix: Text shown before the bar
            max_update_frequency_hz: Upper bound on renders per second
            renderer: Bar drawing strategy (SimpleRenderer by default)
            stream: Output stream (sys.stdout by default)
            clock: Time source in seconds (time.monotonic by default)

        Raises:
            InvalidArgumentError: If an option fails validation
        """
        display = get_config().display

        if show_throughput is None:
            show_throughput = display.show_throughput
        if prefix is None:
            prefix = display.prefix
        if max_update_frequency_hz is None:
            max_update_frequency_hz = display.max_update_frequency_hz
        if renderer is None:
            renderer = SimpleRenderer(display.bar_glyph)

        self.total_steps = _require_positive("total_steps", total_steps, finite=True)
        frequency = _require_positive(
            "max_update_frequency_hz", max_update_frequency_hz, finite=False
        )
        if not isinstance(prefix, str):
            raise InvalidArgumentError("prefix", prefix, "must be a string")
        if not isinstance(renderer, BarRenderer):
            raise InvalidArgumentError("renderer", renderer, "must be a BarRenderer")

        self.show_throughput = bool(show_throughput)
        self.prefix = prefix
        self.min_render_interval = 1.0 / frequency
        self.renderer = renderer
        self.bar_width = display.bar_width
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock or time.monotonic

        self.current_step: int = 0
        self.last_rendered_length = 0
        self.start_time = self.clock()
        self.last_render_time = self.start_time

        logger.debug(
            f"Tracker created: total={self.total_steps}, "
            f"interval={self.min_render_interval:.3f}s, renderer={self.renderer!r}"
        )

    @property
    def bar_glyph(self) -> str:
        """Glyph filling the completed part of the bar."""
        return self.renderer.glyph

    @property
    def percent(self) -> float:
        """Completion as a percentage; not clamped to 100."""
        return self.current_step / self.total_steps * 100

    @property
    def finished(self) -> bool:
        return self.percent >= 100

    @property
    def elapsed(self) -> float:
        """Seconds since construction."""
        return self.clock() - self.start_time

    @property
    def eta(self) -> Optional[float]:
        """
        Estimated seconds remaining from the average time per step.

        Returns None before any step has completed.
        """
        if self.current_step <= 0:
            return None
        time_per_step = self.elapsed / self.current_step
        return time_per_step * max(0, self.total_steps - self.current_step)

    @property
    def rate(self) -> float:
        """Steps per second since construction (0.0 with no elapsed time)."""
        elapsed = self.elapsed
        if elapsed <= 0:
            return 0.0
        return self.current_step / elapsed

    def advance(self, options: Optional[StepOptions] = None) -> bool:
        """
        Record one completed step and redraw the line if due.

        Args:
            options: Per-call options; defaults for every field if None

        Returns:
            True if the progress line was written
        """
        options = options or StepOptions()

        if options.manual_step is None:
            self.current_step += 1
        else:
            self.current_step = options.manual_step

        if not self._should_render(options.force_display):
            return False

        self._render(options.trailing_message, options.interleaved_message)
        return True

    def _should_render(self, force_display: bool) -> bool:
        """Apply the throttle; completion is never throttled."""
        if not force_display:
            return False
        if self.finished:
            return True
        return self.clock() - self.last_render_time >= self.min_render_interval

    def format_line(self, trailing_message: str = "") -> str:
        """Build the progress line for the current state."""
        percent = self.percent
        bar = self.renderer.render(percent, self.bar_width)

        eta = self.eta
        eta_text = UNKNOWN_ETA if eta is None else format_duration(eta)

        throughput = f"{self.rate:.3f} iter/s" if self.show_throughput else ""

        return (
            f"{self.prefix}{bar}  {percent:6.2f}%  ETA: {eta_text}  "
            f"{throughput}{trailing_message}  "
        )

    def _render(self, trailing_message: str, interleaved_message: str):
        """Erase the previous line and write the new one."""
        line = self.format_line(trailing_message)
        previous = self.last_rendered_length
        erase = "\b" * previous

        if self.finished:
            elapsed = self.elapsed
            stamp = format_duration(
                elapsed, milliseconds=elapsed <= MILLISECOND_STAMP_LIMIT
            )
            line = f"{line.rstrip()} done {stamp}"

        # Backspace only moves the cursor, so whatever lands on the old row
        # is padded with spaces to cover the previous line
        if interleaved_message:
            first, _, rest = interleaved_message.partition("\n")
            interleaved_message = first.ljust(previous) + "\n" + rest
            if rest and not rest.endswith("\n"):
                interleaved_message += "\n"
        else:
            line = line.ljust(previous)

        if self.finished:
            self.stream.write(erase + interleaved_message + line + "\n")
            logger.debug(f"Completed {self.current_step} steps in {stamp}")
        else:
            self.stream.write(erase + interleaved_message + line)

        self.stream.flush()
        self.last_rendered_length = len(line)
        self.last_render_time = self.clock()
