"""
Bar rendering strategies.

A tracker holds one renderer chosen at construction and asks it for the
bracketed bar on every render. New styles subclass :class:`BarRenderer`.
"""
import math
from abc import ABC, abstractmethod

from ..core.exceptions import InvalidArgumentError


class BarRenderer(ABC):
    """Turns a completion percentage into a fixed-width bar."""

    glyph: str

    def __init__(self, glyph: str):
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise InvalidArgumentError("glyph", glyph, "must be a single character")
        self.glyph = glyph

    @staticmethod
    def filled_cells(percent: float, width: int) -> int:
        """Whole cells covered by ``percent``, clamped to ``[0, width]``."""
        return min(width, max(0, math.floor(percent / 100 * width)))

    @abstractmethod
    def cells(self, percent: float, width: int) -> str:
        """Return exactly ``width`` characters for the bar body."""

    def render(self, percent: float, width: int) -> str:
        """Return the bar wrapped in brackets."""
        return f"[{self.cells(percent, width)}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(glyph={self.glyph!r})"


class SimpleRenderer(BarRenderer):
    """Whole cells of a single glyph followed by spaces."""

    def __init__(self, glyph: str = "\u25aa"):  # ▪
        super().__init__(glyph)

    def cells(self, percent: float, width: int) -> str:
        filled = self.filled_cells(percent, width)
        return self.glyph * filled + " " * (width - filled)


class SubCellRenderer(BarRenderer):
    """
    Whole cells plus one partial cell for the fractional remainder.

    The partial cell uses the left eighth-block glyphs, so the bar moves in
    steps of 1/8 of a cell instead of whole cells.
    """

    PARTIALS = " \u258f\u258e\u258d\u258c\u258b\u258a\u2589"  # " ▏▎▍▌▋▊▉"

    def __init__(self, glyph: str = "\u2588"):  # █
        super().__init__(glyph)

    def cells(self, percent: float, width: int) -> str:
        filled = self.filled_cells(percent, width)
        if filled >= width:
            return self.glyph * width

        remainder = max(0.0, percent / 100 * width - filled)
        index = min(len(self.PARTIALS) - 1, math.floor(remainder * len(self.PARTIALS)))
        return self.glyph * filled + self.PARTIALS[index] + " " * (width - filled - 1)
