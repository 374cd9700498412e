"""Legend measurement and row wrapping.

Layout is a single pass: the starting offset comes from aligning the total
legend width, and rows created by wrapping restart at 0 without being
re-aligned individually.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from svgcharts.measure import TextSize
from svgcharts.util import Align, Point

LEGEND_WIDTH = 25.0
LEGEND_TEXT_MARGIN = 3.0
LEGEND_MARGIN = 8.0
LEGEND_MARKER_RADIUS = 5.0


@dataclass(frozen=True)
class LegendLayout:
    positions: list[Point]
    top: float
    unit_height: float

    @property
    def height(self) -> float:
        """Height of all rows, not counting the legend margin."""
        if not self.positions:
            return 0.0
        return self.unit_height + self.top


def measure_legends(measure, font_family: str, font_size: float, names: Sequence[str]) -> tuple[float, list[float]]:
    """Return the total width (with gaps) and the width of each entry."""
    widths: list[float] = []
    for name in names:
        size: TextSize = measure(font_family, font_size, name)
        widths.append(LEGEND_WIDTH + LEGEND_TEXT_MARGIN + size.width)
    total = sum(widths) + LEGEND_MARGIN * max(len(widths) - 1, 0)
    return total, widths


def layout_legends(
    widths: Sequence[float],
    available_width: float,
    align: Align,
    unit_height: float,
    gap: float = LEGEND_MARGIN,
) -> LegendLayout:
    total = sum(widths) + gap * max(len(widths) - 1, 0)
    left = 0.0
    if total < available_width:
        if align == Align.RIGHT:
            left = available_width - total
        elif align == Align.CENTER:
            left = (available_width - total) / 2.0
        left = max(left, 0.0)

    top = 0.0
    positions: list[Point] = []
    for width in widths:
        if left + width > available_width:
            left = 0.0
            top += unit_height
        positions.append(Point(left, top))
        left += width + gap
    return LegendLayout(positions=positions, top=top, unit_height=unit_height)
