"""Smooth curves through ordered points.

Uniform Catmull-Rom splines converted to cubic Bezier segments. Every input
point is a segment end point, so the curve passes through all of them in order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from svgcharts.util import Point


@dataclass(frozen=True)
class BezierSegment:
    """A single cubic Bezier curve segment."""
    p0: Point  # Start point
    p1: Point  # Control point 1
    p2: Point  # Control point 2
    p3: Point  # End point

    def translate(self, dx: float, dy: float) -> "BezierSegment":
        return BezierSegment(
            p0=Point(self.p0.x + dx, self.p0.y + dy),
            p1=Point(self.p1.x + dx, self.p1.y + dy),
            p2=Point(self.p2.x + dx, self.p2.y + dy),
            p3=Point(self.p3.x + dx, self.p3.y + dy),
        )


def _to_point(v: np.ndarray) -> Point:
    return Point(float(v[0]), float(v[1]))


def catmull_rom_segments(points: Sequence[Point], tension: float = 1.0) -> list[BezierSegment]:
    """Convert a polyline into Bezier segments of a Catmull-Rom spline.

    End points are duplicated so the first and last segments keep a tangent
    pointing along the neighbouring chord. ``tension`` scales the tangents;
    0 degenerates to straight segments.
    """
    if len(points) < 2:
        return []
    pts = np.array([[p.x, p.y] for p in points], dtype=float)
    padded = np.vstack([pts[0], pts, pts[-1]])
    factor = tension / 6.0

    segments: list[BezierSegment] = []
    for i in range(1, len(padded) - 2):
        prev_pt, start, end, next_pt = padded[i - 1], padded[i], padded[i + 1], padded[i + 2]
        c1 = start + (end - prev_pt) * factor
        c2 = end - (next_pt - start) * factor
        segments.append(
            BezierSegment(
                p0=_to_point(start),
                p1=_to_point(c1),
                p2=_to_point(c2),
                p3=_to_point(end),
            )
        )
    return segments
