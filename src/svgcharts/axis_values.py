from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from svgcharts.util import format_float, is_missing

AXIS_SPAN_EPSILON = 1.0


@dataclass(frozen=True)
class AxisValueParams:
    data_list: Sequence[Any] = field(default_factory=list)
    split_number: int = 6
    reverse: bool = False
    min: float | None = None
    max: float | None = None
    formatter: str | None = None


@dataclass(frozen=True)
class AxisValues:
    data: list[str]
    min: float
    max: float
    split_number: int
    reverse: bool = False

    @property
    def is_degenerate(self) -> bool:
        return self.max <= self.min

    def get_offset_height(self, value: Any, max_height: float) -> float:
        """Map a data value to a pixel offset within ``[0, max_height]``.

        Reversed axes put larger values closer to 0 (screen-space up).
        """
        if self.is_degenerate or is_missing(value):
            return max_height
        percent = (float(value) - self.min) / (self.max - self.min)
        percent = min(max(percent, 0.0), 1.0)
        if self.reverse:
            return max_height * (1.0 - percent)
        return max_height * percent


def format_label(value: float, formatter: str | None = None) -> str:
    text = format_float(value)
    if formatter:
        return formatter.replace("{c}", text)
    return text


def get_axis_values(params: AxisValueParams) -> AxisValues:
    split_number = max(int(params.split_number), 1)
    samples = [float(value) for value in params.data_list if not is_missing(value)]
    if not samples and params.min is None and params.max is None:
        return AxisValues(
            data=[format_label(0.0, params.formatter)],
            min=0.0,
            max=0.0,
            split_number=1,
            reverse=params.reverse,
        )

    min_value = float(params.min) if params.min is not None else min(samples, default=0.0)
    max_value = float(params.max) if params.max is not None else max(samples, default=0.0)
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    if max_value == min_value:
        max_value = min_value + AXIS_SPAN_EPSILON

    boundaries = np.linspace(min_value, max_value, split_number + 1)
    if params.reverse:
        boundaries = boundaries[::-1]
    data = [format_label(float(value), params.formatter) for value in boundaries]
    return AxisValues(
        data=data,
        min=min_value,
        max=max_value,
        split_number=split_number,
        reverse=params.reverse,
    )
