"""Scales: pure mappings from data values to pixels and colors.

Four scales drive the chart:

- ``x``: year -> pixel, linear over ``[minYear, maxYear + 1]``;
- ``y``: month name -> pixel, a band per calendar month;
- ``color``: variance -> hex color, continuous purple-to-orange ramp;
- ``legend_x``: variance -> pixel, the legend's own axis.

All of them are computed once from the dataset extrema and never change.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

import pandas as pd

from .layout import Layout
from .theme import RAMP

if TYPE_CHECKING:
    from tempmap.data.loader import Dataset

# Long English month names in calendar order (January first).
MONTHS: Tuple[str, ...] = tuple(calendar.month_name)[1:]

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def month_name(month: int) -> str:
    """Long name for a 1-based month number."""
    if not 1 <= int(month) <= 12:
        raise ValueError(f"month must be in 1..12, got {month!r}")
    return MONTHS[int(month) - 1]


# -----------------------------
# Tick generation
# -----------------------------
def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    """Return (i1, i2, inc) for 1/2/5 x 10^k ticks; negative inc means divide."""
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = round(start * inc)
        i2 = round(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = round(start / inc)
        i2 = round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def ticks(start: float, stop: float, count: int = 10) -> List[float]:
    """Roughly *count* evenly spaced, human-friendly values in [start, stop]."""
    if count <= 0:
        return []
    if start == stop:
        return [start]
    if not math.isfinite(stop - start):
        return []
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []
    if inc < 0:
        values = [i / -inc for i in range(i1, i2 + 1)]
    else:
        values = [i * inc for i in range(i1, i2 + 1)]
    return values[::-1] if reverse else values


# -----------------------------
# Color interpolation
# -----------------------------
def _parse_hex(color: str) -> Tuple[int, int, int]:
    raw = color.lstrip("#")
    if len(raw) == 3:
        raw = "".join(c * 2 for c in raw)
    if len(raw) != 6:
        raise ValueError(f"expected #rgb or #rrggbb color, got {color!r}")
    return int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16)


def interpolate_rgb(start: str, end: str) -> Callable[[float], str]:
    """Return t in [0, 1] -> hex color, linear in RGB between two colors."""
    r0, g0, b0 = _parse_hex(start)
    r1, g1, b1 = _parse_hex(end)

    def interpolate(t: float) -> str:
        t = max(0.0, min(1.0, t))
        r = round(r0 + (r1 - r0) * t)
        g = round(g0 + (g1 - g0) * t)
        b = round(b0 + (b1 - b0) * t)
        return f"#{r:02x}{g:02x}{b:02x}"

    return interpolate


def _normalize(value: float, d0: float, d1: float) -> float:
    """Position of *value* in [d0, d1] as a fraction; halved to avoid overflow."""
    return (value * 0.5 - d0 * 0.5) / (d1 * 0.5 - d0 * 0.5)


# -----------------------------
# Scale types
# -----------------------------
@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        # Degenerate domain: everything maps to the middle of the range.
        t = _normalize(value, d0, d1) if d1 != d0 else 0.5
        return r0 + t * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        t = _normalize(pixel, r0, r1) if r1 != r0 else 0.5
        return d0 + t * (d1 - d0)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class BandScale:
    """Ordinal values onto equal, non-overlapping bands (no padding)."""

    domain: Tuple[str, ...]
    range: Tuple[float, float]

    @property
    def step(self) -> float:
        if not self.domain:
            return 0.0
        return (self.range[1] - self.range[0]) / len(self.domain)

    @property
    def bandwidth(self) -> float:
        return self.step

    def __call__(self, value: str) -> Optional[float]:
        try:
            index = self.domain.index(value)
        except ValueError:
            return None
        return self.range[0] + self.step * index


@dataclass(frozen=True)
class SequentialScale:
    domain: Tuple[float, float]
    interpolator: Callable[[float], str]

    def __call__(self, value: float) -> str:
        d0, d1 = self.domain
        t = _normalize(value, d0, d1) if d1 != d0 else 0.0
        return self.interpolator(t)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class Scales:
    x: LinearScale
    y: BandScale
    color: SequentialScale
    legend_x: LinearScale
    cell_width: float


def _extent(values: pd.Series) -> Tuple[float, float]:
    """(min, max) of a column; (0, 0) when there is nothing to scan."""
    values = values.dropna()
    if values.empty:
        return 0, 0
    return values.min(), values.max()


def build_scales(
    dataset: "Dataset",
    layout: Layout,
    ramp: Sequence[str] = RAMP,
) -> Scales:
    """Derive the chart's scales from the dataset extrema and the layout."""
    frame = dataset.to_frame()
    year_min, year_max = (int(v) for v in _extent(frame["year"]))
    var_min, var_max = (float(v) for v in _extent(frame["variance"]))

    left = layout.margin.left
    right = layout.width - layout.margin.right
    x = LinearScale(domain=(year_min, year_max + 1), range=(left, right))
    y = BandScale(
        domain=MONTHS,
        range=(layout.margin.top, layout.height - layout.margin.bottom),
    )
    color = SequentialScale(
        domain=(var_min, var_max),
        interpolator=interpolate_rgb(ramp[0], ramp[1]),
    )
    legend_x = LinearScale(domain=(var_min, var_max), range=(left, right))

    # A single year spans no distance; divide by one year instead of zero.
    cell_width = layout.inner_width / max(year_max - year_min, 1)
    return Scales(x=x, y=y, color=color, legend_x=legend_x, cell_width=cell_width)
