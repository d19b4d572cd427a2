"""Axis generators: draw a scale's ticks and labels into an SVG group.

Output follows the usual SVG axis shape: a ``path.domain`` spanning the
scale's range and one ``g.tick`` per tick value (a 6px line plus a text
label). Band scales place their ticks at band centers; linear scales use
``scale.ticks(count)``. The caller positions the group with a transform.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

from .scales import BandScale, LinearScale
from .surface import Element
from .utils import fmt_num, translate

TICK_SIZE = 6
TICK_PADDING = 3

AxisScale = Union[LinearScale, BandScale]
TickFormat = Callable[[object], str]


def _tick_positions(scale: AxisScale, tick_count: int) -> List[Tuple[object, float]]:
    if isinstance(scale, BandScale):
        offset = scale.bandwidth / 2
        return [(v, scale(v) + offset) for v in scale.domain]
    return [(v, scale(v)) for v in scale.ticks(tick_count)]


def _default_format(value: object) -> str:
    if isinstance(value, (int, float)):
        return fmt_num(value)
    return str(value)


def year_format(value: object) -> str:
    """Integer tick labels (no thousands separator)."""
    return str(int(round(float(value))))


def _axis(
    parent: Element,
    scale: AxisScale,
    orient: str,
    tick_count: int,
    tick_format: Optional[TickFormat],
    element_id: Optional[str],
) -> Element:
    fmt = tick_format or _default_format
    r0, r1 = scale.range
    g = parent.append("g").attr("class", f"tempmap-axis tempmap-axis--{orient}")
    if element_id:
        g.attr("id", element_id)

    if orient == "bottom":
        d = f"M{fmt_num(r0)},{TICK_SIZE}V0H{fmt_num(r1)}V{TICK_SIZE}"
    else:
        d = f"M{-TICK_SIZE},{fmt_num(r0)}H0V{fmt_num(r1)}H{-TICK_SIZE}"
    g.append("path").attr("class", "domain").attr("d", d)

    for value, pos in _tick_positions(scale, tick_count):
        tick = g.append("g").attr("class", "tick")
        text = fmt(value)
        if orient == "bottom":
            tick.attr("transform", translate(pos, 0))
            tick.append("line").attr("y2", TICK_SIZE)
            tick.append("text").attr("y", TICK_SIZE + TICK_PADDING).attr(
                "dy", "0.71em"
            ).attr("text-anchor", "middle").text(text)
        else:
            tick.attr("transform", translate(0, pos))
            tick.append("line").attr("x2", -TICK_SIZE)
            tick.append("text").attr("x", -(TICK_SIZE + TICK_PADDING)).attr(
                "dy", "0.32em"
            ).attr("text-anchor", "end").text(text)
    return g


def axis_bottom(
    parent: Element,
    scale: AxisScale,
    tick_count: int = 10,
    tick_format: Optional[TickFormat] = None,
    element_id: Optional[str] = None,
) -> Element:
    """Horizontal axis with labels below the line."""
    return _axis(parent, scale, "bottom", tick_count, tick_format, element_id)


def axis_left(
    parent: Element,
    scale: AxisScale,
    tick_count: int = 10,
    tick_format: Optional[TickFormat] = None,
    element_id: Optional[str] = None,
) -> Element:
    """Vertical axis with labels to the left of the line."""
    return _axis(parent, scale, "left", tick_count, tick_format, element_id)
