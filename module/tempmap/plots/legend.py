"""Color legend: horizontal gradient bar with its own variance axis."""

from __future__ import annotations

from typing import List, Optional, Tuple

from tempmap import config
from tempmap.core.axes import axis_bottom
from tempmap.core.layout import Layout
from tempmap.core.scales import Scales
from tempmap.core.surface import Element
from tempmap.core.utils import fmt_num, translate


def gradient_stops(scales: Scales) -> List[Tuple[str, str]]:
    """(offset, color) pairs from the color scale's tick values.

    A stop's offset is its rank among the ticks, so stops are evenly spaced
    across the bar.
    """
    values = scales.color.ticks()
    n = len(values)
    stops: List[Tuple[str, str]] = []
    for i, value in enumerate(values):
        pct = i / (n - 1) * 100 if n > 1 else 0.0
        stops.append((f"{fmt_num(pct, 2)}%", scales.color(value)))
    return stops


def draw_legend(
    svg: Element,
    scales: Scales,
    layout: Layout,
    legend_id: str = "legend",
    gradient_id: Optional[str] = None,
) -> Element:
    """Append the gradient definition and the legend group to *svg*."""
    gradient_id = gradient_id or f"{legend_id}-gradient"
    gradient = svg.append("defs").append("linearGradient").attr("id", gradient_id)
    for offset, color in gradient_stops(scales):
        gradient.append("stop").attr("offset", offset).attr("stop-color", color)

    top = layout.height - layout.margin.bottom + config.LEGEND_OFFSET
    group = svg.append("g").attr("id", legend_id).attr("class", "tempmap-legend")
    group.attr("transform", translate(0, top))
    group.append("rect").attr("class", "tempmap-legend-bar").attr(
        "x", layout.margin.left
    ).attr("y", 0).attr("width", layout.inner_width).attr(
        "height", config.LEGEND_HEIGHT
    ).attr("fill", f"url(#{gradient_id})")

    tick_count = max(int(layout.inner_width // config.LEGEND_TICK_SPACING), 2)
    axis_bottom(group, scales.legend_x, tick_count=tick_count).attr(
        "transform", translate(0, config.LEGEND_HEIGHT)
    )
    return group
