"""HeatmapArtist: one SVG rect per (year, month) observation.

Cells are placed by the year and month scales and filled by the variance
color scale. Every cell carries ``data-month`` (zero-based), ``data-year``
and ``data-temp`` for inspection, an SVG ``<title>`` with the tooltip
text, and hover callbacks bound on the render surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tempmap.core.axes import axis_bottom, axis_left, year_format
from tempmap.core.figure import Page
from tempmap.core.layout import Layout
from tempmap.core.scales import Scales, month_name
from tempmap.core.surface import Element
from tempmap.core.utils import translate
from tempmap.data.loader import Dataset
from tempmap.interaction import HoverContext, bind_hover, tooltip_text
from tempmap.plots.legend import draw_legend

logger = logging.getLogger("tempmap.heatmap")


@dataclass
class HeatmapArtist:
    """Heat map of monthly variance, drawn into a Page's ``#app`` container."""

    dataset: Dataset
    scales: Scales
    layout: Layout
    show_legend: bool = True

    def render(self, surface: Page) -> Element:
        """Append the chart's svg to *surface* and return it."""
        layout, scales = self.layout, self.scales
        # Gradient ids stay unique when several charts share one page.
        index = len(surface.app.select_all("svg"))
        gradient_id = "legend-gradient" if index == 0 else f"legend-gradient-{index + 1}"
        svg = surface.app.append("svg").attr("class", "tempmap-heatmap")
        svg.attr("width", layout.width).attr("height", layout.height)

        axis_bottom(svg, scales.x, tick_format=year_format, element_id="x-axis").attr(
            "transform", translate(0, layout.height - layout.margin.bottom)
        )
        axis_left(svg, scales.y, element_id="y-axis").attr(
            "transform", translate(layout.margin.left, 0)
        )

        ctx = HoverContext(dataset=self.dataset, scales=scales, tooltip=surface.tooltip)
        cells = svg.append("g").attr("class", "tempmap-cells")
        base = self.dataset.base_temperature
        for obs in self.dataset.monthly_variance:
            cell = cells.append("rect").attr("class", "cell tempmap-cell")
            cell.attr("data-month", obs.month - 1)
            cell.attr("data-year", obs.year)
            cell.attr("data-temp", self.dataset.temperature(obs))
            cell.attr("x", scales.x(obs.year))
            cell.attr("y", scales.y(month_name(obs.month)))
            cell.attr("width", scales.cell_width)
            cell.attr("height", scales.y.bandwidth)
            cell.attr("fill", scales.color(obs.variance))
            cell.style("stroke", "none").style("opacity", 1)
            cell.append("title").text(tooltip_text(obs, base))
            bind_hover(cell, obs, ctx)
        logger.debug("Rendered %d cells", len(self.dataset))

        if self.show_legend:
            draw_legend(svg, scales, layout, gradient_id=gradient_id)
        return svg


def render(dataset: Dataset, scales: Scales, layout: Layout, surface: Page) -> Element:
    """Draw the heat map for *dataset* onto *surface*."""
    return HeatmapArtist(dataset=dataset, scales=scales, layout=layout).render(surface)
