"""Hover behaviour for heat map cells.

Each handler factory takes a :class:`HoverContext` (dataset, scales and
the tooltip element) and returns a callback with the signature
``(event, observation, target) -> None``. Callbacks keep no state between
events: every call writes the full tooltip content and cell style.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from tempmap import config
from tempmap.core.scales import Scales, month_name
from tempmap.core.surface import Element
from tempmap.core.utils import fmt_num
from tempmap.data.loader import Dataset, Observation

HoverCallback = Callable[["PointerEvent", Observation, Element], None]


@dataclass(frozen=True)
class PointerEvent:
    page_x: float
    page_y: float


@dataclass(frozen=True)
class HoverContext:
    dataset: Dataset
    scales: Scales
    tooltip: Element


def tooltip_lines(observation: Observation, base_temperature: float) -> List[str]:
    """Month and year, absolute temperature (2 dp), raw variance."""
    temperature = base_temperature + observation.variance
    return [
        f"{month_name(observation.month)} {observation.year}",
        f"{temperature:.2f}°C",
        f"{fmt_num(observation.variance)}°C",
    ]


def tooltip_text(observation: Observation, base_temperature: float) -> str:
    return "\n".join(tooltip_lines(observation, base_temperature))


def _highlight(target: Element) -> None:
    target.style("stroke", config.HIGHLIGHT_STROKE)
    target.style("opacity", config.HIGHLIGHT_OPACITY)


def on_hover_start(ctx: HoverContext) -> HoverCallback:
    def handle(event: PointerEvent, observation: Observation, target: Element) -> None:
        _highlight(target)
        ctx.tooltip.style("display", "block")

    return handle


def on_hover_move(ctx: HoverContext) -> HoverCallback:
    def handle(event: PointerEvent, observation: Observation, target: Element) -> None:
        tooltip = ctx.tooltip.clear()
        for line in tooltip_lines(observation, ctx.dataset.base_temperature):
            tooltip.append("div").attr("class", "tempmap-tooltip-line").text(line)
        tooltip.attr("data-year", observation.year)
        tooltip.style("left", f"{fmt_num(event.page_x + config.TOOLTIP_OFFSET_X)}px")
        tooltip.style("top", f"{fmt_num(event.page_y + config.TOOLTIP_OFFSET_Y)}px")
        _highlight(target)

    return handle


def on_hover_end(ctx: HoverContext) -> HoverCallback:
    def handle(event: PointerEvent, observation: Observation, target: Element) -> None:
        ctx.tooltip.style("display", "none")
        target.style("stroke", "none")
        target.style("opacity", 1)

    return handle


def bind_hover(cell: Element, observation: Observation, ctx: HoverContext) -> Element:
    """Attach start/move/end hover callbacks to one cell.

    *observation* becomes the cell's datum, which dispatch passes to each
    callback.
    """
    cell.datum = observation
    cell.on("mouseover", on_hover_start(ctx))
    cell.on("mousemove", on_hover_move(ctx))
    cell.on("mouseout", on_hover_end(ctx))
    return cell
