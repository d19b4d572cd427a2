"""Canvas geometry: viewport size and the margins around the plot area."""

from __future__ import annotations

from dataclasses import dataclass, field

from tempmap import config


@dataclass(frozen=True)
class Margin:
    top: int = config.MARGIN_TOP
    left: int = config.MARGIN_LEFT
    right: int = config.MARGIN_RIGHT
    bottom: int = config.MARGIN_BOTTOM


@dataclass(frozen=True)
class Layout:
    """Fixed for the lifetime of a rendered page; no resize handling."""

    width: int = config.VIEWPORT_WIDTH
    height: int = config.VIEWPORT_HEIGHT
    margin: Margin = field(default_factory=Margin)

    @classmethod
    def from_viewport(cls, width: int, height: int) -> "Layout":
        return cls(width=int(width), height=int(height))

    @property
    def inner_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom
