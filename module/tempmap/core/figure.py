"""Page: top-level render surface; writes self-contained HTML.

The page owns an element tree with two fixed nodes:

- ``#app``: the container artists append their svg to, and
- ``#tooltip``: a hidden box that hover callbacks fill and move.

``write_html()`` serializes the tree inside a shell with inline CSS. The
written file needs no JavaScript: cells highlight through ``:hover`` rules
and show their values through SVG ``<title>`` text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tempmap import config

from .surface import Element
from .theme import THEME
from .utils import esc, fmt_num


class Page:
    """Render surface with an ``#app`` container and a hidden ``#tooltip``."""

    def __init__(
        self,
        title: str = config.PAGE_TITLE,
        description: Optional[str] = None,
    ) -> None:
        self.title = title
        self.description = description
        self.root = Element("body")
        header = self.root.append("header").attr("class", "tempmap-header")
        header.append("h1").attr("id", "title").text(title)
        if description:
            header.append("p").attr("id", "description").text(description)
        self.app: Element = self.root.append("div").attr("id", "app")
        self.tooltip: Element = (
            self.root.append("div")
            .attr("id", "tooltip")
            .attr("class", "tempmap-tooltip")
            .style("display", "none")
        )

    # Public API -----------------------------------------------------
    def select(self, selector: str) -> Optional[Element]:
        return self.root.select(selector)

    def select_all(self, selector: str):
        return self.root.select_all(selector)

    def write_html(self, path: str) -> None:
        """Write one self-contained HTML file (no JS)."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8") as f:
            f.write(self._build_html())

    # Internal helpers -----------------------------------------------
    def _build_html(self) -> str:
        body = self.root.to_html(indent=0)
        bg = THEME["background"]
        surface = THEME["surface"]
        fg = THEME["foreground"]
        border = THEME["border"]
        muted = THEME["muted"]
        tooltip_bg = THEME["tooltip_bg"]
        tooltip_fg = THEME["tooltip_fg"]
        highlight = config.HIGHLIGHT_STROKE
        opacity = fmt_num(config.HIGHLIGHT_OPACITY)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{esc(self.title)}</title>
<style>
*, *::before, *::after {{
  box-sizing: border-box;
}}

body {{
  margin: 0;
  padding: clamp(1rem, 2vw, 2rem);
  font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
  background: {bg};
  color: {fg};
  line-height: 1.5;
  -webkit-font-smoothing: antialiased;
}}

.tempmap-header {{
  text-align: center;
}}

.tempmap-header h1 {{
  margin: 0 0 0.25rem 0;
  font-size: 1.5rem;
}}

.tempmap-header p {{
  margin: 0 0 1rem 0;
  color: {muted};
}}

#app {{
  width: fit-content;
  max-width: 100%;
  margin: 0 auto;
  padding: 1rem;
  border-radius: 12px;
  border: 1px solid {border};
  background: {surface};
  box-shadow: 0 18px 45px rgba(15, 23, 42, 0.08);
  overflow-x: auto;
}}

.tempmap-heatmap {{
  display: block;
  font-size: 0.75rem;
}}

.tempmap-axis path,
.tempmap-axis line {{
  fill: none;
  stroke: {fg};
  shape-rendering: crispEdges;
}}

.tempmap-axis text {{
  fill: {muted};
}}

.tempmap-cell:hover {{
  stroke: {highlight} !important;
  opacity: {opacity} !important;
}}

.tempmap-legend-bar {{
  stroke: {border};
}}

.tempmap-tooltip {{
  position: absolute;
  padding: 0.4rem 0.75rem;
  border-radius: 6px;
  background: {tooltip_bg};
  color: {tooltip_fg};
  font-size: 0.85rem;
  pointer-events: none;
  box-shadow: 0 4px 12px rgba(0, 0, 0, 0.15);
}}
</style>
</head>
{body}
</html>
"""
