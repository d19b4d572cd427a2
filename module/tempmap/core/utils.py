"""Shared utilities.

``esc()`` HTML-escapes any value before it lands in a text node or an
attribute; ``fmt_num()`` gives numbers a short, stable text form so that
serialized SVG attributes do not carry float noise.
"""

from __future__ import annotations

import html
from typing import Any


def esc(value: Any) -> str:
    """Return an HTML-escaped string representation of *value*.

    Escapes ``&``, ``<``, ``>``, and both single and double quotes so the
    result is safe for use in element text or attribute values.
    """
    if value is None:
        return ""
    if isinstance(value, float):
        value = fmt_num(value)
    return html.escape(str(value), quote=True)


def fmt_num(value: float, decimals: int = 6) -> str:
    """Format a number with at most *decimals* places, trailing zeros dropped."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    text = f"{float(value):.{decimals}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def translate(x: float, y: float) -> str:
    """SVG ``transform`` value for a plain translation."""
    return f"translate({fmt_num(x)},{fmt_num(y)})"
