import os

from dotenv import load_dotenv

load_dotenv()


def _float_or_none(raw):
    if raw is None or not raw.strip():
        return None
    return float(raw)


# ── Data source ───────────────────────────────────────────────────────────────
DATA_URL = os.getenv(
    "TEMPMAP_DATA_URL",
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/global-temperature.json",
)
REQUEST_TIMEOUT = _float_or_none(os.getenv("TEMPMAP_TIMEOUT"))  # None = transport default

# ── Viewport / layout ─────────────────────────────────────────────────────────
VIEWPORT_WIDTH = int(os.getenv("TEMPMAP_WIDTH", "1200"))
VIEWPORT_HEIGHT = int(os.getenv("TEMPMAP_HEIGHT", "600"))
MARGIN_TOP = 40
MARGIN_LEFT = 100  # long month names on the y axis
MARGIN_RIGHT = 40
MARGIN_BOTTOM = 120  # x axis + legend

# ── Legend ────────────────────────────────────────────────────────────────────
LEGEND_OFFSET = 50  # below the plot area
LEGEND_HEIGHT = 20
LEGEND_TICK_SPACING = 80  # px per legend tick

# ── Interaction ───────────────────────────────────────────────────────────────
HIGHLIGHT_STROKE = "#000000"
HIGHLIGHT_OPACITY = 0.8
TOOLTIP_OFFSET_X = 10
TOOLTIP_OFFSET_Y = -28

# ── Output ────────────────────────────────────────────────────────────────────
OUT_PATH = "out/heatmap.html"
PAGE_TITLE = "Monthly Global Land-Surface Temperature"
LOG_LEVEL = os.getenv("TEMPMAP_LOG_LEVEL", "INFO")
