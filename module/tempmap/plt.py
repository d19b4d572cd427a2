"""Public API: figure factory and the ``tempmap`` command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tempmap import config
from tempmap.core.figure import Page
from tempmap.core.layout import Layout
from tempmap.core.scales import build_scales
from tempmap.data.demo import make_demo_payload
from tempmap.data.loader import Dataset, load
from tempmap.plots.heatmap import render

logger = logging.getLogger("tempmap")


def _description(dataset: Dataset) -> str:
    if not len(dataset):
        return "No data available"
    years = [o.year for o in dataset.monthly_variance]
    return (
        f"{min(years)} - {max(years)}: base temperature "
        f"{dataset.base_temperature:.2f}°C"
    )


def figure(
    dataset: Dataset,
    layout: Optional[Layout] = None,
    title: str = config.PAGE_TITLE,
) -> Page:
    """Return a Page with the heat map for *dataset* already rendered.

    ``layout`` defaults to the configured viewport.
    """
    layout = layout or Layout.from_viewport(config.VIEWPORT_WIDTH, config.VIEWPORT_HEIGHT)
    page = Page(title=title, description=_description(dataset))
    scales = build_scales(dataset, layout)
    render(dataset, scales, layout, page)
    return page


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Render monthly global temperature variance as an HTML heat map."
    )
    ap.add_argument("--url", default=config.DATA_URL, help="JSON source (URL or local path)")
    ap.add_argument("--out", dest="out_path", default=config.OUT_PATH, help=f"Output HTML (default: {config.OUT_PATH})")
    ap.add_argument("--width", type=int, default=config.VIEWPORT_WIDTH, help="Canvas width in px")
    ap.add_argument("--height", type=int, default=config.VIEWPORT_HEIGHT, help="Canvas height in px")
    ap.add_argument("--title", default=config.PAGE_TITLE, help="Page title")
    ap.add_argument("--demo", action="store_true", help="Render synthetic data instead of fetching --url")
    ap.add_argument("--csv", dest="csv_path", default=None, help="Also write the tidy dataset to this CSV")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.LOG_LEVEL.upper(),
        help="Logging level (default: INFO)",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.demo:
        dataset = Dataset.from_json(make_demo_payload())
    else:
        dataset = load(args.url)
    page = figure(dataset, Layout.from_viewport(args.width, args.height), title=args.title)

    out_path = Path(args.out_path)
    try:
        page.write_html(str(out_path))
        if args.csv_path:
            csv_path = Path(args.csv_path)
            csv_path.parent.mkdir(parents=True, exist_ok=True)
            dataset.to_frame().to_csv(csv_path, index=False)
            logger.info("Wrote %s", csv_path)
    except OSError as exc:
        logger.error("Failed to write output: %s", exc)
        return 1

    logger.info("Wrote %s (%d cells)", out_path, len(dataset))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
