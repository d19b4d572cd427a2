#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Generate a synthetic global-temperature dataset for offline demos.

Writes ``examples/data/global-temperature.json`` in the same schema as the
remote source, so ``tempmap --url examples/data/global-temperature.json``
renders without network access. Variance follows a slow warming trend, a
mild seasonal wave and gaussian noise.

Run from repo root with PYTHONPATH including module/:
  PYTHONPATH=module python -m tempmap.data.demo
"""

import json
import math
import random
from pathlib import Path

import pandas as pd

# Default seed for reproducible dummy data
DEFAULT_SEED = 42
DEFAULT_BASE_TEMPERATURE = 8.66
DEFAULT_START_YEAR = 1753
DEFAULT_END_YEAR = 2015


def _data_dir() -> Path:
    return Path("examples") / "data"


def make_variance_df(
    start_year: int = DEFAULT_START_YEAR,
    end_year: int = DEFAULT_END_YEAR,
    seed: int = DEFAULT_SEED,
) -> pd.DataFrame:
    """One row per (year, month) with a synthetic variance column."""
    rng = random.Random(seed)
    span = max(end_year - start_year, 1)
    rows = []
    for year in range(start_year, end_year + 1):
        trend = -0.8 + 1.8 * ((year - start_year) / span) ** 2
        for month in range(1, 13):
            season = 0.3 * math.sin((month - 1) / 12 * 2 * math.pi)
            rows.append({
                "year": year,
                "month": month,
                "variance": round(trend + season + rng.gauss(0, 0.6), 3),
            })
    return pd.DataFrame(rows, columns=["year", "month", "variance"])


def make_demo_payload(
    start_year: int = DEFAULT_START_YEAR,
    end_year: int = DEFAULT_END_YEAR,
    seed: int = DEFAULT_SEED,
) -> dict:
    """Return a dict shaped like the remote JSON body."""
    df = make_variance_df(start_year=start_year, end_year=end_year, seed=seed)
    return {
        "baseTemperature": DEFAULT_BASE_TEMPERATURE,
        "monthlyVariance": df.to_dict(orient="records"),
    }


def main() -> None:
    out_dir = _data_dir()
    out_dir.mkdir(parents=True, exist_ok=True)
    payload = make_demo_payload()
    path = out_dir / "global-temperature.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    print(f"Wrote {path} ({len(payload['monthlyVariance'])} observations)")


if __name__ == "__main__":
    main()
