"""Load the monthly temperature-variance dataset.

The source is a JSON document of the form::

    {"baseTemperature": 8.66,
     "monthlyVariance": [{"year": 1753, "month": 1, "variance": -1.366}, ...]}

``load()`` fetches it once. Any failure (network, HTTP status, bad JSON,
schema mismatch) is logged and replaced by an empty dataset so the chart
degrades to axes only instead of crashing.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple
from urllib.parse import urlparse

import pandas as pd
import requests

from tempmap import config
from tempmap.errors import DataFormatError

logger = logging.getLogger("tempmap.loader")

FRAME_COLUMNS = ["year", "month", "variance"]


@dataclass(frozen=True)
class Observation:
    year: int
    month: int  # 1-12
    variance: float  # degrees C from the base temperature


@dataclass(frozen=True)
class Dataset:
    base_temperature: float
    monthly_variance: Tuple[Observation, ...] = ()

    @classmethod
    def empty(cls) -> "Dataset":
        return cls(base_temperature=0.0, monthly_variance=())

    @classmethod
    def from_json(cls, payload: Any) -> "Dataset":
        """Build a Dataset from the decoded JSON body.

        Raises DataFormatError when required keys are missing, values are
        not numeric or not finite (JSON NaN/Infinity), or a month falls
        outside 1..12. Duplicate (year, month) pairs are kept as-is.
        """
        if not isinstance(payload, Mapping):
            raise DataFormatError(
                f"expected a JSON object, got {type(payload).__name__}"
            )
        try:
            base = float(payload["baseTemperature"])
            rows = payload["monthlyVariance"]
            observations = tuple(
                Observation(
                    year=int(r["year"]),
                    month=int(r["month"]),
                    variance=float(r["variance"]),
                )
                for r in rows
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DataFormatError(f"malformed temperature payload: {exc!r}") from exc

        if not math.isfinite(base):
            raise DataFormatError(f"baseTemperature is not finite: {base!r}")
        non_finite = [o for o in observations if not math.isfinite(o.variance)]
        if non_finite:
            raise DataFormatError(
                f"{len(non_finite)} observation(s) with non-finite variance, "
                f"first: {non_finite[0]}"
            )

        bad = [o for o in observations if not 1 <= o.month <= 12]
        if bad:
            raise DataFormatError(
                f"{len(bad)} observation(s) with month outside 1..12, "
                f"first: {bad[0]}"
            )
        return cls(base_temperature=base, monthly_variance=observations)

    def __len__(self) -> int:
        return len(self.monthly_variance)

    def temperature(self, observation: Observation) -> float:
        """Absolute temperature of one observation."""
        return self.base_temperature + observation.variance

    def to_frame(self) -> pd.DataFrame:
        """Tidy frame: one row per observation plus absolute ``temperature``."""
        frame = pd.DataFrame(
            [(o.year, o.month, o.variance) for o in self.monthly_variance],
            columns=FRAME_COLUMNS,
        ).astype({"year": "int64", "month": "int64", "variance": "float64"})
        frame["temperature"] = self.base_temperature + frame["variance"]
        return frame


def _is_local(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("", "file") or len(parsed.scheme) == 1  # C:\ paths


def _fetch_json(url: str, session: Any, timeout: Optional[float]) -> Any:
    if _is_local(url):
        path = Path(urlparse(url).path if url.startswith("file://") else url)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    http = session or requests
    response = http.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def load(
    url: str = config.DATA_URL,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = config.REQUEST_TIMEOUT,
) -> Dataset:
    """Fetch and parse the dataset once; never raises for a bad source.

    ``url`` may also be a local path or ``file://`` URL. ``session`` is any
    object with a requests-compatible ``get()``; the ``requests`` module
    itself is used when omitted. No retries, no caching.
    """
    logger.info("Fetching temperature data from %s", url)
    try:
        payload = _fetch_json(url, session, timeout)
        dataset = Dataset.from_json(payload)
    except (requests.RequestException, OSError, ValueError) as exc:
        logger.warning("Could not load %s (%s); using an empty dataset", url, exc)
        return Dataset.empty()

    logger.info(
        "Loaded %d observations (base temperature %.2f)",
        len(dataset),
        dataset.base_temperature,
    )
    return dataset
