"""Yearly aggregation of parsed OHC samples."""
from __future__ import annotations

from typing import List
import logging

import pandas as pd

from ohc_impact.data_models.ohc_series import OhcSeries, RawSample, YearlyPoint


logger = logging.getLogger(__name__)


def aggregate_by_year(samples: List[RawSample]) -> OhcSeries:
    """Reduce samples to one unweighted mean per calendar year.

    Returns an empty `OhcSeries` when `samples` is empty; deciding whether
    that is a failure is left to the caller.
    """
    if not samples:
        return OhcSeries(points=[])

    df = pd.DataFrame.from_records([{"year": s.year, "value": float(s.value)} for s in samples])
    means = df.groupby("year", sort=True)["value"].mean()

    points = [YearlyPoint(year=int(year), value=float(value)) for year, value in means.items()]

    logger.debug("Aggregated %d samples into %d yearly points", len(samples), len(points))
    return OhcSeries(points=points)
