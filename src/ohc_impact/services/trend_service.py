"""Ordinary least-squares trend slope."""
from __future__ import annotations

from typing import List, Sequence
import logging

import numpy as np

from ohc_impact.data_models.ohc_series import RegressionPoint


logger = logging.getLogger(__name__)

# Below this many points a slope is considered unreliable and reported as 0.
MIN_REGRESSION_POINTS = 3


def compute_ols_slope(points: Sequence[RegressionPoint]) -> float:
    """Return the OLS slope of y on x.

        slope = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)

    Returns 0.0 when fewer than `MIN_REGRESSION_POINTS` points are given,
    and also when every x is identical (vertical line), in which case a
    warning is logged.
    """
    n = len(points)
    if n < MIN_REGRESSION_POINTS:
        return 0.0

    x = np.fromiter((p.x for p in points), dtype=float, count=n)
    y = np.fromiter((p.y for p in points), dtype=float, count=n)

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_xx = float((x * x).sum())

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0.0:
        logger.warning("Degenerate regression: all %d x values are identical; slope reported as 0", n)
        return 0.0

    return (n * sum_xy - sum_x * sum_y) / denominator


def points_from_series(xs: Sequence[float], ys: Sequence[float]) -> List[RegressionPoint]:
    """Zip parallel x/y sequences into regression points."""
    if len(xs) != len(ys):
        raise ValueError(f"x and y must have the same length, got {len(xs)} and {len(ys)}")
    return [RegressionPoint(x=float(x), y=float(y)) for x, y in zip(xs, ys)]
