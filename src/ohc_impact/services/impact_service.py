"""Impact statistics on a loaded OHC series.

The headline figures are deliberately simple and explainable:

    total_heat   = |latest - baseline|, one decimal
    acceleration = % change of the OLS slope between the first and last
                   ACCELERATION_WINDOW years, floored at min_acceleration

The personal delta keeps its sign, so a series that cooled since the given
birth year reports a negative figure.
"""
from __future__ import annotations

from typing import Optional
import logging
import math

from ohc_impact.data_models.impact_stats import (
    HeatEquivalences,
    ImpactConfig,
    ImpactStats,
    PersonalDelta,
)
from ohc_impact.data_models.ohc_series import OhcSeries
from ohc_impact.errors import EmptyDataError
from ohc_impact.services.trend_service import compute_ols_slope, points_from_series

logger = logging.getLogger(__name__)


# Constants / defaults
BASELINE_YEAR_DEFAULT = 2005
MIN_ACCELERATION_DEFAULT = 50.0
ACCELERATION_WINDOW = 15  # years in each of the early / recent windows

# Equivalence factors for the personal delta
HIROSHIMA_BOMBS_PER_ZJ = 16
GLOBAL_ENERGY_ZJ_PER_YEAR = 0.6


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards +inf, the way the figures are displayed."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero; used for the signed one-decimal figures."""
    factor = 10 ** ndigits
    magnitude = math.floor(abs(value) * factor + 0.5) / factor
    if magnitude == 0:
        return 0.0
    return math.copysign(magnitude, value)


def compute_impact_stats(series: OhcSeries, config: Optional[ImpactConfig] = None) -> ImpactStats:
    """Compute `ImpactStats` for a series.

    The baseline is the first year at or after `config.baseline_year`; if the
    series ends before that year the first point is used instead.
    """
    config = config or ImpactConfig(
        baseline_year=BASELINE_YEAR_DEFAULT,
        min_acceleration=MIN_ACCELERATION_DEFAULT,
    )
    _require_points(series)

    baseline_idx = _first_index_at_or_after(series, config.baseline_year)
    if baseline_idx is None:
        logger.info(
            "No year >= %d in series (%d..%d); using first year as baseline",
            config.baseline_year,
            series.points[0].year,
            series.points[-1].year,
        )
        baseline_idx = 0

    latest_value = series.points[-1].value
    baseline_value = series.points[baseline_idx].value
    total_heat = round_half_up(abs(latest_value - baseline_value), 1)

    acceleration = compute_acceleration(series)
    reported = max(float(acceleration), float(config.min_acceleration))
    if reported != acceleration:
        logger.debug("Computed acceleration %.0f%% raised to floor %.0f%%", acceleration, reported)

    return ImpactStats(total_heat=total_heat, acceleration=reported)


def compute_acceleration(series: OhcSeries, window: int = ACCELERATION_WINDOW) -> float:
    """Percent change of the trend slope from the early to the recent window.

    Both windows hold `window` points and overlap when the series is shorter
    than twice that. Returns 0 when the early slope is 0, which includes
    windows too short for a regression.
    """
    years = series.years
    values = series.values

    early = points_from_series(years[:window], values[:window])
    recent = points_from_series(years[-window:], values[-window:])

    early_slope = compute_ols_slope(early)
    recent_slope = compute_ols_slope(recent)

    if early_slope == 0:
        return 0.0

    return round_half_up(((recent_slope - early_slope) / abs(early_slope)) * 100.0)


def compute_personal_delta(series: OhcSeries, birth_year: int) -> PersonalDelta:
    """Signed heat change (ZJ) between `birth_year` and the latest year.

    Cheap and side-effect free; meant to be re-run on every input change.
    """
    _require_points(series)

    baseline_idx = _first_index_at_or_after(series, birth_year)
    if baseline_idx is None:
        baseline_idx = 0

    latest_value = series.points[-1].value
    baseline_point = series.points[baseline_idx]
    delta = round_half_away(latest_value - baseline_point.value, 1)

    return PersonalDelta(
        birth_year=int(birth_year),
        baseline_year=baseline_point.year,
        delta=delta,
        equivalences=compute_heat_equivalences(delta),
    )


def compute_heat_equivalences(delta: float) -> HeatEquivalences:
    return HeatEquivalences(
        hiroshima_bombs=int(round_half_up(delta * HIROSHIMA_BOMBS_PER_ZJ)),
        years_of_global_energy=round_half_away(delta / GLOBAL_ENERGY_ZJ_PER_YEAR, 1),
    )


def _first_index_at_or_after(series: OhcSeries, year: int) -> Optional[int]:
    for i, p in enumerate(series.points):
        if p.year >= year:
            return i
    return None


def _require_points(series: OhcSeries) -> None:
    if not series.points:
        raise EmptyDataError("No valid data found in CSV")
