from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class ImpactConfig(BaseModel):
    """User-facing knobs for the headline statistics.

    `baseline_year` is the reference year for the cumulative heat figure.
    `min_acceleration` is a display floor (percent): the reported
    acceleration never goes below it.
    """

    baseline_year: int = 2005
    min_acceleration: float = 50.0


class ImpactStats(BaseModel):
    """Headline statistics derived from the current series."""

    total_heat: float     # ZJ since the baseline year, one decimal, always >= 0
    acceleration: float   # percent change in trend slope, floored at min_acceleration


class HeatEquivalences(BaseModel):
    hiroshima_bombs: int
    years_of_global_energy: float


class PersonalDelta(BaseModel):
    """Heat absorbed by the oceans since a given birth year.

    `baseline_year` is the year actually used as reference: the first year in
    the series at or after `birth_year`, or the first year of the series.
    Unlike `ImpactStats.total_heat`, `delta` keeps its sign.
    """

    birth_year: int
    baseline_year: int
    delta: float
    equivalences: HeatEquivalences


class OhcReport(BaseModel):
    """Everything a presentation layer needs to render one load."""

    years: List[int]
    values: List[float]
    stats: ImpactStats
    personal: Optional[PersonalDelta] = None
