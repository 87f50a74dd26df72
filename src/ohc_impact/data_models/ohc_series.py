"""Ocean heat content series models.

`RawSample` is one accepted row of the OHC CSV (e.g. `data/ohc_tidy.csv`).
Samples are reduced to one `YearlyPoint` per calendar year and held together
in an `OhcSeries`.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class RawSample(BaseModel):
    """One decoded CSV row.

    `timestamp` is kept as it appeared in the file; `year` is the calendar
    year it resolved to.
    """

    timestamp: str
    year: int
    value: float


class YearlyPoint(BaseModel):
    """Mean OHC value (ZJ) for a single calendar year."""

    year: int
    value: float


class RegressionPoint(BaseModel):
    x: float
    y: float


class OhcSeries(BaseModel):
    """Yearly OHC series, ascending by year with unique years.

    Consumers should read `years` / `values` (index aligned) or `points`
    and never mutate the list in place.
    """

    points: List[YearlyPoint] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_ordering(self) -> "OhcSeries":
        years = [p.year for p in self.points]
        for prev, cur in zip(years, years[1:]):
            if cur <= prev:
                raise ValueError(
                    f"OhcSeries years must be unique and ascending, got {prev} followed by {cur}"
                )
        return self

    @property
    def years(self) -> List[int]:
        return [p.year for p in self.points]

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.points]

    @property
    def latest(self) -> Optional[YearlyPoint]:
        return self.points[-1] if self.points else None

    def __len__(self) -> int:
        return len(self.points)
