"""Holder for the currently loaded OHC series.

`SeriesStore.load()` runs the full fetch -> parse -> aggregate pipeline and
swaps the held series only when every step succeeded. Callers keep a
reference to the store; there is no module-level instance.
"""
from __future__ import annotations

from typing import List, Optional
import logging

from ohc_impact.data_models.impact_stats import ImpactConfig, ImpactStats, PersonalDelta
from ohc_impact.data_models.ohc_series import OhcSeries
from ohc_impact.errors import EmptyDataError, FetchError, NotLoadedError
from ohc_impact.services.csv_series_parser_service import parse_ohc_csv
from ohc_impact.services.impact_service import compute_impact_stats, compute_personal_delta
from ohc_impact.services.text_source_service import TextSource
from ohc_impact.services.year_aggregation_service import aggregate_by_year


logger = logging.getLogger(__name__)


class SeriesStore:
    """Owns the current `OhcSeries`.

    Concurrent `load()` calls are not coordinated: each one that succeeds
    replaces the series, so the last successful load wins.
    """

    def __init__(self, source: TextSource):
        self.source = source
        self._series: Optional[OhcSeries] = None

    def load(self) -> OhcSeries:
        """Fetch, parse and aggregate; replace the held series on success.

        Raises:
            FetchError: the source could not deliver text.
            EmptyDataError: no row survived parsing.

        On either error the previously loaded series stays in place.
        """
        try:
            text = self.source()
        except FetchError:
            logger.debug("OHC data fetch failed from %r", self.source)
            raise
        except OSError as exc:
            logger.debug("OHC data fetch failed from %r: %s", self.source, exc)
            raise FetchError(f"Failed to load ocean heat data: {exc}") from exc

        samples = parse_ohc_csv(text)
        series = aggregate_by_year(samples)
        if not series.points:
            logger.debug("OHC data from %r contained no valid rows", self.source)
            raise EmptyDataError("No valid data found in CSV")

        self._series = series
        logger.info(
            "Loaded %d yearly OHC points (%d..%d) from %d samples via %r",
            len(series),
            series.points[0].year,
            series.points[-1].year,
            len(samples),
            self.source,
        )
        return series

    def current(self) -> OhcSeries:
        if self._series is None:
            raise NotLoadedError("No OHC series loaded yet; call load() first")
        return self._series

    @property
    def is_loaded(self) -> bool:
        return self._series is not None

    @property
    def years(self) -> List[int]:
        return self.current().years

    @property
    def values(self) -> List[float]:
        return self.current().values

    def impact_stats(self, config: Optional[ImpactConfig] = None) -> ImpactStats:
        return compute_impact_stats(self.current(), config)

    def personal_delta(self, birth_year: int) -> PersonalDelta:
        return compute_personal_delta(self.current(), birth_year)
