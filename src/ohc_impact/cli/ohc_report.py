"""CLI to load an OHC series and print the headline impact statistics.

Examples:

    ohc-report --data-file data/ohc_tidy.csv --birth-year 1990
    ohc-report --data-url https://example.org/ohc_tidy.csv --output-report out/ohc_report.json
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from ohc_impact.data_models.impact_stats import ImpactConfig, OhcReport
from ohc_impact.errors import FetchError, OhcDataError
from ohc_impact.services.impact_service import (
    BASELINE_YEAR_DEFAULT,
    MIN_ACCELERATION_DEFAULT,
    compute_impact_stats,
    compute_personal_delta,
)
from ohc_impact.services.series_store_service import SeriesStore
from ohc_impact.services.text_source_service import FileTextSource, HttpTextSource

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path("data") / "ohc_tidy.csv"
FETCH_HINT = "Please check that the data file exists and try again."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarise ocean heat content data as an OhcReport JSON.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--data-file", dest="data_file", type=str, default=None,
                        help=f"Path to the OHC CSV (default {DEFAULT_DATA_FILE}).")
    source.add_argument("--data-url", dest="data_url", type=str, default=None,
                        help="URL of the OHC CSV; fetched with a cache-busting query parameter.")
    parser.add_argument("--baseline-year", dest="baseline_year", type=int, default=BASELINE_YEAR_DEFAULT,
                        help=f"Reference year for the cumulative heat figure (default {BASELINE_YEAR_DEFAULT}).")
    parser.add_argument("--min-acceleration", dest="min_acceleration", type=float, default=MIN_ACCELERATION_DEFAULT,
                        help=f"Floor (percent) for the reported acceleration (default {MIN_ACCELERATION_DEFAULT:.0f}).")
    parser.add_argument("--birth-year", dest="birth_year", type=int, default=None,
                        help="If provided, include the heat absorbed since this year.")
    parser.add_argument("--output-report", dest="output_report", type=str, default=None,
                        help="If provided, write the OhcReport JSON to this path.")
    return parser


def build_report(store: SeriesStore, config: ImpactConfig, birth_year: Optional[int] = None) -> OhcReport:
    """Assemble an `OhcReport` from the store's current series."""
    series = store.current()
    stats = compute_impact_stats(series, config)
    personal = compute_personal_delta(series, birth_year) if birth_year is not None else None
    return OhcReport(years=series.years, values=series.values, stats=stats, personal=personal)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    if args.data_url:
        source = HttpTextSource(args.data_url)
    else:
        source = FileTextSource(args.data_file or DEFAULT_DATA_FILE)

    store = SeriesStore(source)
    try:
        store.load()
    except FetchError as exc:
        logger.error("Data load error: %s. %s", exc, FETCH_HINT)
        return 1
    except OhcDataError as exc:
        logger.error("Data load error: %s", exc)
        return 1

    config = ImpactConfig(baseline_year=args.baseline_year, min_acceleration=args.min_acceleration)
    report = build_report(store, config, args.birth_year)

    report_json = report.model_dump_json(indent=2)
    if args.output_report:
        out = Path(args.output_report)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(report_json, encoding="utf-8")
        logger.info("Wrote OHC report to %s", out)
    else:
        print(report_json)

    if report.personal is not None:
        p = report.personal
        logger.info(
            "%.1f ZJ absorbed since %d (~%d Hiroshima bombs, %.1f years of global energy use)",
            p.delta,
            p.birth_year,
            p.equivalences.hiroshima_bombs,
            p.equivalences.years_of_global_energy,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
