"""OHC CSV parsing service.

Turns the raw text of a two-column OHC export (`year,value` or
`date,value`) into `RawSample` objects. Malformed rows are dropped
silently and never raise.
"""
from __future__ import annotations

from typing import List, Optional
import logging
import math
import re

import pandas as pd

from ohc_impact.data_models.ohc_series import RawSample


logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")
_YEAR_LITERAL_RE = re.compile(r"^\d{1,4}$")
_HAS_DIGIT_RE = re.compile(r"\d")

MIN_YEAR = 1
MAX_YEAR = 9999


def parse_ohc_csv(text: str) -> List[RawSample]:
    """Parse raw OHC CSV text into a list of `RawSample`.

    The first non-empty line is treated as the header and skipped. Each
    remaining line is split on its first comma; rows whose value is not a
    finite number or whose timestamp does not resolve to a calendar year
    are dropped. Order of the accepted rows is preserved.
    """
    lines = [ln.strip() for ln in _LINE_SPLIT_RE.split(text or "")]
    lines = [ln for ln in lines if ln]
    if not lines:
        return []

    header, rows = lines[0], lines[1:]
    if len(header.split(",")) < 2:
        logger.warning("Unexpected OHC CSV header %r; expected two columns (date/year, value)", header)

    samples: List[RawSample] = []
    dropped = 0

    for row in rows:
        timestamp, _, value_field = row.partition(",")
        value = _parse_finite_float(value_field)
        year = _resolve_year(timestamp.strip())
        if value is None or year is None:
            dropped += 1
            logger.debug("Dropping malformed OHC row: %r", row)
            continue
        samples.append(RawSample(timestamp=timestamp.strip(), year=year, value=value))

    if dropped:
        logger.debug("Dropped %d malformed OHC rows out of %d", dropped, len(rows))
    return samples


def _parse_finite_float(field: str) -> Optional[float]:
    s = field.strip()
    # float() accepts digit separators such as "1_000"
    if not s or "_" in s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _resolve_year(timestamp: str) -> Optional[int]:
    """Return the calendar year of a year literal or date string, else None."""
    if not timestamp:
        return None

    if _YEAR_LITERAL_RE.match(timestamp):
        year = int(timestamp)
        return year if MIN_YEAR <= year <= MAX_YEAR else None

    # pandas resolves words like "now" or "today" against the clock
    if not _HAS_DIGIT_RE.search(timestamp):
        return None

    try:
        ts = pd.to_datetime(timestamp, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return int(ts.year)
