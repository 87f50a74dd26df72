"""Raw text sources for the OHC loader.

A source is any zero-argument callable returning the CSV text. The two
provided here cover a local file and an HTTP endpoint; both translate I/O
failures into `FetchError` so the store can treat them uniformly.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import logging
import time

import httpx

from ohc_impact.errors import FetchError


logger = logging.getLogger(__name__)

TextSource = Callable[[], str]

DEFAULT_TIMEOUT_S = 30.0
CACHE_BUST_PARAM = "cachebust"


class FileTextSource:
    """Read OHC CSV text from a local UTF-8 file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __call__(self) -> str:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(f"Could not read OHC data file {self.path}: {exc}") from exc
        logger.debug("Read %d characters from %s", len(text), self.path)
        return text

    def __repr__(self) -> str:
        return f"FileTextSource({str(self.path)!r})"


class HttpTextSource:
    """Fetch OHC CSV text over HTTP.

    Every request carries a `cachebust=<epoch ms>` query parameter so that
    intermediate caches never serve a stale file after the data is updated.

    Args:
        url: Location of the CSV.
        client: Optional pre-configured ``httpx.Client`` (e.g. one built on
            ``httpx.MockTransport`` in tests). When omitted a short-lived
            client is created per fetch.
        timeout: Request timeout in seconds.
    """

    def __init__(self, url: str, client: Optional[httpx.Client] = None, timeout: float = DEFAULT_TIMEOUT_S):
        self.url = url
        self.client = client
        self.timeout = timeout

    def __call__(self) -> str:
        params = {CACHE_BUST_PARAM: str(int(time.time() * 1000))}
        try:
            if self.client is not None:
                response = self.client.get(self.url, params=params)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(self.url, params=params)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Could not fetch OHC data from {self.url}: {exc}") from exc

        logger.debug("Fetched %d bytes from %s", len(response.content), self.url)
        return response.text

    def __repr__(self) -> str:
        return f"HttpTextSource({self.url!r})"
