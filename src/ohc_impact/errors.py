"""Error kinds raised by the OHC pipeline.

Malformed CSV rows are not errors; they are dropped by the parser.
"""


class OhcDataError(Exception):
    """Base class for OHC pipeline failures."""


class LoadError(OhcDataError):
    """A load attempt failed; the previously loaded series is kept."""


class FetchError(LoadError):
    """Raw OHC data could not be retrieved."""


class EmptyDataError(LoadError):
    """Parsing and aggregation produced no yearly points."""


class NotLoadedError(OhcDataError):
    """Series or statistics requested before any successful load."""
