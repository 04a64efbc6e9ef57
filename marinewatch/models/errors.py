"""Error taxonomy for upstream retrieval and feed parsing."""


class MarineWatchError(Exception):
    """Base class for every error a data pipeline can propagate."""


class UpstreamUnavailable(MarineWatchError):
    """Raised when an upstream text endpoint cannot be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ObservationParseError(MarineWatchError):
    """Raised when an observation feed cannot yield a snapshot."""


class MissingHeaderError(ObservationParseError):
    """The feed has no ``#YY`` column-header line."""


class NoValidRecordsError(ObservationParseError):
    """Every data line was malformed or lacked a timestamp."""
