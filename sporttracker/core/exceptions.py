"""Upstream error taxonomy.

Providers raise these; SportsDataService is the only place they are
recovered, by substituting cached, curated or synthesized data.
"""


class UpstreamError(Exception):
    """Base class for anything that went wrong talking to a provider."""


class TransportError(UpstreamError):
    """Network failure, timeout or unrecoverable HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PayloadError(UpstreamError):
    """Response arrived but was not the JSON shape we expect."""
