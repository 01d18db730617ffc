"""TheSportsDB sports data provider."""

from sporttracker.providers.tsdb.client import TSDBClient
from sporttracker.providers.tsdb.provider import TSDBProvider

__all__ = ["TSDBClient", "TSDBProvider"]
