"""Sports data providers."""

from sporttracker.providers.tsdb import TSDBClient, TSDBProvider

__all__ = ["TSDBClient", "TSDBProvider"]
