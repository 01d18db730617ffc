"""Service layer."""

from sporttracker.services.cache_sweeper import CacheSweeper
from sporttracker.services.fallback import get_fallback_teams, infer_sport, synthesize_players
from sporttracker.services.league_mappings import get_league_mappings
from sporttracker.services.sports_data import UNKNOWN_TEAM, SportsDataService
from sporttracker.utilities.cache import TTLCache


def create_sports_service(cache: TTLCache | None = None, provider=None) -> SportsDataService:
    """Build a SportsDataService wired to TheSportsDB.

    Args:
        cache: Cache to use. A fresh one is created if omitted.
        provider: SportsProvider to use. TSDBProvider with config defaults if omitted.
    """
    if provider is None:
        from sporttracker.providers import TSDBProvider

        provider = TSDBProvider()
    return SportsDataService(provider=provider, cache=cache if cache is not None else TTLCache())


__all__ = [
    "UNKNOWN_TEAM",
    "CacheSweeper",
    "SportsDataService",
    "create_sports_service",
    "get_fallback_teams",
    "get_league_mappings",
    "infer_sport",
    "synthesize_players",
]
