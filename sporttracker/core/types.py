"""Core data types.

All data structures are pure dataclasses with attribute access.
Every entity carries a provider-scoped `id` that is never empty once it
leaves the provider layer.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Team:
    """Team identity."""

    id: str
    name: str
    sport: str  # Provider display form, e.g. "Soccer", "Basketball"
    league: str
    badge_url: str = ""


@dataclass(frozen=True)
class Event:
    """An upcoming sporting event (game/match)."""

    id: str
    name: str
    date: str  # YYYY-MM-DD as published by the provider
    time: str  # HH:MM:SS, may be empty
    league: str
    start_time: datetime | None = None
    home_team: str | None = None
    away_team: str | None = None


@dataclass(frozen=True)
class Player:
    """A rostered player."""

    id: str
    name: str
    position: str
    team: str
    cutout_url: str = ""  # Empty for synthesized players


@dataclass(frozen=True)
class LeagueMapping:
    """One provider league that feeds a logical sport category.

    Either field may be empty: lookups by id are tried first,
    name search is the fallback.
    """

    provider_league_id: str
    provider_league_name: str
