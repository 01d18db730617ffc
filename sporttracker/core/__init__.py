"""Core types and interfaces."""

from sporttracker.core.exceptions import PayloadError, TransportError, UpstreamError
from sporttracker.core.interfaces import SportsProvider
from sporttracker.core.types import Event, LeagueMapping, Player, Team

__all__ = [
    "Event",
    "LeagueMapping",
    "PayloadError",
    "Player",
    "SportsProvider",
    "Team",
    "TransportError",
    "UpstreamError",
]
