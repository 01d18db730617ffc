"""Provider interface.

SportsDataService depends on this abstraction, never on a concrete HTTP
client. Every method returns a possibly-empty list or raises UpstreamError;
there are no partial payloads.
"""

from abc import ABC, abstractmethod

from sporttracker.core.types import Event, Player, Team


class SportsProvider(ABC):
    """Source of team, event and roster data."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier, prefixed to upstream failure log lines."""

    @abstractmethod
    def lookup_teams_by_league_id(self, league_id: str) -> list[Team]:
        """All teams in a league, by provider league id."""

    @abstractmethod
    def search_teams_by_league_name(self, league_name: str) -> list[Team]:
        """All teams in a league, by provider league name."""

    @abstractmethod
    def lookup_team_by_id(self, team_id: str) -> list[Team]:
        """Team details. A list because that is what the provider returns."""

    @abstractmethod
    def next_events_for_team(self, team_id: str) -> list[Event]:
        """Upcoming events for a team."""

    @abstractmethod
    def lookup_players_by_team_id(self, team_id: str) -> list[Player]:
        """Roster by team id."""

    @abstractmethod
    def search_players_by_team_name(self, team_name: str) -> list[Player]:
        """Roster by team name."""
