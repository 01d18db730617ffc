"""TheSportsDB sports data provider.

Fetches data through TSDBClient and normalizes it into our dataclasses.
Records without an id are dropped here so nothing downstream ever sees
an anonymous entity.
"""

import logging
from datetime import UTC, datetime

from dateutil import parser as date_parser

from sporttracker.core import Event, PayloadError, Player, SportsProvider, Team
from sporttracker.providers.tsdb.client import TSDBClient

logger = logging.getLogger(__name__)


class TSDBProvider(SportsProvider):
    """TheSportsDB implementation of SportsProvider."""

    def __init__(self, client: TSDBClient | None = None):
        self._client = client or TSDBClient()

    @property
    def name(self) -> str:
        return "tsdb"

    def lookup_teams_by_league_id(self, league_id: str) -> list[Team]:
        data = self._client.lookup_all_teams(league_id)
        return self._parse_many(data, "teams", self._parse_team)

    def search_teams_by_league_name(self, league_name: str) -> list[Team]:
        data = self._client.search_all_teams(league_name)
        return self._parse_many(data, "teams", self._parse_team)

    def lookup_team_by_id(self, team_id: str) -> list[Team]:
        data = self._client.lookup_team(team_id)
        return self._parse_many(data, "teams", self._parse_team)

    def next_events_for_team(self, team_id: str) -> list[Event]:
        data = self._client.get_team_next_events(team_id)
        return self._parse_many(data, "events", self._parse_event)

    def lookup_players_by_team_id(self, team_id: str) -> list[Player]:
        data = self._client.lookup_all_players(team_id)
        return self._parse_many(data, "player", self._parse_player)

    def search_players_by_team_name(self, team_name: str) -> list[Player]:
        data = self._client.search_players(team_name)
        return self._parse_many(data, "player", self._parse_player)

    def close(self) -> None:
        self._client.close()

    def _parse_many(self, data: dict, key: str, parse) -> list:
        """Parse the list under `key`.

        TSDB uses null for "nothing found", so a missing or null key is an
        empty result. Anything else that is not a list is a broken payload.
        """
        items = data.get(key)
        if items is None:
            return []
        if not isinstance(items, list):
            raise PayloadError(f"Expected list under '{key}', got {type(items).__name__}")

        parsed = []
        for item in items:
            if not isinstance(item, dict):
                continue
            entity = parse(item)
            if entity:
                parsed.append(entity)

        dropped = len(items) - len(parsed)
        if dropped:
            logger.debug("[TSDB] Dropped %d unusable '%s' records", dropped, key)
        return parsed

    def _parse_team(self, data: dict) -> Team | None:
        team_id = _text(data.get("idTeam"))
        if not team_id:
            return None
        return Team(
            id=team_id,
            name=_text(data.get("strTeam")),
            sport=_text(data.get("strSport")),
            league=_text(data.get("strLeague")),
            # strTeamBadge was renamed strBadge in later API versions
            badge_url=_text(data.get("strTeamBadge") or data.get("strBadge")),
        )

    def _parse_event(self, data: dict) -> Event | None:
        event_id = _text(data.get("idEvent"))
        if not event_id:
            return None
        return Event(
            id=event_id,
            name=_text(data.get("strEvent")),
            date=_text(data.get("dateEvent")),
            time=_text(data.get("strTime")),
            league=_text(data.get("strLeague")),
            start_time=self._parse_start_time(data),
            home_team=_text(data.get("strHomeTeam")) or None,
            away_team=_text(data.get("strAwayTeam")) or None,
        )

    def _parse_player(self, data: dict) -> Player | None:
        player_id = _text(data.get("idPlayer"))
        if not player_id:
            return None
        return Player(
            id=player_id,
            name=_text(data.get("strPlayer")),
            position=_text(data.get("strPosition")),
            team=_text(data.get("strTeam")),
            cutout_url=_text(data.get("strCutout")),
        )

    def _parse_start_time(self, data: dict) -> datetime | None:
        """Parse event start as an aware datetime.

        Prefers strTimestamp (UTC, ISO8601), falls back to dateEvent +
        strTime. TSDB times are UTC, so naive values are tagged UTC.
        """
        candidates = [_text(data.get("strTimestamp"))]
        date_str = _text(data.get("dateEvent"))
        if date_str:
            time_str = _text(data.get("strTime"))
            candidates.append(f"{date_str}T{time_str}" if time_str else date_str)

        for value in candidates:
            if not value:
                continue
            try:
                dt = date_parser.parse(value)
            except (ValueError, OverflowError):
                continue
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=UTC)
            return dt

        return None


def _text(value) -> str:
    """Coerce a TSDB field to a stripped string (fields are often null)."""
    if value is None:
        return ""
    return str(value).strip()
