"""Shared fixtures: a controllable clock and a scriptable provider."""

from collections import Counter

import pytest

from sporttracker.core import Event, Player, SportsProvider, Team, TransportError
from sporttracker.services import SportsDataService
from sporttracker.utilities.cache import TTLCache


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def advance_minutes(self, minutes: float) -> None:
        self.now += minutes * 60


class FakeProvider(SportsProvider):
    """In-memory SportsProvider with per-method call counters.

    Each response table maps an argument to either a list (returned) or an
    exception instance (raised). Missing arguments return []. Setting
    fail_all makes every call raise TransportError.
    """

    def __init__(self):
        self.teams_by_league_id: dict = {}
        self.teams_by_league_name: dict = {}
        self.team_by_id: dict = {}
        self.events_by_team: dict = {}
        self.players_by_team_id: dict = {}
        self.players_by_team_name: dict = {}
        self.fail_all = False
        self.calls: Counter = Counter()
        self.call_args: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "fake"

    def _answer(self, method: str, table: dict, arg: str) -> list:
        self.calls[method] += 1
        self.call_args.append((method, arg))
        if self.fail_all:
            raise TransportError(f"{method} unreachable")
        result = table.get(arg, [])
        if isinstance(result, Exception):
            raise result
        return list(result)

    def lookup_teams_by_league_id(self, league_id):
        return self._answer("lookup_teams_by_league_id", self.teams_by_league_id, league_id)

    def search_teams_by_league_name(self, league_name):
        return self._answer("search_teams_by_league_name", self.teams_by_league_name, league_name)

    def lookup_team_by_id(self, team_id):
        return self._answer("lookup_team_by_id", self.team_by_id, team_id)

    def next_events_for_team(self, team_id):
        return self._answer("next_events_for_team", self.events_by_team, team_id)

    def lookup_players_by_team_id(self, team_id):
        return self._answer("lookup_players_by_team_id", self.players_by_team_id, team_id)

    def search_players_by_team_name(self, team_name):
        return self._answer("search_players_by_team_name", self.players_by_team_name, team_name)


def make_team(team_id: str, name: str, league: str = "English Premier League", sport: str = "Soccer"):
    return Team(id=team_id, name=name, sport=sport, league=league, badge_url=f"https://img/{team_id}.png")


def make_player(player_id: str, name: str, team: str, position: str = "Forward"):
    return Player(id=player_id, name=name, position=position, team=team, cutout_url="")


def make_event(event_id: str, name: str = "Arsenal vs Chelsea"):
    return Event(id=event_id, name=name, date="2026-10-24", time="15:00:00", league="English Premier League")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(clock=clock)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def service(provider, cache):
    """Service with the default TTLs, Arsenal as the contaminated club, sequential fan-out."""
    return SportsDataService(
        provider=provider,
        cache=cache,
        teams_ttl_minutes=30,
        events_ttl_minutes=5,
        players_ttl_minutes=60,
        contaminated_club="Arsenal",
        max_workers=1,
    )
