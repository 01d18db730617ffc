"""Tests for TSDBProvider payload parsing."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from sporttracker.core import Event, PayloadError, Player, Team, TransportError
from sporttracker.providers.tsdb import TSDBProvider


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def tsdb(client):
    return TSDBProvider(client=client)


class TestTeams:
    def test_parses_teams(self, tsdb, client):
        client.lookup_all_teams.return_value = {
            "teams": [
                {
                    "idTeam": "133604",
                    "strTeam": "Arsenal",
                    "strSport": "Soccer",
                    "strLeague": "English Premier League",
                    "strTeamBadge": "https://img/arsenal.png",
                    "strStadium": "Emirates Stadium",
                }
            ]
        }

        teams = tsdb.lookup_teams_by_league_id("4328")

        assert teams == [
            Team(
                id="133604",
                name="Arsenal",
                sport="Soccer",
                league="English Premier League",
                badge_url="https://img/arsenal.png",
            )
        ]
        client.lookup_all_teams.assert_called_once_with("4328")

    def test_badge_falls_back_to_str_badge(self, tsdb, client):
        client.search_all_teams.return_value = {
            "teams": [{"idTeam": "1", "strTeam": "X", "strBadge": "https://img/x.png"}]
        }
        assert tsdb.search_teams_by_league_name("NBA")[0].badge_url == "https://img/x.png"

    def test_null_collection_is_empty(self, tsdb, client):
        client.lookup_team.return_value = {"teams": None}
        assert tsdb.lookup_team_by_id("1") == []

    def test_missing_key_is_empty(self, tsdb, client):
        client.lookup_team.return_value = {}
        assert tsdb.lookup_team_by_id("1") == []

    def test_records_without_id_are_dropped(self, tsdb, client):
        client.search_all_teams.return_value = {
            "teams": [{"strTeam": "Nameless"}, {"idTeam": None}, "junk", {"idTeam": 7, "strTeam": "Ok"}]
        }
        teams = tsdb.search_teams_by_league_name("NBA")
        assert [(t.id, t.name) for t in teams] == [("7", "Ok")]

    def test_null_fields_become_empty_strings(self, tsdb, client):
        client.lookup_team.return_value = {"teams": [{"idTeam": "1", "strTeam": None, "strLeague": None}]}
        team = tsdb.lookup_team_by_id("1")[0]
        assert team.name == ""
        assert team.league == ""
        assert team.badge_url == ""

    def test_wrong_shape_raises_payload_error(self, tsdb, client):
        client.lookup_all_teams.return_value = {"teams": "Patreon only"}
        with pytest.raises(PayloadError):
            tsdb.lookup_teams_by_league_id("4328")

    def test_client_errors_propagate(self, tsdb, client):
        client.lookup_all_teams.side_effect = TransportError("timeout")
        with pytest.raises(TransportError):
            tsdb.lookup_teams_by_league_id("4328")


class TestEvents:
    def test_parses_event_with_timestamp(self, tsdb, client):
        client.get_team_next_events.return_value = {
            "events": [
                {
                    "idEvent": "2070001",
                    "strEvent": "Arsenal vs Chelsea",
                    "dateEvent": "2026-10-24",
                    "strTime": "15:00:00",
                    "strTimestamp": "2026-10-24T15:00:00",
                    "strLeague": "English Premier League",
                    "strHomeTeam": "Arsenal",
                    "strAwayTeam": "Chelsea",
                }
            ]
        }

        [event] = tsdb.next_events_for_team("133604")

        assert isinstance(event, Event)
        assert event.id == "2070001"
        assert event.date == "2026-10-24"
        assert event.time == "15:00:00"
        assert event.start_time == datetime(2026, 10, 24, 15, 0, tzinfo=UTC)
        assert event.home_team == "Arsenal"
        assert event.away_team == "Chelsea"

    def test_start_time_from_date_and_time(self, tsdb, client):
        client.get_team_next_events.return_value = {
            "events": [{"idEvent": "1", "dateEvent": "2026-11-02", "strTime": "19:30:00+00:00"}]
        }
        [event] = tsdb.next_events_for_team("1")
        assert event.start_time == datetime(2026, 11, 2, 19, 30, tzinfo=UTC)

    def test_unparseable_start_time_is_none(self, tsdb, client):
        client.get_team_next_events.return_value = {
            "events": [{"idEvent": "1", "dateEvent": "TBD", "strTimestamp": ""}]
        }
        [event] = tsdb.next_events_for_team("1")
        assert event.start_time is None
        assert event.home_team is None


class TestPlayers:
    def test_parses_players(self, tsdb, client):
        client.lookup_all_players.return_value = {
            "player": [
                {
                    "idPlayer": "34145001",
                    "strPlayer": "Bukayo Saka",
                    "strPosition": "Right Winger",
                    "strTeam": "Arsenal",
                    "strCutout": "https://img/saka.png",
                }
            ]
        }

        assert tsdb.lookup_players_by_team_id("133604") == [
            Player(
                id="34145001",
                name="Bukayo Saka",
                position="Right Winger",
                team="Arsenal",
                cutout_url="https://img/saka.png",
            )
        ]

    def test_search_players(self, tsdb, client):
        client.search_players.return_value = {"player": None}
        assert tsdb.search_players_by_team_name("Chelsea") == []
        client.search_players.assert_called_once_with("Chelsea")

    def test_name(self, tsdb):
        assert tsdb.name == "tsdb"
