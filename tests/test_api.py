"""API endpoint tests using FastAPI TestClient with an in-memory provider."""

import pytest
from conftest import make_event, make_player, make_team
from fastapi.testclient import TestClient

from sporttracker import __version__
from sporttracker.api.app import create_app
from sporttracker.providers import TSDBProvider
from sporttracker.services import SportsDataService, create_sports_service
from sporttracker.utilities.cache import TTLCache


@pytest.fixture
def client(service):
    app = create_app(sports_service=service)
    with TestClient(app) as client:
        yield client


# =============================================================================
# HEALTH CHECK
# =============================================================================


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}


# =============================================================================
# SPORTS ENDPOINTS
# =============================================================================


class TestTeamsEndpoint:
    def test_returns_teams(self, client, provider):
        provider.teams_by_league_id["4387"] = [
            make_team("134867", "Los Angeles Lakers", league="NBA", sport="Basketball")
        ]

        response = client.get("/api/sports/teams/basketball")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": "134867",
                "name": "Los Angeles Lakers",
                "sport": "Basketball",
                "league": "NBA",
                "badge_url": "https://img/134867.png",
            }
        ]

    def test_upstream_down_serves_curated_teams(self, client, provider):
        provider.fail_all = True

        response = client.get("/api/sports/teams/basketball")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["134859", "134860", "134861"]

    def test_unknown_category_is_empty(self, client):
        response = client.get("/api/sports/teams/curling")
        assert response.status_code == 200
        assert response.json() == []


class TestEventsEndpoint:
    def test_returns_events(self, client, provider):
        provider.events_by_team["133604"] = [make_event("2070001")]

        response = client.get("/api/sports/events/133604")

        assert response.status_code == 200
        [event] = response.json()
        assert event["id"] == "2070001"
        assert event["date"] == "2026-10-24"
        assert event["start_time"] is None

    def test_upstream_down_is_empty_list(self, client, provider):
        provider.fail_all = True

        response = client.get("/api/sports/events/133604")

        assert response.status_code == 200
        assert response.json() == []


class TestPlayersEndpoint:
    def test_returns_players(self, client, provider):
        provider.team_by_id["133613"] = [make_team("133613", "Chelsea")]
        provider.players_by_team_id["133613"] = [make_player("34145001", "Cole Palmer", "Chelsea")]

        response = client.get("/api/sports/players/133613")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Cole Palmer"]

    def test_contaminated_roster_is_replaced(self, client, provider):
        provider.team_by_id["133613"] = [make_team("133613", "Chelsea")]
        provider.players_by_team_id["133613"] = [make_player("34145100", "Bukayo Saka", "Arsenal")]

        players = client.get("/api/sports/players/133613").json()

        assert players[0]["id"] == "demo_133613_0"
        assert all(p["team"] == "Chelsea" for p in players)

    def test_upstream_down_synthesizes_roster(self, client, provider):
        provider.fail_all = True

        players = client.get("/api/sports/players/424242").json()

        assert len(players) == 5
        assert all(p["id"] for p in players)


# =============================================================================
# CACHE ENDPOINTS
# =============================================================================


class TestCacheEndpoints:
    def test_status_reports_size(self, client, provider):
        provider.events_by_team["133604"] = [make_event("2070001")]
        client.get("/api/sports/events/133604")
        client.get("/api/sports/events/133604")

        data = client.get("/api/cache/status").json()

        assert data["size"] == 1
        assert data["hits"] >= 1
        assert 0.0 <= data["hit_rate"] <= 1.0

    def test_clear_drops_entries(self, client, provider):
        provider.events_by_team["133604"] = [make_event("2070001")]
        client.get("/api/sports/events/133604")

        response = client.post("/api/cache/clear")

        assert response.status_code == 200
        assert response.json() == {"cleared": 1}
        assert client.get("/api/cache/status").json()["size"] == 0

        client.get("/api/sports/events/133604")
        assert provider.calls["next_events_for_team"] == 2


# =============================================================================
# SERVICE WIRING
# =============================================================================


class TestServiceWiring:
    def test_factory_uses_given_provider_and_cache(self, provider, cache):
        service = create_sports_service(cache=cache, provider=provider)

        assert service.cache is cache
        provider.teams_by_league_id["4391"] = [
            make_team("134946", "Kansas City Chiefs", league="NFL", sport="American Football")
        ]
        assert [t.id for t in service.get_teams("football")] == ["134946"]

    def test_factory_defaults_to_tsdb_and_fresh_cache(self):
        service = create_sports_service()
        try:
            assert isinstance(service._provider, TSDBProvider)
            assert isinstance(service.cache, TTLCache)
            assert len(service.cache) == 0
        finally:
            service._provider.close()

    def test_lifespan_builds_and_releases_default_service(self):
        app = create_app()

        with TestClient(app) as client:
            assert isinstance(app.state.sports_service, SportsDataService)
            assert client.get("/api/cache/status").json()["size"] == 0

        assert app.state.sports_service is None

    def test_lifespan_keeps_injected_service(self, service):
        app = create_app(sports_service=service)

        with TestClient(app):
            assert app.state.sports_service is service

        assert app.state.sports_service is service
