"""Sports data endpoints.

- GET /sports/teams/{league} - Teams for a sport category
- GET /sports/events/{team_id} - Upcoming events for a team
- GET /sports/players/{team_id} - Roster for a team

These never fail on provider trouble: the service degrades to curated,
synthesized or empty data instead.
"""

from fastapi import APIRouter, Depends

from sporttracker.api.dependencies import get_sports_service
from sporttracker.api.models import EventResponse, PlayerResponse, TeamResponse
from sporttracker.services import SportsDataService

router = APIRouter(prefix="/sports")


@router.get("/teams/{league}", response_model=list[TeamResponse])
def get_teams(league: str, service: SportsDataService = Depends(get_sports_service)):
    """List teams for a sport category (soccer, basketball, baseball, football)."""
    return service.get_teams(league)


@router.get("/events/{team_id}", response_model=list[EventResponse])
def get_events(team_id: str, service: SportsDataService = Depends(get_sports_service)):
    """List upcoming events for a team."""
    return service.get_events(team_id)


@router.get("/players/{team_id}", response_model=list[PlayerResponse])
def get_players(team_id: str, service: SportsDataService = Depends(get_sports_service)):
    """List players for a team."""
    return service.get_players(team_id)
