"""FastAPI dependencies for dependency injection.

The service and its cache are built once in the application lifespan and
stored on app.state; routes receive them through these getters.
"""

from fastapi import Request

from sporttracker.services import SportsDataService
from sporttracker.utilities.cache import TTLCache


def get_sports_service(request: Request) -> SportsDataService:
    return request.app.state.sports_service


def get_cache(request: Request) -> TTLCache:
    return request.app.state.sports_service.cache
