"""Pydantic models for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Sports data
# =============================================================================


class TeamResponse(BaseModel):
    """A team."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    sport: str
    league: str
    badge_url: str


class EventResponse(BaseModel):
    """An upcoming event."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    date: str
    time: str
    league: str
    start_time: datetime | None = None
    home_team: str | None = None
    away_team: str | None = None


class PlayerResponse(BaseModel):
    """A rostered (or placeholder) player."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    position: str
    team: str
    cutout_url: str


# =============================================================================
# Cache
# =============================================================================


class CacheStatusResponse(BaseModel):
    """Cache counters."""

    size: int
    hits: int
    misses: int
    hit_rate: float


class CacheClearResponse(BaseModel):
    """Result of clearing the cache."""

    cleared: int
