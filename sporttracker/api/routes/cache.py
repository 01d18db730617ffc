"""Cache management endpoints.

- GET /cache/status - Cache counters
- POST /cache/clear - Drop every cached entry
"""

import logging

from fastapi import APIRouter, Depends

from sporttracker.api.dependencies import get_cache
from sporttracker.api.models import CacheClearResponse, CacheStatusResponse
from sporttracker.utilities.cache import TTLCache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cache")


@router.get("/status", response_model=CacheStatusResponse)
def get_cache_status(cache: TTLCache = Depends(get_cache)):
    """Get cache size and hit/miss counters."""
    return cache.stats()


@router.post("/clear", response_model=CacheClearResponse)
def clear_cache(cache: TTLCache = Depends(get_cache)):
    """Clear all cached teams, events and players."""
    cleared = cache.clear()
    logger.info("[CACHE] Cleared %d entries via API", cleared)
    return {"cleared": cleared}
