"""Health check endpoint."""

from fastapi import APIRouter

from sporttracker import __version__

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
