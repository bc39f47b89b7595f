"""Liveness probe for load balancers and Lambda warmers."""

from typing import Any

from fastapi import APIRouter

from .. import __version__
from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Report service identity and whether the movie lookup has credentials."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": __version__,
        "environment": settings.environment,
        "movie_lookup_configured": bool(settings.omdb_api_key),
    }
