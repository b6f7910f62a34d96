"""
Health check and service information endpoints.
"""

from typing import Dict
from fastapi import APIRouter, Depends, status
from datetime import datetime, timezone

from app.core.config import Settings, settings
from app.core.deps import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "Healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    }


@router.get(f"{settings.API_PREFIX}/version", status_code=status.HTTP_200_OK, summary="Get API version")
def get_version(config: Settings = Depends(get_settings)) -> Dict[str, str]:
    """
    Returns the current version and environment of the API.
    """
    return {
        "version": config.VERSION,
        "environment": config.ENVIRONMENT
    }
