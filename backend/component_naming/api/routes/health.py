"""
Health check endpoints
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from component_naming.core.config import get_settings
from component_naming.core.logging_config import LoggingConfig

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint

    Returns:
        dict: Health status, the active naming policy and log counts by level
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.app_name,
        "naming_policy": settings.naming_policy.model_dump(mode="json"),
        "log_counts": LoggingConfig.get_metrics(),
    }
