"""
Health Check API v1 Endpoints

System health and status monitoring endpoints.
"""

from typing import Dict, Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from jobly.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(request: Request) -> Dict[str, Any]:
    """Basic health check endpoint."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


@router.get("/status")
async def detailed_status(request: Request) -> JSONResponse:
    """Detailed status including database connectivity."""
    database_ok = await request.app.state.db_manager.health_check()
    overall = "healthy" if database_ok else "unhealthy"
    if not database_ok:
        logger.error("Status check failed: database unreachable")

    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": overall,
            "services": {
                "api": "healthy",
                "database": "healthy" if database_ok else "unhealthy",
            },
        },
    )
