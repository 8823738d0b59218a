"""
API v1 Package

Contains all version 1 API endpoints for the Jobly API.
"""

from typing import List

from fastapi import APIRouter

from .companies import router as companies_router
from .jobs import router as jobs_router
from .health import router as health_router


def default_routers() -> List[APIRouter]:
    """Routers mounted by create_app() when none are passed explicitly."""
    return [health_router, companies_router, jobs_router]


__all__ = [
    "companies_router",
    "jobs_router",
    "health_router",
    "default_routers",
]
