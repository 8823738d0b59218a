"""
FastAPI Main Application

Entry point for the Jobly API server.
Configures routing, middleware, and application lifecycle events.
"""

from typing import Dict, Any, Optional, Sequence
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobly.api.v1 import default_routers
from jobly.core.config import Settings, get_settings
from jobly.core.database import DatabaseManager
from jobly.core.security import SecurityManager
from jobly.middleware.error_handler import RequestContextMiddleware, register_exception_handlers
from jobly.repositories import CompanyRepository, JobRepository
from jobly.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    routers: Optional[Sequence[APIRouter]] = None,
) -> FastAPI:
    """
    Build a Jobly application.

    Args:
        settings: Application settings (defaults to the environment)
        routers: Routers to mount (defaults to default_routers())

    Returns:
        FastAPI: Configured application; its lifespan opens and closes the
        database engine.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    db_manager = DatabaseManager(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.APP_NAME} API...")
        await db_manager.init_database()
        await db_manager.create_tables()

        yield

        logger.info(f"Shutting down {settings.APP_NAME} API...")
        await db_manager.close_connections()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Companies and the jobs they post",
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_manager = db_manager
    app.state.security = SecurityManager(settings)
    app.state.company_repository = CompanyRepository(db_manager)
    app.state.job_repository = JobRepository(db_manager)

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.get_cors_methods_list(),
        allow_headers=settings.get_cors_headers_list(),
    )

    register_exception_handlers(app, settings)

    mounted = list(routers if routers is not None else default_routers())
    for router in mounted:
        app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "status": "running",
            "endpoints": [router.prefix for router in mounted],
        }

    return app


app = create_app()


def run() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "jobly.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
