"""
Database Configuration and Query Execution

Async SQLAlchemy engine management for the Jobly API. Repositories hand
rendered BoundQuery objects to the DatabaseManager, which runs each one in
its own short transaction and returns plain row mappings.
"""

from typing import Any, Dict, List, Optional
import time

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from jobly.core.config import Settings
from jobly.sql.builder import BoundQuery
from jobly.utils.logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Database engine lifecycle and raw query execution."""

    def __init__(self, settings: Settings) -> None:
        """Initialize database manager."""
        self.settings = settings
        self._engine: Optional[AsyncEngine] = None
        self.slow_query_threshold = settings.SLOW_QUERY_THRESHOLD

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._engine

    async def init_database(self) -> None:
        """Create the engine and check connectivity."""
        if self._engine is not None:
            return

        try:
            engine_kwargs: Dict[str, Any] = {
                "echo": self.settings.DEBUG,
            }

            # SQLite-specific configuration
            if self.settings.is_sqlite:
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
            else:
                # PostgreSQL-specific configuration
                engine_kwargs["pool_size"] = self.settings.DATABASE_POOL_SIZE
                engine_kwargs["max_overflow"] = self.settings.DATABASE_MAX_OVERFLOW

            self._engine = create_async_engine(self.settings.DATABASE_URL, **engine_kwargs)

            if self.settings.is_sqlite:
                event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

            await self._test_database_connection()
            logger.info("Database connection initialized", dialect=self._engine.dialect.name)

        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    async def _test_database_connection(self) -> None:
        """Test database connection."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create database tables."""
        # Models register themselves on Base.metadata when imported.
        import jobly.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            raise

    async def close_connections(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database engine disposed")

    async def health_check(self) -> bool:
        try:
            await self._test_database_connection()
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def fetch_all(self, query: BoundQuery) -> List[Dict[str, Any]]:
        """Run a query and return every row as a dict."""
        async with self.engine.begin() as conn:
            started = time.perf_counter()
            result = await conn.execute(query.statement())
            rows = [dict(row._mapping) for row in result]
            self._record_query(query, time.perf_counter() - started)
            return rows

    async def fetch_one(self, query: BoundQuery) -> Optional[Dict[str, Any]]:
        """Run a query and return its first row, or None."""
        rows = await self.fetch_all(query)
        return rows[0] if rows else None

    def _record_query(self, query: BoundQuery, duration: float) -> None:
        if duration > self.slow_query_threshold:
            logger.warning(
                f"Slow query detected: {duration:.3f}s",
                duration=duration,
                sql=query.sql,
            )
        else:
            logger.debug("Query executed", duration=duration, sql=query.sql)
