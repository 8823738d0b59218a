"""
Logging Configuration

Structured logging setup using structlog for consistent, JSON-formatted logs
throughout the Jobly API.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import LoggerFactory
from pythonjsonlogger.json import JsonFormatter

from jobly.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the application."""

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,

            # JSON formatting for production, pretty for development
            structlog.dev.ConsoleRenderer() if settings.DEBUG
            else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    if settings.LOG_FILE:
        _add_file_handler(settings.LOG_FILE)


def _add_file_handler(path: str) -> None:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename.endswith(path):
            return

    file_handler = logging.FileHandler(path)
    file_handler.setFormatter(
        JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


def log_database_operation(
    operation: str,
    table: str,
    record_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log database operation.

    Args:
        operation: Type of operation (create, update, delete)
        table: Database table involved
        record_id: Key of the record being operated on
        **kwargs: Additional operation data
    """
    logger = get_logger("database")
    logger.info(
        "Database operation",
        operation=operation,
        table=table,
        record_id=record_id,
        **kwargs
    )
