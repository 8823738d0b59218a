"""
Application Configuration

Centralized configuration management using Pydantic settings.
Handles environment variables, secrets, and application settings.
"""

from typing import List, Optional
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Jobly"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Security
    SECRET_KEY: str = "secret-dev"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, ge=1)

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://localhost/jobly"
    DATABASE_POOL_SIZE: int = Field(5, ge=1)
    DATABASE_MAX_OVERFLOW: int = Field(10, ge=0)
    SLOW_QUERY_THRESHOLD: float = 1.0  # seconds

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: str = "*"
    CORS_HEADERS: str = "*"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def get_cors_methods_list(self) -> List[str]:
        """Get CORS methods as a list."""
        if self.CORS_METHODS == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_METHODS.split(",")]

    def get_cors_headers_list(self) -> List[str]:
        """Get CORS headers as a list."""
        if self.CORS_HEADERS == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_HEADERS.split(",")]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
