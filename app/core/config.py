"""
Application configuration using Pydantic Settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    # App
    APP_NAME: str = "Portfolio CMS"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
    ]

    # Database
    DATABASE_URL: str = Field(...)

    # Redis (sitemap cache)
    REDIS_URL: str = Field(default="redis://localhost:6379")
    SITEMAP_CACHE_TTL: int = 3600

    # Security
    SECRET_KEY: str = Field(...)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    ADMIN_USERNAME: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    LOGIN_RATE_LIMIT: str = "5/minute"
    RATE_LIMIT_ENABLED: bool = True

    # Content
    DOMAIN: str = "http://localhost:3000"  # Base URL for sitemap entries
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100
    SLUG_MAX_RETRIES: int = 3
    SITEMAP_EMPTY_IS_ERROR: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
