"""Application configuration using Pydantic Settings."""

import os
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    database_url: str = Field(
        ...,
        description="Supabase Postgres URL with asyncpg driver"
    )
    database_pool_size: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Connections kept open to the database"
    )
    database_statement_cache_size: int = Field(
        default=0,
        ge=0,
        description="asyncpg prepared statement cache; 0 when connecting through the Supabase pooler"
    )

    # Application Configuration
    app_name: str = Field(
        default="Golf Pro Finder API",
        description="Application name"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    allowed_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    # Server Configuration
    host: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port"
    )

    # Geocoding Configuration
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Nominatim geocoding service URL"
    )
    geocoding_user_agent: str = Field(
        default="GolfProFinder/1.0 (https://golfprofinder.com)",
        description="User agent for geocoding requests"
    )
    geocoding_timeout: float = Field(
        default=5.0,
        gt=0,
        le=60.0,
        description="Geocoding request timeout in seconds"
    )

    # Search Configuration
    search_page_size: int = Field(
        default=6,
        ge=1,
        le=100,
        description="Default number of instructors per page"
    )
    search_debounce_seconds: float = Field(
        default=0.3,
        ge=0.0,
        le=5.0,
        description="Quiet period before a changed search input is committed"
    )
    default_radius_km: float = Field(
        default=5.0,
        gt=0,
        le=500.0,
        description="Search radius used when a ZIP code is given without one"
    )
    mobile_breakpoint_px: int = Field(
        default=768,
        ge=1,
        description="Viewport width below which the grid view is forced"
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("TESTING") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that database URL uses asyncpg driver."""
        if not v.startswith("postgresql+asyncpg://"):
            raise ValueError(
                "DATABASE_URL must use asyncpg driver (postgresql+asyncpg://)"
            )
        return v

    def get_allowed_origins_list(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]
