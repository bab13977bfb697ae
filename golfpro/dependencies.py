"""FastAPI dependencies for settings, services and database access."""
from functools import lru_cache

from golfpro.config import Settings
from golfpro.services.geocoding_service import GeocodingService


@lru_cache()
def get_settings() -> Settings:
    """
    Dependency to get application settings.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


def get_geocoding_service() -> GeocodingService:
    """
    Dependency to get geocoding service instance.

    Returns:
        GeocodingService: Configured geocoding service
    """
    return GeocodingService(get_settings())
