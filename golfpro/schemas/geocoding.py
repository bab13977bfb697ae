"""Pydantic schemas for geocoding service."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Coordinates(BaseModel):
    """Geographic coordinates. Immutable once built."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "latitude": 40.7128,
                "longitude": -74.0060
            }
        }
    )

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class GeocodeStatus(str, Enum):
    """Outcome of a ZIP code lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


class GeocodeResult(BaseModel):
    """ZIP lookup outcome; ``coordinates`` is set only when status is FOUND."""

    model_config = ConfigDict(frozen=True)

    status: GeocodeStatus
    coordinates: Optional[Coordinates] = None

    @property
    def found(self) -> bool:
        return self.status == GeocodeStatus.FOUND


class ZipValidationResult(BaseModel):
    """Result of postal code format validation."""

    is_valid: bool
    error: Optional[str] = None
