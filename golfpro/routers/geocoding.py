"""Geocoding API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from golfpro.dependencies import get_geocoding_service
from golfpro.schemas.geocoding import Coordinates, GeocodeStatus
from golfpro.services.geocoding_service import GeocodingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/geocode")


@router.get(
    "/zip",
    response_model=Coordinates,
    summary="Geocode ZIP code",
    description="""
    Convert a US ZIP code to geographic coordinates (forward geocoding).

    Uses the Nominatim geocoding service. Each request is forwarded as-is:
    no caching and no retry.
    """,
    responses={
        200: {
            "description": "Successfully geocoded ZIP code",
            "content": {
                "application/json": {
                    "example": {
                        "latitude": 40.7128,
                        "longitude": -74.0060
                    }
                }
            }
        },
        404: {
            "description": "ZIP code not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "ZIP code 99999 not found",
                        "error_code": "NOT_FOUND"
                    }
                }
            }
        },
        503: {
            "description": "Geocoding service unavailable"
        }
    }
)
async def geocode_zip(
    zip: str = Query(
        ...,
        pattern=r"^\d{5}(-\d{4})?$",
        description="US ZIP code (5 digits or ZIP+4)",
        examples=["10001"]
    ),
    geocoding_service: GeocodingService = Depends(get_geocoding_service)
) -> Coordinates:
    """
    Convert ZIP code to coordinates.

    Args:
        zip: US ZIP code
        geocoding_service: Geocoding service instance

    Returns:
        Coordinates with latitude and longitude
    """
    result = await geocoding_service.lookup(zip)

    if result.status == GeocodeStatus.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ZIP code {zip} not found"
        )
    if not result.found:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Geocoding service unavailable"
        )

    return result.coordinates
