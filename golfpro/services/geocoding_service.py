"""Geocoding service with Nominatim integration."""

import logging
import re
from typing import Optional

import httpx
from pydantic import ValidationError

from golfpro.config import Settings
from golfpro.schemas.geocoding import (
    Coordinates,
    GeocodeResult,
    GeocodeStatus,
    ZipValidationResult,
)

logger = logging.getLogger(__name__)


class GeocodingService:
    """
    Resolves US ZIP codes to coordinates using Nominatim.

    Every call issues a single request: no retry, no caching and no rate
    limiting. Failures never escape; they are reported through
    ``GeocodeResult.status`` by ``lookup`` and collapsed to ``None`` by
    ``resolve``.
    """

    def __init__(self, settings: Settings):
        """
        Initialize geocoding service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.nominatim_url = settings.nominatim_url
        self.user_agent = settings.geocoding_user_agent
        self.timeout = settings.geocoding_timeout

    async def resolve(self, zip_code: str) -> Optional[Coordinates]:
        """
        Convert ZIP code to coordinates.

        Args:
            zip_code: US ZIP code

        Returns:
            Coordinates of the first match, or None when the code is unknown
            or the service could not be reached
        """
        result = await self.lookup(zip_code)
        return result.coordinates

    async def lookup(self, zip_code: str) -> GeocodeResult:
        """
        Convert ZIP code to coordinates, keeping the failure reason.

        Args:
            zip_code: US ZIP code

        Returns:
            GeocodeResult with status FOUND, NOT_FOUND (no candidates) or
            UNAVAILABLE (transport error or malformed response)
        """
        zip_code = (zip_code or "").strip()
        if not zip_code:
            return GeocodeResult(status=GeocodeStatus.NOT_FOUND)

        logger.info(f"Geocoding ZIP code: {zip_code}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.nominatim_url}/search",
                    params={
                        "format": "json",
                        "postalcode": zip_code,
                        "country": "US",
                        "limit": 1
                    },
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept-Language": "en-US,en;q=0.9"
                    }
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException:
            logger.error(f"Nominatim request timeout for ZIP code: {zip_code}")
            return GeocodeResult(status=GeocodeStatus.UNAVAILABLE)
        except httpx.HTTPStatusError as e:
            logger.error(f"Nominatim HTTP error: {e}")
            return GeocodeResult(status=GeocodeStatus.UNAVAILABLE)
        except httpx.HTTPError as e:
            logger.error(f"Nominatim request error: {e}")
            return GeocodeResult(status=GeocodeStatus.UNAVAILABLE)
        except ValueError as e:
            logger.error(f"Nominatim returned invalid JSON: {e}")
            return GeocodeResult(status=GeocodeStatus.UNAVAILABLE)

        if isinstance(data, list) and not data:
            logger.info(f"No results for ZIP code: {zip_code}")
            return GeocodeResult(status=GeocodeStatus.NOT_FOUND)

        try:
            coordinates = Coordinates(
                latitude=float(data[0]["lat"]),
                longitude=float(data[0]["lon"])
            )
        except (KeyError, IndexError, TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Malformed Nominatim response for ZIP code {zip_code}: {e}")
            return GeocodeResult(status=GeocodeStatus.UNAVAILABLE)

        logger.info(
            f"Resolved ZIP code {zip_code} to "
            f"{coordinates.latitude}, {coordinates.longitude}"
        )
        return GeocodeResult(status=GeocodeStatus.FOUND, coordinates=coordinates)


_POSTAL_PATTERNS = {
    "USA": (re.compile(r"^\d{5}(-\d{4})?$"), "US ZIP code must be 5 digits or ZIP+4 format"),
    "IN": (re.compile(r"^\d{6}$"), "Indian PIN code must be 6 digits"),
    "GB": (
        re.compile(r"^[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}$", re.IGNORECASE),
        "Invalid UK postcode format"
    ),
    "CA": (
        re.compile(
            r"^[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z] ?\d[ABCEGHJ-NPRSTV-Z]\d$",
            re.IGNORECASE
        ),
        "Invalid Canadian postal code format"
    ),
}


def validate_zip_code(zip_code: str, country: str = "USA") -> ZipValidationResult:
    """
    Validate a postal code format for a country.

    Args:
        zip_code: Postal code as typed by the user
        country: Country code such as USA, IN, GB or CA

    Returns:
        ZipValidationResult with an error message when invalid
    """
    if not zip_code or not zip_code.strip():
        return ZipValidationResult(is_valid=False, error="Zip code is required")

    rule = _POSTAL_PATTERNS.get(country.upper())
    if rule:
        pattern, message = rule
        if not pattern.match(zip_code):
            return ZipValidationResult(is_valid=False, error=message)
    elif len(zip_code) < 3 or len(zip_code) > 10:
        return ZipValidationResult(
            is_valid=False,
            error="Postal code must be between 3 and 10 characters"
        )

    return ZipValidationResult(is_valid=True)
