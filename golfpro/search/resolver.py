"""Turns search criteria into a filtered, distance-annotated result set."""
import logging
from typing import Awaitable, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from golfpro.schemas.geocoding import Coordinates, GeocodeStatus
from golfpro.schemas.instructor import InstructorSummary
from golfpro.schemas.search import FilterCriteria
from golfpro.search.filters import apply_filters
from golfpro.services.distance import distance, entity_coordinates, filter_within_radius
from golfpro.services.geocoding_service import GeocodingService

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """A search could not be resolved; the message is shown to the user."""


class LocationNotFoundError(SearchError):
    def __init__(self, zip_code: str):
        self.zip_code = zip_code
        super().__init__(f"ZIP code {zip_code} not found")


class GeocodingUnavailableError(SearchError):
    def __init__(self):
        super().__init__("Location search is unavailable. Please try again.")


class SearchResolution(BaseModel):
    """Resolved candidates for one committed search."""

    model_config = ConfigDict(frozen=True)

    items: List[InstructorSummary] = Field(default_factory=list)
    center: Optional[Coordinates] = None


CandidateFetcher = Callable[[], Awaitable[List[InstructorSummary]]]


class InstructorSearch:
    """
    Resolves criteria against the instructor directory.

    Fetches candidates, geocodes the ZIP code when one is given, keeps
    instructors within the radius and applies the remaining criteria.
    """

    def __init__(
        self,
        fetch_candidates: CandidateFetcher,
        geocoder: GeocodingService,
        default_radius_km: float
    ):
        self.fetch_candidates = fetch_candidates
        self.geocoder = geocoder
        self.default_radius_km = default_radius_km

    async def __call__(self, criteria: FilterCriteria) -> SearchResolution:
        candidates = await self.fetch_candidates()
        center = None

        if criteria.has_location:
            zip_code = criteria.zip_code.strip()
            result = await self.geocoder.lookup(zip_code)
            if result.status == GeocodeStatus.NOT_FOUND:
                raise LocationNotFoundError(zip_code)
            if not result.found:
                raise GeocodingUnavailableError()

            center = result.coordinates
            radius_km = criteria.radius_km if criteria.radius_km is not None else self.default_radius_km
            candidates = [
                candidate.model_copy(update={
                    "distance_km": round(distance(entity_coordinates(candidate), center), 1)
                })
                for candidate in filter_within_radius(candidates, center, radius_km)
            ]
            logger.info(
                f"{len(candidates)} instructors within {radius_km} km of ZIP code {zip_code}"
            )

        return SearchResolution(items=apply_filters(candidates, criteria), center=center)
