"""Pydantic schemas for request/response validation."""
from golfpro.schemas.geocoding import (
    Coordinates,
    GeocodeResult,
    GeocodeStatus,
    ZipValidationResult,
)
from golfpro.schemas.instructor import (
    Service,
    FAQ,
    ContactInfo,
    InstructorSummary,
    InstructorProfile,
)
from golfpro.schemas.search import (
    FilterCriteria,
    InstructorSearchPage,
    PaginationState,
    ViewMode,
)
from golfpro.schemas.stats import (
    ProfileViewRequest,
    ContactClickRequest,
    StatsUpdateResponse,
)

__all__ = [
    # Geocoding schemas
    "Coordinates",
    "GeocodeResult",
    "GeocodeStatus",
    "ZipValidationResult",
    # Instructor schemas
    "Service",
    "FAQ",
    "ContactInfo",
    "InstructorSummary",
    "InstructorProfile",
    # Search schemas
    "FilterCriteria",
    "InstructorSearchPage",
    "PaginationState",
    "ViewMode",
    # Stats schemas
    "ProfileViewRequest",
    "ContactClickRequest",
    "StatsUpdateResponse",
]
