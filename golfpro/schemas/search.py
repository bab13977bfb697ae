"""Schemas for instructor search: criteria, pagination and view mode."""
import math
from enum import Enum
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from golfpro.schemas.geocoding import Coordinates
from golfpro.schemas.instructor import InstructorSummary


class ViewMode(str, Enum):
    """Layout of the result collection."""

    GRID = "grid"
    LIST = "list"


class FilterCriteria(BaseModel):
    """
    One search interaction's worth of user input.

    Criteria are immutable; a new search replaces them wholesale.
    """

    model_config = ConfigDict(frozen=True)

    search_term: str = Field(default="", description="Matched against name, specialization and location")
    zip_code: Optional[str] = Field(None, description="US ZIP code for radius search")
    radius_km: Optional[float] = Field(None, description="Radius around the ZIP code in kilometres")
    specialties: FrozenSet[str] = Field(default_factory=frozenset)
    certifications: FrozenSet[str] = Field(default_factory=frozenset)
    min_experience: Optional[int] = Field(None, ge=0)
    max_experience: Optional[int] = Field(None, ge=0)
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)

    @property
    def has_location(self) -> bool:
        return bool(self.zip_code and self.zip_code.strip())


class PaginationState(BaseModel):
    """Current page over a resolved result set."""

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=6, gt=0)
    total_items: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size


class InstructorSearchPage(BaseModel):
    """One page of directory results."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [],
                "pagination": {
                    "current_page": 1,
                    "page_size": 6,
                    "total_items": 0,
                    "total_pages": 0
                },
                "view_mode": "list",
                "effective_view_mode": "grid",
                "center": {"latitude": 30.2672, "longitude": -97.7431}
            }
        }
    )

    items: List[InstructorSummary] = Field(default_factory=list)
    pagination: PaginationState
    view_mode: ViewMode = Field(..., description="Requested view mode")
    effective_view_mode: ViewMode = Field(..., description="View mode to render for the viewport")
    center: Optional[Coordinates] = Field(None, description="Geocoded search centre")
