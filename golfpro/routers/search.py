"""
Search router for the instructor directory.

This module provides the directory search endpoint: free-text and facet
filters, optional ZIP code radius search, pagination and the view mode to
render for the caller's viewport.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from golfpro.config import Settings
from golfpro.database import get_async_session
from golfpro.dependencies import get_geocoding_service, get_settings
from golfpro.schemas.search import (
    FilterCriteria,
    InstructorSearchPage,
    PaginationState,
    ViewMode,
)
from golfpro.search.pagination import go_to_page, page_slice
from golfpro.search.resolver import (
    GeocodingUnavailableError,
    InstructorSearch,
    LocationNotFoundError,
)
from golfpro.search.view_mode import effective_view_mode
from golfpro.services.geocoding_service import GeocodingService
from golfpro.services.instructor_service import instructor_service, summarize_all

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/search",
    tags=["search"],
    responses={
        404: {"description": "ZIP code not found"},
        500: {"description": "Internal server error"},
        503: {"description": "Geocoding service unavailable"},
    }
)


@router.get("/instructors", response_model=InstructorSearchPage)
async def search_instructors(
    q: str = Query("", max_length=200, description="Free text matched against name, specialization and location"),
    zip: Optional[str] = Query(None, pattern=r"^\d{5}(-\d{4})?$", description="US ZIP code for radius search"),
    radius_km: Optional[float] = Query(None, gt=0, le=500, description="Search radius in kilometres"),
    specialties: List[str] = Query([], description="Match instructors with any of these specialties"),
    certifications: List[str] = Query([], description="Match instructors holding all of these certifications"),
    min_experience: Optional[int] = Query(None, ge=0, description="Minimum years of experience"),
    max_experience: Optional[int] = Query(None, ge=0, description="Maximum years of experience"),
    min_price: Optional[float] = Query(None, ge=0, description="Minimum hourly rate in dollars"),
    max_price: Optional[float] = Query(None, ge=0, description="Maximum hourly rate in dollars"),
    page: int = Query(1, description="Page number; out of range values are clamped"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Instructors per page"),
    view_mode: ViewMode = Query(ViewMode.GRID, description="Preferred layout"),
    viewport_width: Optional[int] = Query(None, ge=0, description="Client viewport width in pixels"),
    session: AsyncSession = Depends(get_async_session),
    geocoding_service: GeocodingService = Depends(get_geocoding_service),
    settings: Settings = Depends(get_settings),
) -> InstructorSearchPage:
    """
    Search approved instructors.

    **Query Parameters:**
    - **q**: free text
    - **zip** / **radius_km**: only instructors within the radius of the ZIP code
      (default radius from settings)
    - **specialties**, **certifications**, **min/max_experience**, **min/max_price**: facets
    - **page** / **page_size**: pagination; the page is clamped into range
    - **view_mode** / **viewport_width**: narrow viewports always render as grid

    **Example Request:**
    ```
    GET /api/search/instructors?q=putting&zip=78701&radius_km=25&page=2
    ```
    """
    criteria = FilterCriteria(
        search_term=q,
        zip_code=zip,
        radius_km=radius_km,
        specialties=frozenset(specialties),
        certifications=frozenset(certifications),
        min_experience=min_experience,
        max_experience=max_experience,
        min_price=min_price,
        max_price=max_price,
    )

    async def fetch_candidates():
        instructors = await instructor_service.list_approved(session)
        return summarize_all(instructors)

    search = InstructorSearch(fetch_candidates, geocoding_service, settings.default_radius_km)

    try:
        resolution = await search(criteria)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except GeocodingUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except Exception as e:
        logger.error(f"Error in instructor search: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while searching for instructors"
        )

    pagination = go_to_page(
        PaginationState(
            page_size=page_size or settings.search_page_size,
            total_items=len(resolution.items),
        ),
        page
    )

    return InstructorSearchPage(
        items=page_slice(resolution.items, pagination),
        pagination=pagination,
        view_mode=view_mode,
        effective_view_mode=effective_view_mode(
            view_mode, viewport_width, settings.mobile_breakpoint_px
        ),
        center=resolution.center,
    )
