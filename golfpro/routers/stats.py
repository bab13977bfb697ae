"""Profile engagement counter endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from golfpro.database import get_async_session
from golfpro.schemas.stats import (
    ContactClickRequest,
    ProfileViewRequest,
    StatsUpdateResponse,
)
from golfpro.services.stats_service import stats_service

router = APIRouter(prefix="/api/stats")


@router.post("/profile-views", response_model=StatsUpdateResponse)
async def increment_profile_views(
    payload: ProfileViewRequest,
    session: AsyncSession = Depends(get_async_session),
) -> StatsUpdateResponse:
    """Record one view of an instructor profile."""
    await stats_service.increment_profile_views(session, payload.instructor_uuid)
    return StatsUpdateResponse()


@router.post("/contact-clicks", response_model=StatsUpdateResponse)
async def record_contact_click(
    payload: ContactClickRequest,
    session: AsyncSession = Depends(get_async_session),
) -> StatsUpdateResponse:
    """Record one click on an instructor's contact controls."""
    await stats_service.record_contact_click(
        session,
        payload.instructor_uuid,
        payload.click_type
    )
    return StatsUpdateResponse()
