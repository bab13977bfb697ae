"""Instructor profile endpoints."""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from golfpro.database import get_async_session
from golfpro.schemas.instructor import InstructorProfile
from golfpro.services.instructor_service import instructor_service, to_profile

router = APIRouter(prefix="/api/instructors")


@router.get("/{instructor_id}", response_model=InstructorProfile)
async def get_instructor(
    instructor_id: UUID,
    session: AsyncSession = Depends(get_async_session),
) -> InstructorProfile:
    """
    Get an approved instructor's profile.

    Pending and rejected instructors are reported as not found.
    """
    instructor = await instructor_service.get_approved(session, instructor_id)
    if instructor is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Instructor not found"
        )
    return to_profile(instructor)
