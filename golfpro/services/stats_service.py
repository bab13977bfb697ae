"""Profile view and contact click counters."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import bindparam, func, select, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession

from golfpro.models.instructor_stats import ContactClickLog, InstructorStats

logger = logging.getLogger(__name__)


class StatsService:
    """
    Engagement counters backed by the hosted database.

    Profile views are incremented by the ``increment_profile_views`` database
    function so concurrent page loads do not race on the counter.
    """

    async def increment_profile_views(self, db: AsyncSession, instructor_id: UUID) -> None:
        """
        Add one profile view for an instructor.

        Args:
            db: Database session
            instructor_id: Instructor whose profile was viewed
        """
        statement = select(
            func.increment_profile_views(
                bindparam("instructor_uuid", instructor_id, type_=PG_UUID(as_uuid=True))
            )
        )
        await db.execute(statement)
        await db.commit()
        logger.info(f"Profile view recorded for instructor {instructor_id}")

    async def record_contact_click(
        self,
        db: AsyncSession,
        instructor_id: UUID,
        click_type: Optional[str] = None
    ) -> None:
        """
        Add one contact click and log which control was used.

        Creates the stats row on first click.

        Args:
            db: Database session
            instructor_id: Instructor whose contact control was clicked
            click_type: email, phone, website, ...
        """
        result = await db.execute(
            select(InstructorStats.id).where(InstructorStats.instructor_id == instructor_id)
        )
        stats_id = result.scalar_one_or_none()

        if stats_id is not None:
            await db.execute(
                update(InstructorStats)
                .where(InstructorStats.id == stats_id)
                .values(
                    contact_clicks=InstructorStats.contact_clicks + 1,
                    updated_at=func.now()
                )
            )
        else:
            db.add(InstructorStats(
                instructor_id=instructor_id,
                profile_views=0,
                contact_clicks=1
            ))

        db.add(ContactClickLog(instructor_id=instructor_id, click_type=click_type))
        await db.commit()
        logger.info(f"Contact click ({click_type}) recorded for instructor {instructor_id}")


# Singleton instance
stats_service = StatsService()
