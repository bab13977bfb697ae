"""Engagement counters for instructor profiles."""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from golfpro.database import Base


class InstructorStats(Base):
    """Per-instructor profile view and contact click totals."""
    __tablename__ = "instructor_stats"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    instructor_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("instructors.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    profile_views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    contact_clicks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )

    def __repr__(self) -> str:
        return (
            f"<InstructorStats(instructor_id={self.instructor_id}, "
            f"views={self.profile_views}, clicks={self.contact_clicks})>"
        )


class ContactClickLog(Base):
    """One row per contact button click on a profile."""
    __tablename__ = "contact_click_logs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    instructor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("instructors.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    click_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
