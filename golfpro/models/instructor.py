"""Instructor model mapped onto the hosted ``instructors`` table."""
import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, Integer, Float, Text, DateTime, func
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from golfpro.database import Base


class Instructor(Base):
    """
    Golf instructor listed in the directory.

    Only the columns read by the directory and profile endpoints are mapped.
    Array and JSON columns may hold legacy shapes (Postgres array literals,
    JSON encoded as text); ``instructor_service`` normalizes them on read.
    """
    __tablename__ = "instructors"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )

    # Identity and contact
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Professional information
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    specialization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tagline: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    additional_bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    specialties: Mapped[Optional[Any]] = mapped_column(ARRAY(Text), nullable=True)
    certifications: Mapped[Optional[Any]] = mapped_column(ARRAY(Text), nullable=True)
    highlights: Mapped[Optional[Any]] = mapped_column(ARRAY(Text), nullable=True)
    photos: Mapped[Optional[Any]] = mapped_column(ARRAY(Text), nullable=True)
    lesson_types: Mapped[Optional[Any]] = mapped_column(JSONB, nullable=True)
    services: Mapped[Optional[Any]] = mapped_column(JSONB, nullable=True)
    faqs: Mapped[Optional[Any]] = mapped_column(JSONB, nullable=True)
    contact_info: Mapped[Optional[Any]] = mapped_column(JSONB, nullable=True)

    # Location
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Moderation: pending, approved or rejected
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        server_default="pending"
    )

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
        return f"<Instructor(id={self.id}, name={self.name}, status={self.status})>"
