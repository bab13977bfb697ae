"""Instructor reads against the hosted database and record normalization."""
import json
import logging
import math
import re
from typing import Any, Iterable, List, Optional
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from golfpro.models.instructor import Instructor
from golfpro.schemas.instructor import (
    FAQ,
    ContactInfo,
    InstructorProfile,
    InstructorSummary,
    Service,
)

logger = logging.getLogger(__name__)

APPROVED_STATUS = "approved"
DEFAULT_PHOTO = (
    "https://images.unsplash.com/photo-1535131749006-b7f58c99034b"
    "?q=80&w=2070&auto=format&fit=crop"
)
DEFAULT_LESSON_TYPE = "In-Person / Online"
DEFAULT_CERTIFICATIONS = ["PGA Certified"]
BASE_HOURLY_RATE = 50

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_array(value: Any) -> List[str]:
    """Read a text[] column that may also arrive as a ``{a,b}`` literal or scalar."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    if isinstance(value, str):
        if value.startswith("{") and value.endswith("}"):
            return [item for item in value[1:-1].split(",") if item]
        return [value]
    return []


def parse_json(value: Any, default: Any) -> Any:
    """Decode a JSON column stored either natively or as a string."""
    if not value:
        return default
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return default
    return value


def parse_price(value: Any) -> float:
    """Turn ``75``, ``"75"`` or ``"$75.00"`` into a float; anything else is 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) and value >= 0 else 0.0
    try:
        return float(_NON_NUMERIC.sub("", str(value or "0")) or 0)
    except ValueError:
        return 0.0


def _to_service(raw: Any) -> Service:
    return Service(
        title=str(raw.get("title") or ""),
        description=str(raw.get("description") or ""),
        duration=str(raw.get("duration") or ""),
        price=parse_price(raw.get("price")),
    )


def normalize_lesson_types(lesson_types: Any, services: Any = None) -> List[Service]:
    """
    Build the list of offered lessons.

    ``lesson_types`` is the current column; older rows only carry
    ``services``, either as a list or as an object keyed by position.
    """
    if lesson_types:
        parsed = parse_json(lesson_types, [])
        if isinstance(parsed, list):
            return [_to_service(item) for item in parsed if isinstance(item, dict)]
        if isinstance(parsed, dict):
            return [
                _to_service(item) for item in parsed.values()
                if isinstance(item, dict) and "title" in item
            ]
        return []

    parsed = parse_json(services, [])
    if isinstance(parsed, list):
        return [_to_service(item) for item in parsed if isinstance(item, dict)]
    if isinstance(parsed, dict):
        return [
            _to_service(item) for key, item in parsed.items()
            if key != "0" and isinstance(item, dict) and item.get("title") not in (None, "", "0")
        ]
    return []


def hourly_rate(experience: int) -> int:
    """Base rate plus 10% per year of experience, rounded half up."""
    return int(math.floor(BASE_HOURLY_RATE * (1 + (experience or 0) / 10) + 0.5))


def _bounded(value: Any, limit: float) -> Optional[float]:
    """A coordinate within ``[-limit, limit]``, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or abs(number) > limit:
        return None
    return number


def display_name(instructor: Instructor) -> str:
    if instructor.first_name and instructor.last_name:
        return f"{instructor.first_name} {instructor.last_name}"
    return instructor.name or ""


def display_location(instructor: Instructor) -> str:
    if instructor.location:
        return instructor.location
    parts = [instructor.city, instructor.state, instructor.country]
    return ", ".join(part for part in parts if part)


def to_summary(instructor: Instructor, distance_km: Optional[float] = None) -> InstructorSummary:
    """Shape a database row as a directory card."""
    photos = parse_array(instructor.photos)
    specialties = parse_array(instructor.specialties)
    certifications = parse_array(instructor.certifications) or list(DEFAULT_CERTIFICATIONS)
    experience = max(instructor.experience or 0, 0)
    rate = hourly_rate(experience)
    latitude = _bounded(instructor.latitude, 90)
    longitude = _bounded(instructor.longitude, 180)
    if latitude is None or longitude is None:
        latitude = longitude = None
    primary_photo = photos[0] if photos else DEFAULT_PHOTO

    return InstructorSummary(
        id=instructor.id,
        name=display_name(instructor),
        location=display_location(instructor),
        image=primary_photo,
        experience=experience,
        specialty=specialties[0] if specialties else instructor.specialization,
        lesson_type=" / ".join(specialties) if specialties else DEFAULT_LESSON_TYPE,
        hourly_rate=rate,
        price_range=f"${rate}/Hr",
        specialization=instructor.specialization,
        specialties=specialties,
        certifications=certifications,
        services=normalize_lesson_types(instructor.lesson_types, instructor.services),
        latitude=latitude,
        longitude=longitude,
        distance_km=round(distance_km, 1) if distance_km is not None else None,
    )


def summarize_all(instructors: Iterable[Instructor]) -> List[InstructorSummary]:
    """
    Shape rows as directory cards, skipping rows that still fail validation.

    Skipped rows are logged with the validation error.
    """
    summaries = []
    for instructor in instructors:
        try:
            summaries.append(to_summary(instructor))
        except ValidationError as e:
            logger.warning(f"Skipping instructor {instructor.id} with invalid data: {e}")
    return summaries


def to_profile(instructor: Instructor) -> InstructorProfile:
    """Shape a database row as a full profile page."""
    summary = to_summary(instructor)
    contact = parse_json(instructor.contact_info, None)
    if not isinstance(contact, dict):
        contact = {
            "email": instructor.email,
            "phone": instructor.phone,
            "website": instructor.website or "",
        }
    faqs = parse_json(instructor.faqs, [])

    return InstructorProfile(
        **summary.model_dump(),
        tagline=instructor.tagline,
        bio=instructor.bio,
        additional_bio=instructor.additional_bio,
        highlights=parse_array(instructor.highlights),
        photos=parse_array(instructor.photos),
        faqs=[
            FAQ(question=str(f.get("question") or ""), answer=str(f.get("answer") or ""))
            for f in (faqs if isinstance(faqs, list) else [])
            if isinstance(f, dict)
        ],
        contact_info=ContactInfo(
            email=contact.get("email"),
            phone=contact.get("phone"),
            website=contact.get("website") or "",
        ),
    )


class InstructorService:
    """Read queries for approved instructors."""

    async def list_approved(self, db: AsyncSession) -> List[Instructor]:
        """
        Fetch every approved instructor, newest first.

        Args:
            db: Database session

        Returns:
            Instructor rows
        """
        query = (
            select(Instructor)
            .where(Instructor.status == APPROVED_STATUS)
            .order_by(Instructor.created_at.desc())
        )
        result = await db.execute(query)
        instructors = list(result.scalars().all())
        logger.info(f"Fetched {len(instructors)} approved instructors")
        return instructors

    async def get_approved(self, db: AsyncSession, instructor_id: UUID) -> Optional[Instructor]:
        """Fetch one approved instructor, or None."""
        query = select(Instructor).where(
            Instructor.id == instructor_id,
            Instructor.status == APPROVED_STATUS,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# Singleton instance
instructor_service = InstructorService()
