"""Schemas for instructor directory cards and profile pages."""
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Service(BaseModel):
    """A lesson type offered by an instructor."""

    title: str = ""
    description: str = ""
    duration: str = ""
    price: float = Field(default=0.0, ge=0)


class FAQ(BaseModel):
    question: str = ""
    answer: str = ""


class ContactInfo(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    website: str = ""


class InstructorSummary(BaseModel):
    """Instructor as shown in the directory grid or list."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "7d3c1a52-0d1e-4d8f-9a53-0e2b8f6a9c11",
                "name": "Jordan Reyes",
                "location": "Austin, TX, USA",
                "image": "https://images.unsplash.com/photo-1535131749006-b7f58c99034b",
                "experience": 12,
                "specialty": "Short Game",
                "lesson_type": "Short Game / Putting",
                "hourly_rate": 110,
                "price_range": "$110/Hr",
                "specialization": "Short Game",
                "certifications": ["PGA Certified"],
                "services": [],
                "latitude": 30.2672,
                "longitude": -97.7431,
                "distance_km": 3.4
            }
        }
    )

    id: UUID = Field(..., description="Instructor identifier")
    name: str = Field(..., description="Display name")
    location: str = Field(default="", description="Human readable location")
    image: str = Field(..., description="Primary photo URL")
    experience: int = Field(default=0, ge=0, description="Years of experience")
    specialty: Optional[str] = Field(None, description="Primary specialty")
    lesson_type: str = Field(..., description="Lesson type label")
    hourly_rate: int = Field(..., ge=0, description="Hourly rate in dollars")
    price_range: str = Field(..., description="Formatted hourly rate")
    specialization: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    distance_km: Optional[float] = Field(
        None,
        ge=0,
        description="Distance from the search centre, when one was given"
    )


class InstructorProfile(InstructorSummary):
    """Full profile page payload."""

    tagline: Optional[str] = None
    bio: Optional[str] = None
    additional_bio: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list)
    faqs: List[FAQ] = Field(default_factory=list)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
