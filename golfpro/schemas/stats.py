"""Schemas for profile engagement counters."""
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ProfileViewRequest(BaseModel):
    instructor_uuid: UUID = Field(..., description="Instructor whose profile was viewed")


class ContactClickRequest(BaseModel):
    instructor_uuid: UUID = Field(..., description="Instructor whose contact button was clicked")
    click_type: Optional[str] = Field(
        None,
        max_length=50,
        description="Which contact control was used, e.g. email, phone, website"
    )


class StatsUpdateResponse(BaseModel):
    success: bool = True
