"""SQLAlchemy models for the application."""
from golfpro.models.instructor import Instructor
from golfpro.models.instructor_stats import InstructorStats, ContactClickLog

__all__ = [
    "Instructor",
    "InstructorStats",
    "ContactClickLog",
]
