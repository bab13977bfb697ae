"""Criteria matching for directory results."""
from typing import Iterable, List

from golfpro.schemas.instructor import InstructorSummary
from golfpro.schemas.search import FilterCriteria


def _lower_set(values: Iterable[str]) -> set:
    return {value.strip().lower() for value in values if value and value.strip()}


def matches_search_term(instructor: InstructorSummary, term: str) -> bool:
    """Case-insensitive substring match on name, specialization and location."""
    term = term.strip().lower()
    if not term:
        return True
    haystacks = (instructor.name, instructor.specialization or "", instructor.location)
    return any(term in value.lower() for value in haystacks)


def matches_criteria(instructor: InstructorSummary, criteria: FilterCriteria) -> bool:
    """
    Check every non-location criterion against one instructor.

    Specialties match when the instructor has at least one of the requested
    ones; certifications match only when all requested ones are held.
    Experience and price bounds are inclusive.
    """
    if not matches_search_term(instructor, criteria.search_term):
        return False

    wanted_specialties = _lower_set(criteria.specialties)
    if wanted_specialties:
        offered = _lower_set(instructor.specialties)
        if instructor.specialization:
            offered.add(instructor.specialization.strip().lower())
        if not wanted_specialties & offered:
            return False

    wanted_certifications = _lower_set(criteria.certifications)
    if wanted_certifications and not wanted_certifications <= _lower_set(instructor.certifications):
        return False

    if criteria.min_experience is not None and instructor.experience < criteria.min_experience:
        return False
    if criteria.max_experience is not None and instructor.experience > criteria.max_experience:
        return False

    if criteria.min_price is not None and instructor.hourly_rate < criteria.min_price:
        return False
    if criteria.max_price is not None and instructor.hourly_rate > criteria.max_price:
        return False

    return True


def apply_filters(
    instructors: Iterable[InstructorSummary],
    criteria: FilterCriteria
) -> List[InstructorSummary]:
    """Keep matching instructors, preserving order."""
    return [instructor for instructor in instructors if matches_criteria(instructor, criteria)]
