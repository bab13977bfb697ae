"""Instructor directory search: filtering, pagination, view mode and coordination."""
from golfpro.search.coordinator import SearchCoordinator
from golfpro.search.debounce import Debouncer
from golfpro.search.filters import apply_filters, matches_criteria
from golfpro.search.pagination import clamp_page, go_to_page, page_slice
from golfpro.search.resolver import (
    GeocodingUnavailableError,
    InstructorSearch,
    LocationNotFoundError,
    SearchError,
    SearchResolution,
)
from golfpro.search.state import SearchState, SearchStatus, reduce
from golfpro.search.view_mode import effective_view_mode

__all__ = [
    "SearchCoordinator",
    "Debouncer",
    "apply_filters",
    "matches_criteria",
    "clamp_page",
    "go_to_page",
    "page_slice",
    "GeocodingUnavailableError",
    "InstructorSearch",
    "LocationNotFoundError",
    "SearchError",
    "SearchResolution",
    "SearchState",
    "SearchStatus",
    "reduce",
    "effective_view_mode",
]
