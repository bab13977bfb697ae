"""Search state and its reducer.

State is an immutable value; every change goes through ``reduce``, which
returns either the same object (nothing changed) or a new one.
"""
from enum import Enum
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from golfpro.schemas.geocoding import Coordinates
from golfpro.schemas.search import FilterCriteria, PaginationState, ViewMode
from golfpro.search.pagination import go_to_page, page_slice, reset_for_results
from golfpro.search.view_mode import MOBILE_BREAKPOINT_PX, effective_view_mode


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    ERROR = "error"


class SearchState(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: SearchStatus = SearchStatus.IDLE
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    results: Tuple[Any, ...] = ()
    center: Optional[Coordinates] = None
    pagination: PaginationState = Field(default_factory=PaginationState)
    error: Optional[str] = None
    request_id: int = 0
    view_mode: ViewMode = ViewMode.GRID
    viewport_width: Optional[int] = None
    mobile_breakpoint_px: int = MOBILE_BREAKPOINT_PX

    @property
    def visible_items(self) -> list:
        return page_slice(self.results, self.pagination)

    @property
    def effective_view_mode(self) -> ViewMode:
        return effective_view_mode(self.view_mode, self.viewport_width, self.mobile_breakpoint_px)

    @property
    def is_loading(self) -> bool:
        return self.status == SearchStatus.SEARCHING


class SearchStarted(BaseModel):
    request_id: int
    criteria: FilterCriteria


class SearchSucceeded(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    request_id: int
    results: Tuple[Any, ...]
    center: Optional[Coordinates] = None


class SearchFailed(BaseModel):
    request_id: int
    error: str


class PageRequested(BaseModel):
    page: int


class ViewModeSelected(BaseModel):
    mode: ViewMode


class ViewportResized(BaseModel):
    width: Optional[int] = Field(None, ge=0)


SearchAction = Union[
    SearchStarted,
    SearchSucceeded,
    SearchFailed,
    PageRequested,
    ViewModeSelected,
    ViewportResized,
]


def reduce(state: SearchState, action: SearchAction) -> SearchState:
    """Apply one action to the search state."""
    if isinstance(action, SearchStarted):
        return state.model_copy(update={
            "status": SearchStatus.SEARCHING,
            "criteria": action.criteria,
            "request_id": action.request_id,
            "error": None,
        })

    if isinstance(action, SearchSucceeded):
        # Responses for superseded requests are dropped
        if action.request_id != state.request_id:
            return state
        return state.model_copy(update={
            "status": SearchStatus.SUCCESS,
            "results": tuple(action.results),
            "center": action.center,
            "pagination": reset_for_results(state.pagination, len(action.results)),
            "error": None,
        })

    if isinstance(action, SearchFailed):
        if action.request_id != state.request_id:
            return state
        # Previous results stay on screen next to the error
        return state.model_copy(update={
            "status": SearchStatus.ERROR,
            "error": action.error,
        })

    if isinstance(action, PageRequested):
        pagination = go_to_page(state.pagination, action.page)
        if pagination is state.pagination:
            return state
        return state.model_copy(update={"pagination": pagination})

    if isinstance(action, ViewModeSelected):
        if action.mode == state.view_mode:
            return state
        return state.model_copy(update={"view_mode": action.mode})

    if isinstance(action, ViewportResized):
        if action.width == state.viewport_width:
            return state
        return state.model_copy(update={"viewport_width": action.width})

    raise TypeError(f"Unknown search action: {type(action).__name__}")
