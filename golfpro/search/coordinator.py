"""Search/pagination coordinator for the instructor directory."""
import logging
from typing import Awaitable, Callable, List, Optional

from golfpro.config import Settings
from golfpro.schemas.search import FilterCriteria, PaginationState, ViewMode
from golfpro.search.debounce import Debouncer
from golfpro.search.resolver import SearchError, SearchResolution
from golfpro.search.state import (
    PageRequested,
    SearchAction,
    SearchFailed,
    SearchStarted,
    SearchState,
    SearchSucceeded,
    ViewModeSelected,
    ViewportResized,
    reduce,
)
from golfpro.search.view_mode import MOBILE_BREAKPOINT_PX

logger = logging.getLogger(__name__)

Resolver = Callable[[FilterCriteria], Awaitable[SearchResolution]]
StateListener = Callable[[SearchState], None]

GENERIC_ERROR = "Unable to load instructors. Please try again."


class SearchCoordinator:
    """
    Owns the directory search state and drives it through ``reduce``.

    Input changes are debounced; only the last input of a burst is resolved.
    Each committed input gets a request id and results for any older id are
    ignored when they arrive, so a slow response never overwrites a newer
    one. Failures keep the previous results and set ``state.error``.

    Example:
        coordinator = SearchCoordinator(InstructorSearch(fetch, geocoder, 5.0))
        coordinator.set_search_term("putting")
        await coordinator.wait_idle()
        coordinator.state.visible_items
    """

    def __init__(
        self,
        resolver: Resolver,
        page_size: int = 6,
        debounce_seconds: float = 0.3,
        mobile_breakpoint_px: int = MOBILE_BREAKPOINT_PX,
        listener: Optional[StateListener] = None
    ):
        self._resolver = resolver
        self._listener = listener
        self._state = SearchState(
            pagination=PaginationState(page_size=page_size),
            mobile_breakpoint_px=mobile_breakpoint_px,
        )
        self._latest_input = self._state.criteria
        self._debouncer: Debouncer[FilterCriteria] = Debouncer(debounce_seconds, self._commit)

    @classmethod
    def from_settings(
        cls,
        resolver: Resolver,
        settings: Settings,
        listener: Optional[StateListener] = None
    ) -> "SearchCoordinator":
        """Coordinator with page size, quiet period and breakpoint from settings."""
        return cls(
            resolver,
            page_size=settings.search_page_size,
            debounce_seconds=settings.search_debounce_seconds,
            mobile_breakpoint_px=settings.mobile_breakpoint_px,
            listener=listener,
        )

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def visible_items(self) -> List:
        return self._state.visible_items

    @property
    def effective_view_mode(self) -> ViewMode:
        return self._state.effective_view_mode

    def dispatch(self, action: SearchAction) -> SearchState:
        """Reduce one action and notify the listener if the state changed."""
        new_state = reduce(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            if self._listener is not None:
                self._listener(new_state)
        return self._state

    # Input

    def update_criteria(self, criteria: FilterCriteria) -> None:
        """Replace the search criteria; resolved after the quiet period."""
        self._latest_input = criteria
        self._debouncer.trigger(criteria)

    def set_search_term(self, term: str) -> None:
        """Change only the free-text term of the latest input."""
        self.update_criteria(self._latest_input.model_copy(update={"search_term": term}))

    async def submit(self, criteria: Optional[FilterCriteria] = None) -> None:
        """Resolve now, skipping the quiet period and dropping any waiting input."""
        if criteria is not None:
            self._latest_input = criteria
        self._debouncer.cancel()
        await self._commit(self._latest_input)

    async def wait_idle(self) -> None:
        """Wait for pending input and in-flight searches to settle."""
        await self._debouncer.drain()

    def cancel_pending(self) -> bool:
        return self._debouncer.cancel()

    # Navigation and layout

    def go_to_page(self, page: int) -> SearchState:
        return self.dispatch(PageRequested(page=page))

    def set_view_mode(self, mode: ViewMode) -> SearchState:
        return self.dispatch(ViewModeSelected(mode=mode))

    def set_viewport_width(self, width: Optional[int]) -> SearchState:
        return self.dispatch(ViewportResized(width=width))

    async def _commit(self, criteria: FilterCriteria) -> None:
        request_id = self._state.request_id + 1
        self.dispatch(SearchStarted(request_id=request_id, criteria=criteria))

        try:
            resolution = await self._resolver(criteria)
        except SearchError as e:
            logger.info(f"Search {request_id} failed: {e}")
            self.dispatch(SearchFailed(request_id=request_id, error=str(e)))
            return
        except Exception:
            logger.error(f"Search {request_id} failed", exc_info=True)
            self.dispatch(SearchFailed(request_id=request_id, error=GENERIC_ERROR))
            return

        if request_id != self._state.request_id:
            logger.debug(f"Discarding stale results for search {request_id}")
        self.dispatch(SearchSucceeded(
            request_id=request_id,
            results=tuple(resolution.items),
            center=resolution.center,
        ))
