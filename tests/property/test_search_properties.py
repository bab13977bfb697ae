"""Property-based tests for pagination, view mode and the search reducer."""
from hypothesis import given, settings, strategies as st

from golfpro.schemas.search import FilterCriteria, PaginationState, ViewMode
from golfpro.search.pagination import clamp_page, go_to_page, page_slice
from golfpro.search.state import (
    PageRequested,
    SearchFailed,
    SearchStarted,
    SearchState,
    SearchSucceeded,
    reduce,
)
from golfpro.search.view_mode import effective_view_mode

page_sizes = st.integers(min_value=1, max_value=50)
totals = st.integers(min_value=0, max_value=500)
pages = st.integers(min_value=-100, max_value=100)


class TestPaginationProperties:
    """
    For any total, page size and requested page, the current page stays in
    ``[1, max(total_pages, 1)]`` and pages partition the results.
    """

    @settings(max_examples=200)
    @given(page=pages, total_pages=st.integers(min_value=0, max_value=100))
    def test_property_clamp_in_range(self, page: int, total_pages: int) -> None:
        clamped = clamp_page(page, total_pages)

        assert 1 <= clamped <= max(total_pages, 1)
        if 1 <= page <= total_pages:
            assert clamped == page

    @settings(max_examples=100)
    @given(total=totals, page_size=page_sizes, page=pages)
    def test_property_go_to_page_in_range(self, total: int, page_size: int, page: int) -> None:
        state = go_to_page(PaginationState(page_size=page_size, total_items=total), page)

        assert 1 <= state.current_page <= max(state.total_pages, 1)
        assert state.total_pages * page_size >= total

    @settings(max_examples=100)
    @given(total=totals, page_size=page_sizes)
    def test_property_pages_partition_results(self, total: int, page_size: int) -> None:
        items = list(range(total))
        state = PaginationState(page_size=page_size, total_items=total)

        collected = []
        for page in range(1, state.total_pages + 1):
            chunk = page_slice(items, go_to_page(state, page))
            assert 0 < len(chunk) <= page_size
            collected.extend(chunk)

        assert collected == items


class TestViewModeProperties:
    @given(
        stored=st.sampled_from(list(ViewMode)),
        width=st.integers(min_value=0, max_value=4000),
        breakpoint_px=st.integers(min_value=1, max_value=2000)
    )
    def test_property_narrow_is_grid_otherwise_stored(self, stored, width, breakpoint_px) -> None:
        mode = effective_view_mode(stored, width, breakpoint_px)

        if width < breakpoint_px:
            assert mode == ViewMode.GRID
        else:
            assert mode == stored


class TestReducerProperties:
    """
    For any order in which responses arrive, only the most recently
    started request can change the results.
    """

    @settings(max_examples=100)
    @given(
        request_count=st.integers(min_value=1, max_value=6),
        order=st.permutations(list(range(6))),
        failures=st.sets(st.integers(min_value=0, max_value=5))
    )
    def test_property_last_started_wins(self, request_count, order, failures) -> None:
        state = SearchState()
        for request_id in range(1, request_count + 1):
            state = reduce(state, SearchStarted(request_id=request_id, criteria=FilterCriteria()))

        for index in order:
            if index >= request_count:
                continue
            request_id = index + 1
            if index in failures:
                action = SearchFailed(request_id=request_id, error=f"failed {request_id}")
            else:
                action = SearchSucceeded(request_id=request_id, results=(request_id,))
            state = reduce(state, action)

        last = request_count - 1
        if last in failures:
            assert state.error == f"failed {request_count}"
            assert state.results == ()
        else:
            assert state.results == (request_count,)
            assert state.error is None

    @settings(max_examples=100)
    @given(total=totals, page_size=page_sizes, requests=st.lists(pages, max_size=10))
    def test_property_page_requests_keep_results(self, total, page_size, requests) -> None:
        state = SearchState(pagination=PaginationState(page_size=page_size))
        state = reduce(state, SearchStarted(request_id=1, criteria=FilterCriteria()))
        state = reduce(state, SearchSucceeded(request_id=1, results=tuple(range(total))))

        for page in requests:
            state = reduce(state, PageRequested(page=page))
            assert len(state.results) == total
            assert 1 <= state.pagination.current_page <= max(state.pagination.total_pages, 1)
