"""Effective layout for the directory."""
from typing import Optional

from golfpro.schemas.search import ViewMode

MOBILE_BREAKPOINT_PX = 768


def effective_view_mode(
    stored: ViewMode,
    viewport_width: Optional[int],
    breakpoint_px: int = MOBILE_BREAKPOINT_PX
) -> ViewMode:
    """
    View mode to render.

    Narrow viewports always get the grid. The stored preference is never
    changed here, so widening the viewport brings the list view back.
    An unknown width renders the stored preference.
    """
    if viewport_width is not None and viewport_width < breakpoint_px:
        return ViewMode.GRID
    return stored
