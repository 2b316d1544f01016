"""Page Cursor Module

Tracks the vertical write position and the current page during one render.

The cursor is a greedy single-pass allocator: callers ask whether the next
block fits, and a page break happens when it does not. It never looks further
ahead than the block it is asked about.
"""
from dataclasses import dataclass
from threading import Event
from typing import Callable, Optional

from ..config import PAGE_MARGINS, PAGE_SIZE
from ..exceptions import RenderCancelledError

# Tolerance for float accumulation when a block exactly fills the page
_EPSILON = 1e-6


@dataclass(frozen=True)
class PageGeometry:
    """Page size and margins in points."""

    page_width: float
    page_height: float
    margin_top: float
    margin_bottom: float
    margin_left: float
    margin_right: float

    @classmethod
    def default(cls) -> "PageGeometry":
        width, height = PAGE_SIZE
        return cls(
            page_width=width,
            page_height=height,
            margin_top=PAGE_MARGINS["top"],
            margin_bottom=PAGE_MARGINS["bottom"],
            margin_left=PAGE_MARGINS["left"],
            margin_right=PAGE_MARGINS["right"],
        )

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def content_height(self) -> float:
        return self.bottom_limit - self.margin_top

    @property
    def bottom_limit(self) -> float:
        """Lowest y (top-down) any block may reach."""
        return self.page_height - self.margin_bottom


@dataclass(frozen=True)
class CursorMark:
    """A saved cursor position."""

    page_index: int
    y: float

    def is_after(self, other: "CursorMark") -> bool:
        return (self.page_index, self.y) > (other.page_index, other.y)


class PageCursor:
    """Write position for one render.

    Invariant: after every operation ``margin_top <= y <= bottom_limit``.

    Attributes:
        geometry: Page size and margins
        page_index: Zero-based index of the page being written
        y: Current write position, top-down, in points
        pages_started: Number of pages opened so far
    """

    def __init__(self, geometry: PageGeometry,
                 on_new_page: Optional[Callable[[int], None]] = None,
                 cancel_event: Optional[Event] = None):
        """
        Initialize cursor at the top of the first page.

        Args:
            geometry: Page size and margins
            on_new_page: Called with the page index whenever the cursor moves onto a
                         page; the drawing surface opens the page if it is new
            cancel_event: Optional event; once set, the next checkpoint aborts the render
        """
        self.geometry = geometry
        self.page_index = 0
        self.y = geometry.margin_top
        self.pages_started = 1
        self._on_new_page = on_new_page or (lambda index: None)
        self._cancel_event = cancel_event
        self._on_new_page(0)

    @property
    def remaining(self) -> float:
        """Vertical room left on the current page."""
        return self.geometry.bottom_limit - self.y

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.geometry.margin_top + _EPSILON

    def reserve(self, height: float) -> bool:
        """Whether a block of this height fits above the bottom margin. Does not move."""
        return self.y + height <= self.geometry.bottom_limit + _EPSILON

    def advance(self, height: float):
        """Move down by height, stopping at the bottom margin."""
        self.y = min(self.y + height, self.geometry.bottom_limit)

    def ensure_room(self, height: float) -> bool:
        """
        Break to a new page unless the block fits here.

        Args:
            height: Height of the block about to be drawn

        Returns:
            True if a page break happened
        """
        if self.reserve(height):
            return False
        self.new_page()
        return True

    def new_page(self):
        """Move to the top of the next page."""
        self.check_cancelled()
        self.page_index += 1
        self.y = self.geometry.margin_top
        self.pages_started = max(self.pages_started, self.page_index + 1)
        self._on_new_page(self.page_index)

    def check_cancelled(self):
        """Raise RenderCancelledError if the caller abandoned the render."""
        if self._cancel_event is not None and self._cancel_event.is_set():
            raise RenderCancelledError(self.page_index)

    def mark(self) -> CursorMark:
        return CursorMark(self.page_index, self.y)

    def restore(self, mark: CursorMark):
        """Return to a saved position, e.g. the top of a second column."""
        self.page_index = mark.page_index
        self.y = mark.y

    @staticmethod
    def furthest(*marks: CursorMark) -> CursorMark:
        """The mark furthest down the document."""
        result = marks[0]
        for mark in marks[1:]:
            if mark.is_after(result):
                result = mark
        return result
