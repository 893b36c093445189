"""Page Manager Module

Owns the vertical cursor and the current page for one conversion. It is the
only mutable state shared between blocks, and every component reads and
moves the cursor through it.
"""
import logging

from ..backends.base import RenderingBackend
from ..exceptions import CursorMoveError
from ..page_geometry import PageGeometry

logger = logging.getLogger(__name__)


class PageManager:
    """Layout context threaded through the text, table and image components.

    The cursor (``y_position``) starts at ``geometry.top`` on every page and
    only ever decreases until the next page break resets it.

    Attributes:
        geometry: Page geometry for this conversion
        backend: Drawing surface receiving page breaks
        y_position: Current vertical write position (bottom-left origin)
        current_page: Handle of the page being written
        page_count: Number of pages started so far, including the first
    """

    def __init__(self, geometry: PageGeometry, backend: RenderingBackend, first_page: int = 1):
        """
        Initialize the page manager on the backend's first page.

        Args:
            geometry: Page geometry for this conversion
            backend: Drawing surface; its first page must already exist
            first_page: Handle of the backend's initial page
        """
        self.geometry = geometry
        self.backend = backend
        self.y_position = geometry.top
        self.current_page = first_page
        self.page_count = 1

    def remaining_height(self) -> float:
        """Vertical room left above the bottom margin."""
        return self.y_position - self.geometry.margin

    def at_page_top(self) -> bool:
        """True if nothing has advanced the cursor on the current page yet."""
        return self.y_position >= self.geometry.top

    def new_page(self) -> int:
        """Start a new page and reset the cursor to the top margin."""
        self.current_page = self.backend.new_page()
        self.page_count += 1
        self.y_position = self.geometry.top
        logger.debug("Started page %s", self.current_page)
        return self.current_page

    def ensure_page_for(self, required_height: float) -> bool:
        """
        Break to a new page if the required height does not fit.

        Args:
            required_height: Height about to be consumed below the cursor

        Returns:
            True if a new page was started
        """
        if required_height > self.remaining_height():
            logger.debug(
                "Need %.1f but only %.1f left on page %s",
                required_height, self.remaining_height(), self.current_page,
            )
            self.new_page()
            return True
        return False

    def advance(self, delta: float) -> float:
        """
        Move the cursor down the page.

        No floor is enforced here; callers check for room before drawing.

        Args:
            delta: Non-negative distance to move down

        Returns:
            The updated cursor position

        Raises:
            CursorMoveError: If delta is negative
        """
        if delta < 0:
            raise CursorMoveError(delta)
        self.y_position -= delta
        return self.y_position

    def check_low_water_mark(self) -> bool:
        """
        Break to a new page if the cursor has sunk below the low-water line.

        Returns:
            True if a new page was started
        """
        if self.y_position < self.geometry.low_water_line:
            logger.debug("Cursor %.1f below low-water line %.1f",
                         self.y_position, self.geometry.low_water_line)
            self.new_page()
            return True
        return False
