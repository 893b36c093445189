"""Page Geometry Dataclass

Immutable page and layout configuration passed into the layout driver.
"""
from dataclasses import dataclass

from .config import (
    PAGE_WIDTH,
    PAGE_HEIGHT,
    MARGIN,
    LINE_HEIGHT,
    PARAGRAPH_SPACING,
    FONT_SIZE,
    LOW_WATER_MARK,
    BULLET_INDENT,
    TABLE_CELL_PADDING,
    TABLE_CELL_TEXT_RISE,
)
from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class PageGeometry:
    """Page size, margins and vertical rhythm for one conversion.

    All lengths share one unit system (millimetres by default); only the
    ratios between them matter to the layout engine. The font size is
    expressed in points and feeds the width estimator.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Margin applied on all four sides

        # Vertical Rhythm
        line_height: Cursor advance per wrapped text line or table row
        paragraph_spacing: Gap after each paragraph, image and blank line
        low_water_mark: Room above the bottom margin below which a new page
            is started after a block

        # Typography
        font_size: Body font size
        bullet_indent: Extra left offset for bullet lines

        # Table Grid
        cell_padding: Offset of cell text from the column's left edge
        cell_text_rise: Cell text baseline above the row's bottom border
    """

    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT
    margin: float = MARGIN

    # Vertical Rhythm
    line_height: float = LINE_HEIGHT
    paragraph_spacing: float = PARAGRAPH_SPACING
    low_water_mark: float = LOW_WATER_MARK

    # Typography
    font_size: float = FONT_SIZE
    bullet_indent: float = BULLET_INDENT

    # Table Grid
    cell_padding: float = TABLE_CELL_PADDING
    cell_text_rise: float = TABLE_CELL_TEXT_RISE

    def __post_init__(self):
        """Validate geometry after initialization."""
        for name in ("page_width", "page_height", "line_height", "font_size"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidConfigurationError(f"{name} must be positive, got {value}")

        for name in ("margin", "paragraph_spacing", "low_water_mark", "bullet_indent",
                     "cell_padding", "cell_text_rise"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidConfigurationError(f"{name} must not be negative, got {value}")

        if self.usable_width <= 0:
            raise InvalidConfigurationError(
                f"margin {self.margin} leaves no usable width on a {self.page_width} wide page"
            )
        if self.fresh_page_height < self.line_height:
            raise InvalidConfigurationError(
                f"margin {self.margin} leaves less than one line of height on a "
                f"{self.page_height} tall page"
            )

    @property
    def usable_width(self) -> float:
        """Width between the left and right margins."""
        return self.page_width - 2 * self.margin

    @property
    def top(self) -> float:
        """Cursor position at the top of a fresh page."""
        return self.page_height - self.margin

    @property
    def fresh_page_height(self) -> float:
        """Vertical room available on an empty page."""
        return self.top - self.margin

    @property
    def low_water_line(self) -> float:
        """Cursor position below which the driver breaks to a new page."""
        return self.margin + self.low_water_mark
