"""Table Grid Module

Draws a table as a bordered grid of uniform-width columns, one text line
per row.
"""
import logging

from ..backends.base import FontWeight
from ..content_model import Table
from .page_manager import PageManager

logger = logging.getLogger(__name__)


class TableGridRenderer:
    """Renders Table blocks row by row, breaking pages between rows."""

    def render(self, table: Table, pages: PageManager) -> float:
        """
        Draw the table's cell text and grid lines below the cursor.

        The grid starts with a top border. Each row moves the cursor down
        by one line height, then draws its cells, its column boundaries and
        its bottom border. One closing border follows the last row. Columns
        share the usable width equally; cell content never resizes them.

        Args:
            table: Grid of cell strings
            pages: Layout context owning the cursor

        Returns:
            The cursor position after the table

        Raises:
            MalformedTableError: If the grid has no rows, no columns or
                ragged rows (raised before anything is drawn)
        """
        geometry = pages.geometry
        backend = pages.backend
        columns = table.column_count
        column_width = geometry.usable_width / columns
        left = geometry.margin
        right = left + columns * column_width

        logger.debug("Rendering table: %d rows x %d columns, column width %.2f",
                     len(table.rows), columns, column_width)

        # The top border belongs on the page that holds the first row
        pages.ensure_page_for(geometry.line_height)
        backend.draw_line(left, pages.y_position, right, pages.y_position)

        for row in table.rows:
            if pages.ensure_page_for(geometry.line_height):
                backend.draw_line(left, pages.y_position, right, pages.y_position)

            row_top = pages.y_position
            y = pages.advance(geometry.line_height)

            for col_index, cell in enumerate(row):
                x = left + col_index * column_width
                backend.draw_text(cell.strip(), geometry.font_size, x + geometry.cell_padding,
                                  y + geometry.cell_text_rise, FontWeight.NORMAL)

            for boundary in range(columns + 1):
                x = left + boundary * column_width
                backend.draw_line(x, row_top, x, y)

            backend.draw_line(left, y, right, y)

        backend.draw_line(left, pages.y_position, right, pages.y_position)
        return pages.y_position
