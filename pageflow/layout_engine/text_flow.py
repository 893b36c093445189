"""Text Flow Module

Greedy word wrapping of paragraphs into lines that fit the usable width,
with per-line font weight and left offset selection.
"""
import logging
from typing import List, Tuple

from ..backends.base import FontWeight
from ..config import BULLET_PREFIX
from .metrics import MonospaceMetrics
from .page_manager import PageManager

logger = logging.getLogger(__name__)


def wrap_words(line: str, max_width: float, font_size: float, metrics=None) -> List[str]:
    """
    Greedily pack whitespace-delimited words into lines no wider than max_width.

    A word joins the current line if ``current_width + word_width +
    space_width <= max_width``. A word wider than max_width on its own is
    still placed, alone, on its own line.

    Args:
        line: One physical line of text (no hard breaks)
        max_width: Maximum line width in layout units
        font_size: Font size used for width estimation
        metrics: Width estimator; defaults to MonospaceMetrics

    Returns:
        Wrapped lines, words joined by single spaces

    Examples:
        >>> wrap_words("A B C D", 10, 11)
        ['A B', 'C D']
    """
    metrics = metrics or MonospaceMetrics()
    space_width = metrics.estimate_width(" ", font_size)

    lines: List[str] = []
    current: List[str] = []
    current_width = 0.0

    for word in line.split():
        word_width = metrics.estimate_width(word, font_size)

        if current and current_width + word_width + space_width > max_width:
            lines.append(" ".join(current))
            current = []
            current_width = 0.0

        if current:
            current_width += space_width
        elif word_width > max_width:
            logger.warning("Word %r (%.1f) is wider than the line (%.1f)",
                           word[:40], word_width, max_width)
        current.append(word)
        current_width += word_width

    if current:
        lines.append(" ".join(current))
    return lines


def select_style(line: str, line_index: int, line_count: int,
                 margin: float, bullet_indent: float) -> Tuple[FontWeight, float]:
    """
    Choose font weight and left offset for one physical line of a paragraph.

    - Bullet lines (leading ``-``): normal weight, indented
    - First line of a multi-line paragraph: bold at the margin
    - Everything else: normal weight at the margin

    Args:
        line: Trimmed physical line
        line_index: Position of the line within its paragraph
        line_count: Number of physical lines in the paragraph
        margin: Base left margin
        bullet_indent: Extra offset for bullet lines

    Returns:
        Tuple of (weight, x position)
    """
    if line.startswith(BULLET_PREFIX):
        return FontWeight.NORMAL, margin + bullet_indent
    if line_index == 0 and line_count > 1:
        return FontWeight.BOLD, margin
    return FontWeight.NORMAL, margin


class TextFlowEngine:
    """Lays out paragraph text line by line onto the current page."""

    def __init__(self, metrics=None):
        """
        Initialize the text flow engine.

        Args:
            metrics: Width estimator shared with the rest of the layout
        """
        self.metrics = metrics or MonospaceMetrics()

    def render(self, text: str, pages: PageManager) -> int:
        """
        Render one paragraph and advance the cursor past it.

        Hard line breaks in the text are preserved. A blank physical line
        becomes a paragraph-spacing gap. One extra paragraph spacing follows
        the whole paragraph.

        Args:
            text: Raw paragraph text
            pages: Layout context owning the cursor

        Returns:
            Number of text lines drawn
        """
        geometry = pages.geometry
        physical_lines = text.replace("\r\n", "\n").split("\n")
        drawn = 0

        for line_index, line in enumerate(physical_lines):
            trimmed = line.strip()
            if not trimmed:
                pages.advance(geometry.paragraph_spacing)
                continue

            weight, x = select_style(trimmed, line_index, len(physical_lines),
                                     geometry.margin, geometry.bullet_indent)

            for wrapped in wrap_words(trimmed, geometry.usable_width, geometry.font_size, self.metrics):
                pages.ensure_page_for(geometry.line_height)
                logger.debug("Adding text at position %.1f", pages.y_position)
                pages.backend.draw_text(wrapped, geometry.font_size, x, pages.y_position, weight)
                pages.advance(geometry.line_height)
                drawn += 1

        pages.advance(geometry.paragraph_spacing)
        return drawn
