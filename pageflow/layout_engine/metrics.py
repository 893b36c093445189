"""Text width estimation.

The engine never queries real font metrics. Every character is assumed to
be ``font_size * AVERAGE_CHAR_WIDTH_FACTOR`` wide, so wrapping decisions are
reproducible regardless of the font the backend ends up drawing with.
"""

from ..config import AVERAGE_CHAR_WIDTH_FACTOR


def estimate_width(text: str, font_size: float,
                   char_width_factor: float = AVERAGE_CHAR_WIDTH_FACTOR) -> float:
    """
    Approximate the rendered width of a string.

    Args:
        text: String to measure
        font_size: Font size the string will be drawn at
        char_width_factor: Width of one character as a fraction of font size

    Returns:
        Estimated width in layout units

    Examples:
        >>> estimate_width("abcd", 10)
        10.0
    """
    return len(text) * font_size * char_width_factor


class MonospaceMetrics:
    """Width estimator treating every glyph as equally wide.

    Any object exposing ``estimate_width(text, font_size)`` can stand in
    for this class when the layout driver is constructed.
    """

    def __init__(self, char_width_factor: float = AVERAGE_CHAR_WIDTH_FACTOR):
        self.char_width_factor = char_width_factor

    def estimate_width(self, text: str, font_size: float) -> float:
        return estimate_width(text, font_size, self.char_width_factor)
