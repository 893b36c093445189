"""Base rendering backend interface."""

from abc import ABC, abstractmethod
from enum import Enum


class FontWeight(Enum):
    """Font weight selected per drawn text line."""

    NORMAL = "normal"
    BOLD = "bold"


class RenderingBackend(ABC):
    """Abstract drawing surface the layout engine emits calls to.

    Coordinates use a bottom-left origin in the layout's unit system
    (millimetres by default). The first page exists as soon as the
    backend is constructed; ``new_page`` is only called for the pages
    that follow. Failures raised by a backend propagate to the caller
    and abort the conversion.
    """

    @abstractmethod
    def draw_text(self, content: str, font_size: float, x: float, y: float,
                  weight: FontWeight = FontWeight.NORMAL) -> None:
        """
        Draw a single line of text with its baseline starting at (x, y).

        Args:
            content: Text to draw, already wrapped to fit
            font_size: Font size in points
            x, y: Baseline start position
            weight: Normal or bold
        """
        pass

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight line segment from (x1, y1) to (x2, y2)."""
        pass

    @abstractmethod
    def place_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None:
        """
        Decode and place an image.

        Args:
            data: Encoded PNG or JPEG bytes
            x, y: Bottom-left corner of the placed image
            width, height: Target size on the page
        """
        pass

    @abstractmethod
    def new_page(self) -> int:
        """
        Finish the current page and start a new one.

        Returns:
            Handle of the new page (1-based page number)
        """
        pass
