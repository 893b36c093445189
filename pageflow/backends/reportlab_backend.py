"""ReportLab Backend Module

Rendering backend drawing onto a ReportLab canvas. Layout coordinates are
multiplied by ``unit`` (millimetres by default) to get PDF points.
"""
import io
import logging
from typing import BinaryIO, Optional, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdfcanvas

from .base import FontWeight, RenderingBackend
from .font_manager import FontManager

logger = logging.getLogger(__name__)


class ReportLabBackend(RenderingBackend):
    """Draws layout engine output onto a ReportLab canvas.

    Attributes:
        canvas: Underlying ReportLab canvas
        font_manager: Supplies regular and bold font names
        unit: Points per layout unit
    """

    def __init__(self, output: Union[str, BinaryIO], page_width: float, page_height: float,
                 unit: float = mm, font_manager: Optional[FontManager] = None,
                 title: str = "Converted Document"):
        """
        Initialize the backend with its first page open.

        Args:
            output: File path or binary file-like object to write the PDF to
            page_width, page_height: Page size in layout units
            unit: Points per layout unit
            font_manager: Optional pre-configured FontManager
            title: PDF document title
        """
        self.unit = unit
        self.font_manager = font_manager or FontManager()
        self.canvas = pdfcanvas.Canvas(output, pagesize=(page_width * unit, page_height * unit))
        self.canvas.setTitle(title)
        self._page_number = 1

    def draw_text(self, content: str, font_size: float, x: float, y: float,
                  weight: FontWeight = FontWeight.NORMAL) -> None:
        self.canvas.setFont(self.font_manager.get_font_name(weight), font_size)
        self.canvas.drawString(x * self.unit, y * self.unit, content)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.canvas.line(x1 * self.unit, y1 * self.unit, x2 * self.unit, y2 * self.unit)

    def place_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None:
        self.canvas.drawImage(
            ImageReader(io.BytesIO(data)),
            x * self.unit, y * self.unit,
            width=width * self.unit, height=height * self.unit,
        )

    def new_page(self) -> int:
        self.canvas.showPage()
        self._page_number += 1
        return self._page_number

    def save(self) -> None:
        """Write the PDF to the output given at construction."""
        logger.debug("Saving PDF, last page handle %d", self._page_number)
        self.canvas.save()
