"""Font Manager Module

Handles font registration and the regular/bold fallback chain for the
ReportLab backend.
"""
import logging
import os
from typing import Optional, Sequence

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .base import FontWeight

logger = logging.getLogger(__name__)

REGULAR_FONT_PATHS = [
    '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
    '/usr/share/fonts/dejavu/DejaVuSans.ttf',
    '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
    '/System/Library/Fonts/Supplemental/Arial Unicode.ttf',  # macOS
    'C:\\Windows\\Fonts\\arial.ttf',  # Windows
]

BOLD_FONT_PATHS = [
    '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
    '/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf',
    '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf',
    'C:\\Windows\\Fonts\\arialbd.ttf',  # Windows
]


class FontManager:
    """Registers a Unicode-capable TrueType family, falling back to Helvetica.

    Attributes:
        font_name: Registered regular font (e.g., 'PageflowSans' or 'Helvetica')
        font_name_bold: Registered bold font (e.g., 'PageflowSans-Bold' or 'Helvetica-Bold')
    """

    REGULAR_NAME = 'PageflowSans'
    BOLD_NAME = 'PageflowSans-Bold'

    def __init__(self, use_system_fonts: bool = True,
                 regular_paths: Optional[Sequence[str]] = None,
                 bold_paths: Optional[Sequence[str]] = None):
        """
        Initialize FontManager and register fonts.

        Args:
            use_system_fonts: If False, skip the TrueType search and use the
                built-in Helvetica family
            regular_paths: Override the regular font search path
            bold_paths: Override the bold font search path
        """
        self.font_name = 'Helvetica'
        self.font_name_bold = 'Helvetica-Bold'
        if use_system_fonts:
            self._setup_fonts(
                REGULAR_FONT_PATHS if regular_paths is None else regular_paths,
                BOLD_FONT_PATHS if bold_paths is None else bold_paths,
            )

    @staticmethod
    def _register_first(name: str, paths: Sequence[str]) -> Optional[str]:
        for font_path in paths:
            logger.debug("Checking font path: %s", font_path)
            if not os.path.exists(font_path):
                continue
            try:
                pdfmetrics.registerFont(TTFont(name, font_path))
            except Exception as e:  # TTFont raises plain Exceptions for unreadable files
                logger.debug("Failed to register font %s: %s", font_path, e)
                continue
            logger.debug("Registered font %s from %s", name, font_path)
            return font_path
        return None

    def _setup_fonts(self, regular_paths: Sequence[str], bold_paths: Sequence[str]):
        """
        Register the first readable regular font and, if found, a bold variant.

        Without a regular TrueType font the built-in Helvetica family is used,
        which cannot draw non-Latin scripts. Without a bold variant the regular
        font doubles as bold.
        """
        if not self._register_first(self.REGULAR_NAME, regular_paths):
            logger.warning("No TrueType font found; using Helvetica (Latin-1 only)")
            return
        self.font_name = self.REGULAR_NAME

        if self._register_first(self.BOLD_NAME, bold_paths):
            self.font_name_bold = self.BOLD_NAME
        else:
            logger.warning("Bold font not found, using regular font for bold text")
            self.font_name_bold = self.font_name

    def get_font_name(self, weight: FontWeight = FontWeight.NORMAL) -> str:
        """
        Get the registered font name for a weight.

        Args:
            weight: Font weight requested by the layout engine

        Returns:
            Font name string suitable for use with ReportLab
        """
        return self.font_name_bold if weight is FontWeight.BOLD else self.font_name
