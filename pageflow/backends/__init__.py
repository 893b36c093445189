"""Rendering backends for the layout engine."""

from .base import FontWeight, RenderingBackend
from .font_manager import FontManager
from .reportlab_backend import ReportLabBackend

__all__ = [
    'FontWeight',
    'RenderingBackend',
    'FontManager',
    'ReportLabBackend',
]
