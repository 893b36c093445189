"""pageflow

Layout and pagination engine turning an ordered stream of content blocks
(paragraphs, tables, images) into page-level drawing calls, plus a DOCX
extractor and a ReportLab PDF backend around it.
"""

from .content_model import ContentBlock, TextParagraph, Table, Image
from .page_geometry import PageGeometry
from .layout_engine import LayoutDriver, LayoutResult
from .backends import FontWeight, RenderingBackend, ReportLabBackend
from .converter import render_blocks_to_pdf, convert_docx_to_pdf
from .exceptions import (
    PageflowError,
    ValidationError,
    InvalidFileError,
    InvalidConfigurationError,
    ExtractionError,
    DocxParseError,
    RenderingError,
    UnsupportedImageFormatError,
    ImageDecodeError,
    MalformedTableError,
    UnsupportedBlockError,
    CursorMoveError,
)

__version__ = "0.1.0"

__all__ = [
    # Content model
    'ContentBlock',
    'TextParagraph',
    'Table',
    'Image',

    # Layout
    'PageGeometry',
    'LayoutDriver',
    'LayoutResult',

    # Backends
    'FontWeight',
    'RenderingBackend',
    'ReportLabBackend',

    # Helper functions
    'render_blocks_to_pdf',
    'convert_docx_to_pdf',

    # Exceptions
    'PageflowError',
    'ValidationError',
    'InvalidFileError',
    'InvalidConfigurationError',
    'ExtractionError',
    'DocxParseError',
    'RenderingError',
    'UnsupportedImageFormatError',
    'ImageDecodeError',
    'MalformedTableError',
    'UnsupportedBlockError',
    'CursorMoveError',
]
