"""Conversion Helpers

Glue between the DOCX extractor, the layout engine and the ReportLab
backend.
"""
import logging
import os
from typing import BinaryIO, Iterable, Optional, Union

from .backends.font_manager import FontManager
from .backends.reportlab_backend import ReportLabBackend
from .config import DOCX_EXTENSION, PDF_EXTENSION
from .content_model import ContentBlock
from .extractors.docx_reader import read_docx
from .layout_engine.driver import LayoutDriver, LayoutResult
from .page_geometry import PageGeometry
from .utils import validate_input_path, validate_output_path, format_file_size

logger = logging.getLogger(__name__)


def render_blocks_to_pdf(
    blocks: Iterable[ContentBlock],
    output: Union[str, BinaryIO],
    geometry: Optional[PageGeometry] = None,
    font_manager: Optional[FontManager] = None,
) -> LayoutResult:
    """
    Lay out content blocks and write them as a PDF.

    Args:
        blocks: Content blocks in document order
        output: File path or binary file-like object for the PDF
        geometry: Page geometry; defaults to A4 with 10mm margins
        font_manager: Optional pre-configured FontManager

    Returns:
        LayoutResult for the pass

    Raises:
        RenderingError: If any block is malformed; nothing is saved
    """
    driver = LayoutDriver(geometry=geometry)
    backend = ReportLabBackend(
        output,
        driver.geometry.page_width,
        driver.geometry.page_height,
        font_manager=font_manager,
    )
    result = driver.render(blocks, backend)
    backend.save()
    return result


def convert_docx_to_pdf(
    docx_path: str,
    pdf_path: str,
    geometry: Optional[PageGeometry] = None,
    font_manager: Optional[FontManager] = None,
) -> LayoutResult:
    """
    Convert a DOCX document into a paginated PDF.

    Args:
        docx_path: Input .docx file
        pdf_path: Output .pdf file
        geometry: Page geometry; defaults to A4 with 10mm margins
        font_manager: Optional pre-configured FontManager

    Returns:
        LayoutResult for the pass

    Raises:
        InvalidFileError: Bad input or output path
        DocxParseError: Unreadable DOCX
        RenderingError: Malformed table or unsupported/undecodable image
    """
    validate_input_path(docx_path, DOCX_EXTENSION)
    validate_output_path(pdf_path, PDF_EXTENSION)

    logger.info("Starting conversion from %s to %s", docx_path, pdf_path)
    blocks = read_docx(docx_path)
    logger.info("Read %d content blocks. Converting to PDF...", len(blocks))

    result = render_blocks_to_pdf(blocks, pdf_path, geometry=geometry, font_manager=font_manager)

    logger.info("PDF saved successfully: %d pages, %s",
                result.page_count, format_file_size(os.path.getsize(pdf_path)))
    return result
