"""DOCX Content Extraction

Turns a DOCX body into the ordered content blocks the layout engine
consumes. Paragraphs become TextParagraph blocks (hard breaks kept as
newlines), inline pictures become Image blocks and tables become Table
blocks.
"""
from __future__ import annotations

import logging
import zipfile
from typing import List

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn

from ..content_model import ContentBlock, Image, Table, TextParagraph
from ..exceptions import DocxParseError

logger = logging.getLogger(__name__)

_RUNS_XPATH = './w:r | ./w:hyperlink/w:r'
_EMBED_ATTR = '{http://schemas.openxmlformats.org/officeDocument/2006/relationships}embed'


def _run_text(r, break_char: str) -> str:
    """Text of one w:r element, with w:br/w:cr mapped to break_char."""
    parts: List[str] = []
    for child in r.iterchildren():
        if child.tag == qn('w:t'):
            parts.append(child.text or '')
        elif child.tag in (qn('w:br'), qn('w:cr')):
            parts.append(break_char)
        elif child.tag == qn('w:tab'):
            parts.append(' ')
    return ''.join(parts)


def _run_images(r, part, docx_path: str) -> List[bytes]:
    """Return the image bytes embedded in this run (if any)."""
    images: List[bytes] = []
    for blip in r.xpath('./w:drawing//a:blip'):
        rId = blip.get(_EMBED_ATTR)
        if not rId:
            continue
        try:
            images.append(part.related_parts[rId].blob)
        except KeyError as e:
            raise DocxParseError(docx_path, f"image relationship {rId} not found") from e
    return images


def _paragraph_blocks(p, part, docx_path: str) -> List[ContentBlock]:
    blocks: List[ContentBlock] = []
    text_parts: List[str] = []
    for r in p.xpath(_RUNS_XPATH):
        for blob in _run_images(r, part, docx_path):
            logger.debug("Found inline image (%d bytes)", len(blob))
            blocks.append(Image(data=blob))
        text_parts.append(_run_text(r, '\n'))

    text = ''.join(text_parts)
    if text:
        blocks.append(TextParagraph(raw_text=text))
    return blocks


def _cell_text(tc) -> str:
    paragraphs = [
        ''.join(_run_text(r, ' ') for r in p.xpath(_RUNS_XPATH))
        for p in tc.xpath('./w:p')
    ]
    return ' '.join(text for text in paragraphs if text)


def _table_block(tbl) -> Table:
    """
    Flatten a w:tbl into a rectangular grid of cell strings.

    A horizontally merged cell (w:gridSpan) keeps its text in the first
    grid column and fills the columns it covers with empty cells. Rows
    are then padded or trimmed to the table's grid width.
    """
    raw_rows = []
    for tr in tbl.xpath('./w:tr'):
        cells: List[str] = []
        for tc in tr.xpath('./w:tc'):
            cells.append(_cell_text(tc))
            cells.extend([''] * (tc.grid_span - 1))
        raw_rows.append(cells)

    width = len(tbl.xpath('./w:tblGrid/w:gridCol'))
    if not width:
        width = max((len(cells) for cells in raw_rows), default=0)

    rows = []
    for index, cells in enumerate(raw_rows):
        if len(cells) != width:
            logger.debug("Table row %d spans %d grid columns, normalising to %d",
                         index, len(cells), width)
        rows.append(tuple((cells + [''] * width)[:width]))
    return Table(rows=tuple(rows))


def read_docx(docx_path: str) -> List[ContentBlock]:
    """
    Extract the ordered content blocks of a DOCX document.

    Only top-level paragraphs and tables are walked. Images are emitted
    where their run occurs, ahead of the paragraph text they sit in.
    Cell text is flattened to one line per cell.

    Args:
        docx_path: Path to the .docx file

    Returns:
        Content blocks in document order

    Raises:
        DocxParseError: If the file cannot be opened or an image
            relationship is missing
    """
    logger.debug("Opening DOCX file: %s", docx_path)
    try:
        document = DocxDocument(docx_path)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DocxParseError(docx_path, str(e) or type(e).__name__) from e

    part = document.part
    blocks: List[ContentBlock] = []
    for child in document.element.body.iterchildren():
        if child.tag == qn('w:p'):
            blocks.extend(_paragraph_blocks(child, part, docx_path))
        elif child.tag == qn('w:tbl'):
            blocks.append(_table_block(child))

    logger.debug("DOCX processing complete. Found %d content blocks", len(blocks))
    return blocks
