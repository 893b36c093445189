"""Layout Driver Module

Walks the content block sequence once, in order, dispatching each block to
the text flow engine, the table grid renderer or the image placer.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..backends.base import RenderingBackend
from ..content_model import ContentBlock, TextParagraph, Table, Image
from ..exceptions import UnsupportedBlockError
from ..page_geometry import PageGeometry
from .image_placer import ImagePlacer
from .metrics import MonospaceMetrics
from .page_manager import PageManager
from .table_grid import TableGridRenderer
from .text_flow import TextFlowEngine

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Summary of one layout pass.

    Attributes:
        page_count: Pages started, including the first
        blocks_rendered: Content blocks consumed
        text_lines: Wrapped text lines drawn
        table_rows: Table rows drawn
        images_placed: Images placed
        final_y: Cursor position after the last block
    """

    page_count: int = 1
    blocks_rendered: int = 0
    text_lines: int = 0
    table_rows: int = 0
    images_placed: int = 0
    final_y: Optional[float] = None


class LayoutDriver:
    """Paginates content blocks onto a rendering backend.

    The driver holds no cross-conversion state: every call to ``render``
    gets its own PageManager, so one driver can lay out many documents.
    """

    def __init__(self, geometry: Optional[PageGeometry] = None, metrics=None):
        """
        Initialize the layout driver.

        Args:
            geometry: Page geometry; defaults to A4 with 10mm margins
            metrics: Width estimator; defaults to MonospaceMetrics
        """
        self.geometry = geometry or PageGeometry()
        self.metrics = metrics or MonospaceMetrics()
        self.text_flow = TextFlowEngine(metrics=self.metrics)
        self.table_renderer = TableGridRenderer()
        self.image_placer = ImagePlacer()

    def render(self, blocks: Iterable[ContentBlock], backend: RenderingBackend) -> LayoutResult:
        """
        Lay out every block in order onto the backend.

        After each block the cursor is checked against the low-water line
        and a new page is started if it has sunk below it.

        Args:
            blocks: Content blocks in document order
            backend: Drawing surface with its first page already open

        Returns:
            LayoutResult summarising the pass

        Raises:
            RenderingError: On the first malformed or unsupported block;
                nothing after it is laid out
        """
        pages = PageManager(self.geometry, backend)
        result = LayoutResult()

        for index, block in enumerate(blocks):
            logger.debug("Processing block %d: %s", index, type(block).__name__)
            self._render_block(block, pages, result)
            pages.check_low_water_mark()
            result.blocks_rendered += 1

        result.page_count = pages.page_count
        result.final_y = pages.y_position
        logger.debug("Laid out %d blocks on %d pages", result.blocks_rendered, result.page_count)
        return result

    def _render_block(self, block: ContentBlock, pages: PageManager, result: LayoutResult):
        if isinstance(block, TextParagraph):
            if block.is_blank:
                pages.advance(self.geometry.paragraph_spacing)
            else:
                result.text_lines += self.text_flow.render(block.raw_text, pages)
        elif isinstance(block, Table):
            self.table_renderer.render(block, pages)
            result.table_rows += len(block.rows)
        elif isinstance(block, Image):
            self.image_placer.place(block, pages)
            result.images_placed += 1
        else:
            raise UnsupportedBlockError(block)
