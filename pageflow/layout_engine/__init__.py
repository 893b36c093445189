"""Layout Engine Package

Paginates an ordered stream of content blocks onto fixed-size pages:

Core Classes:
- LayoutDriver: Walks the blocks and dispatches them (from driver.py)
- PageManager: Owns the cursor and the current page
- TextFlowEngine: Greedy word wrapping with bold/bullet line styles
- TableGridRenderer: Uniform-column bordered tables
- ImagePlacer: Width-fit, centred image placement

Utilities:
- metrics: Monospace text width estimation
"""

from .driver import LayoutDriver, LayoutResult
from .page_manager import PageManager
from .text_flow import TextFlowEngine, wrap_words, select_style
from .table_grid import TableGridRenderer
from .image_placer import (
    ImagePlacer,
    ImagePlacement,
    detect_image_format,
    read_image_size,
    compute_scale,
)
from .metrics import MonospaceMetrics, estimate_width

__all__ = [
    # Driver
    'LayoutDriver',
    'LayoutResult',

    # Components
    'PageManager',
    'TextFlowEngine',
    'TableGridRenderer',
    'ImagePlacer',
    'ImagePlacement',

    # Helper functions
    'wrap_words',
    'select_style',
    'detect_image_format',
    'read_image_size',
    'compute_scale',

    # Metrics
    'MonospaceMetrics',
    'estimate_width',
]
