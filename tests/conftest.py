import io

import pytest
from PIL import Image as PILImage

from pageflow.backends.base import FontWeight, RenderingBackend
from pageflow.layout_engine.page_manager import PageManager
from pageflow.page_geometry import PageGeometry


class RecordingBackend(RenderingBackend):
    """Backend that records every drawing call as a tuple."""

    def __init__(self):
        self.calls = []
        self.page = 1

    def draw_text(self, content, font_size, x, y, weight=FontWeight.NORMAL):
        self.calls.append(("text", content, font_size, x, y, weight))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2))

    def place_image(self, data, x, y, width, height):
        self.calls.append(("image", x, y, width, height))

    def new_page(self):
        self.page += 1
        self.calls.append(("page", self.page))
        return self.page

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def kinds(self):
        return [c[0] for c in self.calls]


def encode_image(fmt, width, height, color=(200, 30, 30)):
    buf = io.BytesIO()
    PILImage.new("RGB", (width, height), color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def geometry():
    return PageGeometry()


@pytest.fixture
def pages(geometry, backend):
    return PageManager(geometry, backend)


@pytest.fixture
def make_image():
    return encode_image


@pytest.fixture
def backend_factory():
    return RecordingBackend
