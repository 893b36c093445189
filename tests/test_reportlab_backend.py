import io
import re

import pytest

from pageflow.backends.base import FontWeight
from pageflow.backends.font_manager import FontManager
from pageflow.backends.reportlab_backend import ReportLabBackend
from pageflow.content_model import Image, Table, TextParagraph
from pageflow.converter import render_blocks_to_pdf
from pageflow.exceptions import UnsupportedImageFormatError


@pytest.fixture
def builtin_fonts():
    return FontManager(use_system_fonts=False)


def count_pages(pdf_bytes):
    return len(re.findall(rb"/Type /Page\b", pdf_bytes))


def test_font_manager_builtin_fallback(builtin_fonts):
    assert builtin_fonts.get_font_name() == "Helvetica"
    assert builtin_fonts.get_font_name(FontWeight.BOLD) == "Helvetica-Bold"


def test_font_manager_without_fonts_on_disk_falls_back():
    fonts = FontManager(regular_paths=["/nonexistent/Regular.ttf"], bold_paths=[])
    assert fonts.font_name == "Helvetica"
    assert fonts.font_name_bold == "Helvetica-Bold"


def test_backend_draws_and_counts_pages(builtin_fonts, make_image):
    out = io.BytesIO()
    backend = ReportLabBackend(out, 210, 297, font_manager=builtin_fonts)

    backend.draw_text("Hello", 11, 10, 287, FontWeight.BOLD)
    backend.draw_line(10, 280, 200, 280)
    backend.place_image(make_image("PNG", 20, 10), 10, 200, 40, 20)
    assert backend.new_page() == 2
    backend.draw_text("Second", 11, 10, 287)
    backend.save()

    data = out.getvalue()
    assert data.startswith(b"%PDF")
    assert count_pages(data) == 2


def test_render_blocks_to_pdf(builtin_fonts, make_image):
    out = io.BytesIO()
    blocks = [
        TextParagraph("Title\nFirst paragraph with a few words\n- a bullet"),
        Table(rows=[["name", "value"], ["alpha", "1"]]),
        Image(make_image("PNG", 300, 150)),
        Image(make_image("JPEG", 120, 240)),
        TextParagraph("Closing words"),
    ]

    result = render_blocks_to_pdf(blocks, out, font_manager=builtin_fonts)

    data = out.getvalue()
    assert data.startswith(b"%PDF")
    assert result.images_placed == 2
    assert count_pages(data) >= 1


def test_render_blocks_to_pdf_propagates_errors(builtin_fonts, make_image):
    with pytest.raises(UnsupportedImageFormatError):
        render_blocks_to_pdf([Image(make_image("GIF", 4, 4))], io.BytesIO(),
                             font_manager=builtin_fonts)
