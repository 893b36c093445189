import pytest
from PIL import Image as PILImage

from pageflow.config import PNG_SIGNATURE
from pageflow.content_model import Image
from pageflow.exceptions import ImageDecodeError, UnsupportedImageFormatError
from pageflow.layout_engine.image_placer import (
    ImagePlacer,
    compute_scale,
    detect_image_format,
    read_image_size,
)


def test_detect_image_format(make_image):
    assert detect_image_format(make_image("PNG", 4, 4)) == "png"
    assert detect_image_format(make_image("JPEG", 4, 4)) == "jpeg"


@pytest.mark.parametrize("data", [b"", b"GIF89a....", b"BM\x00\x00"])
def test_detect_rejects_other_formats(data):
    with pytest.raises(UnsupportedImageFormatError, match="unsupported image format"):
        detect_image_format(data)


def test_detect_rejects_real_gif(make_image):
    with pytest.raises(UnsupportedImageFormatError):
        detect_image_format(make_image("GIF", 4, 4))


def test_read_image_size(make_image):
    assert read_image_size(make_image("PNG", 40, 20), "png") == (40, 20)
    assert read_image_size(make_image("JPEG", 33, 17), "jpeg") == (33, 17)


def test_read_image_size_rejects_corrupt_bytes():
    with pytest.raises(ImageDecodeError):
        read_image_size(PNG_SIGNATURE + b"definitely not chunks", "png")


def test_read_image_size_rejects_oversized_images(monkeypatch, make_image):
    data = make_image("PNG", 40, 20)
    monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(ImageDecodeError, match="PNG"):
        read_image_size(data, "png")


def test_compute_scale_fits_width_then_height():
    assert compute_scale(100, 50, 200, 1000) == 2.0
    assert compute_scale(100, 50, 200, 50) == 1.0
    # Never grows past the width-fit scale
    assert compute_scale(100, 10, 190, 1000) == 1.9


def test_image_fitting_on_current_page(pages, backend, make_image):
    placement = ImagePlacer().place(Image(make_image("PNG", 380, 190)), pages)

    assert placement.scale == 0.5
    assert (placement.width, placement.height) == (190.0, 95.0)
    assert placement.width == placement.intrinsic_width * placement.scale
    assert placement.height == placement.intrinsic_height * placement.scale
    assert placement.x + placement.width / 2 == 210.0 / 2
    assert placement.y == 287.0 - 95.0
    assert backend.calls == [("image", 10.0, 192.0, 190.0, 95.0)]
    assert pages.y_position == 287.0 - 95.0 - 8.0


def test_narrow_image_is_centred(pages, make_image):
    placement = ImagePlacer().place(Image(make_image("JPEG", 100, 400)), pages)

    assert placement.x + placement.width / 2 == pytest.approx(105.0)
    assert placement.height <= 277.0


def test_image_taller_than_remaining_room_starts_one_new_page(pages, backend, make_image):
    pages.advance(187.0)  # 90 left on this page

    placement = ImagePlacer().place(Image(make_image("PNG", 190, 190)), pages)

    assert backend.kinds() == ["page", "image"]
    assert placement.page == 2
    assert placement.scale == 1.0
    assert placement.y == 287.0 - 190.0
    assert pages.y_position == 287.0 - 190.0 - 8.0


def test_image_taller_than_page_is_shrunk_without_blank_page(pages, backend, make_image):
    placement = ImagePlacer().place(Image(make_image("PNG", 100, 1000)), pages)

    assert backend.kinds() == ["image"]
    assert placement.height == pytest.approx(277.0)
    assert placement.scale < 190.0 / 100


def test_unsupported_image_draws_nothing(pages, backend, make_image):
    with pytest.raises(UnsupportedImageFormatError):
        ImagePlacer().place(Image(make_image("GIF", 10, 10)), pages)
    assert backend.calls == []
    assert pages.y_position == 287.0
