"""Image Placer Module

Scales images to the column width (or the remaining page height), centres
them horizontally and decides whether a page break is needed first.
"""
import io
import logging
from dataclasses import dataclass
from typing import Tuple

from PIL import Image as PILImage

from ..config import PNG_SIGNATURE, JPEG_SIGNATURE, SUPPORTED_IMAGE_FORMATS
from ..content_model import Image
from ..exceptions import UnsupportedImageFormatError, ImageDecodeError
from .page_manager import PageManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePlacement:
    """Where and how large an image was placed.

    Attributes:
        image_format: "png" or "jpeg"
        intrinsic_width: Decoded width in pixels
        intrinsic_height: Decoded height in pixels
        scale: Layout units per pixel
        x, y: Bottom-left corner on the page
        page: Handle of the page the image landed on
    """

    image_format: str
    intrinsic_width: int
    intrinsic_height: int
    scale: float
    x: float
    y: float
    page: int

    @property
    def width(self) -> float:
        return self.intrinsic_width * self.scale

    @property
    def height(self) -> float:
        return self.intrinsic_height * self.scale


def detect_image_format(data: bytes) -> str:
    """
    Detect the image format from its leading signature bytes.

    Args:
        data: Raw encoded image bytes

    Returns:
        "png" or "jpeg"

    Raises:
        UnsupportedImageFormatError: For any other signature
    """
    if data.startswith(PNG_SIGNATURE):
        return "png"
    if data.startswith(JPEG_SIGNATURE):
        return "jpeg"
    raise UnsupportedImageFormatError(data[:8])


def read_image_size(data: bytes, image_format: str) -> Tuple[int, int]:
    """
    Decode an image and return its intrinsic pixel dimensions.

    Args:
        data: Raw encoded image bytes
        image_format: Format detected from the signature

    Returns:
        Tuple of (width, height) in pixels

    Raises:
        ImageDecodeError: If Pillow cannot decode the bytes as the detected format
    """
    expected = SUPPORTED_IMAGE_FORMATS[image_format]
    try:
        with PILImage.open(io.BytesIO(data)) as img:
            if img.format != expected:
                raise ImageDecodeError(expected, f"decoder identified {img.format}")
            img.load()
            width, height = img.size
    except (OSError, SyntaxError, ValueError, PILImage.DecompressionBombError) as e:
        raise ImageDecodeError(expected, str(e)) from e

    if width <= 0 or height <= 0:
        raise ImageDecodeError(expected, f"invalid dimensions {width}x{height}")
    return width, height


def compute_scale(intrinsic_width: int, intrinsic_height: int,
                  max_width: float, max_height: float) -> float:
    """
    Scale that fits the width, shrunk further if the height would not fit.

    The result never exceeds the width-fit scale.

    Examples:
        >>> compute_scale(100, 50, 200, 1000)
        2.0
        >>> compute_scale(100, 50, 200, 50)
        1.0
    """
    scale = max_width / intrinsic_width
    if max_height > 0 and intrinsic_height * scale > max_height:
        scale = max_height / intrinsic_height
    return scale


class ImagePlacer:
    """Places Image blocks centred on the page below the cursor."""

    def place(self, image: Image, pages: PageManager) -> ImagePlacement:
        """
        Scale, position and draw one image, then advance the cursor past it.

        If the width-fit image is taller than the room left on the current
        page, a new page is started first (unless the cursor is already at
        the top of a fresh page) and the image is shrunk to the room left
        there.

        Args:
            image: Image block with raw bytes
            pages: Layout context owning the cursor

        Returns:
            The computed placement

        Raises:
            UnsupportedImageFormatError: Neither PNG nor JPEG
            ImageDecodeError: Bytes not decodable as the detected format
        """
        geometry = pages.geometry
        image_format = detect_image_format(image.data)
        width_px, height_px = read_image_size(image.data, image_format)

        width_fit_height = height_px * geometry.usable_width / width_px
        if width_fit_height > pages.remaining_height() and not pages.at_page_top():
            logger.debug("Adding new page for image")
            pages.new_page()

        scale = compute_scale(width_px, height_px, geometry.usable_width, pages.remaining_height())
        logger.debug("Image scale: %s (%dx%d px)", scale, width_px, height_px)

        placement = ImagePlacement(
            image_format=image_format,
            intrinsic_width=width_px,
            intrinsic_height=height_px,
            scale=scale,
            x=(geometry.page_width - width_px * scale) / 2,
            y=pages.y_position - height_px * scale,
            page=pages.current_page,
        )

        pages.backend.place_image(image.data, placement.x, placement.y,
                                  placement.width, placement.height)
        pages.advance(placement.height + geometry.paragraph_spacing)
        return placement
