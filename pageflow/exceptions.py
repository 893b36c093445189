"""Custom Exception Hierarchy

Exception hierarchy for pageflow. Every error aborts the whole conversion;
the engine never skips an offending block and carries on.
"""


class PageflowError(Exception):
    """Base exception for all pageflow errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all custom exceptions raised by the package.
    """
    pass


# Validation Errors
class ValidationError(PageflowError):
    """Raised when input validation fails."""
    pass


class InvalidFileError(ValidationError):
    """Raised when file validation fails (doesn't exist, wrong extension, etc.)."""
    pass


class InvalidConfigurationError(ValidationError):
    """Raised when page geometry or layout parameters are invalid."""
    pass


# Extraction Errors
class ExtractionError(PageflowError):
    """Base class for source document extraction errors."""
    pass


class DocxParseError(ExtractionError):
    """Raised when a DOCX container cannot be opened or parsed."""

    def __init__(self, docx_path: str, reason: str):
        self.docx_path = docx_path
        self.reason = reason
        super().__init__(f"Failed to parse DOCX file '{docx_path}': {reason}")


# Rendering Errors
class RenderingError(PageflowError):
    """Base class for layout and rendering errors."""
    pass


class UnsupportedImageFormatError(RenderingError):
    """Raised when image bytes carry neither a PNG nor a JPEG signature."""

    def __init__(self, signature: bytes):
        self.signature = signature
        super().__init__(f"unsupported image format (signature {signature.hex() or 'empty'})")


class ImageDecodeError(RenderingError):
    """Raised when image bytes match a supported signature but cannot be decoded."""

    def __init__(self, image_format: str, reason: str):
        self.image_format = image_format
        super().__init__(f"Failed to decode {image_format} image: {reason}")


class MalformedTableError(RenderingError):
    """Raised when a table grid or its marker encoding is malformed."""
    pass


class UnsupportedBlockError(RenderingError):
    """Raised when the layout driver receives something that is not a content block."""

    def __init__(self, block):
        self.block = block
        super().__init__(f"Unsupported content block type: {type(block).__name__}")


class CursorMoveError(RenderingError):
    """Raised when a component tries to move the layout cursor back up the page."""

    def __init__(self, delta: float):
        self.delta = delta
        super().__init__(f"Cursor can only move down the page, got delta {delta}")
