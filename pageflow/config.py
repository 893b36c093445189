"""Configuration Constants

Default page geometry and layout constants for the pagination engine.
Units are millimetres unless noted otherwise; font sizes are points.
"""

# Page Geometry (A4)
PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN = 10.0

# Vertical Rhythm
LINE_HEIGHT = 6.0
PARAGRAPH_SPACING = 8.0
LOW_WATER_MARK = 20.0  # Extra room above the bottom margin checked after every block

# Typography
FONT_SIZE = 11.0
AVERAGE_CHAR_WIDTH_FACTOR = 0.25  # Width of one character as a fraction of font size
BULLET_PREFIX = "-"
BULLET_INDENT = 2.0

# Table Grid
TABLE_START_MARKER = "TABLE_START"
TABLE_END_MARKER = "TABLE_END"
TABLE_CELL_DELIMITER = "|"
TABLE_ESCAPE_CHAR = "\\"
TABLE_CELL_PADDING = 13.0  # Horizontal offset of cell text from the column's left edge
TABLE_CELL_TEXT_RISE = 2.0  # Cell text baseline above the row's bottom border

# Image Signatures
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"

SUPPORTED_IMAGE_FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
}

# Input Documents
DOCX_EXTENSION = ".docx"
PDF_EXTENSION = ".pdf"
