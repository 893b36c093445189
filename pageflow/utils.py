"""Utilities Module

Helper functions for validating inputs and reporting outputs.
"""
import os

from .exceptions import InvalidFileError


def validate_input_path(path: str, extension: str) -> None:
    """
    Validate an input file exists and has the expected extension.

    Args:
        path: Path to the input file
        extension: Expected lowercase extension including the dot (e.g. ".docx")

    Raises:
        InvalidFileError: If the path is empty, missing or has the wrong extension
    """
    if not path:
        raise InvalidFileError("Input path cannot be empty")

    if not os.path.exists(path):
        raise InvalidFileError(f"File does not exist: {path}")

    if not path.lower().endswith(extension):
        raise InvalidFileError(f"File must have {extension} extension: {path}")


def validate_output_path(path: str, extension: str) -> None:
    """
    Validate an output path has the expected extension and an existing directory.

    Raises:
        InvalidFileError: If the extension is wrong or the directory is missing
    """
    if not path:
        raise InvalidFileError("Output path cannot be empty")

    if not path.lower().endswith(extension):
        raise InvalidFileError(f"Output file must have {extension} extension: {path}")

    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise InvalidFileError(f"Output directory does not exist: {directory}")


def format_file_size(size_bytes: int) -> str:
    """Human-readable size of a written file, e.g. "12.4 KB"."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = size_bytes / 1024
    for unit in ("KB", "MB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"
