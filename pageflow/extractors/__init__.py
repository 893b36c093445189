"""Source document extractors producing content blocks."""

from .docx_reader import read_docx

__all__ = ['read_docx']
