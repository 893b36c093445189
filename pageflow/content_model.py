"""Content Model

Content blocks consumed by the layout driver, in original document order:

- TextParagraph: raw paragraph text, possibly with hard line breaks
- Table: a rectangular grid of cell strings
- Image: raw PNG or JPEG bytes

Tables can also travel as a marker-delimited string::

    TABLE_START
    |a|b|
    |c|d|
    TABLE_END

Inside a cell, ``\\|`` stands for a literal pipe and ``\\\\`` for a literal
backslash. Line breaks inside a cell are encoded as single spaces.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .config import (
    TABLE_START_MARKER,
    TABLE_END_MARKER,
    TABLE_CELL_DELIMITER,
    TABLE_ESCAPE_CHAR,
)
from .exceptions import MalformedTableError


@dataclass(frozen=True)
class TextParagraph:
    raw_text: str

    @property
    def is_blank(self) -> bool:
        return not self.raw_text.strip()


@dataclass(frozen=True)
class Table:
    rows: Tuple[Tuple[str, ...], ...]

    def __post_init__(self):
        # Accept any nested sequence, store tuples so the block stays hashable
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    @property
    def column_count(self) -> int:
        """Number of columns, fixed by the first row.

        Raises:
            MalformedTableError: If the grid is empty, has no columns or
                has rows with differing column counts
        """
        if not self.rows:
            raise MalformedTableError("Table has no rows")

        columns = len(self.rows[0])
        if columns <= 0:
            raise MalformedTableError("Table header row has no columns")

        for index, row in enumerate(self.rows[1:], start=1):
            if len(row) != columns:
                raise MalformedTableError(
                    f"Row {index} has {len(row)} columns, expected {columns}"
                )
        return columns

    @classmethod
    def from_encoded(cls, encoded: str) -> "Table":
        return cls(rows=parse_table_encoding(encoded))

    def encode(self) -> str:
        return encode_table(self.rows)


@dataclass(frozen=True)
class Image:
    data: bytes

    def __repr__(self) -> str:
        return f"Image(<{len(self.data)} bytes>)"


ContentBlock = Union[TextParagraph, Table, Image]


def escape_cell(text: str) -> str:
    """Escape a cell's text for the marker encoding."""
    text = " ".join(text.splitlines())
    text = text.replace(TABLE_ESCAPE_CHAR, TABLE_ESCAPE_CHAR * 2)
    return text.replace(TABLE_CELL_DELIMITER, TABLE_ESCAPE_CHAR + TABLE_CELL_DELIMITER)


def split_row(line: str) -> List[str]:
    """Split an encoded row on unescaped delimiters, unescaping each part.

    The first and last parts are the (normally empty) text outside the
    grid delimiters, so ``"|a|b|"`` splits into ``["", "a", "b", ""]``.
    """
    parts: List[str] = []
    current: List[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == TABLE_ESCAPE_CHAR:
            nxt = next(chars, None)
            if nxt is None:
                raise MalformedTableError(f"Dangling escape at end of row: {line!r}")
            current.append(nxt)
        elif ch == TABLE_CELL_DELIMITER:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def parse_table_encoding(encoded: str) -> Tuple[Tuple[str, ...], ...]:
    """Parse the marker-delimited table encoding into a grid of cell strings.

    Args:
        encoded: String starting with a TABLE_START line, one
            ``|``-delimited row per line and a closing TABLE_END line

    Returns:
        Tuple of rows, each a tuple of raw (untrimmed) cell strings

    Raises:
        MalformedTableError: On missing markers, fewer than two lines,
            a header producing no columns, inconsistent column counts or
            rows not enclosed in delimiters
    """
    lines = encoded.replace("\r\n", "\n").split("\n")
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 2:
        raise MalformedTableError(f"Table encoding needs at least 2 lines, got {len(lines)}")
    if lines[0].strip() != TABLE_START_MARKER:
        raise MalformedTableError(f"Table encoding must start with {TABLE_START_MARKER}")

    rows: List[Tuple[str, ...]] = []
    columns = None
    for line_no, line in enumerate(lines[1:], start=1):
        stripped = line.strip()
        if stripped == TABLE_END_MARKER:
            if line_no != len(lines) - 1:
                raise MalformedTableError(f"Unexpected content after {TABLE_END_MARKER}")
            break

        parts = split_row(stripped)
        if columns is None:
            columns = len(parts) - 2
            if columns <= 0:
                raise MalformedTableError(
                    f"Header row {line!r} produces {columns} columns"
                )
        if len(parts) < 2 or parts[0] or parts[-1]:
            raise MalformedTableError(f"Row {line_no} is not enclosed in delimiters: {line!r}")
        if len(parts) - 2 != columns:
            raise MalformedTableError(
                f"Row {line_no} has {len(parts) - 2} columns, expected {columns}"
            )
        rows.append(tuple(parts[1:-1]))
    else:
        raise MalformedTableError(f"Table encoding is missing {TABLE_END_MARKER}")

    if not rows:
        raise MalformedTableError("Table encoding has no rows")
    return tuple(rows)


def encode_table(rows: Sequence[Sequence[str]]) -> str:
    """Encode a grid of cell strings using the table markers."""
    lines = [TABLE_START_MARKER]
    for row in rows:
        cells = TABLE_CELL_DELIMITER.join(escape_cell(cell) for cell in row)
        lines.append(f"{TABLE_CELL_DELIMITER}{cells}{TABLE_CELL_DELIMITER}")
    lines.append(TABLE_END_MARKER)
    return "\n".join(lines) + "\n"
