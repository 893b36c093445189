import pytest

from pageflow.content_model import Image, Table, TextParagraph, parse_table_encoding, split_row
from pageflow.exceptions import MalformedTableError


def test_parse_table_encoding_basic():
    table = Table.from_encoded("TABLE_START\n|a|b|\n|c|d|\nTABLE_END\n")
    assert table.rows == (("a", "b"), ("c", "d"))
    assert table.column_count == 2


def test_parse_keeps_raw_cell_text():
    rows = parse_table_encoding("TABLE_START\n| a | b |\nTABLE_END")
    assert rows == ((" a ", " b "),)


def test_escaped_pipe_and_backslash_are_literal():
    assert split_row("|a\\|b|c\\\\|") == ["", "a|b", "c\\", ""]
    rows = parse_table_encoding("TABLE_START\n|a\\|b|c|\nTABLE_END")
    assert rows == (("a|b", "c"),)


def test_encode_escapes_delimiters_and_flattens_breaks():
    table = Table(rows=[["x|y", "back\\slash"], ["multi\nline", "z"]])
    encoded = table.encode()

    assert encoded.startswith("TABLE_START\n")
    assert encoded.endswith("TABLE_END\n")
    assert Table.from_encoded(encoded).rows == (("x|y", "back\\slash"), ("multi line", "z"))


@pytest.mark.parametrize("encoded", [
    "",
    "TABLE_START",
    "TABLE_START\n|a|b|\n",
    "|a|\nTABLE_END",
    "TABLE_START\n|\nTABLE_END",
    "TABLE_START\n|a|b|\n|c|\nTABLE_END",
    "TABLE_START\n|a|b|\nc|d\nTABLE_END",
    "TABLE_START\nTABLE_END",
    "TABLE_START\n|a|\nTABLE_END\n|b|",
    "TABLE_START\n|a\\",
])
def test_malformed_encoding_is_rejected(encoded):
    with pytest.raises(MalformedTableError):
        parse_table_encoding(encoded)


@pytest.mark.parametrize("rows", [(), [[]], [["a", "b"], ["c"]]])
def test_invalid_grid_has_no_column_count(rows):
    with pytest.raises(MalformedTableError):
        Table(rows=rows).column_count


def test_text_paragraph_blankness():
    assert TextParagraph("  \n ").is_blank
    assert not TextParagraph(" x ").is_blank


def test_image_repr_hides_payload():
    assert repr(Image(b"\x00" * 10)) == "Image(<10 bytes>)"
