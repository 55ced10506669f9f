import pytest

from ais_navlog.cleaning.tokenizer import tokenize_line, tokenize_lines
from ais_navlog.exceptions import DataQualityFault


def test_tokenize_line_keeps_trailing_empty_field(sentence):
    fields = tokenize_line(sentence())

    assert len(fields) == 22
    assert fields[-1] == ""
    assert fields[7] == "235001234"


def test_tokenize_line_rejects_wrong_field_count():
    with pytest.raises(DataQualityFault) as exc_info:
        tokenize_line("a,b,c", field_count=22)

    assert exc_info.value.line == "a,b,c"


def test_tokenize_lines_drops_malformed_rows(sentence):
    lines = [sentence(mmsi="1"), "too,short", sentence(mmsi="2"), sentence({14: "A,B,C"})]

    df, dropped = tokenize_lines(lines)

    assert dropped == 2
    assert df.height == 2
    assert df.columns[0] == "f01"
    assert df.columns[-1] == "f22"
    assert df["f08"].to_list() == ["1", "2"]


def test_tokenize_lines_with_no_valid_rows():
    df, dropped = tokenize_lines(["x"])

    assert df.is_empty()
    assert df.width == 22
    assert dropped == 1
