"""Tests for the line tokenizer."""

import pytest

from zipgeo.adapters.csv_loader.field_parser import split_fields


def test_full_record():
    assert split_fields("94040,Mountain View,37.3861,-122.0839,CA") == [
        "94040", "Mountain View", "37.3861", "-122.0839", "CA",
    ]


def test_strips_newline():
    assert split_fields("1,a,2,3\n") == ["1", "a", "2", "3"]


def test_strips_crlf():
    assert split_fields("1,a,2,3\r\n") == ["1", "a", "2", "3"]


def test_trims_whitespace_around_fields():
    assert split_fields("  94040 , Mountain View ,37.3861,  -122.0839\n") == [
        "94040", "Mountain View", "37.3861", "-122.0839",
    ]


def test_empty_line():
    assert split_fields("") == []


def test_newline_only():
    assert split_fields("\n") == []
    assert split_fields("\r\n") == []


def test_whitespace_only():
    assert split_fields("   \t \n") == []


def test_no_delimiter_single_field():
    assert split_fields("94040") == ["94040"]


def test_consecutive_delimiters_keep_empty_field():
    """Empty columns are kept so later columns don't shift left."""
    assert split_fields("94040,,37.0,-122.0") == ["94040", "", "37.0", "-122.0"]


def test_trailing_delimiter_gives_trailing_empty_field():
    assert split_fields("a,b,") == ["a", "b", ""]


def test_leading_delimiter_gives_leading_empty_field():
    assert split_fields(",b") == ["", "b"]


def test_custom_delimiter():
    assert split_fields("94040;MV;37.0;-122.0", ";") == ["94040", "MV", "37.0", "-122.0"]


def test_long_field_not_truncated():
    name = "x" * 5000
    assert split_fields(f"1,{name},2,3")[1] == name


def test_many_fields():
    line = ",".join(str(i) for i in range(100))
    assert len(split_fields(line)) == 100


@pytest.mark.parametrize("delimiter", ["", ",,", "ab"])
def test_invalid_delimiter_raises(delimiter):
    with pytest.raises(ValueError, match="single character"):
        split_fields("a,b", delimiter)
