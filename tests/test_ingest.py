"""
Tests for the Input Reader
==========================
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.ingest import parse_lines, parse_value, read_records
from namekit.models import InvalidRecord


class TestParseValue:
    """Tests for lenient integer parsing."""

    def test_plain(self):
        assert parse_value("42") == 42

    def test_surrounding_junk(self):
        assert parse_value(" 7\r") == 7
        assert parse_value("12abc") == 12

    def test_sign(self):
        assert parse_value("-3") == -3

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            parse_value("abc")
        with pytest.raises(ValueError):
            parse_value("")


class TestParseLines:
    """Tests for parse_lines()."""

    def test_basic(self):
        assert parse_lines(["Anna,5", "Bob,7"]) == [("Anna", 5), ("Bob", 7)]

    def test_skips_blank_lines(self):
        assert parse_lines(["Anna,5", "", "   ", "Bob,7"]) == [("Anna", 5), ("Bob", 7)]

    def test_name_kept_verbatim(self):
        assert parse_lines([" Anna ,5"]) == [(" Anna ", 5)]

    def test_extra_fields_ignored(self):
        assert parse_lines(["Anna,5,extra"]) == [("Anna", 5)]

    def test_crlf(self):
        assert parse_lines(["Anna,5\r"]) == [("Anna", 5)]

    def test_missing_value(self):
        with pytest.raises(InvalidRecord) as exc_info:
            parse_lines(["Anna,5", "", "Bob"])
        assert exc_info.value.index == 1
        assert exc_info.value.line == 3

    def test_non_numeric_value(self):
        with pytest.raises(InvalidRecord, match="line 1"):
            parse_lines(["Anna,many"])


def test_read_records(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Katherine,10\nCatherine,7\n\nZoë,1\n", encoding="utf-8")
    assert read_records(path) == [("Katherine", 10), ("Catherine", 7), ("Zoë", 1)]


def test_read_records_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_records(tmp_path / "nope.txt")
