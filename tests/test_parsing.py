"""
Tests for textual ingestion.
"""

import logging

import pytest

from segment_clip.config import ValidationError
from segment_clip.geometry import ConvexPolygon, Point, Rectangle, Segment
from segment_clip.parsing import (
    EXAMPLE_INPUT,
    ClipInput,
    ParseError,
    load_input,
    parse_input,
    parse_polygon,
)


class TestParseInput:
    """Tests for parse_input()."""

    def test_example(self):
        parsed = parse_input(EXAMPLE_INPUT)

        assert isinstance(parsed, ClipInput)
        assert len(parsed.segments) == 6
        assert parsed.segments[0] == Segment(-9.0, -6.0, -3.0, 6.0)
        assert parsed.segments[5] == Segment(6.0, -8.0, 12.0, 8.0)
        assert parsed.window == Rectangle(-10.0, -10.0, 10.0, 10.0)

    def test_window_corners_normalized(self):
        parsed = parse_input("1\n0 0 1 1\n5 -2 -3 4\n")
        assert parsed.window == Rectangle(-3.0, -2.0, 5.0, 4.0)

    def test_blank_lines_and_whitespace_ignored(self):
        text = "\n  2  \n\n 0 0 1 1\n\t2 2 3 3  \n\n0 0 10 10\n\n"
        parsed = parse_input(text)
        assert parsed.segments == (Segment(0.0, 0.0, 1.0, 1.0), Segment(2.0, 2.0, 3.0, 3.0))

    def test_windows_line_endings(self):
        parsed = parse_input("1\r\n0 0 1 1\r\n0 0 2 2\r\n")
        assert len(parsed.segments) == 1

    def test_extra_tokens_ignored(self):
        parsed = parse_input("1\n0 0 1 1 99\n0 0 2 2 7\n")
        assert parsed.segments[0] == Segment(0.0, 0.0, 1.0, 1.0)
        assert parsed.window == Rectangle(0.0, 0.0, 2.0, 2.0)

    @pytest.mark.parametrize("text, message", [
        ("1\n1 2 3 4 junk\n0 0 1 1", "segment line 1: 'junk' is not a number"),
        ("1\n1 2 3 4\n0 0 1 1 junk", "window line: 'junk' is not a number"),
        ("1\n1 2 3 4 nan\n0 0 1 1", "segment line 1: 'nan' is not a finite number"),
    ])
    def test_non_numeric_extra_token_rejected(self, text, message):
        """Extra tokens are ignored only when they are numbers."""
        with pytest.raises(ParseError, match=message):
            parse_input(text)

    def test_zero_segments(self):
        parsed = parse_input("0\n-1 -1 1 1")
        assert parsed.segments == ()
        assert parsed.window == Rectangle(-1.0, -1.0, 1.0, 1.0)

    def test_decimal_and_exponent_numbers(self):
        parsed = parse_input("1\n0.5 -1.25 1e1 2E-1\n0 0 1 1")
        assert parsed.segments[0] == Segment(0.5, -1.25, 10.0, 0.2)

    def test_trailing_lines_warned(self, caplog):
        with caplog.at_level(logging.WARNING, logger="segment_clip"):
            parsed = parse_input("1\n0 0 1 1\n0 0 2 2\n7 7 7 7\n")
        assert len(parsed.segments) == 1
        assert "trailing" in caplog.text

    @pytest.mark.parametrize("text, message", [
        ("", "not enough lines"),
        ("3", "not enough lines"),
        ("abc\n0 0 1 1", "invalid segment count"),
        ("2.5\n0 0 1 1\n0 0 1 1\n0 0 1 1", "invalid segment count"),
        ("-1\n0 0 1 1", "non-negative"),
        ("3\n0 0 1 1\n-1 -1 1 1", "not enough data"),
        ("1\n0 0 1\n0 0 1 1", "segment line 1: expected 4 numbers"),
        ("1\n0 0 x 1\n0 0 1 1", "segment line 1: 'x' is not a number"),
        ("1\n0 0 1 1\n0 0 1", "window line: expected 4 numbers"),
        ("1\n0 0 1 1\n0 0 one 1", "window line"),
        ("1\n0 nan 1 1\n0 0 1 1", "not a finite number"),
        ("1\n0 0 inf 1\n0 0 1 1", "not a finite number"),
    ])
    def test_malformed_input_rejected(self, text, message):
        with pytest.raises(ParseError, match=message):
            parse_input(text)

    def test_parse_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_input("")


class TestLoadInput:
    """Tests for load_input()."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text(EXAMPLE_INPUT, encoding="utf-8")
        parsed = load_input(path)
        assert len(parsed.segments) == 6

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("0\n0 0 1 1", encoding="utf-8")
        assert load_input(str(path)).segments == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_input(tmp_path / "missing.txt")


class TestParsePolygon:
    """Tests for parse_polygon()."""

    def test_text_lines(self):
        polygon = parse_polygon("-5 -5\n5 -5\n\n5 5\n-5 5\n")
        assert isinstance(polygon, ConvexPolygon)
        assert polygon.vertices == (
            Point(-5.0, -5.0), Point(5.0, -5.0), Point(5.0, 5.0), Point(-5.0, 5.0)
        )

    def test_comma_tokens(self):
        polygon = parse_polygon(["0,0", "4,0", " 0,4 "])
        assert polygon.vertices == (Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 4.0))

    def test_comma_separated_lines(self):
        polygon = parse_polygon("0, 0\n4, 0\n0, 4")
        assert len(polygon) == 3

    def test_fewer_than_three_vertices_not_rejected(self):
        assert len(parse_polygon(["0,0", "1,1"])) == 2
        assert len(parse_polygon("")) == 0

    @pytest.mark.parametrize("tokens", [
        ["0,0", "1"],
        ["0,0", "a,b"],
        ["0,0", "1,2,3"],
        ["0,nan"],
    ])
    def test_bad_vertex(self, tokens):
        with pytest.raises(ParseError, match="polygon vertex"):
            parse_polygon(tokens)
