"""
Tests for debug logging helpers.
"""

import logging

import pytest

from segment_clip.clipping import Outcode, clip_convex, clip_rect
from segment_clip.debug import (
    PACKAGE_LOGGER,
    disable_debug_logging,
    format_outcode,
    format_point,
    format_polygon,
    format_rectangle,
    format_segment,
    log_clipping_stage,
    setup_debug_logging,
)
from segment_clip.geometry import ConvexPolygon, Point, Rectangle, Segment


WINDOW = Rectangle(-10.0, -10.0, 10.0, 10.0)
SQUARE = ConvexPolygon([(-5, -5), (5, -5), (5, 5), (-5, 5)])


class TestFormatting:
    """Tests for format_* helpers."""

    def test_format_point(self):
        assert format_point(Point(1.0, -2.5)) == "(1.000, -2.500)"
        assert format_point(Point(1.0, -2.5), precision=1) == "(1.0, -2.5)"

    def test_format_segment(self):
        assert format_segment(Segment(0.0, 1.0, 2.0, 3.0)) == "(0.000, 1.000) -> (2.000, 3.000)"

    def test_format_segment_none(self):
        assert format_segment(None) == "<none>"

    def test_format_rectangle(self):
        assert format_rectangle(WINDOW, precision=0) == "[-10, 10] x [-10, 10]"

    def test_format_polygon(self):
        text = format_polygon(ConvexPolygon([(0, 0), (1, 0), (0, 1)]), precision=0)
        assert text == "[(0, 0), (1, 0), (0, 1)]"

    def test_format_polygon_elides_long_lists(self):
        polygon = ConvexPolygon([(i, 0) for i in range(20)])
        text = format_polygon(polygon, precision=0, max_vertices=4)
        assert text == "[(0, 0), (1, 0), ... 16 more ..., (18, 0), (19, 0)]"

    @pytest.mark.parametrize("code, expected", [
        (Outcode.INSIDE, "INSIDE"),
        (Outcode.LEFT, "LEFT"),
        (Outcode.TOP | Outcode.LEFT, "TOP|LEFT"),
        (Outcode.BOTTOM | Outcode.RIGHT, "BOTTOM|RIGHT"),
    ])
    def test_format_outcode(self, code, expected):
        assert format_outcode(code) == expected


class TestClippingLogs:
    """The clippers report their decisions at DEBUG level."""

    def test_trivial_reject_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert clip_rect(Segment(11.0, -5.0, 15.0, 5.0), WINDOW) is None
        assert "[cohen-sutherland] trivial reject" in caplog.text
        assert "outcode0=RIGHT" in caplog.text

    def test_accept_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            clip_rect(Segment(-12.0, 0.0, -2.0, 0.0), WINDOW)
        assert "moved endpoint: boundary=LEFT" in caplog.text
        assert "[cohen-sutherland] accept" in caplog.text

    def test_parallel_reject_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert clip_convex(Segment(-20.0, 7.0, 20.0, 7.0), SQUARE) is None
        assert "[cyrus-beck] parallel outside" in caplog.text

    def test_empty_interval_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert clip_convex(Segment(6.0, -20.0, 20.0, 6.0), SQUARE) is None
        assert "[cyrus-beck] empty interval" in caplog.text

    def test_degenerate_window_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            clip_convex(Segment(0.0, 0.0, 1.0, 1.0), ConvexPolygon([(0, 0), (1, 1)]))
        assert "degenerate window: vertices=2" in caplog.text

    def test_records_use_clipping_module_logger(self, caplog):
        """DEBUG on segment_clip.clipping alone is enough to see the trace."""
        with caplog.at_level(logging.DEBUG, logger="segment_clip.clipping"):
            assert clip_rect(Segment(11.0, -5.0, 15.0, 5.0), WINDOW) is None
            clip_convex(Segment(-20.0, 0.0, 20.0, 0.0), SQUARE)
        assert "[cohen-sutherland] trivial reject" in caplog.text
        assert "[cyrus-beck] accept" in caplog.text
        assert {r.name for r in caplog.records} == {"segment_clip.clipping"}

    def test_explicit_logger(self, caplog):
        custom = logging.getLogger("segment_clip.tests.custom")
        with caplog.at_level(logging.DEBUG, logger="segment_clip.tests.custom"):
            log_clipping_stage("cyrus-beck", "accept", log=custom, t_enter=0.0)
        assert [r.name for r in caplog.records] == ["segment_clip.tests.custom"]
        assert "[cyrus-beck] accept: t_enter=0.0" in caplog.text

    def test_nothing_logged_above_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger=PACKAGE_LOGGER):
            clip_rect(Segment(11.0, -5.0, 15.0, 5.0), WINDOW)
            log_clipping_stage("cohen-sutherland", "ignored")
        assert caplog.text == ""


class TestSetupDebugLogging:
    """Tests for setup_debug_logging() / disable_debug_logging()."""

    def test_setup_installs_single_handler(self):
        pkg_logger = logging.getLogger(PACKAGE_LOGGER)
        before = list(pkg_logger.handlers)
        try:
            setup_debug_logging()
            setup_debug_logging()
            added = [h for h in pkg_logger.handlers if h not in before]
            assert len(added) == 1
            assert pkg_logger.level == logging.DEBUG
        finally:
            disable_debug_logging()
        assert pkg_logger.handlers == before
        assert pkg_logger.level == logging.NOTSET

    def test_disable_without_setup(self):
        disable_debug_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET
