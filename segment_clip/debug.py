"""
Debug logging helpers.

All package modules log under the ``segment_clip`` logger hierarchy. Nothing
is emitted until a handler is attached, either by the application or through
setup_debug_logging().
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from segment_clip.geometry import ConvexPolygon, Point, Rectangle, Segment

PACKAGE_LOGGER = "segment_clip"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

_debug_handler: Optional[logging.Handler] = None


def setup_debug_logging(level: int = logging.DEBUG, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Parameters:
        level: Logging level for the package logger and its handler
        fmt: Format string for the handler

    Returns:
        The package logger
    """
    global _debug_handler

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if _debug_handler is not None:
        pkg_logger.removeHandler(_debug_handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    _debug_handler = handler
    return pkg_logger


def disable_debug_logging() -> None:
    """Remove the handler installed by setup_debug_logging()."""
    global _debug_handler

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if _debug_handler is not None:
        pkg_logger.removeHandler(_debug_handler)
        _debug_handler = None
    pkg_logger.setLevel(logging.NOTSET)


def format_point(point: Point, precision: int = 3) -> str:
    return f"({point.x:.{precision}f}, {point.y:.{precision}f})"


def format_segment(segment: Optional[Segment], precision: int = 3) -> str:
    if segment is None:
        return "<none>"
    return (
        f"{format_point(segment.start, precision)} -> "
        f"{format_point(segment.end, precision)}"
    )


def format_polygon(polygon: ConvexPolygon, precision: int = 3, max_vertices: int = 8) -> str:
    """Format polygon vertices, eliding the middle of long vertex lists."""
    points = [format_point(p, precision) for p in polygon.vertices]
    if len(points) > max_vertices:
        head = points[: max_vertices // 2]
        tail = points[-(max_vertices // 2):]
        points = head + [f"... {len(polygon) - len(head) - len(tail)} more ..."] + tail
    return "[" + ", ".join(points) + "]"


def format_rectangle(rect: Rectangle, precision: int = 3) -> str:
    return (
        f"[{rect.xmin:.{precision}f}, {rect.xmax:.{precision}f}] x "
        f"[{rect.ymin:.{precision}f}, {rect.ymax:.{precision}f}]"
    )


def format_window(window: Union[Rectangle, ConvexPolygon], precision: int = 3) -> str:
    """Format either kind of clipping window."""
    if isinstance(window, Rectangle):
        return f"rectangle {format_rectangle(window, precision)}"
    return f"polygon {format_polygon(window, precision)}"


def format_outcode(code: int) -> str:
    """Render an outcode as its flag names, e.g. 'TOP|LEFT', or 'INSIDE'."""
    names = [name for bit, name in ((8, "TOP"), (4, "BOTTOM"), (2, "RIGHT"), (1, "LEFT")) if code & bit]
    return "|".join(names) if names else "INSIDE"


def log_clipping_stage(
    method: str, stage: str, *, log: Optional[logging.Logger] = None, **values: Any
) -> None:
    """Log one intermediate clipping step at DEBUG level on `log` (default: this module's logger)."""
    log = log or logger
    if not log.isEnabledFor(logging.DEBUG):
        return
    details = ", ".join(f"{key}={value}" for key, value in values.items())
    log.debug(f"[{method}] {stage}: {details}" if details else f"[{method}] {stage}")


def log_result(
    method: str,
    segment: Segment,
    clipped: Optional[Segment],
    log: Optional[logging.Logger] = None
) -> None:
    """Log the outcome of one clip call at DEBUG level."""
    log = log or logger
    if not log.isEnabledFor(logging.DEBUG):
        return
    outcome = "visible" if clipped is not None else "rejected"
    log.debug(
        f"[{method}] {format_segment(segment)} {outcome}: {format_segment(clipped)}"
    )
