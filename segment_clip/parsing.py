"""
Textual ingestion of clipping jobs.

Input format::

    n
    x1 y1 x2 y2      (n lines, one segment each)
    ...
    x1 y1 x2 y2      (two opposite corners of the rectangular window)

Blank lines are ignored. Malformed input is rejected as a whole with a
ParseError; nothing partially parsed is returned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from segment_clip.config import ValidationError
from segment_clip.geometry import ConvexPolygon, Point, Rectangle, Segment

logger = logging.getLogger(__name__)

EXAMPLE_INPUT = "\n".join([
    "6",
    "-9 -6 -3 6",
    "-8 8 8 -6",
    "-12 0 -2 0",
    "0 -9 0 9",
    "-3 -3 3 3",
    "6 -8 12 8",
    "-10 -10 10 10",
])


class ParseError(ValidationError):
    """Raised when textual input cannot be parsed."""

    pass


@dataclass(frozen=True)
class ClipInput:
    """Segments and rectangular window read from text.

    Attributes:
        segments: Segments in input order
        window: Rectangle with normalized bounds
    """

    segments: tuple[Segment, ...]
    window: Rectangle


def _parse_numbers(line: str, count: int, what: str) -> List[float]:
    """Convert every token on the line and return the first `count` values."""
    tokens = line.split()
    if len(tokens) < count:
        raise ParseError(f"{what}: expected {count} numbers, got {len(tokens)}")
    values: List[float] = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            raise ParseError(f"{what}: {token!r} is not a number") from None
        if not math.isfinite(value):
            raise ParseError(f"{what}: {token!r} is not a finite number")
        values.append(value)
    return values[:count]


def parse_input(text: str) -> ClipInput:
    """
    Parse segment count, segments and rectangle corners.

    Parameters:
        text: Input in the module-level format

    Returns:
        ClipInput with the rectangle normalized to xmin <= xmax, ymin <= ymax

    Raises:
        ParseError: If the count is missing or invalid, a line is not
                    numeric, or there are fewer lines than the count requires
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        raise ParseError("not enough lines: expected a count, segments and a window")

    try:
        n = int(lines[0])
    except ValueError:
        raise ParseError(f"invalid segment count {lines[0]!r}") from None
    if n < 0:
        raise ParseError(f"segment count must be non-negative, got {n}")

    if len(lines) < n + 2:
        raise ParseError(
            f"not enough data: expected {n} segment lines and a window line, "
            f"got {len(lines) - 1} lines after the count"
        )

    segments = []
    for i in range(n):
        x1, y1, x2, y2 = _parse_numbers(lines[1 + i], 4, f"segment line {i + 1}")
        segments.append(Segment(x1, y1, x2, y2))

    corners = _parse_numbers(lines[1 + n], 4, "window line")
    window = Rectangle.from_corners(*corners)

    if len(lines) > n + 2:
        logger.warning(f"Ignoring {len(lines) - n - 2} trailing line(s) after the window")

    logger.debug(f"Parsed {len(segments)} segments, window {window}")
    return ClipInput(segments=tuple(segments), window=window)


def load_input(path: Union[str, Path]) -> ClipInput:
    """Read and parse an input file."""
    path = Path(path)
    logger.info(f"Loading clipping input from {path}")
    return parse_input(path.read_text(encoding="utf-8"))


def parse_polygon(source: Union[str, Sequence[str]]) -> ConvexPolygon:
    """
    Parse clip polygon vertices.

    Accepts either text with one ``x y`` (or ``x,y``) pair per line, or a
    sequence of ``x,y`` tokens as given on a command line. Convexity and
    vertex count are not checked.

    Raises:
        ParseError: If a vertex is not a pair of finite numbers
    """
    if isinstance(source, str):
        items = [line.strip() for line in source.splitlines() if line.strip()]
    else:
        items = [token.strip() for token in source if token.strip()]

    vertices: List[Point] = []
    for i, item in enumerate(items):
        x, y = _parse_numbers(item.replace(",", " "), 2, f"polygon vertex {i + 1}")
        if len(item.replace(",", " ").split()) > 2:
            raise ParseError(f"polygon vertex {i + 1}: expected 2 numbers, got {item!r}")
        vertices.append(Point(x, y))
    return ConvexPolygon(tuple(vertices))
