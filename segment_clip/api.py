"""
Public API for clipping segments against a rectangle or convex polygon window.
"""

from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Union

from segment_clip.clipping import clip_convex, clip_rect
from segment_clip.config import DEFAULT_CONFIG, ClipConfig
from segment_clip.geometry import ConvexPolygon, Rectangle, Segment

Window = Union[Rectangle, ConvexPolygon]
ClipMethod = Literal["cohen-sutherland", "cyrus-beck"]

_METHOD_TITLES = {
    "cohen-sutherland": "Cohen-Sutherland",
    "cyrus-beck": "Cyrus-Beck",
}


@dataclass(frozen=True)
class ClipResult:
    """
    Result of clipping one segment.

    Attributes:
        segment: The input segment
        clipped: Visible part of the segment, or None if nothing is visible
    """
    segment: Segment
    clipped: Optional[Segment]

    @property
    def visible(self) -> bool:
        return self.clipped is not None

    def __bool__(self) -> bool:
        """Returns True if some part of the segment is visible."""
        return self.visible


@dataclass
class ClipReport:
    """
    Results of clipping a batch of segments against one window.

    Attributes:
        method: Algorithm used for the window type
        results: One entry per input segment, in input order
    """
    method: ClipMethod
    results: List[ClipResult]

    @property
    def visible_count(self) -> int:
        return sum(1 for r in self.results if r.visible)

    def visible_segments(self) -> List[Segment]:
        """Clipped segments of the visible results, in input order."""
        return [r.clipped for r in self.results if r.clipped is not None]

    def summary(self) -> str:
        title = _METHOD_TITLES[self.method]
        return f"{title}: {self.visible_count} of {len(self.results)} segments visible"


def method_for(window: Window) -> ClipMethod:
    """Return the clipping algorithm used for a window type."""
    if isinstance(window, Rectangle):
        return "cohen-sutherland"
    if isinstance(window, ConvexPolygon):
        return "cyrus-beck"
    raise TypeError(
        f"window must be a Rectangle or ConvexPolygon, got {type(window).__name__}"
    )


def clip_segment(
    segment: Segment,
    window: Window,
    config: Optional[ClipConfig] = None
) -> Optional[Segment]:
    """
    Clip one segment, choosing the algorithm from the window type.

    Rectangles use Cohen-Sutherland, convex polygons use Cyrus-Beck.

    Raises:
        TypeError: If window is neither a Rectangle nor a ConvexPolygon
    """
    config = config or DEFAULT_CONFIG
    if method_for(window) == "cohen-sutherland":
        return clip_rect(segment, window)
    return clip_convex(segment, window, epsilon=config.parallel_epsilon)


def clip_segments(
    segments: Iterable[Segment],
    window: Window,
    config: Optional[ClipConfig] = None
) -> ClipReport:
    """
    Clip every segment against the same window.

    Parameters:
        segments: Segments to clip
        window: Rectangle or convex polygon
        config: Clipping settings; DEFAULT_CONFIG when omitted

    Returns:
        ClipReport with one result per segment

    Raises:
        TypeError: If window is neither a Rectangle nor a ConvexPolygon

    Example:
        >>> window = Rectangle(-10.0, -10.0, 10.0, 10.0)
        >>> report = clip_segments([Segment(-12.0, 0.0, -2.0, 0.0)], window)
        >>> report.results[0].clipped
        Segment(x1=-10.0, y1=0.0, x2=-2.0, y2=0.0)
    """
    method = method_for(window)
    results = [
        ClipResult(segment=s, clipped=clip_segment(s, window, config))
        for s in segments
    ]
    return ClipReport(method=method, results=results)
