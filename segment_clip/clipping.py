"""
Line segment clipping against a rectangle (Cohen-Sutherland) and against a
convex polygon (Cyrus-Beck).
"""

import enum
import logging
from typing import Optional

import numpy as np

from segment_clip.debug import format_outcode, log_clipping_stage, log_result
from segment_clip.geometry import (
    ConvexPolygon,
    Rectangle,
    Segment,
    is_valid_polygon,
    outward_edge_normals,
)

logger = logging.getLogger(__name__)

PARALLEL_EPSILON = 1e-12


class Outcode(enum.IntFlag):
    """Cohen-Sutherland region code of a point relative to a rectangle."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def compute_outcode(x: float, y: float, rect: Rectangle) -> Outcode:
    """
    Classify a point against the four half-planes of a rectangle.

    LEFT/RIGHT and BOTTOM/TOP are mutually exclusive. A point on the
    boundary is INSIDE.
    """
    code = Outcode.INSIDE
    if x < rect.xmin:
        code |= Outcode.LEFT
    elif x > rect.xmax:
        code |= Outcode.RIGHT
    if y < rect.ymin:
        code |= Outcode.BOTTOM
    elif y > rect.ymax:
        code |= Outcode.TOP
    return code


def clip_rect(segment: Segment, rect: Rectangle) -> Optional[Segment]:
    """
    Clip a segment against an axis-aligned rectangle (Cohen-Sutherland).

    Outside endpoints are moved onto the rectangle boundary one bit at a
    time (priority TOP, BOTTOM, RIGHT, LEFT) until both outcodes are zero
    (accept) or share a bit (reject). When both endpoints are outside, the
    first endpoint is moved first.

    Parameters:
        segment: Segment to clip
        rect: Clipping window with normalized bounds

    Returns:
        The visible part of the segment within the closed rectangle, or
        None if no part is visible
    """
    x0, y0, x1, y1 = segment.x1, segment.y1, segment.x2, segment.y2
    outcode0 = compute_outcode(x0, y0, rect)
    outcode1 = compute_outcode(x1, y1, rect)

    while True:
        if not (outcode0 | outcode1):
            log_clipping_stage("cohen-sutherland", "accept", log=logger)
            clipped = Segment(x0, y0, x1, y1)
            log_result("cohen-sutherland", segment, clipped, log=logger)
            return clipped

        if outcode0 & outcode1:
            log_clipping_stage(
                "cohen-sutherland",
                "trivial reject",
                log=logger,
                outcode0=format_outcode(outcode0),
                outcode1=format_outcode(outcode1),
            )
            log_result("cohen-sutherland", segment, None, log=logger)
            return None

        outcode_out = outcode0 if outcode0 else outcode1

        # Divisors are never zero here: a TOP/BOTTOM bit on one endpoint with
        # y0 == y1 would put the same bit on both, which was rejected above.
        if outcode_out & Outcode.TOP:
            x = x0 + (x1 - x0) * (rect.ymax - y0) / (y1 - y0)
            y = rect.ymax
        elif outcode_out & Outcode.BOTTOM:
            x = x0 + (x1 - x0) * (rect.ymin - y0) / (y1 - y0)
            y = rect.ymin
        elif outcode_out & Outcode.RIGHT:
            y = y0 + (y1 - y0) * (rect.xmax - x0) / (x1 - x0)
            x = rect.xmax
        else:
            y = y0 + (y1 - y0) * (rect.xmin - x0) / (x1 - x0)
            x = rect.xmin

        if outcode_out == outcode0:
            x0, y0 = x, y
            outcode0 = compute_outcode(x0, y0, rect)
        else:
            x1, y1 = x, y
            outcode1 = compute_outcode(x1, y1, rect)

        log_clipping_stage(
            "cohen-sutherland",
            "moved endpoint",
            log=logger,
            boundary=format_outcode(outcode_out),
            x=x,
            y=y,
        )


def clip_convex(
    segment: Segment,
    polygon: ConvexPolygon,
    epsilon: float = PARALLEL_EPSILON
) -> Optional[Segment]:
    """
    Clip a segment against a convex polygon (Cyrus-Beck).

    The segment is treated as P(t) = P0 + t*d, d = P1 - P0, t in [0, 1].
    Each edge contributes a half-plane n . (P - PE) <= 0 where n is the
    edge's outward normal. Solving n . (P(t) - PE) = 0 gives
    t = -(n . (P0 - PE)) / (n . d). A negative denominator means the line
    enters the half-plane at t (raises t_enter); a positive one means it
    leaves (lowers t_leave).

    Either winding works because normals are oriented away from the vertex
    centroid. Convexity is assumed, not checked.

    Parameters:
        segment: Segment to clip
        polygon: Convex clipping window
        epsilon: Denominators with absolute value below this are treated as
                 parallel to the edge

    Returns:
        The visible part of the segment, or None if nothing is visible or
        the polygon has fewer than 3 vertices
    """
    vertices = polygon.as_array()
    if not is_valid_polygon(vertices):
        log_clipping_stage(
            "cyrus-beck", "degenerate window", log=logger, vertices=vertices.shape[0]
        )
        log_result("cyrus-beck", segment, None, log=logger)
        return None

    p0 = np.array([segment.x1, segment.y1], dtype=np.float64)
    d = np.array([segment.x2 - segment.x1, segment.y2 - segment.y1], dtype=np.float64)

    normals = outward_edge_normals(vertices)
    numerators = -np.einsum("ij,ij->i", normals, p0 - vertices)
    denominators = normals @ d

    t_enter = 0.0
    t_leave = 1.0

    for i in range(vertices.shape[0]):
        numerator = float(numerators[i])
        denominator = float(denominators[i])

        if abs(denominator) < epsilon:
            if numerator < 0.0:
                # Parallel and P0 lies outside this edge's half-plane
                log_clipping_stage("cyrus-beck", "parallel outside", log=logger, edge=i)
                log_result("cyrus-beck", segment, None, log=logger)
                return None
            continue

        t = numerator / denominator
        if denominator < 0.0:
            t_enter = max(t_enter, t)
        else:
            t_leave = min(t_leave, t)

        if t_enter > t_leave:
            log_clipping_stage(
                "cyrus-beck", "empty interval", log=logger, edge=i, t_enter=t_enter, t_leave=t_leave
            )
            log_result("cyrus-beck", segment, None, log=logger)
            return None

    start = p0 + d * t_enter
    end = p0 + d * t_leave
    clipped = Segment(float(start[0]), float(start[1]), float(end[0]), float(end[1]))
    log_clipping_stage(
        "cyrus-beck", "accept", log=logger, t_enter=t_enter, t_leave=t_leave
    )
    log_result("cyrus-beck", segment, clipped, log=logger)
    return clipped
