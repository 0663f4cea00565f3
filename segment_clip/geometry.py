"""
Geometry value types and polygon helpers shared by both clippers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

PointLike = Union["Point", Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Point:
    """A point in world coordinates."""

    x: float
    y: float

    def as_array(self) -> NDArray[np.float64]:
        """Return the point as a (2,) float64 array."""
        return np.array([self.x, self.y], dtype=np.float64)


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"point must have exactly 2 coordinates, got {len(value)}")
    return Point(float(value[0]), float(value[1]))


@dataclass(frozen=True)
class Segment:
    """
    Line segment with ordered endpoints.

    The order only matters for the parametric form used by Cyrus-Beck:
    t=0 is (x1, y1) and t=1 is (x2, y2).
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_points(cls, start: PointLike, end: PointLike) -> Segment:
        p0 = _to_point(start)
        p1 = _to_point(end)
        return cls(p0.x, p0.y, p1.x, p1.y)

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)

    def reversed(self) -> Segment:
        """Return the same segment with its endpoints swapped."""
        return Segment(self.x2, self.y2, self.x1, self.y1)

    def as_array(self) -> NDArray[np.float64]:
        """Return endpoints as a (2, 2) float64 array, one row per endpoint."""
        return np.array([[self.x1, self.y1], [self.x2, self.y2]], dtype=np.float64)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned clipping window.

    Bounds must already be normalized (xmin <= xmax, ymin <= ymax); use
    from_corners() to build one from two arbitrary opposite corners.

    Raises:
        ValueError: If the bounds are inverted
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        if self.xmin > self.xmax:
            raise ValueError(f"xmin must be <= xmax, got {self.xmin} > {self.xmax}")
        if self.ymin > self.ymax:
            raise ValueError(f"ymin must be <= ymax, got {self.ymin} > {self.ymax}")

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> Rectangle:
        """Build a rectangle from two opposite corners given in any order."""
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def contains(self, point: PointLike) -> bool:
        """True if the point lies inside or on the boundary."""
        p = _to_point(point)
        return self.xmin <= p.x <= self.xmax and self.ymin <= p.y <= self.ymax

    def to_polygon(self, clockwise: bool = False) -> ConvexPolygon:
        """Return the rectangle as a 4-vertex polygon, starting at (xmin, ymin)."""
        vertices = [
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        ]
        if clockwise:
            vertices = [vertices[0]] + vertices[:0:-1]
        return ConvexPolygon(vertices)


@dataclass(frozen=True)
class ConvexPolygon:
    """
    Clipping polygon given as an ordered vertex loop.

    Either winding is accepted. Neither convexity nor the vertex count is
    checked here: a polygon with fewer than 3 vertices is a degenerate window
    that clips every segment away.

    Attributes:
        vertices: Polygon vertices in order; the last connects back to the first
    """

    vertices: Tuple[Point, ...]

    def __post_init__(self) -> None:
        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "vertices", tuple(_to_point(v) for v in self.vertices))

    @classmethod
    def from_array(cls, vertices: NDArray[np.floating]) -> ConvexPolygon:
        """Build a polygon from an (N, 2) array."""
        arr = np.asarray(vertices, dtype=np.float64)
        if arr.size == 0:
            return cls(())
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"vertices must have shape (N, 2), got {arr.shape}")
        return cls(tuple(Point(float(x), float(y)) for x, y in arr))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def as_array(self) -> NDArray[np.float64]:
        """Return vertices as an (N, 2) float64 array."""
        if not self.vertices:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([[p.x, p.y] for p in self.vertices], dtype=np.float64)

    def centroid(self) -> Point:
        """Arithmetic mean of the vertices."""
        c = polygon_centroid(self.as_array())
        return Point(float(c[0]), float(c[1]))

    def signed_area(self) -> float:
        """Shoelace area, positive for counter-clockwise winding."""
        return polygon_signed_area(self.as_array())

    @property
    def is_clockwise(self) -> bool:
        return self.signed_area() < 0.0

    def rotated(self, k: int) -> ConvexPolygon:
        """Return the same loop starting at vertex index k."""
        if not self.vertices:
            return self
        k %= len(self.vertices)
        return ConvexPolygon(self.vertices[k:] + self.vertices[:k])

    def reversed(self) -> ConvexPolygon:
        """Return the same loop with opposite winding."""
        return ConvexPolygon(self.vertices[::-1])


def is_valid_polygon(vertices: NDArray[np.floating]) -> bool:
    """
    Check if polygon has sufficient vertices to be valid.

    Parameters:
        vertices: Polygon vertices (N, 2)

    Returns:
        True if polygon has at least 3 vertices
    """
    return bool(vertices.shape[0] >= 3)


def compute_bounding_box(
    vertices: NDArray[np.floating]
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Compute axis-aligned bounding box for a point set.

    Parameters:
        vertices: Points (N, 2)

    Returns:
        Tuple of (min_point, max_point), each shape (2,)
    """
    if vertices.shape[0] == 0:
        raise ValueError("polygon must contain at least one vertex")
    min_point = np.min(vertices, axis=0).astype(np.float64)
    max_point = np.max(vertices, axis=0).astype(np.float64)
    return min_point, max_point


def polygon_centroid(vertices: NDArray[np.floating]) -> NDArray[np.float64]:
    """Arithmetic mean of the vertices, shape (2,)."""
    if vertices.shape[0] == 0:
        raise ValueError("polygon must contain at least one vertex")
    return np.mean(vertices, axis=0, dtype=np.float64)


def polygon_signed_area(vertices: NDArray[np.floating]) -> float:
    """Signed shoelace area; positive for CCW, negative for CW, 0 if < 3 vertices."""
    if vertices.shape[0] < 3:
        return 0.0
    x = vertices[:, 0]
    y = vertices[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def outward_edge_normals(vertices: NDArray[np.floating]) -> NDArray[np.float64]:
    """
    Compute one outward-pointing normal per polygon edge.

    Edge i runs from vertex i to vertex (i + 1) % N. The raw perpendicular of
    edge vector (ex, ey) is (ey, -ex); it is flipped whenever the centroid lies
    on the side it points to, so the result does not depend on winding.
    Normals are not normalized.

    Parameters:
        vertices: Polygon vertices (N, 2), N >= 1

    Returns:
        Normals (N, 2); a zero-length edge yields a zero normal
    """
    verts = np.asarray(vertices, dtype=np.float64)
    nxt = np.roll(verts, -1, axis=0)
    edges = nxt - verts
    normals = np.column_stack((edges[:, 1], -edges[:, 0]))

    midpoints = 0.5 * (verts + nxt)
    to_centroid = polygon_centroid(verts) - midpoints
    facing_in = np.einsum("ij,ij->i", to_centroid, normals) > 0.0
    normals[facing_in] *= -1.0
    return normals
