#!/usr/bin/env python3
"""
Profile script for segment_clip to identify performance bottlenecks.
"""

import cProfile
import pstats
import io
import numpy as np
import time
from typing import List
from segment_clip.api import Window, clip_segments
from segment_clip.geometry import ConvexPolygon, Rectangle, Segment


def generate_convex_polygon(radius: float, n_vertices: int = 8) -> ConvexPolygon:
    """Generate a convex polygon with vertices on a circle around the origin."""
    angles = np.sort(np.random.uniform(0, 2 * np.pi, n_vertices))
    x = radius * np.cos(angles)
    y = radius * np.sin(angles)
    return ConvexPolygon.from_array(np.column_stack([x, y]))


def generate_segments(n_segments: int, extent: float) -> List[Segment]:
    """Generate random segments spread over [-extent, extent] in both axes."""
    coords = np.random.uniform(-extent, extent, size=(n_segments, 4))
    return [Segment(*map(float, row)) for row in coords]


def run_workload(window: Window, segments: List[Segment], n_iterations: int = 100) -> None:
    """Clip the same batch repeatedly."""
    for _ in range(n_iterations):
        clip_segments(segments, window)


def profile_workload(name: str, window: Window, segments: List[Segment]) -> None:
    print("\n" + "=" * 70)
    print(f"PROFILING {name.upper()}")
    print("=" * 70)

    profiler = cProfile.Profile()
    profiler.enable()
    run_workload(window, segments)
    profiler.disable()

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(20)
    print(s.getvalue())


def benchmark_batch_sizes() -> None:
    """Time both clippers over growing batch sizes."""
    print("\n" + "=" * 70)
    print("BENCHMARK: Batch size scaling")
    print("=" * 70)

    rect = Rectangle(-10.0, -10.0, 10.0, 10.0)
    polygon = generate_convex_polygon(10.0, n_vertices=8)

    for n in [100, 1000, 10000]:
        segments = generate_segments(n, extent=20.0)
        for label, window in (("rect", rect), ("convex", polygon)):
            start = time.perf_counter()
            report = clip_segments(segments, window)
            elapsed = time.perf_counter() - start
            print(
                f"  {label:>6} n={n:>6}: {elapsed * 1000:8.2f} ms "
                f"({elapsed / n * 1e6:.2f} us/segment), {report.visible_count} visible"
            )


if __name__ == "__main__":
    np.random.seed(42)  # For reproducibility

    segments = generate_segments(1000, extent=20.0)
    profile_workload("Cohen-Sutherland", Rectangle(-10.0, -10.0, 10.0, 10.0), segments)
    profile_workload("Cyrus-Beck", generate_convex_polygon(10.0, n_vertices=8), segments)
    benchmark_batch_sizes()
