"""Clipping example for the segment_clip package.

Clips the bundled six-segment example first against its rectangular window
and then against a convex pentagon given in clockwise order, prints both
reports and renders them side by side.

Run with::

    python examples/clip_example.py
"""

from __future__ import annotations

from pathlib import Path

from segment_clip import ConvexPolygon, EXAMPLE_INPUT, clip_segments, parse_input
from segment_clip.api import ClipReport
from segment_clip.debug import format_segment
from segment_clip.visualize import HAS_MATPLOTLIB, draw_clip_report

EXAMPLES_DIR = Path(__file__).resolve().parent
OUTPUT_DIR = EXAMPLES_DIR / "output"
OUTPUT_PATH = OUTPUT_DIR / "clip_example.png"

PENTAGON = ConvexPolygon([(0, 8), (7.5, 2.5), (4.5, -6.5), (-4.5, -6.5), (-7.5, 2.5)])


def summarise_report(report: ClipReport) -> None:
    """Print one line per segment followed by the summary."""

    print(report.summary())
    for i, result in enumerate(report.results, start=1):
        print(f"  {i}: {format_segment(result.segment)} => {format_segment(result.clipped)}")
    print()


def main() -> None:
    clip_input = parse_input(EXAMPLE_INPUT)

    rect_report = clip_segments(clip_input.segments, clip_input.window)
    summarise_report(rect_report)

    convex_report = clip_segments(clip_input.segments, PENTAGON)
    summarise_report(convex_report)

    if not HAS_MATPLOTLIB:
        print("matplotlib not installed; skipping visualization output.")
        return

    import matplotlib.pyplot as plt

    fig, (ax_rect, ax_convex) = plt.subplots(1, 2, figsize=(14, 7))
    draw_clip_report(rect_report, clip_input.window, ax=ax_rect)
    draw_clip_report(convex_report, PENTAGON, ax=ax_convex)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    fig.savefig(OUTPUT_PATH, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved visualization to {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
