"""
Visualization utilities for clipping runs.

Draws the coordinate grid and axes, the clipping window, the original
segments and their visible parts with matplotlib.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import numpy as np

from segment_clip.api import ClipReport, Window
from segment_clip.config import DEFAULT_CONFIG, ClipConfig
from segment_clip.geometry import ConvexPolygon, Rectangle, Segment, compute_bounding_box

# Try to import matplotlib, set flag if not available
try:
    import matplotlib.patches as mpatches
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

logger = logging.getLogger(__name__)

DEFAULT_VIEW = Rectangle(-10.0, -10.0, 10.0, 10.0)
MAX_GRID_LINES = 400

COLORS = {
    "axes": "#999999",
    "grid": "#e9eef8",
    "rect_fill": (0.0, 0.5, 0.0, 0.12),
    "rect_stroke": (0.0, 0.5, 0.0),
    "original": (200 / 255, 50 / 255, 50 / 255),
    "clipped": (0.0, 120 / 255, 1.0),
    "polygon": (160 / 255, 80 / 255, 200 / 255),
    "polygon_fill": (160 / 255, 80 / 255, 200 / 255, 0.06),
}


def _ensure_matplotlib() -> None:
    """Raise an error if matplotlib is not available."""
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for visualization functions. "
            "Install with: pip install segment-clip[viz]"
        )


def fit_view(
    segments: Iterable[Segment],
    window: Optional[Window] = None,
    config: Optional[ClipConfig] = None
) -> Rectangle:
    """
    Compute world bounds that show all segments and the window.

    Each axis is padded by max(view_min_padding, span * view_padding_ratio).

    Parameters:
        segments: Segments to include
        window: Optional rectangle or polygon to include
        config: Padding settings; DEFAULT_CONFIG when omitted

    Returns:
        View bounds; DEFAULT_VIEW when there is nothing to show
    """
    config = config or DEFAULT_CONFIG
    points = [s.as_array() for s in segments]
    if isinstance(window, Rectangle):
        points.append(window.to_polygon().as_array())
    elif isinstance(window, ConvexPolygon):
        points.append(window.as_array())

    all_points = np.concatenate(points, axis=0) if points else np.zeros((0, 2))
    if all_points.shape[0] == 0:
        return DEFAULT_VIEW

    min_point, max_point = compute_bounding_box(all_points)
    min_x, min_y = float(min_point[0]), float(min_point[1])
    max_x, max_y = float(max_point[0]), float(max_point[1])
    pad_x = max(config.view_min_padding, (max_x - min_x) * config.view_padding_ratio)
    pad_y = max(config.view_min_padding, (max_y - min_y) * config.view_padding_ratio)
    return Rectangle(min_x - pad_x, min_y - pad_y, max_x + pad_x, max_y + pad_y)


def draw_grid(ax: Any, view: Rectangle, step: float = 1.0) -> None:
    """Draw grid lines every `step` units and the coordinate axes."""
    _ensure_matplotlib()
    if max(view.width, view.height) / step > MAX_GRID_LINES:
        logger.debug(f"Skipping grid: step {step} is too fine for view {view}")
    else:
        for i in range(math.ceil(view.xmin / step), math.floor(view.xmax / step) + 1):
            x = i * step
            ax.plot([x, x], [view.ymin, view.ymax], color=COLORS["grid"], linewidth=1, zorder=0)
        for i in range(math.ceil(view.ymin / step), math.floor(view.ymax / step) + 1):
            y = i * step
            ax.plot([view.xmin, view.xmax], [y, y], color=COLORS["grid"], linewidth=1, zorder=0)

    if view.ymin <= 0.0 <= view.ymax:
        ax.plot([view.xmin, view.xmax], [0.0, 0.0], color=COLORS["axes"], linewidth=1.4, zorder=1)
    if view.xmin <= 0.0 <= view.xmax:
        ax.plot([0.0, 0.0], [view.ymin, view.ymax], color=COLORS["axes"], linewidth=1.4, zorder=1)


def draw_window(ax: Any, window: Window) -> None:
    """Draw a rectangular window, or a polygon with its vertices marked."""
    _ensure_matplotlib()
    if isinstance(window, Rectangle):
        patch = mpatches.Rectangle(
            (window.xmin, window.ymin), window.width, window.height,
            facecolor=COLORS["rect_fill"], edgecolor=COLORS["rect_stroke"],
            linewidth=2, zorder=2,
        )
        ax.add_patch(patch)
        return

    vertices = window.as_array()
    if vertices.shape[0] == 0:
        return
    if vertices.shape[0] >= 3:
        patch = mpatches.Polygon(
            vertices, closed=True,
            facecolor=COLORS["polygon_fill"], edgecolor=COLORS["polygon"],
            linewidth=2, zorder=2,
        )
        ax.add_patch(patch)
    else:
        ax.plot(vertices[:, 0], vertices[:, 1], color=COLORS["polygon"], linewidth=2, zorder=2)
    ax.scatter(vertices[:, 0], vertices[:, 1], s=16, color=COLORS["polygon"], zorder=3)


def draw_segments(
    ax: Any,
    segments: Iterable[Segment],
    color: Any,
    linewidth: float = 2.0,
    zorder: int = 4,
    label: Optional[str] = None
) -> None:
    _ensure_matplotlib()
    for i, s in enumerate(segments):
        ax.plot(
            [s.x1, s.x2], [s.y1, s.y2],
            color=color, linewidth=linewidth, zorder=zorder,
            label=label if i == 0 else None,
        )


def draw_clip_report(
    report: ClipReport,
    window: Window,
    ax: Optional[Any] = None,
    view: Optional[Rectangle] = None,
    config: Optional[ClipConfig] = None
) -> Any:
    """
    Draw a complete clipping run.

    Layers, bottom to top: grid and axes, window, original segments, visible
    parts.

    Parameters:
        report: Result of clip_segments()
        window: The window the report was computed against
        ax: Axes to draw on; a new figure is created when omitted
        view: World bounds to show; fitted to the data when omitted
        config: View settings; DEFAULT_CONFIG when omitted

    Returns:
        The axes drawn on
    """
    _ensure_matplotlib()
    config = config or DEFAULT_CONFIG
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    originals = [r.segment for r in report.results]
    view = view or fit_view(originals, window, config)

    draw_grid(ax, view, step=config.grid_step)
    draw_window(ax, window)
    draw_segments(ax, originals, COLORS["original"], linewidth=2, zorder=4, label="original")
    draw_segments(
        ax, report.visible_segments(), COLORS["clipped"], linewidth=3, zorder=5, label="visible"
    )

    ax.set_xlim(view.xmin, view.xmax)
    ax.set_ylim(view.ymin, view.ymax)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(report.summary())
    return ax


def save_clip_figure(
    report: ClipReport,
    window: Window,
    path: Union[str, Path],
    dpi: int = 150,
    config: Optional[ClipConfig] = None
) -> Path:
    """Render a clipping run to an image file and return its path."""
    _ensure_matplotlib()
    path = Path(path)
    fig, ax = plt.subplots(figsize=(8, 8))
    try:
        draw_clip_report(report, window, ax=ax, config=config)
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info(f"Saved clipping figure to {path}")
    return path
