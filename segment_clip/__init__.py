"""
Segment Clipping
================

Clip 2-D line segments against an axis-aligned rectangle (Cohen-Sutherland)
or a convex polygon of either winding (Cyrus-Beck).
"""

from segment_clip.geometry import (
    Point,
    Segment,
    Rectangle,
    ConvexPolygon,
    is_valid_polygon,
    compute_bounding_box,
    outward_edge_normals,
)
from segment_clip.clipping import (
    Outcode,
    PARALLEL_EPSILON,
    compute_outcode,
    clip_rect,
    clip_convex,
)
from segment_clip.api import (
    ClipResult,
    ClipReport,
    clip_segment,
    clip_segments,
)
from segment_clip.config import ClipConfig, DEFAULT_CONFIG, ValidationError
from segment_clip.parsing import (
    ClipInput,
    ParseError,
    EXAMPLE_INPUT,
    parse_input,
    parse_polygon,
    load_input,
)
from segment_clip.debug import (
    format_point,
    format_segment,
    format_polygon,
    format_window,
    format_outcode,
    log_clipping_stage,
    log_result,
    setup_debug_logging,
    disable_debug_logging,
)

__all__ = [
    # Geometry
    'Point',
    'Segment',
    'Rectangle',
    'ConvexPolygon',
    'is_valid_polygon',
    'compute_bounding_box',
    'outward_edge_normals',
    # Clipping
    'Outcode',
    'PARALLEL_EPSILON',
    'compute_outcode',
    'clip_rect',
    'clip_convex',
    # Batch API
    'ClipResult',
    'ClipReport',
    'clip_segment',
    'clip_segments',
    # Configuration
    'ClipConfig',
    'DEFAULT_CONFIG',
    'ValidationError',
    # Ingestion
    'ClipInput',
    'ParseError',
    'EXAMPLE_INPUT',
    'parse_input',
    'parse_polygon',
    'load_input',
    # Debug utilities
    'format_point',
    'format_segment',
    'format_polygon',
    'format_window',
    'format_outcode',
    'log_clipping_stage',
    'log_result',
    'setup_debug_logging',
    'disable_debug_logging',
]
__version__ = '0.1.0'
