"""
Command line entry point.

Run with::

    segment-clip input.txt
    segment-clip --example --mode convex --polygon="-5,-5 5,-5 5,5 -5,5" --plot out.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from segment_clip.api import ClipReport, Window, clip_segments
from segment_clip.config import DEFAULT_CONFIG, ClipConfig, ValidationError
from segment_clip.debug import format_segment, format_window
from segment_clip.parsing import EXAMPLE_INPUT, ClipInput, load_input, parse_input, parse_polygon

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="segment-clip",
        description="Clip line segments against a rectangle (Cohen-Sutherland) "
                    "or a convex polygon (Cyrus-Beck)",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input file: a count n, n lines 'x1 y1 x2 y2', then the window "
             "corners 'x1 y1 x2 y2'. Use '-' for stdin",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Use the built-in six-segment example instead of an input file",
    )
    parser.add_argument(
        "--mode",
        choices=("rect", "convex"),
        default="rect",
        help="Clip against the input rectangle or against --polygon (default: rect)",
    )
    polygon = parser.add_mutually_exclusive_group()
    polygon.add_argument(
        "--polygon",
        metavar="\"X,Y X,Y ...\"",
        help="Convex clip polygon vertices in either winding order, as one "
             "quoted argument; write --polygon=\"-5,-5 ...\" when the first "
             "coordinate is negative",
    )
    polygon.add_argument(
        "--polygon-file",
        type=Path,
        help="Read convex clip polygon vertices from a file, one 'x y' per line",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=DEFAULT_CONFIG.parallel_epsilon,
        help="Parallel-edge tolerance for Cyrus-Beck (default: %(default)s)",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        help="Save a rendering of the clipping run to this image file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _read_input(args: argparse.Namespace) -> ClipInput:
    if args.example:
        return parse_input(EXAMPLE_INPUT)
    if args.input is None:
        raise ValidationError("an input file or --example is required")
    if args.input == "-":
        return parse_input(sys.stdin.read())
    return load_input(args.input)


def _select_window(args: argparse.Namespace, clip_input: ClipInput) -> Window:
    if args.mode == "rect":
        return clip_input.window
    if args.polygon_file is not None:
        polygon = parse_polygon(args.polygon_file.read_text(encoding="utf-8"))
    elif args.polygon:
        polygon = parse_polygon(args.polygon.replace(";", " ").split())
    else:
        raise ValidationError("--mode convex requires --polygon or --polygon-file")
    if len(polygon) < 3:
        logger.warning(
            f"Polygon has {len(polygon)} vertices; at least 3 are needed, nothing will be visible"
        )
    return polygon


def print_report(report: ClipReport) -> None:
    for i, result in enumerate(report.results, start=1):
        print(f"{i}: {format_segment(result.segment)} => {format_segment(result.clipped)}")
    print(report.summary())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = ClipConfig(parallel_epsilon=args.epsilon)
        clip_input = _read_input(args)
        window = _select_window(args, clip_input)
    except (ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Loaded {len(clip_input.segments)} segments, window {format_window(window)}")
    report = clip_segments(clip_input.segments, window, config)
    print_report(report)

    if args.plot is not None:
        from segment_clip.visualize import save_clip_figure

        try:
            save_clip_figure(report, window, args.plot, config=config)
        except (ImportError, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    return 0
