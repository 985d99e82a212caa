#!/usr/bin/env python3

import argparse
import os
import sys

from turning.errors import OffsetError
from turning.models import OffsetSettings
from turning.offsetter import TurningOffsetter
from turning.profile_composer import build_closing_lines, compose_closed_shape
from turning.profile_parser import parse_profile
from turning.utils.corner_detection import build_corner_guide, format_corner_guide, format_segment_pairs
from turning.utils.profile_format import format_profile
from turning.utils.validators import validate_compensation, validate_settings


def build_parser():
    """Command line options."""
    parser = argparse.ArgumentParser(
        description="Tool-nose radius compensation for lathe turning profiles"
    )
    parser.add_argument("profile_file", help="File with one LINE / ARC3_CW / ARC3_CCW record per line")
    parser.add_argument("--side", default="right", help="Compensation side: off, left or right")
    parser.add_argument("--nose-radius", type=float, default=0.8, help="Tool nose radius")
    parser.add_argument("--quadrant", type=int, default=3, help="Nose-center quadrant 1..9 (9 = no shift)")
    parser.add_argument("--tangent-tol", type=float, default=0.5, help="Tangent angle tolerance in degrees")
    parser.add_argument("--small-segment", type=float, default=0.05, help="Drop offset segments this short")
    parser.add_argument("--close-z", type=float, help="Close the offset profile at this Z")
    parser.add_argument("--guide", action="store_true", help="Print the corner guide only")
    parser.add_argument("--plot", metavar="PNG", help="Save a preview plot to this file")
    return parser


def main(argv=None):
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.profile_file):
        print(f"ERROR: File '{args.profile_file}' not found.")
        sys.exit(1)

    with open(args.profile_file, 'r') as f:
        text = f.read()

    settings = OffsetSettings(args.tangent_tol, args.small_segment)
    errors = validate_settings(settings)
    if errors:
        for error in errors:
            print(f"ERROR: {error}")
        sys.exit(1)

    try:
        compensation = validate_compensation(args.side, args.nose_radius, args.quadrant)
        segments = parse_profile(text)
    except OffsetError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if args.guide:
        guide = build_corner_guide(segments, compensation, settings)
        for line in format_segment_pairs(segments):
            print(line)
        print()
        for line in format_corner_guide(guide, compensation, settings):
            print(line)
        return

    result = TurningOffsetter(segments, compensation, settings).build()
    for line in result.trace:
        print(line)
    for warning in result.warnings:
        print(f"WARNING: {warning}")

    output = format_profile(result.segments)
    if args.close_z is not None and output:
        output = compose_closed_shape(output, build_closing_lines(output, args.close_z))

    print()
    print("=== OFFSET PROFILE ===")
    for line in output:
        print(line)

    if args.plot:
        from turning.visualizer import plot_offset_preview
        plot_offset_preview(segments, result.segments, output_file=args.plot)
        print(f"\nPlot saved to: {args.plot}")


if __name__ == "__main__":
    main()
