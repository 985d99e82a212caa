"""
SVG Arc Calculation Module

Converts profile arcs to SVG arc parameters.

Profile Arc Definition:
    - Start point p1, end point p2
    - Center point
    - Rotational sense (clockwise flag)

SVG Arc Definition (what SVG needs):
    A rx ry x-rotation large-arc-flag sweep-flag x y

Coordinate Systems:
    - Profiles are drawn the way a lathe drawing is: Z to the right, X up.
    - SVG is Y-down, so svg_x follows Z and svg_y = x_max - x.

An arc that is clockwise in the drawing frame is also clockwise on screen
after the X flip, and SVG draws on-screen clockwise arcs with sweep=1.
"""

import math
from typing import Tuple

from ..models import ArcSegment, Point
from .arc_utils import directed_sweep


def calculate_arc_angular_span(arc: ArcSegment) -> float:
    """
    Calculate the angular span of an arc in degrees.

    Returns:
        Directed span in degrees (0-360); coincident endpoints count as a
        full circle
    """
    span = math.degrees(directed_sweep(arc.p1, arc.p2, arc.center, arc.clockwise))
    if span <= 0:
        span += 360
    return span


def calculate_svg_arc_flags(arc: ArcSegment) -> Tuple[int, int]:
    """
    Calculate SVG arc flags for a profile arc.

    Returns:
        Tuple of (large_arc_flag, sweep_flag) for SVG arc command
    """
    sweep_flag = 1 if arc.clockwise else 0

    # large_arc_flag: 1 if arc > 180°, 0 if arc <= 180°
    large_arc_flag = 1 if calculate_arc_angular_span(arc) > 180 else 0

    return large_arc_flag, sweep_flag


def lathe_to_svg_coords(
    point: Point,
    z_min: float,
    x_max: float,
    scale: float = 1.0,
    padding: float = 0.0
) -> Tuple[float, float]:
    """
    Convert profile coordinates to SVG coordinates.

    Args:
        point: Profile point (x radial, z axial)
        z_min: Smallest Z in view (maps to the left edge)
        x_max: Largest X in view (maps to the top edge)
        scale: Pixels per unit
        padding: Padding to add to the coordinates

    Returns:
        Tuple of (svg_x, svg_y)
    """
    svg_x = padding + (point.z - z_min) * scale
    svg_y = padding + (x_max - point.x) * scale
    return svg_x, svg_y


def generate_svg_arc_command(
    arc: ArcSegment,
    z_min: float,
    x_max: float,
    scale: float = 1.0,
    padding: float = 0.0
) -> str:
    """
    Generate a complete SVG arc path command for a profile arc.

    Returns:
        SVG arc command string (e.g., "A 25.0000 25.0000 0 0 1 100.5000 200.3000")
    """
    svg_end_x, svg_end_y = lathe_to_svg_coords(arc.p2, z_min, x_max, scale, padding)
    radius = arc.radius * scale

    large_arc_flag, sweep_flag = calculate_svg_arc_flags(arc)

    return f"A {radius:.4f} {radius:.4f} 0 {large_arc_flag} {sweep_flag} {svg_end_x:.4f} {svg_end_y:.4f}"
