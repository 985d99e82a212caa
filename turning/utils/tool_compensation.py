"""Nose-radius compensation: raw segment offsets and intersection helpers."""
import math
from typing import List, Tuple, Optional

from ..models import (
    ArcSegment,
    LineSegment,
    OffsetSettings,
    Point,
    Segment,
    ToolCompensation,
)
from .arc_utils import distance, midpoint_on_arc, project_to_radius
from .profile_format import format_short


def calculate_line_normal(p1: Point, p2: Point) -> Optional[Tuple[float, float]]:
    """
    Calculate the unit normal to the left of the direction p1 -> p2.

    Args:
        p1: Start point
        p2: End point

    Returns:
        Unit normal (nx, nz) = (-uz, ux), or None for a zero-length line
    """
    dx = p2.x - p1.x
    dz = p2.z - p1.z

    length = math.sqrt(dx * dx + dz * dz)
    if length < 1e-12:
        return None

    return (-dz / length, dx / length)


def offset_line(segment: LineSegment, offset_dir: int, nose_radius: float) -> LineSegment:
    """
    Offset a line along its left normal.

    Positive offset_dir (LEFT) moves the line to the left of travel, negative
    (RIGHT) to the right. A zero-length line has no normal and is returned
    unmoved; cleanup drops it later.
    """
    normal = calculate_line_normal(segment.p1, segment.p2)
    if normal is None:
        return LineSegment(segment.p1, segment.p2, segment.source_index)

    off = offset_dir * nose_radius
    nx, nz = normal
    return LineSegment(
        Point(segment.p1.x + nx * off, segment.p1.z + nz * off),
        Point(segment.p2.x + nx * off, segment.p2.z + nz * off),
        segment.source_index
    )


def arc_radius_delta(clockwise: bool, offset_dir: int, nose_radius: float) -> float:
    """
    Radius change for an offset arc.

    LEFT grows counter-clockwise arcs and shrinks clockwise ones; RIGHT does
    the opposite.
    """
    return offset_dir * nose_radius * (-1.0 if clockwise else 1.0)


def offset_arc(
    segment: ArcSegment,
    offset_dir: int,
    nose_radius: float,
    collapse_radius: float
) -> Tuple[ArcSegment, Optional[float]]:
    """
    Re-radius an arc around its own center.

    Endpoints move radially to the new radius. The midpoint is walked along
    the directed sweep using the original midpoint (projected to the new
    radius) as hint.

    Args:
        segment: Source arc
        offset_dir: +1 LEFT, -1 RIGHT
        nose_radius: Tool nose radius
        collapse_radius: Radius used when the offset radius would be <= 0

    Returns:
        Tuple of (offset arc, unclamped radius if the arc collapsed else None)
    """
    center = segment.center
    new_radius = segment.radius + arc_radius_delta(segment.clockwise, offset_dir, nose_radius)

    collapsed = None
    if new_radius <= 1e-9:
        collapsed = new_radius
        new_radius = collapse_radius

    p1 = project_to_radius(segment.p1, center, new_radius)
    p2 = project_to_radius(segment.p2, center, new_radius)
    hint = project_to_radius(segment.pm, center, new_radius)
    pm = midpoint_on_arc(p1, p2, center, segment.clockwise, hint=hint)

    arc = ArcSegment(
        p1, pm, p2, center, segment.clockwise, segment.source_index,
        collapsed=collapsed is not None
    )
    return arc, collapsed


def offset_segments(
    segments: List[Segment],
    compensation: ToolCompensation,
    settings: OffsetSettings
) -> Tuple[List[Segment], List[str]]:
    """
    Build the raw offset copy of every segment (no junction handling).

    Args:
        segments: Source chain
        compensation: Side and nose radius
        settings: Tolerances (collapse radius)

    Returns:
        Tuple of (offset segments in source order, trace lines for clamped arcs)
    """
    offset_dir = compensation.offset_dir
    nose_radius = compensation.nose_radius
    raw = []
    trace = []

    for i, segment in enumerate(segments):
        if isinstance(segment, ArcSegment):
            arc, collapsed = offset_arc(segment, offset_dir, nose_radius, settings.collapse_radius)
            if collapsed is not None:
                trace.append(
                    f"PASS A: Arc {i:02d} rNew={format_short(collapsed)} clamped to "
                    f"{format_short(settings.collapse_radius)} (will be removed by SmallSegment)"
                )
            raw.append(arc)
        else:
            raw.append(offset_line(segment, offset_dir, nose_radius))

    return raw, trace


def intersect_line_line(a1: Point, a2: Point, b1: Point, b2: Point) -> Optional[Point]:
    """
    Intersection of two infinite lines through (a1, a2) and (b1, b2).

    Returns:
        Intersection point, or None for parallel lines
    """
    x1, z1 = a1.x, a1.z
    x2, z2 = a2.x, a2.z
    x3, z3 = b1.x, b1.z
    x4, z4 = b2.x, b2.z

    den = (x1 - x2) * (z3 - z4) - (z1 - z2) * (x3 - x4)
    if abs(den) < 1e-12:
        return None

    d1 = x1 * z2 - z1 * x2
    d2 = x3 * z4 - z3 * x4
    px = (d1 * (x3 - x4) - (x1 - x2) * d2) / den
    pz = (d1 * (z3 - z4) - (z1 - z2) * d2) / den
    return Point(px, pz)


def intersect_line_circle(p1: Point, p2: Point, center: Point, radius: float) -> List[Point]:
    """
    Intersections of the infinite line through p1, p2 with a circle.

    Solves |p1 + t*(p2 - p1) - center| = radius for t.

    Returns:
        0, 1 (tangent) or 2 points
    """
    dx = p2.x - p1.x
    dz = p2.z - p1.z
    fx = p1.x - center.x
    fz = p1.z - center.z

    a = dx * dx + dz * dz
    if a < 1e-12:
        return []

    b = 2 * (fx * dx + fz * dz)
    c = fx * fx + fz * fz - radius * radius

    disc = b * b - 4 * a * c
    if disc < -1e-12:
        return []
    if disc < 0:
        disc = 0.0

    s = math.sqrt(disc)
    t1 = (-b - s) / (2 * a)
    t2 = (-b + s) / (2 * a)
    first = Point(p1.x + t1 * dx, p1.z + t1 * dz)

    if disc < 1e-12:
        return [first]
    return [first, Point(p1.x + t2 * dx, p1.z + t2 * dz)]


def intersect_circle_circle(c1: Point, r1: float, c2: Point, r2: float) -> List[Point]:
    """
    Intersections of two circles.

    Returns:
        0, 1 (touching) or 2 points; concentric circles give none
    """
    d = distance(c1, c2)
    if d < 1e-12:
        return []
    if d > r1 + r2 + 1e-12:
        return []
    if d < abs(r1 - r2) - 1e-12:
        return []

    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    h2 = r1 * r1 - a * a
    if h2 < -1e-12:
        return []
    h = math.sqrt(max(h2, 0.0))

    x0 = c1.x + a * (c2.x - c1.x) / d
    z0 = c1.z + a * (c2.z - c1.z) / d
    rx = -(c2.z - c1.z) * (h / d)
    rz = (c2.x - c1.x) * (h / d)

    first = Point(x0 + rx, z0 + rz)
    if h < 1e-12:
        return [first]
    return [first, Point(x0 - rx, z0 - rz)]


def choose_closest(reference: Point, candidates: List[Point]) -> Point:
    """Candidate nearest to the reference point (first wins on ties)."""
    return min(candidates, key=lambda p: distance(reference, p))


def trim_intersection(seg_a: Segment, seg_b: Segment, vertex: Point) -> Optional[Point]:
    """
    Point where two offset segments should meet at an inner corner.

    Works on the infinite lines / full circles carrying the segments and
    keeps the solution closest to the original (un-offset) vertex. Results
    on a single circle are projected back onto that circle's radius.

    Args:
        seg_a: Offset segment ending at the corner
        seg_b: Offset segment starting at the corner
        vertex: Original corner point

    Returns:
        Intersection point, or None if the primitives do not meet
    """
    a_is_arc = isinstance(seg_a, ArcSegment)
    b_is_arc = isinstance(seg_b, ArcSegment)

    if not a_is_arc and not b_is_arc:
        return intersect_line_line(seg_a.p1, seg_a.p2, seg_b.p1, seg_b.p2)

    if not a_is_arc and b_is_arc:
        radius = distance(seg_b.p1, seg_b.center)
        hits = intersect_line_circle(seg_a.p1, seg_a.p2, seg_b.center, radius)
        if not hits:
            return None
        return project_to_radius(choose_closest(vertex, hits), seg_b.center, radius)

    if a_is_arc and not b_is_arc:
        radius = distance(seg_a.p2, seg_a.center)
        hits = intersect_line_circle(seg_b.p1, seg_b.p2, seg_a.center, radius)
        if not hits:
            return None
        return project_to_radius(choose_closest(vertex, hits), seg_a.center, radius)

    r1 = distance(seg_a.p2, seg_a.center)
    r2 = distance(seg_b.p1, seg_b.center)
    hits = intersect_circle_circle(seg_a.center, r1, seg_b.center, r2)
    if not hits:
        return None
    return choose_closest(vertex, hits)
