"""Arc angle, sweep and midpoint utilities."""
import math
from dataclasses import replace
from typing import Optional

from ..models import Point, LineSegment, ArcSegment, Segment

TWO_PI = 2.0 * math.pi


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.z - a.z)


def angle_at(point: Point, center: Point) -> float:
    """
    Angle of a point around a center, in radians.

    Measured from the +Z axis towards +X, so decreasing angles are
    clockwise travel in the lathe drawing frame.

    Args:
        point: Point on (or near) the circle
        center: Circle center

    Returns:
        Angle in radians (-pi, pi]
    """
    return math.atan2(point.x - center.x, point.z - center.z)


def mod_2pi(angle: float) -> float:
    """Normalize an angle to [0, 2*pi)."""
    a = math.fmod(angle, TWO_PI)
    if a < 0:
        a += TWO_PI
    if a >= TWO_PI:
        a -= TWO_PI
    return a


def point_at_angle(center: Point, radius: float, angle: float) -> Point:
    """Point at the given angle (see angle_at) and radius around center."""
    return Point(center.x + radius * math.sin(angle), center.z + radius * math.cos(angle))


def project_to_radius(point: Point, center: Point, radius: float) -> Point:
    """
    Move a point radially so it lies at the given distance from center.

    A point sitting on the center has no direction and is returned unchanged.
    """
    vx = point.x - center.x
    vz = point.z - center.z
    length = math.hypot(vx, vz)
    if length < 1e-12:
        return point
    return Point(center.x + vx / length * radius, center.z + vz / length * radius)


def directed_sweep(p1: Point, p2: Point, center: Point, clockwise: bool) -> float:
    """
    Angular travel from p1 to p2 around center in the given sense.

    Returns:
        Sweep in radians, [0, 2*pi)
    """
    a1 = angle_at(p1, center)
    a2 = angle_at(p2, center)
    if clockwise:
        return mod_2pi(a1 - a2)
    return mod_2pi(a2 - a1)


def is_angle_on_arc(
    start_angle: float,
    end_angle: float,
    angle: float,
    clockwise: bool,
    tolerance: float = 1e-12
) -> bool:
    """Check whether an angle lies on the directed arc start -> end (inclusive)."""
    if clockwise:
        sweep = mod_2pi(start_angle - end_angle)
        along = mod_2pi(start_angle - angle)
    else:
        sweep = mod_2pi(end_angle - start_angle)
        along = mod_2pi(angle - start_angle)
    return along <= sweep + tolerance


def midpoint_on_arc(
    p1: Point,
    p2: Point,
    center: Point,
    clockwise: bool,
    prefer_minor: bool = False,
    hint: Optional[Point] = None
) -> Point:
    """
    Midpoint of an arc found by walking half of its directed sweep.

    Averaging the endpoint angles lands on the wrong side of the circle when
    the arc crosses the angle wrap or spans more than 180 degrees, so the
    midpoint is always walked from the start angle.

    Args:
        p1: Arc start point (its distance from center sets the radius)
        p2: Arc end point
        center: Arc center
        clockwise: Requested rotational sense
        prefer_minor: Without a hint, walk whichever sweep is shorter
        hint: Point known to lie on the intended arc; the sweep containing it
              wins. If both or neither sweep contains it, the requested sense
              is used.

    Returns:
        Point halfway along the arc
    """
    radius = distance(p1, center)
    if radius < 1e-12:
        return p1

    a1 = angle_at(p1, center)
    a2 = angle_at(p2, center)
    sweep_ccw = mod_2pi(a2 - a1)
    sweep_cw = mod_2pi(a1 - a2)

    use_cw = clockwise
    if hint is None:
        if prefer_minor:
            use_cw = sweep_cw < sweep_ccw
    else:
        ah = angle_at(hint, center)
        on_cw = is_angle_on_arc(a1, a2, ah, clockwise=True)
        on_ccw = is_angle_on_arc(a1, a2, ah, clockwise=False)
        if on_cw and not on_ccw:
            use_cw = True
        elif on_ccw and not on_cw:
            use_cw = False

    if use_cw:
        mid_angle = a1 - sweep_cw * 0.5
    else:
        mid_angle = a1 + sweep_ccw * 0.5
    return point_at_angle(center, radius, mid_angle)


def arc_length(p1: Point, p2: Point, center: Point, clockwise: bool) -> float:
    """Length of an arc: mean endpoint radius times the directed sweep."""
    radius = (distance(p1, center) + distance(p2, center)) * 0.5
    if radius < 1e-12:
        return 0.0
    return radius * directed_sweep(p1, p2, center, clockwise)


def segment_length(segment: Segment) -> float:
    """Travel length of a line or arc segment."""
    if isinstance(segment, ArcSegment):
        return arc_length(segment.p1, segment.p2, segment.center, segment.clockwise)
    return distance(segment.p1, segment.p2)


def direction_from_midpoint(
    p1: Point,
    pm: Point,
    p2: Point,
    center: Point,
    tolerance: float = 1e-9
) -> Optional[bool]:
    """
    Derive an arc's rotational sense from its three points.

    Args:
        p1: Start point
        pm: Midpoint
        p2: End point
        center: Arc center
        tolerance: Angular tolerance in radians for the containment test

    Returns:
        True for clockwise, False for counter-clockwise, None if the midpoint
        lies on both or neither directed sweep (or the endpoints coincide)
    """
    if distance(p1, p2) < 1e-12:
        return None

    a1 = angle_at(p1, center)
    a2 = angle_at(p2, center)
    am = angle_at(pm, center)

    on_cw = is_angle_on_arc(a1, a2, am, clockwise=True, tolerance=tolerance)
    on_ccw = is_angle_on_arc(a1, a2, am, clockwise=False, tolerance=tolerance)

    if on_cw and not on_ccw:
        return True
    if on_ccw and not on_cw:
        return False
    return None


def with_start(segment: Segment, start: Point) -> Segment:
    """
    Copy of a segment starting at a new point.

    Arc midpoints are walked again using the previous midpoint as hint.
    """
    if segment.p1 == start:
        return segment
    if isinstance(segment, LineSegment):
        return replace(segment, p1=start)
    pm = midpoint_on_arc(start, segment.p2, segment.center, segment.clockwise, hint=segment.pm)
    return replace(segment, p1=start, pm=pm)


def with_end(segment: Segment, end: Point) -> Segment:
    """Copy of a segment ending at a new point (arc midpoint re-walked)."""
    if segment.p2 == end:
        return segment
    if isinstance(segment, LineSegment):
        return replace(segment, p2=end)
    pm = midpoint_on_arc(segment.p1, end, segment.center, segment.clockwise, hint=segment.pm)
    return replace(segment, p2=end, pm=pm)
