"""Travel tangents and corner classification.

For every pair of adjacent segments the travel tangent leaving the first
segment and the travel tangent entering the second are compared. Nearly
parallel tangents make a tangent join; otherwise the sign of their cross
product, taken together with the compensation side, says whether the tool
rides on the outside of the turn (needs a fillet) or the inside (needs a
trim).
"""
import math
from typing import List, Tuple, Optional

from ..models import (
    ArcSegment,
    CornerEntry,
    CornerKind,
    OffsetSettings,
    Point,
    Segment,
    ToolCompensation,
)
from .profile_format import format_short, format_signed


def normalize(vx: float, vz: float) -> Optional[Tuple[float, float]]:
    """Unit vector, or None when the vector is too short to have a direction."""
    length = math.sqrt(vx * vx + vz * vz)
    if length < 1e-12:
        return None
    return (vx / length, vz / length)


def rotate_plus_90(vx: float, vz: float) -> Tuple[float, float]:
    """Rotate (x, z) by +90 degrees: (x, z) -> (-z, x)."""
    return (-vz, vx)


def rotate_minus_90(vx: float, vz: float) -> Tuple[float, float]:
    """Rotate (x, z) by -90 degrees: (x, z) -> (z, -x)."""
    return (vz, -vx)


def line_tangent(p1: Point, p2: Point) -> Optional[Tuple[float, float]]:
    """Unit travel direction of a line (same at both ends)."""
    return normalize(p2.x - p1.x, p2.z - p1.z)


def arc_tangent_at(point: Point, center: Point, clockwise: bool) -> Optional[Tuple[float, float]]:
    """
    Unit travel tangent of an arc at one of its points.

    The (center - point) vector is rotated -90 degrees for clockwise arcs and
    +90 degrees for counter-clockwise arcs.

    Args:
        point: Point on the arc
        center: Arc center
        clockwise: Rotational sense of the arc

    Returns:
        Unit tangent (tx, tz), or None if point sits on the center
    """
    rx = center.x - point.x
    rz = center.z - point.z
    if clockwise:
        tx, tz = rotate_minus_90(rx, rz)
    else:
        tx, tz = rotate_plus_90(rx, rz)
    return normalize(tx, tz)


def tangent_at_start(segment: Segment) -> Optional[Tuple[float, float]]:
    """Travel tangent entering a segment."""
    if isinstance(segment, ArcSegment):
        return arc_tangent_at(segment.p1, segment.center, segment.clockwise)
    return line_tangent(segment.p1, segment.p2)


def tangent_at_end(segment: Segment) -> Optional[Tuple[float, float]]:
    """Travel tangent leaving a segment."""
    if isinstance(segment, ArcSegment):
        return arc_tangent_at(segment.p2, segment.center, segment.clockwise)
    return line_tangent(segment.p1, segment.p2)


def corner_angles(
    v1: Tuple[float, float],
    v2: Tuple[float, float]
) -> Tuple[float, float, float]:
    """
    Angles between two unit travel tangents.

    Returns:
        (delta, inner, outer) in degrees. delta is the deviation between the
        travel directions (0-180), inner = 180 - delta, outer = 180 + delta.
    """
    dot = v1[0] * v2[0] + v1[1] * v2[1]
    dot = max(-1.0, min(1.0, dot))
    delta = math.degrees(math.acos(dot))
    return delta, 180.0 - delta, 180.0 + delta


def turn_cross(v1: Tuple[float, float], v2: Tuple[float, float]) -> float:
    """2D cross product v1 x v2 of two (x, z) vectors."""
    return v1[0] * v2[1] - v1[1] * v2[0]


def pair_kind(seg_a: Segment, seg_b: Segment) -> str:
    """Pair tag such as 'L,CW' for two adjacent segments."""
    return f"{seg_a.kind},{seg_b.kind}"


def classify_corner(
    index: int,
    seg_a: Segment,
    seg_b: Segment,
    offset_dir: int,
    tolerance_deg: float
) -> CornerEntry:
    """
    Classify the junction between two adjacent segments.

    Args:
        index: Index of seg_a in the chain
        seg_a: Segment ending at the junction
        seg_b: Segment starting at the junction
        offset_dir: +1 for LEFT compensation, -1 for RIGHT
        tolerance_deg: Deviation at or below which the join is tangent

    Returns:
        CornerEntry; UNKNOWN when either tangent is undefined
    """
    kind = pair_kind(seg_a, seg_b)

    v1 = tangent_at_end(seg_a)
    if v1 is None:
        return CornerEntry(index, kind, CornerKind.UNKNOWN, note='cannot build seg1 tangent')
    v2 = tangent_at_start(seg_b)
    if v2 is None:
        return CornerEntry(index, kind, CornerKind.UNKNOWN, note='cannot build seg2 tangent')

    delta, inner, outer = corner_angles(v1, v2)
    if delta <= tolerance_deg:
        return CornerEntry(index, kind, CornerKind.TANGENT, delta, inner, outer, 0.0)

    cross = turn_cross(v1, v2)
    if offset_dir * cross < 0.0:
        classification = CornerKind.OUTER
    else:
        classification = CornerKind.INNER
    return CornerEntry(index, kind, classification, delta, inner, outer, cross)


def build_corner_guide(
    segments: List[Segment],
    compensation: ToolCompensation,
    settings: Optional[OffsetSettings] = None
) -> List[CornerEntry]:
    """
    Classify every junction of a chain.

    Args:
        segments: Parsed profile chain
        compensation: Compensation side (OFF yields no entries)
        settings: Tolerances; defaults used when omitted

    Returns:
        One CornerEntry per adjacent pair, in chain order
    """
    if settings is None:
        settings = OffsetSettings()

    offset_dir = compensation.offset_dir
    if offset_dir == 0:
        return []

    tolerance = settings.tangent_tolerance
    return [
        classify_corner(i, segments[i], segments[i + 1], offset_dir, tolerance)
        for i in range(len(segments) - 1)
    ]


def format_corner_entry(entry: CornerEntry, side: str, tolerance_deg: float) -> str:
    """Human-readable report line for one corner."""
    prefix = f"{entry.index:02d}: {entry.pair_kind}"

    if entry.classification == CornerKind.UNKNOWN:
        return f"{prefix}  // {entry.note or 'guide not calculated'}"

    if entry.classification == CornerKind.TANGENT:
        return (
            f"{prefix}  TAN (delta = {format_short(entry.delta_deg)}°, "
            f"tol = {format_short(tolerance_deg)}°)"
        )

    if entry.classification == CornerKind.OUTER:
        value = entry.outer_deg
    else:
        value = entry.inner_deg
    return (
        f"{prefix}  TOOL_SIDE={side}  ANGLE={entry.classification.value} {format_short(value)}°  "
        f"(inner={format_short(entry.inner_deg)}°, outer={format_short(entry.outer_deg)}°, "
        f"delta={format_short(entry.delta_deg)}°, cross={format_signed(entry.cross)})"
    )


def format_segment_pairs(segments: List[Segment]) -> List[str]:
    """Report listing the pair tag of every junction."""
    lines = ["=== SEGMENT PAIRS ==="]
    if len(segments) < 2:
        lines.append("No corners.")
        return lines
    for i in range(len(segments) - 1):
        lines.append(f"{i:02d}: {pair_kind(segments[i], segments[i + 1])}")
    return lines


def format_corner_guide(
    entries: List[CornerEntry],
    compensation: ToolCompensation,
    settings: Optional[OffsetSettings] = None
) -> List[str]:
    """Full corner guide report, header first."""
    if settings is None:
        settings = OffsetSettings()

    lines = ["=== CORNER GUIDE ==="]
    if compensation.offset_dir == 0:
        lines.append("no comp for OFF required")
        return lines
    if not entries:
        lines.append("No corners.")
        return lines

    tolerance = settings.tangent_tolerance
    for entry in entries:
        lines.append(format_corner_entry(entry, compensation.side, tolerance))
    return lines
