"""Post-join cleanup: degenerate segment removal and arc direction repair."""
from dataclasses import replace
from typing import List, Tuple

from ..models import ArcSegment, Segment
from .arc_utils import direction_from_midpoint, segment_length, with_start


def remove_small_segments(
    segments: List[Segment],
    small_length: float
) -> Tuple[List[Segment], int]:
    """
    Drop segments whose length is at or below small_length.

    Arcs marked as collapsed by the offset pass are always dropped, whatever
    length the joins left them with.

    Each kept segment has its start snapped to the end of the previously
    kept segment, so removing a segment never leaves a gap.

    Args:
        segments: Joined chain
        small_length: Length threshold (<= 0 disables removal)

    Returns:
        Tuple of (cleaned chain, number of removed segments)
    """
    cleaned = []
    removed = 0
    previous = None

    for segment in segments:
        if isinstance(segment, ArcSegment) and segment.collapsed:
            removed += 1
            continue
        if small_length > 0 and segment_length(segment) <= small_length:
            removed += 1
            continue

        if previous is not None:
            segment = with_start(segment, previous.p2)

        cleaned.append(segment)
        previous = segment

    return cleaned, removed


def fix_arc_directions(segments: List[Segment]) -> Tuple[List[Segment], int, int]:
    """
    Re-derive every arc's rotational sense from its three points.

    Arcs whose midpoint lies on exactly one directed sweep take that sense.
    Ambiguous arcs keep their current flag.

    Returns:
        Tuple of (chain, arcs whose sense changed, ambiguous arcs)
    """
    fixed = []
    changed = 0
    ambiguous = 0

    for segment in segments:
        if not isinstance(segment, ArcSegment):
            fixed.append(segment)
            continue

        clockwise = direction_from_midpoint(segment.p1, segment.pm, segment.p2, segment.center)
        if clockwise is None:
            ambiguous += 1
            fixed.append(segment)
            continue

        if clockwise != segment.clockwise:
            changed += 1
            segment = replace(segment, clockwise=clockwise)
        fixed.append(segment)

    return fixed, changed, ambiguous
