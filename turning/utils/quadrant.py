"""Tool-nose-center quadrant shift.

The programmed point of a turning insert sits at one of eight positions
around its nose-radius center (or on the center itself, quadrant 9). The
offset chain describes the nose-center path, so it is translated by the
quadrant's unit offset scaled by the nose radius.
"""
from dataclasses import replace
from typing import Dict, List, Tuple

from ..models import ArcSegment, Point, Segment

# Quadrant -> (dx, dz) in nose radii
QUADRANT_OFFSETS: Dict[int, Tuple[float, float]] = {
    1: (-1.0, -1.0),
    2: (-1.0, 1.0),
    3: (1.0, 1.0),
    4: (1.0, -1.0),
    5: (0.0, -1.0),
    6: (-1.0, 0.0),
    7: (0.0, 1.0),
    8: (1.0, 0.0),
    9: (0.0, 0.0),
}


def quadrant_shift(quadrant: int, nose_radius: float) -> Tuple[float, float]:
    """
    Translation for a quadrant.

    Args:
        quadrant: 1..9 (anything else is treated like 9)
        nose_radius: Tool nose radius

    Returns:
        (dx, dz) translation
    """
    ux, uz = QUADRANT_OFFSETS.get(quadrant, (0.0, 0.0))
    return (ux * nose_radius, uz * nose_radius)


def _translate(point: Point, dx: float, dz: float) -> Point:
    return Point(point.x + dx, point.z + dz)


def shift_segments(segments: List[Segment], quadrant: int, nose_radius: float) -> List[Segment]:
    """
    Translate every position in a chain by the quadrant shift.

    Endpoints, midpoints and arc centers move. Cached (center - endpoint)
    vectors are relative and stay as they are.
    """
    dx, dz = quadrant_shift(quadrant, nose_radius)
    if dx == 0.0 and dz == 0.0:
        return list(segments)

    shifted = []
    for segment in segments:
        if isinstance(segment, ArcSegment):
            shifted.append(replace(
                segment,
                p1=_translate(segment.p1, dx, dz),
                pm=_translate(segment.pm, dx, dz),
                p2=_translate(segment.p2, dx, dz),
                center=_translate(segment.center, dx, dz)
            ))
        else:
            shifted.append(replace(
                segment,
                p1=_translate(segment.p1, dx, dz),
                p2=_translate(segment.p2, dx, dz)
            ))
    return shifted
