"""Parameter and geometry validation utilities."""
import math
from typing import List, Optional

from ..errors import InvalidParameter
from ..models import (
    ArcSegment,
    OffsetSettings,
    Segment,
    ToolCompensation,
    TOOL_SIDES,
)
from .arc_utils import distance
from .profile_format import format_short


def normalize_side(side: Optional[str]) -> str:
    """
    Normalize a compensation side string.

    Args:
        side: 'off', 'left' or 'right' in any case (None means off)

    Returns:
        'OFF', 'LEFT' or 'RIGHT'

    Raises:
        InvalidParameter: For any other value
    """
    if side is None:
        return 'OFF'
    normalized = str(side).strip().upper()
    if normalized not in TOOL_SIDES:
        raise InvalidParameter(
            f"Unknown tool compensation side '{side}'. Use OFF, LEFT or RIGHT."
        )
    return normalized


def validate_compensation(side: Optional[str], nose_radius, quadrant=9) -> ToolCompensation:
    """
    Build a ToolCompensation from caller values, rejecting unusable ones.

    Args:
        side: Compensation side
        nose_radius: Nose radius (must be > 0 unless side is OFF)
        quadrant: Nose-center quadrant 1..9

    Returns:
        Validated ToolCompensation

    Raises:
        InvalidParameter: Bad side, nose radius or quadrant
    """
    normalized = normalize_side(side)

    try:
        radius = float(nose_radius) if nose_radius is not None else 0.0
    except (TypeError, ValueError):
        raise InvalidParameter(f"Invalid nose radius '{nose_radius}'. Enter a positive number.")
    if not math.isfinite(radius):
        raise InvalidParameter(f"Invalid nose radius '{nose_radius}'. Enter a positive number.")
    if normalized != 'OFF' and radius <= 0:
        raise InvalidParameter(
            f"Invalid nose radius '{nose_radius}'. Enter a positive number (e.g. 0.8)."
        )

    if isinstance(quadrant, float) and not quadrant.is_integer():
        raise InvalidParameter(f"Invalid quadrant '{quadrant}'. Use 1 to 9.")
    try:
        quad = int(quadrant)
    except (TypeError, ValueError):
        raise InvalidParameter(f"Invalid quadrant '{quadrant}'. Use 1 to 9.")
    if not 1 <= quad <= 9:
        raise InvalidParameter(f"Invalid quadrant '{quadrant}'. Use 1 to 9.")

    return ToolCompensation(side=normalized, nose_radius=radius, quadrant=quad)


def validate_settings(settings: OffsetSettings) -> List[str]:
    """
    Check tolerance values.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    for name in ('tangent_angle_tol_deg', 'small_segment_length'):
        value = getattr(settings, name)
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            errors.append(f"{name} must be a number")
        elif value < 0:
            errors.append(f"{name} must not be negative")
    return errors


def validate_arc_radius_consistency(
    segments: List[Segment],
    tolerance: float = 0.001
) -> List[str]:
    """
    Check that each arc's endpoints sit at the same distance from its center.

    Args:
        segments: Parsed profile chain
        tolerance: Allowed radius difference

    Returns:
        List of warning messages (empty if all arcs are consistent)
    """
    warnings = []
    for i, segment in enumerate(segments):
        if not isinstance(segment, ArcSegment):
            continue
        r1 = distance(segment.p1, segment.center)
        r2 = distance(segment.p2, segment.center)
        if abs(r1 - r2) > tolerance:
            warnings.append(
                f"Segment {i:02d} ({segment.command}): start radius {format_short(r1)} "
                f"and end radius {format_short(r2)} differ by more than {tolerance}"
            )
    return warnings
