"""Close an open turning profile into a solid outline.

An open profile runs from a start point to an end point. Three straight
lines close it against a user-chosen Z plane:

    entry: (start_x, z_user) -> (start_x, start_z)
    exit:  (end_x, end_z)    -> (end_x, z_user)
    close: (end_x, z_user)   -> (start_x, z_user)

The closed shape is entry + profile + exit + close.
"""
from typing import List, Tuple

from .utils.profile_format import format_coordinate

ARC_COMMANDS = ('ARC3_CW', 'ARC3_CCW')


def _record_parts(record: str, which: str) -> List[str]:
    if record is None or not record.strip():
        raise ValueError(f"{which} profile line is empty.")
    parts = record.split()
    if len(parts) < 5:
        raise ValueError(f"{which} profile line has invalid format (needs at least 5 tokens).")
    return parts


def get_start_point(record: str) -> Tuple[float, float]:
    """
    Start point (x, z) of a LINE or ARC3_* record.

    Raises:
        ValueError: Empty or unsupported record
    """
    parts = _record_parts(record, 'First')
    command = parts[0].upper()
    if command == 'LINE':
        return float(parts[1]), float(parts[2])
    if command in ARC_COMMANDS:
        if len(parts) < 7:
            raise ValueError("First ARC3_* line has invalid format (needs at least 7 tokens).")
        return float(parts[1]), float(parts[2])
    raise ValueError("First profile line must be LINE or ARC3_* for closing logic.")


def get_end_point(record: str) -> Tuple[float, float]:
    """
    End point (x, z) of a LINE or ARC3_* record.

    Raises:
        ValueError: Empty or unsupported record
    """
    parts = _record_parts(record, 'Last')
    command = parts[0].upper()
    if command == 'LINE':
        return float(parts[3]), float(parts[4])
    if command in ARC_COMMANDS:
        if len(parts) < 7:
            raise ValueError("Last ARC3_* line has invalid format (needs at least 7 tokens).")
        return float(parts[5]), float(parts[6])
    raise ValueError("Last profile line must be LINE or ARC3_* for closing logic.")


def build_closing_lines(profile: List[str], z_user: float) -> List[str]:
    """
    Build the three closing LINE records for an open profile.

    Args:
        profile: Open profile records (travel order)
        z_user: Z plane the outline closes against

    Returns:
        [entry, exit, close] LINE records

    Raises:
        ValueError: If the profile is empty or its end records are invalid
    """
    if not profile:
        raise ValueError("Profile shape is empty; cannot build closing lines.")

    start_x, start_z = get_start_point(profile[0])
    end_x, end_z = get_end_point(profile[-1])

    sx = format_coordinate(start_x)
    sz = format_coordinate(start_z)
    ex = format_coordinate(end_x)
    ez = format_coordinate(end_z)
    zu = format_coordinate(z_user)

    return [
        f"LINE {sx} {zu}   {sx} {sz}",
        f"LINE {ex} {ez}   {ex} {zu}",
        f"LINE {ex} {zu}   {sx} {zu}",
    ]


def compose_closed_shape(profile: List[str], closing: List[str]) -> List[str]:
    """
    Combine an open profile with its closing lines.

    Args:
        profile: Open profile records
        closing: Three records from build_closing_lines, or empty when the
                 profile is already closed

    Returns:
        entry + profile + exit + close (or a copy of profile)

    Raises:
        ValueError: Empty profile, or closing not of length 0 or 3
    """
    if not profile:
        raise ValueError("Profile shape is empty.")
    if not closing:
        return list(profile)
    if len(closing) != 3:
        raise ValueError("Closing lines must contain exactly 3 LINE entries (or be empty).")

    return [closing[0]] + list(profile) + [closing[1], closing[2]]
