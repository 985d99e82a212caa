"""Profile record formatting utilities.

Output uses the same grammar as the input records:

    LINE x1 z1   x2 z2
    ARC3_CW  x1 z1   xm zm   x2 z2   cx cz   vSx vSz   vEx vEz
    ARC3_CCW x1 z1   xm zm   x2 z2   cx cz   vSx vSz   vEx vEz

Numbers are always written with '.' as decimal separator.
"""
from typing import List, Optional

from ..models import ArcSegment, Segment


def format_coordinate(value: float, precision: Optional[int] = None) -> str:
    """
    Format a coordinate value.

    Args:
        value: The coordinate value
        precision: Fixed number of decimal places, or None for the shortest
                   text that reads back to the same float

    Returns:
        Formatted string representation
    """
    if precision is not None:
        text = f"{value:.{precision}f}"
        # Avoid "-0.0000"
        if float(text) == 0:
            text = f"{0.0:.{precision}f}"
        return text

    if value == 0:
        return "0"
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


def format_short(value: float) -> str:
    """Format a number with up to 3 decimals for trace messages."""
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def format_signed(value: float) -> str:
    """Like format_short but with an explicit '+' for positive values."""
    text = format_short(value)
    if text == '0' or text.startswith('-'):
        return text
    return '+' + text


def format_segment(segment: Segment, precision: Optional[int] = None) -> str:
    """
    Serialize one segment into a profile record.

    Arc records always carry the center and the (center - endpoint) vectors,
    derived from the center rather than from any cached values.
    """
    def fmt(value):
        return format_coordinate(value, precision)

    p1, p2 = segment.p1, segment.p2
    if not isinstance(segment, ArcSegment):
        return f"LINE {fmt(p1.x)} {fmt(p1.z)}   {fmt(p2.x)} {fmt(p2.z)}"

    c = segment.center
    pm = segment.pm
    return (
        f"{segment.command} {fmt(p1.x)} {fmt(p1.z)}   {fmt(pm.x)} {fmt(pm.z)}   "
        f"{fmt(p2.x)} {fmt(p2.z)}   {fmt(c.x)} {fmt(c.z)}   "
        f"{fmt(c.x - p1.x)} {fmt(c.z - p1.z)}   {fmt(c.x - p2.x)} {fmt(c.z - p2.z)}"
    )


def format_profile(segments: List[Segment], precision: Optional[int] = None) -> List[str]:
    """Serialize a segment chain, one record per segment."""
    return [format_segment(s, precision) for s in segments]
