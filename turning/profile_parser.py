"""Parse profile records into segments.

Accepted records (whitespace separated, '.' decimal separator):

    LINE     x1 z1   x2 z2
    ARC3_CW  x1 z1   xm zm   x2 z2   cx cz   [vSx vSz vEx vEz]
    ARC3_CCW x1 z1   xm zm   x2 z2   cx cz   [vSx vSz vEx vEz]

Arc records must carry their center. The optional vectors are
(center - start) and (center - end); they are kept for reference only.
"""
import math
from typing import Iterable, List, Union

from .errors import MalformedSegment, MissingArcCenter
from .models import ArcSegment, LineSegment, Point, Segment

ARC_COMMANDS = ('ARC3_CW', 'ARC3_CCW')


def _parse_number(token: str, index: int, record: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise MalformedSegment(f"invalid number '{token}'", index, record)
    if not math.isfinite(value):
        raise MalformedSegment(f"non-finite number '{token}'", index, record)
    return value


def parse_segment_record(record: str, index: int = 0) -> Segment:
    """
    Parse a single profile record.

    Args:
        record: Record text, e.g. "LINE 10 0   10 -5"
        index: Position of the record in the chain (used as source_index
               and in error messages)

    Returns:
        LineSegment or ArcSegment

    Raises:
        MalformedSegment: Unknown command, wrong field count or bad numbers
        MissingArcCenter: Arc record without cx cz
    """
    parts = record.split()
    if not parts:
        raise MalformedSegment("empty record", index, record)

    command = parts[0].upper()
    values = [_parse_number(t, index, record) for t in parts[1:]]

    if command == 'LINE':
        if len(values) != 4:
            raise MalformedSegment(
                f"LINE needs 4 numbers (x1 z1 x2 z2), got {len(values)}", index, record
            )
        return LineSegment(
            Point(values[0], values[1]),
            Point(values[2], values[3]),
            source_index=index
        )

    if command in ARC_COMMANDS:
        if len(values) < 6:
            raise MalformedSegment(
                f"{command} needs start, mid and end points, got {len(values)} numbers",
                index, record
            )
        if len(values) < 8:
            raise MissingArcCenter(
                f"{command} is missing the appended center (cx cz). "
                f"Expected: {command} x1 z1 xm zm x2 z2 cx cz [vSx vSz vEx vEz]",
                index, record
            )
        if 8 < len(values) < 12:
            raise MalformedSegment(
                f"{command} has incomplete radial vectors ({len(values) - 8} of 4 numbers)",
                index, record
            )
        if len(values) > 12:
            raise MalformedSegment(
                f"{command} takes at most 12 numbers, got {len(values)}", index, record
            )

        start_vector = None
        end_vector = None
        if len(values) == 12:
            start_vector = Point(values[8], values[9])
            end_vector = Point(values[10], values[11])

        return ArcSegment(
            p1=Point(values[0], values[1]),
            pm=Point(values[2], values[3]),
            p2=Point(values[4], values[5]),
            center=Point(values[6], values[7]),
            clockwise=(command == 'ARC3_CW'),
            source_index=index,
            start_vector=start_vector,
            end_vector=end_vector
        )

    raise MalformedSegment(f"unknown command '{parts[0]}'", index, record)


def parse_profile(records: Union[str, Iterable[str]]) -> List[Segment]:
    """
    Parse a profile into a segment chain.

    Blank lines are ignored; every other line must be a valid record. Nothing
    is skipped silently, since a dropped record would shorten the profile.

    Args:
        records: Profile text or an iterable of record lines

    Returns:
        Segments in travel order

    Raises:
        MalformedSegment: If any record is invalid
    """
    if isinstance(records, str):
        records = records.splitlines()

    segments = []
    for raw in records:
        if raw is None or not raw.strip():
            continue
        segments.append(parse_segment_record(raw.strip(), len(segments)))
    return segments
