"""Exceptions raised by the turning offset engine."""
from typing import Optional


class OffsetError(Exception):
    """Base class for errors that abort an offset run."""
    pass


class InvalidParameter(OffsetError):
    """Compensation parameters are unusable (side, nose radius or quadrant)."""
    pass


class MalformedSegment(OffsetError):
    """A profile record could not be turned into a segment."""

    def __init__(self, message: str, index: Optional[int] = None, record: Optional[str] = None):
        self.index = index
        self.record = record
        if index is not None:
            message = f"Segment {index:02d}: {message}"
        super().__init__(message)


class MissingArcCenter(MalformedSegment):
    """An ARC3 record without the appended cx cz fields."""
    pass
