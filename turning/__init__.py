"""Tool-nose radius compensation for lathe turning profiles."""

from .models import (
    Point,
    LineSegment,
    ArcSegment,
    CornerKind,
    CornerEntry,
    ToolCompensation,
    OffsetSettings,
    OffsetResult
)
from .errors import OffsetError, InvalidParameter, MalformedSegment, MissingArcCenter
from .profile_parser import parse_profile, parse_segment_record
from .offsetter import TurningOffsetter, join_corners, offset_profile
from .profile_composer import build_closing_lines, compose_closed_shape

__all__ = [
    # Models
    'Point',
    'LineSegment',
    'ArcSegment',
    'CornerKind',
    'CornerEntry',
    'ToolCompensation',
    'OffsetSettings',
    'OffsetResult',
    # Errors
    'OffsetError',
    'InvalidParameter',
    'MalformedSegment',
    'MissingArcCenter',
    # Parsing
    'parse_profile',
    'parse_segment_record',
    # Offsetting
    'TurningOffsetter',
    'join_corners',
    'offset_profile',
    # Closing
    'build_closing_lines',
    'compose_closed_shape',
]
