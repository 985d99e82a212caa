"""Shared dataclasses for the turning offset engine.

Coordinates are (x, z) pairs in lathe space: x is the radial axis and z the
axial axis. Angles around an arc center are measured with
``atan2(x - cx, z - cz)`` so that a clockwise arc is one whose angle
decreases along travel when the profile is drawn with Z horizontal and X
vertical.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


@dataclass(frozen=True)
class Point:
    """A point in radius/axial space."""
    x: float
    z: float


@dataclass(frozen=True)
class LineSegment:
    """A straight segment travelled from p1 to p2."""
    p1: Point
    p2: Point
    source_index: int = -1  # record index, -1 for synthesized segments

    @property
    def pm(self) -> Point:
        return Point((self.p1.x + self.p2.x) * 0.5, (self.p1.z + self.p2.z) * 0.5)

    @property
    def kind(self) -> str:
        return 'L'

    @property
    def command(self) -> str:
        return 'LINE'


@dataclass(frozen=True)
class ArcSegment:
    """A circular segment with an explicit center.

    ``pm`` is only a hint for which way round the circle the arc goes; the
    center and the rotational sense are authoritative.
    """
    p1: Point
    pm: Point
    p2: Point
    center: Point
    clockwise: bool
    source_index: int = -1
    # Optional (center - p1) / (center - p2) vectors carried from the record
    start_vector: Optional[Point] = None
    end_vector: Optional[Point] = None
    # Set by the offset pass when the offset radius went non-positive
    collapsed: bool = False

    @property
    def kind(self) -> str:
        return 'CW' if self.clockwise else 'CCW'

    @property
    def command(self) -> str:
        return 'ARC3_CW' if self.clockwise else 'ARC3_CCW'

    @property
    def radius(self) -> float:
        return math.hypot(self.p1.x - self.center.x, self.p1.z - self.center.z)


Segment = Union[LineSegment, ArcSegment]


class CornerKind(Enum):
    """How the junction between two segments is resolved."""
    TANGENT = 'TAN'
    INNER = 'INNER'
    OUTER = 'OUTER'
    UNKNOWN = 'UNKNOWN'


@dataclass(frozen=True)
class CornerEntry:
    """Classification of the junction between segment[index] and segment[index + 1]."""
    index: int
    pair_kind: str  # e.g. 'L,CW'
    classification: CornerKind
    delta_deg: float = 0.0
    inner_deg: float = 0.0
    outer_deg: float = 0.0
    cross: float = 0.0
    note: str = ''  # reason for UNKNOWN entries


TOOL_SIDES = ('OFF', 'LEFT', 'RIGHT')


@dataclass
class ToolCompensation:
    """Nose-radius compensation requested for a profile."""
    side: str = 'OFF'  # 'OFF', 'LEFT' or 'RIGHT'
    nose_radius: float = 0.0
    quadrant: int = 9  # 1..9, 9 = no nose-center shift

    @property
    def offset_dir(self) -> int:
        """+1 for LEFT, -1 for RIGHT, 0 when compensation is off."""
        if self.side == 'LEFT':
            return 1
        if self.side == 'RIGHT':
            return -1
        return 0


@dataclass
class OffsetSettings:
    """Numeric tolerances used by an offset run."""
    tangent_angle_tol_deg: float = 0.5   # corners below this deviation are tangent
    small_segment_length: float = 0.05   # segments at or below this length are dropped

    @property
    def tangent_tolerance(self) -> float:
        return max(abs(self.tangent_angle_tol_deg), 1e-6)

    @property
    def collapse_radius(self) -> float:
        """Radius given to arcs whose offset would collapse or invert."""
        return max(0.006, self.small_segment_length * 0.25)


@dataclass
class OffsetResult:
    """Result of an offset run."""
    segments: List[Segment]
    corner_guide: List[CornerEntry]
    trace: List[str]
    warnings: List[str] = field(default_factory=list)
    fillet_count: int = 0

    def to_lines(self) -> List[str]:
        """Serialize the offset chain into profile records."""
        from .utils.profile_format import format_profile
        return format_profile(self.segments)
