"""Turning profile offsetter.

Builds the nose-radius compensated path of an open turning profile:

1. Classify every junction of the source chain (tangent / inner / outer)
2. Pass A: offset each segment on its own (lines shift, arcs re-radius)
3. Pass B: walk the junctions - snap tangent joins, trim inner corners to
   the offset intersection, insert a nose-radius fillet at outer corners
4. Drop degenerate segments, re-stitch the chain, re-derive arc senses
5. Translate by the nose-center quadrant
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from .models import (
    ArcSegment,
    CornerEntry,
    CornerKind,
    OffsetResult,
    OffsetSettings,
    Point,
    Segment,
    ToolCompensation,
)
from .profile_parser import parse_profile
from .utils.arc_utils import midpoint_on_arc, project_to_radius, with_end, with_start
from .utils.cleanup import fix_arc_directions, remove_small_segments
from .utils.corner_detection import (
    build_corner_guide,
    tangent_at_end,
    tangent_at_start,
    turn_cross,
)
from .utils.profile_format import format_short
from .utils.quadrant import quadrant_shift, shift_segments
from .utils.tool_compensation import offset_segments, trim_intersection
from .utils.validators import validate_arc_radius_consistency, validate_compensation


@dataclass
class JoinResult:
    """Output of the corner joining pass."""
    segments: List[Segment]
    trace: List[str]
    warnings: List[str]
    fillet_count: int = 0


def _fillet(seg_a: Segment, seg_b: Segment, vertex: Point, nose_radius: float):
    """
    Fillet between two offset segments around the original vertex.

    Returns:
        Tuple of (trimmed a, trimmed b, fillet arc), or None when the turn
        direction cannot be determined
    """
    p1 = project_to_radius(seg_a.p2, vertex, nose_radius)
    p2 = project_to_radius(seg_b.p1, vertex, nose_radius)
    new_a = with_end(seg_a, p1)
    new_b = with_start(seg_b, p2)

    t1 = tangent_at_end(new_a)
    t2 = tangent_at_start(new_b)
    if t1 is None or t2 is None:
        return None
    cross = turn_cross(t1, t2)
    if abs(cross) < 1e-12:
        return None

    clockwise = cross > 0
    pm = midpoint_on_arc(p1, p2, vertex, clockwise, prefer_minor=True)
    fillet = ArcSegment(p1, pm, p2, vertex, clockwise, source_index=-1)
    return new_a, new_b, fillet


def join_corners(
    source: List[Segment],
    raw: List[Segment],
    guide: List[CornerEntry],
    nose_radius: float
) -> JoinResult:
    """
    Resolve every junction of the raw offset chain.

    Args:
        source: Original (un-offset) chain, used for corner vertices
        raw: Pass A output, same length and order as source
        guide: Corner classifications
        nose_radius: Fillet radius for outer corners

    Returns:
        JoinResult with the joined chain (fillets included)
    """
    trace = []
    warnings = []
    fillets = 0

    entries: Dict[int, CornerEntry] = {}
    for entry in guide:
        if entry.index < 0 or entry.index >= len(raw) - 1:
            trace.append(f"{entry.index:02d}: {entry.pair_kind} -> SKIP (index out of range)")
            continue
        entries[entry.index] = entry

    work = list(raw)
    joined = []

    for i in range(len(work) - 1):
        a = work[i]
        b = work[i + 1]
        vertex = source[i].p2
        entry = entries.get(i)
        kind = entry.pair_kind if entry else f"{a.kind},{b.kind}"
        classification = entry.classification if entry else CornerKind.UNKNOWN
        prefix = f"{i:02d}: {kind}"

        if classification == CornerKind.TANGENT:
            b = with_start(b, a.p2)
            trace.append(f"{prefix} (TAN) -> SNAP")

        elif classification == CornerKind.INNER:
            point = trim_intersection(a, b, vertex)
            if point is not None:
                a = with_end(a, point)
                b = with_start(b, point)
                trace.append(f"{prefix} (INNER) -> TRIM @ {format_short(point.x)},{format_short(point.z)}")
            else:
                b = with_start(b, a.p2)
                trace.append(f"{prefix} (INNER) -> SNAP (no trim found)")
                warnings.append(f"Corner {i:02d}: no intersection for inner corner, segments snapped")

        elif classification == CornerKind.OUTER:
            fillet = _fillet(a, b, vertex, nose_radius)
            if fillet is not None:
                a, b, arc = fillet
                joined.append(a)
                joined.append(arc)
                work[i + 1] = b
                fillets += 1
                trace.append(f"{prefix} (OUTER) -> FILLET R={format_short(nose_radius)}")
                continue
            b = with_start(b, a.p2)
            trace.append(f"{prefix} (OUTER) -> SNAP (fillet direction unresolved)")
            warnings.append(f"Corner {i:02d}: fillet direction unresolved, segments snapped")

        else:
            b = with_start(b, a.p2)
            trace.append(f"{prefix} (UNKNOWN) -> SNAP")

        joined.append(a)
        work[i + 1] = b

    if work:
        joined.append(work[-1])

    return JoinResult(joined, trace, warnings, fillets)


class TurningOffsetter:
    """Nose-radius compensation for an open turning profile."""

    def __init__(
        self,
        segments: List[Segment],
        compensation: ToolCompensation,
        settings: Optional[OffsetSettings] = None
    ):
        """
        Args:
            segments: Parsed source chain
            compensation: Side, nose radius and quadrant (validated here)
            settings: Tolerances; defaults used when omitted

        Raises:
            InvalidParameter: If the compensation values are unusable
        """
        self.segments = list(segments)
        self.compensation = validate_compensation(
            compensation.side, compensation.nose_radius, compensation.quadrant
        )
        self.settings = settings or OffsetSettings()

    def _header(self) -> List[str]:
        comp = self.compensation
        return [
            "=== TURNING OFFSETTER ===",
            f"Tool usage: {comp.side}",
            f"Nose radius: {format_short(comp.nose_radius)}",
            f"Quadrant: {comp.quadrant}",
            "",
        ]

    def build(self) -> OffsetResult:
        """Run all passes and return the offset chain with its trace."""
        comp = self.compensation
        settings = self.settings
        trace = self._header()
        warnings = validate_arc_radius_consistency(self.segments)

        if comp.offset_dir == 0:
            trace.append("OFF: profile passed through without offset.")
            return OffsetResult(list(self.segments), [], trace, warnings)

        guide = build_corner_guide(self.segments, comp, settings)
        trace.append(f"Segments: {len(self.segments)}   Guide entries: {len(guide)}")
        trace.append("")

        # Pass A
        raw, clamp_trace = offset_segments(self.segments, comp, settings)
        trace.extend(clamp_trace)
        trace.append("PASS A: RAW offset built.")
        if clamp_trace:
            trace.append(
                f"PASS A: Collapsed/clamped arcs: {len(clamp_trace)} (handled via SmallSegment cleanup)"
            )
            warnings.append(
                f"{len(clamp_trace)} arc(s) smaller than the nose radius collapsed during offset"
            )
        trace.append("")

        # Pass B
        joined = join_corners(self.segments, raw, guide, comp.nose_radius)
        trace.extend(joined.trace)
        warnings.extend(joined.warnings)
        trace.append("")
        trace.append(f"PASS B: joins done. (Inserted fillets: {joined.fillet_count})")
        trace.append("")

        # Cleanup
        small = settings.small_segment_length
        cleaned, removed = remove_small_segments(joined.segments, small)
        trace.append(f"OUTPUT: {len(cleaned)} segments after join+cleanup.")
        if removed:
            trace.append(
                f"CLEANUP: removed {removed} segments with len <= SmallSegment ({format_short(small)})."
            )

        fixed, changed, ambiguous = fix_arc_directions(cleaned)
        trace.append(f"DIRECTION: {changed} arcs re-derived from midpoint, {ambiguous} ambiguous kept.")
        trace.append("")

        dx, dz = quadrant_shift(comp.quadrant, comp.nose_radius)
        shifted = shift_segments(fixed, comp.quadrant, comp.nose_radius)
        trace.append(f"QUADRANT: {comp.quadrant} shift ({format_short(dx)}, {format_short(dz)})")
        trace.append(f"Offset profile built: {len(shifted)} segments")

        return OffsetResult(shifted, guide, trace, warnings, joined.fillet_count)


def offset_profile(
    records: Union[str, Iterable[str]],
    side: str,
    nose_radius: float,
    quadrant: int = 9,
    settings: Optional[OffsetSettings] = None
) -> OffsetResult:
    """
    Parse profile records and build their offset in one call.

    Args:
        records: Profile text or record lines
        side: 'OFF', 'LEFT' or 'RIGHT'
        nose_radius: Tool nose radius
        quadrant: Nose-center quadrant 1..9
        settings: Tolerances

    Returns:
        OffsetResult

    Raises:
        MalformedSegment: If a record cannot be parsed
        InvalidParameter: If the compensation values are unusable
    """
    compensation = validate_compensation(side, nose_radius, quadrant)
    segments = parse_profile(records)
    return TurningOffsetter(segments, compensation, settings).build()
