"""Shared utility modules for the turning offset engine."""

from .arc_utils import (
    angle_at,
    mod_2pi,
    project_to_radius,
    directed_sweep,
    midpoint_on_arc,
    arc_length,
    segment_length,
    direction_from_midpoint,
    with_start,
    with_end
)
from .corner_detection import (
    tangent_at_start,
    tangent_at_end,
    corner_angles,
    classify_corner,
    build_corner_guide,
    format_corner_entry,
    format_corner_guide,
    format_segment_pairs
)
from .tool_compensation import (
    calculate_line_normal,
    offset_line,
    offset_arc,
    offset_segments,
    intersect_line_line,
    intersect_line_circle,
    intersect_circle_circle,
    trim_intersection
)
from .cleanup import remove_small_segments, fix_arc_directions
from .quadrant import QUADRANT_OFFSETS, quadrant_shift, shift_segments
from .profile_format import format_coordinate, format_segment, format_profile
from .validators import (
    normalize_side,
    validate_compensation,
    validate_settings,
    validate_arc_radius_consistency
)
from .svg_arc import calculate_svg_arc_flags, generate_svg_arc_command

__all__ = [
    # arc_utils
    'angle_at',
    'mod_2pi',
    'project_to_radius',
    'directed_sweep',
    'midpoint_on_arc',
    'arc_length',
    'segment_length',
    'direction_from_midpoint',
    'with_start',
    'with_end',
    # corner_detection
    'tangent_at_start',
    'tangent_at_end',
    'corner_angles',
    'classify_corner',
    'build_corner_guide',
    'format_corner_entry',
    'format_corner_guide',
    'format_segment_pairs',
    # tool_compensation
    'calculate_line_normal',
    'offset_line',
    'offset_arc',
    'offset_segments',
    'intersect_line_line',
    'intersect_line_circle',
    'intersect_circle_circle',
    'trim_intersection',
    # cleanup
    'remove_small_segments',
    'fix_arc_directions',
    # quadrant
    'QUADRANT_OFFSETS',
    'quadrant_shift',
    'shift_segments',
    # profile_format
    'format_coordinate',
    'format_segment',
    'format_profile',
    # validators
    'normalize_side',
    'validate_compensation',
    'validate_settings',
    'validate_arc_radius_consistency',
    # svg_arc
    'calculate_svg_arc_flags',
    'generate_svg_arc_command',
]
