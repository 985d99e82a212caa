"""Offset generation service - connects API requests to the turning engine."""
from typing import Dict, List

from turning.errors import InvalidParameter, OffsetError
from turning.models import ToolCompensation
from turning.offsetter import TurningOffsetter
from turning.profile_composer import build_closing_lines, compose_closed_shape
from turning.profile_parser import parse_profile
from turning.utils.corner_detection import build_corner_guide, format_corner_guide, format_segment_pairs
from turning.utils.profile_format import format_profile
from turning.utils.validators import validate_arc_radius_consistency, validate_compensation
from web.services.settings_service import SettingsService


def _profile_lines(data: Dict) -> List[str]:
    """Profile records from a request body (list of lines or one text block)."""
    profile = data.get('profile')
    if profile is None:
        raise InvalidParameter('No profile provided')
    if isinstance(profile, str):
        return profile.splitlines()
    if not isinstance(profile, list):
        raise InvalidParameter('Profile must be a list of records or a text block')
    return [str(line) for line in profile]


class OffsetService:
    """Service for running offsets and corner reports."""

    @staticmethod
    def resolve_compensation(data: Dict) -> ToolCompensation:
        """
        Compensation values for a request.

        Explicit values win; otherwise the selected tool (tool_id) supplies
        nose radius and quadrant, and stored defaults fill the rest.

        Raises:
            InvalidParameter: Unknown tool or unusable values
        """
        settings = SettingsService.get_turning_settings()
        nose_radius = settings.default_nose_radius
        quadrant = settings.default_quadrant

        tool_id = data.get('tool_id')
        if tool_id is not None:
            tool = SettingsService.get_tool(tool_id)
            if not tool:
                raise InvalidParameter(f"Tool {tool_id} not found")
            nose_radius = tool.nose_radius
            quadrant = tool.quadrant

        if 'nose_radius' in data:
            nose_radius = data['nose_radius']
        if 'quadrant' in data:
            quadrant = data['quadrant']

        side = data.get('side', settings.default_side)
        return validate_compensation(side, nose_radius, quadrant)

    @staticmethod
    def generate_offset(data: Dict) -> Dict:
        """
        Offset a profile described by a request body.

        Args:
            data: {'profile': [...], 'side', 'nose_radius', 'quadrant',
                   'tool_id', 'close_z'} - all but profile optional

        Returns:
            Dict with profile, trace, warnings, corner_guide, fillet_count
            and (when close_z is given) closed_shape

        Raises:
            OffsetError: For malformed records or unusable parameters
        """
        compensation = OffsetService.resolve_compensation(data)
        segments = parse_profile(_profile_lines(data))
        settings = SettingsService.get_offset_settings()
        precision = SettingsService.get_turning_settings().output_precision

        result = TurningOffsetter(segments, compensation, settings).build()
        profile = format_profile(result.segments, precision)

        response = {
            'profile': profile,
            'trace': result.trace,
            'warnings': result.warnings,
            'corner_guide': format_corner_guide(result.corner_guide, compensation, settings),
            'fillet_count': result.fillet_count,
            'segment_count': len(result.segments)
        }

        close_z = data.get('close_z')
        if close_z is not None and close_z != '' and profile:
            try:
                z_user = float(close_z)
            except (TypeError, ValueError):
                raise InvalidParameter(f"Invalid close_z '{close_z}'")
            closing = build_closing_lines(profile, z_user)
            response['closed_shape'] = compose_closed_shape(profile, closing)

        return response

    @staticmethod
    def corner_report(data: Dict) -> Dict:
        """
        Classify the corners of a profile without offsetting it.

        Returns:
            Dict with segment_pairs, corner_guide and warnings
        """
        settings_row = SettingsService.get_turning_settings()
        side = data.get('side', settings_row.default_side)
        compensation = validate_compensation(side, 1.0, 9)
        segments = parse_profile(_profile_lines(data))
        settings = SettingsService.get_offset_settings()

        guide = build_corner_guide(segments, compensation, settings)
        return {
            'segment_pairs': format_segment_pairs(segments),
            'corner_guide': format_corner_guide(guide, compensation, settings),
            'corners': [
                {
                    'index': e.index,
                    'pair': e.pair_kind,
                    'kind': e.classification.value,
                    'delta_deg': e.delta_deg,
                    'cross': e.cross
                }
                for e in guide
            ],
            'warnings': validate_arc_radius_consistency(segments)
        }

    @staticmethod
    def validate_profile(data: Dict) -> List[str]:
        """
        Check a profile and its parameters without offsetting.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        try:
            OffsetService.resolve_compensation(data)
        except InvalidParameter as e:
            errors.append(str(e))
        try:
            parse_profile(_profile_lines(data))
        except OffsetError as e:
            errors.append(str(e))
        return errors

    @staticmethod
    def parse_for_preview(data: Dict) -> Dict:
        """Source segments plus their offset, for previews."""
        compensation = OffsetService.resolve_compensation(data)
        segments = parse_profile(_profile_lines(data))
        settings = SettingsService.get_offset_settings()
        result = TurningOffsetter(segments, compensation, settings).build()
        return {'source': segments, 'offset': result.segments}
