"""Settings management service."""
from typing import Dict, List, Optional

from flask import current_app

from turning.errors import InvalidParameter
from turning.models import OffsetSettings
from turning.utils.validators import normalize_side, validate_compensation, validate_settings
from web.extensions import db
from web.models import TurningSettings, Tool


class SettingsService:
    """Service for managing offset settings and the tool library."""

    # --- Turning Settings Methods ---

    @staticmethod
    def get_turning_settings() -> TurningSettings:
        """Get turning settings singleton, creating from app config if missing."""
        settings = db.session.get(TurningSettings, 1)
        if not settings:
            config = current_app.config
            settings = TurningSettings(
                id=1,
                tangent_angle_tol_deg=config.get('TANGENT_ANGLE_TOL_DEG', 0.5),
                small_segment_length=config.get('SMALL_SEGMENT_LENGTH', 0.05),
                default_side=config.get('DEFAULT_TOOL_SIDE', 'RIGHT'),
                default_nose_radius=config.get('DEFAULT_NOSE_RADIUS', 0.8),
                default_quadrant=config.get('DEFAULT_QUADRANT', 3),
                output_precision=config.get('OUTPUT_PRECISION')
            )
            db.session.add(settings)
            db.session.commit()
        return settings

    @staticmethod
    def get_turning_settings_dict() -> Dict:
        """Get turning settings as dict for JSON."""
        settings = SettingsService.get_turning_settings()
        return {
            'tangent_angle_tol_deg': settings.tangent_angle_tol_deg,
            'small_segment_length': settings.small_segment_length,
            'default_side': settings.default_side,
            'default_nose_radius': settings.default_nose_radius,
            'default_quadrant': settings.default_quadrant,
            'output_precision': settings.output_precision
        }

    @staticmethod
    def get_offset_settings() -> OffsetSettings:
        """Engine tolerances from the stored settings."""
        settings = SettingsService.get_turning_settings()
        return OffsetSettings(
            tangent_angle_tol_deg=settings.tangent_angle_tol_deg,
            small_segment_length=settings.small_segment_length
        )

    @staticmethod
    def update_turning_settings(data: Dict) -> TurningSettings:
        """
        Update turning settings.

        Raises:
            InvalidParameter: If a value is out of range; nothing is saved
        """
        settings = SettingsService.get_turning_settings()

        try:
            tangent_tol = float(data.get('tangent_angle_tol_deg', settings.tangent_angle_tol_deg))
            small = float(data.get('small_segment_length', settings.small_segment_length))
        except (TypeError, ValueError):
            raise InvalidParameter('Tolerances must be numbers')
        errors = validate_settings(OffsetSettings(tangent_tol, small))
        if errors:
            raise InvalidParameter('; '.join(errors))

        side = normalize_side(data.get('default_side', settings.default_side))
        comp = validate_compensation(
            'LEFT',
            data.get('default_nose_radius', settings.default_nose_radius),
            data.get('default_quadrant', settings.default_quadrant)
        )

        precision = data.get('output_precision', settings.output_precision)
        if precision is not None and precision != '':
            try:
                precision = int(precision)
            except (TypeError, ValueError):
                raise InvalidParameter('output_precision must be an integer')
            if not 0 <= precision <= 12:
                raise InvalidParameter('output_precision must be between 0 and 12')
        else:
            precision = None

        settings.tangent_angle_tol_deg = tangent_tol
        settings.small_segment_length = small
        settings.default_side = side
        settings.default_nose_radius = comp.nose_radius
        settings.default_quadrant = comp.quadrant
        settings.output_precision = precision

        db.session.commit()
        return settings

    # --- Tool Methods ---

    @staticmethod
    def get_all_tools() -> List[Tool]:
        """Get all tools, ordered by nose radius then name."""
        return Tool.query.order_by(Tool.nose_radius, Tool.name).all()

    @staticmethod
    def get_tool(tool_id: int) -> Optional[Tool]:
        """Get a single tool by ID."""
        return db.session.get(Tool, tool_id)

    @staticmethod
    def tool_to_dict(tool: Tool) -> Dict:
        """Serialize a tool for JSON."""
        return {
            'id': tool.id,
            'name': tool.name,
            'nose_radius': tool.nose_radius,
            'quadrant': tool.quadrant,
            'description': tool.description
        }

    @staticmethod
    def get_tools_as_list() -> List[Dict]:
        """Get all tools as list of dicts for JSON."""
        return [SettingsService.tool_to_dict(t) for t in SettingsService.get_all_tools()]

    @staticmethod
    def create_tool(data: Dict) -> Tool:
        """
        Create a new tool from dict.

        Raises:
            InvalidParameter: Missing name, or bad nose radius / quadrant
        """
        name = (data.get('name') or '').strip()
        if not name:
            raise InvalidParameter('Tool name is required')
        comp = validate_compensation('LEFT', data.get('nose_radius'), data.get('quadrant', 3))

        tool = Tool(
            name=name,
            nose_radius=comp.nose_radius,
            quadrant=comp.quadrant,
            description=data.get('description', '')
        )
        db.session.add(tool)
        db.session.commit()
        return tool

    @staticmethod
    def update_tool(tool_id: int, data: Dict) -> Optional[Tool]:
        """Update an existing tool."""
        tool = db.session.get(Tool, tool_id)
        if not tool:
            return None

        comp = validate_compensation(
            'LEFT',
            data.get('nose_radius', tool.nose_radius),
            data.get('quadrant', tool.quadrant)
        )

        if 'name' in data:
            name = (data['name'] or '').strip()
            if not name:
                raise InvalidParameter('Tool name is required')
            tool.name = name
        if 'nose_radius' in data:
            tool.nose_radius = comp.nose_radius
        if 'quadrant' in data:
            tool.quadrant = comp.quadrant
        if 'description' in data:
            tool.description = data['description']

        db.session.commit()
        return tool

    @staticmethod
    def delete_tool(tool_id: int) -> bool:
        """Delete a tool."""
        tool = db.session.get(Tool, tool_id)
        if not tool:
            return False

        db.session.delete(tool)
        db.session.commit()
        return True
