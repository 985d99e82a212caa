"""API routes - JSON endpoints for offsetting and settings."""
from flask import Blueprint, request

from turning.errors import OffsetError
from web.auth import login_required, authenticate, logout as auth_logout
from web.services.offset_service import OffsetService
from web.services.preview_service import PreviewService
from web.services.settings_service import SettingsService
from web.utils.responses import (
    success_response,
    error_response,
    offset_error_response,
    validation_response
)

api_bp = Blueprint('api', __name__)


@api_bp.route('/login', methods=['POST'])
def login():
    """Start an authenticated session."""
    data = request.get_json(silent=True) or {}
    if authenticate(data.get('password', '')):
        return success_response(message='Logged in')
    return error_response('Invalid password', 401)


@api_bp.route('/logout', methods=['POST'])
def logout():
    """End the authenticated session."""
    auth_logout()
    return success_response(message='Logged out')


@api_bp.route('/offset', methods=['POST'])
@login_required
def generate_offset():
    """Offset a profile and return the compensated records with the trace."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        result = OffsetService.generate_offset(data)
    except OffsetError as e:
        return offset_error_response(e)
    except ValueError as e:
        return error_response(str(e))

    return success_response(data=result)


@api_bp.route('/corner-guide', methods=['POST'])
@login_required
def corner_guide():
    """Classify the corners of a profile for a tool side."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        report = OffsetService.corner_report(data)
    except OffsetError as e:
        return offset_error_response(e)

    return success_response(data=report)


@api_bp.route('/preview', methods=['POST'])
@login_required
def preview():
    """Generate an SVG preview of a profile and its offset."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        chains = OffsetService.parse_for_preview(data)
    except OffsetError as e:
        return offset_error_response(e)

    svg = PreviewService.generate_svg(chains['source'], chains['offset'])
    return success_response(data={'svg': svg})


@api_bp.route('/validate', methods=['POST'])
@login_required
def validate():
    """Check a profile and its compensation values without offsetting."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    errors = OffsetService.validate_profile(data)
    return validation_response(errors)


@api_bp.route('/settings', methods=['GET'])
@login_required
def get_settings():
    """Get the stored offset settings."""
    return success_response(data=SettingsService.get_turning_settings_dict())


@api_bp.route('/settings', methods=['POST'])
@login_required
def update_settings():
    """Update the stored offset settings."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        SettingsService.update_turning_settings(data)
    except OffsetError as e:
        return error_response(str(e))

    return success_response(
        data=SettingsService.get_turning_settings_dict(),
        message='Settings saved'
    )


@api_bp.route('/tools', methods=['GET'])
@login_required
def list_tools():
    """List the insert library."""
    return success_response(data=SettingsService.get_tools_as_list())


@api_bp.route('/tools', methods=['POST'])
@login_required
def create_tool():
    """Add an insert to the library."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        tool = SettingsService.create_tool(data)
    except OffsetError as e:
        return error_response(str(e))

    return success_response(data=SettingsService.tool_to_dict(tool), message='Tool created')


@api_bp.route('/tools/<int:tool_id>', methods=['PUT'])
@login_required
def update_tool(tool_id):
    """Update an insert."""
    data = request.get_json()
    if not data:
        return error_response('No data provided')

    try:
        tool = SettingsService.update_tool(tool_id, data)
    except OffsetError as e:
        return error_response(str(e))

    if not tool:
        return error_response('Tool not found', 404)
    return success_response(data=SettingsService.tool_to_dict(tool), message='Tool updated')


@api_bp.route('/tools/<int:tool_id>', methods=['DELETE'])
@login_required
def delete_tool(tool_id):
    """Remove an insert from the library."""
    if not SettingsService.delete_tool(tool_id):
        return error_response('Tool not found', 404)
    return success_response(message='Tool deleted')
