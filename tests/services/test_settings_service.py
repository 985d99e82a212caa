"""Tests for SettingsService."""
import pytest

from turning.errors import InvalidParameter
from turning.models import OffsetSettings
from web.services.settings_service import SettingsService
from web.models import TurningSettings, Tool


class TestTurningSettingsMethods:
    """Tests for turning settings methods."""

    def test_get_turning_settings_creates_default(self, app):
        """Test that settings are created from app config if missing."""
        with app.app_context():
            settings = SettingsService.get_turning_settings()
            assert settings is not None
            assert settings.id == 1
            assert settings.tangent_angle_tol_deg == 0.5
            assert settings.small_segment_length == 0.05
            assert settings.default_side == 'RIGHT'
            assert settings.default_nose_radius == 0.8
            assert settings.default_quadrant == 3
            assert settings.output_precision is None

    def test_get_turning_settings_existing(self, app, turning_settings):
        """Test getting existing settings."""
        with app.app_context():
            settings = SettingsService.get_turning_settings()
            assert settings.default_side == 'LEFT'
            assert settings.default_quadrant == 9

    def test_get_turning_settings_dict(self, app, turning_settings):
        """Test settings serialization."""
        with app.app_context():
            data = SettingsService.get_turning_settings_dict()
            assert data['default_nose_radius'] == 1.0
            assert data['tangent_angle_tol_deg'] == 0.5
            assert 'output_precision' in data

    def test_get_offset_settings(self, app, turning_settings):
        """Test conversion to engine tolerances."""
        with app.app_context():
            settings = SettingsService.get_offset_settings()
            assert isinstance(settings, OffsetSettings)
            assert settings.tangent_angle_tol_deg == 0.5
            assert settings.small_segment_length == 0.05

    def test_update_turning_settings(self, app, turning_settings):
        """Test updating settings."""
        with app.app_context():
            updated = SettingsService.update_turning_settings({
                'tangent_angle_tol_deg': 1.0,
                'small_segment_length': '0.02',
                'default_side': 'right',
                'default_nose_radius': 0.4,
                'default_quadrant': 2,
                'output_precision': 4
            })
            assert updated.tangent_angle_tol_deg == 1.0
            assert updated.small_segment_length == 0.02
            assert updated.default_side == 'RIGHT'
            assert updated.default_nose_radius == 0.4
            assert updated.default_quadrant == 2
            assert updated.output_precision == 4

    def test_update_partial_keeps_other_values(self, app, turning_settings):
        """Test that omitted keys keep their stored values."""
        with app.app_context():
            updated = SettingsService.update_turning_settings({'default_quadrant': 5})
            assert updated.default_quadrant == 5
            assert updated.default_side == 'LEFT'
            assert updated.default_nose_radius == 1.0

    def test_update_clears_precision(self, app, turning_settings):
        """Test that an empty precision means full precision."""
        with app.app_context():
            updated = SettingsService.update_turning_settings({'output_precision': ''})
            assert updated.output_precision is None

    @pytest.mark.parametrize('data', [
        {'small_segment_length': -1},
        {'tangent_angle_tol_deg': 'wide'},
        {'default_side': 'up'},
        {'default_nose_radius': 0},
        {'default_quadrant': 11},
        {'output_precision': 13},
        {'output_precision': 'two'},
    ])
    def test_update_rejects_bad_values(self, app, turning_settings, data):
        """Test that bad values raise and nothing is saved."""
        with app.app_context():
            with pytest.raises(InvalidParameter):
                SettingsService.update_turning_settings(data)
            settings = SettingsService.get_turning_settings()
            assert settings.default_quadrant == 9
            assert settings.small_segment_length == 0.05


class TestToolMethods:
    """Tests for the insert library."""

    def test_get_all_tools_empty(self, app):
        """Test getting tools when none exist."""
        with app.app_context():
            assert SettingsService.get_all_tools() == []

    def test_get_all_tools(self, app, sample_tool):
        """Test getting all tools."""
        with app.app_context():
            tools = SettingsService.get_all_tools()
            assert len(tools) == 1
            assert tools[0].name == 'CNMG 120404'

    def test_get_tool(self, app, sample_tool):
        """Test getting a single tool by ID."""
        with app.app_context():
            tool = SettingsService.get_tool(sample_tool.id)
            assert tool is not None
            assert tool.nose_radius == 0.4

    def test_get_tool_not_found(self, app):
        """Test getting a non-existent tool."""
        with app.app_context():
            assert SettingsService.get_tool(999) is None

    def test_tools_ordered_by_radius(self, app, sample_tool):
        """Test that the list is ordered by nose radius."""
        with app.app_context():
            SettingsService.create_tool({'name': 'VNMG 160402', 'nose_radius': 0.2})
            tools = SettingsService.get_tools_as_list()
            assert [t['nose_radius'] for t in tools] == [0.2, 0.4]

    def test_create_tool(self, app):
        """Test creating a new tool."""
        with app.app_context():
            tool = SettingsService.create_tool({
                'name': 'DNMG 150608',
                'nose_radius': '0.8',
                'quadrant': 3,
                'description': 'Profiling insert'
            })
            assert tool.id is not None
            assert tool.nose_radius == 0.8
            assert Tool.query.count() == 1

    def test_create_tool_default_quadrant(self, app):
        """Test that quadrant defaults to 3."""
        with app.app_context():
            tool = SettingsService.create_tool({'name': 'Insert', 'nose_radius': 0.4})
            assert tool.quadrant == 3

    @pytest.mark.parametrize('data', [
        {'nose_radius': 0.4},
        {'name': '  ', 'nose_radius': 0.4},
        {'name': 'Insert', 'nose_radius': 0},
        {'name': 'Insert', 'nose_radius': 0.4, 'quadrant': 0},
    ])
    def test_create_tool_invalid(self, app, data):
        """Test that invalid tools are rejected."""
        with app.app_context():
            with pytest.raises(InvalidParameter):
                SettingsService.create_tool(data)
            assert Tool.query.count() == 0

    def test_update_tool(self, app, sample_tool):
        """Test updating a tool."""
        with app.app_context():
            tool = SettingsService.update_tool(sample_tool.id, {'nose_radius': 0.8, 'quadrant': 2})
            assert tool.nose_radius == 0.8
            assert tool.quadrant == 2
            assert tool.name == 'CNMG 120404'

    def test_update_tool_not_found(self, app):
        """Test updating a non-existent tool."""
        with app.app_context():
            assert SettingsService.update_tool(999, {'nose_radius': 0.8}) is None

    def test_update_tool_invalid(self, app, sample_tool):
        """Test that an invalid update raises."""
        with app.app_context():
            with pytest.raises(InvalidParameter):
                SettingsService.update_tool(sample_tool.id, {'nose_radius': -1})

    def test_delete_tool(self, app, sample_tool):
        """Test deleting a tool."""
        with app.app_context():
            tool_id = sample_tool.id
            assert SettingsService.delete_tool(tool_id) is True
            assert SettingsService.get_tool(tool_id) is None

    def test_delete_tool_not_found(self, app):
        """Test deleting a non-existent tool."""
        with app.app_context():
            assert SettingsService.delete_tool(999) is False

    def test_tool_to_dict(self, app, sample_tool):
        """Test tool serialization."""
        with app.app_context():
            data = SettingsService.tool_to_dict(SettingsService.get_tool(sample_tool.id))
            assert data['name'] == 'CNMG 120404'
            assert data['quadrant'] == 3
            assert set(data) == {'id', 'name', 'nose_radius', 'quadrant', 'description'}
