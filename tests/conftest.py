"""Test configuration and fixtures."""
import pytest

from app import create_app
from web.extensions import db
from web.models import TurningSettings, Tool


class TestConfig:
    """Test configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    APP_PASSWORD = None  # Disable auth for tests

    TANGENT_ANGLE_TOL_DEG = 0.5
    SMALL_SEGMENT_LENGTH = 0.05
    DEFAULT_TOOL_SIDE = 'RIGHT'
    DEFAULT_NOSE_RADIUS = 0.8
    DEFAULT_QUADRANT = 3
    OUTPUT_PRECISION = None


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Provide a database session for tests."""
    with app.app_context():
        yield db.session


@pytest.fixture
def sample_tool(app):
    """Create a sample 0.4 mm insert for testing."""
    with app.app_context():
        tool = Tool(
            name='CNMG 120404',
            nose_radius=0.4,
            quadrant=3,
            description='Test finishing insert'
        )
        db.session.add(tool)
        db.session.commit()
        yield tool


@pytest.fixture
def turning_settings(app):
    """Create turning settings for testing (quadrant 9, no shift)."""
    with app.app_context():
        settings = TurningSettings(
            id=1,
            tangent_angle_tol_deg=0.5,
            small_segment_length=0.05,
            default_side='LEFT',
            default_nose_radius=1.0,
            default_quadrant=9,
            output_precision=None
        )
        db.session.add(settings)
        db.session.commit()
        yield settings


@pytest.fixture
def corner_profile():
    """Two lines meeting at a 90 degree corner at (0, 10)."""
    return [
        'LINE 0 0   0 10',
        'LINE 0 10   10 10',
    ]
