"""Seed script to populate default settings and the insert library."""
from app import create_app
from web.extensions import db
from web.models import TurningSettings, Tool
from web.services.settings_service import SettingsService


def seed_turning_settings():
    """Create the settings row from app config defaults."""
    if db.session.get(TurningSettings, 1):
        print("Turning settings already seeded, skipping...")
        return

    SettingsService.get_turning_settings()
    print("Seeded turning settings")


def seed_tools():
    """Seed common inserts. Only adds tools that don't already exist (by name)."""
    tools = [
        # ISO insert codes; the last two digits give the corner radius in 1/10 mm
        {'name': 'CNMG 120404', 'nose_radius': 0.4, 'quadrant': 3, 'description': '80° rhombic, finishing'},
        {'name': 'CNMG 120408', 'nose_radius': 0.8, 'quadrant': 3, 'description': '80° rhombic, general turning'},
        {'name': 'DNMG 150604', 'nose_radius': 0.4, 'quadrant': 3, 'description': '55° rhombic, profiling'},
        {'name': 'DNMG 150608', 'nose_radius': 0.8, 'quadrant': 3, 'description': '55° rhombic, profiling'},
        {'name': 'VNMG 160404', 'nose_radius': 0.4, 'quadrant': 3, 'description': '35° rhombic, fine profiling'},
        {'name': 'CCMT 09T304', 'nose_radius': 0.4, 'quadrant': 2, 'description': '80° rhombic, boring bar'},
    ]

    added_count = 0
    for data in tools:
        existing = Tool.query.filter_by(name=data['name']).first()
        if not existing:
            db.session.add(Tool(**data))
            added_count += 1

    if added_count > 0:
        db.session.commit()
        print(f"Seeded {added_count} new tools")
    else:
        print("All tools already exist, none added")


def seed_all():
    """Run all seed functions."""
    print("Starting database seeding...")
    seed_turning_settings()
    seed_tools()
    print("Database seeding complete!")


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        seed_all()
