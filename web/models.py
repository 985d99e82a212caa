from web.extensions import db


class TurningSettings(db.Model):
    """Offset engine settings (singleton - one row)."""

    id = db.Column(db.Integer, primary_key=True)

    # Corners whose travel directions deviate by no more than this are tangent joins
    tangent_angle_tol_deg = db.Column(db.Float)
    # Offset segments at or below this length are removed during cleanup
    small_segment_length = db.Column(db.Float)

    # Defaults used when a request does not name a tool or values
    default_side = db.Column(db.String(10))  # 'OFF', 'LEFT' or 'RIGHT'
    default_nose_radius = db.Column(db.Float)
    default_quadrant = db.Column(db.Integer)  # 1..9, 9 = no nose-center shift

    # Decimal places in generated profile records (None = full precision)
    output_precision = db.Column(db.Integer, nullable=True)


class Tool(db.Model):
    """Turning insert with its nose geometry."""

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    nose_radius = db.Column(db.Float, nullable=False)
    quadrant = db.Column(db.Integer, nullable=False, default=3)  # tool-nose-center quadrant 1..9
    description = db.Column(db.String(200))
