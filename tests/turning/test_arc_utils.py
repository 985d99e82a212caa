"""
Tests for the arc angle utilities.

Angles are measured from +Z towards +X (angle_at), so a clockwise arc is
one whose angle decreases along travel.
"""
import math

import pytest

from turning.models import ArcSegment, LineSegment, Point
from turning.utils.arc_utils import (
    angle_at,
    arc_length,
    directed_sweep,
    direction_from_midpoint,
    is_angle_on_arc,
    midpoint_on_arc,
    mod_2pi,
    point_at_angle,
    project_to_radius,
    segment_length,
    with_end,
    with_start,
)

ORIGIN = Point(0.0, 0.0)
S = math.sqrt(0.5)


def close(a: Point, b: Point, tol: float = 1e-9) -> bool:
    return abs(a.x - b.x) < tol and abs(a.z - b.z) < tol


class TestAngles:
    """Tests for angle_at, point_at_angle and mod_2pi."""

    def test_angle_on_z_axis_is_zero(self):
        """A point on +Z sits at angle 0."""
        assert angle_at(Point(0, 5), ORIGIN) == 0.0

    def test_angle_on_x_axis(self):
        """A point on +X sits at +90 degrees."""
        assert angle_at(Point(3, 0), ORIGIN) == pytest.approx(math.pi / 2)

    def test_point_at_angle_inverts_angle_at(self):
        """point_at_angle places a point back at its measured angle."""
        center = Point(2, -1)
        p = Point(4.5, 3.25)
        radius = math.hypot(p.x - center.x, p.z - center.z)
        assert close(point_at_angle(center, radius, angle_at(p, center)), p)

    def test_mod_2pi_negative(self):
        """Negative angles wrap into [0, 2pi)."""
        assert mod_2pi(-math.pi / 2) == pytest.approx(3 * math.pi / 2)

    def test_mod_2pi_full_turn(self):
        """A full turn maps to zero."""
        assert mod_2pi(2 * math.pi) == pytest.approx(0.0)

    def test_project_to_radius(self):
        """Projection keeps direction and sets distance."""
        p = project_to_radius(Point(3, 4), ORIGIN, 10)
        assert close(p, Point(6, 8))

    def test_project_point_on_center_unchanged(self):
        """A point on the center has no direction and stays put."""
        assert project_to_radius(ORIGIN, ORIGIN, 2.0) == ORIGIN


class TestDirectedSweep:
    """Tests for directed sweep and on-arc containment."""

    def test_quarter_ccw(self):
        """Counter-clockwise from +Z to +X is a quarter turn."""
        sweep = directed_sweep(Point(0, 1), Point(1, 0), ORIGIN, clockwise=False)
        assert sweep == pytest.approx(math.pi / 2)

    def test_quarter_cw_goes_long_way(self):
        """Clockwise from +Z to +X is three quarters of a turn."""
        sweep = directed_sweep(Point(0, 1), Point(1, 0), ORIGIN, clockwise=True)
        assert sweep == pytest.approx(3 * math.pi / 2)

    def test_is_angle_on_arc_inclusive(self):
        """Endpoints count as on the arc."""
        assert is_angle_on_arc(0.0, 1.0, 0.0, clockwise=False)
        assert is_angle_on_arc(0.0, 1.0, 1.0, clockwise=False)

    def test_is_angle_on_arc_rejects_complement(self):
        """An angle on the complementary sweep is not on the arc."""
        assert not is_angle_on_arc(0.0, 1.0, -0.5, clockwise=False)
        assert is_angle_on_arc(0.0, 1.0, -0.5, clockwise=True)


class TestMidpointOnArc:
    """Tests for the half-sweep midpoint walk."""

    def test_ccw_quarter_midpoint(self):
        """Midpoint of the CCW quarter lies at 45 degrees."""
        pm = midpoint_on_arc(Point(0, 1), Point(1, 0), ORIGIN, clockwise=False)
        assert close(pm, Point(S, S))

    def test_cw_three_quarter_midpoint(self):
        """Midpoint of the CW three-quarter arc lies opposite the chord."""
        pm = midpoint_on_arc(Point(0, 1), Point(1, 0), ORIGIN, clockwise=True)
        assert close(pm, Point(-S, -S))

    def test_midpoint_across_angle_wrap(self):
        """A short arc crossing the +-180 degree wrap keeps its midpoint on -Z."""
        p1 = point_at_angle(ORIGIN, 1.0, math.radians(170))
        p2 = point_at_angle(ORIGIN, 1.0, math.radians(-170))
        pm = midpoint_on_arc(p1, p2, ORIGIN, clockwise=False)
        # Averaging the endpoint angles would land on +Z instead
        assert close(pm, Point(0, -1))

    def test_prefer_minor_overrides_sense(self):
        """prefer_minor picks the shorter sweep regardless of the flag."""
        pm = midpoint_on_arc(Point(0, 1), Point(1, 0), ORIGIN, clockwise=True, prefer_minor=True)
        assert close(pm, Point(S, S))

    def test_hint_selects_sweep(self):
        """A hint lying only on the CW sweep wins over the CCW flag."""
        pm = midpoint_on_arc(
            Point(0, 1), Point(1, 0), ORIGIN, clockwise=False, hint=Point(-1, 0)
        )
        assert close(pm, Point(-S, -S))

    def test_midpoint_keeps_start_radius(self):
        """The walked midpoint lies at the start point's radius."""
        pm = midpoint_on_arc(Point(0, 4), Point(4, 0), ORIGIN, clockwise=False)
        assert math.hypot(pm.x, pm.z) == pytest.approx(4.0)


class TestLengths:
    """Tests for arc and segment length."""

    def test_quarter_arc_length(self):
        """Quarter circle of radius 2 has length pi."""
        assert arc_length(Point(0, 2), Point(2, 0), ORIGIN, False) == pytest.approx(math.pi)

    def test_segment_length_line(self):
        """Line length is the Euclidean distance."""
        assert segment_length(LineSegment(Point(0, 0), Point(3, 4))) == pytest.approx(5.0)

    def test_segment_length_uses_direction(self):
        """Clockwise version of the same arc is the long way round."""
        arc = ArcSegment(Point(0, 2), Point(-S * 2, -S * 2), Point(2, 0), ORIGIN, clockwise=True)
        assert segment_length(arc) == pytest.approx(3 * math.pi)


class TestDirectionFromMidpoint:
    """Tests for deriving rotational sense from three points."""

    def test_ccw(self):
        """Midpoint on the CCW sweep gives counter-clockwise."""
        assert direction_from_midpoint(Point(0, 1), Point(S, S), Point(1, 0), ORIGIN) is False

    def test_cw(self):
        """Midpoint on the CW sweep gives clockwise."""
        assert direction_from_midpoint(Point(0, 1), Point(-S, -S), Point(1, 0), ORIGIN) is True

    def test_coincident_endpoints_ambiguous(self):
        """Closed arcs have no derivable sense."""
        assert direction_from_midpoint(Point(0, 1), Point(0, -1), Point(0, 1), ORIGIN) is None

    def test_midpoint_on_endpoint_ambiguous(self):
        """A midpoint equal to the start lies on both sweeps."""
        assert direction_from_midpoint(Point(0, 1), Point(0, 1), Point(1, 0), ORIGIN) is None


class TestWithStartEnd:
    """Tests for endpoint replacement."""

    def test_with_start_same_point_returns_same_segment(self):
        """No change when the start is already there."""
        line = LineSegment(Point(0, 0), Point(0, 10))
        assert with_start(line, Point(0, 0)) is line

    def test_with_start_line(self):
        """Line start moves; end and source index stay."""
        line = LineSegment(Point(0, 0), Point(0, 10), source_index=4)
        moved = with_start(line, Point(1, 0))
        assert moved.p1 == Point(1, 0)
        assert moved.p2 == Point(0, 10)
        assert moved.source_index == 4

    def test_with_end_arc_rewalks_midpoint(self):
        """Arc midpoint follows a moved endpoint."""
        arc = ArcSegment(Point(0, 1), Point(S, S), Point(1, 0), ORIGIN, clockwise=False)
        shortened = with_end(arc, Point(S, S))
        expected = point_at_angle(ORIGIN, 1.0, math.pi / 8)
        assert close(shortened.pm, expected)
        assert shortened.clockwise is False
