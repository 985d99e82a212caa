"""Tests for profile record parsing and formatting."""
import pytest

from turning.errors import MalformedSegment, MissingArcCenter
from turning.models import ArcSegment, LineSegment, Point
from turning.profile_parser import parse_profile, parse_segment_record
from turning.utils.profile_format import (
    format_coordinate,
    format_profile,
    format_segment,
    format_short,
    format_signed,
)

ARC = 'ARC3_CCW 0 5   3.5355 3.5355   5 0   0 0'


class TestParseSegmentRecord:
    """Tests for single records."""

    def test_line(self):
        """LINE records give a line segment."""
        segment = parse_segment_record('LINE 10 0   10 -5', 3)
        assert isinstance(segment, LineSegment)
        assert segment.p1 == Point(10, 0)
        assert segment.p2 == Point(10, -5)
        assert segment.source_index == 3
        assert segment.kind == 'L'

    def test_command_case_insensitive(self):
        """Commands are matched without regard to case."""
        assert isinstance(parse_segment_record('line 0 0 1 1'), LineSegment)

    def test_arc_with_center(self):
        """ARC3 records keep all points and the sense."""
        segment = parse_segment_record(ARC)
        assert isinstance(segment, ArcSegment)
        assert segment.clockwise is False
        assert segment.center == Point(0, 0)
        assert segment.pm == Point(3.5355, 3.5355)
        assert segment.kind == 'CCW'
        assert segment.start_vector is None

    def test_arc_vectors_cached(self):
        """Trailing center vectors are kept for reference."""
        segment = parse_segment_record('ARC3_CW 5 0   3.5 3.5   0 5   0 0   -5 0   0 -5')
        assert segment.clockwise is True
        assert segment.start_vector == Point(-5, 0)
        assert segment.end_vector == Point(0, -5)

    def test_arc_without_center(self):
        """Six numbers are not enough for an arc."""
        with pytest.raises(MissingArcCenter) as exc:
            parse_segment_record('ARC3_CW 0 5   3.5 3.5   5 0', 2)
        assert isinstance(exc.value, MalformedSegment)
        assert exc.value.index == 2
        assert 'Segment 02' in str(exc.value)

    def test_arc_with_partial_vectors(self):
        """Some but not all vector numbers are rejected."""
        with pytest.raises(MalformedSegment, match='incomplete radial vectors'):
            parse_segment_record('ARC3_CW 5 0   3.5 3.5   0 5   0 0   -5 0')

    def test_line_too_short(self):
        """LINE needs four numbers."""
        with pytest.raises(MalformedSegment):
            parse_segment_record('LINE 0 0 1')

    def test_line_too_long(self):
        """Extra numbers on a LINE are rejected, not dropped."""
        with pytest.raises(MalformedSegment, match="got 5"):
            parse_segment_record('LINE 0 0 1 1 7')

    def test_arc_too_long(self):
        """An arc takes at most twelve numbers."""
        with pytest.raises(MalformedSegment, match="at most 12"):
            parse_segment_record('ARC3_CW 5 0   3.5 3.5   0 5   0 0   -5 0   0 -5   1')

    def test_arc_too_short(self):
        """An arc with only a start point is malformed."""
        with pytest.raises(MalformedSegment):
            parse_segment_record('ARC3_CCW 0 0 1 1')

    def test_unknown_command(self):
        """Other commands are rejected."""
        with pytest.raises(MalformedSegment, match='unknown command'):
            parse_segment_record('G01 0 0 1 1')

    def test_bad_number(self):
        """Non-numeric fields are rejected with the record attached."""
        with pytest.raises(MalformedSegment) as exc:
            parse_segment_record('LINE 0 0 1,5 2')
        assert exc.value.record == 'LINE 0 0 1,5 2'

    def test_non_finite_number(self):
        """NaN and infinity are rejected."""
        with pytest.raises(MalformedSegment):
            parse_segment_record('LINE 0 0 nan 2')


class TestParseProfile:
    """Tests for whole profiles."""

    def test_text_block(self):
        """A text block is split into records; blank lines are ignored."""
        segments = parse_profile('LINE 0 0 0 10\n\n  \nLINE 0 10 10 10\n')
        assert len(segments) == 2
        assert [s.source_index for s in segments] == [0, 1]

    def test_list_of_lines(self):
        """A list of records is accepted."""
        segments = parse_profile(['LINE 0 0 0 10', ARC])
        assert isinstance(segments[1], ArcSegment)

    def test_error_reports_position(self):
        """The failing record's position is reported."""
        with pytest.raises(MalformedSegment) as exc:
            parse_profile(['LINE 0 0 0 10', 'LINE 0 10 10 10', 'ARC3_CW 0 5 3.5 3.5 5 0'])
        assert exc.value.index == 2

    def test_empty_profile(self):
        """No records, no segments."""
        assert parse_profile('') == []


class TestFormatting:
    """Tests for number and record output."""

    def test_integral_values_drop_decimals(self):
        """Whole numbers print without a decimal part."""
        assert format_coordinate(10.0) == '10'
        assert format_coordinate(-0.0) == '0'

    def test_shortest_round_trip(self):
        """Fractions print in their shortest exact form."""
        assert format_coordinate(0.1 + 0.2) == '0.30000000000000004'
        assert format_coordinate(2.5) == '2.5'

    def test_fixed_precision(self):
        """A precision gives fixed decimals without negative zero."""
        assert format_coordinate(1.5, 3) == '1.500'
        assert format_coordinate(-0.0001, 3) == '0.000'

    def test_short_and_signed(self):
        """Trace numbers use up to three decimals."""
        assert format_short(0.8) == '0.8'
        assert format_short(-0.0001) == '0'
        assert format_signed(1.0) == '+1'
        assert format_signed(-0.25) == '-0.25'

    def test_line_record(self):
        """Lines format as LINE x1 z1   x2 z2."""
        assert format_segment(LineSegment(Point(1, 0), Point(1, 9))) == 'LINE 1 0   1 9'

    def test_arc_record_derives_vectors(self):
        """Arc records carry the center and center-minus-endpoint vectors."""
        arc = ArcSegment(Point(0, 5), Point(3.5, 3.5), Point(5, 0), Point(0, 0), clockwise=False)
        assert format_segment(arc) == 'ARC3_CCW 0 5   3.5 3.5   5 0   0 0   0 -5   -5 0'

    def test_profile_parses_back(self):
        """Formatted records read back to the same segments."""
        segments = parse_profile(['LINE 0 0 0 10', 'ARC3_CW 5 0 3.5 3.5 0 5 0 0'])
        again = parse_profile(format_profile(segments))
        assert [(s.p1, s.p2) for s in again] == [(s.p1, s.p2) for s in segments]
        assert again[1].clockwise is True
