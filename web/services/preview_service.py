"""SVG preview generation service for profile and offset visualization."""
import math
from typing import List, Tuple

from turning.models import ArcSegment, Point, Segment
from turning.utils.arc_utils import angle_at, directed_sweep, point_at_angle
from turning.utils.svg_arc import generate_svg_arc_command, lathe_to_svg_coords


# Color palette for preview elements
class Colors:
    """SVG color constants for preview elements."""
    PROFILE = '#343a40'       # Dark gray
    OFFSET = '#5a7a8a'        # Teal
    FILLET = '#ff8c00'        # Orange
    START_MARKER = '#5a8a6e'  # Green

    # Background/grid colors
    BACKGROUND = '#f8f9fa'    # Off-white
    GRID = '#e9ecef'          # Light gray
    AXIS_LABEL = '#6c757d'    # Dark gray


class PreviewService:
    """Service for generating SVG previews of turning profiles."""

    # SVG rendering constants
    PADDING = 20
    MAX_SIZE = 800  # pixels along the longer side

    @staticmethod
    def _segment_points(segment: Segment) -> List[Point]:
        """Points bounding a segment (arcs are sampled along their sweep)."""
        if not isinstance(segment, ArcSegment):
            return [segment.p1, segment.p2]
        sweep = directed_sweep(segment.p1, segment.p2, segment.center, segment.clockwise)
        start = angle_at(segment.p1, segment.center)
        sign = -1.0 if segment.clockwise else 1.0
        steps = 16
        return [
            point_at_angle(segment.center, segment.radius, start + sign * sweep * i / steps)
            for i in range(steps + 1)
        ]

    @staticmethod
    def calculate_bounds(chains: List[List[Segment]]) -> Tuple[float, float, float, float]:
        """
        Bounding box of several chains.

        Returns:
            (z_min, z_max, x_min, x_max); a unit box around the origin if empty
        """
        points = [
            p for chain in chains for s in chain for p in PreviewService._segment_points(s)
        ]
        if not points:
            return (0.0, 1.0, 0.0, 1.0)
        z_vals = [p.z for p in points]
        x_vals = [p.x for p in points]
        return (min(z_vals), max(z_vals), min(x_vals), max(x_vals))

    @staticmethod
    def generate_svg(source: List[Segment], offset: List[Segment]) -> str:
        """
        Generate SVG markup showing a profile and its offset path.

        Args:
            source: Original profile chain
            offset: Compensated chain

        Returns:
            Complete SVG markup string
        """
        padding = PreviewService.PADDING
        z_min, z_max, x_min, x_max = PreviewService.calculate_bounds([source, offset])
        span = max(z_max - z_min, x_max - x_min, 1e-6)
        scale = PreviewService.MAX_SIZE / span

        svg_width = (z_max - z_min) * scale + padding * 2
        svg_height = (x_max - x_min) * scale + padding * 2

        svg_parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {svg_width:.2f} {svg_height:.2f}" '
            f'width="{svg_width:.2f}" height="{svg_height:.2f}" style="background: {Colors.BACKGROUND};">'
        ]

        PreviewService._draw_axes(svg_parts, z_min, z_max, x_min, x_max, padding, scale)
        PreviewService._draw_chain(svg_parts, source, z_min, x_max, padding, scale, Colors.PROFILE, dashed=False)
        PreviewService._draw_chain(svg_parts, offset, z_min, x_max, padding, scale, Colors.OFFSET, dashed=True)
        PreviewService._draw_fillets(svg_parts, offset, z_min, x_max, padding, scale)

        if source:
            sx, sy = lathe_to_svg_coords(source[0].p1, z_min, x_max, scale, padding)
            svg_parts.append(f'<circle cx="{sx:.4f}" cy="{sy:.4f}" r="4" fill="{Colors.START_MARKER}"/>')

        svg_parts.append('</svg>')
        return ''.join(svg_parts)

    @staticmethod
    def _draw_axes(
        svg_parts: List[str],
        z_min: float,
        z_max: float,
        x_min: float,
        x_max: float,
        padding: float,
        scale: float
    ) -> None:
        """Draw the Z and X axis lines when they fall inside the view, plus labels."""
        width = (z_max - z_min) * scale
        height = (x_max - x_min) * scale
        if x_min <= 0 <= x_max:
            y = padding + x_max * scale
            svg_parts.append(
                f'<line x1="{padding}" y1="{y:.4f}" x2="{padding + width:.4f}" y2="{y:.4f}" '
                f'stroke="{Colors.GRID}" stroke-width="1"/>'
            )
        if z_min <= 0 <= z_max:
            x = padding - z_min * scale
            svg_parts.append(
                f'<line x1="{x:.4f}" y1="{padding}" x2="{x:.4f}" y2="{padding + height:.4f}" '
                f'stroke="{Colors.GRID}" stroke-width="1"/>'
            )
        svg_parts.append(
            f'<text x="{padding + width:.4f}" y="{padding + height + 15:.4f}" font-size="12" '
            f'fill="{Colors.AXIS_LABEL}" text-anchor="end" font-family="Arial, sans-serif">Z</text>'
        )
        svg_parts.append(
            f'<text x="{padding - 5}" y="{padding + 4}" font-size="12" '
            f'fill="{Colors.AXIS_LABEL}" text-anchor="end" font-family="Arial, sans-serif">X</text>'
        )

    @staticmethod
    def _draw_chain(
        svg_parts: List[str],
        segments: List[Segment],
        z_min: float,
        x_max: float,
        padding: float,
        scale: float,
        color: str,
        dashed: bool
    ) -> None:
        """Draw a chain as one SVG path per continuous run."""
        if not segments:
            return

        commands = []
        previous_end = None
        for segment in segments:
            if previous_end is None or math.hypot(
                segment.p1.x - previous_end.x, segment.p1.z - previous_end.z
            ) > 1e-9:
                sx, sy = lathe_to_svg_coords(segment.p1, z_min, x_max, scale, padding)
                commands.append(f"M {sx:.4f} {sy:.4f}")
            if isinstance(segment, ArcSegment):
                commands.append(generate_svg_arc_command(segment, z_min, x_max, scale, padding))
            else:
                ex, ey = lathe_to_svg_coords(segment.p2, z_min, x_max, scale, padding)
                commands.append(f"L {ex:.4f} {ey:.4f}")
            previous_end = segment.p2

        dash = ' stroke-dasharray="6,3"' if dashed else ''
        svg_parts.append(
            f'<path d="{" ".join(commands)}" fill="none" stroke="{color}" stroke-width="2"{dash}/>'
        )

    @staticmethod
    def _draw_fillets(
        svg_parts: List[str],
        segments: List[Segment],
        z_min: float,
        x_max: float,
        padding: float,
        scale: float
    ) -> None:
        """Mark inserted fillet centers."""
        for segment in segments:
            if isinstance(segment, ArcSegment) and segment.source_index < 0:
                cx, cy = lathe_to_svg_coords(segment.center, z_min, x_max, scale, padding)
                svg_parts.append(
                    f'<circle cx="{cx:.4f}" cy="{cy:.4f}" r="3" fill="none" '
                    f'stroke="{Colors.FILLET}" stroke-width="1"/>'
                )
