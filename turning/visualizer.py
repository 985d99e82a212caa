import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional, Tuple

from .models import ArcSegment, Segment
from .utils.arc_utils import angle_at, directed_sweep


def sample_arc(arc: ArcSegment, points: int = 32) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample an arc along its directed sweep.

    Args:
        arc: Arc to sample
        points: Number of samples (endpoints included)

    Returns:
        Tuple of (z values, x values)
    """
    sweep = directed_sweep(arc.p1, arc.p2, arc.center, arc.clockwise)
    start = angle_at(arc.p1, arc.center)
    steps = np.linspace(0.0, sweep, points)
    angles = start - steps if arc.clockwise else start + steps

    radius = arc.radius
    x_vals = arc.center.x + radius * np.sin(angles)
    z_vals = arc.center.z + radius * np.cos(angles)
    return z_vals, x_vals


def chain_coordinates(segments: List[Segment], arc_points: int = 32) -> Tuple[np.ndarray, np.ndarray]:
    """Polyline (z, x) coordinates tracing a whole chain."""
    z_parts = []
    x_parts = []
    for segment in segments:
        if isinstance(segment, ArcSegment):
            z_vals, x_vals = sample_arc(segment, arc_points)
        else:
            z_vals = np.array([segment.p1.z, segment.p2.z])
            x_vals = np.array([segment.p1.x, segment.p2.x])
        z_parts.append(z_vals)
        x_parts.append(x_vals)

    if not z_parts:
        return np.array([]), np.array([])
    return np.concatenate(z_parts), np.concatenate(x_parts)


def plot_offset_preview(source: List[Segment], offset: List[Segment],
                        output_file: Optional[str] = None, show: bool = False,
                        dpi: int = 150, font_size: int = 8):
    """
    Plot a source profile and its offset path.

    Z is drawn horizontally and X vertically, as on a lathe drawing.

    Args:
        source: Original profile chain
        offset: Compensated chain
        output_file: Optional path to save the plot
        show: Open an interactive window
        dpi: Plot resolution
        font_size: Font size for annotations

    Returns:
        The matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(10, 6), dpi=dpi)

    z_vals, x_vals = chain_coordinates(source)
    if z_vals.size:
        ax.plot(z_vals, x_vals, color='black', linewidth=1.5, label="Profile")
        ax.plot(source[0].p1.z, source[0].p1.x, 'ko', markersize=4)

    z_vals, x_vals = chain_coordinates(offset)
    if z_vals.size:
        ax.plot(z_vals, x_vals, color='blue', linewidth=1.5, linestyle='--', label="Offset path")

    # Mark fillets so inserted arcs are easy to spot
    for segment in offset:
        if isinstance(segment, ArcSegment) and segment.source_index < 0:
            ax.plot(segment.center.z, segment.center.x, 'r+', markersize=6)
            ax.text(segment.pm.z, segment.pm.x, "fillet", fontsize=font_size, color='red')

    ax.set_xlabel("Z")
    ax.set_ylabel("X")
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, linestyle=':', linewidth=0.5)
    if source or offset:
        ax.legend(fontsize=font_size)

    if output_file:
        fig.savefig(output_file, bbox_inches='tight')
    if show:
        plt.show()

    return fig
