"""Chart geometry constants and rendering theme."""

from __future__ import annotations

from dataclasses import dataclass

# The semi-donut spans the right half of the circle: 0° (top) → 180° (bottom).
ARC_SPAN_DEG = 180.0

# Accumulated float drift allowed before the final end angle is snapped.
ANGLE_SNAP_TOL = 1e-9


@dataclass(frozen=True)
class ChartConfig:
    """Layout of the canvas that surrounds the arc."""

    # Canvas box = outer_radius * 2 * padding_factor; center sits at radius * padding_factor.
    padding_factor: float = 1.1
    # Extra pixels below the center line so the stroke is not clipped.
    bottom_margin: float = 5.0


@dataclass(frozen=True)
class ChartTheme:
    """Colors used by the SVG renderer. Passed explicitly at render time."""

    # Outline color; the dashboard passes its card background here.
    stroke: str = "#1e1e1e"
    stroke_width: float = 2.0
    text_color: str = "#e0e0e0"
    font_family: str = "Inter, sans-serif"
