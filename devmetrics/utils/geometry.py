"""Leaf-node geometry helpers. No chart imports."""

from __future__ import annotations

import numpy as np


def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Map a clockwise angle (0° = top, 90° = right) to canvas coordinates.

    SVG y grows downward, hence ``cy - r·cos θ``.
    """
    theta = np.deg2rad(angle_deg)
    return (
        float(cx + radius * np.sin(theta)),
        float(cy - radius * np.cos(theta)),
    )
