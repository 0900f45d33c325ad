"""Re-parse emitted path data with svgpathtools to check its shape."""

from __future__ import annotations

import logging

from svgpathtools import Arc, Path, parse_path

logger = logging.getLogger(__name__)

# Start/end gap below which a path counts as closed (canvas units).
_CLOSE_TOL = 1e-3


def parse_segment_path(d: str) -> Path:
    """Parse a path command string into an svgpathtools Path."""
    return parse_path(d)


def arc_count(path: Path) -> int:
    return sum(1 for seg in path if isinstance(seg, Arc))


def is_closed_ring(d: str) -> bool:
    """True if ``d`` is a closed outline made of exactly two arcs."""
    try:
        path = parse_segment_path(d)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return False
    if len(path) == 0:
        return False
    closed = abs(path.start - path.end) < _CLOSE_TOL
    return closed and arc_count(path) == 2
