"""Error types raised by the chart engine."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Chart input cannot be laid out (bad radius, ratio, or slice value).

    Raised before any geometry is computed, so callers never see a partial
    segment list.
    """
