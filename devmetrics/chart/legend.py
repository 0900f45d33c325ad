"""Legend projection over the original slices."""

from __future__ import annotations

from collections.abc import Iterable

from devmetrics.models.chart import LegendEntry, Slice


def build_legend(slices: Iterable[Slice]) -> list[LegendEntry]:
    """One entry per slice, zero-value slices included, in input order.

    Unlike the segment list, the legend keeps empty categories so the reader
    can see that a status exists with a count of 0.
    """
    return [LegendEntry(label=sl.label, value=sl.value, color=sl.color) for sl in slices]
