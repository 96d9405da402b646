"""Assign items to lines one at a time.

Per-line cursors hold the primary-axis extent already consumed as a
non-positive running offset: an empty line sits at ``0`` and a line holding
a 10 unit item followed by 8 units of spacing sits at ``-18``. The larger a
cursor, the more room the line has left.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .models import PlacementPolicy
from .partition import LinePartition
from .span import span_from_extent
from .units import Extent

ORDER_START_INDEX = -1


@dataclass(frozen=True)
class LayoutState:
    cursors: Tuple[float, ...]
    index: int
    span: int = 1

    @classmethod
    def initial(cls, count: int, policy: PlacementPolicy) -> "LayoutState":
        start = 0 if policy is PlacementPolicy.FILL else ORDER_START_INDEX
        return cls(cursors=(0.0,) * count, index=start, span=1)

    @property
    def count(self) -> int:
        return len(self.cursors)


@dataclass(frozen=True)
class Slot:
    """Where one item landed: its first line, span and limiting cursor."""

    line: int
    span: int
    cursor: float

    @property
    def offset(self) -> Extent:
        """Distance from the leading edge along the primary axis."""
        return 0.0 - self.cursor

    @property
    def lines(self) -> range:
        return range(self.line, self.line + self.span)


def window_limits(cursors: Tuple[float, ...], span: int) -> np.ndarray:
    """Most advanced cursor of each run of ``span`` contiguous lines."""
    values = np.asarray(cursors, dtype=float)
    return sliding_window_view(values, span).min(axis=1)


def _fill_start(state: LayoutState, span: int) -> Tuple[int, float]:
    limits = window_limits(state.cursors, span)
    assert limits.size > 0, "fill placement needs at least one candidate line"
    # argmax keeps the first maximum, so ties go to the lowest line.
    index = int(np.argmax(limits))
    return index, float(limits[index])


def _advance(state: LayoutState, index: int, span: int, far_edge: float) -> LayoutState:
    cursors = list(state.cursors)
    for line in range(index, index + span):
        cursors[line] = far_edge
    return replace(state, cursors=tuple(cursors), index=index, span=span)


def place_fill(
    state: LayoutState,
    lines: LinePartition,
    cross_extent: Extent,
    extent: Extent,
    primary_spacing: Extent,
) -> Tuple[LayoutState, Slot]:
    """Put the item where the lines it covers have the most room."""
    span = span_from_extent(cross_extent, lines)
    index, cursor = _fill_start(state, span)
    far_edge = cursor - extent - primary_spacing
    return _advance(state, index, span, far_edge), Slot(index, span, cursor)


def place_order(
    state: LayoutState,
    lines: LinePartition,
    cross_extent: Extent,
    extent: Extent,
    primary_spacing: Extent,
) -> Tuple[LayoutState, Slot]:
    """Put the item on the line after the previous one, wrapping at the end."""
    index = state.index + state.span
    span = span_from_extent(cross_extent, lines)
    if index + span > state.count:
        index = 0
    cursor = min(state.cursors[index : index + span])
    far_edge = cursor - extent - primary_spacing
    return _advance(state, index, span, far_edge), Slot(index, span, cursor)


def place_item(
    state: LayoutState,
    policy: PlacementPolicy,
    lines: LinePartition,
    cross_extent: Extent,
    extent: Extent,
    primary_spacing: Extent,
) -> Tuple[LayoutState, Slot]:
    if policy is PlacementPolicy.FILL:
        return place_fill(state, lines, cross_extent, extent, primary_spacing)
    return place_order(state, lines, cross_extent, extent, primary_spacing)


def schedule(
    measured: Iterable[Tuple[Extent, Extent]],
    policy: PlacementPolicy,
    lines: LinePartition,
    primary_spacing: Extent,
) -> Tuple[LayoutState, List[Slot]]:
    """Place ``(cross_extent, extent)`` pairs in order from a fresh state."""
    state = LayoutState.initial(lines.count, policy)
    slots: List[Slot] = []
    for cross_extent, extent in measured:
        state, slot = place_item(state, policy, lines, cross_extent, extent, primary_spacing)
        slots.append(slot)
    return state, slots
