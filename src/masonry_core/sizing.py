"""Two-phase sizing: measure items at their line size, then settle.

A layout pass offers each item the cross-axis size of the lines it spans
and reads back its natural primary-axis extent. Once every item is placed,
the pass settles into a :class:`ContentSize`, which the masonry reports to
its parent as a fixed primary-axis size and a flexible cross-axis size.
Reporting a new size may change the container, so :func:`negotiate` repeats
passes until the reported frame stops changing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from .config import MasonryConfig
from .items import MasonryItem, key_of, measure_item, span_request_of
from .models import Axis, Size
from .partition import LinePartition, partition
from .scheduler import LayoutState, Slot, schedule
from .settings import default_max_passes
from .span import cross_extent_for
from .units import Extent

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class MeasuredItem:
    index: int
    key: Hashable
    cross_extent: Extent
    extent: Extent


@dataclass(frozen=True)
class Placement:
    index: int
    key: Hashable
    line: int
    span: int
    offset: Extent
    extent: Extent
    cross_extent: Extent
    frame: Rect

    @property
    def lines(self) -> range:
        return range(self.line, self.line + self.span)


@dataclass(frozen=True)
class ContentSize:
    primary: Extent
    cross: Extent
    centering: Extent

    def size(self, axis: Axis) -> Size:
        return Size.from_axes(axis, primary=self.primary, cross=self.cross)


@dataclass(frozen=True)
class ReportedFrame:
    """Size a masonry asks of its parent; ``None`` means flexible."""

    width: Optional[Extent]
    height: Optional[Extent]

    @classmethod
    def for_content(cls, axis: Axis, content: ContentSize) -> "ReportedFrame":
        if axis is Axis.VERTICAL:
            return cls(width=None, height=content.primary)
        return cls(width=content.primary, height=None)

    def resolve(self, proposed: Size) -> Size:
        return Size(
            width=proposed.width if self.width is None else self.width,
            height=proposed.height if self.height is None else self.height,
        )


@dataclass(frozen=True)
class LayoutResult:
    config: MasonryConfig
    container: Size
    lines: LinePartition
    state: LayoutState
    placements: Tuple[Placement, ...]
    content: ContentSize

    @property
    def axis(self) -> Axis:
        return self.config.axis

    @property
    def content_size(self) -> Size:
        return self.content.size(self.axis)

    @property
    def frame(self) -> ReportedFrame:
        return ReportedFrame.for_content(self.axis, self.content)


@dataclass(frozen=True)
class Negotiation:
    result: LayoutResult
    frame: ReportedFrame
    container: Size
    passes: int
    converged: bool


def measure_items(items: Iterable[MasonryItem], lines: LinePartition) -> List[MeasuredItem]:
    """Measurement phase: offer each item its line size and read its extent."""
    measured: List[MeasuredItem] = []
    for index, item in enumerate(items):
        cross_extent = cross_extent_for(span_request_of(item), lines)
        measured.append(
            MeasuredItem(
                index=index,
                key=key_of(item, index),
                cross_extent=cross_extent,
                extent=measure_item(item, cross_extent),
            )
        )
    return measured


def _frame(axis: Axis, cross_origin: Extent, item: MeasuredItem, offset: Extent) -> Rect:
    if axis is Axis.VERTICAL:
        return (cross_origin, offset, item.cross_extent, item.extent)
    return (offset, cross_origin, item.extent, item.cross_extent)


def settle(
    axis: Axis,
    container_cross: Extent,
    lines: LinePartition,
    measured: Sequence[MeasuredItem],
    slots: Sequence[Slot],
) -> Tuple[Tuple[Placement, ...], ContentSize]:
    """Settlement phase: bound the placed items and center the lines."""
    cross = lines.cross_extent
    centering = max((container_cross - cross) / 2, 0.0)
    primary = max((slot.offset + item.extent for item, slot in zip(measured, slots)), default=0.0)
    placements = tuple(
        Placement(
            index=item.index,
            key=item.key,
            line=slot.line,
            span=slot.span,
            offset=slot.offset,
            extent=item.extent,
            cross_extent=item.cross_extent,
            frame=_frame(axis, centering + lines.line_origin(slot.line), item, slot.offset),
        )
        for item, slot in zip(measured, slots)
    )
    return placements, ContentSize(primary=primary, cross=cross, centering=centering)


def layout_pass(config: MasonryConfig, items: Iterable[MasonryItem], container: Size) -> LayoutResult:
    """Run one pass from a fresh layout state."""
    axis = config.axis
    container_cross = max(container.across(axis), 0.0)
    lines = partition(container_cross, config.cross_spacing, config.lines)
    measured = measure_items(items, lines)
    state, slots = schedule(
        ((item.cross_extent, item.extent) for item in measured),
        config.placement,
        lines,
        config.primary_spacing,
    )
    placements, content = settle(axis, container_cross, lines, measured, slots)
    return LayoutResult(
        config=config,
        container=container,
        lines=lines,
        state=state,
        placements=placements,
        content=content,
    )


def negotiate(
    config: MasonryConfig,
    items: Iterable[MasonryItem],
    proposed: Size,
    max_passes: Optional[int] = None,
) -> Negotiation:
    """Repeat layout passes until the reported frame is stable."""
    limit = max_passes if max_passes is not None else default_max_passes()
    limit = max(limit, 1)
    items = list(items)
    container = proposed
    result = layout_pass(config, items, container)
    passes = 1
    while True:
        frame = result.frame
        settled = frame.resolve(proposed)
        if settled == container:
            converged = True
            break
        if passes >= limit:
            converged = False
            logger.warning("Masonry size did not settle after %d passes", passes)
            break
        container = settled
        result = layout_pass(config, items, container)
        passes += 1
    logger.debug("Negotiated %s after %d pass(es)", container, passes)
    return Negotiation(
        result=result,
        frame=frame,
        container=container,
        passes=passes,
        converged=converged,
    )
