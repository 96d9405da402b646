from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union

from .config import MasonryConfig
from .items import MasonryItem
from .metrics import fill_ratio, line_extents, raggedness
from .models import Size
from .sanity import layout_flags
from .signature import layout_signature
from .sizing import LayoutResult, Placement, ReportedFrame, negotiate

logger = logging.getLogger(__name__)

SizeLike = Union[Size, Tuple[float, float]]


def as_size(value: SizeLike) -> Size:
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(width=float(width), height=float(height))


@dataclass
class LayoutComputation:
    result: LayoutResult
    frame: ReportedFrame
    container: Size
    passes: int
    converged: bool
    flags: set[str] = field(default_factory=set)
    metrics: Dict[str, float] = field(default_factory=dict)
    signature: tuple = ()

    @property
    def placements(self) -> Tuple[Placement, ...]:
        return self.result.placements

    @property
    def content_size(self) -> Size:
        return self.result.content_size


def build_layout(
    config: MasonryConfig,
    items: Iterable[MasonryItem],
    container: SizeLike,
    *,
    max_passes: Optional[int] = None,
) -> LayoutComputation:
    """Lay out ``items`` in ``container`` and settle the reported size."""
    negotiation = negotiate(config, items, as_size(container), max_passes=max_passes)
    result = negotiation.result
    flags = layout_flags(result)
    if flags:
        logger.warning("Layout produced inconsistent placements: %s", sorted(flags))
    extents = line_extents(result)
    metrics = {
        "lines": float(result.lines.count),
        "line_thickness": result.lines.thickness,
        "items": float(len(result.placements)),
        "longest_line": max(extents, default=0.0),
        "raggedness": raggedness(result),
        "fill_ratio": fill_ratio(result),
    }
    return LayoutComputation(
        result=result,
        frame=negotiation.frame,
        container=negotiation.container,
        passes=negotiation.passes,
        converged=negotiation.converged,
        flags=flags,
        metrics=metrics,
        signature=layout_signature(result),
    )
