from __future__ import annotations

import math
from typing import Optional

from .models import AtLeast, Fixed, Lines, constraint_of
from .partition import LinePartition
from .units import Extent, finite_or_zero, safe_int

DEFAULT_SPAN = Fixed(1)


def clamp_span(span: int, count: int) -> int:
    return min(max(span, 1), count)


def requested_span(request: Optional[Lines], thickness: Extent) -> int:
    """Lines asked for by ``request``, before clamping."""
    if request is None:
        request = DEFAULT_SPAN
    if isinstance(request, Fixed):
        return int(request.count)
    if thickness <= 0:
        return 0
    constraint = constraint_of(request)
    quotient = finite_or_zero(constraint.length / thickness)
    if isinstance(constraint, AtLeast):
        return safe_int(math.floor(quotient))
    return safe_int(math.ceil(quotient))


def resolve_span(request: Optional[Lines], lines: LinePartition) -> int:
    return clamp_span(requested_span(request, lines.thickness), lines.count)


def span_extent(span: int, lines: LinePartition) -> Extent:
    """Cross-axis size of ``span`` lines, including the gaps between them."""
    if lines.thickness <= 0:
        return 0.0
    return (lines.thickness + lines.spacing) * span - lines.spacing


def cross_extent_for(request: Optional[Lines], lines: LinePartition) -> Extent:
    return span_extent(resolve_span(request, lines), lines)


def span_from_extent(cross_extent: Extent, lines: LinePartition) -> int:
    """Recover the span of an item from its measured cross-axis size."""
    pitch = lines.thickness + lines.spacing
    if pitch <= 0:
        return 1
    value = (cross_extent + lines.spacing) / pitch
    if not math.isfinite(value):
        return 1
    return clamp_span(int(round(value)), lines.count)
