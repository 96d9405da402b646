from __future__ import annotations

from typing import List

from .sizing import LayoutResult


def line_extents(result: LayoutResult) -> List[float]:
    """Primary-axis extent occupied on each line, trailing spacing excluded."""
    extents = [0.0] * result.lines.count
    for placement in result.placements:
        far_edge = placement.offset + placement.extent
        for line in placement.lines:
            extents[line] = max(extents[line], far_edge)
    return extents


def raggedness(result: LayoutResult) -> float:
    """Difference between the longest and the shortest line."""
    extents = line_extents(result)
    if not extents:
        return 0.0
    return max(extents) - min(extents)


def fill_ratio(result: LayoutResult) -> float:
    """Share of the content box covered by items."""
    content = result.content
    area = content.primary * content.cross
    if area <= 0:
        return 0.0
    covered = sum(p.extent * p.cross_extent for p in result.placements)
    return max(0.0, min(1.0, covered / area))
