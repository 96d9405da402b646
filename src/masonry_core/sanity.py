from __future__ import annotations

from typing import Tuple

from .models import Axis
from .sizing import LayoutResult

Rect = Tuple[float, float, float, float]

EPS = 1e-6


def _overlaps(a: Rect, b: Rect, eps: float) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= eps or ah <= eps or bw <= eps or bh <= eps:
        return False
    return not (
        ax + aw <= bx + eps
        or bx + bw <= ax + eps
        or ay + ah <= by + eps
        or by + bh <= ay + eps
    )


def has_overlap(result: LayoutResult, eps: float = EPS) -> bool:
    frames = [placement.frame for placement in result.placements]
    for i, a in enumerate(frames):
        for b in frames[i + 1 :]:
            if _overlaps(a, b, eps):
                return True
    return False


def is_out_of_bounds(result: LayoutResult, eps: float = EPS) -> bool:
    """True when an item leaves the band of lines or starts before the edge."""
    content = result.content
    low = content.centering
    high = content.centering + content.cross
    for placement in result.placements:
        x, y, w, h = placement.frame
        if result.axis is Axis.VERTICAL:
            cross_start, cross_size, offset = x, w, y
        else:
            cross_start, cross_size, offset = y, h, x
        if offset < -eps or cross_start < low - eps or cross_start + cross_size > high + eps:
            return True
    return False


def has_span_out_of_range(result: LayoutResult) -> bool:
    count = result.lines.count
    return any(
        not 1 <= placement.span <= count or placement.line + placement.span > count
        for placement in result.placements
    )


def layout_flags(result: LayoutResult, eps: float = EPS) -> set[str]:
    flags: set[str] = set()
    if has_overlap(result, eps):
        flags.add("overlap")
    if is_out_of_bounds(result, eps):
        flags.add("out_of_bounds")
    if has_span_out_of_range(result):
        flags.add("span_out_of_range")
    return flags


def is_sane(result: LayoutResult, eps: float = EPS) -> bool:
    if not result.placements:
        return True
    return not layout_flags(result, eps)
