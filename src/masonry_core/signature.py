from __future__ import annotations

from typing import List, Tuple

from .sizing import LayoutResult

Rect = Tuple[float, float, float, float]


def canonicalize(frames: List[Rect], eps: float = 1e-6) -> List[Rect]:
    canonical = []
    for x, y, w, h in frames:
        canonical.append(
            (
                round(x / eps) * eps,
                round(y / eps) * eps,
                round(w / eps) * eps,
                round(h / eps) * eps,
            )
        )
    return canonical


def layout_signature(result: LayoutResult, eps: float = 1e-6) -> tuple:
    """Comparable summary of a layout; equal for identical passes."""
    frames = canonicalize([placement.frame for placement in result.placements], eps=eps)
    keys = tuple((p.key, p.line, p.span) for p in result.placements)
    content = result.content
    return (
        result.lines.count,
        round(content.primary / eps) * eps,
        round(content.cross / eps) * eps,
        keys,
        tuple(frames),
    )
