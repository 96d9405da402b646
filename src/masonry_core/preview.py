from __future__ import annotations

from typing import Any

from matplotlib.patches import Rectangle

from .models import Axis
from .sizing import LayoutResult


def draw_layout(ax: Any, result: LayoutResult, *, numbered: bool = True) -> None:
    """Draw the container and every placed item on a matplotlib axes."""
    content = result.content
    container = result.container
    if result.axis is Axis.VERTICAL:
        width = max(container.width, content.cross)
        height = content.primary
    else:
        width = content.primary
        height = max(container.height, content.cross)

    ax.clear()
    ax.set_aspect("equal")
    ax.add_patch(Rectangle((0, 0), width, height, fill=False, edgecolor="black", lw=1.5))

    for placement in result.placements:
        x, y, w, h = placement.frame
        ax.add_patch(
            Rectangle(
                (x, y),
                w,
                h,
                fill=True,
                facecolor="#cfe2f3",
                edgecolor="#0b5394",
                lw=1,
                alpha=0.9,
            )
        )
        if numbered:
            ax.text(
                x + w / 2.0,
                y + h / 2.0,
                str(placement.index + 1),
                ha="center",
                va="center",
                fontsize=9,
                color="#0b5394",
                fontweight="bold",
            )

    ax.set_xlim(0, max(width, 1.0))
    # Items grow downwards from the top edge.
    ax.set_ylim(max(height, 1.0), 0)
    ax.grid(True, linestyle="--", alpha=0.2)
    ax.set_title(f"{result.axis.value} masonry, {result.lines.count} lines")
