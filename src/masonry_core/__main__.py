from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .engine import LayoutComputation, build_layout
from .scenario import load_scenario
from .units import format_float

logger = logging.getLogger("masonry_core")


def format_computation(computation: LayoutComputation) -> List[str]:
    lines = []
    for placement in computation.placements:
        x, y, w, h = placement.frame
        lines.append(
            f"{placement.key}: line {placement.line} span {placement.span} "
            f"at ({format_float(x)}, {format_float(y)}) "
            f"size {format_float(w)} x {format_float(h)}"
        )
    size = computation.content_size
    lines.append(
        f"content {format_float(size.width)} x {format_float(size.height)} "
        f"({computation.result.lines.count} lines, {computation.passes} passes)"
    )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Lay out a masonry scenario")
    parser.add_argument("scenario", help="YAML file describing the container and items")
    parser.add_argument("--placement", choices=["fill", "order"], help="override the placement policy")
    parser.add_argument("--preview", help="save a PNG preview to this path")
    parser.add_argument("--verbose", action="store_true", help="log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = load_scenario(args.scenario, placement=args.placement)
    except (OSError, ValueError, TypeError, yaml.YAMLError):
        logger.exception("Failed to load scenario %s", args.scenario)
        return 1

    computation = build_layout(scenario.config, scenario.items, scenario.container)
    for line in format_computation(computation):
        print(line)

    if args.preview:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from .preview import draw_layout

        fig, ax = plt.subplots()
        draw_layout(ax, computation.result)
        fig.savefig(args.preview)
        plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
