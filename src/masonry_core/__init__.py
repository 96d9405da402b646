"""Masonry layout: pack variably sized items into parallel lines."""

from .config import MasonryConfig, parse_lines
from .engine import LayoutComputation, build_layout
from .host import MasonryHost
from .items import DataItem, StaticItem, items_from_data
from .models import Adaptive, AtLeast, AtMost, Axis, Fixed, PlacementPolicy, Size, Spacing
from .partition import LinePartition, partition
from .scheduler import LayoutState, place_item, schedule
from .sizing import ContentSize, LayoutResult, Placement, layout_pass, negotiate

__all__ = [
    "Adaptive",
    "AtLeast",
    "AtMost",
    "Axis",
    "ContentSize",
    "DataItem",
    "Fixed",
    "LayoutComputation",
    "LayoutResult",
    "LayoutState",
    "LinePartition",
    "MasonryConfig",
    "MasonryHost",
    "Placement",
    "PlacementPolicy",
    "Size",
    "Spacing",
    "StaticItem",
    "build_layout",
    "items_from_data",
    "layout_pass",
    "negotiate",
    "parse_lines",
    "partition",
    "place_item",
    "schedule",
]
