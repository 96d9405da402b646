from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .config import MasonryConfig, parse_lines
from .items import StaticItem
from .models import PlacementPolicy, Size


@dataclass
class Scenario:
    config: MasonryConfig
    container: Size
    items: List[StaticItem]


def _optional_float(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else float(value)


def _item_from_data(index: int, raw: Any) -> StaticItem:
    if isinstance(raw, (int, float)):
        return StaticItem(extent=float(raw))
    if not isinstance(raw, dict) or "extent" not in raw:
        raise ValueError(f"item {index} needs an extent")
    span = raw.get("span")
    return StaticItem(
        extent=float(raw["extent"]),
        span=None if span is None else parse_lines(span),
        key=raw.get("key"),
    )


def scenario_from_data(
    data: Dict[str, Any], placement: Union[str, PlacementPolicy, None] = None
) -> Scenario:
    if not isinstance(data, dict):
        raise ValueError("scenario must be a mapping")
    config = MasonryConfig.build(
        data.get("axis", "vertical"),
        data.get("lines", 2),
        spacing=_optional_float(data, "spacing"),
        horizontal_spacing=_optional_float(data, "horizontal_spacing"),
        vertical_spacing=_optional_float(data, "vertical_spacing"),
        placement=placement if placement is not None else data.get("placement"),
    )
    dims = data.get("container", {})
    container = Size(width=float(dims.get("width", 0)), height=float(dims.get("height", 0)))
    items = [_item_from_data(idx, raw) for idx, raw in enumerate(data.get("items", []))]
    return Scenario(config=config, container=container, items=items)


def load_scenario(
    path: Union[str, Path], placement: Union[str, PlacementPolicy, None] = None
) -> Scenario:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return scenario_from_data(data, placement=placement)
