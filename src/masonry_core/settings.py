from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV = "MASONRY_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "spacing": 8.0,
    "placement": "fill",
    "max_passes": 4,
}


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


def _coerce(key: str, value: Any) -> Any:
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, str):
        return str(value).strip().lower()
    try:
        return type(default)(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value %r for setting %s", value, key)
        return default


@lru_cache(maxsize=None)
def load_settings() -> Dict[str, Any]:
    """Load masonry defaults from ``settings.yaml`` when available."""

    data = dict(DEFAULT_SETTINGS)
    path = settings_path()
    if not os.path.exists(path):
        return data
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        logger.warning("Settings file %s is not a mapping", path)
        return data
    for key, value in loaded.items():
        if key in DEFAULT_SETTINGS:
            data[key] = _coerce(key, value)
    return data


def default_spacing() -> float:
    return float(load_settings()["spacing"])


def default_placement() -> str:
    return str(load_settings()["placement"])


def default_max_passes() -> int:
    return max(int(load_settings()["max_passes"]), 1)
