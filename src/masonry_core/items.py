"""Items placed by a masonry.

An item only has to answer ``measure(cross_size)`` with its natural extent
along the primary axis once its cross-axis size is fixed. It may also offer
``span_request()`` returning a :class:`~masonry_core.models.Fixed` or
:class:`~masonry_core.models.Adaptive` span, and a ``key`` identifying it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, List, Optional, Protocol, Union

from .models import Lines

logger = logging.getLogger(__name__)

ExtentSource = Union[float, Callable[[float], float]]


class MasonryItem(Protocol):
    def measure(self, cross_size: float) -> float:
        ...


@dataclass(frozen=True)
class StaticItem:
    """An item with a constant extent or an extent computed from its width."""

    extent: ExtentSource
    span: Optional[Lines] = None
    key: Optional[Hashable] = None

    def measure(self, cross_size: float) -> float:
        if callable(self.extent):
            return self.extent(cross_size)
        return float(self.extent)

    def span_request(self) -> Optional[Lines]:
        return self.span


@dataclass(frozen=True)
class DataItem:
    """An element of a caller's data list with its identity resolved."""

    element: Any
    key: Hashable
    measure_element: Callable[[Any, float], float]
    line_span: Optional[Callable[[Any], Lines]] = None

    def measure(self, cross_size: float) -> float:
        return self.measure_element(self.element, cross_size)

    def span_request(self) -> Optional[Lines]:
        if self.line_span is None:
            return None
        return self.line_span(self.element)


def _default_id(element: Any) -> Hashable:
    return getattr(element, "id")


def items_from_data(
    data: Iterable[Any],
    measure: Callable[[Any, float], float],
    *,
    id: Optional[Callable[[Any], Hashable]] = None,
    line_span: Optional[Callable[[Any], Lines]] = None,
) -> List[DataItem]:
    """Wrap data elements as items; ``id`` defaults to the element's ``id``."""
    key_of = id or _default_id
    return [
        DataItem(element=element, key=key_of(element), measure_element=measure, line_span=line_span)
        for element in data
    ]


def span_request_of(item: MasonryItem) -> Optional[Lines]:
    getter = getattr(item, "span_request", None)
    if getter is None:
        return None
    return getter()


def key_of(item: MasonryItem, index: int) -> Hashable:
    key = getattr(item, "key", None)
    return index if key is None else key


def measure_item(item: MasonryItem, cross_size: float) -> float:
    """Natural primary-axis extent, clamped to a finite non-negative value."""
    extent = float(item.measure(cross_size))
    if not math.isfinite(extent) or extent < 0:
        logger.debug("Clamping measured extent %r of %r to 0", extent, item)
        return 0.0
    return extent
