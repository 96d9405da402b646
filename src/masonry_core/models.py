from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from .units import Extent, finite_or_zero


class Axis(enum.Enum):
    """Direction in which packed content grows."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, value: Union[str, "Axis"]) -> "Axis":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown axis: {value!r}") from None


class PlacementPolicy(enum.Enum):
    """How the next item picks its line."""

    FILL = "fill"
    ORDER = "order"

    @classmethod
    def parse(cls, value: Union[str, "PlacementPolicy"]) -> "PlacementPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown placement policy: {value!r}") from None


@dataclass(frozen=True)
class AtLeast:
    length: Extent


@dataclass(frozen=True)
class AtMost:
    length: Extent


SizeConstraint = Union[AtLeast, AtMost]


@dataclass(frozen=True)
class Fixed:
    """A constant number of lines."""

    count: int


@dataclass(frozen=True)
class Adaptive:
    """A line count derived from a thickness bound.

    ``minimum`` alone behaves as ``AtLeast``, ``maximum`` alone as ``AtMost``.
    With both, the count comes from ``minimum`` and the line thickness is
    capped at ``maximum``.
    """

    minimum: Optional[Extent] = None
    maximum: Optional[Extent] = None

    def __post_init__(self) -> None:
        if self.minimum is None and self.maximum is None:
            raise ValueError("Adaptive needs a minimum or a maximum")

    @property
    def constraint(self) -> SizeConstraint:
        if self.minimum is not None:
            return AtLeast(self.minimum)
        return AtMost(self.maximum)  # type: ignore[arg-type]

    @property
    def is_two_sided(self) -> bool:
        return self.minimum is not None and self.maximum is not None


Lines = Union[Fixed, Adaptive, AtLeast, AtMost]


def constraint_of(lines: Union[Adaptive, SizeConstraint]) -> SizeConstraint:
    """Thickness bound behind a non-fixed policy; a bare bound is its own."""
    if isinstance(lines, (AtLeast, AtMost)):
        return lines
    return lines.constraint


@dataclass(frozen=True)
class Size:
    width: Extent
    height: Extent

    def along(self, axis: Axis) -> Extent:
        """Extent in the direction content grows."""
        return self.height if axis is Axis.VERTICAL else self.width

    def across(self, axis: Axis) -> Extent:
        """Extent subdivided into lines."""
        return self.width if axis is Axis.VERTICAL else self.height

    @classmethod
    def from_axes(cls, axis: Axis, primary: Extent, cross: Extent) -> "Size":
        if axis is Axis.VERTICAL:
            return cls(width=cross, height=primary)
        return cls(width=primary, height=cross)


@dataclass(frozen=True)
class Spacing:
    horizontal: Extent = 0.0
    vertical: Extent = 0.0

    def __post_init__(self) -> None:
        for name in ("horizontal", "vertical"):
            value = finite_or_zero(float(getattr(self, name)))
            object.__setattr__(self, name, max(value, 0.0))

    def across(self, axis: Axis) -> Extent:
        """Gap between adjacent lines."""
        return self.horizontal if axis is Axis.VERTICAL else self.vertical

    def along(self, axis: Axis) -> Extent:
        """Gap between consecutive items in one line."""
        return self.vertical if axis is Axis.VERTICAL else self.horizontal
