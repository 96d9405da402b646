from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .models import Adaptive, AtLeast, AtMost, Axis, Fixed, Lines, PlacementPolicy, Spacing
from .settings import default_placement, default_spacing
from .units import parse_float


def parse_lines(text: Union[str, int, Lines]) -> Lines:
    """Parse a line policy from text.

    ``"3"`` is a fixed count; ``"min=120"``, ``"max=200"`` and
    ``"min=100,max=150"`` are adaptive bounds.
    """
    if isinstance(text, (Fixed, Adaptive, AtLeast, AtMost)):
        return text
    if isinstance(text, int):
        return Fixed(text)
    raw = str(text).strip()
    if not raw:
        raise ValueError("empty line policy")
    if "=" not in raw:
        try:
            return Fixed(int(raw))
        except ValueError:
            raise ValueError(f"invalid line count: {text!r}") from None
    bounds = {}
    for part in raw.split(","):
        key, sep, value = part.partition("=")
        key = key.strip().lower()
        if not sep or key not in ("min", "max") or key in bounds:
            raise ValueError(f"invalid adaptive bound: {part!r}")
        bounds[key] = parse_float(value)
    return Adaptive(minimum=bounds.get("min"), maximum=bounds.get("max"))


def resolve_spacing(
    spacing: Optional[float] = None,
    horizontal_spacing: Optional[float] = None,
    vertical_spacing: Optional[float] = None,
) -> Spacing:
    """Specific spacing wins over the shared value, which wins over the default."""
    shared = spacing if spacing is not None else default_spacing()
    return Spacing(
        horizontal=horizontal_spacing if horizontal_spacing is not None else shared,
        vertical=vertical_spacing if vertical_spacing is not None else shared,
    )


@dataclass(frozen=True)
class MasonryConfig:
    axis: Axis
    lines: Lines
    spacing: Spacing = field(default_factory=resolve_spacing)
    placement: PlacementPolicy = field(
        default_factory=lambda: PlacementPolicy.parse(default_placement())
    )

    @classmethod
    def build(
        cls,
        axis: Union[str, Axis],
        lines: Union[str, int, Lines],
        *,
        spacing: Optional[float] = None,
        horizontal_spacing: Optional[float] = None,
        vertical_spacing: Optional[float] = None,
        placement: Union[str, PlacementPolicy, None] = None,
    ) -> "MasonryConfig":
        return cls(
            axis=Axis.parse(axis),
            lines=parse_lines(lines),
            spacing=resolve_spacing(spacing, horizontal_spacing, vertical_spacing),
            placement=PlacementPolicy.parse(
                placement if placement is not None else default_placement()
            ),
        )

    @classmethod
    def vertical(
        cls,
        columns: Union[str, int, Lines],
        *,
        spacing: Optional[float] = None,
        horizontal_spacing: Optional[float] = None,
        vertical_spacing: Optional[float] = None,
        placement: Union[str, PlacementPolicy, None] = None,
    ) -> "MasonryConfig":
        """Columns of items, growing downwards."""
        return cls.build(
            Axis.VERTICAL,
            columns,
            spacing=spacing,
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            placement=placement,
        )

    @classmethod
    def horizontal(
        cls,
        rows: Union[str, int, Lines],
        *,
        spacing: Optional[float] = None,
        horizontal_spacing: Optional[float] = None,
        vertical_spacing: Optional[float] = None,
        placement: Union[str, PlacementPolicy, None] = None,
    ) -> "MasonryConfig":
        """Rows of items, growing to the right."""
        return cls.build(
            Axis.HORIZONTAL,
            rows,
            spacing=spacing,
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            placement=placement,
        )

    @property
    def cross_spacing(self) -> float:
        return self.spacing.across(self.axis)

    @property
    def primary_spacing(self) -> float:
        return self.spacing.along(self.axis)
