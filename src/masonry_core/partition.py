from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .models import Adaptive, AtLeast, Fixed, Lines, constraint_of
from .units import Extent, finite_or_zero, safe_int

logger = logging.getLogger(__name__)

MIN_LINE_THICKNESS = 1.0


@dataclass(frozen=True)
class LinePartition:
    """Lines the cross axis is divided into."""

    count: int
    thickness: Extent
    spacing: Extent

    @property
    def pitch(self) -> Extent:
        """Distance between the leading edges of adjacent lines."""
        return self.thickness + self.spacing

    @property
    def cross_extent(self) -> Extent:
        return self.thickness * self.count + self.spacing * (self.count - 1)

    def line_origin(self, index: int) -> Extent:
        return index * self.pitch


def max_line_count(cross: Extent, spacing: Extent) -> int:
    """Upper bound keeping every line at least one unit thick."""
    value = math.ceil(finite_or_zero((cross + spacing) / (MIN_LINE_THICKNESS + spacing)))
    return max(value, 1)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def raw_line_count(cross: Extent, spacing: Extent, lines: Lines) -> int:
    if isinstance(lines, Fixed):
        return int(lines.count)
    constraint = constraint_of(lines)
    quotient = _divide(cross + spacing, max(constraint.length, 0.0) + spacing)
    if not math.isfinite(quotient):
        return 0
    if isinstance(constraint, AtLeast):
        return safe_int(math.floor(quotient))
    return safe_int(math.ceil(quotient))


def line_count(cross: Extent, spacing: Extent, lines: Lines) -> int:
    """Number of lines for the policy, clamped to ``[1, max_line_count]``."""
    count = raw_line_count(cross, spacing, lines)
    return min(max(count, 1), max_line_count(cross, spacing))


def line_thickness(cross: Extent, spacing: Extent, count: int, lines: Lines) -> Extent:
    thickness = max(finite_or_zero((cross - spacing * (count - 1)) / count), 0.0)
    if isinstance(lines, Adaptive) and lines.is_two_sided:
        thickness = min(thickness, max(lines.maximum, 0.0))  # type: ignore[arg-type]
    return thickness


def partition(cross: Extent, spacing: Extent, lines: Lines) -> LinePartition:
    cross = max(finite_or_zero(cross), 0.0)
    spacing = max(finite_or_zero(spacing), 0.0)
    count = line_count(cross, spacing, lines)
    thickness = line_thickness(cross, spacing, count, lines)
    logger.debug(
        "Partitioned cross extent %.2f into %d lines of %.2f (spacing %.2f)",
        cross,
        count,
        thickness,
        spacing,
    )
    return LinePartition(count=count, thickness=thickness, spacing=spacing)
