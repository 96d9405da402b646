from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from masonry_core.config import MasonryConfig
from masonry_core.items import StaticItem, items_from_data
from masonry_core.models import Adaptive, AtLeast, Fixed, Size
from masonry_core.sizing import ReportedFrame, layout_pass, negotiate

EXTENTS = [10, 20, 10, 30, 10]


def _items(extents=EXTENTS):
    return [StaticItem(extent=extent) for extent in extents]


class CountingItem:
    def __init__(self, extent: float) -> None:
        self.extent = extent
        self.offered: list[float] = []

    def measure(self, cross_size: float) -> float:
        self.offered.append(cross_size)
        return self.extent


def test_vertical_pass_frames_and_content():
    config = MasonryConfig.vertical(Fixed(2), spacing=0, placement="fill")
    result = layout_pass(config, _items(), Size(200, 0))
    assert [p.frame for p in result.placements] == [
        (0.0, 0.0, 100.0, 10.0),
        (100.0, 0.0, 100.0, 20.0),
        (0.0, 10.0, 100.0, 10.0),
        (0.0, 20.0, 100.0, 30.0),
        (100.0, 20.0, 100.0, 10.0),
    ]
    assert result.content.primary == 50
    assert result.content_size == Size(200, 50)
    assert result.frame == ReportedFrame(width=None, height=50)


def test_horizontal_pass_swaps_axes():
    config = MasonryConfig.horizontal(Fixed(2), spacing=0, placement="order")
    result = layout_pass(config, _items(), Size(0, 200))
    assert result.placements[1].frame == (0.0, 100.0, 20.0, 100.0)
    assert result.placements[2].frame == (10.0, 0.0, 10.0, 100.0)
    assert result.content_size == Size(50, 200)
    assert result.frame == ReportedFrame(width=50, height=None)


def test_content_excludes_trailing_spacing():
    config = MasonryConfig.vertical(Fixed(2), spacing=8, placement="order")
    result = layout_pass(config, _items([10, 10, 10]), Size(208, 0))
    # Third item starts at 10 + 8 on line 0.
    assert result.placements[2].offset == 18
    assert result.content.primary == 28
    assert result.lines.thickness == pytest.approx(100.0)


def test_cross_extent_matches_lines():
    config = MasonryConfig.vertical(Adaptive(minimum=90), spacing=7)
    result = layout_pass(config, _items(), Size(333, 0))
    lines = result.lines
    assert result.content.cross == lines.thickness * lines.count + 7 * (lines.count - 1)


def test_capped_lines_are_centered():
    config = MasonryConfig.vertical(Adaptive(minimum=200, maximum=150), spacing=10)
    result = layout_pass(config, _items([40, 40]), Size(500, 0))
    assert result.content.cross == pytest.approx(310.0)
    assert result.content.centering == pytest.approx(95.0)
    assert result.placements[1].frame[0] == pytest.approx(255.0)


def test_empty_items_still_report_cross_extent():
    config = MasonryConfig.vertical(Fixed(3), spacing=10)
    result = layout_pass(config, [], Size(320, 0))
    assert result.placements == ()
    assert result.content.primary == 0
    assert result.content.cross == pytest.approx(320.0)


def test_zero_width_container_gives_zero_extents():
    config = MasonryConfig.vertical(Fixed(2), spacing=4)
    item = CountingItem(30)
    result = layout_pass(config, [item], Size(0, 0))
    assert item.offered == [0.0]
    assert result.placements[0].cross_extent == 0.0
    assert result.lines.count == 1


def test_spanning_item_offered_span_size():
    config = MasonryConfig.vertical(Fixed(3), spacing=10)
    item = StaticItem(extent=lambda cross: cross / 2, span=Fixed(2))
    result = layout_pass(config, [item], Size(320, 0))
    placement = result.placements[0]
    assert placement.cross_extent == pytest.approx(210.0)
    assert placement.extent == pytest.approx(105.0)
    assert list(placement.lines) == [0, 1]


@pytest.mark.parametrize("bad", [-5.0, math.nan, math.inf])
def test_invalid_measurements_clamped(bad):
    config = MasonryConfig.vertical(Fixed(1), spacing=0)
    result = layout_pass(config, [StaticItem(extent=bad)], Size(100, 0))
    assert result.placements[0].extent == 0.0
    assert result.content.primary == 0.0


def test_negotiation_settles_on_second_pass():
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    negotiation = negotiate(config, _items(), Size(200, 0))
    assert negotiation.converged
    assert negotiation.passes == 2
    assert negotiation.container == Size(200, 50)
    assert negotiation.frame == ReportedFrame(width=None, height=50)


def test_negotiation_single_pass_when_already_settled():
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    negotiation = negotiate(config, _items(), Size(200, 50))
    assert negotiation.passes == 1
    assert negotiation.converged


def test_negotiation_respects_pass_limit():
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    negotiation = negotiate(config, _items(), Size(200, 0), max_passes=1)
    assert negotiation.passes == 1
    assert not negotiation.converged


def test_every_pass_starts_fresh_and_measures_once():
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    items = [CountingItem(extent) for extent in EXTENTS]
    first = layout_pass(config, items, Size(200, 0))
    second = layout_pass(config, items, Size(200, 50))
    assert first.placements == second.placements
    assert first.state == second.state
    assert all(len(item.offered) == 2 for item in items)


@dataclass(frozen=True)
class Photo:
    id: str
    ratio: float


def test_data_items_keep_their_identity():
    photos = [Photo("a", 2.0), Photo("b", 1.0), Photo("c", 0.5)]
    items = items_from_data(
        photos,
        lambda photo, width: width / photo.ratio,
        line_span=lambda photo: Fixed(2) if photo.ratio > 1.5 else Fixed(1),
    )
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    result = layout_pass(config, items, Size(200, 0))
    assert [p.key for p in result.placements] == ["a", "b", "c"]
    assert result.placements[0].span == 2
    assert result.placements[0].extent == pytest.approx(100.0)
    assert result.placements[1].offset == pytest.approx(100.0)


def test_static_items_fall_back_to_index_keys():
    config = MasonryConfig.vertical(Fixed(2), spacing=0)
    result = layout_pass(config, [StaticItem(5), StaticItem(5, key="x")], Size(200, 0))
    assert [p.key for p in result.placements] == [0, "x"]


def test_bare_bound_span_request_in_layout_pass():
    config = MasonryConfig.vertical(Fixed(3), spacing=10)
    result = layout_pass(config, [StaticItem(10, span=AtLeast(210))], Size(320, 0))
    (placement,) = result.placements
    assert (placement.line, placement.span) == (0, 2)
    assert placement.frame[2] == pytest.approx(210.0)
