"""Bar chart geometry, rendering and hit-testing."""

from __future__ import annotations

import math

import pytest

from dashchart.charting.engine import compute_geometry, locate, render_scene
from dashchart.charting.palette import DEFAULT_PALETTE, tint
from dashchart.charting.types import (
    ChartConfig,
    ChartKind,
    DataPoint,
    Dimensions,
    RectPrimitive,
    TextPrimitive,
)
from dashchart.design.reduced_motion import motion_preference


def test_single_bar_in_small_surface():
    cfg = ChartConfig(dimensions=Dimensions(100, 100))
    table = compute_geometry((DataPoint("only", 5),), cfg)
    bar = table.entries[0]
    # plot area is 20x40 at (60, 20)
    assert bar.width == pytest.approx(16)
    assert bar.x == pytest.approx(62)
    assert bar.height == pytest.approx(40)
    assert bar.y == pytest.approx(20)


def test_one_entry_per_point_and_full_coverage(campaign_series):
    table = compute_geometry(campaign_series, ChartConfig())
    assert len(table) == len(campaign_series)
    assert [e.index for e in table.entries] == list(range(len(campaign_series)))
    plot = table.plot
    slots = [(plot.left + i * table.slot_width, plot.left + (i + 1) * table.slot_width) for i in range(len(table))]
    assert slots[0][0] == plot.left
    assert slots[-1][1] == pytest.approx(plot.right)
    for entry, (lo, hi) in zip(table.entries, slots):
        assert lo <= entry.x and entry.x + entry.width <= hi + 1e-9


def test_bar_heights_are_monotonic():
    series = tuple(DataPoint(str(v), v) for v in (3, 9, 1, 9, 6))
    table = compute_geometry(series, ChartConfig())
    for a, pa in zip(table.entries, series):
        for b, pb in zip(table.entries, series):
            if pa.value <= pb.value:
                assert a.height <= b.height + 1e-9
    tallest = max(table.entries, key=lambda e: e.height)
    assert tallest.height == pytest.approx(table.plot.height)


def test_all_zero_bars_fill_extent():
    series = (DataPoint("a", 0), DataPoint("b", 0))
    table = compute_geometry(series, ChartConfig())
    assert all(e.height == pytest.approx(table.plot.height) for e in table.entries)


def test_non_finite_value_keeps_slot_but_is_not_drawn():
    series = (DataPoint("a", 4), DataPoint("b", math.nan), DataPoint("c", 2))
    cfg = ChartConfig()
    table = compute_geometry(series, cfg)
    assert len(table) == 3
    assert table.drawable == (True, False, True)
    rects = [p for p in render_scene(table, series, cfg).primitives if isinstance(p, RectPrimitive)]
    assert [r.index for r in rects] == [0, 2]


def test_hit_test_bar_centres_round_trip(campaign_series):
    table = compute_geometry(campaign_series, ChartConfig())
    for entry in table.entries:
        cx = entry.x + entry.width / 2
        cy = entry.y + entry.height / 2
        assert locate(cx, cy, table) == entry.index


def test_hit_test_is_idempotent_and_clamped(campaign_series):
    table = compute_geometry(campaign_series, ChartConfig())
    assert locate(150, 10, table) == locate(150, 10, table)
    assert locate(-500, 100, table) == 0
    assert locate(5000, 100, table) == len(campaign_series) - 1
    # gutter between bars still resolves to the owning slot
    assert locate(table.plot.left + 1, 100, table) == 0


def test_empty_series():
    table = compute_geometry((), ChartConfig())
    assert table.is_empty
    assert locate(100, 100, table) is None
    scene = render_scene(table, (), ChartConfig())
    assert scene.primitives == ()
    assert not any(isinstance(p, TextPrimitive) for p in scene.decorations)


def test_hover_tints_bar_and_adds_value_label(campaign_series):
    cfg = ChartConfig()
    table = compute_geometry(campaign_series, cfg)
    scene = render_scene(table, campaign_series, cfg, hovered_index=0)
    rect = next(p for p in scene.for_index(0) if isinstance(p, RectPrimitive))
    assert rect.fill == tint(DEFAULT_PALETTE[0], 0.1)
    assert rect.opacity == pytest.approx(0.8)
    values = [p for p in scene.primitives if isinstance(p, TextPrimitive) and p.role == "value"]
    assert len(values) == 1 and values[0].text == "40"
    others = [p for p in scene.primitives if isinstance(p, RectPrimitive) and p.index != 0]
    assert all(p.opacity == 1.0 for p in others)


def test_transition_hint_respects_reduced_motion(campaign_series):
    cfg = ChartConfig(kind=ChartKind.BAR)
    table = compute_geometry(campaign_series, cfg)
    normal = render_scene(table, campaign_series, cfg).primitives[0]
    with motion_preference(reduced=True):
        reduced = render_scene(table, campaign_series, cfg).primitives[0]
    assert normal.transition_ms == 200
    assert reduced.transition_ms == 0
