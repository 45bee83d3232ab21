"""Line and area geometry, markers and nearest-sample hit-testing."""

from __future__ import annotations

import math

import pytest

from dashchart.charting.engine import compute_geometry, locate, render_scene
from dashchart.charting.palette import DEFAULT_PALETTE
from dashchart.charting.types import (
    ChartConfig,
    ChartKind,
    CirclePrimitive,
    DataPoint,
    Dimensions,
    PolylinePrimitive,
)

# 280px wide: plot width 200, so three samples sit exactly 100px apart
THREE_WIDE = ChartConfig(kind=ChartKind.LINE, dimensions=Dimensions(280, 300))


def _series(*values):
    return tuple(DataPoint(f"p{i}", v) for i, v in enumerate(values))


def test_samples_spread_evenly_to_plot_edges():
    table = compute_geometry(_series(1, 5, 3), THREE_WIDE)
    xs = [e.x for e in table.entries]
    assert xs == [60, 160, 260]
    assert table.x_step == 100
    assert table.entries[1].y == table.plot.top
    assert table.entries[0].y == table.plot.bottom


def test_single_sample_centered_and_always_hit():
    table = compute_geometry(_series(42), THREE_WIDE)
    assert table.entries[0].x == pytest.approx(160)
    assert locate(0, 0, table) == 0
    assert locate(1000, 1000, table) == 0


def test_hit_test_rounds_half_up():
    table = compute_geometry(_series(1, 2, 3), THREE_WIDE)
    assert locate(109, 100, table) == 0
    assert locate(110, 100, table) == 1
    assert locate(260, 100, table) == 2
    assert locate(-40, 100, table) == 0
    assert locate(900, 100, table) == 2


def test_area_polygon_closes_to_baseline():
    cfg = ChartConfig(kind=ChartKind.AREA, dimensions=Dimensions(280, 300))
    table = compute_geometry(_series(1, 5, 3), cfg)
    assert len(table.area_polygon) == 5
    assert table.area_polygon[-2] == (260, table.plot.bottom)
    assert table.area_polygon[-1] == (60, table.plot.bottom)
    scene = render_scene(table, _series(1, 5, 3), cfg)
    fill = scene.primitives[0]
    assert isinstance(fill, PolylinePrimitive) and fill.closed
    assert fill.fill == DEFAULT_PALETTE[0]
    assert fill.fill_opacity == pytest.approx(0.2)


def test_line_has_no_area_polygon():
    table = compute_geometry(_series(1, 5, 3), THREE_WIDE)
    assert table.area_polygon == ()


def test_non_finite_sample_is_skipped_in_path_but_keeps_index():
    series = _series(1, math.nan, 3)
    table = compute_geometry(series, THREE_WIDE)
    assert len(table) == 3
    assert len(table.path) == 2
    markers = [p for p in render_scene(table, series, THREE_WIDE).primitives if isinstance(p, CirclePrimitive)]
    assert [m.index for m in markers] == [0, 2]


def test_hovered_marker_grows():
    series = _series(1, 5, 3)
    table = compute_geometry(series, THREE_WIDE)
    scene = render_scene(table, series, THREE_WIDE, hovered_index=1)
    radii = {p.index: p.radius for p in scene.primitives if isinstance(p, CirclePrimitive)}
    assert radii == {0: 4.0, 1: 6.0, 2: 4.0}


def test_empty_line():
    table = compute_geometry((), THREE_WIDE)
    assert locate(100, 100, table) is None
    assert render_scene(table, (), THREE_WIDE).primitives == ()
