"""Chart kind registry and axis decorations."""

from __future__ import annotations

import pytest

from dashchart.charting import engine  # noqa: F401  # registers built-in kinds
from dashchart.charting.decorations import truncate_label
from dashchart.charting.engine import compute_geometry, render_scene
from dashchart.charting.registry import ChartKindRegistry, chart_kinds
from dashchart.charting.types import ChartConfig, ChartKind, DataPoint, LinePrimitive, TextPrimitive


def _noop_geometry(series, config, kind):  # pragma: no cover - never called
    raise AssertionError


def test_every_kind_is_registered():
    assert chart_kinds.missing_kinds() == []
    assert set(chart_kinds.list_kinds()) == {"bar", "line", "area", "pie", "donut"}


def test_register_duplicate_kind():
    reg = ChartKindRegistry()
    reg.register(
        ChartKind.BAR, geometry=_noop_geometry, renderer=None, hit_tester=None, description="Bars"
    )
    with pytest.raises(ValueError):
        reg.register(
            ChartKind.BAR, geometry=_noop_geometry, renderer=None, hit_tester=None, description="Again"
        )
    assert ChartKind.PIE in reg.missing_kinds()


def test_unknown_kind_lookup():
    with pytest.raises(KeyError):
        ChartKindRegistry().get(ChartKind.LINE)


def test_label_truncation():
    assert truncate_label("Affiliate partners") == "Affiliat..."
    assert truncate_label("Eightchr") == "Eightchr"
    assert truncate_label("") == ""


def test_cartesian_decorations():
    series = (DataPoint("Affiliate partners", 4), DataPoint("B", 8))
    cfg = ChartConfig()
    scene = render_scene(compute_geometry(series, cfg), series, cfg)
    grid = [p for p in scene.decorations if isinstance(p, LinePrimitive)]
    texts = [p for p in scene.decorations if isinstance(p, TextPrimitive)]
    assert len(grid) == 5
    assert [t.text for t in texts if t.anchor == "end"] == ["0", "2", "4", "6", "8"]
    assert [t.text for t in texts if t.anchor == "middle"] == ["Affiliat...", "B"]
    assert all(t.y == 290 for t in texts if t.anchor == "middle")
    # decorations are painted before data
    assert list(scene)[0] is scene.decorations[0]


def test_grid_can_be_hidden():
    series = (DataPoint("A", 1),)
    cfg = ChartConfig(show_grid=False)
    scene = render_scene(compute_geometry(series, cfg), series, cfg)
    assert not any(isinstance(p, LinePrimitive) for p in scene.decorations)


def test_radial_kinds_have_no_axes():
    series = (DataPoint("A", 1), DataPoint("B", 2))
    cfg = ChartConfig(kind=ChartKind.PIE)
    assert render_scene(compute_geometry(series, cfg), series, cfg).decorations == ()
