"""Host option parsing: ChartConfig.from_options and parse_series."""

from __future__ import annotations

import logging
import math

import pytest

from dashchart.charting.palette import DEFAULT_PALETTE
from dashchart.charting.series import format_value, parse_series
from dashchart.charting.types import ChartConfig, ChartKind, Dimensions


def test_defaults():
    cfg = ChartConfig.from_options({})
    assert cfg.kind is ChartKind.BAR
    assert cfg.dimensions == Dimensions(400, 300)
    assert cfg.palette == DEFAULT_PALETTE
    assert cfg.interactive and cfg.show_tooltip and cfg.show_grid
    assert not cfg.show_legend and not cfg.enable_drill_down and not cfg.enable_zoom


def test_camel_and_snake_keys():
    cfg = ChartConfig.from_options(
        {
            "type": "Donut",
            "showLegend": True,
            "enable_drill_down": "yes",
            "colors": ["#111111", "#222222"],
            "title": "Revenue",
            "width": 640,
        }
    )
    assert cfg.kind is ChartKind.DONUT
    assert cfg.show_legend is True
    assert cfg.enable_drill_down is True
    assert cfg.palette == ("#111111", "#222222")
    assert cfg.title == "Revenue"
    assert cfg.dimensions.width == 640


def test_unknown_type_falls_back_to_bar(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ChartConfig.from_options({"type": "radar"})
    assert cfg.kind is ChartKind.BAR
    assert "radar" in caplog.text


def test_bad_dimensions_fall_back(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ChartConfig.from_options({"width": "100%", "height": float("nan")})
    assert cfg.dimensions == Dimensions(400, 300)
    negative = ChartConfig.from_options({"width": -20})
    assert negative.dimensions.width == 0


def test_kind_parse_is_strict():
    assert ChartKind.parse(" LINE ") is ChartKind.LINE
    with pytest.raises(ValueError):
        ChartKind.parse("radar")


def test_parse_series_tolerates_bad_points(caplog):
    with caplog.at_level(logging.WARNING):
        series = parse_series(
            [
                {"label": "A", "value": "12", "metadata": {"id": 7}},
                {"label": "B", "value": "n/a"},
                5,
                {
                    "label": "C",
                    "value": 3,
                    "color": "#ff0000",
                    "drillDownData": [{"label": "C1", "value": 1}],
                },
            ]
        )
    assert [p.label for p in series] == ["A", "B", "", "C"]
    assert series[0].value == 12.0 and series[0].metadata == {"id": 7}
    assert math.isnan(series[1].value) and not series[1].is_finite
    # unsupported items keep their slot so later indices match the host list
    assert math.isnan(series[2].value)
    assert series[3].color == "#ff0000"
    assert series[3].drill_down_children[0].label == "C1"
    assert "n/a" in caplog.text


def test_parse_series_empty():
    assert parse_series(None) == ()
    assert parse_series([]) == ()


@pytest.mark.parametrize(
    "value,text",
    [(1234, "1,234"), (1234.5, "1,234.5"), (0.12345, "0.123"), (-2.0, "-2"), (float("inf"), "-")],
)
def test_format_value(value, text):
    assert format_value(value) == text
