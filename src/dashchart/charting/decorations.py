"""Axis decorations shared by the cartesian (bar/line/area) renderers."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .. import settings
from .series import format_value
from .types import ChartConfig, LinePrimitive, PlotArea, Primitive, Series, TextPrimitive

GRID_COLOR = "#475569"
LABEL_COLOR = "#94A3B8"
VALUE_COLOR = "#CBD5E1"


def truncate_label(label: str, max_chars: int = settings.LABEL_MAX_CHARS) -> str:
    if len(label) > max_chars:
        return label[:max_chars] + settings.LABEL_ELLIPSIS
    return label


def grid_lines(plot: PlotArea) -> List[Primitive]:
    return [
        LinePrimitive(
            x1=plot.left,
            y1=plot.top + plot.height * (1 - ratio),
            x2=plot.right,
            y2=plot.top + plot.height * (1 - ratio),
            stroke=GRID_COLOR,
        )
        for ratio in settings.GRID_RATIOS
    ]


def value_axis_labels(plot: PlotArea, rng: Tuple[float, float]) -> List[Primitive]:
    lo, hi = rng
    span = hi - lo
    labels: List[Primitive] = []
    for ratio in settings.GRID_RATIOS:
        labels.append(
            TextPrimitive(
                x=plot.left - 10,
                y=plot.top + plot.height * (1 - ratio) + 4,
                text=format_value(lo + ratio * span),
                anchor="end",
                color=LABEL_COLOR,
            )
        )
    return labels


def category_labels(xs: Sequence[float], series: Series, config: ChartConfig) -> List[Primitive]:
    baseline = config.dimensions.clamped().height - 10
    return [
        TextPrimitive(x=x, y=baseline, text=truncate_label(point.label), color=LABEL_COLOR)
        for x, point in zip(xs, series)
    ]


def cartesian_decorations(
    plot: PlotArea,
    rng: Tuple[float, float],
    xs: Sequence[float],
    series: Series,
    config: ChartConfig,
) -> Tuple[Primitive, ...]:
    out: List[Primitive] = []
    if config.show_grid:
        out.extend(grid_lines(plot))
    if series:
        out.extend(value_axis_labels(plot, rng))
        out.extend(category_labels(xs, series, config))
    return tuple(out)
