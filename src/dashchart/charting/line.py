"""Line and area charts.

Samples are spaced evenly across the plot by ordinal position (the data
model has no x value). A single sample sits at the horizontal center. The
area variant closes the line back down to the plot baseline.
"""

from __future__ import annotations

import math
from typing import List, Optional

from .. import settings
from ..design.reduced_motion import transition_hint
from .decorations import cartesian_decorations
from .palette import FALLBACK_COLOR, resolve_color, tint
from .registry import register_chart_kind
from .scale import plot_area, scale_y, value_range
from .series import finite_value
from .types import (
    ChartConfig,
    ChartKind,
    CirclePrimitive,
    GeometryTable,
    PointEntry,
    PolylinePrimitive,
    Primitive,
    Scene,
    Series,
)

AREA_FILL_OPACITY = 0.2


def line_geometry(series: Series, config: ChartConfig, kind: ChartKind = ChartKind.LINE) -> GeometryTable:
    plot = plot_area(config)
    rng = value_range(series, include_zero=False)
    n = len(series)
    if n == 0:
        return GeometryTable(kind=kind, entries=(), plot=plot, value_range=rng)
    x_step = plot.width / (n - 1) if n > 1 else 0.0
    entries: List[PointEntry] = []
    for i, point in enumerate(series):
        x = plot.left + i * x_step if n > 1 else plot.left + plot.width / 2
        entries.append(PointEntry(index=i, x=x, y=scale_y(finite_value(point.value), rng, plot)))
    drawable = tuple(p.is_finite for p in series)
    path = tuple((e.x, e.y) for e, ok in zip(entries, drawable) if ok)
    polygon: tuple = ()
    if kind is ChartKind.AREA and path:
        polygon = path + ((path[-1][0], plot.bottom), (path[0][0], plot.bottom))
    return GeometryTable(
        kind=kind,
        entries=tuple(entries),
        plot=plot,
        value_range=rng,
        drawable=drawable,
        x_step=x_step,
        path=path,
        area_polygon=polygon,
    )


def render_line(
    table: GeometryTable,
    series: Series,
    config: ChartConfig,
    hovered_index: Optional[int],
) -> Scene:
    transition = transition_hint()
    stroke = config.palette[0] if config.palette else FALLBACK_COLOR
    primitives: List[Primitive] = []
    if table.area_polygon:
        primitives.append(
            PolylinePrimitive(
                points=table.area_polygon,
                fill=stroke,
                fill_opacity=AREA_FILL_OPACITY,
                closed=True,
            )
        )
    if len(table.path) > 1:
        primitives.append(PolylinePrimitive(points=table.path, stroke=stroke, stroke_width=2.0))
    for entry, point, drawable in zip(table.entries, series, table.drawable):
        if not drawable:
            continue
        hovered = entry.index == hovered_index
        color = resolve_color(point, entry.index, config.palette)
        primitives.append(
            CirclePrimitive(
                cx=entry.x,
                cy=entry.y,
                radius=settings.MARKER_RADIUS_HOVER if hovered else settings.MARKER_RADIUS,
                fill=tint(color, settings.HOVER_TINT) if hovered else color,
                index=entry.index,
                transition_ms=transition,
            )
        )
    xs = [e.x for e in table.entries]
    decorations = cartesian_decorations(table.plot, table.value_range, xs, series, config)
    return Scene(primitives=tuple(primitives), decorations=decorations)


def locate_sample(x: float, y: float, table: GeometryTable) -> Optional[int]:
    n = len(table.entries)
    if n == 0:
        return None
    if n == 1:
        return 0
    if table.x_step <= 0:
        return None
    offset = x - table.plot.left
    if not math.isfinite(offset):
        return None
    # round half up
    index = math.floor(offset / table.x_step + 0.5)
    return max(0, min(index, n - 1))


register_chart_kind(
    (ChartKind.LINE, ChartKind.AREA),
    geometry=line_geometry,
    renderer=render_line,
    hit_tester=locate_sample,
    description="Evenly spaced samples joined by a line; area fills to the baseline",
)
