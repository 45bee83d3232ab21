"""Bar chart: geometry, renderer and hit-tester.

The plot width is divided into one equal slot per point. Each bar fills
80% of its slot and is centered, leaving a 10% gutter on either side. The
value axis always includes zero.
"""

from __future__ import annotations

import math
from typing import List, Optional

from .. import settings
from ..design.reduced_motion import transition_hint
from .decorations import VALUE_COLOR, cartesian_decorations
from .palette import resolve_color, tint
from .registry import register_chart_kind
from .scale import normalize, plot_area, value_range
from .series import finite_value, format_value
from .types import (
    BarEntry,
    ChartConfig,
    ChartKind,
    GeometryTable,
    Primitive,
    RectPrimitive,
    Scene,
    Series,
    TextPrimitive,
)


def bar_geometry(series: Series, config: ChartConfig, kind: ChartKind = ChartKind.BAR) -> GeometryTable:
    plot = plot_area(config)
    rng = value_range(series, include_zero=True)
    n = len(series)
    if n == 0:
        return GeometryTable(kind=kind, entries=(), plot=plot, value_range=rng)
    slot = plot.width / n
    bar_width = slot * settings.BAR_FILL_RATIO
    gutter = (slot - bar_width) / 2.0
    entries: List[BarEntry] = []
    for i, point in enumerate(series):
        height = normalize(finite_value(point.value), rng) * plot.height
        entries.append(
            BarEntry(
                index=i,
                x=plot.left + i * slot + gutter,
                y=plot.bottom - height,
                width=bar_width,
                height=height,
            )
        )
    return GeometryTable(
        kind=kind,
        entries=tuple(entries),
        plot=plot,
        value_range=rng,
        drawable=tuple(p.is_finite for p in series),
        slot_width=slot,
    )


def render_bars(
    table: GeometryTable,
    series: Series,
    config: ChartConfig,
    hovered_index: Optional[int],
) -> Scene:
    transition = transition_hint()
    primitives: List[Primitive] = []
    for entry, point, drawable in zip(table.entries, series, table.drawable):
        if not drawable:
            continue
        color = resolve_color(point, entry.index, config.palette)
        hovered = entry.index == hovered_index
        primitives.append(
            RectPrimitive(
                x=entry.x,
                y=entry.y,
                width=entry.width,
                height=entry.height,
                fill=tint(color, settings.HOVER_TINT) if hovered else color,
                index=entry.index,
                opacity=settings.HOVER_OPACITY if hovered else 1.0,
                transition_ms=transition,
            )
        )
        if hovered:
            primitives.append(
                TextPrimitive(
                    x=entry.x + entry.width / 2,
                    y=entry.y - 5,
                    text=format_value(point.value),
                    role="value",
                    color=VALUE_COLOR,
                )
            )
    centers = [e.x + e.width / 2 for e in table.entries]
    decorations = cartesian_decorations(table.plot, table.value_range, centers, series, config)
    return Scene(primitives=tuple(primitives), decorations=decorations)


def locate_bar(x: float, y: float, table: GeometryTable) -> Optional[int]:
    n = len(table.entries)
    if n == 0 or table.slot_width <= 0:
        return None
    offset = x - table.plot.left
    if not math.isfinite(offset):
        return None
    index = math.floor(offset / table.slot_width)
    return max(0, min(index, n - 1))


register_chart_kind(
    (ChartKind.BAR,),
    geometry=bar_geometry,
    renderer=render_bars,
    hit_tester=locate_bar,
    description="Vertical bars on a zero-based value axis",
)
