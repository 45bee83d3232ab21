"""Pie and donut charts.

Sectors are laid out clockwise (screen coordinates, y pointing down) from
12 o'clock, i.e. starting at ``-pi/2``. Each sweep is proportional to the
point's non-negative magnitude: negative and non-finite values count as 0.
When every magnitude is 0 the circle is split uniformly so the chart still
shows one sector per point. The last sector always ends at exactly
``-pi/2 + 2*pi`` so the sweeps close the circle without a gap.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import List, Optional

from .. import settings
from ..design.reduced_motion import transition_hint
from .palette import resolve_color, tint
from .registry import register_chart_kind
from .scale import plot_area
from .series import finite_value
from .types import (
    ChartConfig,
    ChartKind,
    GeometryTable,
    Primitive,
    Scene,
    SectorEntry,
    SectorPrimitive,
    Series,
)

START_ANGLE = -math.pi / 2
FULL_TURN = 2 * math.pi


def sector_geometry(series: Series, config: ChartConfig, kind: ChartKind = ChartKind.PIE) -> GeometryTable:
    plot = plot_area(config)
    dims = config.dimensions.clamped()
    center = (dims.width / 2, dims.height / 2)
    outer = max(0.0, min(plot.width, plot.height) / 2 - settings.PIE_RADIUS_INSET)
    inner = outer * settings.DONUT_INNER_RATIO if kind is ChartKind.DONUT else 0.0
    n = len(series)
    if n == 0:
        return GeometryTable(
            kind=kind, entries=(), plot=plot, center=center, outer_radius=outer, inner_radius=inner
        )
    magnitudes = [max(0.0, finite_value(p.value)) for p in series]
    total = sum(magnitudes)
    if total > 0:
        sweeps = [m / total * FULL_TURN for m in magnitudes]
    else:
        sweeps = [FULL_TURN / n] * n
    entries: List[SectorEntry] = []
    ends: List[float] = []
    walked = 0.0
    for i, sweep in enumerate(sweeps):
        start = walked
        walked = FULL_TURN if i == n - 1 else walked + sweep
        ends.append(walked)
        entries.append(
            SectorEntry(
                index=i,
                start_angle=START_ANGLE + start,
                end_angle=START_ANGLE + walked,
                inner_radius=inner,
                outer_radius=outer,
            )
        )
    return GeometryTable(
        kind=kind,
        entries=tuple(entries),
        plot=plot,
        drawable=tuple(p.is_finite for p in series),
        center=center,
        sweep_ends=tuple(ends),
        outer_radius=outer,
        inner_radius=inner,
    )


def render_sectors(
    table: GeometryTable,
    series: Series,
    config: ChartConfig,
    hovered_index: Optional[int],
) -> Scene:
    transition = transition_hint()
    cx, cy = table.center
    primitives: List[Primitive] = []
    for entry, point, drawable in zip(table.entries, series, table.drawable):
        if not drawable or entry.sweep <= 0:
            continue
        color = resolve_color(point, entry.index, config.palette)
        dx = dy = 0.0
        opacity = 1.0
        if entry.index == hovered_index:
            dx = math.cos(entry.mid_angle) * settings.HOVER_SLICE_OFFSET
            dy = math.sin(entry.mid_angle) * settings.HOVER_SLICE_OFFSET
            color = tint(color, settings.HOVER_TINT)
            opacity = settings.HOVER_OPACITY
        primitives.append(
            SectorPrimitive(
                cx=cx + dx,
                cy=cy + dy,
                inner_radius=entry.inner_radius,
                outer_radius=entry.outer_radius,
                start_angle=entry.start_angle,
                end_angle=entry.end_angle,
                fill=color,
                index=entry.index,
                opacity=opacity,
                transition_ms=transition,
            )
        )
    return Scene(primitives=tuple(primitives))


def locate_sector(x: float, y: float, table: GeometryTable) -> Optional[int]:
    n = len(table.entries)
    if n == 0:
        return None
    cx, cy = table.center
    dx = x - cx
    dy = y - cy
    if not (math.isfinite(dx) and math.isfinite(dy)):
        return None
    if table.kind is ChartKind.DONUT:
        radius = math.hypot(dx, dy)
        # the exact center is inside the hole even when the chart collapsed to radius 0
        if radius == 0 or radius < table.inner_radius:
            return None
    rel = (math.atan2(dy, dx) - START_ANGLE) % FULL_TURN
    index = bisect_right(table.sweep_ends, rel)
    return min(index, n - 1)


register_chart_kind(
    (ChartKind.PIE, ChartKind.DONUT),
    geometry=sector_geometry,
    renderer=render_sectors,
    hit_tester=locate_sector,
    description="Sectors proportional to value; donut leaves a 40% center hole",
)
