"""Dispatch entry points: geometry, rendering and hit-testing.

Each call looks the active ``ChartKind`` up in the registry. The kind
modules are imported here so that importing the engine always yields a
complete table.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional

from . import bar, line, pie  # noqa: F401  # register kind handlers
from .registry import chart_kinds
from .types import ChartConfig, GeometryTable, Scene, Series

log = logging.getLogger(__name__)

__all__ = ["compute_geometry", "render_scene", "locate"]


def compute_geometry(series: Series, config: ChartConfig) -> GeometryTable:
    """Derive a fresh geometry table for ``series`` under ``config``."""
    handlers = chart_kinds.get(config.kind)
    start = perf_counter()
    table = handlers.geometry(tuple(series), config, config.kind)
    log.debug(
        "geometry kind=%s points=%d plot=%.0fx%.0f in %.3fms",
        config.kind.value,
        len(table),
        table.plot.width,
        table.plot.height,
        (perf_counter() - start) * 1000.0,
    )
    return table


def render_scene(
    table: GeometryTable,
    series: Series,
    config: ChartConfig,
    hovered_index: Optional[int] = None,
) -> Scene:
    """Produce drawables for ``table``; hover only affects the output scene."""
    return chart_kinds.get(table.kind).renderer(table, tuple(series), config, hovered_index)


def locate(x: float, y: float, table: GeometryTable) -> Optional[int]:
    """Index of the data element under ``(x, y)`` or None."""
    return chart_kinds.get(table.kind).hit_tester(x, y, table)
