"""Series helpers: host payload parsing and finite-value guards.

Hosts usually hand over plain dictionaries (decoded JSON from the
analytics API). ``parse_series`` converts them into ``DataPoint`` tuples
without raising: malformed values become NaN (kept in the series so indices
stay aligned with the host's data, but never drawn) and a warning is logged.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from .types import DataPoint, Series

log = logging.getLogger(__name__)

__all__ = ["parse_series", "coerce_series", "finite_value", "finite_values", "format_value"]

_CHILD_KEYS = ("drillDownChildren", "drillDownData", "drill_down_children")


def finite_value(value: Any) -> float:
    """Return ``value`` as float, or 0.0 if it is not a finite number."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def finite_values(series: Series) -> list[float]:
    return [float(p.value) for p in series if p.is_finite]


def _parse_value(raw: Any, label: str) -> float:
    try:
        v = float(raw)
    except (TypeError, ValueError):
        log.warning("Data point %r has non-numeric value %r; it will not be drawn", label, raw)
        return math.nan
    if not math.isfinite(v):
        log.warning("Data point %r has non-finite value %r; it will not be drawn", label, raw)
    return v


def _parse_point(item: Mapping[str, Any]) -> DataPoint:
    label = item.get("label")
    label = "" if label is None else str(label)
    children_raw = None
    for key in _CHILD_KEYS:
        if item.get(key):
            children_raw = item[key]
            break
    metadata = item.get("metadata")
    return DataPoint(
        label=label,
        value=_parse_value(item.get("value"), label),
        color=str(item["color"]) if item.get("color") else None,
        metadata=dict(metadata) if isinstance(metadata, Mapping) else None,
        drill_down_children=parse_series(children_raw) if children_raw else (),
    )


def parse_series(payload: Iterable[Any] | None) -> Series:
    """Convert a list of point dicts (or ``DataPoint`` objects) to a Series."""
    if not payload:
        return ()
    points: list[DataPoint] = []
    for item in payload:
        if isinstance(item, DataPoint):
            points.append(item)
        elif isinstance(item, Mapping):
            points.append(_parse_point(item))
        else:
            log.warning("Unsupported data point of type %s; keeping an empty slot", type(item).__name__)
            points.append(DataPoint("", math.nan))
    return tuple(points)


def coerce_series(data: Iterable[Any] | None) -> Series:
    """Accept a tuple of DataPoints as-is; parse anything else."""
    if isinstance(data, tuple) and all(isinstance(p, DataPoint) for p in data):
        return data
    return parse_series(data)


def format_value(value: float) -> str:
    """Thousands-separated display text with at most three decimals."""
    if not math.isfinite(value):
        return "-"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
