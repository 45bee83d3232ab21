"""Scale calculator: data space to pixel space.

Pure functions shared by the per-kind geometry builders. A value range of
zero width (all values equal, or a single point) never divides: every value
then fills 100% of the available extent.
"""

from __future__ import annotations

from typing import Tuple

from .series import finite_values
from .types import ChartConfig, PlotArea, Series

__all__ = ["plot_area", "value_range", "normalize", "scale_y"]


def plot_area(config: ChartConfig) -> PlotArea:
    dims = config.dimensions.clamped()
    m = config.margins
    return PlotArea(
        left=m.left,
        top=m.top,
        width=max(0.0, dims.width - m.left - m.right),
        height=max(0.0, dims.height - m.top - m.bottom),
    )


def value_range(series: Series, *, include_zero: bool) -> Tuple[float, float]:
    """Return ``(min, max)`` over the finite values of ``series``.

    With ``include_zero`` the minimum is ``min(0, min(values))`` so bars grow
    from a zero baseline. The maximum is always ``max(values)``.
    """
    values = finite_values(series)
    if not values:
        return (0.0, 0.0)
    lo = min(values)
    hi = max(values)
    if include_zero:
        lo = min(0.0, lo)
    return (lo, hi)


def normalize(value: float, rng: Tuple[float, float]) -> float:
    lo, hi = rng
    span = hi - lo
    if span <= 0:
        return 1.0
    return (value - lo) / span


def scale_y(value: float, rng: Tuple[float, float], plot: PlotArea) -> float:
    """Pixel y for ``value``; larger values sit higher (smaller y)."""
    return plot.bottom - normalize(value, rng) * plot.height
