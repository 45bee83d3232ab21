"""Legend derivation: one ``(color, label)`` entry per active point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .palette import resolve_color
from .types import Series

__all__ = ["LegendEntry", "legend_entries"]


@dataclass(frozen=True)
class LegendEntry:
    color: str
    label: str
    index: int


def legend_entries(series: Series, palette: Sequence[str]) -> List[LegendEntry]:
    # click-to-toggle visibility would hook in here; the engine does not provide it
    return [
        LegendEntry(color=resolve_color(point, i, palette), label=point.label, index=i)
        for i, point in enumerate(series)
    ]
