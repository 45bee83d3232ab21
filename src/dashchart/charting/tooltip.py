"""Tooltip placement and content.

Placement is a pure function of the previous placement, the hit index and
the pointer position. The tooltip sits up and to the right of the pointer
and is then clamped so the whole box stays inside the viewport inset by
``padding``. When the hit index has not changed the previous placement is
returned as-is (compared by index, not by coordinates) so the tooltip does
not chase the pointer inside one data element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .. import settings
from .series import format_value
from .types import DataPoint

__all__ = [
    "TooltipPlacement",
    "TooltipContent",
    "position_tooltip",
    "tooltip_content",
    "estimate_tooltip_size",
]

DRILL_HINT = "Click to drill down"


@dataclass(frozen=True)
class TooltipPlacement:
    index: int
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class TooltipContent:
    title: str
    lines: Tuple[str, ...]

    def as_text(self) -> str:
        return "\n".join((self.title,) + self.lines)


def _clamp_axis(origin: float, extent: float, limit: float, padding: float) -> float:
    lo = padding
    hi = limit - padding - extent
    if hi < lo:
        # box wider than the inset viewport; pin to the leading edge
        return lo
    return min(max(origin, lo), hi)


def position_tooltip(
    previous: Optional[TooltipPlacement],
    index: int,
    pointer: Tuple[float, float],
    size: Tuple[float, float],
    viewport: Tuple[float, float],
    *,
    offset: float = settings.TOOLTIP_OFFSET,
    padding: float = settings.TOOLTIP_PADDING,
) -> TooltipPlacement:
    if previous is not None and previous.index == index:
        return previous
    px, py = pointer
    width, height = max(0.0, size[0]), max(0.0, size[1])
    vw, vh = max(0.0, viewport[0]), max(0.0, viewport[1])
    return TooltipPlacement(
        index=index,
        x=_clamp_axis(px + offset, width, vw, padding),
        y=_clamp_axis(py - offset, height, vh, padding),
        width=width,
        height=height,
    )


def tooltip_content(point: DataPoint, *, enable_drill_down: bool) -> TooltipContent:
    lines = [f"Value: {format_value(point.value)}"]
    if enable_drill_down and point.has_children:
        lines.append(DRILL_HINT)
    return TooltipContent(title=point.label, lines=tuple(lines))


def estimate_tooltip_size(content: TooltipContent) -> Tuple[float, float]:
    """Rough box size for hosts without font metrics (headless use)."""
    rows = (content.title,) + content.lines
    longest = max(len(r) for r in rows)
    return (longest * 7.0 + 24.0, len(rows) * 18.0 + 16.0)
