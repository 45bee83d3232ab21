"""Chart color assignment.

Colors are resolved per data point: an explicit ``DataPoint.color`` wins,
otherwise ``palette[index % len(palette)]``. The palette is always passed in
by the caller (``ChartConfig.palette``); ``DEFAULT_PALETTE`` is merely the
value a config starts with.

Hover feedback brightens a color by blending it toward white. The blend is
plain RGB interpolation; non-hex colors (named colors, rgb() strings) are
returned unchanged because the engine does not parse them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .types import DataPoint

__all__ = ["DEFAULT_PALETTE", "FALLBACK_COLOR", "resolve_color", "blend", "tint"]

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#3B82F6",  # blue
    "#10B981",  # emerald
    "#F59E0B",  # amber
    "#EF4444",  # red
    "#8B5CF6",  # violet
    "#06B6D4",  # cyan
    "#84CC16",  # lime
    "#F97316",  # orange
    "#EC4899",  # pink
    "#6B7280",  # gray
)

FALLBACK_COLOR = "#6B7280"


def resolve_color(point: "DataPoint", index: int, palette: Sequence[str]) -> str:
    if point.color:
        return point.color
    if not palette:
        return FALLBACK_COLOR
    if index < 0:
        index = 0
    return palette[index % len(palette)]


def _hex_to_rgb(h: str) -> tuple[int, int, int] | None:
    h = h.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        return None
    try:
        return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    except ValueError:
        return None


def _rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#" + "".join(f"{c:02x}" for c in rgb)


def blend(src: str, dst: str, t: float) -> str:
    """Interpolate ``src`` toward ``dst`` by ``t`` (0..1)."""
    s = _hex_to_rgb(src)
    d = _hex_to_rgb(dst)
    if s is None or d is None:
        return src
    t = max(0.0, min(1.0, t))
    return _rgb_to_hex(
        (
            int(s[0] + (d[0] - s[0]) * t + 0.5),
            int(s[1] + (d[1] - s[1]) * t + 0.5),
            int(s[2] + (d[2] - s[2]) * t + 0.5),
        )
    )


def tint(color: str, amount: float) -> str:
    return blend(color, "#ffffff", amount)
