"""Core charting types.

Everything here is an immutable value: a render pass derives a fresh
``GeometryTable`` and ``Scene`` from a ``ChartConfig`` plus the active series,
so a hit-test in flight against an older table never observes a partial
update.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .. import settings
from .palette import DEFAULT_PALETTE

log = logging.getLogger(__name__)

__all__ = [
    "ChartKind",
    "DataPoint",
    "Series",
    "Dimensions",
    "Margins",
    "ChartConfig",
    "PlotArea",
    "BarEntry",
    "PointEntry",
    "SectorEntry",
    "GeometryEntry",
    "GeometryTable",
    "RectPrimitive",
    "PolylinePrimitive",
    "CirclePrimitive",
    "SectorPrimitive",
    "LinePrimitive",
    "TextPrimitive",
    "Primitive",
    "Scene",
]


class ChartKind(str, Enum):
    """Closed set of supported chart renderings."""

    BAR = "bar"
    LINE = "line"
    AREA = "area"
    PIE = "pie"
    DONUT = "donut"

    @classmethod
    def parse(cls, value: Union[str, "ChartKind"]) -> "ChartKind":
        if isinstance(value, ChartKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported chart type: {value!r}") from None

    @property
    def is_radial(self) -> bool:
        return self in (ChartKind.PIE, ChartKind.DONUT)


@dataclass(frozen=True)
class DataPoint:
    """One labeled value of a series.

    Attributes:
        label: Display name (need not be unique).
        value: Numeric value; non-finite values are never drawn.
        color: Optional explicit color overriding the palette.
        metadata: Opaque payload handed back through callbacks.
        drill_down_children: Nested series shown when the point is drilled into.
    """

    label: str
    value: float
    color: Optional[str] = None
    metadata: Optional[Mapping[str, Any]] = field(default=None, compare=False)
    drill_down_children: Tuple["DataPoint", ...] = ()

    @property
    def has_children(self) -> bool:
        return len(self.drill_down_children) > 0

    @property
    def is_finite(self) -> bool:
        try:
            return math.isfinite(self.value)
        except TypeError:
            return False


Series = Tuple[DataPoint, ...]


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float

    def clamped(self) -> "Dimensions":
        """Return a copy with negative or non-finite sides replaced by 0."""

        def _side(v: float) -> float:
            try:
                v = float(v)
            except (TypeError, ValueError):
                return 0.0
            return v if math.isfinite(v) and v > 0 else 0.0

        return Dimensions(_side(self.width), _side(self.height))


@dataclass(frozen=True)
class Margins:
    top: float = settings.DEFAULT_MARGINS[0]
    right: float = settings.DEFAULT_MARGINS[1]
    bottom: float = settings.DEFAULT_MARGINS[2]
    left: float = settings.DEFAULT_MARGINS[3]


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _as_number(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        num = float(value)
    except (TypeError, ValueError):
        log.warning("Ignoring non-numeric chart dimension %r", value)
        return default
    if not math.isfinite(num):
        log.warning("Ignoring non-finite chart dimension %r", value)
        return default
    return num


@dataclass(frozen=True)
class ChartConfig:
    """Per-render chart configuration.

    ``palette`` is always explicit; ``DEFAULT_PALETTE`` is only the default
    value of the field and callers may pass any ordered color sequence.
    """

    kind: ChartKind = ChartKind.BAR
    dimensions: Dimensions = Dimensions(settings.DEFAULT_WIDTH, settings.DEFAULT_HEIGHT)
    margins: Margins = Margins()
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    interactive: bool = True
    show_tooltip: bool = True
    show_legend: bool = False
    show_grid: bool = True
    enable_drill_down: bool = False
    enable_zoom: bool = False
    title: Optional[str] = None
    subtitle: Optional[str] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ChartConfig":
        """Build a config from a host options mapping.

        Accepts camelCase keys (``showTooltip``) as well as snake_case. Parsing
        never raises: unknown chart types fall back to bar, malformed numbers
        to the defaults, an empty color list to ``DEFAULT_PALETTE``.
        """

        def pick(camel: str, snake: str | None = None) -> Any:
            if camel in options:
                return options[camel]
            if snake and snake in options:
                return options[snake]
            return None

        raw_kind = pick("type", "kind")
        kind = ChartKind.BAR
        if raw_kind is not None:
            try:
                kind = ChartKind.parse(raw_kind)
            except ValueError:
                log.warning("Unknown chart type %r; rendering as bar", raw_kind)
        width = _as_number(pick("width"), settings.DEFAULT_WIDTH)
        height = _as_number(pick("height"), settings.DEFAULT_HEIGHT)
        colors = pick("colors", "palette")
        palette: Tuple[str, ...] = DEFAULT_PALETTE
        if colors:
            palette = tuple(str(c) for c in colors)
        margins = Margins()
        raw_margins = pick("margins")
        if isinstance(raw_margins, Mapping):
            margins = Margins(
                top=_as_number(raw_margins.get("top"), margins.top),
                right=_as_number(raw_margins.get("right"), margins.right),
                bottom=_as_number(raw_margins.get("bottom"), margins.bottom),
                left=_as_number(raw_margins.get("left"), margins.left),
            )
        title = pick("title")
        subtitle = pick("subtitle")
        return cls(
            kind=kind,
            dimensions=Dimensions(width, height).clamped(),
            margins=margins,
            palette=palette,
            interactive=_as_bool(pick("interactive"), True),
            show_tooltip=_as_bool(pick("showTooltip", "show_tooltip"), True),
            show_legend=_as_bool(pick("showLegend", "show_legend"), False),
            show_grid=_as_bool(pick("showGrid", "show_grid"), True),
            enable_drill_down=_as_bool(pick("enableDrillDown", "enable_drill_down"), False),
            enable_zoom=_as_bool(pick("enableZoom", "enable_zoom"), False),
            title=str(title) if title else None,
            subtitle=str(subtitle) if subtitle else None,
        )


@dataclass(frozen=True)
class PlotArea:
    """Pixel rectangle inside the margins where data is drawn."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


# --- geometry table ---------------------------------------------------------


@dataclass(frozen=True)
class BarEntry:
    index: int
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PointEntry:
    index: int
    x: float
    y: float


@dataclass(frozen=True)
class SectorEntry:
    index: int
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0


GeometryEntry = Union[BarEntry, PointEntry, SectorEntry]


@dataclass(frozen=True)
class GeometryTable:
    """Index-addressable geometry of one render pass.

    ``entries`` holds exactly one entry per active data point in series
    order. ``drawable`` flags points whose value was finite; non-drawable
    points keep their slot but produce no primitive.
    """

    kind: ChartKind
    entries: Tuple[GeometryEntry, ...]
    plot: PlotArea
    value_range: Tuple[float, float] = (0.0, 0.0)
    drawable: Tuple[bool, ...] = ()
    slot_width: float = 0.0
    x_step: float = 0.0
    path: Tuple[Tuple[float, float], ...] = ()
    area_polygon: Tuple[Tuple[float, float], ...] = ()
    center: Tuple[float, float] = (0.0, 0.0)
    sweep_ends: Tuple[float, ...] = ()  # cumulative sweep at each sector end, 0..2*pi
    outer_radius: float = 0.0
    inner_radius: float = 0.0

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


# --- drawable primitives ----------------------------------------------------


@dataclass(frozen=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    fill: str
    index: Optional[int] = None
    opacity: float = 1.0
    transition_ms: int = 0


@dataclass(frozen=True)
class PolylinePrimitive:
    points: Tuple[Tuple[float, float], ...]
    stroke: Optional[str] = None
    stroke_width: float = 2.0
    fill: Optional[str] = None
    fill_opacity: float = 1.0
    closed: bool = False
    index: Optional[int] = None


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    radius: float
    fill: str
    index: Optional[int] = None
    opacity: float = 1.0
    transition_ms: int = 0


@dataclass(frozen=True)
class SectorPrimitive:
    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    fill: str
    index: Optional[int] = None
    opacity: float = 1.0
    transition_ms: int = 0


@dataclass(frozen=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 0.5
    opacity: float = 0.3


@dataclass(frozen=True)
class TextPrimitive:
    x: float
    y: float
    text: str
    anchor: str = "middle"  # start | middle | end
    role: str = "axis"  # axis | value
    color: str = "#94A3B8"


Primitive = Union[
    RectPrimitive,
    PolylinePrimitive,
    CirclePrimitive,
    SectorPrimitive,
    LinePrimitive,
    TextPrimitive,
]


@dataclass(frozen=True)
class Scene:
    """Ordered drawables produced by a renderer.

    ``decorations`` (grid, axis labels) are painted before ``primitives``.
    """

    primitives: Tuple[Primitive, ...] = ()
    decorations: Tuple[Primitive, ...] = ()

    def for_index(self, index: int) -> Sequence[Primitive]:
        return [p for p in self.primitives if getattr(p, "index", None) == index]

    def __iter__(self):
        yield from self.decorations
        yield from self.primitives
