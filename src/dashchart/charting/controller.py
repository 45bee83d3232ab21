"""Chart controller: the engine as seen by a host.

Owns the geometry table, the drill-down navigator and the interaction
state of one chart instance. Everything runs synchronously on the caller's
thread:

* input changes (series, kind, dimensions) recompute the geometry and
  publish the new table by swapping a single reference;
* pointer events hit-test against whatever table is current at that moment.

Host callbacks are invoked directly from the pointer handlers. Exceptions
raised by them are not caught; they propagate to the host's event loop.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .drilldown import DrillDownNavigator
from .engine import compute_geometry, locate, render_scene
from .interaction import InteractionState, cleared, pointer_left, pointer_moved
from .legend import LegendEntry, legend_entries
from .series import coerce_series
from .tooltip import TooltipContent, estimate_tooltip_size, tooltip_content
from .types import ChartConfig, DataPoint, Dimensions, GeometryTable, Scene, Series

log = logging.getLogger(__name__)

__all__ = ["ChartController", "PointClickHandler", "PointHoverHandler"]

PointClickHandler = Callable[[DataPoint, int], Any]
PointHoverHandler = Callable[[Optional[DataPoint], Optional[int]], Any]


class ChartController:
    def __init__(
        self,
        data: Iterable[Any] | None = None,
        config: ChartConfig | None = None,
        *,
        on_point_click: PointClickHandler | None = None,
        on_point_hover: PointHoverHandler | None = None,
        on_level_change: Callable[[int], Any] | None = None,
    ) -> None:
        self._config = config or ChartConfig()
        self._root: Series = coerce_series(data)
        self._navigator = DrillDownNavigator(self._root)
        self._state = InteractionState()
        self.on_point_click = on_point_click
        self.on_point_hover = on_point_hover
        self.on_level_change = on_level_change
        self._table = compute_geometry(self._navigator.current, self._config)

    # Accessors ---------------------------------------------------------
    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def series(self) -> Series:
        """The active series (post drill-down)."""
        return self._navigator.current

    @property
    def geometry(self) -> GeometryTable:
        return self._table

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def navigator(self) -> DrillDownNavigator:
        return self._navigator

    # Input changes -----------------------------------------------------
    def set_series(self, data: Iterable[Any] | None) -> bool:
        """Install new root data; returns False only when handed the current root tuple itself.

        Any other tuple, even one equal by value, replaces the root (metadata
        included) and resets the drill level.
        """
        series = coerce_series(data)
        if series is self._root:
            return False
        self._root = series
        was_drilled = not self._navigator.is_root
        self._navigator.reset(series)
        self._state = cleared()
        self._recompute()
        if was_drilled:
            self._notify_level()
        return True

    def set_config(self, config: ChartConfig) -> None:
        previous = self._config
        self._config = config
        if config.kind != previous.kind:
            self._state = cleared()
        if (
            config.kind != previous.kind
            or config.dimensions != previous.dimensions
            or config.margins != previous.margins
        ):
            self._recompute()

    def resize(self, width: float, height: float) -> None:
        dims = Dimensions(width, height).clamped()
        if dims != self._config.dimensions:
            self.set_config(replace(self._config, dimensions=dims))

    def _recompute(self) -> None:
        self._table = compute_geometry(self._navigator.current, self._config)

    # Pointer events ----------------------------------------------------
    def hit_test(self, x: float, y: float) -> Optional[int]:
        return locate(x, y, self._table)

    def pointer_move(
        self,
        x: float,
        y: float,
        *,
        screen: Tuple[float, float] | None = None,
        viewport: Tuple[float, float] | None = None,
        tooltip_size: Tuple[float, float] | None = None,
    ) -> InteractionState:
        """Handle pointer movement at surface coordinates ``(x, y)``.

        ``screen`` and ``viewport`` describe the space the tooltip is clamped
        in; both default to the chart surface itself.
        """
        cfg = self._config
        if not (cfg.interactive and cfg.show_tooltip):
            return self._state
        series = self.series
        index = locate(x, y, self._table)
        if index is None:
            return self._state
        if tooltip_size is None:
            tooltip_size = estimate_tooltip_size(
                tooltip_content(series[index], enable_drill_down=cfg.enable_drill_down)
            )
        if viewport is None:
            dims = cfg.dimensions.clamped()
            viewport = (dims.width, dims.height)
        previous = self._state
        self._state = pointer_moved(previous, index, screen or (x, y), tooltip_size, viewport)
        if self._state.hovered_index != previous.hovered_index and self.on_point_hover:
            self.on_point_hover(series[index], index)
        return self._state

    def pointer_leave(self) -> InteractionState:
        self._state = pointer_left(self._state)
        if self.on_point_hover:
            self.on_point_hover(None, None)
        return self._state

    def click(self, x: float, y: float) -> Optional[int]:
        """Resolve a click; fires ``on_point_click`` then drills down if allowed."""
        if not self._config.interactive:
            return None
        index = locate(x, y, self._table)
        if index is None:
            return None
        point = self.series[index]
        if self.on_point_click:
            self.on_point_click(point, index)
        if self._config.enable_drill_down and self._navigator.push(point, index):
            log.debug("drill down into %r (%d points)", point.label, len(point.drill_down_children))
            self._state = cleared()
            self._recompute()
            self._notify_level()
        return index

    def drill_up(self) -> bool:
        if not self._navigator.pop():
            return False
        self._state = cleared()
        self._recompute()
        self._notify_level()
        return True

    def _notify_level(self) -> None:
        if self.on_level_change:
            self.on_level_change(self._navigator.depth)

    # Derived output ----------------------------------------------------
    def scene(self) -> Scene:
        return render_scene(self._table, self.series, self._config, self._state.hovered_index)

    def legend(self) -> List[LegendEntry]:
        return legend_entries(self.series, self._config.palette)

    def hovered_point(self) -> Optional[DataPoint]:
        idx = self._state.hovered_index
        if idx is None or idx >= len(self.series):
            return None
        return self.series[idx]

    def tooltip(self) -> Optional[TooltipContent]:
        point = self.hovered_point()
        if point is None or not self._config.show_tooltip:
            return None
        return tooltip_content(point, enable_drill_down=self._config.enable_drill_down)
