"""Interactive chart widget.

Binds a ``ChartController`` to a QWidget surface:

 - paints title/subtitle, the chart scene and an optional legend row;
 - forwards mouse move / leave / press to the controller (surface
   coordinates exclude the title header);
 - shows a floating QLabel tooltip parented to the top-level window and
   clamped to it;
 - routes container resizes through ``FrameBatcher`` so geometry is
   recomputed at most once per frame.

Width may be fixed or fluid (``width=None`` follows the widget); height
defaults to a fixed 300 px.

Host callbacks run inside Qt event handlers. Exceptions they raise are not
caught here and surface through the application's exception hook.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from PyQt6.QtCore import QPoint, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QPainter
from PyQt6.QtWidgets import QLabel, QWidget

from .. import settings
from ..charting.backends import QPainterSceneBackend
from ..charting.controller import ChartController, PointClickHandler, PointHoverHandler
from ..charting.series import parse_series
from ..charting.tooltip import tooltip_content
from ..charting.types import ChartConfig, ChartKind, DataPoint, Dimensions
from ..services.frame_batcher import FrameBatcher, resolve_dimensions

log = logging.getLogger(__name__)

__all__ = ["InteractiveChartWidget"]

TITLE_HEIGHT = 24
SUBTITLE_HEIGHT = 18
HEADER_GAP = 8
LEGEND_HEIGHT = 28
LEGEND_SWATCH = 12
BACKGROUND = QColor("#0F172A")
TITLE_COLOR = QColor("#FFFFFF")
SUBTITLE_COLOR = QColor("#94A3B8")
LEGEND_TEXT = QColor("#CBD5E1")

_TOOLTIP_QSS = (
    "QLabel#chartTooltip { background: #1E293B; color: #FFFFFF; border: 1px solid #334155;"
    " border-radius: 6px; padding: 6px 10px; }"
)


class InteractiveChartWidget(QWidget):
    pointHovered = pyqtSignal(object, object)  # DataPoint | None, int | None
    pointClicked = pyqtSignal(object, int)
    drillLevelChanged = pyqtSignal(int)

    def __init__(
        self,
        data: Iterable[Any] | None = None,
        config: ChartConfig | None = None,
        *,
        width: Optional[float] = None,
        height: Optional[float] = settings.DEFAULT_HEIGHT,
        on_point_click: PointClickHandler | None = None,
        on_point_hover: PointHoverHandler | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("interactiveChart")
        self.setMouseTracking(True)
        self._fixed_width = width
        self._fixed_height = height
        self._host_click = on_point_click
        self._host_hover = on_point_hover
        config = config or ChartConfig()
        w, h = resolve_dimensions(width, height, 0, 0)
        config = replace(config, dimensions=Dimensions(w, h))
        self._controller = ChartController(
            data,
            config,
            on_point_click=self._handle_click,
            on_point_hover=self._handle_hover,
            on_level_change=self._handle_level,
        )
        self._backend = QPainterSceneBackend()
        self._batcher = FrameBatcher(parent=self)
        self._batcher.watch(self, self._on_container_resize)
        self._tooltip: Optional[QLabel] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any], parent: QWidget | None = None) -> "InteractiveChartWidget":
        """Build from a host options mapping (``data``, ``type``, ``showLegend``...).

        Numeric ``width``/``height`` are fixed; anything else (e.g. "100%")
        makes that side fluid, except height which falls back to 300 px.
        """
        width = options.get("width")
        height = options.get("height")
        return cls(
            parse_series(options.get("data")),
            ChartConfig.from_options(options),
            width=float(width) if isinstance(width, (int, float)) else None,
            height=float(height) if isinstance(height, (int, float)) else settings.DEFAULT_HEIGHT,
            on_point_click=options.get("onPointClick"),
            on_point_hover=options.get("onPointHover"),
            parent=parent,
        )

    # Public API --------------------------------------------------------
    @property
    def controller(self) -> ChartController:
        return self._controller

    @property
    def frame_batcher(self) -> FrameBatcher:
        return self._batcher

    def set_data(self, data: Iterable[Any] | None) -> None:
        if self._controller.set_series(data):
            self._hide_tooltip()
            self.update()

    def set_chart_type(self, kind: ChartKind | str) -> None:
        cfg = self._controller.config
        self._controller.set_config(replace(cfg, kind=ChartKind.parse(kind)))
        self._hide_tooltip()
        self.update()

    def set_config(self, config: ChartConfig) -> None:
        dims = self._controller.config.dimensions
        self._controller.set_config(replace(config, dimensions=dims))
        self._refresh_layout()

    def drill_up(self) -> bool:
        moved = self._controller.drill_up()
        if moved:
            self._hide_tooltip()
            self.update()
        return moved

    def tooltip_label(self) -> Optional[QLabel]:
        return self._tooltip

    # Layout ------------------------------------------------------------
    def header_height(self) -> int:
        cfg = self._controller.config
        h = 0
        if cfg.title:
            h += TITLE_HEIGHT
        if cfg.subtitle:
            h += SUBTITLE_HEIGHT
        return h + HEADER_GAP if h else 0

    def legend_height(self) -> int:
        if self._controller.config.show_legend and self._controller.series:
            return LEGEND_HEIGHT
        return 0

    def sizeHint(self) -> QSize:  # noqa: N802
        dims = self._controller.config.dimensions
        return QSize(int(dims.width), int(self.header_height() + dims.height + self.legend_height()))

    def _surface_size(self, size: QSize) -> tuple[float, float]:
        measured_h = size.height() - self.header_height() - self.legend_height()
        return resolve_dimensions(self._fixed_width, self._fixed_height, size.width(), max(0, measured_h))

    def _on_container_resize(self, size: QSize) -> None:
        w, h = self._surface_size(size)
        self._controller.resize(w, h)
        self.update()

    def _refresh_layout(self) -> None:
        self.updateGeometry()
        self._on_container_resize(self.size())

    # Controller callbacks ----------------------------------------------
    def _handle_click(self, point: DataPoint, index: int) -> None:
        if self._host_click:
            self._host_click(point, index)
        self.pointClicked.emit(point, index)

    def _handle_hover(self, point: Optional[DataPoint], index: Optional[int]) -> None:
        if self._host_hover:
            self._host_hover(point, index)
        self.pointHovered.emit(point, index)

    def _handle_level(self, depth: int) -> None:
        self._hide_tooltip()
        self.drillLevelChanged.emit(depth)
        self.updateGeometry()

    # Tooltip -----------------------------------------------------------
    def _ensure_tooltip(self) -> QLabel:
        window = self.window()
        if self._tooltip is None or self._tooltip.parent() is not window:
            self._tooltip = QLabel(window)
            self._tooltip.setObjectName("chartTooltip")
            self._tooltip.setStyleSheet(_TOOLTIP_QSS)
            self._tooltip.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
            self._tooltip.hide()
        return self._tooltip

    def _hide_tooltip(self) -> None:
        if self._tooltip is not None:
            self._tooltip.hide()

    def _show_tooltip_for(self, index: int, pos: QPoint) -> tuple[float, float, float, float]:
        """Size the label for ``index``; returns pointer and viewport in window space."""
        label = self._ensure_tooltip()
        point = self._controller.series[index]
        content = tooltip_content(point, enable_drill_down=self._controller.config.enable_drill_down)
        label.setText(content.as_text())
        label.adjustSize()
        window = self.window()
        mapped = self.mapTo(window, pos) if window is not self else pos
        return mapped.x(), mapped.y(), window.width(), window.height()

    # Qt events ---------------------------------------------------------
    def mouseMoveEvent(self, event) -> None:  # noqa: N802
        pos = event.position()
        x, y = pos.x(), pos.y() - self.header_height()
        dims = self._controller.config.dimensions
        if y < 0 or y > dims.height:
            if self._controller.state.is_hovering:
                self.leaveEvent(event)
            return
        cfg = self._controller.config
        if not (cfg.interactive and cfg.show_tooltip):
            return
        index = self._controller.hit_test(x, y)
        if index is None:
            return
        previous = self._controller.state.hovered_index
        if index != previous:
            wx, wy, vw, vh = self._show_tooltip_for(index, pos.toPoint())
            label = self._ensure_tooltip()
            state = self._controller.pointer_move(
                x, y, screen=(wx, wy), viewport=(vw, vh), tooltip_size=(label.width(), label.height())
            )
            if state.tooltip is not None:
                label.move(int(state.tooltip.x), int(state.tooltip.y))
                label.raise_()
                label.show()
            self.update()

    def leaveEvent(self, event) -> None:  # noqa: N802
        self._controller.pointer_leave()
        self._hide_tooltip()
        self.update()

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        y = pos.y() - self.header_height()
        if y < 0 or y > self._controller.config.dimensions.height:
            return  # header or legend row
        self._controller.click(pos.x(), y)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), BACKGROUND)
            self._paint_header(painter)
            self._backend.paint(painter, self._controller.scene(), origin=(0.0, float(self.header_height())))
            self._paint_legend(painter)
        finally:
            painter.end()

    def _paint_header(self, painter: QPainter) -> None:
        cfg = self._controller.config
        y = 0
        if cfg.title:
            font = QFont(painter.font())
            font.setBold(True)
            font.setPointSizeF(font.pointSizeF() * 1.25)
            painter.setFont(font)
            painter.setPen(TITLE_COLOR)
            painter.drawText(0, y, self.width(), TITLE_HEIGHT, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, cfg.title)
            painter.setFont(self.font())
            y += TITLE_HEIGHT
        if cfg.subtitle:
            painter.setPen(SUBTITLE_COLOR)
            painter.drawText(
                0, y, self.width(), SUBTITLE_HEIGHT, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, cfg.subtitle
            )

    def _paint_legend(self, painter: QPainter) -> None:
        if not self.legend_height():
            return
        entries = self._controller.legend()
        top = self.header_height() + int(self._controller.config.dimensions.height)
        metrics = painter.fontMetrics()
        widths = [LEGEND_SWATCH + 6 + metrics.horizontalAdvance(e.label) for e in entries]
        total = sum(widths) + 16 * max(0, len(widths) - 1)
        x = max(0, (self.width() - total) // 2)
        cy = top + LEGEND_HEIGHT // 2
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        for entry, w in zip(entries, widths):
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(entry.color))
            painter.drawEllipse(x, cy - LEGEND_SWATCH // 2, LEGEND_SWATCH, LEGEND_SWATCH)
            painter.setPen(LEGEND_TEXT)
            painter.drawText(x + LEGEND_SWATCH + 6, cy + metrics.ascent() // 2 - 1, entry.label)
            x += w + 16
