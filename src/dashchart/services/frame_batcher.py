"""Resize batching for chart containers.

Dragging a window corner delivers a storm of resize events. Recomputing
chart geometry for each of them is wasted work, so resize events on a
watched widget only mark it dirty and arm a single-shot timer of one frame
(``FRAME_INTERVAL_MS``). When the timer fires the callback runs once with
the widget's latest size. Unlike a debounce, the timer is not restarted by
further events, so a continuous drag still commits once per frame.

``resolve_dimensions`` is the pure part: fixed host dimensions win, fluid
ones follow the measured container, with 400x300 fallbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Set

from PyQt6.QtCore import QEvent, QObject, QSize, QTimer
from PyQt6.QtWidgets import QWidget

from .. import settings

log = logging.getLogger(__name__)

__all__ = ["FrameBatcher", "resolve_dimensions"]


def resolve_dimensions(
    fixed_width: Optional[float],
    fixed_height: Optional[float],
    measured_width: float,
    measured_height: float,
) -> tuple[float, float]:
    width = fixed_width if fixed_width is not None else (measured_width or settings.DEFAULT_WIDTH)
    height = fixed_height if fixed_height is not None else (measured_height or settings.DEFAULT_HEIGHT)
    return max(0.0, float(width)), max(0.0, float(height))


@dataclass
class _Watched:
    widget: QWidget
    callback: Callable[[QSize], None]


class FrameBatcher(QObject):
    """Coalesce resize events of watched widgets to one callback per frame."""

    def __init__(self, interval_ms: int = settings.FRAME_INTERVAL_MS, parent: QObject | None = None):
        super().__init__(parent)
        self._interval = max(1, int(interval_ms))
        self._watched: Dict[int, _Watched] = {}
        self._dirty_ids: Set[int] = set()
        self._timer: Optional[QTimer] = None
        self._flushes = 0

    # Registration ------------------------------------------------------
    def watch(self, widget: QWidget, callback: Callable[[QSize], None]) -> None:
        wid = id(widget)
        if wid not in self._watched:
            self._watched[wid] = _Watched(widget=widget, callback=callback)
            widget.installEventFilter(self)

    def unwatch(self, widget: QWidget) -> None:
        wid = id(widget)
        if self._watched.pop(wid, None) is not None:
            widget.removeEventFilter(self)
        self._dirty_ids.discard(wid)

    # Introspection -----------------------------------------------------
    def pending_count(self) -> int:
        return len(self._dirty_ids)

    @property
    def flush_count(self) -> int:
        return self._flushes

    # Control -----------------------------------------------------------
    def mark_dirty(self, widget: QWidget) -> None:
        wid = id(widget)
        if wid not in self._watched:
            return
        self._dirty_ids.add(wid)
        self._schedule()

    def force_flush(self) -> None:
        if self._dirty_ids:
            self._flush()

    # Internal ----------------------------------------------------------
    def _schedule(self) -> None:
        if self._timer is None:
            self._timer = QTimer(self)
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._flush)  # type: ignore[attr-defined]
        if not self._timer.isActive():
            self._timer.start(self._interval)

    def _flush(self) -> None:
        if self._timer is not None:
            self._timer.stop()
        dirty = list(self._dirty_ids)
        self._dirty_ids.clear()
        if not dirty:
            return
        self._flushes += 1
        for wid in dirty:
            watched = self._watched.get(wid)
            if watched is None:
                continue
            size = watched.widget.size()
            log.debug("resize commit %dx%d", size.width(), size.height())
            watched.callback(size)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() == QEvent.Type.Resize and isinstance(obj, QWidget):
            self.mark_dirty(obj)
        return super().eventFilter(obj, event)
