"""Scene backends.

A ``Scene`` is backend-neutral; these classes turn it into pixels.

* ``QPainterSceneBackend`` paints onto any QPainter (the interactive widget).
* ``MatplotlibSceneBackend`` draws the same scene into a matplotlib Figure
  using pixel coordinates, for static snapshots embedded in report pages.

Angles in a scene are radians in screen space (y pointing down), so a
sector point sits at ``(cx + r*cos(a), cy + r*sin(a))``. Qt measures arcs
counter-clockwise with y up, hence the sign flip in ``_sector_path``.
"""

from __future__ import annotations

import math
from typing import Tuple

from matplotlib import patches
from matplotlib.figure import Figure
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QPolygonF

from .types import (
    CirclePrimitive,
    Dimensions,
    LinePrimitive,
    PolylinePrimitive,
    Primitive,
    RectPrimitive,
    Scene,
    SectorPrimitive,
    TextPrimitive,
)

__all__ = ["QPainterSceneBackend", "MatplotlibSceneBackend"]

_HALIGN = {"start": "left", "middle": "center", "end": "right"}


def _sector_path(p: SectorPrimitive) -> QPainterPath:
    outer = QRectF(p.cx - p.outer_radius, p.cy - p.outer_radius, p.outer_radius * 2, p.outer_radius * 2)
    start_deg = -math.degrees(p.start_angle)
    sweep_deg = -math.degrees(p.end_angle - p.start_angle)
    path = QPainterPath()
    if p.inner_radius > 0:
        inner = QRectF(
            p.cx - p.inner_radius, p.cy - p.inner_radius, p.inner_radius * 2, p.inner_radius * 2
        )
        path.arcMoveTo(outer, start_deg)
        path.arcTo(outer, start_deg, sweep_deg)
        path.arcTo(inner, start_deg + sweep_deg, -sweep_deg)
    else:
        path.moveTo(p.cx, p.cy)
        path.arcTo(outer, start_deg, sweep_deg)
    path.closeSubpath()
    return path


class QPainterSceneBackend:
    """Paint scene primitives with QPainter, offset by ``origin``."""

    def paint(self, painter: QPainter, scene: Scene, origin: Tuple[float, float] = (0.0, 0.0)) -> None:
        painter.save()
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.translate(origin[0], origin[1])
            for primitive in scene:
                self._paint_one(painter, primitive)
        finally:
            painter.restore()

    def _paint_one(self, painter: QPainter, p: Primitive) -> None:
        painter.setOpacity(1.0)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        if isinstance(p, RectPrimitive):
            painter.setOpacity(p.opacity)
            painter.fillRect(QRectF(p.x, p.y, p.width, p.height), QColor(p.fill))
        elif isinstance(p, SectorPrimitive):
            painter.setOpacity(p.opacity)
            painter.fillPath(_sector_path(p), QBrush(QColor(p.fill)))
        elif isinstance(p, CirclePrimitive):
            painter.setOpacity(p.opacity)
            painter.setBrush(QBrush(QColor(p.fill)))
            painter.drawEllipse(QPointF(p.cx, p.cy), p.radius, p.radius)
        elif isinstance(p, PolylinePrimitive):
            poly = QPolygonF([QPointF(x, y) for x, y in p.points])
            if p.fill:
                fill = QColor(p.fill)
                fill.setAlphaF(max(0.0, min(1.0, p.fill_opacity)))
                painter.setBrush(QBrush(fill))
            if p.stroke:
                painter.setPen(QPen(QColor(p.stroke), p.stroke_width))
            if p.closed:
                painter.drawPolygon(poly)
            else:
                painter.drawPolyline(poly)
        elif isinstance(p, LinePrimitive):
            painter.setOpacity(p.opacity)
            painter.setPen(QPen(QColor(p.stroke), p.stroke_width))
            painter.drawLine(QPointF(p.x1, p.y1), QPointF(p.x2, p.y2))
        elif isinstance(p, TextPrimitive):
            painter.setPen(QColor(p.color))
            advance = painter.fontMetrics().horizontalAdvance(p.text)
            x = p.x
            if p.anchor == "middle":
                x -= advance / 2
            elif p.anchor == "end":
                x -= advance
            painter.drawText(QPointF(x, p.y), p.text)


class MatplotlibSceneBackend:
    """Render a scene into a matplotlib Figure sized in pixels."""

    def __init__(self, dpi: int = 100, background: str = "#0F172A") -> None:
        self._dpi = dpi
        self._background = background

    def render(self, scene: Scene, dimensions: Dimensions) -> Figure:
        dims = dimensions.clamped()
        width = max(dims.width, 1.0)
        height = max(dims.height, 1.0)
        fig = Figure(figsize=(width / self._dpi, height / self._dpi), dpi=self._dpi)
        fig.patch.set_facecolor(self._background)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)  # pixel space: y grows downward
        ax.set_axis_off()
        for primitive in scene:
            self._draw_one(ax, primitive)
        return fig

    def _draw_one(self, ax, p: Primitive) -> None:
        if isinstance(p, RectPrimitive):
            ax.add_patch(
                patches.Rectangle((p.x, p.y), p.width, p.height, facecolor=p.fill, alpha=p.opacity, linewidth=0)
            )
        elif isinstance(p, SectorPrimitive):
            ax.add_patch(
                patches.Wedge(
                    (p.cx, p.cy),
                    p.outer_radius,
                    math.degrees(p.start_angle),
                    math.degrees(p.end_angle),
                    width=(p.outer_radius - p.inner_radius) if p.inner_radius > 0 else None,
                    facecolor=p.fill,
                    alpha=p.opacity,
                    linewidth=0,
                )
            )
        elif isinstance(p, CirclePrimitive):
            ax.add_patch(patches.Circle((p.cx, p.cy), p.radius, facecolor=p.fill, alpha=p.opacity, linewidth=0))
        elif isinstance(p, PolylinePrimitive):
            if p.closed:
                ax.add_patch(
                    patches.Polygon(
                        list(p.points),
                        closed=True,
                        facecolor=p.fill or "none",
                        edgecolor=p.stroke or "none",
                        alpha=p.fill_opacity if p.fill else 1.0,
                    )
                )
            elif p.points:
                xs, ys = zip(*p.points)
                ax.plot(xs, ys, color=p.stroke, linewidth=p.stroke_width)
        elif isinstance(p, LinePrimitive):
            ax.plot([p.x1, p.x2], [p.y1, p.y2], color=p.stroke, linewidth=p.stroke_width, alpha=p.opacity)
        elif isinstance(p, TextPrimitive):
            ax.text(p.x, p.y, p.text, ha=_HALIGN.get(p.anchor, "center"), fontsize=8, color=p.color)
