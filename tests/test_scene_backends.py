"""Scene backends: matplotlib figure and QPainter output."""

from __future__ import annotations

from matplotlib import patches
from PyQt6.QtGui import QColor, QImage, QPainter

from dashchart.charting.backends import MatplotlibSceneBackend, QPainterSceneBackend
from dashchart.charting.engine import compute_geometry, render_scene
from dashchart.charting.palette import DEFAULT_PALETTE
from dashchart.charting.types import ChartConfig, ChartKind, DataPoint


def _scene(kind, *values, **cfg):
    series = tuple(DataPoint(f"p{i}", v) for i, v in enumerate(values))
    config = ChartConfig(kind=kind, **cfg)
    return render_scene(compute_geometry(series, config), series, config), config


def test_matplotlib_bar_figure():
    scene, cfg = _scene(ChartKind.BAR, 40, 30, 20, 10)
    fig = MatplotlibSceneBackend().render(scene, cfg.dimensions)
    ax = fig.axes[0]
    assert sum(isinstance(p, patches.Rectangle) for p in ax.patches) == 4
    assert len(ax.texts) == 5 + 4  # value axis + category labels
    assert tuple(fig.get_size_inches() * fig.dpi) == (400, 300)


def test_matplotlib_donut_wedges():
    scene, cfg = _scene(ChartKind.DONUT, 1, 1, 2, show_grid=False)
    ax = MatplotlibSceneBackend(dpi=50).render(scene, cfg.dimensions).axes[0]
    wedges = [p for p in ax.patches if isinstance(p, patches.Wedge)]
    assert len(wedges) == 3
    assert all(w.width == 60 for w in wedges)


def test_matplotlib_area_fill():
    scene, cfg = _scene(ChartKind.AREA, 1, 3, 2)
    ax = MatplotlibSceneBackend().render(scene, cfg.dimensions).axes[0]
    assert sum(isinstance(p, patches.Polygon) for p in ax.patches) == 1
    assert sum(isinstance(p, patches.Circle) for p in ax.patches) == 3


def _paint(scene, qtbot) -> QImage:
    image = QImage(400, 300, QImage.Format.Format_ARGB32)
    image.fill(QColor("#000000"))
    painter = QPainter(image)
    try:
        QPainterSceneBackend().paint(painter, scene)
    finally:
        painter.end()
    return image


def test_qpainter_pie_sector_lands_in_its_quadrant(qtbot):
    scene, _ = _scene(ChartKind.PIE, 1, 1, 2)
    image = _paint(scene, qtbot)
    assert image.pixelColor(240, 110).name() == DEFAULT_PALETTE[0].lower()  # upper right
    assert image.pixelColor(240, 190).name() == DEFAULT_PALETTE[1].lower()  # lower right
    assert image.pixelColor(160, 150).name() == DEFAULT_PALETTE[2].lower()  # left half


def test_qpainter_donut_leaves_hole(qtbot):
    scene, _ = _scene(ChartKind.DONUT, 1, 1, 2)
    image = _paint(scene, qtbot)
    assert image.pixelColor(200, 150).name() == "#000000"
    assert image.pixelColor(230, 90).name() == DEFAULT_PALETTE[0].lower()


def test_qpainter_bar_fill(qtbot):
    scene, _ = _scene(ChartKind.BAR, 40, 30, 20, 10, show_grid=False)
    image = _paint(scene, qtbot)
    assert image.pixelColor(100, 200).name() == DEFAULT_PALETTE[0].lower()
    assert image.pixelColor(100, 30).name() == DEFAULT_PALETTE[0].lower()
    assert image.pixelColor(340, 230).name() == DEFAULT_PALETTE[3].lower()
