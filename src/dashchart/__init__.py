"""dashchart: interactive dashboard charts for PyQt6.

The ``charting`` subpackage is the headless engine; ``components`` holds the
Qt widget built on it.
"""

from .charting import (  # noqa: F401
    ChartConfig,
    ChartController,
    ChartKind,
    DataPoint,
    Dimensions,
    Margins,
    parse_series,
)

__version__ = "0.1.0"
