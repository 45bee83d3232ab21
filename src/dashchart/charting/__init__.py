"""Chart engine core.

Pure Python geometry, hit-testing, tooltip placement, legend and drill-down
logic for bar, line, area, pie and donut charts. Importing this package
registers the built-in chart kinds. Rendering backends (Qt, matplotlib)
live in ``dashchart.charting.backends`` and are imported explicitly so the
core stays usable without a display.
"""

from .controller import ChartController  # noqa: F401
from .drilldown import DrillDownNavigator, DrillLevel  # noqa: F401
from .engine import compute_geometry, locate, render_scene  # noqa: F401
from .interaction import InteractionState  # noqa: F401
from .legend import LegendEntry, legend_entries  # noqa: F401
from .registry import chart_kinds, register_chart_kind  # noqa: F401
from .series import parse_series  # noqa: F401
from .tooltip import TooltipContent, TooltipPlacement, position_tooltip  # noqa: F401
from .types import (  # noqa: F401
    ChartConfig,
    ChartKind,
    DataPoint,
    Dimensions,
    GeometryTable,
    Margins,
    Scene,
)
