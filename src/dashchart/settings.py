"""Global configuration and constants for the chart engine.

Values that hosts may want to tune without code changes read an optional
``DASHCHART_*`` environment variable at import time. Malformed values fall
back to the defaults below.
"""

from __future__ import annotations

import os
from typing import Final, Tuple


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Surface defaults (used when the host leaves width/height unset)
DEFAULT_WIDTH: Final = 400
DEFAULT_HEIGHT: Final = 300

# Margins reserve space for axis labels: (top, right, bottom, left)
DEFAULT_MARGINS: Final[Tuple[float, float, float, float]] = (20.0, 20.0, 40.0, 60.0)

# Geometry
BAR_FILL_RATIO: Final = 0.8  # bar width relative to its slot; rest is split into gutters
PIE_RADIUS_INSET: Final = 20.0  # px subtracted from half the plot's short side
DONUT_INNER_RATIO: Final = 0.4

# Decorations
GRID_RATIOS: Final[Tuple[float, ...]] = (0.0, 0.25, 0.5, 0.75, 1.0)
LABEL_MAX_CHARS: Final = 8
LABEL_ELLIPSIS: Final = "..."

# Hover feedback
HOVER_TINT: Final = 0.1
HOVER_OPACITY: Final = 0.8
HOVER_SLICE_OFFSET: Final = 5.0
MARKER_RADIUS: Final = 4.0
MARKER_RADIUS_HOVER: Final = 6.0
TRANSITION_MS: Final = 200

# Tooltip
TOOLTIP_OFFSET: Final = _env_int("DASHCHART_TOOLTIP_OFFSET", 10)
TOOLTIP_PADDING: Final = _env_int("DASHCHART_TOOLTIP_PADDING", 8)

# Resize batching; one frame at ~60Hz
FRAME_INTERVAL_MS: Final = max(1, _env_int("DASHCHART_FRAME_MS", 16))
