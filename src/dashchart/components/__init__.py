"""Qt widgets."""

from .interactive_chart import InteractiveChartWidget  # noqa: F401
