"""Demo window: ``python -m dashchart``."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow

from .charting.series import parse_series
from .charting.types import ChartConfig, ChartKind
from .components.interactive_chart import InteractiveChartWidget

log = logging.getLogger("dashchart.demo")

SAMPLE_CAMPAIGNS = [
    {
        "label": "Search",
        "value": 4200,
        "drillDownChildren": [
            {"label": "Brand", "value": 2600},
            {"label": "Generic", "value": 1100},
            {"label": "Competitor", "value": 500},
        ],
    },
    {
        "label": "Social",
        "value": 3100,
        "drillDownChildren": [
            {"label": "Instagram", "value": 1500},
            {"label": "LinkedIn", "value": 900},
            {"label": "Facebook", "value": 700},
        ],
    },
    {"label": "Email", "value": 1800},
    {"label": "Display", "value": 950, "color": "#F97316"},
    {"label": "Affiliate partners", "value": 640},
]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dashchart", description="Interactive chart demo")
    p.add_argument("--type", default="bar", choices=[k.value for k in ChartKind], help="Chart kind")
    p.add_argument("--drill", action="store_true", help="Enable drill-down on click")
    p.add_argument("--no-legend", action="store_true", help="Hide the legend row")
    p.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication.instance() or QApplication(sys.argv[:1])
    config = ChartConfig(
        kind=ChartKind.parse(args.type),
        show_legend=not args.no_legend,
        enable_drill_down=args.drill,
        title="Campaign revenue",
        subtitle="Click a bar to drill down" if args.drill else None,
    )
    window = QMainWindow()
    chart = InteractiveChartWidget(
        parse_series(SAMPLE_CAMPAIGNS),
        config,
        on_point_click=lambda p, i: log.info("clicked %s (%s)", p.label, i),
    )
    chart.drillLevelChanged.connect(lambda depth: log.info("drill level %d", depth))
    window.setCentralWidget(chart)
    window.resize(640, 420)
    window.setWindowTitle("dashchart demo")
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
