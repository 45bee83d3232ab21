# Shared test setup. Qt runs on the offscreen platform so widget tests work
# without a display; pytest-qt provides the ``qtbot`` fixture.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dashchart.charting.types import DataPoint  # noqa: E402
from dashchart.design import reduced_motion  # noqa: E402


@pytest.fixture(autouse=True)
def _motion_enabled():
    # reduced motion is process-global; keep tests independent of each other
    reduced_motion.prefer_reduced_motion(False)
    yield
    reduced_motion.prefer_reduced_motion(False)


@pytest.fixture
def campaign_series():
    return (
        DataPoint(
            "Search",
            40.0,
            drill_down_children=(DataPoint("Brand", 25.0), DataPoint("Generic", 15.0)),
        ),
        DataPoint("Social", 30.0),
        DataPoint("Email", 20.0),
        DataPoint("Display", 10.0),
    )
