from __future__ import annotations

import pytest

from linegraph.graph_types import CanvasGeometry, DataPoint


@pytest.fixture
def scenario_points() -> list[DataPoint]:
    """Three-point series used throughout the path engine tests."""
    return [DataPoint(0, 10), DataPoint(1, 20), DataPoint(2, 15)]


@pytest.fixture
def canvas() -> CanvasGeometry:
    """Unpadded 300x100 canvas."""
    return CanvasGeometry(300, 100)
