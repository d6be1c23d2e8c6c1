"""Y-at-X readouts on built curve paths."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import numpy as np

from .CurvePath import CurvePath
from .graph_range import GraphProjection
from .graph_types import DataPoint


def get_y_for_x(path: CurvePath, x: float) -> Optional[float]:
    """Return the curve's y at canvas ``x``.

    Commands are scanned in order and the y of the first one whose end x is
    ``>= x`` is returned. The builder samples densely enough that no
    sub-segment interpolation is needed.

    Returns
    -------
    float or None
        ``None`` if the path is empty or ``x`` lies outside its horizontal
        span.
    """
    ends = path.end_points()
    if ends.size == 0:
        return None
    xs = ends[:, 0]
    if x < xs.min() or x > xs.max():
        return None
    idx = int(np.argmax(xs >= x))
    return float(ends[idx, 1])


def nearest_point_index(
    points: Sequence[DataPoint],
    projection: GraphProjection,
    x: float,
) -> Optional[int]:
    """Return the index of the data point whose canvas x is nearest to ``x``.

    Ties resolve to the earlier point. ``None`` for an empty series.
    """
    if len(points) == 0:
        return None
    xs = projection.points(points)[:, 0]
    return int(np.argmin(np.abs(xs - x)))


__all__ = ["get_y_for_x", "nearest_point_index"]
