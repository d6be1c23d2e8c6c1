"""Axis range resolution and data-to-canvas projection.

Purpose
-------
This module turns an ordered series of :class:`DataPoint` records into
concrete axis bounds and maps data coordinates into padded canvas space.

Architecture
------------
The helpers are stateless and side-effect free. ``resolve_graph_range``
feeds :class:`GraphProjection`, which is then shared by the control-point
estimator and the path builder so every stage sees the same mapping.

Examples
--------
>>> from linegraph.graph_types import CanvasGeometry, DataPoint
>>> pts = [DataPoint(0, 10), DataPoint(1, 20), DataPoint(2, 15)]
>>> rng = resolve_graph_range(pts)
>>> (rng.y.min, rng.y.max)
(10.0, 20.0)
>>> GraphProjection(rng, CanvasGeometry(300, 100)).point(pts[0])
Point2D(x=0.0, y=100.0)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

from .graph_types import AxisRange, CanvasGeometry, DataPoint, GraphRange, Point2D, RangeOverride
from .InputConvert import InputConvert, TimestampConvert

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def resolve_graph_range(
    points: Sequence[DataPoint],
    override: Optional[RangeOverride] = None,
) -> Optional[GraphRange]:
    """Derive concrete x/y bounds from ``points`` and an optional override.

    Parameters
    ----------
    points : Sequence[DataPoint]
        Series in ascending timestamp order (not re-sorted).
    override : RangeOverride or None
        Partial bounds that take precedence over derived ones.

    Returns
    -------
    GraphRange or None
        ``None`` when ``points`` is empty; callers treat that as "no data yet".

    Raises
    ------
    ValueError
        If an override bound leaves an axis with ``min > max``.
    """
    if len(points) == 0:
        logger.debug("resolve_graph_range: no points, nothing to resolve")
        return None

    override = override if override is not None else RangeOverride()

    x_min = override.x_min if override.x_min is not None else points[0].timestamp
    x_max = override.x_max if override.x_max is not None else points[-1].timestamp

    if override.y_min is not None:
        y_min = InputConvert(override.y_min, name="y_min")
    else:
        y_min = min(p.value for p in points)
    if override.y_max is not None:
        y_max = InputConvert(override.y_max, name="y_max")
    else:
        y_max = max(p.value for p in points)

    if (override.y_min is not None or override.y_max is not None) and y_min > y_max:
        raise ValueError(f"y range is inverted: min={y_min!r} > max={y_max!r}")
    if (override.x_min is not None or override.x_max is not None) and (
        TimestampConvert(x_min) > TimestampConvert(x_max)
    ):
        raise ValueError(f"x range is inverted: min={x_min!r} > max={x_max!r}")

    resolved = GraphRange(x=AxisRange(x_min, x_max), y=AxisRange(y_min, y_max))
    logger.debug("resolve_graph_range: %s", resolved)
    return resolved


def _pixel_factor(value: float, lo: float, hi: float) -> float:
    if value < lo or value > hi:
        return 0.0
    diff = hi - lo
    if diff == 0:
        return 0.0
    return (value - lo) / diff


def normalize_x(timestamp: Any, x_range: AxisRange) -> float:
    """Return the position of ``timestamp`` within ``x_range`` as a fraction.

    Timestamps outside the range collapse to ``0`` (the axis origin) rather
    than extrapolating; a degenerate range also yields ``0``.
    """
    return _pixel_factor(
        TimestampConvert(timestamp),
        TimestampConvert(x_range.min),
        TimestampConvert(x_range.max),
    )


def normalize_y(value: float, y_range: AxisRange) -> float:
    """Return the position of ``value`` within ``y_range`` as a fraction.

    Same clamping rules as :func:`normalize_x`.
    """
    return _pixel_factor(float(value), float(y_range.min), float(y_range.max))


class GraphProjection:
    """Project data points into padded, y-inverted canvas space.

    Parameters
    ----------
    graph_range : GraphRange
        Resolved axis bounds.
    geometry : CanvasGeometry
        Canvas size and padding.
    """

    __slots__ = ("graph_range", "geometry")

    def __init__(self, graph_range: GraphRange, geometry: CanvasGeometry) -> None:
        self.graph_range = graph_range
        self.geometry = geometry

    def x_for(self, timestamp: Any) -> float:
        """Return the canvas x of ``timestamp``."""
        geo = self.geometry
        return geo.drawable_width * normalize_x(timestamp, self.graph_range.x) + geo.horizontal_padding

    def y_for(self, value: float) -> float:
        """Return the canvas y of ``value`` (larger values sit higher)."""
        geo = self.geometry
        dh = geo.drawable_height
        return dh - dh * normalize_y(value, self.graph_range.y) + geo.vertical_padding

    def point(self, data_point: DataPoint) -> Point2D:
        """Return the canvas position of one data point."""
        return Point2D(self.x_for(data_point.timestamp), self.y_for(data_point.value))

    def points(self, data_points: Sequence[DataPoint]) -> np.ndarray:
        """Return an ``(n, 2)`` array of canvas positions for ``data_points``."""
        out = np.empty((len(data_points), 2), dtype=float)
        for i, p in enumerate(data_points):
            out[i, 0] = self.x_for(p.timestamp)
            out[i, 1] = self.y_for(p.value)
        return out

    def drawing_width(self, last: DataPoint) -> float:
        """Return the on-screen width covered by the data up to ``last``."""
        geo = self.geometry
        return max(float(np.floor(geo.drawable_width * normalize_x(last.timestamp, self.graph_range.x))), 0.0)

    def __repr__(self) -> str:
        return f"GraphProjection(graph_range={self.graph_range!r}, geometry={self.geometry!r})"


__all__ = ["GraphProjection", "normalize_x", "normalize_y", "resolve_graph_range"]
