"""Smoothed, densely resampled curve paths from a data series.

Purpose
-------
This module builds the :class:`CurvePath` that both the animated and the
static graph stroke. Every pair of consecutive data points becomes a cubic
Bézier segment whose controls come from :func:`graph_controls.control_point`;
the segment is then resampled roughly every ``PIXEL_RATIO`` canvas pixels and
emitted as degenerate ``CubicTo`` commands.

Architecture
------------
Resampling to a pixel-driven density is what makes two paths blendable: two
series whose segments cover the same on-screen spans produce the same number
of commands, so :mod:`graph_morph` can interpolate them command by command.
When spans differ the command counts differ and the morph engine falls back
to an instant cut.

Discoverability
---------------
- ``graph_range.py`` for the projection used here.
- ``graph_morph.py`` for the blend and its compatibility check.
- ``graph_lookup.py`` for y-at-x queries on the built path.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from .bezier import spline_function
from .CurvePath import CubicTo, CurvePath, MoveTo, PathCommand
from .graph_controls import control_point
from .graph_defaults import DEFAULT_SMOOTHING, PIXEL_RATIO
from .graph_range import GraphProjection
from .graph_types import CanvasGeometry, DataPoint, GraphRange, Point2D
from .InputConvert import InputConvert

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def segment_samples(span: float) -> np.ndarray:
    """Return the Bézier parameters sampled for a segment ``span`` pixels wide.

    One sample is taken every ``PIXEL_RATIO`` pixels, both ends included. A
    segment narrower than ``PIXEL_RATIO`` still yields its end point so each
    data point contributes at least one command.
    """
    reps = math.floor(span / PIXEL_RATIO) if span > 0 else 0
    if reps <= 0:
        return np.array([1.0])
    return np.arange(reps + 1, dtype=float) / reps


def _bound_x(point: Point2D, lo: float, hi: float) -> Point2D:
    """Return ``point`` with its x clamped into ``[lo, hi]``.

    A cubic whose control x values stay inside the segment's span is
    monotonic in x, so the sampled curve never folds back or passes the
    segment's end point on unevenly spaced data.
    """
    return Point2D(min(max(point.x, lo), hi), point.y)


def create_graph_path(
    points: Sequence[DataPoint],
    graph_range: GraphRange,
    geometry: CanvasGeometry,
    *,
    smoothing: float = DEFAULT_SMOOTHING,
) -> CurvePath:
    """Build the smoothed, resampled path through ``points``.

    Parameters
    ----------
    points : Sequence[DataPoint]
        Series in ascending timestamp order.
    graph_range : GraphRange
        Resolved bounds; points outside them are clamped, not skipped.
    geometry : CanvasGeometry
        Canvas size and padding.
    smoothing : float, default=0.2
        Control-point distance as a fraction of the neighbour chord.

    Returns
    -------
    CurvePath
        Empty for no points, a single ``MoveTo`` for one point.
    """
    smoothing = InputConvert(smoothing, name="smoothing")
    if not 0.0 <= smoothing <= 1.0:
        raise ValueError(f"smoothing must be within [0, 1], got {smoothing!r}")
    if len(points) == 0:
        return CurvePath()

    projection = GraphProjection(graph_range, geometry)
    canvas = [Point2D(float(x), float(y)) for x, y in projection.points(points)]

    commands: list[PathCommand] = [MoveTo(canvas[0].x, canvas[0].y)]
    last = len(canvas) - 1
    for i in range(1, len(canvas)):
        prev = canvas[i - 1]
        prev_prev = canvas[i - 2] if i >= 2 else prev
        current = canvas[i]
        nxt = canvas[i + 1] if i < last else current

        cps = control_point(False, smoothing, prev, prev_prev, current)
        cpe = control_point(True, smoothing, current, prev, nxt)
        if prev.x <= current.x:
            cps = _bound_x(cps, prev.x, current.x)
            cpe = _bound_x(cpe, prev.x, current.x)
        spline = spline_function(prev, cps, cpe, current)

        samples = spline(segment_samples(current.x - prev.x))
        if prev.x <= current.x:
            # Keep x non-decreasing inside [prev.x, current.x] for y-at-x scans.
            samples[:, 0] = np.maximum.accumulate(np.clip(samples[:, 0], prev.x, current.x))
        for x, y in samples:
            commands.append(CubicTo.degenerate(float(x), float(y)))

    logger.debug(
        "create_graph_path: %d points -> %d commands (width=%s)",
        len(points),
        len(commands),
        geometry.width,
    )
    return CurvePath(commands)


def flat_line_path(geometry: CanvasGeometry) -> CurvePath:
    """Return the horizontal placeholder curve shown before any data arrives.

    The line runs through the vertical centre of the canvas with one
    degenerate segment every ``PIXEL_RATIO`` pixels.
    """
    y = geometry.height / 2
    commands: list[PathCommand] = [MoveTo(0.0, y)]
    x = 0
    while x < geometry.width - 1:
        commands.append(CubicTo.degenerate(float(x), y))
        x += PIXEL_RATIO
    return CurvePath(commands)


__all__ = ["create_graph_path", "flat_line_path", "segment_samples"]
