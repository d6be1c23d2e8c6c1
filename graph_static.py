"""Static (non-animated) line-graph path helper."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .CurvePath import CurvePath
from .graph_builder import create_graph_path
from .graph_defaults import DEFAULT_LINE_THICKNESS, DEFAULT_SMOOTHING
from .graph_range import resolve_graph_range
from .graph_types import CanvasGeometry, DataPoint, RangeOverride


def static_graph_path(
    points: Sequence[DataPoint],
    width: float,
    height: float,
    *,
    line_thickness: float = DEFAULT_LINE_THICKNESS,
    smoothing: float = DEFAULT_SMOOTHING,
    range_override: Optional[RangeOverride] = None,
) -> CurvePath:
    """Build the path stroked by a static graph of ``width`` x ``height``.

    The canvas is padded by ``line_thickness`` on every side so round stroke
    caps stay inside it. Returns an empty path when there are no points.
    """
    graph_range = resolve_graph_range(points, range_override)
    if graph_range is None:
        return CurvePath()
    geometry = CanvasGeometry.for_static(width, height, line_thickness=line_thickness)
    return create_graph_path(points, graph_range, geometry, smoothing=smoothing)


__all__ = ["static_graph_path"]
