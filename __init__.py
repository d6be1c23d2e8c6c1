"""Top-level public API for the ``linegraph`` package.

This module re-exports the path engine so callers can import from a single
namespace, for example:

>>> from linegraph import DataPoint, CanvasGeometry, resolve_graph_range, create_graph_path  # doctest: +SKIP

It exposes both the stateless building blocks (range resolution, projection,
path building, morphing, y-at-x lookup) and the stateful ``AnimatedGraph``
driver for integrations that want the morph-state rotation handled for them.
"""

from .bezier import spline_function
from .CurvePath import CubicTo, CurvePath, MoveTo, PathCommand
from .graph_animation import AnimatedGraph
from .graph_builder import create_graph_path, flat_line_path, segment_samples
from .graph_controls import control_point
from .graph_defaults import DEFAULT_SMOOTHING, PIXEL_RATIO
from .graph_export import curve_figure, path_to_svg
from .graph_lookup import get_y_for_x, nearest_point_index
from .graph_morph import MorphState, interpolate_paths, is_interpolatable
from .graph_range import GraphProjection, normalize_x, normalize_y, resolve_graph_range
from .graph_static import static_graph_path
from .graph_types import (
    AxisRange,
    CanvasGeometry,
    DataPoint,
    GraphRange,
    Point2D,
    PointSelection,
    RangeOverride,
)
from .InputConvert import InputConvert
