"""Animated line-graph driver: morph state rotation and pointer readouts.

Purpose
-------
``AnimatedGraph`` is the stateful coordinator that sits between the engine's
pure functions and an external animation clock/gesture layer. It owns the
current :class:`MorphState`, rotates it on every data update, evaluates the
visible curve for a progress value, and turns pointer x positions into
selected data points.

Concepts and structure
----------------------
- ``update(points)`` is the single writer. It fully builds the new path
  before swapping in a new ``MorphState`` with one attribute assignment.
- ``frame(progress)`` and ``select(x)`` only read the installed snapshot.
- A transition interrupted by a newer update continues from whatever curve
  was visible at that moment.

Important gotchas
-----------------
- The spring/timing curve that drives ``progress`` lives outside this class;
  callers pass already-eased values in ``[0, 1]``.
- Until the canvas is measured (at least 1x1) and at least one point exists,
  ``update`` keeps the current state untouched.

Examples
--------
>>> from linegraph import AnimatedGraph, CanvasGeometry, DataPoint
>>> graph = AnimatedGraph(CanvasGeometry(300, 100))
>>> state = graph.update([DataPoint(0, 1.0), DataPoint(1, 2.0)])
>>> graph.frame(1.0) == state.to_path
True
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from typing import Callable, Optional

from .CurvePath import CurvePath
from .graph_builder import create_graph_path, flat_line_path
from .graph_defaults import DEFAULT_SMOOTHING
from .graph_lookup import get_y_for_x, nearest_point_index
from .graph_morph import MorphState, interpolate_paths
from .graph_range import GraphProjection, resolve_graph_range
from .graph_types import (
    CanvasGeometry,
    DataPoint,
    GraphRange,
    Point2D,
    PointSelection,
    RangeOverride,
)
from .InputConvert import InputConvert

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

PointSelectedCallback = Callable[[DataPoint], None]


class AnimatedGraph:
    """Stateful driver for an animated, pointer-inspectable line graph.

    Parameters
    ----------
    geometry : CanvasGeometry or None
        Measured canvas. ``None`` until layout has run; see :meth:`resize`.
    smoothing : float, default=0.2
        Control-point smoothing passed to the path builder.
    range_override : RangeOverride or None
        Partial axis bounds applied on every update.
    on_point_selected : callable or None
        Called with the selected :class:`DataPoint` on every pointer readout.
    """

    def __init__(
        self,
        geometry: Optional[CanvasGeometry] = None,
        *,
        smoothing: float = DEFAULT_SMOOTHING,
        range_override: Optional[RangeOverride] = None,
        on_point_selected: Optional[PointSelectedCallback] = None,
    ) -> None:
        self._geometry = geometry
        self._smoothing = smoothing
        self._range_override = range_override
        self._on_point_selected = on_point_selected

        self._points: tuple[DataPoint, ...] = ()
        # Series received while the canvas was unmeasured, replayed by resize().
        self._pending_points: Optional[tuple[DataPoint, ...]] = None
        self._graph_range: Optional[GraphRange] = None
        self._state: Optional[MorphState] = None
        self._progress = 0.0
        self._path_end = 0.0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def geometry(self) -> Optional[CanvasGeometry]:
        return self._geometry

    @property
    def points(self) -> tuple[DataPoint, ...]:
        """Series the installed path was built from."""
        return self._points

    @property
    def graph_range(self) -> Optional[GraphRange]:
        """Resolved range of the installed path, if any."""
        return self._graph_range

    @property
    def state(self) -> Optional[MorphState]:
        """Installed transition snapshot, or ``None`` before the first build."""
        return self._state

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def path_end(self) -> float:
        """Fraction of the canvas width the fade mask should reveal."""
        return self._path_end

    def placeholder_path(self) -> CurvePath:
        """Flat line shown before the first build (empty if unmeasured)."""
        if self._geometry is None:
            return CurvePath()
        return flat_line_path(self._geometry)

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def update(self, points: Sequence[DataPoint]) -> Optional[MorphState]:
        """Build the path for ``points`` and start a transition towards it.

        Returns
        -------
        MorphState or None
            The newly installed snapshot, or ``None`` when nothing was built
            (no data yet or canvas not measured).
        """
        points = tuple(points)
        geometry = self._geometry
        if geometry is None or not geometry.is_measured:
            self._pending_points = points
            logger.debug("AnimatedGraph.update: canvas not measured, deferring build")
            return None
        if not points:
            logger.debug("AnimatedGraph.update: no points, keeping current state")
            return None

        graph_range = resolve_graph_range(points, self._range_override)
        path = create_graph_path(points, graph_range, geometry, smoothing=self._smoothing)

        previous = self._state
        if previous is None:
            source = flat_line_path(geometry)
        elif self._progress < 1.0:
            visible = interpolate_paths(previous.from_path, previous.to_path, self._progress)
            source = visible if visible is not None else previous.to_path
        else:
            source = previous.to_path

        state = MorphState.transition(source, path)
        logger.info(
            "AnimatedGraph.update: %d points -> %d commands (%s)",
            len(points),
            len(path),
            "cut" if state.is_cut else "blend",
        )

        self._points = points
        self._pending_points = None
        self._graph_range = graph_range
        self._state = state
        self._progress = 0.0
        self._path_end = 1.0
        return state

    def resize(self, geometry: CanvasGeometry) -> Optional[MorphState]:
        """Install new canvas measurements and rebuild the current series."""
        self._geometry = geometry
        pending = self._pending_points
        return self.update(pending if pending else self._points)

    # ------------------------------------------------------------------
    # Per-frame / per-pointer readers
    # ------------------------------------------------------------------

    def frame(self, progress: float) -> CurvePath:
        """Record ``progress`` and return the curve visible at that point."""
        value = InputConvert(progress, name="progress")
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"progress must be within [0, 1], got {value!r}")
        self._progress = value
        state = self._state
        if state is None:
            return self.placeholder_path()
        return state.at(value)

    def _projection(self) -> Optional[GraphProjection]:
        if self._geometry is None or self._graph_range is None:
            return None
        return GraphProjection(self._graph_range, self._geometry)

    def drawing_width(self) -> float:
        """On-screen width covered by the data (0 before the first build)."""
        projection = self._projection()
        if projection is None or not self._points:
            return 0.0
        return projection.drawing_width(self._points[-1])

    def indicator(self) -> Optional[Point2D]:
        """Resting indicator position at the end of the drawn data."""
        state = self._state
        if state is None or self._geometry is None:
            return None
        x = self.drawing_width() + self._geometry.horizontal_padding
        y = get_y_for_x(state.to_path, x)
        if y is None:
            return None
        return Point2D(x, y)

    def select(self, pointer_x: float) -> Optional[PointSelection]:
        """Resolve a pointer x into a curve position and a source data point.

        The pointer is clamped into the drawn span, the curve y is looked up
        on the target path, and the data point with the nearest canvas x is
        reported through ``on_point_selected``.
        """
        state = self._state
        projection = self._projection()
        if state is None or projection is None or not self._points:
            return None

        pointer_x = InputConvert(pointer_x, name="pointer_x")
        padding = self._geometry.horizontal_padding
        drawing_width = self.drawing_width()
        x = min(max(pointer_x, padding + 1), drawing_width + padding - 1)
        y = get_y_for_x(state.to_path, x)

        if padding < pointer_x < drawing_width + padding:
            self._path_end = pointer_x / self._geometry.width

        index = nearest_point_index(self._points, projection, x)
        point = self._points[index]
        self._notify_point_selected(point)
        return PointSelection(x=x, y=y, index=index, point=point)

    def end_selection(self) -> None:
        """Return the fade mask to its resting (fully revealed) position."""
        self._path_end = 1.0

    def _notify_point_selected(self, point: DataPoint) -> None:
        callback = self._on_point_selected
        if callback is None:
            return
        try:
            callback(point)
        except Exception as e:
            warnings.warn(f"on_point_selected callback failed: {e}")

    def __repr__(self) -> str:
        return (
            f"AnimatedGraph(points={len(self._points)}, geometry={self._geometry!r}, "
            f"progress={self._progress:g})"
        )


__all__ = ["AnimatedGraph", "PointSelectedCallback"]
