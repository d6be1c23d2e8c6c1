"""Value types for the graph path engine.

Purpose
-------
This module defines the immutable records exchanged between the range
resolver, the coordinate projection, the path builder and the animated graph
driver. All records are frozen dataclasses so a value handed to a caller can
never be mutated behind the engine's back.

Notes
-----
Timestamps may be ``datetime`` objects, ``numpy.datetime64`` values or plain
reals. They are compared and projected through
:func:`InputConvert.TimestampConvert`, so all three kinds can share one axis
as long as a single series does not mix naive and aware datetimes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

import numpy as np

from .graph_defaults import DEFAULT_LINE_THICKNESS, animated_padding, static_padding
from .InputConvert import InputConvert

Timestamp = Union[datetime, np.datetime64, float, int]


@dataclass(frozen=True)
class DataPoint:
    """One timestamp/value sample of the series.

    Parameters
    ----------
    timestamp : datetime, numpy.datetime64 or float
        Sample time. Sequences are expected in ascending order.
    value : float
        Sample value.
    """

    timestamp: Timestamp
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", InputConvert(self.value, name="value"))


@dataclass(frozen=True)
class AxisRange:
    """Concrete ``[min, max]`` bounds for one axis."""

    min: Any
    max: Any


@dataclass(frozen=True)
class GraphRange:
    """Resolved x (timestamp) and y (value) ranges."""

    x: AxisRange
    y: AxisRange


@dataclass(frozen=True)
class RangeOverride:
    """Caller-supplied partial axis bounds.

    Any bound left as ``None`` is derived from the data. Bounds are applied
    independently per axis and per side.
    """

    x_min: Optional[Timestamp] = None
    x_max: Optional[Timestamp] = None
    y_min: Optional[float] = None
    y_max: Optional[float] = None


@dataclass(frozen=True)
class Point2D:
    """Canvas-space coordinate (top-left origin, y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True)
class CanvasGeometry:
    """Measured canvas size and inner padding.

    Parameters
    ----------
    width, height : float
        Canvas size in pixels.
    horizontal_padding, vertical_padding : float
        Inset applied on each side (left/right and top/bottom).
    """

    width: float
    height: float
    horizontal_padding: float = 0.0
    vertical_padding: float = 0.0

    def __post_init__(self) -> None:
        for attr in ("width", "height", "horizontal_padding", "vertical_padding"):
            value = InputConvert(getattr(self, attr), name=attr, allow_negative=False)
            object.__setattr__(self, attr, value)

    @property
    def drawable_width(self) -> float:
        """Width of the padded drawing area (never negative)."""
        return max(self.width - 2 * self.horizontal_padding, 0.0)

    @property
    def drawable_height(self) -> float:
        """Height of the padded drawing area (never negative)."""
        return max(self.height - 2 * self.vertical_padding, 0.0)

    @property
    def is_measured(self) -> bool:
        """Return True once the canvas has at least one pixel in each direction."""
        return self.width >= 1 and self.height >= 1

    @classmethod
    def for_animated(
        cls, width: float, height: float, *, line_thickness: float = DEFAULT_LINE_THICKNESS
    ) -> "CanvasGeometry":
        """Geometry padded so the selection dot fits inside the canvas."""
        horizontal, vertical = animated_padding(line_thickness)
        return cls(width, height, horizontal, vertical)

    @classmethod
    def for_static(
        cls, width: float, height: float, *, line_thickness: float = DEFAULT_LINE_THICKNESS
    ) -> "CanvasGeometry":
        """Geometry padded by the stroke thickness so round caps are not clipped."""
        horizontal, vertical = static_padding(line_thickness)
        return cls(width, height, horizontal, vertical)


@dataclass(frozen=True)
class PointSelection:
    """Result of a pointer readout on the animated graph.

    Parameters
    ----------
    x : float
        Pointer x after clamping into the drawn span.
    y : float or None
        Curve y at ``x``, or ``None`` when the lookup found nothing.
    index : int
        Index of the selected source data point.
    point : DataPoint
        The selected source data point.
    """

    x: float
    y: Optional[float]
    index: int
    point: DataPoint


__all__ = [
    "AxisRange",
    "CanvasGeometry",
    "DataPoint",
    "GraphRange",
    "Point2D",
    "PointSelection",
    "RangeOverride",
    "Timestamp",
]
