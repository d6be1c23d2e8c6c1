"""Local-tangent control point estimation for smoothed curves."""

from __future__ import annotations

import math

from .graph_types import Point2D


def cartesian_to_polar(x: float, y: float) -> tuple[float, float]:
    """Return ``(theta, radius)`` of the vector ``(x, y)``."""
    return math.atan2(y, x), math.hypot(x, y)


def control_point(
    reverse: bool,
    smoothing: float,
    current: Point2D,
    previous: Point2D,
    next: Point2D,
) -> Point2D:
    """Return the control point for ``current`` along the chord ``previous -> next``.

    The chord is converted to polar form, its length scaled by ``smoothing``
    and re-applied from ``current``. ``reverse`` turns the angle by pi, which
    gives the incoming control point of a vertex from the same chord that
    yields the outgoing one, keeping tangents continuous across vertices.

    Parameters
    ----------
    reverse : bool
        If True, point backward along the chord.
    smoothing : float
        Fraction of the chord length in ``[0, 1]``. ``0`` returns ``current``.
    current, previous, next : Point2D
        The vertex and its neighbours; callers pass ``current`` for a missing
        neighbour at either end of the series.

    Raises
    ------
    ValueError
        If ``smoothing`` lies outside ``[0, 1]``.
    """
    if not 0.0 <= smoothing <= 1.0:
        raise ValueError(f"smoothing must be within [0, 1], got {smoothing!r}")

    theta, radius = cartesian_to_polar(next.x - previous.x, next.y - previous.y)
    angle = theta + (math.pi if reverse else 0.0)
    length = radius * smoothing
    return Point2D(
        current.x + math.cos(angle) * length,
        current.y + math.sin(angle) * length,
    )


__all__ = ["cartesian_to_polar", "control_point"]
