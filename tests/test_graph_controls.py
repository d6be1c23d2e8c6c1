from __future__ import annotations

import math

import pytest

from linegraph.graph_controls import cartesian_to_polar, control_point
from linegraph.graph_types import Point2D


def test_cartesian_to_polar_returns_angle_and_radius() -> None:
    theta, radius = cartesian_to_polar(0.0, 2.0)
    assert theta == pytest.approx(math.pi / 2)
    assert radius == pytest.approx(2.0)


def test_control_point_follows_neighbour_chord() -> None:
    cp = control_point(False, 0.2, Point2D(100, 50), Point2D(0, 0), Point2D(200, 100))
    assert cp.x == pytest.approx(140.0)
    assert cp.y == pytest.approx(70.0)


def test_control_point_reverse_points_backwards_along_chord() -> None:
    cp = control_point(True, 0.2, Point2D(100, 50), Point2D(0, 0), Point2D(200, 100))
    assert cp.x == pytest.approx(60.0)
    assert cp.y == pytest.approx(30.0)


def test_control_point_zero_smoothing_is_the_vertex() -> None:
    current = Point2D(12.5, 7.0)
    cp = control_point(False, 0.0, current, Point2D(0, 0), Point2D(30, 30))
    assert cp.x == pytest.approx(current.x)
    assert cp.y == pytest.approx(current.y)


def test_control_point_with_coincident_neighbours_stays_on_vertex() -> None:
    current = Point2D(5, 5)
    assert control_point(True, 0.5, current, current, current) == current


@pytest.mark.parametrize("smoothing", [-0.1, 1.5])
def test_control_point_rejects_smoothing_outside_unit_interval(smoothing: float) -> None:
    with pytest.raises(ValueError, match="smoothing"):
        control_point(False, smoothing, Point2D(0, 0), Point2D(0, 0), Point2D(1, 1))
