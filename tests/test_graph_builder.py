from __future__ import annotations

import numpy as np
import pytest

from linegraph.CurvePath import CubicTo, CurvePath, MoveTo
from linegraph.graph_builder import create_graph_path, flat_line_path, segment_samples
from linegraph.graph_lookup import get_y_for_x
from linegraph.graph_range import resolve_graph_range
from linegraph.graph_types import CanvasGeometry, DataPoint, RangeOverride


def test_scenario_path_starts_at_bottom_left_and_ends_at_right_edge(scenario_points, canvas) -> None:
    path = create_graph_path(scenario_points, resolve_graph_range(scenario_points), canvas, smoothing=0.2)

    first = path[0]
    assert isinstance(first, MoveTo)
    assert (first.x, first.y) == (0.0, 100.0)
    assert path[-1].x == pytest.approx(300.0)
    assert path[-1].y == pytest.approx(50.0)


def test_command_count_is_driven_by_segment_width(scenario_points, canvas) -> None:
    path = create_graph_path(scenario_points, resolve_graph_range(scenario_points), canvas)

    # Two 150px segments sampled every 2px, both ends included.
    assert len(path) == 1 + 76 + 76
    assert path.shape == ("M",) + ("C",) * 152
    assert all(isinstance(cmd, CubicTo) for cmd in path[1:])


def test_sampled_commands_are_degenerate_cubics(scenario_points, canvas) -> None:
    path = create_graph_path(scenario_points, resolve_graph_range(scenario_points), canvas)
    for cmd in path[1:]:
        assert cmd.x1 == cmd.x2 == cmd.x
        assert cmd.y1 == cmd.y2 == cmd.y


def test_single_point_builds_only_the_move_command(canvas) -> None:
    pts = [DataPoint(0, 5)]
    path = create_graph_path(pts, resolve_graph_range(pts), canvas)

    assert len(path) == 1
    assert isinstance(path[0], MoveTo)


def test_empty_series_builds_empty_path(canvas, scenario_points) -> None:
    path = create_graph_path([], resolve_graph_range(scenario_points), canvas)
    assert path.is_empty()
    assert path == CurvePath()


def test_out_of_range_points_are_clamped_not_dropped(scenario_points, canvas) -> None:
    auto = create_graph_path(scenario_points, resolve_graph_range(scenario_points), canvas)
    clipped_range = resolve_graph_range(scenario_points, RangeOverride(y_max=15))
    clipped = create_graph_path(scenario_points, clipped_range, canvas)

    assert len(clipped) == len(auto)
    # value 20 is above y_max and collapses to the axis origin (bottom edge).
    assert clipped.end_points()[76, 1] == pytest.approx(100.0)


def test_zero_smoothing_gives_straight_segments() -> None:
    pts = [DataPoint(0, 0), DataPoint(1, 10)]
    path = create_graph_path(pts, resolve_graph_range(pts), CanvasGeometry(100, 100), smoothing=0)

    ends = path.end_points()
    np.testing.assert_allclose(ends[:, 0] + ends[:, 1], 100.0)


def test_commands_stay_inside_padded_canvas_for_even_spacing() -> None:
    pts = [DataPoint(i, v) for i, v in enumerate([3, 8, 1, 9, 4, 6])]
    geometry = CanvasGeometry(400, 120, 12, 9)
    path = create_graph_path(pts, resolve_graph_range(pts), geometry)

    xs = path.end_points()[:, 0]
    assert xs.min() >= 12 - 1e-9
    assert xs.max() <= 400 - 12 + 1e-9
    assert np.all(np.diff(xs) >= -1e-9)


def test_create_graph_path_rejects_invalid_smoothing(scenario_points, canvas) -> None:
    with pytest.raises(ValueError, match="smoothing"):
        create_graph_path(scenario_points, resolve_graph_range(scenario_points), canvas, smoothing=2)


def test_segment_samples_include_both_ends() -> None:
    np.testing.assert_allclose(segment_samples(4.0), [0.0, 0.5, 1.0])
    np.testing.assert_allclose(segment_samples(1.0), [1.0])
    np.testing.assert_allclose(segment_samples(0.0), [1.0])


def test_flat_line_path_runs_through_vertical_centre() -> None:
    path = flat_line_path(CanvasGeometry(10, 20))

    assert path[0] == MoveTo(0.0, 10.0)
    assert [cmd.x for cmd in path[1:]] == [0.0, 2.0, 4.0, 6.0, 8.0]
    assert {cmd.y for cmd in path} == {10.0}


def test_uneven_spacing_keeps_samples_monotonic_and_inside_segment() -> None:
    pts = [DataPoint(0, 0), DataPoint(0.9, 10), DataPoint(1.0, 5)]
    path = create_graph_path(pts, resolve_graph_range(pts), CanvasGeometry(100, 100))

    xs = path.end_points()[:, 0]
    assert xs.max() <= 100.0
    assert np.all(np.diff(xs) >= 0)
    assert get_y_for_x(path, 100.0) == pytest.approx(50.0)
    assert get_y_for_x(path, 90.0) == pytest.approx(0.0)
