from __future__ import annotations

import numpy as np
import pytest

from linegraph.CurvePath import CubicTo, CurvePath, MoveTo
from linegraph.graph_morph import MorphState, interpolate_paths, is_interpolatable


def _line(n_commands: int, y: float) -> CurvePath:
    cmds = [MoveTo(0.0, y)]
    cmds.extend(CubicTo.degenerate(float(2 * i), y) for i in range(n_commands - 1))
    return CurvePath(cmds)


def _wave(n_commands: int, phase: float) -> CurvePath:
    cmds = [MoveTo(0.0, 50.0 + 10 * np.sin(phase))]
    cmds.extend(
        CubicTo.degenerate(float(2 * i), float(50.0 + 10 * np.sin(phase + i / 3)))
        for i in range(n_commands - 1)
    )
    return CurvePath(cmds)


def test_morph_endpoints_are_exact() -> None:
    a, b = _wave(40, 0.0), _wave(40, 1.3)

    assert interpolate_paths(a, b, 0) == a
    assert interpolate_paths(a, b, 1) == b


def test_morph_midpoint_is_average() -> None:
    a, b = _line(10, 20.0), _line(10, 60.0)
    mid = interpolate_paths(a, b, 0.5)

    assert {cmd.y for cmd in mid} == {40.0}
    assert mid.shape == a.shape


def test_morph_coordinates_stay_between_endpoints() -> None:
    a, b = _wave(30, 0.2), _wave(30, 2.0)
    lo = np.minimum(a.coordinates(), b.coordinates())
    hi = np.maximum(a.coordinates(), b.coordinates())

    for t in np.linspace(0.0, 1.0, 11):
        coords = interpolate_paths(a, b, float(t)).coordinates()
        assert np.all(coords >= lo)
        assert np.all(coords <= hi)


def test_incompatible_paths_report_none() -> None:
    short, long = _line(50, 10.0), _line(80, 10.0)

    assert not is_interpolatable(short, long)
    assert interpolate_paths(short, long, 0.5) is None


def test_kind_mismatch_is_incompatible_even_with_equal_length() -> None:
    assert not is_interpolatable(_line(1, 0.0), CurvePath())
    assert is_interpolatable(CurvePath(), CurvePath())


def test_morph_rejects_progress_outside_unit_interval() -> None:
    a = _line(5, 0.0)
    with pytest.raises(ValueError, match="progress"):
        interpolate_paths(a, a, 1.5)


def test_morph_state_transition_falls_back_to_cut_for_grown_data() -> None:
    previous, grown = _line(50, 10.0), _line(80, 30.0)
    state = MorphState.transition(previous, grown)

    assert state.from_path == grown
    assert state.to_path == grown
    assert state.is_cut
    assert state.at(0.0) == grown


def test_morph_state_transition_keeps_compatible_pair() -> None:
    a, b = _wave(20, 0.0), _wave(20, 1.0)
    state = MorphState.transition(a, b)

    assert state.from_path is a
    assert not state.is_cut
    assert state.at(1.0) == b


def test_morph_state_is_immutable() -> None:
    state = MorphState(_line(3, 0.0), _line(3, 1.0))
    with pytest.raises(AttributeError):
        state.to_path = _line(3, 2.0)  # type: ignore[misc]


def test_curve_path_rejects_invalid_command_order() -> None:
    with pytest.raises(ValueError, match="must be MoveTo"):
        CurvePath([CubicTo.degenerate(0, 0)])
    with pytest.raises(ValueError, match="must be CubicTo"):
        CurvePath([MoveTo(0, 0), MoveTo(1, 1)])
