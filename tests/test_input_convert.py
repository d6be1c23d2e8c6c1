from __future__ import annotations

import math

import numpy as np
import pytest

from linegraph.InputConvert import InputConvert, TimestampConvert


def test_inputconvert_accepts_numbers_and_numpy_scalars() -> None:
    assert InputConvert(3) == 3.0
    assert InputConvert(np.float32(1.5)) == 1.5
    assert InputConvert(np.int64(7)) == 7.0


def test_inputconvert_string_sympy_path() -> None:
    assert InputConvert(" 2.5 ") == 2.5
    assert InputConvert("pi/2") == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("bad", ["", "not a number", "I", "oo"])
def test_inputconvert_rejects_unparseable_or_nonreal_strings(bad: str) -> None:
    with pytest.raises(ValueError):
        InputConvert(bad)


def test_inputconvert_rejects_bools_and_non_numeric_objects() -> None:
    with pytest.raises(TypeError, match="bool"):
        InputConvert(True)
    with pytest.raises(TypeError, match="list"):
        InputConvert([1.0])


def test_inputconvert_rejects_non_finite_and_negative_when_requested() -> None:
    with pytest.raises(ValueError, match="finite"):
        InputConvert(float("nan"))
    with pytest.raises(ValueError, match="non-negative"):
        InputConvert(-2, name="width", allow_negative=False)


def test_timestamp_convert_handles_datetime64_in_seconds() -> None:
    assert TimestampConvert(np.datetime64("1970-01-01T00:01:00")) == 60.0
    assert TimestampConvert(12) == 12.0
