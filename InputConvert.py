# === SECTION: InputConvert [id: InputConvert]===
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

import numpy as np
import sympy as sp


def InputConvert(obj: Any, *, name: str = "value", allow_negative: bool = True) -> float:
    """
    Convert `obj` to a finite real ``float``.

    Rules:
    - Numbers (Python or NumPy scalars): cast via float(obj).
    - Strings:
        1) try float(s)
        2) else parse as a SymPy expression (e.g. "pi/2", "2**10") and evaluate.
    - Booleans are rejected; they are almost always a caller mistake.

    Parameters
    ----------
    name:
        Name used in error messages.
    allow_negative:
        If False, negative results raise ValueError (used for canvas sizes).

    Raises
    ------
    TypeError
        If `obj` is not numeric-like.
    ValueError
        If conversion fails, the result is complex, non-finite, or negative
        while `allow_negative` is False.
    """
    if isinstance(obj, (bool, np.bool_)):
        raise TypeError(f"{name} must be a real number, got bool")

    if isinstance(obj, (int, float, np.integer, np.floating)):
        result = float(obj)
    elif isinstance(obj, str):
        s = obj.strip()
        if s == "":
            raise ValueError(f"Cannot convert empty string to {name}.")
        try:
            result = float(s)
        except ValueError:
            try:
                expr = sp.sympify(s)
                val = complex(expr.evalf())
            except Exception as e:
                raise ValueError(
                    f"Could not convert {obj!r} to {name} (neither directly nor via SymPy)."
                ) from e
            if val.imag != 0:
                raise ValueError(f"Could not convert non-real {obj!r} to {name}.")
            result = val.real
    else:
        raise TypeError(f"{name} must be a real number, got {type(obj).__name__}")

    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite, got {result!r}")
    if not allow_negative and result < 0:
        raise ValueError(f"{name} must be non-negative, got {result!r}")
    return result


def TimestampConvert(obj: Any) -> float:
    """
    Convert a timestamp to seconds on a float axis.

    Accepts ``datetime``/``date`` objects, ``numpy.datetime64`` values and
    plain reals (already expressed on a numeric axis).
    """
    if isinstance(obj, np.datetime64):
        return float(obj.astype("datetime64[ns]").astype(np.int64)) / 1e9
    if isinstance(obj, datetime):
        return obj.timestamp()
    if isinstance(obj, date):
        return datetime(obj.year, obj.month, obj.day).timestamp()
    return InputConvert(obj, name="timestamp")

# === END OF SECTION: InputConvert [id: InputConvert]===
