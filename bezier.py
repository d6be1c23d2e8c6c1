"""Cubic Bézier segment functions compiled from a SymPy definition.

Purpose
-------
The path builder samples each curve segment many times per update. The
Bernstein form of the cubic is written once symbolically and compiled to a
vectorized NumPy callable with :func:`sympy.lambdify`; the compiled function
is cached so repeated builds reuse it.

Notes
-----
The Bernstein form is kept unexpanded so the segment passes exactly through
its endpoints at ``t = 0`` and ``t = 1``. Expanding it into monomials would
introduce rounding at the endpoints.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

import numpy as np
import sympy as sp

from .graph_types import Point2D

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

_T, _P0, _P1, _P2, _P3 = sp.symbols("t p0 p1 p2 p3", real=True)


def bernstein_cubic() -> sp.Expr:
    """Return the symbolic cubic Bézier in Bernstein form."""
    u = 1 - _T
    return u**3 * _P0 + 3 * u**2 * _T * _P1 + 3 * u * _T**2 * _P2 + _T**3 * _P3


@lru_cache(maxsize=1)
def _compiled_cubic() -> Callable[..., np.ndarray]:
    logger.debug("bezier: compiling cubic Bernstein polynomial")
    return sp.lambdify((_T, _P0, _P1, _P2, _P3), bernstein_cubic(), modules="numpy")


def spline_function(
    start: Point2D,
    control_start: Point2D,
    control_end: Point2D,
    end: Point2D,
) -> Callable[[np.ndarray], np.ndarray]:
    """Return ``f(t) -> (n, 2)`` sampling the cubic through the four points.

    Parameters
    ----------
    start, end : Point2D
        Segment endpoints.
    control_start, control_end : Point2D
        Outgoing control of ``start`` and incoming control of ``end``.
    """
    cubic = _compiled_cubic()

    def evaluate(t: np.ndarray) -> np.ndarray:
        ts = np.atleast_1d(np.asarray(t, dtype=float))
        xs = cubic(ts, start.x, control_start.x, control_end.x, end.x)
        ys = cubic(ts, start.y, control_start.y, control_end.y, end.y)
        return np.column_stack(
            (np.broadcast_to(xs, ts.shape), np.broadcast_to(ys, ts.shape))
        )

    return evaluate


__all__ = ["bernstein_cubic", "spline_function"]
