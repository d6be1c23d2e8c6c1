"""Blending between two structurally compatible curve paths.

Purpose
-------
This module interpolates a path command-by-command as an animation
progresses and owns the :class:`MorphState` snapshot that pairs the source
and target curves of a transition.

Important gotchas
-----------------
- Two paths blend only when their *shapes* match (same command count and
  kinds in order). :func:`interpolate_paths` returns ``None`` for anything
  else; callers treat that as an instant cut to the target.
- ``MorphState`` is frozen. A data update installs a new pair; it never
  edits the old one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .CurvePath import CurvePath
from .InputConvert import InputConvert

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def is_interpolatable(a: CurvePath, b: CurvePath) -> bool:
    """Return True when ``a`` and ``b`` have identical command shapes."""
    return len(a) == len(b) and a.shape == b.shape


def _check_progress(progress: float) -> float:
    value = InputConvert(progress, name="progress")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"progress must be within [0, 1], got {value!r}")
    return value


def interpolate_paths(
    from_path: CurvePath,
    to_path: CurvePath,
    progress: float,
) -> Optional[CurvePath]:
    """Return the blend of ``from_path`` and ``to_path`` at ``progress``.

    Each coordinate is ``(1 - t) * from + t * to``, bounded by its two
    endpoints so rounding never overshoots. ``t = 0`` reproduces
    ``from_path`` and ``t = 1`` reproduces ``to_path`` exactly.

    Returns
    -------
    CurvePath or None
        ``None`` when the paths are not structurally compatible.

    Raises
    ------
    ValueError
        If ``progress`` lies outside ``[0, 1]``.
    """
    t = _check_progress(progress)
    if not is_interpolatable(from_path, to_path):
        logger.debug(
            "interpolate_paths: incompatible shapes (%d vs %d commands)",
            len(from_path),
            len(to_path),
        )
        return None

    a = from_path.coordinates()
    b = to_path.coordinates()
    blended = (1.0 - t) * a + t * b
    blended = np.clip(blended, np.minimum(a, b), np.maximum(a, b))
    return CurvePath.from_coordinates(to_path.shape, blended)


@dataclass(frozen=True)
class MorphState:
    """Source/target pair of one animated transition.

    Parameters
    ----------
    from_path : CurvePath
        Curve visible when the transition starts.
    to_path : CurvePath
        Curve the transition ends on.
    """

    from_path: CurvePath
    to_path: CurvePath

    @classmethod
    def transition(cls, from_path: CurvePath, to_path: CurvePath) -> "MorphState":
        """Pair ``from_path`` with ``to_path``, or cut to ``to_path`` if they cannot blend."""
        if is_interpolatable(from_path, to_path):
            return cls(from_path, to_path)
        logger.debug("MorphState.transition: falling back to an instant cut")
        return cls(to_path, to_path)

    @property
    def is_cut(self) -> bool:
        """Return True when the transition has no blend (source equals target)."""
        return self.from_path == self.to_path

    def at(self, progress: float) -> CurvePath:
        """Return the curve visible at ``progress``."""
        blended = interpolate_paths(self.from_path, self.to_path, progress)
        # Pairs are only ever built compatible; keep the target if that breaks.
        return blended if blended is not None else self.to_path


__all__ = ["MorphState", "interpolate_paths", "is_interpolatable"]
