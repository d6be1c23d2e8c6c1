"""Default constants shared by the graph path engine.

Purpose
-------
This module centralizes the numeric defaults used by the path builder and the
animated/static graph helpers. Keeping them in one place gives tests a single
location to lock the sampling density and padding rules.
"""

from __future__ import annotations

# Smoothing factor applied to control-point distances (0 = straight segments).
DEFAULT_SMOOTHING = 0.2

# A sampled path command is emitted every ``PIXEL_RATIO`` canvas pixels.
PIXEL_RATIO = 2

DEFAULT_LINE_THICKNESS = 3

# Selection dot geometry; the animated graph pads its canvas so the dot is
# never clipped at the edges.
CIRCLE_RADIUS = 5
CIRCLE_RADIUS_MULTIPLIER = 6
INDICATOR_RADIUS = 7


def animated_padding(line_thickness: float = DEFAULT_LINE_THICKNESS) -> tuple[float, float]:
    """Return ``(horizontal, vertical)`` padding used by the animated graph."""
    horizontal = CIRCLE_RADIUS * CIRCLE_RADIUS_MULTIPLIER
    return float(horizontal), float(line_thickness + horizontal)


def static_padding(line_thickness: float = DEFAULT_LINE_THICKNESS) -> tuple[float, float]:
    """Return ``(horizontal, vertical)`` padding used by the static graph."""
    return float(line_thickness), float(line_thickness)


__all__ = [
    "CIRCLE_RADIUS",
    "CIRCLE_RADIUS_MULTIPLIER",
    "DEFAULT_LINE_THICKNESS",
    "DEFAULT_SMOOTHING",
    "INDICATOR_RADIUS",
    "PIXEL_RATIO",
    "animated_padding",
    "static_padding",
]
