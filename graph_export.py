"""Export helpers that hand a :class:`CurvePath` to a drawing surface.

Purpose
-------
The engine stops at geometry; stroking and filling belong to the caller.
This module offers the two hand-off formats the toolkit supports: SVG path
data, and a Plotly figure that draws the path as a layout shape in canvas
pixel coordinates (y axis reversed to keep the top-left origin).
"""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from .CurvePath import CurvePath
from .graph_types import CanvasGeometry, Point2D


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def path_to_svg(path: CurvePath) -> str:
    """Return SVG path data (``"M x y C ..."``) for ``path``."""
    parts = []
    for cmd in path:
        parts.append(cmd.kind + " " + " ".join(_fmt(v) for v in cmd.coords()))
    return " ".join(parts)


def curve_figure(
    path: CurvePath,
    geometry: CanvasGeometry,
    *,
    color: str = "#1f77b4",
    line_width: float = 3,
    indicator: Optional[Point2D] = None,
) -> go.Figure:
    """Return a Plotly figure stroking ``path`` on a ``geometry``-sized canvas.

    Parameters
    ----------
    path : CurvePath
        Curve to draw. An empty path yields a blank canvas.
    geometry : CanvasGeometry
        Canvas size; the axes span exactly ``[0, width]`` x ``[height, 0]``.
    color : str
        Stroke color (any Plotly color string).
    line_width : float
        Stroke width in pixels.
    indicator : Point2D or None
        Optional marker position, e.g. from ``AnimatedGraph.indicator()``.
    """
    fig = go.Figure()
    fig.update_layout(
        width=geometry.width,
        height=geometry.height,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_xaxes(range=[0, geometry.width], visible=False)
    fig.update_yaxes(range=[geometry.height, 0], visible=False)

    if not path.is_empty():
        fig.add_shape(
            type="path",
            path=path_to_svg(path),
            line=dict(color=color, width=line_width),
        )
    if indicator is not None:
        fig.add_trace(
            go.Scatter(
                x=[indicator.x],
                y=[indicator.y],
                mode="markers",
                marker=dict(color=color, size=2 * line_width + 8),
                hoverinfo="skip",
            )
        )
    return fig


__all__ = ["curve_figure", "path_to_svg"]
