"""Immutable drawing-command sequence for one open curve.

A ``CurvePath`` is a tuple of tagged commands: exactly one :class:`MoveTo`
followed by any number of :class:`CubicTo` segments. The builder assembles
all commands before constructing the path, so a ``CurvePath`` is never
observed half-built.

The *shape* of a path (its command kinds in order) decides whether two paths
can be blended; see :mod:`graph_morph`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, Union, overload

import numpy as np

from .graph_types import Point2D


@dataclass(frozen=True)
class MoveTo:
    """Start the curve at ``(x, y)``."""

    x: float
    y: float

    kind: ClassVar[str] = "M"
    arity: ClassVar[int] = 2

    def coords(self) -> tuple[float, ...]:
        return (self.x, self.y)

    @property
    def end(self) -> Point2D:
        return Point2D(self.x, self.y)


@dataclass(frozen=True)
class CubicTo:
    """Cubic segment with controls ``(x1, y1)``, ``(x2, y2)`` ending at ``(x, y)``."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    kind: ClassVar[str] = "C"
    arity: ClassVar[int] = 6

    def coords(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)

    @property
    def end(self) -> Point2D:
        return Point2D(self.x, self.y)

    @classmethod
    def degenerate(cls, x: float, y: float) -> "CubicTo":
        """Segment whose controls and end point all sit at ``(x, y)``."""
        return cls(x, y, x, y, x, y)


PathCommand = Union[MoveTo, CubicTo]

_COMMAND_TYPES: dict[str, type] = {"M": MoveTo, "C": CubicTo}


class CurvePath(Sequence):
    """Ordered, immutable sequence of path commands.

    Parameters
    ----------
    commands : Iterable[PathCommand]
        ``MoveTo`` first, ``CubicTo`` afterwards. An empty iterable builds the
        empty path, meaning "no curve".

    Raises
    ------
    ValueError
        If the command order is invalid.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[PathCommand] = ()) -> None:
        cmds = tuple(commands)
        for i, cmd in enumerate(cmds):
            expected = MoveTo if i == 0 else CubicTo
            if not isinstance(cmd, expected):
                raise ValueError(
                    f"CurvePath command {i} must be {expected.__name__}, got {type(cmd).__name__}"
                )
        self._commands: tuple[PathCommand, ...] = cmds

    @classmethod
    def from_coordinates(cls, shape: Sequence[str], coords: np.ndarray) -> "CurvePath":
        """Rebuild a path of ``shape`` from a flat coordinate array."""
        flat = np.asarray(coords, dtype=float).ravel()
        cmds: list[PathCommand] = []
        offset = 0
        for kind in shape:
            cmd_type = _COMMAND_TYPES[kind]
            values = flat[offset : offset + cmd_type.arity]
            cmds.append(cmd_type(*(float(v) for v in values)))
            offset += cmd_type.arity
        if offset != flat.size:
            raise ValueError(f"Expected {offset} coordinates for shape, got {flat.size}")
        return cls(cmds)

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return self._commands

    @property
    def shape(self) -> tuple[str, ...]:
        """Command kinds in order, e.g. ``("M", "C", "C")``."""
        return tuple(cmd.kind for cmd in self._commands)

    def is_empty(self) -> bool:
        return not self._commands

    def coordinates(self) -> np.ndarray:
        """Return every command coordinate as one flat float array."""
        return np.fromiter(
            (v for cmd in self._commands for v in cmd.coords()), dtype=float
        )

    def end_points(self) -> np.ndarray:
        """Return an ``(n, 2)`` array of each command's end point."""
        if not self._commands:
            return np.empty((0, 2), dtype=float)
        return np.array([(cmd.end.x, cmd.end.y) for cmd in self._commands], dtype=float)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    @overload
    def __getitem__(self, index: int) -> PathCommand: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PathCommand, ...]: ...

    def __getitem__(self, index):
        return self._commands[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurvePath):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        if not self._commands:
            return "CurvePath([])"
        first = self._commands[0]
        last = self._commands[-1].end
        return (
            f"CurvePath(commands={len(self._commands)}, "
            f"start=({first.x:g}, {first.y:g}), end=({last.x:g}, {last.y:g}))"
        )


__all__ = ["CubicTo", "CurvePath", "MoveTo", "PathCommand"]
