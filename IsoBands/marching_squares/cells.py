"""
Cell Classification
===================

Turns one grid cell into the edge fragments of the band boundary that
cross it. The four corners are classified against the band, the resulting
cell code selects one or two shapes from
:mod:`IsoBands.marching_squares.tables`, and the shape fragments are
placed on the cell sides by linear interpolation between the corner
values.

The 256 possible codes are expanded into a dispatch list when the module
is imported, so classifying a cell is a single list lookup.
"""

import logging
import math
from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple

import IsoBands
from IsoBands.errors import UnexpectedCellCodeError
from IsoBands.marching_squares.tables import (
    code_table,
    saddle_table,
    shape_table,
    side_corners,
)

logger = logging.getLogger(IsoBands.__name__)

__all__ = [
    "BandSettings",
    "Cell",
    "Edge",
    "EnterType",
    "MoveInfo",
    "compute_center_average",
    "interpolate_linear_a",
    "interpolate_linear_ab",
    "interpolate_linear_b",
    "prepare_cell",
]

Point = Tuple[float, float]

#: Weight of the class of x0, x1, x2 and x3 in the cell code
CORNER_WEIGHTS = (1, 4, 16, 64)


class EnterType(IntEnum):
    """Side and end of a side through which a fragment is entered."""

    TL = 0
    LT = 1
    LB = 2
    BL = 3
    BR = 4
    RB = 5
    RT = 6
    TR = 7


class MoveInfo(NamedTuple):
    """Offset of the next cell and the label to enter it with."""

    dx: int
    dy: int
    enter: EnterType


class Edge(NamedTuple):
    """Directed boundary fragment in unit cell coordinates."""

    path: Tuple[Point, Point]
    move: MoveInfo


class BandSettings(NamedTuple):
    """Thresholds a band is classified against (``max_v`` may be nudged)."""

    min_v: float
    max_v: float


class Cell:
    """Corner values of a cell and its not yet traced fragments.

    Fragments are stored in a fixed list indexed by :class:`EnterType`.
    The tracer removes them with :meth:`take`, so every fragment ends up
    in exactly one ring.
    """

    __slots__ = ("x0", "x1", "x2", "x3", "edges")

    def __init__(self, x0: float, x1: float, x2: float, x3: float):
        self.x0 = x0
        self.x1 = x1
        self.x2 = x2
        self.x3 = x3
        self.edges: List[Optional[Edge]] = [None] * len(EnterType)

    @property
    def corners(self):
        return self.x0, self.x1, self.x2, self.x3

    def get(self, enter: EnterType) -> Optional[Edge]:
        return self.edges[enter]

    def take(self, enter: EnterType) -> Optional[Edge]:
        edge = self.edges[enter]
        self.edges[enter] = None
        return edge

    def is_empty(self) -> bool:
        return all(edge is None for edge in self.edges)

    def __repr__(self):
        n_edges = sum(edge is not None for edge in self.edges)
        return f"Cell(corners={self.corners}, edges={n_edges})"


def interpolate_linear_ab(a, b, v0, v1):
    """Crossing of a side that is crossed by only one of the thresholds.

    Returns the position in [0, 1] measured from the corner with value
    ``a``. The threshold that is crossed is picked from the order of the
    corner values.
    """
    if v0 > v1:
        v0, v1 = v1, v0
    if a < b:
        if a < v0:
            return (v0 - a) / (b - a)
        return (v1 - a) / (b - a)
    if a > v1:
        return (a - v1) / (a - b)
    return (a - v0) / (a - b)


def interpolate_linear_a(a, b, min_v, max_v):
    """First crossing of a side crossed by both thresholds."""
    if a < b:
        return (min_v - a) / (b - a)
    return (a - max_v) / (a - b)


def interpolate_linear_b(a, b, min_v, max_v):
    """Second crossing of a side crossed by both thresholds."""
    if a < b:
        return (max_v - a) / (b - a)
    return (a - min_v) / (a - b)


_INTERPOLATORS = {
    "ab": interpolate_linear_ab,
    "a": interpolate_linear_a,
    "b": interpolate_linear_b,
}


def classify(value, min_v, max_v):
    """0 below, 1 within, 2 above ``[min_v, max_v]``."""
    if value < min_v:
        return 0
    if value > max_v:
        return 2
    return 1


def compute_center_average(x0, x1, x2, x3, min_v, max_v):
    """Class of the mean of the four corners, used to resolve saddles."""
    average = (x0 + x1 + x2 + x3) / 4.0
    return classify(average, min_v, max_v)


def _side_point(corners, side, variant, settings):
    i_a, i_b = side_corners[side]
    t = _INTERPOLATORS[variant](
        corners[i_a], corners[i_b], settings.min_v, settings.max_v
    )
    if side == "B":
        return (t, 0.0)
    if side == "R":
        return (1.0, t)
    if side == "T":
        return (t, 1.0)
    return (0.0, t)


def _compile_shape(fragments):
    compiled = []
    for enter, start, end, (dx, dy, next_enter) in fragments:
        compiled.append(
            (EnterType[enter], start, end, MoveInfo(dx, dy, EnterType[next_enter]))
        )
    return compiled


_SHAPES = {name: _compile_shape(fragments) for name, fragments in shape_table.items()}


def _build_dispatch():
    dispatch = [None] * 256
    for code, names in code_table.items():
        dispatch[code] = [_SHAPES[name] for name in names]
    for code, by_center in saddle_table.items():
        dispatch[code] = {
            trit: [_SHAPES[name] for name in names] for trit, names in by_center.items()
        }
    return dispatch


#: Cell code -> list of shapes, or class of the centre -> list of shapes
_DISPATCH = _build_dispatch()


def add_shape(cell: Cell, shape, settings: BandSettings):
    """Write the fragments of a compiled shape into ``cell``."""
    corners = cell.corners
    for enter, start, end, move in shape:
        path = (
            _side_point(corners, *start, settings),
            _side_point(corners, *end, settings),
        )
        cell.edges[enter] = Edge(path, move)


def cell_code(x0, x1, x2, x3, settings: BandSettings) -> int:
    code = 0
    for value, weight in zip((x0, x1, x2, x3), CORNER_WEIGHTS):
        code += classify(value, settings.min_v, settings.max_v) * weight
    return code


def prepare_cell(i: int, j: int, grid, settings: BandSettings) -> Optional[Cell]:
    """Classify cell ``(i, j)`` of ``grid`` against a band.

    Parameters
    ----------
    i, j : int
        Cell index, the cell spans the samples ``(i, j)`` to
        ``(i + 1, j + 1)``.
    grid : IsoBands.grid.Grid
        Sample grid.
    settings : BandSettings
        Thresholds of the band.

    Returns
    -------
    Cell or None
        None if a corner is missing or not finite. Otherwise a cell
        holding between zero and four fragments.

    Raises
    ------
    UnexpectedCellCodeError
        If the cell code has no entry in the shape table.
    """
    x0 = grid.get(i, j)
    x1 = grid.get(i + 1, j)
    x2 = grid.get(i + 1, j + 1)
    x3 = grid.get(i, j + 1)
    for value in (x0, x1, x2, x3):
        if value is None or not math.isfinite(value):
            return None

    code = cell_code(x0, x1, x2, x3, settings)
    shapes = _DISPATCH[code]
    if shapes is None:
        raise UnexpectedCellCodeError(code, i, j)
    if isinstance(shapes, dict):
        center = compute_center_average(x0, x1, x2, x3, settings.min_v, settings.max_v)
        shapes = shapes[center]

    cell = Cell(x0, x1, x2, x3)
    for shape in shapes:
        add_shape(cell, shape, settings)
    return cell
