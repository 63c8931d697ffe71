"""
Sample Grid
===========

Read-only view on a rectangular grid of samples stored row by row, and
a cursor for walking the grid of cells between those samples.

A grid of ``width x height`` samples has ``(width - 1) x (height - 1)``
cells. Cell ``(i, j)`` has the samples ``(i, j)``, ``(i + 1, j)``,
``(i + 1, j + 1)`` and ``(i, j + 1)`` as corners.
"""

import logging
from typing import NamedTuple, Optional

import numpy as np

import IsoBands
from IsoBands.errors import BadDataError, BadDimensionError, OutOfBoundsError

logger = logging.getLogger(IsoBands.__name__)


class Grid:
    """Immutable grid of float samples.

    Parameters
    ----------
    samples : array_like
        ``width * height`` values in row-major order (rows are along y).
    width : int
        Number of samples along x.
    height : int
        Number of samples along y.

    Raises
    ------
    BadDataError
        If ``samples`` is empty.
    BadDimensionError
        If the number of samples does not match ``width * height``.
    """

    def __init__(self, samples, width: int, height: int):
        values = np.asarray(samples, dtype=np.float64).ravel()
        if values.size == 0:
            raise BadDataError("The sample array is empty")
        if width < 1 or height < 1 or values.size != width * height:
            raise BadDimensionError(
                f"Got {values.size} samples for a {width}x{height} grid"
            )
        self.width = int(width)
        self.height = int(height)
        self._values = values.reshape(self.height, self.width)
        self._values.setflags(write=False)
        # plain floats keep the per-cell lookups cheap
        self._samples = values.tolist()

        self.n_missing = int(np.count_nonzero(~np.isfinite(values)))
        if self.n_missing > 0:
            logger.warning(
                f"Grid contains {self.n_missing} non-finite samples, "
                "cells touching them are treated as outside of every band"
            )

    @classmethod
    def from_array(cls, array):
        """Create a grid from a 2D array indexed as ``array[y, x]``."""
        try:
            array = np.asarray(array, dtype=np.float64)
        except ValueError as exc:
            raise BadDimensionError("Rows of the array differ in length") from exc
        if array.ndim != 2:
            raise BadDimensionError(f"Expected a 2D array, got {array.ndim}D")
        height, width = array.shape
        return cls(array, width, height)

    @property
    def values(self) -> np.ndarray:
        """Read-only ``(height, width)`` array of the samples."""
        return self._values

    @property
    def n_cols(self) -> int:
        """Number of cells along x."""
        return max(self.width - 1, 0)

    @property
    def n_rows(self) -> int:
        """Number of cells along y."""
        return max(self.height - 1, 0)

    def has(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[float]:
        """Sample at ``(x, y)``, or None outside of the grid."""
        if not self.has(x, y):
            return None
        return self._samples[y * self.width + x]

    def missing_cells(self) -> np.ndarray:
        """Cells with at least one non-finite corner.

        Boolean ``(n_cols, n_rows)`` array indexed as ``[i, j]`` like the
        cell grid.
        """
        finite = np.isfinite(self._values)
        complete = finite[:-1, :-1] & finite[:-1, 1:] & finite[1:, :-1] & finite[1:, 1:]
        return ~complete.T

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height})"


class CellCursor(NamedTuple):
    """Position of a cell inside a ``cols x rows`` cell grid."""

    i: int
    j: int
    cols: int
    rows: int

    @classmethod
    def at(cls, i: int, j: int, cols: int, rows: int) -> "CellCursor":
        if not (0 <= i < cols and 0 <= j < rows):
            raise OutOfBoundsError(f"Cell ({i}, {j}) outside of {cols}x{rows} cells")
        return cls(i, j, cols, rows)

    def move_by(self, dx: int, dy: int) -> Optional["CellCursor"]:
        """Cursor of the neighbouring cell, or None if it is outside the grid."""
        i = self.i + dx
        j = self.j + dy
        if 0 <= i < self.cols and 0 <= j < self.rows:
            return self._replace(i=i, j=j)
        return None

    @property
    def index(self):
        return self.i, self.j
