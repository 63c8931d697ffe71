"""
Path Tracing
============

Stitches the edge fragments of a classified cell grid into closed rings.

Every fragment tells the tracer which neighbouring cell to visit next and
with which entry label. A walk that leaves the grid follows the grid
border cell by cell until it finds a fragment to re-enter through, adding
the border corners it passes to the ring.
"""

import logging

import numpy as np

import IsoBands
from IsoBands.errors import UnexpectedOutOfGridMoveError
from IsoBands.grid import CellCursor
from IsoBands.marching_squares.cells import EnterType

logger = logging.getLogger(IsoBands.__name__)

#: Entry labels in the order a new ring is searched for in a cell
AVAILABLE_STARTS = (
    EnterType.BL,
    EnterType.LB,
    EnterType.LT,
    EnterType.TL,
    EnterType.TR,
    EnterType.RT,
    EnterType.RB,
    EnterType.BR,
)

# directions when following the grid border: 0 down, 1 left, 2 up, 3 right
ADD_X = (0, -1, 0, 1)
ADD_Y = (-1, 0, 1, 0)

#: Labels through which a walk along the border may re-enter a cell
VALID_ENTRIES = (
    (EnterType.RT, EnterType.RB),
    (EnterType.BR, EnterType.BL),
    (EnterType.LB, EnterType.LT),
    (EnterType.TL, EnterType.TR),
)

#: Number of turns at the grid corners after which a border walk gives up
MAX_DIRECTION_CHANGES = 4


def entry_direction(enter):
    """Border direction that arrives at a cell through ``enter``."""
    if enter in (EnterType.RT, EnterType.RB):
        return 0
    if enter in (EnterType.BL, EnterType.BR):
        return 1
    if enter in (EnterType.LB, EnterType.LT):
        return 2
    return 3


def exit_direction(dx, dy):
    """Border direction to follow after a move by ``(dx, dy)`` left the grid."""
    if dx == 1:
        return 0
    if dx == -1:
        return 2
    if dy == 1:
        return 3
    if dy == -1:
        return 1
    raise UnexpectedOutOfGridMoveError(f"Move by ({dx}, {dy}) cannot leave the grid")


def entry_coordinate(x, y, direction, path):
    """Point where a border walk re-enters cell ``(x, y)`` along ``path``."""
    start_x, start_y = path[0]
    if direction == 0:
        return (x + 1.0, y + start_y)
    if direction == 1:
        return (x + start_x, float(y))
    if direction == 2:
        return (float(x), y + start_y)
    return (x + start_x, y + 1.0)


def skip_coordinate(x, y, direction):
    """Grid corner passed when a border walk skips cell ``(x, y)``."""
    if direction == 0:
        return (float(x + 1), float(y))
    if direction == 1:
        return (float(x), float(y))
    if direction == 2:
        return (float(x), float(y + 1))
    return (float(x + 1), float(y + 1))


def require_frame(grid, min_v, max_v):
    """Whether every sample on the grid border lies within the band.

    Non-finite border samples count as outside.
    """
    values = grid.values
    border = np.concatenate((values[0, :], values[-1, :], values[:, 0], values[:, -1]))
    return bool(
        np.all(np.isfinite(border) & (border >= min_v) & (border <= max_v))
    )


def _follow_border(
    cell_grid, cursor, direction, path, start, start_direction, missing=None
):
    """Walk along the grid border from ``cursor`` until a fragment re-enters.

    Returns the cursor and the entry label to continue with, or None once
    the walk is back at the start of the ring or reaches a cell with
    missing samples.

    ``missing`` is the result of :meth:`IsoBands.grid.Grid.missing_cells`,
    or None for grids without missing samples. Missing samples can cut a
    ring so that the walk never gets back to its start. The points of
    such a walk are dropped and the ring is closed where the walk began.
    """
    mark = len(path)
    count = 0
    while True:
        if count > MAX_DIRECTION_CHANGES:
            if missing is None:
                raise UnexpectedOutOfGridMoveError(
                    f"Border walk from cell {start} made more than "
                    f"{MAX_DIRECTION_CHANGES} turns"
                )
            logger.debug(f"Border walk from cell {start} cut by missing samples")
            del path[mark:]
            return None
        if missing is not None and missing[cursor.i, cursor.j]:
            return None
        cell = cell_grid[cursor.i][cursor.j]
        if cell is not None:
            for enter in VALID_ENTRIES[direction]:
                edge = cell.get(enter)
                if edge is not None:
                    path.append(
                        entry_coordinate(cursor.i, cursor.j, direction, edge.path)
                    )
                    return cursor, enter

        path.append(skip_coordinate(cursor.i, cursor.j, direction))
        step = cursor.move_by(ADD_X[direction], ADD_Y[direction])
        if step is None:
            # grid corner
            direction = (direction + 1) % 4
            count += 1
        else:
            cursor = step

        if cursor.index == start and direction == start_direction:
            return None


def _trace_ring(cell_grid, cursor, start_enter, edge, missing=None):
    i, j = cursor.index
    origin = (i + edge.path[0][0], j + edge.path[0][1])
    path = [origin]
    start_direction = entry_direction(start_enter)
    enter = start_enter

    while True:
        cell = cell_grid[cursor.i][cursor.j]
        if cell is None:
            break
        edge = cell.take(enter)
        if edge is None:
            break

        path.append((edge.path[1][0] + cursor.i, edge.path[1][1] + cursor.j))
        enter = edge.move.enter
        step = cursor.move_by(edge.move.dx, edge.move.dy)
        if step is not None:
            cursor = step
            continue

        direction = exit_direction(edge.move.dx, edge.move.dy)
        if cursor.index == (i, j) and direction == start_direction:
            break
        resumed = _follow_border(
            cell_grid, cursor, direction, path, (i, j), start_direction, missing
        )
        if resumed is None:
            break
        cursor, enter = resumed

    if path[-1] != origin:
        path.append(origin)
    return path


def trace_band_paths(grid, cell_grid, settings):
    """Trace all rings of one band.

    Fragments are removed from the cells as they are traced, the cell
    grid is left without fragments afterwards.

    Parameters
    ----------
    grid : IsoBands.grid.Grid
        Sample grid the cells were classified from.
    cell_grid : list of list
        ``cell_grid[i][j]`` holds the :class:`IsoBands.marching_squares.Cell`
        of cell ``(i, j)`` or None.
    settings : IsoBands.marching_squares.BandSettings
        Thresholds of the band.

    Returns
    -------
    list of list of tuple
        Closed rings of ``(x, y)`` points in grid coordinates. If the whole
        grid border lies within the band, the first ring is the frame of
        the grid.

    Raises
    ------
    UnexpectedOutOfGridMoveError
        If a walk along the grid border cannot find its way back.
    """
    rings = []
    cols = grid.n_cols
    rows = grid.n_rows
    if cols == 0 or rows == 0:
        return rings

    missing = grid.missing_cells() if grid.n_missing else None

    if require_frame(grid, settings.min_v, settings.max_v):
        rings.append(
            [
                (0.0, 0.0),
                (0.0, float(rows)),
                (float(cols), float(rows)),
                (float(cols), 0.0),
                (0.0, 0.0),
            ]
        )

    for i, column in enumerate(cell_grid):
        for j, cell in enumerate(column):
            if cell is None or cell.is_empty():
                continue
            for start_enter in AVAILABLE_STARTS:
                edge = cell.get(start_enter)
                if edge is None:
                    continue
                cursor = CellCursor.at(i, j, cols, rows)
                rings.append(
                    _trace_ring(cell_grid, cursor, start_enter, edge, missing)
                )

    logger.debug(
        f"Traced {len(rings)} rings for band [{settings.min_v}, {settings.max_v}]"
    )
    return rings
