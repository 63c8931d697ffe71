import itertools
import math

import pytest

from IsoBands.errors import UnexpectedCellCodeError
from IsoBands.grid import Grid
from IsoBands.marching_squares import cells
from IsoBands.marching_squares.cells import (
    BandSettings,
    EnterType,
    cell_code,
    compute_center_average,
    interpolate_linear_a,
    interpolate_linear_ab,
    interpolate_linear_b,
    prepare_cell,
)
from IsoBands.marching_squares.tables import code_table, saddle_table, shape_table

BAND = BandSettings(1.0, 2.0)
# one representative value per corner class
CLASS_VALUES = {0: 0.0, 1: 1.5, 2: 3.0}


def single_cell(x0, x1, x2, x3):
    # rows are along y: x0, x1 on the first row, x3, x2 on the second
    return Grid([x0, x1, x3, x2], 2, 2)


def test_compute_center_average():
    assert compute_center_average(0.0, 0.0, 0.0, 0.0, 0.0, 1.0) == 1
    assert compute_center_average(1.0, 1.0, 0.0, 0.0, 0.0, 0.0) == 2
    assert compute_center_average(1.0, 1.0, 0.0, 0.0, 0.0, 1.0) == 1
    assert compute_center_average(-1.0, -1.0, 0.0, 0.0, 0.0, 1.0) == 0


def test_interpolation():
    # single crossing, rising and falling along the side
    assert interpolate_linear_ab(0.0, 2.0, 1.0, 3.0) == 0.5
    assert interpolate_linear_ab(2.0, 4.0, 1.0, 3.0) == 0.5
    assert interpolate_linear_ab(4.0, 2.0, 1.0, 3.0) == 0.5
    assert interpolate_linear_ab(2.0, 0.0, 1.0, 3.0) == 0.5
    # both thresholds crossed
    assert interpolate_linear_a(0.0, 4.0, 1.0, 3.0) == 0.25
    assert interpolate_linear_b(0.0, 4.0, 1.0, 3.0) == 0.75
    assert interpolate_linear_a(4.0, 0.0, 1.0, 3.0) == 0.25
    assert interpolate_linear_b(4.0, 0.0, 1.0, 3.0) == 0.75


def test_table_covers_all_codes():
    covered = set(code_table) | set(saddle_table)
    assert len(covered) == 81
    assert not set(code_table) & set(saddle_table)
    for names in itertools.chain(
        code_table.values(),
        (n for by_center in saddle_table.values() for n in by_center.values()),
    ):
        for name in names:
            assert name in shape_table, f"Unknown shape {name}"


@pytest.mark.parametrize("classes", list(itertools.product(range(3), repeat=4)))
def test_every_configuration(classes):
    corners = [CLASS_VALUES[c] for c in classes]
    cell = prepare_cell(0, 0, single_cell(*corners), BAND)
    assert cell is not None
    assert cell_code(*corners, BAND) == sum(
        c * w for c, w in zip(classes, (1, 4, 16, 64))
    )

    n_edges = 0
    for enter in EnterType:
        edge = cell.get(enter)
        if edge is None:
            continue
        n_edges += 1
        for x, y in edge.path:
            assert 0.0 <= x <= 1.0 and 0.0 <= y <= 1.0, f"{edge} leaves the cell"
            assert x in (0.0, 1.0) or y in (0.0, 1.0), f"{edge} not on a side"
        assert abs(edge.move.dx) + abs(edge.move.dy) == 1
    # a boundary exists unless all corners share one class
    assert (n_edges == 0) == (len(set(classes)) == 1)


def test_non_finite_corner():
    assert prepare_cell(0, 0, single_cell(1.5, math.nan, 1.5, 1.5), BAND) is None
    assert prepare_cell(0, 0, single_cell(1.5, 1.5, math.inf, 1.5), BAND) is None


def test_corner_outside_grid():
    grid = Grid([1.5, 1.5, 1.5, 1.5], 2, 2)
    assert prepare_cell(1, 0, grid, BAND) is None


def test_saddle_below_center():
    # code 17: x0 and x2 within, x1 and x3 below
    cell = prepare_cell(0, 0, single_cell(1.5, 0.0, 1.5, 0.0), BAND)
    assert cell.get(EnterType.LB) is not None
    assert cell.get(EnterType.RT) is not None
    # two separate triangles leave the cell downwards and upwards
    assert cell.get(EnterType.LB).move == (0, -1, EnterType.TL)
    assert cell.get(EnterType.RT).move == (0, 1, EnterType.BR)


def test_saddle_within_center():
    cell = prepare_cell(0, 0, single_cell(1.5, 0.9, 1.5, 0.9), BAND)
    # one hexagon connecting the two corners
    assert cell.get(EnterType.LB).move == (0, 1, EnterType.BR)
    assert cell.get(EnterType.RT).move == (0, -1, EnterType.TL)


def test_saddle_octagon():
    # code 34: x0 and x2 above, x1 and x3 below, centre within
    cell = prepare_cell(0, 0, single_cell(3.0, 0.0, 3.0, 0.0), BAND)
    assert cell_code(3.0, 0.0, 3.0, 0.0, BAND) == 34
    labels = {e for e in EnterType if cell.get(e) is not None}
    assert labels == {EnterType.BL, EnterType.LT, EnterType.TR, EnterType.RB}


def test_saddle_38_uses_center():
    # code 38: x0 and x2 above, x1 within, x3 below
    above = prepare_cell(0, 0, single_cell(10.0, 1.5, 10.0, 0.0), BAND)
    within = prepare_cell(0, 0, single_cell(3.0, 1.5, 3.0, 0.0), BAND)
    assert cell_code(10.0, 1.5, 10.0, 0.0, BAND) == 38
    # centre above: triangle at x1 and tetragon at x3
    assert above.get(EnterType.BR).move == (1, 0, EnterType.LB)
    # centre within: heptagon
    assert within.get(EnterType.BR).move == (-1, 0, EnterType.RB)


def test_pentagon_right_side_crossing():
    # code 144: x2 within, x3 above, x0 and x1 below
    cell = prepare_cell(0, 0, single_cell(0.0, 0.0, 1.5, 3.0), BAND)
    assert cell_code(0.0, 0.0, 1.5, 3.0, BAND) == 144
    edge = cell.get(EnterType.RT)
    # right side crossing interpolated between x1 and x2
    assert edge.path[0] == pytest.approx((1.0, 2.0 / 3.0))


def test_unexpected_code(monkeypatch):
    dispatch = list(cells._DISPATCH)
    dispatch[101] = None
    monkeypatch.setattr(cells, "_DISPATCH", dispatch)
    with pytest.raises(UnexpectedCellCodeError):
        prepare_cell(0, 0, single_cell(1.0, 1.0, 5.0, 1.0), BandSettings(1.0, 3.0))


def test_take_removes_fragment():
    cell = prepare_cell(0, 0, single_cell(1.0, 1.0, 5.0, 1.0), BandSettings(1.0, 3.0))
    edge = cell.take(EnterType.TL)
    assert edge.path == ((0.5, 1.0), (1.0, 0.5))
    assert cell.take(EnterType.TL) is None
    assert cell.is_empty()


if __name__ == "__main__":
    test_compute_center_average()
    test_interpolation()
    test_table_covers_all_codes()
