"""
Marching Squares for Isobands
=============================

This subpackage classifies grid cells against the two thresholds of a
band and produces the directed edge fragments that the tracer stitches
into rings.

Unlike isoline marching squares, where each corner is either above or
below a single value, every corner here falls into one of three classes
(below, within, above), giving 81 reachable cell configurations. Fourteen
of them are saddles whose connectivity is decided by the average of the
four corner values.

The module uses precomputed lookup tables to handle all possible
configurations efficiently.
"""

from IsoBands.marching_squares.cells import (
    BandSettings,
    Cell,
    Edge,
    EnterType,
    MoveInfo,
    prepare_cell,
)

__all__ = ["BandSettings", "Cell", "Edge", "EnterType", "MoveInfo", "prepare_cell"]
