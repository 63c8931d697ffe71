"""
Quadtree of Value Bounds
========================

Partitions the cell grid into power-of-two blocks and stores the lowest
and highest sample of every block. A band query only descends into
blocks whose value range overlaps the band, which skips large uniform
regions of the grid.

Nodes are kept in a flat list and refer to their children by index, so
both building and querying run without recursion.
"""

import logging
import math

import IsoBands

logger = logging.getLogger(IsoBands.__name__)


def _split(d):
    """Size of the first part when splitting a block of size ``d``.

    The largest power of two strictly smaller than ``d``, or 1 for a
    block of size 1.
    """
    if d <= 1:
        return d
    return 1 << ((d - 1).bit_length() - 1)


def _fmin(a, b):
    # NaN is ignored unless both are NaN
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a, b):
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


class TreeNode:
    """Block ``[x, x + dx) x [y, y + dy)`` of cells."""

    __slots__ = ("x", "y", "dx", "dy", "lower_bound", "upper_bound", "children")

    def __init__(self, x, y, dx, dy):
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.lower_bound = math.nan
        self.upper_bound = math.nan
        self.children = []

    @property
    def is_leaf(self):
        return self.dx == 1 and self.dy == 1

    def __repr__(self):
        return (
            f"TreeNode(x={self.x}, y={self.y}, dx={self.dx}, dy={self.dy}, "
            f"bounds=({self.lower_bound}, {self.upper_bound}))"
        )


class QuadTree:
    """Quadtree over the cells of a :class:`IsoBands.grid.Grid`.

    The tree is read-only once built and can be shared between threads
    computing different bands.

    Parameters
    ----------
    grid : IsoBands.grid.Grid
        Sample grid.

    Examples
    --------
    >>> tree = QuadTree(grid)
    >>> cells = tree.cells_in_band(3.0, 5.0)
    """

    def __init__(self, grid):
        self.nodes = []
        self.root = None
        if grid.n_cols > 0 and grid.n_rows > 0:
            self._build(grid)
        logger.debug(f"Built quadtree with {len(self.nodes)} nodes for {grid}")

    def _build(self, grid):
        self.root = self._add_node(0, 0, grid.n_cols, grid.n_rows)
        # children are created in pre-order, bounds are merged in post-order
        stack = [self.root]
        order = []
        while stack:
            index = stack.pop()
            order.append(index)
            node = self.nodes[index]
            if node.is_leaf:
                self._set_leaf_bounds(node, grid)
                continue
            tx = _split(node.dx)
            ty = _split(node.dy)
            x, y, dx, dy = node.x, node.y, node.dx, node.dy
            node.children.append(self._add_node(x, y, tx, ty))
            if dx - tx > 0:
                node.children.append(self._add_node(x + tx, y, dx - tx, ty))
                if dy - ty > 0:
                    node.children.append(
                        self._add_node(x + tx, y + ty, dx - tx, dy - ty)
                    )
            if dy - ty > 0:
                node.children.append(self._add_node(x, y + ty, tx, dy - ty))
            stack.extend(node.children)

        for index in reversed(order):
            node = self.nodes[index]
            for child in node.children:
                child = self.nodes[child]
                node.lower_bound = _fmin(node.lower_bound, child.lower_bound)
                node.upper_bound = _fmax(node.upper_bound, child.upper_bound)

    def _add_node(self, x, y, dx, dy):
        self.nodes.append(TreeNode(x, y, dx, dy))
        return len(self.nodes) - 1

    @staticmethod
    def _set_leaf_bounds(node, grid):
        x, y = node.x, node.y
        lower = upper = math.nan
        for value in (
            grid.get(x, y),
            grid.get(x + 1, y),
            grid.get(x, y + 1),
            grid.get(x + 1, y + 1),
        ):
            lower = _fmin(lower, value)
            upper = _fmax(upper, value)
        node.lower_bound = lower
        node.upper_bound = upper

    def node(self, index):
        return self.nodes[index]

    def children(self, index):
        """Child nodes of the node at ``index``, in a, b, c, d order."""
        return [self.nodes[child] for child in self.nodes[index].children]

    def cells_in_band(self, min_v, max_v):
        """Cells whose value range may intersect ``[min_v, max_v]``.

        Parameters
        ----------
        min_v, max_v : float
            Thresholds of the band.

        Returns
        -------
        list of tuple
            Cell indices ``(i, j)`` in depth-first a, b, c, d order.
        """
        cells = []
        if self.root is None:
            return cells
        stack = [self.root]
        while stack:
            node = self.nodes[stack.pop()]
            if node.lower_bound > max_v or node.upper_bound < min_v:
                continue
            if not node.children:
                cells.append((node.x, node.y))
                continue
            stack.extend(reversed(node.children))
        return cells
