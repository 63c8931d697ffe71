"""
Isoband Computation
===================

Main entry points of the package.

:func:`compute_isobands` returns the raw traced rings of every band in
grid coordinates. :class:`ContourBuilder` additionally assembles the
rings into polygons with holes and maps them to world coordinates given
the origin and the step of the grid.

Bands are formed from consecutive thresholds. Every band except the last
one is treated as half open: its upper threshold is lowered by
:data:`PRECISION`, so a sample lying exactly on a shared threshold
belongs to the upper band only.

Examples
--------
>>> from IsoBands.isobands import compute_isobands
>>> result = compute_isobands([1.0, 1.0, 1.0, 5.0], 2, 2, [1.0, 3.0])
>>> result[0].rings
[[(0.5, 1.0), (1.0, 0.5), (1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (0.5, 1.0)]]
"""

import logging
from typing import List, NamedTuple, Tuple

from tqdm import tqdm

import IsoBands
from IsoBands.errors import BadIntervalsError
from IsoBands.grid import Grid
from IsoBands.marching_squares.cells import BandSettings, prepare_cell
from IsoBands.polygons import reconstruct_polygons
from IsoBands.quadtree import QuadTree
from IsoBands.tracing import trace_band_paths

logger = logging.getLogger(IsoBands.__name__)

#: Amount the upper threshold of every band but the last is lowered by
PRECISION = 1e-4

Ring = List[Tuple[float, float]]


class BandRaw(NamedTuple):
    """Rings of one band in grid coordinates, with its thresholds."""

    min_v: float
    max_v: float
    rings: List[Ring]


def make_band_settings(thresholds, precision=PRECISION):
    """Build the band list from consecutive thresholds.

    Parameters
    ----------
    thresholds : sequence of float
        At least two strictly increasing thresholds.
    precision : float, default PRECISION
        Amount subtracted from the upper threshold of every band except
        the last one.

    Returns
    -------
    list of BandSettings
        One entry per pair of consecutive thresholds.

    Raises
    ------
    BadIntervalsError
        If there are fewer than two thresholds or they are not strictly
        increasing.
    """
    thresholds = [float(t) for t in thresholds]
    if len(thresholds) < 2:
        raise BadIntervalsError(
            f"At least two thresholds are required, got {len(thresholds)}"
        )
    for lower, upper in zip(thresholds[:-1], thresholds[1:]):
        if not lower < upper:
            raise BadIntervalsError(
                f"Thresholds must be strictly increasing, got {lower} before {upper}"
            )

    n_bands = len(thresholds) - 1
    settings = []
    for k in range(n_bands):
        max_v = thresholds[k + 1]
        if k + 1 < n_bands:
            max_v -= precision
        settings.append(BandSettings(thresholds[k], max_v))
    return settings


def empty_cell_grid(grid):
    """``cell_grid[i][j]`` list for all cells of ``grid``, filled with None."""
    return [[None] * grid.n_rows for _ in range(grid.n_cols)]


def fill_cell_grid(grid, settings, cell_grid, tree=None):
    """Classify the cells of ``grid`` against one band.

    Without a quadtree every cell is classified. With one, the cell grid
    is cleared first and only the cells the tree selects are classified.
    """
    if tree is None:
        for i, column in enumerate(cell_grid):
            for j in range(len(column)):
                column[j] = prepare_cell(i, j, grid, settings)
        return

    for column in cell_grid:
        column[:] = [None] * len(column)
    for i, j in tree.cells_in_band(settings.min_v, settings.max_v):
        cell_grid[i][j] = prepare_cell(i, j, grid, settings)


def compute_band(grid, settings, cell_grid, tree=None):
    """Rings of a single band, reusing ``cell_grid`` as scratch space."""
    fill_cell_grid(grid, settings, cell_grid, tree)
    return trace_band_paths(grid, cell_grid, settings)


def compute_isobands(
    samples,
    width,
    height,
    thresholds,
    use_quadtree=False,
    precision=PRECISION,
    progress=False,
) -> List[BandRaw]:
    """Compute the raw rings of every band.

    Parameters
    ----------
    samples : array_like or Grid
        ``width * height`` samples in row-major order.
    width, height : int
        Grid dimensions.
    thresholds : sequence of float
        At least two strictly increasing thresholds.
    use_quadtree : bool, default False
        Select the cells of each band through a quadtree. The result is
        the same either way.
    precision : float, default PRECISION
        Amount the upper threshold of all but the last band is lowered by.
    progress : bool, default False
        Show a progress bar over the bands.

    Returns
    -------
    list of BandRaw
        ``(min_v, max_v, rings)`` per band, with the thresholds as passed in.

    Raises
    ------
    BadDataError, BadDimensionError, BadIntervalsError
        If the input is unusable.
    InternalError
        If the engine reaches an inconsistent state.
    """
    grid = samples if isinstance(samples, Grid) else Grid(samples, width, height)
    bands = make_band_settings(thresholds, precision)
    thresholds = [float(t) for t in thresholds]

    tree = QuadTree(grid) if use_quadtree else None
    cell_grid = empty_cell_grid(grid)

    results = []
    for k, settings in enumerate(
        tqdm(bands, desc="Computing isobands", disable=not progress)
    ):
        rings = compute_band(grid, settings, cell_grid, tree)
        results.append(BandRaw(thresholds[k], thresholds[k + 1], rings))
        logger.debug(
            f"Band {k} [{thresholds[k]}, {thresholds[k + 1]}]: {len(rings)} rings"
        )
    return results


class Band:
    """Isoband with its thresholds and polygons.

    Attributes
    ----------
    min_v : float
        Lower threshold.
    max_v : float
        Upper threshold, as passed in (without the precision offset).
    polygons : list of IsoBands.polygons.Polygon
        Polygons enclosing the region between ``min_v`` and ``max_v``.
    """

    def __init__(self, min_v, max_v, polygons):
        self.min_v = min_v
        self.max_v = max_v
        self.polygons = polygons

    def into_inner(self):
        return self.polygons, self.min_v, self.max_v

    def to_geojson(self, properties=None):
        """GeoJSON ``Feature`` with a ``MultiPolygon`` geometry.

        Parameters
        ----------
        properties : dict, optional
            Additional properties, stored next to ``min_v`` and ``max_v``.

        Returns
        -------
        dict
            Feature that can be passed to ``json.dumps``.
        """
        feature_properties = {"min_v": self.min_v, "max_v": self.max_v}
        if properties:
            feature_properties.update(properties)
        return {
            "type": "Feature",
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [p.to_coordinates() for p in self.polygons],
            },
            "properties": feature_properties,
        }

    def __repr__(self):
        return f"Band(min_v={self.min_v}, max_v={self.max_v}, polygons={len(self.polygons)})"


class ContourBuilder:
    """Compute isobands of a grid as georeferenced polygons.

    Grid point ``(x, y)`` is mapped to
    ``(x_origin + x * x_step, y_origin + y * y_step)``.

    Parameters
    ----------
    width, height : int
        Grid dimensions.
    x_origin, y_origin : float, default 0.0
        World coordinates of the first sample.
    x_step, y_step : float, default 1.0
        Distance between samples along x and y. A negative step mirrors
        the axis, e.g. for rasters stored from north to south.
    use_quad_tree : bool, default False
        Select cells through a quadtree.
    precision : float, default PRECISION
        Offset of the upper threshold of all but the last band.
    max_workers : int, optional
        If larger than one, bands are computed on that many threads.

    Examples
    --------
    >>> builder = ContourBuilder(10, 10).with_origin(100.0, 50.0)
    >>> bands = builder.contours(samples, [0.5, 1.0])
    >>> bands[0].to_geojson()["properties"]
    {'min_v': 0.5, 'max_v': 1.0}
    """

    def __init__(
        self,
        width,
        height,
        x_origin=0.0,
        y_origin=0.0,
        x_step=1.0,
        y_step=1.0,
        use_quad_tree=False,
        precision=PRECISION,
        max_workers=None,
    ):
        self.width = width
        self.height = height
        self.x_origin = float(x_origin)
        self.y_origin = float(y_origin)
        self.x_step = float(x_step)
        self.y_step = float(y_step)
        self.use_quad_tree = use_quad_tree
        self.precision = precision
        self.max_workers = max_workers

    @classmethod
    def from_specifications(cls, width, height, specs):
        """Create a builder from an :class:`IsobandSpecifications`."""
        return cls(
            width,
            height,
            x_origin=specs["x_origin"],
            y_origin=specs["y_origin"],
            x_step=specs["x_step"],
            y_step=specs["y_step"],
            use_quad_tree=specs["use_quad_tree"],
            precision=specs["precision"],
            max_workers=specs["max_workers"],
        )

    def with_origin(self, x_origin, y_origin):
        self.x_origin = float(x_origin)
        self.y_origin = float(y_origin)
        return self

    def with_step(self, x_step, y_step):
        self.x_step = float(x_step)
        self.y_step = float(y_step)
        return self

    def with_quad_tree(self, use_quad_tree=True):
        self.use_quad_tree = use_quad_tree
        return self

    @property
    def is_identity(self):
        return (self.x_origin, self.y_origin) == (0.0, 0.0) and (
            self.x_step,
            self.y_step,
        ) == (1.0, 1.0)

    def transform(self, point):
        x, y = point
        return (self.x_origin + x * self.x_step, self.y_origin + y * self.y_step)

    def _compute_raw(self, samples, thresholds, progress):
        if self.max_workers is not None and self.max_workers > 1:
            from IsoBands.parallel import compute_isobands_parallel

            return compute_isobands_parallel(
                samples,
                self.width,
                self.height,
                thresholds,
                use_quadtree=self.use_quad_tree,
                max_workers=self.max_workers,
                precision=self.precision,
            )
        return compute_isobands(
            samples,
            self.width,
            self.height,
            thresholds,
            use_quadtree=self.use_quad_tree,
            precision=self.precision,
            progress=progress,
        )

    def contours(self, samples, thresholds, progress=False):
        """Compute one :class:`Band` per pair of consecutive thresholds.

        Parameters
        ----------
        samples : array_like
            ``width * height`` samples in row-major order.
        thresholds : sequence of float
            At least two strictly increasing thresholds.
        progress : bool, default False
            Show a progress bar over the bands.

        Returns
        -------
        list of Band
        """
        raw_bands = self._compute_raw(samples, thresholds, progress)

        # mirroring one axis flips the sign of all areas
        mirrored = self.x_step * self.y_step < 0
        bands = []
        for raw in raw_bands:
            polygons = reconstruct_polygons(raw.rings)
            if not self.is_identity:
                polygons = [
                    p.map_points(self.transform, reverse=mirrored) for p in polygons
                ]
            bands.append(Band(raw.min_v, raw.max_v, polygons))

        n_polygons = sum(len(band.polygons) for band in bands)
        logger.debug(f"Built {n_polygons} polygons in {len(bands)} bands")
        return bands
