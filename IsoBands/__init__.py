"""
IsoBands
========

IsoBands computes contour polygons that enclose every point of a
regular grid whose value lies between two chosen thresholds. Each
resulting *band* is described by its lower and upper threshold and a
list of polygons with holes.

The computation is a generalisation of the marching squares algorithm
from isolines to isobands: every grid cell is classified against both
thresholds of a band, the edge fragments of all cells are stitched into
closed rings and the rings are finally assembled into polygons.

Key Features
------------

Band extraction
    Per-cell shape lookup with linear edge interpolation and saddle
    disambiguation via the cell centre average.

Spatial pruning
    An optional quadtree of value bounds skips cells that cannot contain
    any part of a band, without changing the result.

Polygon assembly
    Rings are nested by containment and wound consistently: exterior
    rings carry a positive area, holes a negative one.

Export and plotting
    Bands can be written as GeoJSON feature collections and drawn with
    matplotlib.

Modules
-------

- grid: Read-only view on the sample grid and a cursor over its cells
- marching_squares: Cell classification and shape lookup tables
- quadtree: Value-bound quadtree for pruning cells per band
- tracing: Stitching cell fragments into closed rings
- polygons: Ring area, containment and polygon reconstruction
- isobands: Main entry points and the ContourBuilder
- parallel: Computing bands concurrently on worker threads
- specifications: JSON-backed configuration of the builder
- export: GeoJSON serialisation
- plotting: Visualisation utilities
- errors: Exception hierarchy
- utils: Logging configuration and colours

Quick Start
-----------

Compute the raw rings of a single band::

    from IsoBands.isobands import compute_isobands

    samples = [1.0, 1.0,
               1.0, 5.0]
    min_v, max_v, rings = compute_isobands(samples, 2, 2, [1.0, 3.0])[0]

Build georeferenced polygons::

    from IsoBands.isobands import ContourBuilder

    builder = ContourBuilder(width, height, x_origin=-6.1, y_origin=51.8,
                             x_step=0.12, y_step=-0.09)
    bands = builder.contours(samples, [0.0, 10.0, 20.0])
    features = [band.to_geojson() for band in bands]
"""

import IsoBands.utils

IsoBands.utils.configure_logging()

__version__ = "0.4.0"
__author__ = "Michael Kofler"
