"""
Parallel band computation.

Bands are independent of each other, so each one can be classified and
traced on its own thread. The grid and the quadtree are shared read-only,
every band gets its own cell grid.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor

import IsoBands
from IsoBands.grid import Grid
from IsoBands.isobands import (
    PRECISION,
    BandRaw,
    compute_band,
    empty_cell_grid,
    make_band_settings,
)
from IsoBands.quadtree import QuadTree

logger = logging.getLogger(IsoBands.__name__)


def compute_isobands_parallel(
    samples,
    width,
    height,
    thresholds,
    use_quadtree=False,
    max_workers=None,
    precision=PRECISION,
):
    """Same as :func:`IsoBands.isobands.compute_isobands` on worker threads.

    Parameters
    ----------
    max_workers : int, optional
        Upper limit of worker threads, defaults to the number of CPUs.
        Never more threads than bands are started.

    Returns
    -------
    list of IsoBands.isobands.BandRaw
        In threshold order, identical to the serial computation.
    """
    grid = samples if isinstance(samples, Grid) else Grid(samples, width, height)
    bands = make_band_settings(thresholds, precision)
    thresholds = [float(t) for t in thresholds]
    tree = QuadTree(grid) if use_quadtree else None

    num_workers = min(max_workers or os.cpu_count() or 1, len(bands))
    num_workers = max(num_workers, 1)
    logger.debug(f"Computing {len(bands)} bands on {num_workers} threads")

    def process_band(settings):
        return compute_band(grid, settings, empty_cell_grid(grid), tree)

    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        ring_lists = list(executor.map(process_band, bands))

    return [
        BandRaw(thresholds[k], thresholds[k + 1], rings)
        for k, rings in enumerate(ring_lists)
    ]
