"""
Visualization and Plotting Utilities
=====================================

This module draws isobands with matplotlib. Every polygon is turned into
a single path whose holes are separate sub-paths, so filling it leaves
the holes empty.

Functions
---------
polygon_to_path
    Convert a polygon with holes into a matplotlib Path.
plot_bands
    Fill all polygons of a list of bands, one colour per band.
"""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from IsoBands.utils import band_colors


def polygon_to_path(polygon):
    """Convert a :class:`IsoBands.polygons.Polygon` into a ``Path``.

    Parameters
    ----------
    polygon : IsoBands.polygons.Polygon
        Polygon with closed rings.

    Returns
    -------
    matplotlib.path.Path
        Compound path with one ``MOVETO ... CLOSEPOLY`` run per ring.
    """
    vertices = []
    codes = []
    for ring in polygon.rings():
        ring = np.asarray(ring, dtype=float)
        codes.append(Path.MOVETO)
        codes.extend([Path.LINETO] * (len(ring) - 2))
        codes.append(Path.CLOSEPOLY)
        vertices.append(ring)
    return Path(np.concatenate(vertices), codes)


def plot_bands(
    bands,
    ax=None,
    cmap=None,
    edgecolor="black",
    linewidth=0.3,
    alpha=1.0,
    legend=True,
):
    """Fill the polygons of every band.

    Parameters
    ----------
    bands : list of IsoBands.isobands.Band
        Bands to draw, usually the output of ``ContourBuilder.contours``.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates a new figure and shows it.
    cmap : str, optional
        Matplotlib colormap name. If None, the blue shades of the TU Wien
        colour scheme are used when there are few enough bands.
    edgecolor : color, default 'black'
        Colour of the polygon outlines.
    linewidth : float, default 0.3
        Width of the polygon outlines.
    alpha : float, default 1.0
        Opacity of the filled polygons.
    legend : bool, default True
        Add a legend entry ``[min_v, max_v]`` per band.

    Returns
    -------
    fig, ax : matplotlib.figure.Figure, matplotlib.axes.Axes
        Only returned if ax was None (i.e., a new figure was created).

    Examples
    --------
    >>> from IsoBands.isobands import ContourBuilder
    >>> from IsoBands.plotting import plot_bands
    >>> bands = ContourBuilder(width, height).contours(samples, [0, 1, 2])
    >>> fig, ax = plot_bands(bands, cmap="viridis")
    """
    plt_show = False
    fig = None
    if ax is None:
        fig, ax = plt.subplots()
        plt_show = True

    colors = band_colors(len(bands), cmap) if bands else []
    for band, color in zip(bands, colors):
        label = f"[{band.min_v:g}, {band.max_v:g}]" if legend else None
        for polygon in band.polygons:
            patch = PathPatch(
                polygon_to_path(polygon),
                facecolor=color,
                edgecolor=edgecolor,
                linewidth=linewidth,
                alpha=alpha,
                label=label,
            )
            ax.add_patch(patch)
            # one legend entry per band
            label = None

    ax.autoscale_view()
    ax.set_aspect(1)
    if legend and bands:
        ax.legend()
    if plt_show:
        plt.show()
        return fig, ax
