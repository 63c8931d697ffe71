"""
Utility Functions
=================

This module provides general utility functions used throughout IsoBands,
including logging configuration and the colour scheme used when drawing
bands.

Functions
---------
configure_logging
    Set up logging for the IsoBands package with customizable
    output format and destinations.
band_colors
    Pick one colour per band from the colour scheme or a matplotlib
    colormap.

Constants
---------
_TUWIEN_COLOR_SCHEME
    TU Wien corporate color scheme for consistent visualization styling.
"""

import logging
import IsoBands


def configure_logging(level=logging.INFO, logfile=None):
    """Configure logging for the IsoBands package.

    Installs a console handler, and a file handler if requested, on the
    package logger. Called on import with the defaults. At ``INFO`` only
    exports are reported, ``DEBUG`` adds ring and polygon counts per band
    and ``WARNING`` covers grids with non-finite samples.

    Parameters
    ----------
    level : int, default logging.INFO
        Logging level (e.g., logging.DEBUG, logging.INFO, logging.WARNING).
    logfile : str, optional
        Path to log file. If provided, logs are written to both console
        and file. If None, logs only to console.

    Examples
    --------
    >>> from IsoBands.utils import configure_logging
    >>> import logging
    >>>
    >>> # trace every band into a file
    >>> configure_logging(level=logging.DEBUG, logfile="isobands.log")

    Notes
    -----
    Messages are formatted as ``HH:MM:SS message``. Handlers installed by
    an earlier call are removed first.
    """
    logger = logging.getLogger(IsoBands.__name__)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler()]
    if logfile is not None:
        handlers.append(logging.FileHandler(logfile))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


#: TU Wien corporate color scheme
#:
#: Dictionary mapping color names to RGB tuples (0-255 range).
#: Only the primary blue and its lighter shades are listed, they are
#: used to fill bands from the lowest to the highest threshold.
_TUWIEN_COLOR_SCHEME = {
    "blue": (0, 102, 153),
    "blue_1": (84, 133, 171),
    "blue_2": (114, 173, 213),
    "blue_3": (166, 213, 236),
    "blue_4": (223, 242, 253),
    "grey": (100, 99, 99),
}


def band_colors(n_bands, cmap=None):
    """Return ``n_bands`` RGBA colours, one per band.

    Parameters
    ----------
    n_bands : int
        Number of bands to colour.
    cmap : str, optional
        Name of a matplotlib colormap. If None and there are at most as
        many bands as blue shades in the TU Wien scheme, those shades are
        used (darkest for the lowest band).

    Returns
    -------
    list of tuple
        RGBA tuples with components in [0, 1].
    """
    shades = [
        _TUWIEN_COLOR_SCHEME[name]
        for name in ("blue", "blue_1", "blue_2", "blue_3", "blue_4")
    ]
    if cmap is None and n_bands <= len(shades):
        return [tuple(c / 255 for c in rgb) + (1.0,) for rgb in shades[:n_bands]]

    import matplotlib

    colormap = matplotlib.colormaps[cmap or "viridis"]
    if n_bands == 1:
        return [colormap(0.5)]
    return [colormap(i / (n_bands - 1)) for i in range(n_bands)]
