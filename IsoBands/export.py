"""
GeoJSON Export
==============

Serialisation of bands to GeoJSON ``FeatureCollection`` documents.

Functions
---------
bands_to_feature_collection
    Collect the features of several bands into one document.
export_geojson
    Write bands to a ``.geojson`` file.
"""

import json
import logging
import pathlib

import IsoBands

logger = logging.getLogger(IsoBands.__name__)


def bands_to_feature_collection(bands, properties=None):
    """Build a GeoJSON ``FeatureCollection`` from bands.

    Parameters
    ----------
    bands : list of IsoBands.isobands.Band
        Bands to export.
    properties : dict, optional
        Properties added to every feature.

    Returns
    -------
    dict
    """
    return {
        "type": "FeatureCollection",
        "features": [band.to_geojson(properties) for band in bands],
    }


def export_geojson(bands, filename, properties=None, indent=None):
    """Write bands as a GeoJSON ``FeatureCollection``.

    Parameters
    ----------
    bands : list of IsoBands.isobands.Band
        Bands to export.
    filename : str or pathlib.Path
        Output file, conventionally with a ``.geojson`` extension.
    properties : dict, optional
        Properties added to every feature.
    indent : int, optional
        Passed on to ``json.dump``.
    """
    filename = pathlib.Path(filename)
    if filename.suffix not in (".geojson", ".json"):
        logger.warning(f"Writing GeoJSON to {filename} without .geojson extension")
    collection = bands_to_feature_collection(bands, properties)
    with open(filename, "w") as f:
        json.dump(collection, f, indent=indent)
    logger.info(f"Exported {len(bands)} bands to {filename}")
