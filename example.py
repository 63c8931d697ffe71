import numpy as np

from IsoBands.export import export_geojson
from IsoBands.isobands import ContourBuilder
from IsoBands.plotting import plot_bands

width, height = 120, 90
x = np.linspace(-3.0, 3.0, width)
y = np.linspace(-2.0, 2.0, height)
xx, yy = np.meshgrid(x, y)
r2 = xx**2 + yy**2
elevation = 10.0 * np.exp(-r2) - 6.0 * np.exp(-4.0 * r2) + 0.3 * np.sin(3 * xx)

builder = (
    ContourBuilder(width, height)
    .with_origin(x[0], y[0])
    .with_step(x[1] - x[0], y[1] - y[0])
    .with_quad_tree()
)
bands = builder.contours(elevation.ravel(), [-1.0, 1.0, 3.0, 5.0, 7.0], progress=True)

export_geojson(bands, "volcano.geojson", properties={"unit": "m"})
plot_bands(bands)
