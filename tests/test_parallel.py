import numpy as np
import pytest

from IsoBands.isobands import ContourBuilder, compute_isobands
from IsoBands.parallel import compute_isobands_parallel


def volcano_field(width=40, height=30):
    x = np.linspace(-3.0, 3.0, width)
    y = np.linspace(-2.0, 2.0, height)
    xx, yy = np.meshgrid(x, y)
    r2 = xx**2 + yy**2
    return (np.exp(-r2) * 10.0 - np.exp(-4.0 * r2) * 6.0 + 0.3 * np.sin(3 * xx)).ravel()


THRESHOLDS = [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.mark.parametrize("max_workers", [1, 4, None])
@pytest.mark.parametrize("use_quadtree", [False, True])
def test_parallel_equals_serial(max_workers, use_quadtree):
    samples = volcano_field()
    serial = compute_isobands(samples, 40, 30, THRESHOLDS, use_quadtree=use_quadtree)
    parallel = compute_isobands_parallel(
        samples, 40, 30, THRESHOLDS, use_quadtree=use_quadtree, max_workers=max_workers
    )
    assert parallel == serial


def test_builder_with_workers():
    samples = volcano_field()
    serial = ContourBuilder(40, 30).contours(samples, THRESHOLDS)
    threaded = ContourBuilder(40, 30, max_workers=3).contours(samples, THRESHOLDS)
    assert [b.to_geojson() for b in threaded] == [b.to_geojson() for b in serial]


if __name__ == "__main__":
    test_builder_with_workers()
