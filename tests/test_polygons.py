from IsoBands.isobands import compute_isobands
from IsoBands.polygons import (
    Polygon,
    bbox,
    contains,
    dedup_ring,
    reconstruct_polygons,
    ring_area,
    ring_contains,
)


def square(lo, hi):
    return [(lo, lo), (hi, lo), (hi, hi), (lo, hi), (lo, lo)]


def test_ring_area_sign():
    ring = square(0.0, 10.0)
    assert ring_area(ring) == -200.0
    assert ring_area(list(reversed(ring))) == 200.0


def test_ring_contains():
    ring = square(0.0, 10.0)
    assert ring_contains(ring, (5.0, 5.0))
    assert not ring_contains(ring, (11.0, 5.0))
    # points on the boundary are outside
    assert not ring_contains(ring, (0.0, 5.0))
    assert not ring_contains(ring, (10.0, 10.0))


def test_contains():
    assert contains(square(0.0, 10.0), square(2.0, 8.0))
    assert not contains(square(2.0, 8.0), square(0.0, 10.0))
    # same ring, all points on the boundary
    assert not contains(square(0.0, 10.0), square(0.0, 10.0))
    assert bbox(square(2.0, 8.0)) == (2.0, 2.0, 8.0, 8.0)


def test_dedup_ring():
    assert dedup_ring([(0, 0), (0, 0), (1, 0), (1, 1), (1, 1), (0, 0)]) == [
        (0, 0),
        (1, 0),
        (1, 1),
        (0, 0),
    ]


def test_exterior_winding_is_fixed():
    polygons = reconstruct_polygons([square(0.0, 10.0)])
    assert len(polygons) == 1
    assert ring_area(polygons[0].exterior) > 0
    assert polygons[0].interiors == []


def test_degenerate_rings_are_dropped():
    rings = [[(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)], [(2.0, 2.0), (2.0, 2.0)]]
    assert reconstruct_polygons(rings) == []


def test_nested_rings():
    outer = square(0.0, 10.0)
    hole = list(reversed(square(2.0, 8.0)))
    island = square(4.0, 6.0)
    polygons = reconstruct_polygons([island, outer, hole])

    assert len(polygons) == 2
    big, small = polygons
    assert ring_area(big.exterior) == 200.0
    assert len(big.interiors) == 1
    assert ring_area(big.interiors[0]) == -72.0
    assert ring_area(small.exterior) == 8.0
    assert small.interiors == []


def test_band_polygons_are_consistent():
    rows = [
        [18.0, 13.0, 10.0, 9.0, 10.0, 13.0, 18.0],
        [13.0, 8.0, 5.0, 4.0, 5.0, 8.0, 13.0],
        [10.0, 5.0, 2.0, 1.0, 2.0, 5.0, 10.0],
        [9.0, 4.0, 1.0, 12.0, 1.0, 4.0, 9.0],
        [10.0, 5.0, 2.0, 1.0, 2.0, 5.0, 10.0],
        [13.0, 8.0, 5.0, 4.0, 5.0, 8.0, 13.0],
        [18.0, 13.0, 10.0, 9.0, 10.0, 13.0, 18.0],
        [18.0, 13.0, 10.0, 9.0, 10.0, 13.0, 18.0],
    ]
    samples = [v for row in rows for v in row]
    band = compute_isobands(samples, 7, 8, [4.5, 9.0])[0]
    polygons = reconstruct_polygons(band.rings)

    # outer ring with the ring around the centre as hole, and the
    # inner ring around the peak with its own hole
    assert len(polygons) == 2
    for polygon in polygons:
        assert polygon.exterior[0] == polygon.exterior[-1]
        assert len(set(polygon.exterior)) >= 3
        assert ring_area(polygon.exterior) > 0, "Exterior must have positive area"
        assert len(polygon.interiors) == 1
        for hole in polygon.interiors:
            assert ring_area(hole) < 0, "Hole must have negative area"
            assert contains(polygon.exterior, hole)
    assert abs(ring_area(polygons[0].exterior)) > abs(ring_area(polygons[1].exterior))


def test_polygon_map_points():
    polygon = Polygon(list(reversed(square(0.0, 1.0))))
    mirrored = polygon.map_points(lambda p: (p[0], -p[1]), reverse=True)
    assert ring_area(polygon.exterior) > 0
    assert ring_area(mirrored.exterior) > 0
    assert polygon.to_coordinates()[0][0] == [0.0, 0.0]
