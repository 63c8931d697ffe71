"""
Polygon Reconstruction
======================

Assembles the rings traced for one band into polygons with holes.

A ring enclosed by an even number of other rings is the exterior of a
polygon, a ring enclosed by an odd number is a hole. Exteriors are wound
to a positive area and holes to a negative one, using the sign convention
of :func:`ring_area`.
"""

import logging
import sys

import IsoBands
from IsoBands.errors import PolygonReconstructionError

logger = logging.getLogger(IsoBands.__name__)

_EPSILON = sys.float_info.epsilon


class Polygon:
    """Exterior ring with zero or more holes.

    Attributes
    ----------
    exterior : list of tuple
        Closed ring with positive area.
    interiors : list of list of tuple
        Closed hole rings with negative area.
    """

    __slots__ = ("exterior", "interiors")

    def __init__(self, exterior, interiors=None):
        self.exterior = exterior
        self.interiors = [] if interiors is None else interiors

    def rings(self):
        return [self.exterior] + self.interiors

    def map_points(self, func, reverse=False):
        """New polygon with ``func`` applied to every point.

        If ``reverse`` is set the point order of all rings is reversed,
        which keeps the winding when ``func`` mirrors the plane.
        """

        def _map(ring):
            mapped = [func(point) for point in ring]
            if reverse:
                mapped.reverse()
            return mapped

        return Polygon(_map(self.exterior), [_map(ring) for ring in self.interiors])

    def to_coordinates(self):
        """Nested lists as used by GeoJSON ``Polygon`` coordinates."""
        return [[list(point) for point in ring] for ring in self.rings()]

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.exterior == other.exterior and self.interiors == other.interiors

    def __repr__(self):
        return (
            f"Polygon(exterior={len(self.exterior)} points, "
            f"interiors={len(self.interiors)})"
        )


def ring_area(ring):
    """Signed shoelace sum of a closed ring, not divided by two.

    Positive for rings running counter-clockwise when the y axis points
    down, which is how grid rows are laid out.
    """
    area = 0.0
    for (x0, y0), (x1, y1) in zip(ring[:-1], ring[1:]):
        area += y0 * x1 - x0 * y1
    return area


def bbox(ring):
    """``(min_x, min_y, max_x, max_y)`` of a ring."""
    xs = [point[0] for point in ring]
    ys = [point[1] for point in ring]
    return min(xs), min(ys), max(xs), max(ys)


def _within(p, q, r):
    return p <= q <= r or r <= q <= p


def _collinear(a, b, c):
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])) < _EPSILON


def segment_contains(a, b, point):
    """Whether ``point`` lies on the segment from ``a`` to ``b``."""
    if not _collinear(a, b, point):
        return False
    if abs(a[0] - b[0]) < _EPSILON:
        return _within(a[1], point[1], b[1])
    return _within(a[0], point[0], b[0])


def ring_contains(ring, point):
    """Point in polygon test by ray casting.

    Points on the boundary of the ring are reported as outside.
    """
    x, y = point
    inside = False
    previous = ring[-1]
    for current in ring:
        if segment_contains(current, previous, point):
            return False
        xi, yi = current
        xj, yj = previous
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        previous = current
    return inside


def contains(ring, other, ring_bbox=None, other_bbox=None):
    """Whether ``other`` lies inside ``ring``.

    The bounding box of ``other`` has to be inside the one of ``ring`` and
    at least one point of ``other`` has to be strictly inside ``ring``.
    Rings of an isoband never cross, so one point decides.
    """
    min_x, min_y, max_x, max_y = ring_bbox or bbox(ring)
    o_min_x, o_min_y, o_max_x, o_max_y = other_bbox or bbox(other)
    if o_min_x < min_x or o_min_y < min_y or o_max_x > max_x or o_max_y > max_y:
        return False
    return any(ring_contains(ring, point) for point in other)


def dedup_ring(ring):
    """Drop consecutive repeated points."""
    result = []
    for point in ring:
        if not result or result[-1] != point:
            result.append(point)
    return result


def reconstruct_polygons(rings):
    """Turn the traced rings of one band into polygons.

    Parameters
    ----------
    rings : list of list of tuple
        Closed rings as returned by
        :func:`IsoBands.tracing.trace_band_paths`.

    Returns
    -------
    list of Polygon
        Polygons ordered from the largest exterior to the smallest.

    Raises
    ------
    PolygonReconstructionError
        If a hole is not enclosed by any exterior ring.

    Notes
    -----
    Rings are processed in order of increasing absolute area. A hole is
    attached to the smallest exterior that contains it, so holes of
    polygons nested inside other holes end up on the right polygon.
    Rings with fewer than three distinct points are dropped.
    """
    cleaned = []
    for ring in rings:
        ring = dedup_ring(ring)
        if len(set(ring)) < 3:
            continue
        cleaned.append((ring, ring_area(ring)))
    n_dropped = len(rings) - len(cleaned)
    if n_dropped:
        logger.debug(f"Dropped {n_dropped} degenerate rings")

    cleaned.sort(key=lambda item: abs(item[1]))
    boxes = [bbox(ring) for ring, _ in cleaned]

    polygons = []
    holes = []
    for i, (ring, area) in enumerate(cleaned):
        enclosed_by = 0
        for j, (other, _) in enumerate(cleaned):
            if i != j and contains(other, ring, boxes[j], boxes[i]):
                enclosed_by += 1

        if enclosed_by % 2 == 0:
            if not area > 0:
                ring.reverse()
            polygons.append((Polygon(ring), boxes[i]))
        else:
            if not area < 0:
                ring.reverse()
            holes.append((ring, boxes[i]))

    for hole, hole_box in holes:
        for polygon, polygon_box in polygons:
            if contains(polygon.exterior, hole, polygon_box, hole_box):
                polygon.interiors.append(hole)
                break
        else:
            raise PolygonReconstructionError(
                f"No exterior ring encloses the hole starting at {hole[0]}"
            )

    return [polygon for polygon, _ in reversed(polygons)]
