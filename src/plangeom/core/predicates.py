"""Ring and polygon predicates.

Rings are ordered point loops given either open (n distinct points) or
self-closing (first point repeated at the end). Everything here normalizes to
the open form first.

Two coordinate shapes are used, as in the clipping layer they feed:
- Point rings (objects with ``x``/``y``) for ring comparison and area
- Coordinate rings (``[x, y]`` pairs) for the point-in-polygon tests
"""

from collections.abc import Sequence
from numbers import Real

import pyclipper

from plangeom.config import DEFAULT_CLIP_CONFIG, ClipConfig
from plangeom.domain import PointLike
from plangeom.exceptions import InvalidCoordinatesError

Coordinate = Sequence[float]
BBox = tuple[float, float, float, float]


def drop_closing_vertex(ring: Sequence[PointLike]) -> list[PointLike]:
    """Open a self-closing ring.

    A polygon needs at least 3 points without its closing point, so rings of 3
    or fewer points are returned as they are.
    """
    ring = list(ring)
    if len(ring) <= 3:
        return ring
    if ring[0] == ring[-1]:
        return ring[:-1]
    return ring


def ring_equals_same_winding(vs: Sequence[PointLike], ws: Sequence[PointLike]) -> bool:
    """Check whether ``ws`` is a rotation of ``vs`` with the same winding.

    The rotation is pinned by the first point of ``ws`` at ``vs[0]``'s
    position; after that the rings must match point for point.
    """
    if len(vs) != len(ws):
        return False
    if not vs:
        return True

    pivot = vs[0]
    pivot_ix = next(
        (i for i, w in enumerate(ws) if w.x == pivot.x and w.y == pivot.y),
        -1,
    )
    if pivot_ix == -1:
        return False

    rotated = list(ws[pivot_ix:]) + list(ws[:pivot_ix])
    return all(v.x == w.x and v.y == w.y for v, w in zip(vs, rotated))


def ring_equals(vs: Sequence[PointLike], ws: Sequence[PointLike]) -> bool:
    """Check whether two rings describe the same polygon boundary.

    Rings are equal if one is a rotation of the other in either winding
    direction. Only positions are compared, so ids and other fields are
    ignored.

    Examples:
        >>> a = [Point(0, 0), Point(1, 0), Point(1, 1)]
        >>> ring_equals(a, [Point(1, 1), Point(1, 0), Point(0, 0)])
        True
    """
    vs = drop_closing_vertex(vs)
    ws = drop_closing_vertex(ws)
    if len(vs) != len(ws):
        return False
    if not vs:
        return True

    return ring_equals_same_winding(vs, ws) or ring_equals_same_winding(vs, ws[::-1])


def _open_coordinate_ring(ring: Sequence[Coordinate]) -> Sequence[Coordinate]:
    if len(ring) > 1 and ring[0][0] == ring[-1][0] and ring[0][1] == ring[-1][1]:
        return ring[:-1]
    return ring


def in_ring(pt: Coordinate, ring: Sequence[Coordinate], ignore_boundary: bool = False) -> bool:
    """Even-odd point-in-ring test.

    A point lying exactly on an edge of the ring is on the boundary and the
    result is ``not ignore_boundary``.

    Args:
        pt: (x, y) of the point to test
        ring: Ring as (x, y) pairs, open or self-closing
        ignore_boundary: If True, boundary points count as outside

    Returns:
        True if the point is inside the ring
    """
    ring = _open_coordinate_ring(ring)
    px, py = pt[0], pt[1]
    is_inside = False

    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        j = i

        on_boundary = (
            py * (xi - xj) + yi * (xj - px) + yj * (px - xi) == 0
            and (xi - px) * (xj - px) <= 0
            and (yi - py) * (yj - py) <= 0
        )
        if on_boundary:
            return not ignore_boundary

        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            is_inside = not is_inside

    return is_inside


def vert_in_ring(vertex: PointLike, ring: Sequence[PointLike]) -> bool:
    """``in_ring`` for point objects; boundary points count as inside."""
    return in_ring((vertex.x, vertex.y), [(p.x, p.y) for p in ring])


def bbox_of_ring(ring: Sequence[Coordinate]) -> BBox:
    """Bounding box of a coordinate ring as (west, south, east, north)."""
    xs = [c[0] for c in ring]
    ys = [c[1] for c in ring]
    return (min(xs), min(ys), max(xs), max(ys))


def in_bbox(pt: Coordinate, bbox: BBox) -> bool:
    """Check whether a point lies in a bounding box, edges included."""
    west, south, east, north = bbox
    return west <= pt[0] <= east and south <= pt[1] <= north


def _is_point_coord(coord: object) -> bool:
    return (
        isinstance(coord, Sequence)
        and len(coord) == 2
        and all(isinstance(c, Real) and not isinstance(c, bool) for c in coord)
    )


def _is_ring_coords(coords: object) -> bool:
    return isinstance(coords, Sequence) and len(coords) >= 1 and all(
        _is_point_coord(c) for c in coords
    )


def inside(
    pt: Coordinate,
    polygon: Sequence[Sequence[Coordinate]],
    ignore_boundary: bool = False,
) -> bool:
    """Point-in-polygon test for a polygon with holes.

    The first ring is the outer boundary and any further rings are holes. A
    point on a hole's boundary is treated like a point on the outer boundary.

    Args:
        pt: (x, y) of the point to test
        polygon: Outer ring followed by zero or more hole rings
        ignore_boundary: If True, boundary points count as outside

    Returns:
        True if the point is inside the outer ring and in none of the holes

    Raises:
        InvalidCoordinatesError: If the point or a ring is not made of numeric
            (x, y) pairs

    Examples:
        >>> inside((5, 5), [[(0, 0), (10, 0), (10, 10), (0, 10)]])
        True
    """
    if not _is_point_coord(pt):
        raise InvalidCoordinatesError(f"point does not have correct coords: {pt!r}")
    if not (isinstance(polygon, Sequence) and len(polygon) >= 1 and all(
        _is_ring_coords(r) for r in polygon
    )):
        raise InvalidCoordinatesError(f"polygon does not have correct coords: {polygon!r}")

    if not in_bbox(pt, bbox_of_ring(polygon[0])):
        return False

    if not in_ring(pt, polygon[0], ignore_boundary):
        return False

    return not any(in_ring(pt, hole, not ignore_boundary) for hole in polygon[1:])


def to_clipper_path(points: Sequence[PointLike], scale: float) -> list[list[int]]:
    """Scale points onto the integer grid used by the clipping library."""
    return [[round(p.x * scale), round(p.y * scale)] for p in points]


def area_of_selection(points: Sequence[PointLike], config: ClipConfig | None = None) -> float:
    """Signed area enclosed by a ring of points.

    The area is computed by the clipping library on the scaled integer grid;
    its sign follows the ring's orientation. Self-intersecting rings may report
    0, which is acceptable because validation rejects them anyway.
    """
    config = config or DEFAULT_CLIP_CONFIG
    path = to_clipper_path(points, config.clip_scale)
    return pyclipper.Area(path) / (config.clip_scale ** 2)


def clipper_polygon_has_holes(paths: Sequence[Sequence[Coordinate]]) -> bool:
    """Check whether the second ring of a clipping result is a hole.

    Rings returned by the clipping stage never cross each other: the next ring
    is either entirely inside or entirely outside the outer ring, so testing
    one of its points is enough.
    """
    return in_ring(paths[1][0], paths[0])
