"""Geometric primitives for floorplan editing.

This module provides core mathematical utilities for:
- Distances, projections and point-to-segment distance
- Collinearity, direction and angle similarity of wall segments
- Line segment intersection
- Aspect-ratio fitting of a viewport
- Evenly spaced window placement along a wall
- Synthetic snapping targets while drawing rectangles

All functions are pure and stateless. Points may be any object with ``x`` and
``y`` attributes (``Point`` or ``Vertex``).
"""

import math
from collections.abc import Iterable
from enum import Enum
from typing import NamedTuple

from plangeom.domain import Point, PointLike, Segment

COLLINEAR_TOLERANCE = 1e-5
INTERSECTION_EPSILON = 1e-7
SIMILAR_ANGLE_THRESHOLD = 0.05 * math.pi


class FitMode(str, Enum):
    """How ``fit_to_aspect_ratio`` reaches the requested ratio."""

    EXPAND = "expand"
    CONTRACT = "contract"


class SegmentDistance(NamedTuple):
    """Distance from a point to a segment and the closest point on it."""

    dist: float
    proj: PointLike


class WindowCenter(NamedTuple):
    """Center of a window placed along a wall.

    ``alpha`` is the normalized position of the center along the wall, 0 at
    the start and 1 at the end.
    """

    x: float
    y: float
    alpha: float


class SyntheticSnap(NamedTuple):
    """A snapping target reflected from a real point."""

    x: float
    y: float
    original: Point


def distance_between_points(p1: PointLike, p2: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def projection_of_point_to_line(point: PointLike, segment: Segment) -> PointLike:
    """Project a point orthogonally onto a segment, clamped to its endpoints.

    A zero-length segment has no direction; its squared length is taken as 2 so
    the projection falls back to the segment's start.

    Args:
        point: The point to project
        segment: Segment to project onto

    Returns:
        ``segment.start`` or ``segment.end`` when the projection falls beyond
        them, otherwise a new Point on the segment

    Examples:
        >>> projection_of_point_to_line(Point(5, 5), Segment(Point(0, 0), Point(10, 0)))
        Point(x=5.0, y=0.0, id=None)
    """
    x1, y1 = segment.start.x, segment.start.y
    x2, y2 = segment.end.x, segment.end.y

    a = point.x - x1
    b = point.y - y1
    c = x2 - x1
    d = y2 - y1
    dot = a * c + b * d
    len_sq = (c * c + d * d) or 2
    param = dot / len_sq

    if param <= 0:
        return segment.start
    if param > 1:
        return segment.end

    return Point(x1 + param * c, y1 + param * d)


def point_distance_to_segment(point: PointLike, segment: Segment) -> SegmentDistance:
    """Distance from a point to a segment, with the clamped projection."""
    proj = projection_of_point_to_line(point, segment)
    return SegmentDistance(dist=distance_between_points(point, proj), proj=proj)


def pts_are_collinear(p1: PointLike, p2: PointLike, p3: PointLike) -> bool:
    """Check whether ``p3`` lies on the line through ``p1`` and ``p2``."""
    a, b = p1.x, p1.y
    m, n = p2.x, p2.y
    x, y = p3.x, p3.y
    return abs((n - b) * (x - m) - (y - n) * (m - a)) < COLLINEAR_TOLERANCE


def _normalize(dx: float, dy: float) -> tuple[float, float]:
    if dx == 0 and dy == 0:
        return (0.0, 0.0)
    length = math.hypot(dx, dy)
    return (dx / length, dy / length)


def unit_vector(p1: PointLike, p2: PointLike) -> tuple[float, float]:
    """Unit vector pointing from ``p1`` to ``p2``; (0, 0) if they coincide."""
    return _normalize(p2.x - p1.x, p2.y - p1.y)


def unit_perp_vector(p1: PointLike, p2: PointLike) -> tuple[float, float]:
    """Unit vector orthogonal to the segment ``p1 -> p2``.

    A vertical segment yields (1, 0) and a horizontal one (0, 1). When the two
    points coincide there is no segment, so the arbitrary diagonal (1, 1) is
    normalized and returned.
    """
    if p1.x != p2.x:
        dy = 1.0
        dx = -(p1.y - p2.y) / (p1.x - p2.x)
    elif p1.y != p2.y:
        dx = 1.0
        dy = -(p1.x - p2.x) / (p1.y - p2.y)
    else:
        dx = dy = 1.0
    return _normalize(dx, dy)


def edge_direction(segment: Segment) -> float:
    """Angle of a segment from the positive x-axis, in radians.

    The result lies in (-pi/2, pi/2]; a segment and its reverse share a
    direction.
    """
    delta_x = segment.end.x - segment.start.x
    delta_y = segment.end.y - segment.start.y
    return 0.5 * math.pi if delta_x == 0 else math.atan(delta_y / delta_x)


def have_similar_angles(segment1: Segment, segment2: Segment) -> bool:
    """Check whether two walls run in roughly the same direction.

    Directions within ~9 degrees are similar. Near-vertical walls whose
    directions sit on opposite ends of the (-pi/2, pi/2] range also count.
    """
    angle_diff = abs(edge_direction(segment1) - edge_direction(segment2))
    corrected_diff = min(angle_diff, math.pi - angle_diff)
    return corrected_diff < SIMILAR_ANGLE_THRESHOLD


def fit_to_aspect_ratio(
    x_extent: tuple[float, float],
    y_extent: tuple[float, float],
    width_over_height: float,
    mode: FitMode | str = FitMode.EXPAND,
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Adjust one of two extents so that width / height equals the ratio.

    Only one axis changes; it grows (EXPAND) or shrinks (CONTRACT)
    symmetrically about its center.

    Args:
        x_extent: (min, max) along x
        y_extent: (min, max) along y
        width_over_height: Desired ratio
        mode: Whether to grow or shrink the region

    Returns:
        Tuple of (x_extent, y_extent) with the ratio applied
    """
    expand = FitMode(mode) is FitMode.EXPAND

    x_min, x_max = x_extent
    y_min, y_max = y_extent
    x_span = x_max - x_min
    y_span = y_max - y_min
    x_diff = y_span * width_over_height - x_span
    y_diff = x_span / width_over_height - y_span

    # x_diff and y_diff are either both zero or of opposite signs
    if (x_diff > 0) == expand:
        return (x_min - x_diff / 2, x_max + x_diff / 2), (y_min, y_max)
    return (x_min, x_max), (y_min - y_diff / 2, y_max + y_diff / 2)


def repeating_window_centers(
    start: PointLike,
    end: PointLike,
    spacing: float,
    width: float,
) -> list[WindowCenter]:
    """Place evenly spaced windows along a wall.

    Windows of the given width are laid out from the start of the wall with at
    least ``spacing`` between them, as many as fit. The whole run is then
    shifted so the leftover length is split equally between both ends.

    Args:
        start: Start of the wall
        end: End of the wall
        spacing: Minimum gap between neighbouring windows (1 if zero)
        width: Width of each window

    Returns:
        Window centers in order from ``start``; empty if no window fits

    Examples:
        >>> [c.alpha for c in repeating_window_centers(Point(0, 0), Point(100, 0), 10, 20)]
        [0.2, 0.5, 0.8]
    """
    total_dist = distance_between_points(start, end)
    dx, dy = unit_vector(start, end)
    step = width + (spacing or 1)

    distances: list[float] = []
    next_center_dist = width / 2
    while next_center_dist + width / 2 < total_dist:
        distances.append(next_center_dist)
        next_center_dist += step

    if not distances:
        return []

    margin = (total_dist - distances[-1] - width / 2) / 2

    return [
        WindowCenter(
            x=start.x + dx * (dist + margin),
            y=start.y + dy * (dist + margin),
            alpha=(dist + margin) / total_dist,
        )
        for dist in distances
    ]


def _between(low: float, value: float, high: float) -> bool:
    return low - INTERSECTION_EPSILON <= value <= high + INTERSECTION_EPSILON


def intersection_of_lines(
    p1: PointLike,
    p2: PointLike,
    p3: PointLike,
    p4: PointLike,
) -> Point | None:
    """Find where segment ``p1-p2`` crosses segment ``p3-p4``.

    Crossings at any of the four endpoints are not reported, so walls that
    merely share a corner do not intersect.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Point of intersection, or None if the lines are parallel, meet at an
        endpoint or cross outside either segment

    Examples:
        >>> intersection_of_lines(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))
        Point(x=5.0, y=5.0, id=None)
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if denom == 0:
        return None

    det12 = p1.x * p2.y - p1.y * p2.x
    det34 = p3.x * p4.y - p3.y * p4.x
    x = (det12 * (p3.x - p4.x) - (p1.x - p2.x) * det34) / denom
    y = (det12 * (p3.y - p4.y) - (p1.y - p2.y) * det34) / denom

    if math.isnan(x) or math.isnan(y):
        return None

    crossing = Point(x, y)
    if any(distance_between_points(crossing, p) < INTERSECTION_EPSILON for p in (p1, p2, p3, p4)):
        return None

    for a, b in ((p1, p2), (p3, p4)):
        if not _between(min(a.x, b.x), x, max(a.x, b.x)):
            return None
        if not _between(min(a.y, b.y), y, max(a.y, b.y)):
            return None

    return crossing


def synthetic_rectangle_snaps(
    points: Iterable[PointLike],
    rect_start: PointLike,
    cursor: PointLike,
) -> list[SyntheticSnap]:
    """Create snapping targets for the rectangle corners not under the cursor.

    While a rectangle is dragged from ``rect_start`` to ``cursor``, the other
    two corners could snap to nearby geometry too. Each candidate point is
    reflected across the vertical and then the horizontal midline of the
    rectangle; snapping the cursor to a reflection lines the far corner up
    with the original point.

    Returns:
        All vertical-midline reflections followed by all horizontal-midline
        reflections, each remembering the point it came from
    """
    x_mid = (rect_start.x + cursor.x) / 2
    y_mid = (rect_start.y + cursor.y) / 2
    originals = [Point(p.x, p.y) for p in points]

    return [
        SyntheticSnap(x=p.x + 2 * (x_mid - p.x), y=p.y, original=p) for p in originals
    ] + [
        SyntheticSnap(x=p.x, y=p.y + 2 * (y_mid - p.y), original=p) for p in originals
    ]
