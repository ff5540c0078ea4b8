"""Boolean set operations on face rings.

Integer-grid clipping is exact but does not cope well with the coincident and
near-coincident edges that floating point input produces, and two rooms that
share a wall are the common case when faces are merged or split. Union and
intersection therefore run through a pipeline:

1. Scale both rings up by ``clip_scale`` onto the integer grid
2. Inflate each ring by a mitered outward ``offset``
3. Clip the inflated rings with even-odd fill
4. Deflate the result by the same offset and scale it back down
5. Classify the result: one ring, no ring, or more than one ring

Difference does not go through the pipeline. When the subtracted region
touches the bottom edge of the subject, clipping reports a phantom interior
hole instead of a notch, so difference uses an exact polygon difference
instead.
"""

import logging
from collections.abc import Sequence

import pyclipper
from shapely.geometry import Polygon

from plangeom.config import DEFAULT_CLIP_CONFIG, ClipConfig
from plangeom.core.predicates import clipper_polygon_has_holes, to_clipper_path
from plangeom.domain import (
    Point,
    PointLike,
    SetOperationEmpty,
    SetOperationError,
    SetOperationFailure,
    SetOperationKind,
    SetOperationOk,
    SetOperationResult,
)
from plangeom.exceptions import DifferenceResultError, InvalidOperationError

logger = logging.getLogger(__name__)

_CLIP_TYPES = {
    SetOperationKind.UNION: pyclipper.CT_UNION,
    SetOperationKind.INTERSECTION: pyclipper.CT_INTERSECTION,
}

Path = list[list[int]]


def _to_kind(kind: SetOperationKind | str) -> SetOperationKind:
    try:
        return SetOperationKind(kind)
    except ValueError:
        raise InvalidOperationError(kind) from None


def _offset_paths(paths: Sequence[Path], delta: float) -> list[Path]:
    """Miter-offset closed paths by ``delta`` (negative shrinks)."""
    offsetter = pyclipper.PyclipperOffset()
    offsetter.AddPaths(paths, pyclipper.JT_MITER, pyclipper.ET_CLOSEDPOLYGON)
    return offsetter.Execute(delta)


def _closed_coordinates(ring: Sequence[PointLike]) -> list[tuple[float, float]]:
    coords = [(p.x, p.y) for p in ring]
    if coords[0] != coords[-1]:
        coords.append(coords[0])
    return coords


def _classify(paths: Sequence[Sequence[Sequence[float]]]) -> SetOperationResult:
    if len(paths) == 1:
        return SetOperationOk(ring=[Point(x, y) for x, y in paths[0]])
    if not paths:
        return SetOperationEmpty()

    failure = (
        SetOperationFailure.HOLE_ARTIFACT
        if clipper_polygon_has_holes(paths)
        else SetOperationFailure.SPLIT_FACE
    )
    return SetOperationError(failure=failure)


def poly_difference(
    subject: Sequence[PointLike],
    subtracted: Sequence[PointLike],
) -> SetOperationResult:
    """Exact difference of two rings.

    Args:
        subject: Ring to subtract from
        subtracted: Ring to subtract

    Returns:
        The outer ring of the difference in open form, empty if nothing is
        left, or an error if the difference has a hole or falls apart

    Raises:
        DifferenceResultError: If the difference is not polygonal at all
    """
    result = Polygon(_closed_coordinates(subject)).difference(
        Polygon(_closed_coordinates(subtracted))
    )

    if result.is_empty:
        return SetOperationEmpty()
    if result.geom_type == "MultiPolygon":
        return SetOperationError(failure=SetOperationFailure.SPLIT_FACE)
    if result.geom_type != "Polygon":
        raise DifferenceResultError(result.geom_type)
    if len(result.interiors) > 0:
        return SetOperationError(failure=SetOperationFailure.HOLE_ARTIFACT)

    coords = list(result.exterior.coords)[:-1]
    return SetOperationOk(ring=[Point(x, y) for x, y in coords])


def set_operation(
    kind: SetOperationKind | str,
    ring_a: Sequence[PointLike],
    ring_b: Sequence[PointLike],
    config: ClipConfig | None = None,
) -> SetOperationResult:
    """Perform a boolean operation on two face rings.

    Args:
        kind: union, intersection or difference
        ring_a: Subject ring, open or self-closing
        ring_b: Clip ring, open or self-closing
        config: Clip scale and offset (defaults if None)

    Returns:
        ``SetOperationOk`` with the single resulting ring,
        ``SetOperationEmpty`` if nothing is left, or ``SetOperationError`` if
        the result has a hole or was split into several faces

    Raises:
        InvalidOperationError: If ``kind`` is not a known operation
    """
    kind = _to_kind(kind)
    if kind is SetOperationKind.DIFFERENCE:
        return poly_difference(ring_a, ring_b)

    config = config or DEFAULT_CLIP_CONFIG

    path_a = to_clipper_path(ring_a, config.clip_scale)
    path_b = to_clipper_path(ring_b, config.clip_scale)

    inflated_a = _offset_paths([path_a], config.offset)
    inflated_b = _offset_paths([path_b], config.offset)

    clipper = pyclipper.Pyclipper()
    if inflated_a:
        clipper.AddPaths(inflated_a, pyclipper.PT_SUBJECT, True)
    if inflated_b:
        clipper.AddPaths(inflated_b, pyclipper.PT_CLIP, True)
    clipped = clipper.Execute(_CLIP_TYPES[kind], pyclipper.PFT_EVENODD, pyclipper.PFT_EVENODD)

    deflated = _offset_paths(clipped, -config.offset) if clipped else []
    # Largest ring first so a hole is tested against its outer ring
    deflated.sort(key=lambda path: abs(pyclipper.Area(path)), reverse=True)
    result_paths = pyclipper.scale_from_clipper(deflated, config.clip_scale)

    logger.debug(
        "%s of %d and %d points: %d clipped paths, %d result paths",
        kind.value, len(ring_a), len(ring_b), len(clipped), len(result_paths)
    )

    result = _classify(result_paths)
    if isinstance(result, SetOperationError):
        logger.debug("%s rejected: %s", kind.value, result.message)
    return result


def union(
    ring_a: Sequence[PointLike],
    ring_b: Sequence[PointLike],
    config: ClipConfig | None = None,
) -> SetOperationResult:
    """Union of two rings."""
    return set_operation(SetOperationKind.UNION, ring_a, ring_b, config)


def intersection(
    ring_a: Sequence[PointLike],
    ring_b: Sequence[PointLike],
    config: ClipConfig | None = None,
) -> SetOperationResult:
    """Intersection of two rings."""
    return set_operation(SetOperationKind.INTERSECTION, ring_a, ring_b, config)


def difference(
    ring_a: Sequence[PointLike],
    ring_b: Sequence[PointLike],
    config: ClipConfig | None = None,
) -> SetOperationResult:
    """Part of ``ring_a`` not covered by ``ring_b``."""
    return set_operation(SetOperationKind.DIFFERENCE, ring_a, ring_b, config)


def point_in_face(
    point: PointLike,
    face_vertices: Sequence[PointLike],
    config: ClipConfig | None = None,
) -> bool:
    """Hit-test a point against a face's vertex loop.

    Points on the boundary count as inside.
    """
    config = config or DEFAULT_CLIP_CONFIG
    path = to_clipper_path(face_vertices, config.clip_scale)
    test_point = to_clipper_path([point], config.clip_scale)[0]
    return bool(pyclipper.PointInPolygon(test_point, path))
