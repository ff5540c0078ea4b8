"""Core algorithms for plangeom.

This module contains the core algorithms for:

- Geometric primitives (distances, projections, intersections, angles)
- Ring and polygon predicates (ring equality, point-in-polygon, area)
- Boolean set operations on face rings (union, intersection, difference)
- Graph lookups (entities by id or coordinates, topological relations)
- Normalization transforms between graph shapes

All functions are:
- Stateless (no data retained between calls)
- Pure (inputs are never mutated)

Key functions:
- set_operation: Union/intersection/difference of two rings
- ring_equals: Compare rings up to rotation and winding
- inside: Point-in-polygon with holes
- denormalize / normalize: Convert between graph shapes
- splitting_vertices_for_edge_id: Vertices that split an edge
"""

from plangeom.core.geometry import (
    FitMode,
    SegmentDistance,
    SyntheticSnap,
    WindowCenter,
    distance_between_points,
    edge_direction,
    fit_to_aspect_ratio,
    have_similar_angles,
    intersection_of_lines,
    point_distance_to_segment,
    projection_of_point_to_line,
    pts_are_collinear,
    repeating_window_centers,
    synthetic_rectangle_snaps,
    unit_perp_vector,
    unit_vector,
)
from plangeom.core.indexer import (
    edge_for_id,
    edges_for_face_id,
    edges_for_vertex_id,
    except_face,
    face_for_id,
    face_is_closed,
    faces_for_edge_id,
    faces_for_vertex_id,
    splitting_vertices_for_edge_id,
    vertex_for_coordinates,
    vertex_for_id,
    vertices_for_face_id,
)
from plangeom.core.predicates import (
    area_of_selection,
    bbox_of_ring,
    clipper_polygon_has_holes,
    drop_closing_vertex,
    in_bbox,
    in_ring,
    inside,
    ring_equals,
    ring_equals_same_winding,
    vert_in_ring,
)
from plangeom.core.setops import (
    difference,
    intersection,
    point_in_face,
    poly_difference,
    set_operation,
    union,
)
from plangeom.core.transform import denormalize, normalize

__all__ = [
    # Geometry types
    "FitMode",
    "SegmentDistance",
    "SyntheticSnap",
    "WindowCenter",
    # Geometry functions
    "distance_between_points",
    "edge_direction",
    "fit_to_aspect_ratio",
    "have_similar_angles",
    "intersection_of_lines",
    "point_distance_to_segment",
    "projection_of_point_to_line",
    "pts_are_collinear",
    "repeating_window_centers",
    "synthetic_rectangle_snaps",
    "unit_perp_vector",
    "unit_vector",
    # Predicates
    "area_of_selection",
    "bbox_of_ring",
    "clipper_polygon_has_holes",
    "drop_closing_vertex",
    "in_bbox",
    "in_ring",
    "inside",
    "ring_equals",
    "ring_equals_same_winding",
    "vert_in_ring",
    # Set operations
    "difference",
    "intersection",
    "point_in_face",
    "poly_difference",
    "set_operation",
    "union",
    # Graph lookups
    "edge_for_id",
    "edges_for_face_id",
    "edges_for_vertex_id",
    "except_face",
    "face_for_id",
    "face_is_closed",
    "faces_for_edge_id",
    "faces_for_vertex_id",
    "splitting_vertices_for_edge_id",
    "vertex_for_coordinates",
    "vertex_for_id",
    "vertices_for_face_id",
    # Transforms
    "denormalize",
    "normalize",
]
