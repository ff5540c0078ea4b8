"""Lookups over a normalized geometry graph.

Id and coordinate lookups return None when nothing matches; callers must
check before use. Queries that start from a face or edge raise
``EntityNotFoundError`` when that face or edge is missing, since there is no
meaningful empty answer for them.

Every lookup is a linear scan over the graph's lists.
"""

import logging
from dataclasses import replace

from plangeom.core.geometry import distance_between_points, projection_of_point_to_line
from plangeom.domain import Edge, Face, Graph, PointLike, Segment, Vertex
from plangeom.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

VERTEX_MATCH_TOLERANCE = 1e-5


def vertex_for_id(vertex_id: str, graph: Graph) -> Vertex | None:
    """Find the vertex with the given id."""
    return next((v for v in graph.vertices if v.id == vertex_id), None)


def edge_for_id(edge_id: str, graph: Graph) -> Edge | None:
    """Find the edge with the given id."""
    return next((e for e in graph.edges if e.id == edge_id), None)


def face_for_id(face_id: str, graph: Graph) -> Face | None:
    """Find the face with the given id."""
    return next((f for f in graph.faces if f.id == face_id), None)


def vertex_for_coordinates(point: PointLike, graph: Graph) -> Vertex | None:
    """Find the first vertex within matching tolerance of a point."""
    return next(
        (v for v in graph.vertices if distance_between_points(v, point) < VERTEX_MATCH_TOLERANCE),
        None,
    )


def _require_face(face_id: str, graph: Graph) -> Face:
    face = face_for_id(face_id, graph)
    if face is None:
        logger.debug("Face %s not found in graph %s", face_id, graph.id)
        raise EntityNotFoundError("face", face_id)
    return face


def _require_edge(edge_id: str, graph: Graph) -> Edge:
    edge = edge_for_id(edge_id, graph)
    if edge is None:
        logger.debug("Edge %s not found in graph %s", edge_id, graph.id)
        raise EntityNotFoundError("edge", edge_id)
    return edge


def _require_vertex(vertex_id: str, graph: Graph) -> Vertex:
    vertex = vertex_for_id(vertex_id, graph)
    if vertex is None:
        logger.debug("Vertex %s not found in graph %s", vertex_id, graph.id)
        raise EntityNotFoundError("vertex", vertex_id)
    return vertex


def vertices_for_face_id(face_id: str, graph: Graph) -> list[Vertex]:
    """Resolve a face's vertex loop.

    Each edge reference contributes the vertex it starts from: ``v1``, or
    ``v2`` if the reference is reversed. Consecutive duplicates are kept as
    they are.

    Raises:
        EntityNotFoundError: If the face, or an edge or vertex it references,
            is missing
    """
    face = _require_face(face_id, graph)
    vertices = []
    for ref in face.edge_refs:
        edge = _require_edge(ref.edge_id, graph)
        vertices.append(_require_vertex(edge.v2 if ref.reverse else edge.v1, graph))
    return vertices


def edges_for_face_id(face_id: str, graph: Graph) -> list[Edge]:
    """Resolve the edges referenced by a face, in face order.

    Raises:
        EntityNotFoundError: If the face or one of its edges is missing
    """
    face = _require_face(face_id, graph)
    return [_require_edge(ref.edge_id, graph) for ref in face.edge_refs]


def edges_for_vertex_id(vertex_id: str, graph: Graph) -> list[Edge]:
    """All edges with the vertex as an endpoint."""
    return [e for e in graph.edges if vertex_id in (e.v1, e.v2)]


def faces_for_vertex_id(vertex_id: str, graph: Graph) -> list[Face]:
    """All faces with an edge that has the vertex as an endpoint."""
    touching = {e.id for e in edges_for_vertex_id(vertex_id, graph)}
    return [f for f in graph.faces if any(ref.edge_id in touching for ref in f.edge_refs)]


def faces_for_edge_id(edge_id: str, graph: Graph) -> list[Face]:
    """All faces referencing the edge."""
    return [f for f in graph.faces if any(ref.edge_id == edge_id for ref in f.edge_refs)]


def splitting_vertices_for_edge_id(edge_id: str, graph: Graph, spacing: float) -> list[Vertex]:
    """Find stray vertices lying on an edge.

    These are the vertices that must become split points when the edge is
    subdivided. The edge's own endpoints are never returned, whether matched by
    id or by coordinates.

    Args:
        edge_id: Id of the edge
        graph: Graph to search
        spacing: Grid spacing; a vertex within ``spacing / 20`` of the edge
            counts as lying on it

    Returns:
        Matching vertices in graph order

    Raises:
        EntityNotFoundError: If the edge or its endpoints are missing
    """
    edge = _require_edge(edge_id, graph)
    edge_v1 = _require_vertex(edge.v1, graph)
    edge_v2 = _require_vertex(edge.v2, graph)
    segment = Segment(edge_v1, edge_v2)
    tolerance = spacing / 20

    def is_endpoint(vertex: Vertex) -> bool:
        return (
            vertex.id in (edge.v1, edge.v2)
            or (vertex.x == edge_v1.x and vertex.y == edge_v1.y)
            or (vertex.x == edge_v2.x and vertex.y == edge_v2.y)
        )

    return [
        v
        for v in graph.vertices
        if not is_endpoint(v)
        and distance_between_points(v, projection_of_point_to_line(v, segment)) <= tolerance
    ]


def except_face(graph: Graph, face_id: str | None) -> Graph:
    """Copy of the graph without the given face.

    Useful when testing an edited face against every other face. A falsy
    ``face_id`` returns the graph unchanged.
    """
    if not face_id:
        return graph
    return replace(graph, faces=[f for f in graph.faces if f.id != face_id])


def face_is_closed(face_id: str, graph: Graph) -> bool:
    """Check that a face's edge references form a closed traversal.

    The end vertex of every edge, given its reverse flag, must be the start
    vertex of the next edge, wrapping around from the last to the first.

    Raises:
        EntityNotFoundError: If the face or one of its edges is missing
    """
    face = _require_face(face_id, graph)
    if not face.edge_refs:
        return False

    walked = []
    for ref in face.edge_refs:
        edge = _require_edge(ref.edge_id, graph)
        walked.append((edge.v2, edge.v1) if ref.reverse else (edge.v1, edge.v2))

    return all(
        walked[i][1] == walked[(i + 1) % len(walked)][0] for i in range(len(walked))
    )
