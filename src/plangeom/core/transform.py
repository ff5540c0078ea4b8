"""Conversion between normalized and denormalized geometry graphs.

These two functions are the only way to move between the id-referencing
``Graph`` and the embedded ``DenormalizedGraph``. Neither mutates its input.

For any well-formed graph ``g``, ``normalize(denormalize(g)) == g``.
"""

from plangeom.domain import (
    DenormalizedGraph,
    Edge,
    EdgeRef,
    EmbeddedEdge,
    EmbeddedFace,
    Face,
    FaceEdge,
    Graph,
    Vertex,
)
from plangeom.exceptions import EntityNotFoundError


def denormalize(graph: Graph) -> DenormalizedGraph:
    """Resolve every id reference in a graph.

    Edges embed their endpoint vertices and faces embed their edges together
    with the traversal direction. The face vertex loop is available through
    ``EmbeddedFace.vertices()``.

    Args:
        graph: Normalized graph

    Returns:
        New denormalized graph

    Raises:
        EntityNotFoundError: If an edge endpoint or a face's edge is missing
    """
    vertices_by_id: dict[str, Vertex] = {}
    for vertex in graph.vertices:
        vertices_by_id.setdefault(vertex.id, vertex)

    def resolve(vertex_id: str) -> Vertex:
        try:
            return vertices_by_id[vertex_id]
        except KeyError:
            raise EntityNotFoundError("vertex", vertex_id) from None

    edges = [EmbeddedEdge(id=e.id, v1=resolve(e.v1), v2=resolve(e.v2)) for e in graph.edges]
    edges_by_id = {e.id: e for e in edges}

    faces = []
    for face in graph.faces:
        face_edges = []
        for ref in face.edge_refs:
            edge = edges_by_id.get(ref.edge_id)
            if edge is None:
                raise EntityNotFoundError("edge", ref.edge_id)
            face_edges.append(FaceEdge(id=edge.id, v1=edge.v1, v2=edge.v2, reverse=ref.reverse))
        faces.append(EmbeddedFace(id=face.id, edges=face_edges))

    return DenormalizedGraph(
        id=graph.id,
        vertices=list(graph.vertices),
        edges=edges,
        faces=faces,
    )


def normalize(graph: DenormalizedGraph) -> Graph:
    """Rebuild a normalized graph from embedded entities.

    Edges held directly by the graph and edges reachable through faces are
    merged and deduplicated by id, first occurrence winning. Vertices are
    merged the same way from the graph's own list and the endpoints of those
    edges.

    Args:
        graph: Denormalized graph

    Returns:
        New normalized graph
    """
    edges: dict[str, EmbeddedEdge] = {}
    for edge in [*graph.edges, *(e.as_edge() for f in graph.faces for e in f.edges)]:
        edges.setdefault(edge.id, edge)

    vertices: dict[str, Vertex] = {}
    for vertex in [*graph.vertices, *(v for e in edges.values() for v in (e.v1, e.v2))]:
        vertices.setdefault(vertex.id, vertex)

    return Graph(
        id=graph.id,
        vertices=[Vertex(id=v.id, x=v.x, y=v.y) for v in vertices.values()],
        edges=[Edge(id=e.id, v1=e.v1.id, v2=e.v2.id) for e in edges.values()],
        faces=[
            Face(
                id=f.id,
                edge_refs=[EdgeRef(edge_id=e.id, reverse=e.reverse) for e in f.edges],
            )
            for f in graph.faces
        ],
    )
