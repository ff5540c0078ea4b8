"""Normalized geometry graph.

In the normalized form every reference between entities is an id: edges name
their endpoint vertices by id and faces name their bounding edges through
``EdgeRef`` records. This is the shape the editing layer stores and the shape
that ``plangeom.core.transform.normalize`` produces.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph vertex.

    Identity is the ``id``; coordinates are compared separately when
    deduplicating or matching endpoints by value.

    Attributes:
        id: Unique vertex id within the graph
        x: X coordinate
        y: Y coordinate
    """

    id: str
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        return cls(id=data["id"], x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected edge referencing its two endpoint vertices by id."""

    id: str
    v1: str
    v2: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "v1": self.v1, "v2": self.v2}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Edge":
        return cls(id=data["id"], v1=data["v1"], v2=data["v2"])


@dataclass(frozen=True, slots=True)
class EdgeRef:
    """A face's reference to a shared edge.

    Attributes:
        edge_id: Id of the referenced edge
        reverse: True if the face traverses the edge from v2 to v1
    """

    edge_id: str
    reverse: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"edge_id": self.edge_id, "reverse": self.reverse}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EdgeRef":
        return cls(edge_id=data["edge_id"], reverse=bool(data.get("reverse", False)))


@dataclass
class Face:
    """A planar region bounded by a closed loop of edge references.

    Attributes:
        id: Unique face id within the graph
        edge_refs: Ordered edge references; the end vertex of each edge
            (given its reverse flag) is the start vertex of the next
    """

    id: str
    edge_refs: list[EdgeRef] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "edgeRefs": [ref.to_dict() for ref in self.edge_refs]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Face":
        return cls(
            id=data["id"],
            edge_refs=[EdgeRef.from_dict(ref) for ref in data.get("edgeRefs", [])],
        )


@dataclass
class Graph:
    """A normalized geometry graph.

    Attributes:
        id: Graph id (typically the story it belongs to)
        vertices: All vertices
        edges: All edges, referencing vertices by id
        faces: All faces, referencing edges by id
    """

    id: str | None = None
    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the graph holds no geometry at all."""
        return not (self.vertices or self.edges or self.faces)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the normalized dictionary shape.

        Returns:
            Dictionary with id, vertices, edges and faces keys
        """
        return {
            "id": self.id,
            "vertices": [v.to_dict() for v in self.vertices],
            "edges": [e.to_dict() for e in self.edges],
            "faces": [f.to_dict() for f in self.faces],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Graph":
        """Deserialize from the normalized dictionary shape.

        Args:
            data: Dictionary with vertices, edges and faces lists

        Returns:
            Graph instance
        """
        return cls(
            id=data.get("id"),
            vertices=[Vertex.from_dict(v) for v in data.get("vertices", [])],
            edges=[Edge.from_dict(e) for e in data.get("edges", [])],
            faces=[Face.from_dict(f) for f in data.get("faces", [])],
        )
