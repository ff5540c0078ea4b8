"""Denormalized geometry graph.

In the denormalized form references are resolved: edges embed their endpoint
vertices and faces embed their bounding edges along with the traversal
direction. The face vertex loop is derived from the embedded edges each time
it is asked for; nothing is cached, so a face never goes stale.
"""

from dataclasses import dataclass, field
from typing import Any

from plangeom.domain.graph import Vertex
from plangeom.utils.sequences import drop_consecutive_duplicates


@dataclass(frozen=True, slots=True)
class EmbeddedEdge:
    """An edge with its endpoint vertices resolved."""

    id: str
    v1: Vertex
    v2: Vertex

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "v1": self.v1.to_dict(), "v2": self.v2.to_dict()}


@dataclass(frozen=True, slots=True)
class FaceEdge:
    """An embedded edge as seen from one face.

    Attributes:
        id: Id of the underlying edge
        v1: First endpoint of the edge
        v2: Second endpoint of the edge
        reverse: True if the face traverses the edge from v2 to v1
    """

    id: str
    v1: Vertex
    v2: Vertex
    reverse: bool = False

    @property
    def edge_id(self) -> str:
        return self.id

    @property
    def start(self) -> Vertex:
        """Vertex the face enters this edge through."""
        return self.v2 if self.reverse else self.v1

    @property
    def end(self) -> Vertex:
        """Vertex the face leaves this edge through."""
        return self.v1 if self.reverse else self.v2

    def as_edge(self) -> EmbeddedEdge:
        """Drop the face-specific traversal flag."""
        return EmbeddedEdge(id=self.id, v1=self.v1, v2=self.v2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "edge_id": self.id,
            "v1": self.v1.to_dict(),
            "v2": self.v2.to_dict(),
            "reverse": self.reverse,
        }


@dataclass
class EmbeddedFace:
    """A face holding its bounding edges in traversal order."""

    id: str
    edges: list[FaceEdge] = field(default_factory=list)

    def vertices(self) -> list[Vertex]:
        """Compute the face's vertex loop in open form.

        Each edge contributes its endpoints in traversal order; the endpoint
        shared by consecutive edges (including the last and first edge) is
        kept once.

        Returns:
            Ordered list of vertices around the face
        """
        walked = [v for e in self.edges for v in (e.start, e.end)]
        return drop_consecutive_duplicates(walked, key=lambda v: v.id, cyclic=True)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "edges": [e.to_dict() for e in self.edges]}


@dataclass
class DenormalizedGraph:
    """A geometry graph with every id reference resolved."""

    id: str | None = None
    vertices: list[Vertex] = field(default_factory=list)
    edges: list[EmbeddedEdge] = field(default_factory=list)
    faces: list[EmbeddedFace] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "vertices": [v.to_dict() for v in self.vertices],
            "edges": [e.to_dict() for e in self.edges],
            "faces": [f.to_dict() for f in self.faces],
        }
