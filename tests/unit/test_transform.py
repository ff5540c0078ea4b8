"""Unit tests for normalize/denormalize."""

import copy
from dataclasses import replace

import pytest

from plangeom.core.transform import denormalize, normalize
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


class TestDenormalize:
    """Tests for denormalize."""

    def test_edges_embed_vertices(self, two_rooms):
        """Edge endpoints are resolved to vertices."""
        dgraph = denormalize(two_rooms)
        be = next(e for e in dgraph.edges if e.id == "be")
        assert be == EmbeddedEdge("be", Vertex("b", 10, 0), Vertex("e", 10, 10))

    def test_faces_embed_edges(self, two_rooms):
        """Faces carry their edges with traversal direction."""
        dgraph = denormalize(two_rooms)
        right = dgraph.faces[1]
        assert [e.id for e in right.edges] == ["bc", "cd", "de", "be"]
        assert [e.reverse for e in right.edges] == [False, False, False, True]

    def test_face_vertex_loops(self, two_rooms):
        """Face vertex loops follow the traversal."""
        dgraph = denormalize(two_rooms)
        assert [v.id for v in dgraph.faces[0].vertices()] == ["a", "b", "e", "f"]
        assert [v.id for v in dgraph.faces[1].vertices()] == ["b", "c", "d", "e"]

    def test_keeps_graph_id(self, two_rooms):
        """Test the graph id survives."""
        assert denormalize(two_rooms).id == "story-1"

    def test_does_not_mutate_input(self, two_rooms):
        """The normalized graph is left as it was."""
        before = copy.deepcopy(two_rooms)
        dgraph = denormalize(two_rooms)
        dgraph.faces.pop()
        dgraph.vertices.pop()
        assert two_rooms == before

    def test_missing_vertex_raises(self, two_rooms):
        """An edge pointing at a missing vertex cannot be resolved."""
        graph = replace(two_rooms, edges=[*two_rooms.edges, Edge("bad", "a", "zz")])
        with pytest.raises(EntityNotFoundError, match="Vertex 'zz'"):
            denormalize(graph)

    def test_missing_edge_raises(self, two_rooms):
        """A face pointing at a missing edge cannot be resolved."""
        graph = replace(two_rooms, faces=[Face("bad", [EdgeRef("zz")])])
        with pytest.raises(EntityNotFoundError, match="Edge 'zz'"):
            denormalize(graph)

    def test_empty_graph(self):
        """Test an empty graph."""
        assert denormalize(Graph()) == DenormalizedGraph()


class TestNormalize:
    """Tests for normalize."""

    def test_round_trip(self, two_rooms):
        """Denormalizing and normalizing gives back the same graph."""
        assert normalize(denormalize(two_rooms)) == two_rooms

    def test_round_trip_keeps_reverse_flags(self, two_rooms):
        """Reverse flags survive the round trip."""
        graph = normalize(denormalize(two_rooms))
        assert graph.faces[1].edge_refs[-1] == EdgeRef("be", reverse=True)

    def test_edges_recovered_from_faces(self, two_rooms):
        """Edges and vertices only reachable through faces are collected."""
        dgraph = denormalize(two_rooms)
        dgraph.edges = []
        dgraph.vertices = []
        graph = normalize(dgraph)
        assert [e.id for e in graph.edges] == ["ab", "be", "ef", "fa", "bc", "cd", "de"]
        assert [v.id for v in graph.vertices] == ["a", "b", "e", "f", "c", "d"]
        assert graph.faces == two_rooms.faces

    def test_first_occurrence_wins(self):
        """Duplicated ids keep the first entity seen."""
        a, b, c = Vertex("a", 0, 0), Vertex("b", 1, 0), Vertex("c", 0, 1)
        moved_a = Vertex("a", 5, 5)
        dgraph = DenormalizedGraph(
            vertices=[a, moved_a],
            edges=[EmbeddedEdge("e1", a, b)],
            faces=[EmbeddedFace("f", [FaceEdge("e1", b, c), FaceEdge("e2", c, a)])],
        )
        graph = normalize(dgraph)
        assert graph.vertices == [a, b, c]
        assert graph.edges == [Edge("e1", "a", "b"), Edge("e2", "c", "a")]

    def test_does_not_mutate_input(self, two_rooms):
        """The denormalized graph is left as it was."""
        dgraph = denormalize(two_rooms)
        before = copy.deepcopy(dgraph)
        normalize(dgraph)
        assert dgraph == before

    def test_empty_graph(self):
        """Test an empty graph."""
        assert normalize(DenormalizedGraph()) == Graph()
