"""Unit tests for the graph I/O layer.

Tests for GraphReader, GraphWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from plangeom.domain import (
    Point,
    SetOperationEmpty,
    SetOperationError,
    SetOperationFailure,
    SetOperationOk,
    Vertex,
)
from plangeom.exceptions import GraphLoadError, GraphSaveError
from plangeom.io import GraphReader, GraphWriter, read_ring
from plangeom.io.converter import json_to_graph, json_to_ring, result_to_json, ring_to_json

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class TestGraphReader:
    """Tests for GraphReader class."""

    def test_init(self):
        """Test GraphReader initialization."""
        path = Path("story.json")
        reader = GraphReader(path)
        assert reader._graph_path == path
        assert reader._graph is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = GraphReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_graph_before_load(self):
        """Test accessing graph before loading raises RuntimeError."""
        reader = GraphReader(Path("story.json"))
        with pytest.raises(RuntimeError, match="Graph not loaded"):
            _ = reader.graph

    def test_load_fixture(self):
        """Test loading the two-room fixture."""
        reader = GraphReader(FIXTURES_DIR / "two_rooms.json")
        graph = reader.load()
        assert graph.id == "story-1"
        assert [f.id for f in graph.faces] == ["left", "right"]
        assert reader.graph is graph

    def test_load_invalid_json(self, tmp_path):
        """Test a file that is not JSON."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(GraphLoadError, match="invalid JSON"):
            GraphReader(path).load()

    def test_load_malformed_graph(self, tmp_path):
        """Test an edge without its second vertex."""
        path = tmp_path / "malformed.json"
        path.write_text(json.dumps({"edges": [{"id": "e1", "v1": "a"}]}), encoding="utf-8")
        with pytest.raises(GraphLoadError) as exc_info:
            GraphReader(path).load()
        assert exc_info.value.path == str(path)

    def test_load_non_object(self, tmp_path):
        """Test a JSON list where a graph object is expected."""
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(GraphLoadError, match="Expected a graph object"):
            GraphReader(path).load()


class TestReadRing:
    """Tests for read_ring."""

    def test_read_pairs(self):
        """Test a ring of [x, y] pairs."""
        ring = read_ring(FIXTURES_DIR / "square_a.json")
        assert ring == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    def test_read_point_objects(self):
        """Test a ring of point objects."""
        ring = read_ring(FIXTURES_DIR / "square_b.json")
        assert [p.to_tuple() for p in ring] == [(10, 0), (20, 0), (20, 10), (10, 10)]

    def test_read_invalid_ring(self, tmp_path):
        """Test a file holding something other than points."""
        path = tmp_path / "ring.json"
        path.write_text(json.dumps([[0, 0, 0]]), encoding="utf-8")
        with pytest.raises(GraphLoadError, match="Invalid point"):
            read_ring(path)

    @pytest.mark.parametrize(
        "points",
        [
            [{"y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}],
            [{"x": "a", "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}],
        ],
        ids=["missing-coordinate", "non-numeric-coordinate"],
    )
    def test_read_malformed_point(self, tmp_path, points):
        """Test point objects that are not usable coordinates."""
        path = tmp_path / "ring.json"
        path.write_text(json.dumps(points), encoding="utf-8")
        with pytest.raises(GraphLoadError, match="Invalid point"):
            read_ring(path)

    def test_read_missing_ring(self, tmp_path):
        """Test a ring file that does not exist."""
        with pytest.raises(FileNotFoundError):
            read_ring(tmp_path / "missing.json")


class TestConverter:
    """Tests for JSON conversion functions."""

    def test_json_to_ring_keeps_ids(self):
        """Point objects keep their vertex ids."""
        ring = json_to_ring([{"x": 1, "y": 2, "id": "v1"}, [3, 4]])
        assert ring == [Point(1, 2, id="v1"), Point(3.0, 4.0)]

    def test_json_to_ring_not_a_list(self):
        """Test a non-list value."""
        with pytest.raises(ValueError, match="Expected a list of points"):
            json_to_ring({"x": 1, "y": 2})

    @pytest.mark.parametrize(
        "item",
        [{"x": 1}, {"x": 1, "y": None}, {"x": True, "y": 0}, ["1", 2], [1, False]],
    )
    def test_json_to_ring_rejects_bad_coordinates(self, item):
        """Test points whose coordinates are missing or not numbers."""
        with pytest.raises(ValueError, match="Invalid point"):
            json_to_ring([item])

    def test_ring_to_json(self):
        """Test converting a ring to point objects."""
        assert ring_to_json([Point(1, 2), Point(3, 4, id="v")]) == [
            {"x": 1, "y": 2},
            {"x": 3, "y": 4, "id": "v"},
        ]

    def test_ring_to_json_accepts_vertices(self):
        """Test serializing graph vertices keeps their ids."""
        assert ring_to_json([Vertex(id="a", x=0, y=0), Point(5, 5)]) == [
            {"x": 0, "y": 0, "id": "a"},
            {"x": 5, "y": 5},
        ]

    def test_json_to_graph_missing_key(self):
        """Test a face without an id."""
        with pytest.raises(ValueError, match="Malformed graph entity"):
            json_to_graph({"faces": [{"edgeRefs": []}]})

    def test_result_to_json(self):
        """Test each kind of set-operation result."""
        ok = SetOperationOk(ring=[Point(0, 0), Point(1, 0), Point(0, 1)])
        assert result_to_json(ok) == [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 0, "y": 1}]
        assert result_to_json(SetOperationEmpty()) == []
        assert result_to_json(SetOperationError(SetOperationFailure.HOLE_ARTIFACT)) == {
            "error": "no holes"
        }


class TestGraphWriter:
    """Tests for GraphWriter class."""

    def test_write_graph_round_trip(self, two_rooms, tmp_path):
        """Test writing a graph and loading it back."""
        path = tmp_path / "out" / "story.json"
        GraphWriter().write_graph(two_rooms, path)
        assert GraphReader(path).load() == two_rooms

    def test_write_uses_edge_refs_key(self, two_rooms, tmp_path):
        """Test the written face shape."""
        path = tmp_path / "story.json"
        GraphWriter().write_graph(two_rooms, path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["faces"][1]["edgeRefs"][-1] == {"edge_id": "be", "reverse": True}

    def test_write_result(self, tmp_path):
        """Test writing a rejected result."""
        path = tmp_path / "result.json"
        GraphWriter().write_result(SetOperationError(SetOperationFailure.SPLIT_FACE), path)
        assert json.loads(path.read_text(encoding="utf-8")) == {"error": "no split faces"}

    def test_dumps_indent(self):
        """Test compact output without indentation."""
        assert GraphWriter(indent=None).dumps({"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_write_failure(self, two_rooms, tmp_path):
        """Test writing below a regular file raises GraphSaveError."""
        blocker = tmp_path / "file.txt"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(GraphSaveError):
            GraphWriter().write_graph(two_rooms, blocker / "story.json")
