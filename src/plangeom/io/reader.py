"""Readers for graph and ring JSON files."""

import json
from pathlib import Path

from plangeom.domain import Graph, Point
from plangeom.exceptions import GraphLoadError
from plangeom.io.converter import json_to_graph, json_to_ring


def _load_json(path: Path) -> object:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise GraphLoadError(str(path), f"invalid JSON: {e}") from e


class GraphReader:
    """Loads a normalized geometry graph from a JSON file.

    Example:
        reader = GraphReader(Path("story.json"))
        graph = reader.load()
        print(len(graph.faces))
    """

    def __init__(self, graph_path: Path) -> None:
        """Initialize the graph reader.

        Args:
            graph_path: Path to the JSON file
        """
        self._graph_path = graph_path
        self._graph: Graph | None = None

    def load(self) -> Graph:
        """Load and parse the graph file.

        Returns:
            The loaded graph

        Raises:
            FileNotFoundError: If the file does not exist
            GraphLoadError: If the file is not valid graph JSON
        """
        data = _load_json(self._graph_path)
        try:
            self._graph = json_to_graph(data)
        except ValueError as e:
            raise GraphLoadError(str(self._graph_path), str(e)) from e
        return self._graph

    @property
    def graph(self) -> Graph:
        """Return the loaded graph.

        Raises:
            RuntimeError: If the graph has not been loaded yet
        """
        if self._graph is None:
            raise RuntimeError("Graph not loaded. Call load() first.")
        return self._graph


def read_ring(path: Path) -> list[Point]:
    """Load a ring from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphLoadError: If the file is not a valid ring
    """
    data = _load_json(path)
    try:
        return json_to_ring(data)
    except ValueError as e:
        raise GraphLoadError(str(path), str(e)) from e
