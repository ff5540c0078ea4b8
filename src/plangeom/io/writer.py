"""Writers for graph and set-operation result JSON files."""

import json
from pathlib import Path
from typing import Any

from plangeom.domain import Graph, SetOperationResult
from plangeom.exceptions import GraphSaveError
from plangeom.io.converter import result_to_json


class GraphWriter:
    """Writes graphs and set-operation results as JSON.

    Example:
        writer = GraphWriter(indent=2)
        writer.write_graph(graph, Path("story.json"))
    """

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def write_graph(self, graph: Graph, path: Path) -> None:
        """Write a normalized graph.

        Raises:
            GraphSaveError: If the file cannot be written
        """
        self._write(graph.to_dict(), path)

    def write_result(self, result: SetOperationResult, path: Path) -> None:
        """Write a set-operation result.

        Raises:
            GraphSaveError: If the file cannot be written
        """
        self._write(result_to_json(result), path)

    def dumps(self, data: Any) -> str:
        return json.dumps(data, indent=self._indent)

    def _write(self, data: Any, path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.dumps(data) + "\n", encoding="utf-8")
        except OSError as e:
            raise GraphSaveError(str(path), str(e)) from e
