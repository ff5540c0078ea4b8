"""Conversion between JSON values and domain models.

Graphs use the dictionary shape of ``Graph.to_dict``. Rings are accepted in
either of the shapes the editing layer passes around:

- A list of ``[x, y]`` pairs
- A list of ``{"x": ..., "y": ...}`` objects, optionally with an ``id``
"""

from collections.abc import Sequence
from numbers import Real
from typing import Any

from plangeom.domain import (
    Graph,
    Point,
    PointLike,
    SetOperationEmpty,
    SetOperationError,
    SetOperationResult,
)


def _coordinate(value: Any, item: Any) -> float:
    # bool is a Real subclass but never a coordinate
    if not isinstance(value, Real) or isinstance(value, bool):
        raise ValueError(f"Invalid point: {item!r}")
    return float(value)


def json_to_ring(data: Any) -> list[Point]:
    """Convert a JSON ring to a list of points.

    Args:
        data: Parsed JSON list of pairs or point objects

    Returns:
        List of points in the given order

    Raises:
        ValueError: If the value is not a list of points, a point lacks a
            coordinate or a coordinate is not a number
    """
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of points, got {type(data).__name__}")

    ring = []
    for item in data:
        if isinstance(item, dict):
            if "x" not in item or "y" not in item:
                raise ValueError(f"Invalid point: {item!r}")
            x, y = item["x"], item["y"]
            point_id = item.get("id")
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            x, y = item
            point_id = None
        else:
            raise ValueError(f"Invalid point: {item!r}")
        ring.append(Point(_coordinate(x, item), _coordinate(y, item), id=point_id))
    return ring


def ring_to_json(ring: Sequence[PointLike]) -> list[dict[str, Any]]:
    """Convert a ring of points or vertices to a list of point objects."""
    return [Point.of(p).to_dict() for p in ring]


def json_to_graph(data: Any) -> Graph:
    """Convert a JSON object to a normalized graph.

    Raises:
        ValueError: If the value is not an object or an entity is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a graph object, got {type(data).__name__}")
    try:
        return Graph.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed graph entity: {e}") from e


def result_to_json(result: SetOperationResult) -> Any:
    """Convert a set-operation result to JSON.

    A ring becomes a list of points, an empty result an empty list and a
    failure ``{"error": <reason>}``.
    """
    if isinstance(result, SetOperationError):
        return {"error": result.message}
    if isinstance(result, SetOperationEmpty):
        return []
    return ring_to_json(result.ring)
