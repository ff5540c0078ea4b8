"""Core geometric types for ring representation.

This module defines the fundamental geometric types used throughout plangeom:
- Point: A 2D point, optionally tagged with the id of the vertex it came from
- Segment: A directed line segment between two points
"""

from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol


class PointLike(Protocol):
    """Anything with planar ``x`` and ``y`` coordinates (points and vertices)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Two points compare equal
    only if their ids match as well; use ``same_position`` for value equality.

    Attributes:
        x: X coordinate
        y: Y coordinate
        id: Optional id of the graph vertex this point was taken from
    """

    x: float
    y: float
    id: str | None = None

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def same_position(self, other: PointLike) -> bool:
        """Check exact coordinate equality, ignoring ids."""
        return self.x == other.x and self.y == other.y

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y and, when present, id fields
        """
        data: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional id fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], id=data.get("id"))

    @classmethod
    def of(cls, point: PointLike) -> "Point":
        """Build a Point from any object carrying x/y (and maybe id)."""
        return cls(x=point.x, y=point.y, id=getattr(point, "id", None))


class Segment(NamedTuple):
    """A directed segment from ``start`` to ``end``."""

    start: PointLike
    end: PointLike


Ring = list[Point]
