"""Domain models for plangeom.

This module contains the record types for points, rings and the two shapes of
the geometry graph. The normalized and denormalized graphs are distinct
families of classes; ``plangeom.core.transform`` is the only way to convert
between them.

Key classes:
- Point: A 2D point, optionally carrying a vertex id
- Segment: A directed segment between two points
- Vertex, Edge, EdgeRef, Face, Graph: The normalized graph
- EmbeddedEdge, FaceEdge, EmbeddedFace, DenormalizedGraph: The denormalized graph
- SetOperationOk, SetOperationEmpty, SetOperationError: Boolean operation results
"""

from plangeom.domain.embedded import (
    DenormalizedGraph,
    EmbeddedEdge,
    EmbeddedFace,
    FaceEdge,
)
from plangeom.domain.graph import Edge, EdgeRef, Face, Graph, Vertex
from plangeom.domain.point import Point, PointLike, Ring, Segment
from plangeom.domain.result import (
    SetOperationEmpty,
    SetOperationError,
    SetOperationFailure,
    SetOperationKind,
    SetOperationOk,
    SetOperationResult,
)

__all__: list[str] = [
    # Enums
    "SetOperationKind",
    "SetOperationFailure",
    # Geometric types
    "Point",
    "PointLike",
    "Ring",
    "Segment",
    # Normalized graph
    "Vertex",
    "Edge",
    "EdgeRef",
    "Face",
    "Graph",
    # Denormalized graph
    "EmbeddedEdge",
    "FaceEdge",
    "EmbeddedFace",
    "DenormalizedGraph",
    # Results
    "SetOperationOk",
    "SetOperationEmpty",
    "SetOperationError",
    "SetOperationResult",
]
