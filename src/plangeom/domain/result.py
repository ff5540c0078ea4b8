"""Result types for boolean set operations.

A set operation either produces a single ring, produces nothing, or fails in
one of two recognised ways that the editing layer reports to the user.
"""

from dataclasses import dataclass, field
from enum import Enum

from plangeom.domain.point import Point


class SetOperationKind(str, Enum):
    """Boolean operation applied to two rings."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


class SetOperationFailure(str, Enum):
    """Why a set operation could not produce a single face.

    - HOLE_ARTIFACT: the result contains a ring nested inside the outer ring
    - SPLIT_FACE: the result is two or more disjoint regions
    """

    HOLE_ARTIFACT = "no holes"
    SPLIT_FACE = "no split faces"


@dataclass(frozen=True)
class SetOperationOk:
    """The operation produced exactly one ring."""

    ring: list[Point] = field(default_factory=list)


@dataclass(frozen=True)
class SetOperationEmpty:
    """The operation cancelled everything out."""


@dataclass(frozen=True)
class SetOperationError:
    """The operation produced something a single face cannot represent."""

    failure: SetOperationFailure

    @property
    def message(self) -> str:
        return self.failure.value


SetOperationResult = SetOperationOk | SetOperationEmpty | SetOperationError
