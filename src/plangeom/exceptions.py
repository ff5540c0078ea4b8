"""Exception hierarchy for plangeom."""


class PlangeomError(Exception):
    """Base exception for all plangeom errors."""

    pass


class GeometryError(PlangeomError):
    """Errors in geometric calculations."""

    pass


class InvalidOperationError(GeometryError):
    """Unknown boolean set-operation kind."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(
            f'invalid operation "{kind}". expected union, intersection, or difference'
        )


class DifferenceResultError(GeometryError):
    """The exact difference produced a geometry that is not polygonal."""

    def __init__(self, geom_type: str) -> None:
        self.geom_type = geom_type
        super().__init__(f"Polygon difference returned unsupported geometry '{geom_type}'")


class InvalidCoordinatesError(GeometryError):
    """A point or polygon was not given as numeric coordinate pairs."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GraphError(PlangeomError):
    """Errors related to the vertex/edge/face graph."""

    pass


class EntityNotFoundError(GraphError):
    """A vertex, edge or face referenced by id is not in the graph."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} '{entity_id}' not found in graph")


class GraphLoadError(GraphError):
    """Error loading a graph or ring file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load '{path}': {reason}")


class GraphSaveError(GraphError):
    """Error saving a graph or ring file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
