"""plangeom - planar geometry engine for floorplan editing.

plangeom maintains a boundary-representation graph of vertices, edges and
faces and provides the geometric primitives and polygon boolean operations
needed to edit it interactively: splitting walls, merging rooms and snapping
to existing geometry.

Example:
    >>> from plangeom.core import union
    >>> from plangeom.domain import Point
    >>> a = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    >>> b = [Point(10, 0), Point(20, 0), Point(20, 10), Point(10, 10)]
    >>> union(a, b)  # a single ring spanning x in [0, 20]
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
