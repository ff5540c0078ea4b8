"""Graph I/O layer for plangeom.

This module reads and writes geometry graphs and rings as JSON, in the
dictionary shape produced by the domain models' ``to_dict`` methods.

Key classes:
- GraphReader: Load a normalized graph
- GraphWriter: Save graphs and set-operation results

Key functions:
- read_ring: Load a ring of points
"""

from plangeom.io.reader import GraphReader, read_ring
from plangeom.io.writer import GraphWriter

__all__ = [
    "GraphReader",
    "GraphWriter",
    "read_ring",
]
