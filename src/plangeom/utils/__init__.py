"""Utility functions for plangeom.

This module provides:

- Logging setup and configuration
- Sequence helpers used by the graph transforms
"""

from plangeom.utils.logging import configure_logging
from plangeom.utils.sequences import drop_consecutive_duplicates

__all__ = [
    "configure_logging",
    "drop_consecutive_duplicates",
]
