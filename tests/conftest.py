"""Shared fixtures for the plangeom test suite."""

import json
from pathlib import Path

import pytest

from plangeom.domain import Graph

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TWO_ROOMS_PATH = FIXTURES_DIR / "two_rooms.json"


@pytest.fixture
def two_rooms_data() -> dict:
    """Two 10x10 rooms sharing the wall x=10, as raw JSON data."""
    return json.loads(TWO_ROOMS_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def two_rooms(two_rooms_data: dict) -> Graph:
    """Two 10x10 rooms sharing the wall x=10.

    Face ``left`` walks a(0,0) b(10,0) e(10,10) f(0,10); face ``right`` walks
    b c(20,0) d(20,10) e and traverses the shared edge ``be`` in reverse.
    """
    return Graph.from_dict(two_rooms_data)
