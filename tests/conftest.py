"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from disjointset.spanning import Edge  # noqa: E402
from disjointset.strategies import (  # noqa: E402
    FindCompressStrategy,
    FullCompression,
    PathHalvingCompression,
)

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

CITY_ROADS: list[tuple[str, str, int]] = [
    ("New York", "Los Angeles", 2800),
    ("New York", "Chicago", 800),
    ("New York", "Houston", 1600),
    ("Los Angeles", "Chicago", 2000),
    ("Los Angeles", "Houston", 1500),
    ("Los Angeles", "Phoenix", 400),
    ("Chicago", "Houston", 1000),
    ("Chicago", "Phoenix", 1700),
    ("Houston", "Phoenix", 1200),
    ("Philadelphia", "New York", 100),
    ("Philadelphia", "Chicago", 750),
]

CITY_MST: list[tuple[str, str, int]] = [
    ("Philadelphia", "New York", 100),
    ("Los Angeles", "Phoenix", 400),
    ("Philadelphia", "Chicago", 750),
    ("Chicago", "Houston", 1000),
    ("Houston", "Phoenix", 1200),
]


@pytest.fixture(params=[FullCompression, PathHalvingCompression], ids=["full", "halving"])
def strategy(request: pytest.FixtureRequest) -> FindCompressStrategy:
    """Provide each root-finding strategy in turn."""
    return request.param()


@pytest.fixture
def city_edges() -> list[Edge]:
    """Weighted roads between six US cities."""
    return [Edge(source, target, weight) for source, target, weight in CITY_ROADS]


@pytest.fixture
def city_mst() -> list[Edge]:
    """Minimum spanning tree of the city roads in selection order."""
    return [Edge(source, target, weight) for source, target, weight in CITY_MST]


@pytest.fixture
def write_edges(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing edge dicts (or raw lines) to a JSONL file."""

    def _factory(rows: list[dict[str, Any] | str], name: str = "edges.jsonl") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            for row in rows:
                f.write((row if isinstance(row, str) else json.dumps(row)) + "\n")
        return path

    return _factory


@pytest.fixture
def city_edges_path(write_edges: Callable[..., Path]) -> Path:
    """JSONL file holding the city roads."""
    return write_edges(
        [{"source": source, "target": target, "weight": weight} for source, target, weight in CITY_ROADS]
    )
