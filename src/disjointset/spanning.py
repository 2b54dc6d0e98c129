"""Minimum spanning forests and connected components over weighted edges."""

import json
import math
import time
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from disjointset.audit import AuditLogger
from disjointset.config import DisjointSetConfig, create_disjoint_set
from disjointset.disjoint_set import DisjointSet
from disjointset.errors import EdgeFormatError

__all__ = [
    "Edge",
    "SpanningForest",
    "load_edges",
    "minimum_spanning_forest",
    "connected_components",
]

STAGE_KRUSKAL = "kruskal"


def _as_node(value: Any) -> Hashable:
    """Turn a decoded JSON endpoint into a hashable node.

    Arrays become tuples, recursively. Objects are rejected.

    Raises
    ------
    EdgeFormatError
        If the value cannot be used as a node.
    """
    # JSON arrays come back as lists
    if isinstance(value, list):
        return tuple(_as_node(item) for item in value)
    try:
        hash(value)
    except TypeError as e:
        raise EdgeFormatError(f"edge endpoint must be hashable, got {type(value).__name__}") from e
    return value


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge.

    Attributes
    ----------
    source : Hashable
        First endpoint.
    target : Hashable
        Second endpoint.
    weight : float
        Edge weight.
    """

    source: Hashable
    target: Hashable
    weight: float

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Edge":
        """Create Edge from a raw mapping.

        Parameters
        ----------
        data : dict[str, Any]
            Mapping with ``source``, ``target`` and ``weight`` keys.

        Returns
        -------
        Edge
            Typed edge.

        Raises
        ------
        EdgeFormatError
            If a key is missing, an endpoint is null or unhashable, or the
            weight is not a finite number.
        """
        if not isinstance(data, dict):
            raise EdgeFormatError(f"expected an object, got {type(data).__name__}")

        missing = [key for key in ("source", "target", "weight") if key not in data]
        if missing:
            raise EdgeFormatError(f"missing keys: {', '.join(missing)}")

        source, target, weight = data["source"], data["target"], data["weight"]
        if source is None or target is None:
            raise EdgeFormatError("edge endpoints must not be null")
        source = _as_node(source)
        target = _as_node(target)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise EdgeFormatError(f"weight must be a number, got {weight!r}")
        if not math.isfinite(weight):
            raise EdgeFormatError(f"weight must be finite, got {weight!r}")

        return Edge(source=source, target=target, weight=weight)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"source": self.source, "target": self.target, "weight": self.weight}


@dataclass(frozen=True)
class SpanningForest:
    """Result of a minimum spanning forest computation.

    Attributes
    ----------
    edges : tuple[Edge, ...]
        Selected edges in selection (ascending weight) order.
    total_weight : float
        Sum of selected edge weights.
    components : tuple[tuple[Hashable, ...], ...]
        Node groups spanned by the forest, one per tree.
    """

    edges: tuple[Edge, ...]
    total_weight: float
    components: tuple[tuple[Hashable, ...], ...]

    @property
    def tree_count(self) -> int:
        """Number of trees in the forest."""
        return len(self.components)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "edges": [edge.to_dict() for edge in self.edges],
            "total_weight": self.total_weight,
            "components": [list(component) for component in self.components],
        }


def load_edges(path: Path) -> list[Edge]:
    """Load edges from a JSONL file.

    Parameters
    ----------
    path : Path
        File with one JSON edge object per line. Blank lines are ignored.

    Returns
    -------
    list[Edge]
        Edges in file order.

    Raises
    ------
    EdgeFormatError
        If a line is not valid JSON or not a valid edge.
    """
    edges: list[Edge] = []

    with Path(path).open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise EdgeFormatError(f"invalid JSON: {e.msg}", line=line_no) from e
            try:
                edges.append(Edge.from_dict(data))
            except EdgeFormatError as e:
                raise EdgeFormatError(str(e), line=line_no) from e

    return edges


def _seed(
    edges: list[Edge],
    nodes: Iterable[Hashable] | None,
    config: DisjointSetConfig | None,
) -> DisjointSet[Hashable]:
    """Build a disjoint set holding *nodes* and every edge endpoint."""
    ds = create_disjoint_set(config)
    if nodes is not None:
        ds.make_sets(nodes)
    for edge in edges:
        ds.make_set(edge.source)
        ds.make_set(edge.target)
    return ds


def minimum_spanning_forest(
    edges: Iterable[Edge],
    nodes: Iterable[Hashable] | None = None,
    config: DisjointSetConfig | None = None,
    logger: AuditLogger | None = None,
) -> SpanningForest:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    Edges are examined by ascending weight; ties keep input order. An
    edge is selected only when its endpoints are in different sets, so
    a connected graph of ``n`` nodes yields exactly ``n - 1`` edges.

    Parameters
    ----------
    edges : Iterable[Edge]
        Candidate edges.
    nodes : Iterable[Hashable] | None, optional
        Extra nodes to include, e.g. isolated ones.
    config : DisjointSetConfig | None, optional
        Disjoint-set configuration.
    logger : AuditLogger | None, optional
        Receives per-edge DEBUG events and stage timing.

    Returns
    -------
    SpanningForest
        Selected edges, total weight and spanned components.
    """
    edge_list = list(edges)
    ds = _seed(edge_list, nodes, config)

    if logger is not None:
        logger.stage_started(STAGE_KRUSKAL, expected_edges=len(edge_list))
    start = time.perf_counter()

    selected: list[Edge] = []
    total_weight: float = 0
    skipped = 0

    for edge in sorted(edge_list, key=lambda e: e.weight):
        source_root = ds.find(edge.source)
        target_root = ds.find(edge.target)
        if source_root == target_root:
            skipped += 1
            if logger is not None:
                logger.edge_skipped(edge.source, edge.target, edge.weight, source_root)
            continue

        ds.union(edge.source, edge.target)
        selected.append(edge)
        total_weight += edge.weight
        if logger is not None:
            logger.edge_selected(edge.source, edge.target, edge.weight)

    components = tuple(tuple(component) for component in ds.components())

    if logger is not None:
        logger.stage_finished(
            STAGE_KRUSKAL,
            duration_seconds=time.perf_counter() - start,
            counters={
                "nodes": len(ds),
                "edges_in": len(edge_list),
                "edges_selected": len(selected),
                "edges_skipped": skipped,
                "trees": len(components),
            },
        )

    return SpanningForest(
        edges=tuple(selected),
        total_weight=total_weight,
        components=components,
    )


def connected_components(
    edges: Iterable[Edge],
    nodes: Iterable[Hashable] | None = None,
    config: DisjointSetConfig | None = None,
) -> list[list[Hashable]]:
    """Group nodes into connected components.

    Parameters
    ----------
    edges : Iterable[Edge]
        Edges connecting nodes; weights are ignored.
    nodes : Iterable[Hashable] | None, optional
        Extra nodes to include, e.g. isolated ones.
    config : DisjointSetConfig | None, optional
        Disjoint-set configuration.

    Returns
    -------
    list[list[Hashable]]
        Components ordered by first registered member; members in
        registration order.
    """
    edge_list = list(edges)
    ds = _seed(edge_list, nodes, config)
    for edge in edge_list:
        ds.union(edge.source, edge.target)
    return ds.components()
