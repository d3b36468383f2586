"""InMemoryGraphStore -- dict-based DocumentGraphStore.

Public API:
    InMemoryGraphStore: Thread-safe in-process store for built graphs.
"""

from __future__ import annotations

import logging
import threading

from .traversal import bfs_traverse
from .types import (
    Direction,
    GraphData,
    GraphEdge,
    GraphNode,
    SemanticEdgeType,
    TraversalResult,
)

logger = logging.getLogger(__name__)


class InMemoryGraphStore:
    """Dict-based DocumentGraphStore with no database.

    Thread-safe via a reentrant lock.

    Args:
        store_id: Human-readable identifier for this store instance.
    """

    def __init__(self, store_id: str = "in_memory") -> None:
        self._store_id = store_id
        self._nodes: dict[str, GraphNode] = {}
        self._edges: list[GraphEdge] = []
        self._lock = threading.RLock()

    @property
    def store_id(self) -> str:
        return self._store_id

    # ── node operations ──────────────────────────────────────

    def add_node(self, node: GraphNode) -> GraphNode:
        with self._lock:
            self._nodes[node.id] = node
        return node

    def get_node(self, node_id: str) -> GraphNode | None:
        with self._lock:
            return self._nodes.get(node_id)

    # ── edge operations ──────────────────────────────────────

    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        with self._lock:
            if edge.source not in self._nodes:
                raise KeyError(f"Source node not found: {edge.source}")
            if edge.target not in self._nodes:
                raise KeyError(f"Target node not found: {edge.target}")
            self._edges.append(edge)
        return edge

    def query_neighbors(
        self,
        node_id: str,
        semantic_type: SemanticEdgeType | None = None,
        direction: Direction = Direction.BOTH,
        limit: int = 50,
    ) -> list[tuple[GraphEdge, GraphNode]]:
        with self._lock:
            if node_id not in self._nodes:
                return []
            results: list[tuple[GraphEdge, GraphNode]] = []
            for e in self._edges:
                if semantic_type is not None and e.semantic_type is not semantic_type:
                    continue
                neighbor_id: str | None = None
                if direction in (Direction.OUTGOING, Direction.BOTH) and e.source == node_id:
                    neighbor_id = e.target
                elif direction in (Direction.INCOMING, Direction.BOTH) and e.target == node_id:
                    neighbor_id = e.source
                if neighbor_id is None:
                    continue
                neighbor = self._nodes.get(neighbor_id)
                if neighbor is None:
                    continue
                results.append((e, neighbor))
                if len(results) >= limit:
                    break
        return results

    # ── traversal ────────────────────────────────────────────

    def traverse(
        self,
        start_id: str,
        semantic_types: list[SemanticEdgeType] | None = None,
        max_hops: int = 3,
        direction: Direction = Direction.OUTGOING,
    ) -> TraversalResult:
        return bfs_traverse(self, start_id, semantic_types, max_hops, direction)

    # ── bulk ─────────────────────────────────────────────────

    def save_graph(self, graph: GraphData) -> int:
        with self._lock:
            self._nodes = {}
            self._edges = []
            for node in graph.nodes:
                self.add_node(node)
            stored = 0
            for edge in graph.edges:
                if edge.source not in self._nodes or edge.target not in self._nodes:
                    logger.debug("Skipping dangling edge %s", edge.id)
                    continue
                self._edges.append(edge)
                stored += 1
        return stored

    # ── lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        with self._lock:
            self._nodes.clear()
            self._edges.clear()


__all__ = ["InMemoryGraphStore"]
