"""DocumentGraphStore protocol -- the interface all graph backends implement.

Public API:
    DocumentGraphStore: Runtime-checkable protocol defining the store contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types import (
    Direction,
    GraphData,
    GraphEdge,
    GraphNode,
    SemanticEdgeType,
    TraversalResult,
)


@runtime_checkable
class DocumentGraphStore(Protocol):
    """Common interface for persisting and querying a built document graph.

    Every concrete implementation (Kuzu, in-memory) must satisfy this
    protocol so callers can swap backends without changes.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    # ── node operations ───────────────────────────────────────

    def add_node(self, node: GraphNode) -> GraphNode:
        """Insert *node*, replacing any stored node with the same id."""
        ...

    def get_node(self, node_id: str) -> GraphNode | None:
        """Fetch a single node by ID, or None if not found."""
        ...

    # ── edge operations ───────────────────────────────────────

    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        """Store a directed edge between two existing nodes.

        Raises:
            KeyError: If either endpoint does not exist.
        """
        ...

    def query_neighbors(
        self,
        node_id: str,
        semantic_type: SemanticEdgeType | None = None,
        direction: Direction = Direction.BOTH,
        limit: int = 50,
    ) -> list[tuple[GraphEdge, GraphNode]]:
        """Return edges and neighbor nodes adjacent to *node_id*."""
        ...

    # ── traversal ─────────────────────────────────────────────

    def traverse(
        self,
        start_id: str,
        semantic_types: list[SemanticEdgeType] | None = None,
        max_hops: int = 3,
        direction: Direction = Direction.OUTGOING,
    ) -> TraversalResult:
        """BFS traversal from *start_id* up to *max_hops* hops."""
        ...

    # ── bulk ──────────────────────────────────────────────────

    def save_graph(self, graph: GraphData) -> int:
        """Replace the stored graph with *graph*.

        Edges with a missing endpoint are skipped.

        Returns:
            Number of edges stored.
        """
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Release resources held by the store."""
        ...


__all__ = ["DocumentGraphStore"]
