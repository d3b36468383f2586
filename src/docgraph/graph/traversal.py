"""Breadth-first traversal shared by the graph stores.

Public API:
    bfs_traverse: BFS over any DocumentGraphStore via query_neighbors.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from .types import Direction, GraphEdge, GraphNode, SemanticEdgeType, TraversalResult

if TYPE_CHECKING:
    from .protocol import DocumentGraphStore


def bfs_traverse(
    store: DocumentGraphStore,
    start_id: str,
    semantic_types: list[SemanticEdgeType] | None = None,
    max_hops: int = 3,
    direction: Direction = Direction.OUTGOING,
) -> TraversalResult:
    """BFS from *start_id* up to *max_hops* hops.

    Uses iterative BFS via ``query_neighbors`` rather than a single
    recursive query, so hop counting and edge-type filtering behave the
    same on every backend.
    """
    start_node = store.get_node(start_id)
    if start_node is None:
        return TraversalResult()

    visited_ids: set[str] = {start_id}
    all_nodes: dict[str, GraphNode] = {start_id: start_node}
    all_edges: list[GraphEdge] = []
    paths: list[list] = []

    # BFS queue: (current_node_id, current_path, hops_so_far)
    queue: deque[tuple[str, list, int]] = deque()
    queue.append((start_id, [start_node], 0))

    while queue:
        current_id, current_path, hops = queue.popleft()
        if hops >= max_hops:
            continue

        if semantic_types:
            neighbors: list[tuple[GraphEdge, GraphNode]] = []
            for st in semantic_types:
                neighbors.extend(store.query_neighbors(current_id, st, direction))
        else:
            neighbors = store.query_neighbors(current_id, direction=direction)

        for edge, neighbor in neighbors:
            all_edges.append(edge)
            new_path = current_path + [edge, neighbor]

            if neighbor.id not in visited_ids:
                visited_ids.add(neighbor.id)
                all_nodes[neighbor.id] = neighbor
                queue.append((neighbor.id, new_path, hops + 1))

            # Record the path regardless (allows multiple paths to same node).
            paths.append(new_path)

    return TraversalResult(
        paths=paths,
        nodes=list(all_nodes.values()),
        edges=all_edges,
    )


__all__ = ["bfs_traverse"]
