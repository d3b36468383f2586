"""KuzuGraphStore -- Kuzu-backed implementation of the DocumentGraphStore protocol.

Documents live in a single ``DocNode`` node table; each semantic edge
type gets its own rel table so neighbor queries can be narrowed by type.
All Cypher queries use parameterised bindings.

Public API:
    KuzuGraphStore: Concrete DocumentGraphStore backed by Kuzu.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from .layout import edge_style
from .traversal import bfs_traverse
from .types import (
    Direction,
    EdgeStyle,
    GraphData,
    GraphEdge,
    GraphNode,
    Position,
    SemanticEdgeType,
    TraversalResult,
)

logger = logging.getLogger(__name__)

NODE_TABLE = "DocNode"

_NODE_COLUMNS = "n.node_id, n.node_label, n.x, n.y"


def rel_table_name(semantic_type: SemanticEdgeType) -> str:
    """Rel table holding edges of *semantic_type* (e.g. ``PREREQUISITE_EDGE``)."""
    return f"{semantic_type.value.upper()}_EDGE"


class KuzuGraphStore:
    """Kuzu graph database implementation of the DocumentGraphStore protocol.

    The schema is fixed and created on construction; creating it again
    against an existing database is a no-op.

    Args:
        db_path: Filesystem path for the Kuzu database.
        store_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, db_path: Path | str, store_id: str | None = None) -> None:
        self._db_path = Path(db_path)
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(str(self._db_path))
        self._conn = kuzu.Connection(self._db)
        self._ensure_schema()

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    # ── schema management ─────────────────────────────────────

    def _ensure_schema(self) -> None:
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {NODE_TABLE}"
            f"(node_id STRING, node_label STRING, x DOUBLE, y DOUBLE, PRIMARY KEY(node_id))"
        )
        for semantic_type in SemanticEdgeType:
            self._conn.execute(
                f"CREATE REL TABLE IF NOT EXISTS {rel_table_name(semantic_type)}"
                f"(FROM {NODE_TABLE} TO {NODE_TABLE}, "
                f"edge_id STRING, animated BOOLEAN, stroke STRING, stroke_width INT64)"
            )
        logger.debug("Kuzu schema ready at %s", self._db_path)

    # ── node operations ───────────────────────────────────────

    def add_node(self, node: GraphNode) -> GraphNode:
        """Insert or update the node keyed by ``node.id``."""
        params: dict[str, Any] = {
            "nid": node.id,
            "label": node.label,
            "x": float(node.position.x),
            "y": float(node.position.y),
        }
        if self.get_node(node.id) is None:
            cypher = (
                f"CREATE (:{NODE_TABLE} "
                f"{{node_id: $nid, node_label: $label, x: $x, y: $y}})"
            )
        else:
            cypher = (
                f"MATCH (n:{NODE_TABLE}) WHERE n.node_id = $nid "
                f"SET n.node_label = $label, n.x = $x, n.y = $y"
            )
        self._conn.execute(cypher, params)
        return node

    def get_node(self, node_id: str) -> GraphNode | None:
        cypher = f"MATCH (n:{NODE_TABLE}) WHERE n.node_id = $nid RETURN {_NODE_COLUMNS}"
        result = self._conn.execute(cypher, {"nid": node_id})
        if not result.has_next():
            return None
        return self._row_to_node(result.get_next())

    # ── edge operations ───────────────────────────────────────

    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        """Store a directed edge between two existing nodes.

        Raises:
            KeyError: If source or target node does not exist.
        """
        if self.get_node(edge.source) is None:
            raise KeyError(f"Source node not found: {edge.source}")
        if self.get_node(edge.target) is None:
            raise KeyError(f"Target node not found: {edge.target}")
        self._create_edge(edge)
        return edge

    def _create_edge(self, edge: GraphEdge) -> None:
        rel = rel_table_name(edge.semantic_type)
        cypher = (
            f"MATCH (a:{NODE_TABLE}), (b:{NODE_TABLE}) "
            f"WHERE a.node_id = $sid AND b.node_id = $tid "
            f"CREATE (a)-[:{rel} {{edge_id: $eid, animated: $animated, "
            f"stroke: $stroke, stroke_width: $stroke_width}}]->(b)"
        )
        self._conn.execute(
            cypher,
            {
                "sid": edge.source,
                "tid": edge.target,
                "eid": edge.id,
                "animated": edge.animated,
                "stroke": edge.style.stroke,
                "stroke_width": edge.style.stroke_width,
            },
        )

    def query_neighbors(
        self,
        node_id: str,
        semantic_type: SemanticEdgeType | None = None,
        direction: Direction = Direction.BOTH,
        limit: int = 50,
    ) -> list[tuple[GraphEdge, GraphNode]]:
        """Return edges and neighbor nodes adjacent to node_id."""
        if self.get_node(node_id) is None:
            return []

        types = [semantic_type] if semantic_type is not None else list(SemanticEdgeType)
        results: list[tuple[GraphEdge, GraphNode]] = []

        for st in types:
            if direction in (Direction.OUTGOING, Direction.BOTH):
                results.extend(self._query_directed_neighbors(node_id, st, "outgoing", limit))
            if direction in (Direction.INCOMING, Direction.BOTH):
                # Self-loops were already returned as outgoing.
                results.extend(
                    self._query_directed_neighbors(
                        node_id, st, "incoming", limit,
                        skip_self=direction is Direction.BOTH,
                    )
                )

        return results[:limit]

    def _query_directed_neighbors(
        self,
        node_id: str,
        semantic_type: SemanticEdgeType,
        direction: str,
        limit: int,
        skip_self: bool = False,
    ) -> list[tuple[GraphEdge, GraphNode]]:
        """Query neighbors in a specific direction for a single rel table."""
        rel = rel_table_name(semantic_type)
        edge_columns = "r.edge_id, r.animated, r.stroke, r.stroke_width"

        if direction == "outgoing":
            cypher = (
                f"MATCH (a:{NODE_TABLE})-[r:{rel}]->(n:{NODE_TABLE}) "
                f"WHERE a.node_id = $nid "
                f"RETURN {edge_columns}, {_NODE_COLUMNS} LIMIT {limit}"
            )
        else:
            self_clause = " AND n.node_id <> $nid" if skip_self else ""
            cypher = (
                f"MATCH (n:{NODE_TABLE})-[r:{rel}]->(b:{NODE_TABLE}) "
                f"WHERE b.node_id = $nid{self_clause} "
                f"RETURN {edge_columns}, {_NODE_COLUMNS} LIMIT {limit}"
            )

        result = self._conn.execute(cypher, {"nid": node_id})
        pairs: list[tuple[GraphEdge, GraphNode]] = []

        while result.has_next():
            row = result.get_next()
            neighbor = self._row_to_node(row[4:])
            if direction == "outgoing":
                source, target = node_id, neighbor.id
            else:
                source, target = neighbor.id, node_id
            edge = GraphEdge(
                id=str(row[0]),
                source=source,
                target=target,
                semantic_type=semantic_type,
                animated=bool(row[1]),
                style=self._style_from_row(semantic_type, row[2], row[3]),
            )
            pairs.append((edge, neighbor))

        return pairs

    # ── traversal ─────────────────────────────────────────────

    def traverse(
        self,
        start_id: str,
        semantic_types: list[SemanticEdgeType] | None = None,
        max_hops: int = 3,
        direction: Direction = Direction.OUTGOING,
    ) -> TraversalResult:
        return bfs_traverse(self, start_id, semantic_types, max_hops, direction)

    # ── bulk ──────────────────────────────────────────────────

    def save_graph(self, graph: GraphData) -> int:
        """Replace the stored graph with *graph*; dangling edges are skipped."""
        self._conn.execute(f"MATCH (n:{NODE_TABLE}) DETACH DELETE n")

        for node in graph.nodes:
            self.add_node(node)

        node_ids = graph.node_ids()
        stored = 0
        for edge in graph.edges:
            if edge.source not in node_ids or edge.target not in node_ids:
                logger.debug("Skipping dangling edge %s", edge.id)
                continue
            self._create_edge(edge)
            stored += 1

        logger.debug(
            "Saved %d nodes and %d edges to %s", len(graph.nodes), stored, self._store_id
        )
        return stored

    # ── private helpers ───────────────────────────────────────

    @staticmethod
    def _row_to_node(row: list[Any]) -> GraphNode:
        """Convert ``[node_id, node_label, x, y]`` to a GraphNode."""
        return GraphNode(
            id=str(row[0]),
            label=str(row[1] or ""),
            position=Position(x=float(row[2] or 0.0), y=float(row[3] or 0.0)),
        )

    @staticmethod
    def _style_from_row(
        semantic_type: SemanticEdgeType, stroke: Any, stroke_width: Any
    ) -> EdgeStyle:
        if not stroke:
            return edge_style(semantic_type)
        return EdgeStyle(stroke=str(stroke), stroke_width=int(stroke_width or 2))


__all__ = ["KuzuGraphStore", "rel_table_name", "NODE_TABLE"]
