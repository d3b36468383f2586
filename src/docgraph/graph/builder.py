"""Build renderable graph data from documents and their connections.

Philosophy:
- Pure transformation: no I/O, no shared state, inputs are never mutated
- Input order is part of the contract (positions, path chaining)
- Explicit connection edges always take precedence over synthesized ones
- Dangling connection targets pass through; renderers skip them

Public API:
    build_graph_data(documents, view_mode) -> GraphData
    create_edge(source, target, semantic_type) -> GraphEdge
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..document import Connection, ConnectionType, Document
from .layout import calculate_node_position, edge_style, layout_for_view_mode
from .types import GraphData, GraphEdge, GraphNode, SemanticEdgeType, ViewMode

logger = logging.getLogger(__name__)

# Slug substrings that mark a document as a navigation-tree root.
ROOT_SLUG_MARKERS = ("getting-started", "index")


def build_graph_data(
    documents: Sequence[Document],
    view_mode: ViewMode | str = ViewMode.KNOWLEDGE_GRAPH,
) -> GraphData:
    """Build nodes and edges for *documents* in the given *view_mode*.

    Args:
        documents: Documents in display order.
        view_mode: ``knowledge-graph``, ``navigation-tree`` or
            ``learning-path``; anything else behaves like
            ``knowledge-graph``.

    Returns:
        GraphData with one node per distinct slug and all derived edges.
    """
    mode = ViewMode.parse(view_mode)
    return GraphData(
        nodes=_build_nodes(documents, mode),
        edges=_build_edges(documents, mode),
    )


def create_edge(source: str, target: str, semantic_type: SemanticEdgeType) -> GraphEdge:
    """Create an edge styled for *semantic_type*."""
    return GraphEdge(
        id=f"{source}-{target}-{semantic_type.value}",
        source=source,
        target=target,
        semantic_type=semantic_type,
        animated=semantic_type is SemanticEdgeType.PREREQUISITE,
        style=edge_style(semantic_type),
    )


def _build_nodes(documents: Sequence[Document], mode: ViewMode) -> list[GraphNode]:
    layout = layout_for_view_mode(mode)
    total = len(documents)

    # Keyed by slug: a repeated slug keeps its first slot, last label/position.
    nodes: dict[str, GraphNode] = {}
    for index, doc in enumerate(documents):
        if doc.slug in nodes:
            logger.warning("Duplicate document slug %r; later entry replaces earlier", doc.slug)
        nodes[doc.slug] = GraphNode(
            id=doc.slug,
            label=doc.title,
            position=calculate_node_position(index, total, layout),
        )
    return list(nodes.values())


def _build_edges(documents: Sequence[Document], mode: ViewMode) -> list[GraphEdge]:
    edges: list[GraphEdge] = []

    for doc in documents:
        for conn in doc.connections or ():
            edge = _edge_for_connection(doc, conn)
            if edge is not None:
                edges.append(edge)

    if mode is ViewMode.NAVIGATION_TREE:
        _add_hierarchy_edges(documents, edges)
    elif mode is ViewMode.LEARNING_PATH:
        _add_path_edges(documents, edges)

    return edges


def _edge_for_connection(doc: Document, conn: Connection) -> GraphEdge | None:
    """Map one connection to its edge, or None for an unknown type."""
    try:
        conn_type = ConnectionType(conn.type)
    except ValueError:
        logger.warning(
            "Ignoring connection of unknown type %r from %r to %r",
            conn.type,
            doc.slug,
            conn.target,
        )
        return None

    if conn_type is ConnectionType.PREREQUISITE:
        # The prerequisite points into the document that declares it.
        return create_edge(conn.target, doc.slug, SemanticEdgeType.PREREQUISITE)
    if conn_type is ConnectionType.NEXT:
        return create_edge(doc.slug, conn.target, SemanticEdgeType.EXAMPLE)
    # related and seealso render the same way.
    return create_edge(doc.slug, conn.target, SemanticEdgeType.RELATED)


def _is_root(doc: Document) -> bool:
    return any(marker in doc.slug for marker in ROOT_SLUG_MARKERS)


def _first_segment(slug: str) -> str:
    return slug.split("/")[0]


def _add_hierarchy_edges(documents: Sequence[Document], edges: list[GraphEdge]) -> None:
    """Link each root to every document whose slug starts with its first segment."""
    existing = {(e.source, e.target) for e in edges}

    for root in filter(_is_root, documents):
        section = _first_segment(root.slug)
        for doc in documents:
            if doc.slug == root.slug or not doc.slug.startswith(section):
                continue
            pair = (root.slug, doc.slug)
            if pair in existing:
                continue
            edges.append(create_edge(root.slug, doc.slug, SemanticEdgeType.HIERARCHY))
            existing.add(pair)


def _add_path_edges(documents: Sequence[Document], edges: list[GraphEdge]) -> None:
    """Chain consecutive documents into a single reading path."""
    existing = {(e.source, e.target) for e in edges}

    for current, following in zip(documents, documents[1:]):
        pair = (current.slug, following.slug)
        if pair in existing:
            continue
        edges.append(create_edge(current.slug, following.slug, SemanticEdgeType.NEXT))
        existing.add(pair)


__all__ = ["build_graph_data", "create_edge", "ROOT_SLUG_MARKERS"]
