"""Document graph construction and storage.

Public API:
    build_graph_data: Build nodes and edges from documents for a view mode.
    create_edge: Build one styled edge.
    calculate_node_position: Layout placement for one node.
    layout_for_view_mode: Layout selected by a view mode.
    edge_style: Stroke for a semantic edge type.
    ViewMode, GraphLayout, SemanticEdgeType, Direction: Enums.
    Position, EdgeStyle, GraphNode, GraphEdge, GraphData: Build output.
    TraversalResult: Multi-hop traversal result container.
    DocumentGraphStore: Protocol all stores implement.
    InMemoryGraphStore: Dict-based store.
    KuzuGraphStore: Kuzu-backed store.
"""

from __future__ import annotations

from .builder import build_graph_data, create_edge
from .kuzu_store import KuzuGraphStore
from .layout import calculate_node_position, edge_style, layout_for_view_mode
from .memory_store import InMemoryGraphStore
from .protocol import DocumentGraphStore
from .types import (
    Direction,
    EdgeStyle,
    GraphData,
    GraphEdge,
    GraphLayout,
    GraphNode,
    Position,
    SemanticEdgeType,
    TraversalResult,
    ViewMode,
)

__all__ = [
    "build_graph_data",
    "create_edge",
    "calculate_node_position",
    "edge_style",
    "layout_for_view_mode",
    "ViewMode",
    "GraphLayout",
    "SemanticEdgeType",
    "Direction",
    "Position",
    "EdgeStyle",
    "GraphNode",
    "GraphEdge",
    "GraphData",
    "TraversalResult",
    "DocumentGraphStore",
    "InMemoryGraphStore",
    "KuzuGraphStore",
]
