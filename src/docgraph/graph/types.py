"""Graph data structures produced by the builder and held by the stores.

Public API:
    ViewMode: Selects layout and edge synthesis for a build.
    GraphLayout: Node placement strategy.
    SemanticEdgeType: Rendering-facing edge classification.
    Direction: Edge traversal direction.
    Position: 2D node coordinate.
    EdgeStyle: Stroke settings for an edge.
    GraphNode: Immutable positioned node.
    GraphEdge: Immutable styled edge.
    GraphData: Nodes and edges of one build.
    TraversalResult: Container for multi-hop traversal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Which view of the document graph to build."""

    KNOWLEDGE_GRAPH = "knowledge-graph"
    NAVIGATION_TREE = "navigation-tree"
    LEARNING_PATH = "learning-path"

    @classmethod
    def parse(cls, value: ViewMode | str | None) -> ViewMode:
        """Resolve *value* to a member, defaulting to KNOWLEDGE_GRAPH."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown view mode %r, using %s", value, cls.KNOWLEDGE_GRAPH.value)
            return cls.KNOWLEDGE_GRAPH


class GraphLayout(Enum):
    """Node placement strategies."""

    FORCE = "force"
    TREE = "tree"
    PATH = "path"


class SemanticEdgeType(Enum):
    """Edge classification used for rendering (not the raw connection type)."""

    PREREQUISITE = "prerequisite"
    RELATED = "related"
    EXAMPLE = "example"
    HIERARCHY = "hierarchy"
    NEXT = "next"


class Direction(Enum):
    """Direction for edge traversal queries."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class EdgeStyle:
    stroke: str
    stroke_width: int = 2

    def to_dict(self) -> dict[str, Any]:
        return {"stroke": self.stroke, "strokeWidth": self.stroke_width}


@dataclass(frozen=True)
class GraphNode:
    """One vertex per document.

    Attributes:
        id: The document slug.
        label: The document title.
        position: Coordinate assigned by the active layout.
    """

    id: str
    label: str
    position: Position

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "position": self.position.to_dict()}


@dataclass(frozen=True)
class GraphEdge:
    """A typed, styled, directed edge.

    Attributes:
        id: ``"{source}-{target}-{semantic_type}"``, stable across builds.
        source: Node id of the tail.
        target: Node id of the head. May name a node that is not in the
            graph when the originating connection was dangling.
        semantic_type: Rendering classification.
        animated: True only for prerequisite edges.
        style: Stroke colour and width.
    """

    id: str
    source: str
    target: str
    semantic_type: SemanticEdgeType
    animated: bool
    style: EdgeStyle

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "semanticType": self.semantic_type.value,
            "animated": self.animated,
            "label": self.semantic_type.value,
            "style": self.style.to_dict(),
        }


@dataclass
class GraphData:
    """Output of one graph build."""

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}

    def dangling_edges(self) -> list[GraphEdge]:
        """Edges whose source or target has no node in this graph."""
        ids = self.node_ids()
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


@dataclass
class TraversalResult:
    """Container for multi-hop graph traversal results.

    Attributes:
        paths: Each path is an alternating list of [node, edge, node, edge, ...].
        nodes: Deduplicated list of all nodes visited.
        edges: All edges traversed.
    """

    paths: list[list] = field(default_factory=list)
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)


__all__ = [
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
]
