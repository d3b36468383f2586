"""Deterministic node placement and edge styling.

Placement is a pure function of a node's index and the node count; there
is no physics simulation, collision resolution or crossing minimization.

Public API:
    layout_for_view_mode(view_mode) -> GraphLayout
    calculate_node_position(index, total, layout) -> Position
    edge_style(semantic_type) -> EdgeStyle
"""

from __future__ import annotations

import math

from .types import EdgeStyle, GraphLayout, Position, SemanticEdgeType, ViewMode

# force: circle centre and minimum radius
FORCE_CENTER_X = 400
FORCE_CENTER_Y = 300
FORCE_MIN_RADIUS = 300
FORCE_RADIUS_PER_NODE = 30

# tree: leveled grid
TREE_ITEMS_PER_LEVEL = 4
TREE_X_SPACING = 250
TREE_Y_SPACING = 200

# path: row-major grid
PATH_ITEMS_PER_ROW = 3
PATH_X_SPACING = 300
PATH_Y_SPACING = 250

GRID_OFFSET = 100

EDGE_COLORS = {
    SemanticEdgeType.PREREQUISITE: "#ef4444",  # red
    SemanticEdgeType.RELATED: "#3b82f6",  # blue
    SemanticEdgeType.EXAMPLE: "#10b981",  # green
}
DEFAULT_EDGE_COLOR = "#6b7280"  # gray


def layout_for_view_mode(view_mode: ViewMode | str) -> GraphLayout:
    """Map a view mode to its layout; unknown modes get FORCE."""
    mode = ViewMode.parse(view_mode)
    if mode is ViewMode.NAVIGATION_TREE:
        return GraphLayout.TREE
    if mode is ViewMode.LEARNING_PATH:
        return GraphLayout.PATH
    return GraphLayout.FORCE


def calculate_node_position(index: int, total: int, layout: GraphLayout) -> Position:
    """Place the node at *index* of *total* according to *layout*."""
    if layout is GraphLayout.TREE:
        return _tree_position(index)
    if layout is GraphLayout.PATH:
        return _path_position(index)
    return _force_position(index, total)


def _force_position(index: int, total: int) -> Position:
    """Evenly spaced on a circle whose radius grows with the node count."""
    radius = max(FORCE_MIN_RADIUS, total * FORCE_RADIUS_PER_NODE)
    angle = (index / total) * 2 * math.pi
    return Position(
        x=radius * math.cos(angle) + FORCE_CENTER_X,
        y=radius * math.sin(angle) + FORCE_CENTER_Y,
    )


def _tree_position(index: int) -> Position:
    level, slot = divmod(index, TREE_ITEMS_PER_LEVEL)
    return Position(
        x=float(slot * TREE_X_SPACING + GRID_OFFSET),
        y=float(level * TREE_Y_SPACING + GRID_OFFSET),
    )


def _path_position(index: int) -> Position:
    row, col = divmod(index, PATH_ITEMS_PER_ROW)
    return Position(
        x=float(col * PATH_X_SPACING + GRID_OFFSET),
        y=float(row * PATH_Y_SPACING + GRID_OFFSET),
    )


def edge_style(semantic_type: SemanticEdgeType) -> EdgeStyle:
    return EdgeStyle(stroke=EDGE_COLORS.get(semantic_type, DEFAULT_EDGE_COLOR))


__all__ = ["layout_for_view_mode", "calculate_node_position", "edge_style"]
