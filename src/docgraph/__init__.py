"""docgraph: document relationship graphs for documentation sites."""

__version__ = "0.1.0"

from .document import Connection, ConnectionType, Document
from .exceptions import DocGraphError, DocumentLoadError, InvalidDocumentError
from .graph import (
    Direction,
    DocumentGraphStore,
    GraphData,
    GraphEdge,
    GraphLayout,
    GraphNode,
    InMemoryGraphStore,
    KuzuGraphStore,
    Position,
    SemanticEdgeType,
    TraversalResult,
    ViewMode,
    build_graph_data,
)
from .loader import (
    DocumentLoader,
    LoadedDocument,
    parse_document,
    parse_frontmatter,
    render_frontmatter,
)
from .search import search_documents
from .templates import (
    Template,
    TemplateCustomization,
    TemplateLibrary,
    TemplateMetadata,
    customize_template,
    generate_slug,
)

__all__ = [
    # Graph builder
    "build_graph_data",
    "ViewMode",
    "GraphLayout",
    "SemanticEdgeType",
    "Position",
    "GraphNode",
    "GraphEdge",
    "GraphData",
    # Stores
    "Direction",
    "TraversalResult",
    "DocumentGraphStore",
    "InMemoryGraphStore",
    "KuzuGraphStore",
    # Documents
    "Document",
    "Connection",
    "ConnectionType",
    "DocumentLoader",
    "LoadedDocument",
    "parse_document",
    "parse_frontmatter",
    "render_frontmatter",
    "search_documents",
    # Templates
    "TemplateLibrary",
    "TemplateMetadata",
    "Template",
    "TemplateCustomization",
    "customize_template",
    "generate_slug",
    # Exceptions
    "DocGraphError",
    "InvalidDocumentError",
    "DocumentLoadError",
]
