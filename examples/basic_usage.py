"""Basic usage example for docgraph."""

import json
import sys
import tempfile
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from docgraph import (
    Connection,
    ConnectionType,
    Document,
    KuzuGraphStore,
    SemanticEdgeType,
    ViewMode,
    build_graph_data,
    search_documents,
)
from docgraph.graph import Direction


def main():
    print("=" * 60)
    print("docgraph - Basic Usage Example")
    print("=" * 60)

    # 1. Describe documents
    print("\n1. Creating documents...")
    documents = [
        Document(
            slug="getting-started",
            title="Getting Started",
            tags=("intro",),
            connections=(Connection(ConnectionType.NEXT, "basic-concepts"),),
        ),
        Document(
            slug="basic-concepts",
            title="Basic Concepts",
            connections=(
                Connection(ConnectionType.PREREQUISITE, "getting-started"),
                Connection(ConnectionType.RELATED, "api-reference"),
            ),
        ),
        Document(
            slug="api-reference",
            title="API Reference",
            connections=(Connection(ConnectionType.PREREQUISITE, "basic-concepts"),),
        ),
    ]
    for doc in documents:
        print(f"   {doc.slug}: {len(doc.connections)} connection(s)")

    # 2. Build each view
    print("\n2. Building graphs...")
    for mode in ViewMode:
        graph = build_graph_data(documents, mode)
        print(f"   {mode.value}: {len(graph.nodes)} nodes, {len(graph.edges)} edges")

    # 3. Renderer payload
    print("\n3. Learning path payload...")
    graph = build_graph_data(documents, ViewMode.LEARNING_PATH)
    print(json.dumps(graph.to_dict()["edges"][:2], indent=2))

    # 4. Search
    print("\n4. Searching for 'concepts'...")
    for doc in search_documents(documents, "concepts"):
        print(f"   {doc.title}")

    # 5. Persist and query
    print("\n5. Saving to Kuzu...")
    with tempfile.TemporaryDirectory() as tmp:
        store = KuzuGraphStore(Path(tmp) / "docs_db", store_id="demo")
        stored = store.save_graph(graph)
        print(f"   Stored {stored} edges")

        chain = store.traverse(
            "api-reference",
            [SemanticEdgeType.PREREQUISITE],
            direction=Direction.INCOMING,
        )
        print("   Read before api-reference: " + ", ".join(n.label for n in chain.nodes[1:]))
        store.close()

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
