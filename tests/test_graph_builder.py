"""Tests for build_graph_data: nodes, connection edges, synthesized edges."""

from __future__ import annotations

import logging

import pytest

from docgraph import Connection, ConnectionType, Document, build_graph_data
from docgraph.graph import GraphLayout, SemanticEdgeType, ViewMode, calculate_node_position
from docgraph.graph.builder import create_edge


def _doc(slug, *connections, title=None):
    return Document(
        slug=slug,
        title=title or slug.title(),
        connections=tuple(Connection(ConnectionType(t), target) for t, target in connections),
    )


def _pairs(graph, semantic_type=None):
    return [
        (e.source, e.target)
        for e in graph.edges
        if semantic_type is None or e.semantic_type is semantic_type
    ]


class TestNodes:
    """Node creation and placement."""

    def test_empty_input(self):
        graph = build_graph_data([], "knowledge-graph")
        assert graph.nodes == []
        assert graph.edges == []
        assert graph.to_dict() == {"nodes": [], "edges": []}

    def test_one_node_per_document(self, plain_documents):
        graph = build_graph_data(plain_documents, ViewMode.KNOWLEDGE_GRAPH)
        assert len(graph.nodes) == len(plain_documents)
        assert [n.id for n in graph.nodes] == [d.slug for d in plain_documents]
        assert [n.label for n in graph.nodes] == [d.title for d in plain_documents]

    @pytest.mark.parametrize(
        "mode, layout",
        [
            ("knowledge-graph", GraphLayout.FORCE),
            ("navigation-tree", GraphLayout.TREE),
            ("learning-path", GraphLayout.PATH),
        ],
    )
    def test_positions_follow_view_mode(self, plain_documents, mode, layout):
        graph = build_graph_data(plain_documents, mode)
        total = len(plain_documents)
        for index, node in enumerate(graph.nodes):
            assert node.position == calculate_node_position(index, total, layout)

    def test_duplicate_slug_last_wins(self, caplog):
        docs = [
            Document(slug="a", title="First"),
            Document(slug="b", title="B"),
            Document(slug="a", title="Second"),
        ]
        with caplog.at_level(logging.WARNING):
            graph = build_graph_data(docs, "navigation-tree")

        assert [n.id for n in graph.nodes] == ["a", "b"]
        node_a = graph.nodes[0]
        assert node_a.label == "Second"
        assert node_a.position == calculate_node_position(2, 3, GraphLayout.TREE)
        assert "Duplicate document slug" in caplog.text

    def test_does_not_mutate_input(self, intro_documents):
        before = [d.to_dict() for d in intro_documents]
        build_graph_data(intro_documents, "learning-path")
        assert [d.to_dict() for d in intro_documents] == before


class TestConnectionEdges:
    """Mapping from connection type to edge."""

    def test_prerequisite_is_reversed_and_animated(self):
        graph = build_graph_data([_doc("b", ("prerequisite", "a"))], "knowledge-graph")
        (edge,) = graph.edges
        assert edge.source == "a"
        assert edge.target == "b"
        assert edge.semantic_type is SemanticEdgeType.PREREQUISITE
        assert edge.animated is True
        assert edge.style.stroke == "#ef4444"
        assert edge.id == "a-b-prerequisite"

    def test_next_becomes_example(self):
        graph = build_graph_data([_doc("a", ("next", "b"))], "knowledge-graph")
        (edge,) = graph.edges
        assert (edge.source, edge.target) == ("a", "b")
        assert edge.semantic_type is SemanticEdgeType.EXAMPLE
        assert edge.animated is False
        assert edge.style.stroke == "#10b981"

    @pytest.mark.parametrize("conn_type", ["related", "seealso"])
    def test_related_and_seealso_become_related(self, conn_type):
        graph = build_graph_data([_doc("a", (conn_type, "b"))], "knowledge-graph")
        (edge,) = graph.edges
        assert (edge.source, edge.target) == ("a", "b")
        assert edge.semantic_type is SemanticEdgeType.RELATED
        assert edge.animated is False
        assert edge.style.stroke == "#3b82f6"
        assert edge.id == "a-b-related"

    def test_same_pair_different_types_both_kept(self, intro_documents):
        graph = build_graph_data(intro_documents, "knowledge-graph")
        assert len(graph.nodes) == 2
        assert len(graph.edges) == 2
        by_type = {e.semantic_type: e for e in graph.edges}
        example = by_type[SemanticEdgeType.EXAMPLE]
        prereq = by_type[SemanticEdgeType.PREREQUISITE]
        assert (example.source, example.target) == ("getting-started", "basic-concepts")
        assert (prereq.source, prereq.target) == ("getting-started", "basic-concepts")
        assert prereq.animated is True
        assert example.id != prereq.id

    def test_unknown_connection_type_is_skipped(self, caplog):
        doc = Document(
            slug="a",
            title="A",
            connections=(Connection("mentions", "b"), Connection(ConnectionType.NEXT, "c")),
        )
        with caplog.at_level(logging.WARNING):
            graph = build_graph_data([doc], "knowledge-graph")
        assert _pairs(graph) == [("a", "c")]
        assert "unknown type" in caplog.text

    def test_string_connection_type_is_accepted(self):
        doc = Document(slug="a", title="A", connections=(Connection("related", "b"),))
        graph = build_graph_data([doc], "knowledge-graph")
        assert graph.edges[0].semantic_type is SemanticEdgeType.RELATED

    def test_dangling_target_passes_through(self):
        graph = build_graph_data([_doc("a", ("next", "missing"))], "knowledge-graph")
        assert _pairs(graph) == [("a", "missing")]
        assert "missing" not in graph.node_ids()
        assert graph.dangling_edges() == graph.edges

    def test_document_without_connections_has_no_edges(self, plain_documents):
        assert build_graph_data(plain_documents, "knowledge-graph").edges == []


class TestHierarchyEdges:
    """navigation-tree synthesis."""

    def test_root_links_documents_in_same_section(self):
        docs = [
            _doc("guides/getting-started"),
            _doc("guides/install"),
            _doc("guides/configure"),
            _doc("api/client"),
        ]
        graph = build_graph_data(docs, "navigation-tree")
        assert _pairs(graph, SemanticEdgeType.HIERARCHY) == [
            ("guides/getting-started", "guides/install"),
            ("guides/getting-started", "guides/configure"),
        ]
        assert all(e.style.stroke == "#6b7280" for e in graph.edges)
        assert all(e.animated is False for e in graph.edges)

    def test_index_slug_is_a_root(self):
        docs = [_doc("api/index"), _doc("api/client"), _doc("guides/install")]
        graph = build_graph_data(docs, "navigation-tree")
        assert _pairs(graph, SemanticEdgeType.HIERARCHY) == [("api/index", "api/client")]

    def test_explicit_edge_prevents_duplicate(self):
        docs = [
            _doc("guides/getting-started", ("related", "guides/install")),
            _doc("guides/install"),
        ]
        graph = build_graph_data(docs, "navigation-tree")
        assert len(graph.edges) == 1
        assert graph.edges[0].semantic_type is SemanticEdgeType.RELATED

    def test_flat_slug_prefix_joins_root(self):
        docs = [_doc("getting-started"), _doc("basic-concepts"), _doc("getting-started-advanced")]
        graph = build_graph_data(docs, "navigation-tree")
        assert _pairs(graph, SemanticEdgeType.HIERARCHY) == [
            ("getting-started", "getting-started-advanced"),
        ]

    def test_section_prefix_matches_whole_slug(self):
        docs = [_doc("docs/index"), _doc("docs-extra/x"), _doc("api/client")]
        graph = build_graph_data(docs, "navigation-tree")
        assert _pairs(graph, SemanticEdgeType.HIERARCHY) == [("docs/index", "docs-extra/x")]

    def test_related_and_seealso_share_edge_id(self):
        docs = [_doc("a", ("related", "b"), ("seealso", "b"))]
        graph = build_graph_data(docs, "knowledge-graph")
        assert [e.id for e in graph.edges] == ["a-b-related", "a-b-related"]

    def test_two_roots_in_one_section(self):
        docs = [_doc("docs/index"), _doc("docs/getting-started"), _doc("docs/faq")]
        graph = build_graph_data(docs, "navigation-tree")
        assert sorted(_pairs(graph, SemanticEdgeType.HIERARCHY)) == [
            ("docs/getting-started", "docs/faq"),
            ("docs/getting-started", "docs/index"),
            ("docs/index", "docs/faq"),
            ("docs/index", "docs/getting-started"),
        ]

    def test_not_added_in_other_modes(self):
        docs = [_doc("guides/getting-started"), _doc("guides/install")]
        graph = build_graph_data(docs, "knowledge-graph")
        assert graph.edges == []


class TestPathEdges:
    """learning-path synthesis."""

    def test_chain_follows_input_order(self, plain_documents):
        graph = build_graph_data(plain_documents, "learning-path")
        slugs = [d.slug for d in plain_documents]
        assert len(graph.edges) == len(plain_documents) - 1
        assert _pairs(graph, SemanticEdgeType.NEXT) == list(zip(slugs, slugs[1:]))
        assert all(e.id == f"{e.source}-{e.target}-next" for e in graph.edges)

    def test_single_document_has_no_chain(self):
        assert build_graph_data([_doc("only")], "learning-path").edges == []

    def test_explicit_edge_is_not_duplicated(self, intro_documents):
        graph = build_graph_data(intro_documents, "learning-path")
        # getting-started -> basic-concepts already exists twice (example, prerequisite).
        assert len(graph.edges) == 2
        assert _pairs(graph, SemanticEdgeType.NEXT) == []

    def test_reverse_explicit_edge_does_not_block_chain(self):
        docs = [_doc("a"), _doc("b", ("related", "a"))]
        graph = build_graph_data(docs, "learning-path")
        assert _pairs(graph, SemanticEdgeType.NEXT) == [("a", "b")]


class TestViewModeAndDeterminism:
    """Fallbacks and repeatability."""

    def test_unknown_view_mode_falls_back_to_knowledge_graph(self, plain_documents):
        fallback = build_graph_data(plain_documents, "constellation")
        expected = build_graph_data(plain_documents, "knowledge-graph")
        assert fallback == expected

    def test_repeated_builds_are_identical(self, intro_documents):
        for mode in ViewMode:
            first = build_graph_data(intro_documents, mode)
            second = build_graph_data(intro_documents, mode)
            assert first.to_dict() == second.to_dict()

    def test_create_edge_for_hierarchy(self):
        edge = create_edge("a", "b", SemanticEdgeType.HIERARCHY)
        assert edge.to_dict() == {
            "id": "a-b-hierarchy",
            "source": "a",
            "target": "b",
            "semanticType": "hierarchy",
            "animated": False,
            "label": "hierarchy",
            "style": {"stroke": "#6b7280", "strokeWidth": 2},
        }
