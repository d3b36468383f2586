"""Tests for search_documents."""

import pytest

from docgraph import Document, search_documents


@pytest.fixture
def docs():
    return [
        Document(slug="getting-started", title="Getting Started", tags=("intro",)),
        Document(slug="basic-concepts", title="Basic Concepts", description="Core IDEAS"),
        Document(slug="api-reference", title="API Reference", tags=("Reference", "api")),
    ]


class TestSearchDocuments:
    def test_blank_query(self, docs):
        assert search_documents(docs, "") == []
        assert search_documents(docs, "   ") == []

    def test_title_case_insensitive(self, docs):
        assert [d.slug for d in search_documents(docs, "BASIC")] == ["basic-concepts"]

    def test_description(self, docs):
        assert [d.slug for d in search_documents(docs, "ideas")] == ["basic-concepts"]

    def test_tags(self, docs):
        assert [d.slug for d in search_documents(docs, "intro")] == ["getting-started"]

    def test_slug(self, docs):
        assert [d.slug for d in search_documents(docs, "api-ref")] == ["api-reference"]

    def test_keeps_input_order(self, docs):
        assert [d.slug for d in search_documents(docs, "e")] == [
            "getting-started",
            "basic-concepts",
            "api-reference",
        ]

    def test_limit(self, docs):
        assert len(search_documents(docs, "e", limit=2)) == 2

    def test_no_match(self, docs):
        assert search_documents(docs, "kubernetes") == []
