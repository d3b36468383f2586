"""Pytest configuration and fixtures for docgraph tests."""

import shutil

import pytest

from docgraph import Connection, ConnectionType, Document


@pytest.fixture
def content_dir(tmp_path):
    """Provide an empty content directory, removed after the test."""
    path = tmp_path / "content" / "docs"
    path.mkdir(parents=True, exist_ok=True)
    yield path
    if path.exists():
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def write_doc(content_dir):
    """Write a content file and return its path."""

    def _write(name: str, text: str):
        path = content_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def intro_documents():
    """Two documents linked both ways, as in the getting-started pair."""
    return [
        Document(
            slug="getting-started",
            title="Getting Started",
            connections=(Connection(ConnectionType.NEXT, "basic-concepts"),),
        ),
        Document(
            slug="basic-concepts",
            title="Basic Concepts",
            connections=(Connection(ConnectionType.PREREQUISITE, "getting-started"),),
        ),
    ]


@pytest.fixture
def plain_documents():
    """Five documents without connections."""
    return [Document(slug=f"doc-{i}", title=f"Doc {i}") for i in range(5)]
