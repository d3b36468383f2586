"""Substring search over document metadata.

Public API:
    search_documents(documents, query, limit) -> list[Document]
"""

from __future__ import annotations

from collections.abc import Iterable

from .document import Document


def _matches(doc: Document, needle: str) -> bool:
    if needle in doc.title.lower() or needle in doc.slug.lower():
        return True
    if doc.description and needle in doc.description.lower():
        return True
    return any(needle in tag.lower() for tag in doc.tags)


def search_documents(
    documents: Iterable[Document],
    query: str,
    limit: int | None = None,
) -> list[Document]:
    """Return documents whose title, description, tags or slug contain *query*.

    Matching is case-insensitive. A blank query matches nothing. Results
    keep input order.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    results: list[Document] = []
    for doc in documents:
        if _matches(doc, needle):
            results.append(doc)
            if limit is not None and len(results) >= limit:
                break
    return results


__all__ = ["search_documents"]
