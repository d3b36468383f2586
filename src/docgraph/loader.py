"""Load documents from a directory of Markdown/MDX files.

Each file starts with an optional YAML frontmatter block::

    ---
    title: Basic Concepts
    slug: basic-concepts
    connections:
      - type: prerequisite
        target: getting-started
    ---

Public API:
    parse_frontmatter(text) -> (dict, body)
    parse_document(text, path) -> Document
    render_frontmatter(data, body) -> str
    DocumentLoader: Reads, queries and cross-references content files.
    LoadedDocument: A document plus its body text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .document import ConnectionType, Document
from .exceptions import DocumentLoadError, InvalidDocumentError

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("*.mdx", "*.md")

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed document together with its content body."""

    document: Document
    frontmatter: dict[str, Any]
    content: str


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split *text* into its frontmatter mapping and body.

    Raises:
        DocumentLoadError: If the frontmatter is not valid YAML or not a mapping.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1) or "")
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"invalid frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DocumentLoadError("frontmatter must be a mapping")

    return data, text[match.end():]


def render_frontmatter(data: dict[str, Any], body: str) -> str:
    """Serialise *data* as a frontmatter block followed by *body*."""
    block = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    if body and not body.endswith("\n"):
        body += "\n"
    return f"---\n{block}---\n{body}"


def parse_document(text: str, path: Path | str | None = None) -> Document:
    """Build a Document from file *text*; slug defaults to the file stem."""
    data, _ = parse_frontmatter(text)
    return _document_from_frontmatter(data, path)


def _document_from_frontmatter(data: dict[str, Any], path: Path | str | None) -> Document:
    fields = dict(data)
    if path is not None:
        if not fields.get("slug"):
            fields["slug"] = Path(path).stem
        fields["file_path"] = str(path)
    if not fields.get("title") and fields.get("slug"):
        logger.debug("Document %r has no title, using its slug", fields["slug"])
        fields["title"] = str(fields["slug"])
    try:
        return Document.from_dict(fields)
    except InvalidDocumentError as e:
        raise DocumentLoadError(f"{path or '<text>'}: {e}") from e


class DocumentLoader:
    """Reads documentation files under *content_dir*.

    Args:
        content_dir: Directory holding the content files.
        patterns: Glob patterns selecting content files (non-recursive).
        encoding: Text encoding of the files.

    Raises:
        DocumentLoadError: If *content_dir* is not a directory.
    """

    def __init__(
        self,
        content_dir: Path | str,
        patterns: tuple[str, ...] = DEFAULT_PATTERNS,
        encoding: str = "utf-8",
    ) -> None:
        self.content_dir = Path(content_dir)
        if not self.content_dir.is_dir():
            raise DocumentLoadError(f"content directory not found: {self.content_dir}")
        self.patterns = tuple(patterns)
        self.encoding = encoding

    def paths(self) -> list[Path]:
        """Content files in path order."""
        found: set[Path] = set()
        for pattern in self.patterns:
            found.update(p for p in self.content_dir.glob(pattern) if p.is_file())
        return sorted(found)

    def load_all(self) -> list[Document]:
        """Load every content file, skipping (and logging) ones that fail."""
        documents: list[Document] = []
        for path in self.paths():
            try:
                documents.append(parse_document(self._read(path), path))
            except DocumentLoadError as e:
                logger.error("Error loading document metadata from %s: %s", path, e)
        logger.debug("Loaded %d documents from %s", len(documents), self.content_dir)
        return documents

    def load(self, slug: str) -> LoadedDocument | None:
        """Load the document whose slug is *slug*, with its body.

        Returns:
            LoadedDocument, or None when no file has that slug.

        Raises:
            DocumentLoadError: If the matching file lacks a title or slug.
        """
        for path in self.paths():
            try:
                data, body = parse_frontmatter(self._read(path))
            except DocumentLoadError as e:
                logger.debug("Skipping unreadable file %s: %s", path, e)
                continue

            if (data.get("slug") or path.stem) != slug:
                continue

            if not data.get("title") or not data.get("slug"):
                raise DocumentLoadError(
                    f"Document {slug} is missing required frontmatter fields"
                )
            return LoadedDocument(
                document=_document_from_frontmatter(data, path),
                frontmatter=data,
                content=body,
            )
        return None

    def exists(self, slug: str) -> bool:
        """True when *slug* names a loadable document."""
        try:
            return self.load(slug) is not None
        except DocumentLoadError as e:
            logger.debug("Document %s is not loadable: %s", slug, e)
            return False

    def documents_by_tag(self, tag: str) -> list[Document]:
        """Documents carrying exactly *tag*."""
        return [doc for doc in self.load_all() if tag in doc.tags]

    def connected_documents(self, slug: str) -> dict[ConnectionType, list[Document]]:
        """Targets of *slug*'s connections, grouped by connection type.

        Targets that are not in the content directory are left out. An
        unknown or unloadable *slug* yields an empty mapping.
        """
        try:
            loaded = self.load(slug)
        except DocumentLoadError as e:
            logger.error("Error loading document %s: %s", slug, e)
            return {}
        if loaded is None or not loaded.document.connections:
            return {}

        by_slug = {doc.slug: doc for doc in self.load_all()}
        grouped: dict[ConnectionType, list[Document]] = {}
        for conn in loaded.document.connections:
            target = by_slug.get(conn.target)
            if target is None:
                continue
            grouped.setdefault(conn.type, []).append(target)
        return grouped

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f"cannot read {path}: {e}") from e


__all__ = [
    "DocumentLoader",
    "LoadedDocument",
    "parse_document",
    "parse_frontmatter",
    "render_frontmatter",
    "DEFAULT_PATTERNS",
]
