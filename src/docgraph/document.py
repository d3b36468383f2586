"""Document data model for documentation content."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidDocumentError

logger = logging.getLogger(__name__)


class ConnectionType(Enum):
    """Kinds of cross-reference a document can declare."""

    PREREQUISITE = "prerequisite"
    NEXT = "next"
    RELATED = "related"
    SEEALSO = "seealso"


@dataclass(frozen=True)
class Connection:
    """A typed, directed reference from one document to another.

    Attributes:
        type: Kind of reference.
        target: Slug of the referenced document. It need not exist in
            the document set being built.
    """

    type: ConnectionType
    target: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Connection:
        """Create a connection from a frontmatter entry.

        Raises:
            InvalidDocumentError: If the type is unknown or the target is missing.
        """
        if not isinstance(data, dict):
            raise InvalidDocumentError(f"connection must be a mapping, got {data!r}")

        raw_type = data.get("type")
        try:
            conn_type = ConnectionType(raw_type)
        except ValueError:
            raise InvalidDocumentError(f"unknown connection type: {raw_type!r}") from None

        target = data.get("target")
        if not target or not isinstance(target, str):
            raise InvalidDocumentError("connection target must be a non-empty string")

        return cls(type=conn_type, target=target)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "target": self.target}


@dataclass(frozen=True)
class Document:
    """One unit of documentation content.

    Attributes:
        slug: Unique, URL-safe identifier.
        title: Display title.
        connections: Outbound typed references, in declaration order.
        description: Optional short summary.
        tags: Optional categorization tags.
        file_path: Source file the document was loaded from, if any.
    """

    slug: str
    title: str
    connections: tuple[Connection, ...] = ()
    description: str | None = None
    tags: tuple[str, ...] = ()
    file_path: str | None = None

    def __post_init__(self):
        """Validate fields and freeze sequences."""
        if not isinstance(self.slug, str) or not self.slug.strip():
            raise InvalidDocumentError("slug cannot be empty")
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidDocumentError(f"title cannot be empty (slug={self.slug!r})")

        # Frozen dataclass: bypass __setattr__ to normalize sequences.
        object.__setattr__(self, "connections", tuple(self.connections or ()))
        object.__setattr__(self, "tags", tuple(self.tags or ()))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Create a document from a frontmatter-style mapping.

        Connection entries with an unrecognized type are skipped with a
        warning; any other malformed entry raises.

        Args:
            data: Mapping with ``slug``, ``title`` and optional
                ``connections``, ``description``, ``tags``, ``file_path``.

        Returns:
            Document instance
        """
        connections: list[Connection] = []
        for entry in data.get("connections") or []:
            if isinstance(entry, dict) and entry.get("type") not in _CONNECTION_VALUES:
                logger.warning(
                    "Skipping connection with unknown type %r in document %r",
                    entry.get("type"),
                    data.get("slug"),
                )
                continue
            connections.append(Connection.from_dict(entry))

        tags = data.get("tags") or ()
        if isinstance(tags, str):
            tags = (tags,)

        return cls(
            slug=data.get("slug", ""),
            title=data.get("title", ""),
            connections=tuple(connections),
            description=data.get("description"),
            tags=tuple(str(t) for t in tags),
            file_path=data.get("file_path"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert document to dictionary.

        Returns:
            Dictionary representation of the document
        """
        return {
            "slug": self.slug,
            "title": self.title,
            "connections": [c.to_dict() for c in self.connections],
            "description": self.description,
            "tags": list(self.tags),
            "file_path": self.file_path,
        }


_CONNECTION_VALUES = tuple(t.value for t in ConnectionType)


__all__ = ["ConnectionType", "Connection", "Document"]
