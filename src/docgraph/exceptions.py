"""Custom exceptions for docgraph."""


class DocGraphError(Exception):
    """Base exception for docgraph operations."""


class InvalidDocumentError(DocGraphError):
    """Raised when a document or connection fails validation."""


class DocumentLoadError(DocGraphError):
    """Raised when a content file cannot be read or parsed."""
