"""Document templates: discovery, loading and customization.

Templates are ``<id>.mdx`` files in a templates directory. Only ids listed
in ``TEMPLATE_CONFIGS`` are offered; files with other names are ignored.

Public API:
    TemplateLibrary: Lists and loads templates from a directory.
    TemplateMetadata, Template, TemplateCustomization: Data containers.
    customize_template(template, customization) -> str
    generate_slug(title) -> str
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import DocumentLoadError
from .loader import parse_frontmatter, render_frontmatter

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".mdx"

# Listing order for TemplateLibrary.all_templates().
TEMPLATE_ORDER = ("guide", "tutorial", "api-reference", "changelog", "faq")

TEMPLATE_CONFIGS: dict[str, dict[str, Any]] = {
    "guide": {
        "title": "Guide Template",
        "description": "Step-by-step instructional content for procedural documentation",
        "slug": "guide-template",
        "tags": ("guide", "documentation"),
    },
    "tutorial": {
        "title": "Tutorial Template",
        "description": "Hands-on learning experience with practical examples and exercises",
        "slug": "tutorial-template",
        "tags": ("tutorial", "hands-on"),
    },
    "api-reference": {
        "title": "API Reference Template",
        "description": "Technical API documentation with methods, parameters, and examples",
        "slug": "api-reference-template",
        "tags": ("api", "reference", "documentation"),
    },
    "changelog": {
        "title": "Changelog Template",
        "description": "Version release notes following Keep a Changelog format",
        "slug": "changelog-template",
        "tags": ("changelog", "releases", "updates"),
    },
    "faq": {
        "title": "FAQ Template",
        "description": "Common questions and answers for user support",
        "slug": "faq-template",
        "tags": ("faq", "help", "support"),
    },
}

_H1_RE = re.compile(r"^#\s+.+$", re.MULTILINE)


@dataclass(frozen=True)
class TemplateMetadata:
    id: str
    title: str
    description: str
    slug: str
    file_path: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Template:
    """A template's metadata, raw file text and parsed frontmatter."""

    metadata: TemplateMetadata
    content: str
    frontmatter: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TemplateCustomization:
    """Values a user supplies when creating a document from a template.

    Attributes:
        title: New document title; also replaces the first H1.
        description: New description.
        slug: New slug (see ``generate_slug``).
        tags: New tags; None keeps the template's own.
    """

    title: str
    description: str
    slug: str
    tags: tuple[str, ...] | None = None


def _metadata(template_id: str, path: Path) -> TemplateMetadata:
    config = TEMPLATE_CONFIGS[template_id]
    return TemplateMetadata(
        id=template_id,
        title=config["title"],
        description=config["description"],
        slug=config["slug"],
        tags=tuple(config["tags"]),
        file_path=str(path),
    )


def _order_key(template_id: str) -> int:
    return TEMPLATE_ORDER.index(template_id) if template_id in TEMPLATE_ORDER else -1


class TemplateLibrary:
    """Templates stored under *templates_dir*.

    Args:
        templates_dir: Directory holding ``<id>.mdx`` template files.
        encoding: Text encoding of the files.

    Raises:
        DocumentLoadError: If *templates_dir* is not a directory.
    """

    def __init__(self, templates_dir: Path | str, encoding: str = "utf-8") -> None:
        self.templates_dir = Path(templates_dir)
        if not self.templates_dir.is_dir():
            raise DocumentLoadError(f"templates directory not found: {self.templates_dir}")
        self.encoding = encoding

    def all_templates(self) -> list[TemplateMetadata]:
        """Metadata for every configured template present on disk, in listing order."""
        found = [
            _metadata(path.stem, path)
            for path in self.templates_dir.glob(f"*{TEMPLATE_SUFFIX}")
            if path.is_file() and path.stem in TEMPLATE_CONFIGS
        ]
        return sorted(found, key=lambda meta: _order_key(meta.id))

    def load(self, template_id: str) -> Template | None:
        """Load one template by id.

        Returns:
            Template, or None when the id is unknown, the file is missing,
            or the file cannot be read.
        """
        if template_id not in TEMPLATE_CONFIGS:
            return None
        path = self.templates_dir / f"{template_id}{TEMPLATE_SUFFIX}"
        if not path.is_file():
            return None

        try:
            raw = path.read_text(encoding=self.encoding)
            data, _ = parse_frontmatter(raw)
        except (OSError, UnicodeDecodeError, DocumentLoadError) as e:
            logger.error("Error loading template %s: %s", template_id, e)
            return None

        return Template(metadata=_metadata(template_id, path), content=raw, frontmatter=data)


def customize_template(template: Template, customization: TemplateCustomization) -> str:
    """Apply *customization* to *template* and return the new file text.

    Frontmatter keys the customization does not cover are kept. The first
    H1 heading of the body, if any, becomes the new title.
    """
    data, body = parse_frontmatter(template.content)

    tags = customization.tags
    if tags is None:
        tags = data.get("tags") or []

    updated = {
        **data,
        "title": customization.title,
        "description": customization.description,
        "slug": customization.slug,
        "tags": list(tags),
    }

    body = _H1_RE.sub(lambda _: f"# {customization.title}", body, count=1)
    return render_frontmatter(updated, body)


def generate_slug(title: str) -> str:
    """Lowercase, strip punctuation, and hyphenate whitespace runs."""
    slug = title.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


__all__ = [
    "TemplateLibrary",
    "TemplateMetadata",
    "Template",
    "TemplateCustomization",
    "customize_template",
    "generate_slug",
    "TEMPLATE_CONFIGS",
    "TEMPLATE_ORDER",
]
