"""Slug and table-of-contents helpers for page content."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w-]")
_DASH_RUN_RE = re.compile(r"--+")


def slugify(text: str) -> str:
    """Generate a URL-friendly slug.

    Args:
        text: Text to slugify (e.g., "Getting Started & Setup")

    Returns:
        Slug (e.g., "getting-started-and-setup")
    """
    slug = str(text).lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = slug.replace("&", "-and-")
    slug = _NON_WORD_RE.sub("", slug)
    slug = _DASH_RUN_RE.sub("-", slug)
    return slug.strip("-")


@dataclass(frozen=True)
class TocItem:
    """Table of contents entry."""

    id: str
    label: str
    type: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"id": self.id, "label": self.label, "type": self.type}


def generate_toc(widgets: Any = None) -> list[TocItem]:
    """Generate a table of contents from page widgets.

    Only widgets with a title or name are listed. The entry id is the
    widget's own id when set, otherwise a slug of the label, otherwise
    "section-<index>".

    Args:
        widgets: Widget mappings in page order

    Returns:
        List of TocItem in page order
    """
    if not isinstance(widgets, list):
        return []

    toc: list[TocItem] = []
    for index, widget in enumerate(widgets):
        if not isinstance(widget, Mapping):
            continue
        label = widget.get("title") or widget.get("name")
        if not label:
            continue
        entry_id = widget.get("id") or slugify(label) or f"section-{index}"
        toc.append(
            TocItem(
                id=entry_id,
                label=label,
                type=widget.get("component") or "section",
            )
        )

    return toc
