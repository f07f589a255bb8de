"""Content sources for menu definitions.

A content source maps a namespace name ("menus", "shared") to the raw
definitions stored under it. Sources may be synchronous or return an
awaitable; the menu resolver handles both.
"""

import json
import logging
import tomllib
from collections.abc import Awaitable, Mapping
from pathlib import Path
from typing import Any, Protocol

from docnav.core.types import Namespace

logger = logging.getLogger(__name__)

MENUS_NAMESPACE = "menus"
SHARED_NAMESPACE = "shared"


class ContentError(ValueError):
    """Raised when a content file cannot be parsed."""


class ContentSource(Protocol):
    """Provider of raw definitions keyed by namespace."""

    def get_namespace(
        self, name: str
    ) -> Mapping[str, Any] | Awaitable[Mapping[str, Any]]: ...


class MappingContentSource:
    """In-memory content source backed by nested dictionaries."""

    def __init__(self, namespaces: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._namespaces = dict(namespaces or {})

    def get_namespace(self, name: str) -> Mapping[str, Any]:
        return self._namespaces.get(name, {})


class FileContentSource:
    """Content source reading one directory per namespace.

    Layout:
        content/
        ├── menus/
        │   ├── docs_sidebar.json    # [{"text": ..., "href": ...}, ...]
        │   └── api_sidebar.toml     # items = [{text = ..., href = ...}]
        └── shared/
            └── footer.json

    Each file contributes one entry keyed by its stem. Files are re-read on
    every call so edits show up without a restart.
    """

    _SUFFIXES = (".json", ".toml")

    def __init__(self, content_dir: Path) -> None:
        """Initialize source.

        Args:
            content_dir: Root directory holding namespace directories
        """
        self._content_dir = content_dir

    @property
    def content_dir(self) -> Path:
        """Root content directory."""
        return self._content_dir

    def get_namespace(self, name: str) -> Namespace:
        """Load all definitions in a namespace directory.

        Args:
            name: Namespace name (e.g., "menus")

        Returns:
            Mapping of file stem to parsed content, empty if the
            directory does not exist

        Raises:
            ContentError: If a file cannot be parsed
        """
        namespace_dir = self._content_dir / name
        if not namespace_dir.is_dir():
            logger.debug(f"Namespace directory not found: {namespace_dir}")
            return {}

        result: Namespace = {}
        for path in sorted(namespace_dir.iterdir()):
            if not path.is_file() or path.suffix not in self._SUFFIXES:
                continue
            if path.name.startswith((".", "_")):
                continue
            if path.stem in result:
                logger.warning(f"Duplicate definition '{path.stem}' in {name}, ignoring {path}")
                continue
            result[path.stem] = self._load_file(path)

        return result

    def _load_file(self, path: Path) -> Any:
        """Parse a single JSON or TOML file."""
        try:
            if path.suffix == ".toml":
                with path.open("rb") as f:
                    return tomllib.load(f)
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ContentError(f"Failed to load {path}: {e}") from e
