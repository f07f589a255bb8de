"""Code snippet loading.

Reads snippet files from a fixed directory and optionally extracts a
region delimited by marker comments:

    // @snippet:start setup
    client = Client()
    // @snippet:end setup
"""

import logging
import posixpath
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_PARENT_PREFIX_RE = re.compile(r"^(\.\.(/|\\|$))+")


class SnippetLoader:
    """Loads code snippets from a snippets directory."""

    def __init__(self, snippets_dir: Path) -> None:
        """Initialize loader.

        Args:
            snippets_dir: Directory containing snippet files
        """
        self._snippets_dir = snippets_dir

    @property
    def snippets_dir(self) -> Path:
        """Snippets directory."""
        return self._snippets_dir

    def load(self, file_path: str, region: str | None = None) -> str:
        """Load a snippet, optionally limited to a named region.

        Missing files produce an error comment instead of raising so the
        snippet still renders inside a code block.

        Args:
            file_path: Path relative to the snippets directory
            region: Region name marked with @snippet:start/@snippet:end

        Returns:
            Snippet text
        """
        safe_path = sanitize_snippet_path(file_path)
        full_path = self._snippets_dir / safe_path

        if not self._is_inside_snippets_dir(full_path):
            logger.warning(f"Snippet path escapes snippets directory: {file_path}")
            return f"// Error: Snippet not found at {safe_path}"

        try:
            content = full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning(f"Snippet not found: {full_path}")
            return f"// Error: Snippet not found at {safe_path}"

        if region:
            extracted = extract_region(content, region)
            if extracted is not None:
                return extracted
            logger.debug(f"Region '{region}' not found in {safe_path}, returning whole file")

        return content

    def _is_inside_snippets_dir(self, path: Path) -> bool:
        return path.resolve().is_relative_to(self._snippets_dir.resolve())


def sanitize_snippet_path(file_path: str) -> str:
    """Normalize a snippet path and strip leading parent references.

    Args:
        file_path: Requested path (e.g., "../../etc/passwd")

    Returns:
        Normalized relative path (e.g., "etc/passwd")
    """
    normalized = posixpath.normpath(file_path.replace("\\", "/"))
    return _PARENT_PREFIX_RE.sub("", normalized).lstrip("/")


def extract_region(content: str, region: str) -> str | None:
    """Extract the lines between region markers.

    Args:
        content: Full snippet file content
        region: Region name

    Returns:
        Stripped text between the first start and end markers, None if
        either marker is missing
    """
    start_marker = f"// @snippet:start {region}"
    end_marker = f"// @snippet:end {region}"

    lines = content.split("\n")
    start = next((i for i, line in enumerate(lines) if start_marker in line), None)
    end = next((i for i, line in enumerate(lines) if end_marker in line), None)
    if start is None or end is None:
        return None

    return "\n".join(lines[start + 1 : end]).strip()
