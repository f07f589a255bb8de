"""Core type definitions."""

from typing import Any, NewType, TypedDict

# URL path for routing (e.g., "/docs", "/docs/intro")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)


class MenuItem(TypedDict, total=False):
    """Menu node as loaded from content.

    Any other keys are passed through untouched.
    """

    text: str
    label: str
    href: str
    icon: str
    items: list["MenuItem"]


MenuTree = list[MenuItem]

# Raw namespace contents as returned by a content source
Namespace = dict[str, Any]
