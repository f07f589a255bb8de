"""Menu tree traversal.

Derives reading order, previous/next links and breadcrumb trails from a
resolved menu tree. All functions are pure: they never mutate the tree and
return references to its nodes rather than copies.

Traversals use explicit stacks so deeply nested menus are not limited by
the interpreter recursion limit.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypedDict

from docnav.core.paths import normalize_path
from docnav.core.types import MenuItem, MenuTree

# Marks an exhausted sibling iterator
_DONE: Any = object()


class PaginationDict(TypedDict):
    """Dictionary representation of pagination links."""

    prev: dict[str, Any] | None
    next: dict[str, Any] | None


@dataclass(frozen=True)
class Pagination:
    """Previous and next links around the current page."""

    prev: MenuItem | None = None
    next: MenuItem | None = None

    def to_dict(self) -> PaginationDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "prev": menu_item_summary(self.prev) if self.prev is not None else None,
            "next": menu_item_summary(self.next) if self.next is not None else None,
        }


def menu_item_summary(item: MenuItem) -> dict[str, Any]:
    """Copy a menu item without its children for JSON serialization."""
    return {key: value for key, value in item.items() if key != "items"}


def flatten_menu(tree: MenuTree | None) -> list[MenuItem]:
    """Flatten a menu tree into reading order.

    Walks the tree in pre-order: a node with an href is emitted before its
    children are visited. Structural nodes without an href contribute only
    their descendants.

    Args:
        tree: Root menu items

    Returns:
        Linkable menu items in document order
    """
    if not isinstance(tree, list):
        return []

    flat: list[MenuItem] = []
    stack = [iter(tree)]
    while stack:
        item = next(stack[-1], _DONE)
        if item is _DONE:
            stack.pop()
            continue
        if not isinstance(item, Mapping):
            continue
        if _href(item):
            flat.append(item)
        children = item.get("items")
        if isinstance(children, list) and children:
            stack.append(iter(children))

    return flat


def get_pagination(tree: MenuTree | None, current_path: str | None) -> Pagination:
    """Calculate previous and next links for a page.

    When several items share an href the first one in reading order wins.

    Args:
        tree: Root menu items
        current_path: Current page path, with or without trailing slash

    Returns:
        Pagination with neighbours of the matched item, both None if the
        page is not in the menu
    """
    target = normalize_path(current_path)
    flat = flatten_menu(tree)

    current_index = next(
        (i for i, item in enumerate(flat) if normalize_path(_href(item)) == target),
        None,
    )
    if current_index is None:
        return Pagination()

    return Pagination(
        prev=flat[current_index - 1] if current_index > 0 else None,
        next=flat[current_index + 1] if current_index < len(flat) - 1 else None,
    )


def get_breadcrumbs(tree: MenuTree | None, current_path: str | None) -> MenuTree:
    """Build the breadcrumb trail for a page.

    Searches depth-first, left to right, and stops at the first item whose
    href matches. The trail includes every ancestor, linkable or not.

    Args:
        tree: Root menu items
        current_path: Current page path, with or without trailing slash

    Returns:
        Menu items from the root ancestor to the matched item inclusive,
        empty if nothing matches
    """
    if not isinstance(tree, list):
        return []

    target = normalize_path(current_path)
    # Each frame pairs a sibling iterator with the ancestors of those siblings
    stack: list[tuple[Iterator[MenuItem], MenuTree]] = [(iter(tree), [])]
    while stack:
        siblings, ancestors = stack[-1]
        item = next(siblings, _DONE)
        if item is _DONE:
            stack.pop()
            continue
        if not isinstance(item, Mapping):
            continue
        href = _href(item)
        if href and normalize_path(href) == target:
            return [*ancestors, item]
        children = item.get("items")
        if isinstance(children, list) and children:
            stack.append((iter(children), [*ancestors, item]))

    return []


def _href(item: Mapping[str, Any]) -> str | None:
    """Return the item's href if it is a non-empty string."""
    href = item.get("href")
    if isinstance(href, str) and href:
        return href
    return None
