"""Menu lookup with fallback.

Resolves a menu identifier to a list of menu items. Menus are looked up in
the "menus" namespace first and then in "shared". Lookup never raises:
missing, malformed and unreadable menus all resolve to an empty list so
pages always have something to render.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from docnav.core.content import MENUS_NAMESPACE, SHARED_NAMESPACE, ContentSource
from docnav.core.types import MenuTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArrayForm:
    """Menu defined directly as a list of items."""

    items: MenuTree


@dataclass(frozen=True)
class ItemsWrapperForm:
    """Menu defined as an object with an ``items`` field."""

    items: MenuTree


@dataclass(frozen=True)
class Malformed:
    """Menu definition with an unrecognized shape."""

    value: object


MenuDefinition = ArrayForm | ItemsWrapperForm | Malformed


def classify_menu(value: object) -> MenuDefinition:
    """Determine the shape of a raw menu definition.

    Args:
        value: Raw definition from the content source

    Returns:
        Tagged menu definition
    """
    if isinstance(value, list):
        return ArrayForm(items=cast(MenuTree, value))
    if isinstance(value, Mapping) and "items" in value:
        items = value["items"]
        if items is None:
            return ItemsWrapperForm(items=[])
        if isinstance(items, list):
            return ItemsWrapperForm(items=cast(MenuTree, items))
    return Malformed(value=value)


class MenuResolver:
    """Resolves menu identifiers against a content source."""

    def __init__(
        self,
        source: ContentSource,
        *,
        logger: logging.Logger = logger,
    ) -> None:
        """Initialize resolver.

        Args:
            source: Content source providing the "menus" and "shared" namespaces
            logger: Logger receiving fallback warnings and source errors
        """
        self._source = source
        self._logger = logger

    @property
    def source(self) -> ContentSource:
        """Underlying content source."""
        return self._source

    async def resolve(self, menu_id: str) -> MenuTree:
        """Fetch a menu by ID.

        Args:
            menu_id: Menu identifier (e.g., "docs_sidebar")

        Returns:
            Menu items, empty if the menu is missing, malformed or the
            content source failed
        """
        try:
            menus = await self._get_namespace(MENUS_NAMESPACE)
            menu = menus.get(menu_id)

            if not _is_defined(menu):
                self._logger.warning(
                    f"Menu with ID '{menu_id}' not found in '{MENUS_NAMESPACE}'. "
                    f"Checking '{SHARED_NAMESPACE}'..."
                )
                shared = await self._get_namespace(SHARED_NAMESPACE)
                fallback = shared.get(menu_id)
                if _is_defined(fallback):
                    # Shared entries are used as-is, without unwrapping "items"
                    return cast(MenuTree, fallback)
                return []

            match classify_menu(menu):
                case ArrayForm(items=items) | ItemsWrapperForm(items=items):
                    return items
                case Malformed():
                    return []
        except Exception as e:
            self._logger.error(f"Error fetching menu '{menu_id}': {e}", exc_info=True)
            return []

    async def _get_namespace(self, name: str) -> Mapping[str, Any]:
        result = self._source.get_namespace(name)
        if inspect.isawaitable(result):
            return await result
        return result


def _is_defined(value: object) -> bool:
    """Check whether a looked-up definition counts as present.

    Empty lists and objects are present; None and empty scalars are not.
    """
    if isinstance(value, (list, Mapping)):
        return True
    return bool(value)
