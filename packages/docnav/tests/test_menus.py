"""Tests for menu resolution."""

import logging
from collections.abc import Mapping
from typing import Any

import pytest
from docnav.core.content import MappingContentSource
from docnav.core.menus import (
    ArrayForm,
    ItemsWrapperForm,
    Malformed,
    MenuResolver,
    classify_menu,
)


class FailingSource:
    """Content source that always raises."""

    def get_namespace(self, name: str) -> Mapping[str, Any]:
        raise RuntimeError("content unavailable")


class FailingSharedSource:
    """Content source that serves menus but fails on shared."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def get_namespace(self, name: str) -> Mapping[str, Any]:
        self.calls.append(name)
        if name == "shared":
            raise OSError("shared content unreadable")
        return {}


class AsyncSource:
    """Content source returning awaitables."""

    def __init__(self, namespaces: dict[str, dict[str, Any]]) -> None:
        self._namespaces = namespaces
        self.calls: list[str] = []

    async def get_namespace(self, name: str) -> Mapping[str, Any]:
        self.calls.append(name)
        return self._namespaces.get(name, {})


class TestClassifyMenu:
    """Tests for classify_menu()."""

    def test__list__is_array_form(self) -> None:
        """Lists are used directly."""
        items = [{"href": "/a"}]

        assert classify_menu(items) == ArrayForm(items=items)

    def test__items_object__is_wrapper_form(self) -> None:
        """Objects with items are unwrapped."""
        assert classify_menu({"items": [{"href": "/x"}], "title": "T"}) == ItemsWrapperForm(
            items=[{"href": "/x"}]
        )

    def test__null_items__unwraps_to_empty(self) -> None:
        """Null items field yields empty list."""
        assert classify_menu({"items": None}) == ItemsWrapperForm(items=[])

    @pytest.mark.parametrize("items", ["abc", 0, True, {"href": "/x"}])
    def test__non_list_items__are_malformed(self, items: object) -> None:
        """Objects whose items field is not a list are malformed."""
        value = {"items": items}

        assert classify_menu(value) == Malformed(value=value)

    @pytest.mark.parametrize("value", [{"title": "No items"}, "menu", 42])
    def test__other_shapes__are_malformed(self, value: object) -> None:
        """Anything else is malformed."""
        assert classify_menu(value) == Malformed(value=value)


class TestMenuResolver:
    """Tests for MenuResolver.resolve()."""

    @pytest.mark.asyncio
    async def test__array_menu__returned_as_is(self) -> None:
        """Return list definitions directly."""
        items = [{"href": "/a"}, {"href": "/b"}]
        source = MappingContentSource({"menus": {"main": items}})

        result = await MenuResolver(source).resolve("main")

        assert result is items

    @pytest.mark.asyncio
    async def test__wrapped_menu__unwraps_items(self) -> None:
        """Return the items field of object definitions."""
        source = MappingContentSource({"menus": {"main": {"items": [{"href": "/x"}]}}})

        result = await MenuResolver(source).resolve("main")

        assert result == [{"href": "/x"}]

    @pytest.mark.asyncio
    async def test__malformed_menu__returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        """Return empty list without falling back or logging."""
        source = MappingContentSource(
            {
                "menus": {"main": {"title": "No items"}},
                "shared": {"main": [{"href": "/shared"}]},
            }
        )

        with caplog.at_level(logging.WARNING):
            result = await MenuResolver(source).resolve("main")

        assert result == []
        assert caplog.records == []

    @pytest.mark.asyncio
    async def test__empty_list_menu__does_not_fall_back(self) -> None:
        """An empty menu definition is still a definition."""
        source = MappingContentSource(
            {"menus": {"main": []}, "shared": {"main": [{"href": "/shared"}]}}
        )

        assert await MenuResolver(source).resolve("main") == []

    @pytest.mark.asyncio
    async def test__missing_menu__falls_back_to_shared(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Look up shared definitions and warn."""
        footer = [{"text": "Home", "href": "/"}]
        source = MappingContentSource({"menus": {}, "shared": {"footer": footer}})

        with caplog.at_level(logging.WARNING, logger="docnav.core.menus"):
            result = await MenuResolver(source).resolve("footer")

        assert result is footer
        assert "Menu with ID 'footer' not found" in caplog.text

    @pytest.mark.asyncio
    async def test__shared_fallback__does_not_unwrap_items(self) -> None:
        """Shared values are returned as stored."""
        shared_value = {"items": [{"href": "/x"}]}
        source = MappingContentSource({"shared": {"footer": shared_value}})

        result = await MenuResolver(source).resolve("footer")

        assert result is shared_value

    @pytest.mark.asyncio
    async def test__missing_everywhere__returns_empty_and_warns(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Return empty list for unknown menus."""
        source = MappingContentSource({"menus": {}, "shared": {}})

        with caplog.at_level(logging.WARNING, logger="docnav.core.menus"):
            result = await MenuResolver(source).resolve("missing_id")

        assert result == []
        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    @pytest.mark.asyncio
    async def test__source_error__returns_empty_and_logs(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Swallow content source failures."""
        with caplog.at_level(logging.ERROR, logger="docnav.core.menus"):
            result = await MenuResolver(FailingSource()).resolve("main")

        assert result == []
        assert "Error fetching menu 'main'" in caplog.text

    @pytest.mark.asyncio
    async def test__async_source__is_awaited(self) -> None:
        """Support content sources returning coroutines."""
        source = AsyncSource({"shared": {"footer": [{"href": "/"}]}})

        result = await MenuResolver(source).resolve("footer")

        assert result == [{"href": "/"}]
        assert source.calls == ["menus", "shared"]

    @pytest.mark.asyncio
    async def test__explicit_logger__receives_diagnostics(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Send diagnostics to the logger passed in."""
        custom = logging.getLogger("tests.menus")
        source = MappingContentSource()

        with caplog.at_level(logging.WARNING, logger="tests.menus"):
            await MenuResolver(source, logger=custom).resolve("missing")

        assert [r.name for r in caplog.records] == ["tests.menus"]

    @pytest.mark.asyncio
    async def test__fetches_fresh_on_every_call(self) -> None:
        """Do not cache resolved menus."""
        source = AsyncSource({"menus": {"main": [{"href": "/a"}]}})
        resolver = MenuResolver(source)

        await resolver.resolve("main")
        await resolver.resolve("main")

        assert source.calls == ["menus", "menus"]

    @pytest.mark.asyncio
    async def test__shared_lookup_error__returns_empty_and_logs(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Swallow failures during the shared fallback lookup."""
        source = FailingSharedSource()

        with caplog.at_level(logging.WARNING, logger="docnav.core.menus"):
            result = await MenuResolver(source).resolve("footer")

        assert result == []
        assert source.calls == ["menus", "shared"]
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Error fetching menu 'footer'" in errors[0].getMessage()

    @pytest.mark.asyncio
    async def test__wrapped_menu_with_scalar_items__returns_empty(self) -> None:
        """Treat a non-list items field as malformed."""
        source = MappingContentSource({"menus": {"main": {"items": "abc"}}})

        assert await MenuResolver(source).resolve("main") == []
