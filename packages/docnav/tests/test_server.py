"""Tests for server module."""

from docnav.app_keys import resolver_key, snippets_key
from docnav.config import Config
from docnav.core.content import FileContentSource
from docnav.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with valid configuration."""
        app = create_app(test_config)

        assert resolver_key in app
        assert snippets_key in app
        source = app[resolver_key].source
        assert isinstance(source, FileContentSource)
        assert source.content_dir == test_config.content.content_dir
        assert app[snippets_key].snippets_dir == test_config.content.snippets_dir
