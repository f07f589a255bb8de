"""aiohttp server for Docnav.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from docnav.api.health import create_health_routes
from docnav.api.menus import create_menus_routes
from docnav.api.navigation import create_navigation_routes
from docnav.api.snippets import create_snippets_routes
from docnav.api.toc import create_toc_routes
from docnav.app_keys import resolver_key, snippets_key
from docnav.config import Config
from docnav.core.content import ContentSource, FileContentSource
from docnav.core.menus import MenuResolver
from docnav.core.snippets import SnippetLoader

logger = logging.getLogger(__name__)


def create_app(config: Config, *, source: ContentSource | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        source: Content source to resolve menus from
            (default: files under config.content.content_dir)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    if source is None:
        source = FileContentSource(config.content.content_dir)

    app[resolver_key] = MenuResolver(source)
    app[snippets_key] = SnippetLoader(config.content.snippets_dir)

    app.router.add_routes(create_health_routes())
    app.router.add_routes(create_menus_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_snippets_routes())
    app.router.add_routes(create_toc_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving menus from {config.content.content_dir}")
    web.run_app(app, host=config.server.host, port=config.server.port)
