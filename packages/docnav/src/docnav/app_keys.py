"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docnav.core.menus import MenuResolver
from docnav.core.snippets import SnippetLoader

resolver_key = web.AppKey("resolver", MenuResolver)
snippets_key = web.AppKey("snippets", SnippetLoader)
