"""Table of contents API endpoint.

Builds TOC entries from a page's widget list.
"""

import json

from aiohttp import web

from docnav.core.text import generate_toc, slugify


def create_toc_routes() -> list[web.RouteDef]:
    return [
        web.post("/api/toc", post_toc),
        web.get("/api/slug", get_slug),
    ]


async def post_toc(request: web.Request) -> web.Response:
    try:
        data = await request.json()
    except json.JSONDecodeError:
        return web.json_response({"error": "Invalid JSON body"}, status=400)

    widgets = data.get("widgets") if isinstance(data, dict) else data
    entries = generate_toc(widgets)
    return web.json_response({"toc": [entry.to_dict() for entry in entries]})


async def get_slug(request: web.Request) -> web.Response:
    text = request.query.get("text")
    if text is None:
        return web.json_response({"error": "Missing text parameter"}, status=400)
    return web.json_response({"text": text, "slug": slugify(text)})
