"""Snippets API endpoint."""

from aiohttp import web

from docnav.app_keys import snippets_key


def create_snippets_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/snippets/{path:.*}", get_snippet),
    ]


async def get_snippet(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    region = request.query.get("region") or None
    loader = request.app[snippets_key]

    content = loader.load(path, region)
    return web.json_response({"path": path, "region": region, "content": content})
