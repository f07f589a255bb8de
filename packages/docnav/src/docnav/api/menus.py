"""Menus API endpoint.

Returns resolved menu trees by ID.
"""

from aiohttp import web

from docnav.app_keys import resolver_key


def create_menus_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/menus/{menu_id}", get_menu),
    ]


async def get_menu(request: web.Request) -> web.Response:
    menu_id = request.match_info["menu_id"]
    resolver = request.app[resolver_key]

    items = await resolver.resolve(menu_id)
    return web.json_response({"id": menu_id, "items": items})
