"""Navigation API endpoint.

Provides pagination and breadcrumbs for a page within a menu.
"""

from aiohttp import web

from docnav.app_keys import resolver_key
from docnav.core.navigation import get_breadcrumbs, get_pagination, menu_item_summary


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation/{menu_id}", get_navigation),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    menu_id = request.match_info["menu_id"]
    path = request.query.get("path")
    if path is None:
        return web.json_response({"error": "Missing path parameter"}, status=400)

    resolver = request.app[resolver_key]
    tree = await resolver.resolve(menu_id)

    pagination = get_pagination(tree, path)
    breadcrumbs = [menu_item_summary(item) for item in get_breadcrumbs(tree, path)]

    return web.json_response(
        {
            "menu": menu_id,
            "path": path,
            "pagination": pagination.to_dict(),
            "breadcrumbs": breadcrumbs,
        }
    )
