"""Health check endpoint."""

from aiohttp import web


def create_health_routes() -> list[web.RouteDef]:
    return [web.get("/api/health", get_health)]


async def get_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})
