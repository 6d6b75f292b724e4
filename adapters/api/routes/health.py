from datetime import datetime, timezone

from aiohttp import web

routes = web.RouteTableDef()


@routes.get("/health")
async def health(request: web.Request) -> web.Response:
    return web.json_response({
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
    })
