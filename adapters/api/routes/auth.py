"""
Auth routes: register, login, logout.
"""

from aiohttp import web

from adapters.api.schemas import RegisterRequest, LoginRequest
from adapters.api.utils import services, read_model, json_response, current_user_id

routes = web.RouteTableDef()


@routes.post("/api/auth/register")
async def register(request: web.Request) -> web.Response:
    body = await read_model(request, RegisterRequest)
    user = await services(request).auth_service.register(
        body.username,
        body.password,
        full_name=body.full_name,
        position=body.position,
        club=body.club,
        location=body.location,
    )
    return json_response(user, status=201)


@routes.post("/api/auth/login")
async def login(request: web.Request) -> web.Response:
    body = await read_model(request, LoginRequest)
    result = await services(request).auth_service.login(body.username, body.password)
    return json_response(result)


@routes.post("/api/auth/logout")
async def logout(request: web.Request) -> web.Response:
    current_user_id(request)
    await services(request).auth_service.logout(request["token"])
    return json_response({"success": True})
