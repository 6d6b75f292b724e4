"""
User routes: current user, search, profile read/update, scouting insights.
"""

from aiohttp import web

from adapters.api.utils import (
    services, read_model, json_response, current_user_id, int_param, INSIGHTS_ENABLED,
)
from core.domain.errors import NotFoundError
from core.domain.models import UserUpdate, ScoutingData

routes = web.RouteTableDef()


# /me and /search are registered before /{user_id} so they win the match
@routes.get("/api/users/me")
async def get_me(request: web.Request) -> web.Response:
    user = await services(request).user_service.require_user(current_user_id(request))
    return json_response(user)


@routes.get("/api/users/search")
async def search_users(request: web.Request) -> web.Response:
    users = await services(request).user_service.search_users(request.query.get("q", ""))
    return json_response(users)


@routes.get("/api/users/{user_id}")
async def get_user(request: web.Request) -> web.Response:
    user_id = int_param(request, "user_id", "user")
    user = await services(request).user_service.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return json_response(user)


@routes.patch("/api/users/{user_id}")
async def update_user(request: web.Request) -> web.Response:
    user_id = int_param(request, "user_id", "user")
    actor_id = current_user_id(request)
    update = await read_model(request, UserUpdate)
    user = await services(request).user_service.update_profile(user_id, actor_id, update)
    return json_response(user)


@routes.get("/api/scouting-insights/{user_id}")
async def scouting_insights(request: web.Request) -> web.Response:
    user_id = int_param(request, "user_id", "user")
    if not request.app[INSIGHTS_ENABLED]:
        return json_response(ScoutingData())
    insights = await services(request).user_service.get_scouting_insights(user_id)
    return json_response(insights)
