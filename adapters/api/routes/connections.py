"""
Connection routes: lists, suggestions, request / accept / decline.
"""

from aiohttp import web

from adapters.api.schemas import ConnectRequest
from adapters.api.utils import services, read_model, json_response, current_user_id, int_param

routes = web.RouteTableDef()


@routes.get("/api/connections")
async def get_connections(request: web.Request) -> web.Response:
    connections = await services(request).connection_service.get_connections(current_user_id(request))
    return json_response(connections)


@routes.get("/api/connections/pending")
async def get_pending(request: web.Request) -> web.Response:
    pending = await services(request).connection_service.get_pending_connections(current_user_id(request))
    return json_response(pending)


@routes.get("/api/connections/sent")
async def get_sent(request: web.Request) -> web.Response:
    sent = await services(request).connection_service.get_sent_requests(current_user_id(request))
    return json_response(sent)


@routes.get("/api/connections/suggested")
async def get_suggested(request: web.Request) -> web.Response:
    suggestions = await services(request).connection_service.get_suggested_connections(
        current_user_id(request)
    )
    return json_response(suggestions)


@routes.get("/api/connections/suggested/{user_id}")
async def get_suggested_for_user(request: web.Request) -> web.Response:
    user_id = int_param(request, "user_id", "user")
    suggestions = await services(request).connection_service.get_suggested_connections(user_id)
    return json_response(suggestions)


@routes.post("/api/connections/connect")
async def connect(request: web.Request) -> web.Response:
    requester_id = current_user_id(request)
    body = await read_model(request, ConnectRequest)
    connection = await services(request).connection_service.request_connection(requester_id, body.user_id)
    return json_response(connection, status=201)


@routes.post("/api/connections/{connection_id}/accept")
async def accept(request: web.Request) -> web.Response:
    connection_id = int_param(request, "connection_id", "connection")
    connection = await services(request).connection_service.accept(connection_id, current_user_id(request))
    return json_response(connection)


@routes.post("/api/connections/{connection_id}/decline")
async def decline(request: web.Request) -> web.Response:
    connection_id = int_param(request, "connection_id", "connection")
    connection = await services(request).connection_service.decline(connection_id, current_user_id(request))
    return json_response(connection)
