"""
Direct message routes.
"""

from aiohttp import web

from adapters.api.schemas import MessageRequest
from adapters.api.utils import services, read_model, json_response, current_user_id, int_param

routes = web.RouteTableDef()


@routes.get("/api/messages")
async def get_messages(request: web.Request) -> web.Response:
    messages = await services(request).message_service.get_messages(current_user_id(request))
    return json_response(messages)


@routes.get("/api/messages/conversations")
async def get_conversations(request: web.Request) -> web.Response:
    conversations = await services(request).message_service.get_conversations(current_user_id(request))
    return json_response(conversations)


@routes.get("/api/messages/with/{user_id}")
async def get_conversation(request: web.Request) -> web.Response:
    other_id = int_param(request, "user_id", "user")
    user_id = current_user_id(request)
    # opening a thread reads everything the other user sent
    await services(request).message_service.mark_conversation_read(user_id, other_id)
    messages = await services(request).message_service.get_conversation(user_id, other_id)
    return json_response(messages)


@routes.post("/api/messages")
async def send_message(request: web.Request) -> web.Response:
    sender_id = current_user_id(request)
    body = await read_model(request, MessageRequest)
    message = await services(request).message_service.send_message(sender_id, body.receiver_id, body.content)
    return json_response(message, status=201)


@routes.post("/api/messages/{message_id}/read")
async def mark_read(request: web.Request) -> web.Response:
    message_id = int_param(request, "message_id", "message")
    await services(request).message_service.mark_as_read(message_id, current_user_id(request))
    return json_response({"success": True})
