"""
Helpers shared by the route modules: body parsing, path params, JSON output.
"""

import json
from typing import Any, Type, TypeVar

import pydantic
from aiohttp import web
from pydantic import BaseModel

from adapters.api.loader import Container
from core.domain.errors import AuthenticationError, ValidationError
from core.domain.models import FeedScope

ModelT = TypeVar("ModelT", bound=BaseModel)

CONTAINER = web.AppKey("container", Container)
FEED_SCOPE = web.AppKey("feed_scope", FeedScope)
INSIGHTS_ENABLED = web.AppKey("insights_enabled", bool)


def services(request: web.Request) -> Container:
    return request.app[CONTAINER]


def current_user_id(request: web.Request) -> int:
    """Id of the authenticated caller; anonymous callers get a 401"""
    user_id = request.get("user_id")
    if user_id is None:
        raise AuthenticationError("Authentication required")
    return user_id


def int_param(request: web.Request, name: str, label: str) -> int:
    """Integer path parameter; anything else is a 400 'Invalid <label> ID'"""
    raw = request.match_info.get(name, "")
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {label} ID")


def _format_validation_error(error: pydantic.ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ()) if p != "__root__")
        message = item.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Validation error: " + "; ".join(parts)


async def read_model(request: web.Request, model: Type[ModelT], **extra: Any) -> ModelT:
    """Parse the JSON body into a pydantic model, turning failures into 400s"""
    try:
        body = await request.json() if request.can_read_body else {}
    except json.JSONDecodeError:
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate({**body, **extra})
    except pydantic.ValidationError as e:
        raise ValidationError(_format_validation_error(e))


def dump(data: Any) -> Any:
    """JSON-ready form of a model, a list of models, or plain data"""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [dump(item) for item in data]
    if isinstance(data, dict):
        return {key: dump(value) for key, value in data.items()}
    return data


def json_response(data: Any, status: int = 200) -> web.Response:
    return web.json_response(dump(data), status=status)
