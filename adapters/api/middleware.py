"""
Middleware for the REST API.

- error_middleware: maps domain errors to JSON responses with their status
- auth_middleware: resolves the bearer token into request["user_id"] (None = anonymous)
"""

import logging

from aiohttp import web

from core.domain.errors import DomainError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def extract_bearer_token(request: web.Request) -> str | None:
    """Token from `Authorization: Bearer <token>`, or None"""
    header = request.headers.get("Authorization", "")
    if header[:len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except DomainError as e:
        if e.status >= 500:
            logger.error(f"{request.method} {request.path} failed: {e.message}")
        return web.json_response({"message": e.message}, status=e.status)
    except web.HTTPException as e:
        if e.status < 400:
            raise
        return web.json_response({"message": e.reason}, status=e.status)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return web.json_response({"message": "Internal server error"}, status=500)


def auth_middleware_factory(auth_service):
    """Builds a middleware that never rejects: routes decide whether a user is required"""

    @web.middleware
    async def auth_middleware(request: web.Request, handler):
        token = extract_bearer_token(request)
        request["token"] = token
        try:
            request["user_id"] = await auth_service.resolve(token)
        except Exception as e:
            # session store down: serve the request anonymously
            logger.error(f"[AUTH] Token lookup failed on {request.method} {request.path}: {e}")
            request["user_id"] = None
        return await handler(request)

    return auth_middleware
