"""
Post routes: feed, create, likes, shares, comments.
"""

from aiohttp import web

from adapters.api.schemas import CommentRequest, ShareRequest
from adapters.api.utils import (
    services, read_model, json_response, current_user_id, int_param, FEED_SCOPE,
)
from core.domain.errors import ValidationError
from core.domain.models import FeedScope, PostCreate

routes = web.RouteTableDef()


def _feed_scope(request: web.Request) -> FeedScope:
    raw = request.query.get("scope")
    if not raw:
        return request.app[FEED_SCOPE]
    try:
        return FeedScope(raw.lower())
    except ValueError:
        raise ValidationError(f"Unknown feed scope '{raw}'")


@routes.get("/api/posts")
async def get_feed(request: web.Request) -> web.Response:
    scope = _feed_scope(request)
    viewer_id = request["user_id"]
    if scope == FeedScope.CONNECTIONS:
        viewer_id = current_user_id(request)
    posts = await services(request).post_service.get_feed(
        viewer_id=viewer_id,
        filter_label=request.query.get("filter"),
        scope=scope,
    )
    return json_response(posts)


@routes.post("/api/posts")
async def create_post(request: web.Request) -> web.Response:
    author_id = current_user_id(request)
    post_data = await read_model(request, PostCreate)
    post = await services(request).post_service.create_post(author_id, post_data)
    return json_response(post, status=201)


@routes.get("/api/posts/user/{user_id}")
async def get_user_posts(request: web.Request) -> web.Response:
    author_id = int_param(request, "user_id", "user")
    posts = await services(request).post_service.get_posts_by_user(author_id, request["user_id"])
    return json_response(posts)


@routes.get("/api/posts/{post_id}")
async def get_post(request: web.Request) -> web.Response:
    post_id = int_param(request, "post_id", "post")
    post = await services(request).post_service.get_post(post_id, request["user_id"])
    return json_response(post)


@routes.post("/api/posts/{post_id}/like")
async def toggle_like(request: web.Request) -> web.Response:
    post_id = int_param(request, "post_id", "post")
    result = await services(request).post_service.toggle_like(post_id, current_user_id(request))
    return json_response(result)


@routes.post("/api/posts/{post_id}/share")
async def share_post(request: web.Request) -> web.Response:
    post_id = int_param(request, "post_id", "post")
    user_id = current_user_id(request)
    body = await read_model(request, ShareRequest)
    post = await services(request).post_service.share_post(post_id, user_id, body.content)
    return json_response(post, status=201)


@routes.get("/api/posts/{post_id}/comments")
async def get_comments(request: web.Request) -> web.Response:
    post_id = int_param(request, "post_id", "post")
    comments = await services(request).comment_service.get_comments(post_id)
    return json_response(comments)


@routes.post("/api/posts/{post_id}/comments")
async def add_comment(request: web.Request) -> web.Response:
    post_id = int_param(request, "post_id", "post")
    author_id = current_user_id(request)
    body = await read_model(request, CommentRequest)
    comment = await services(request).comment_service.add_comment(post_id, author_id, body.content)
    return json_response(comment, status=201)
