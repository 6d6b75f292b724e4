"""
aiohttp application factory for the REST API.
"""

import logging

from aiohttp import web

from adapters.api.loader import Container
from adapters.api.middleware import error_middleware, auth_middleware_factory
from adapters.api.routes import routes
from adapters.api.utils import CONTAINER, FEED_SCOPE, INSIGHTS_ENABLED
from core.domain.models import FeedScope

logger = logging.getLogger(__name__)


def create_app(
    container: Container,
    feed_scope: FeedScope = FeedScope.GLOBAL,
    insights_enabled: bool = True,
) -> web.Application:
    """Create the app with error + auth middlewares and every route table"""
    app = web.Application(middlewares=[
        error_middleware,
        auth_middleware_factory(container.auth_service),
    ])
    app[CONTAINER] = container
    app[FEED_SCOPE] = feed_scope
    app[INSIGHTS_ENABLED] = insights_enabled

    for table in routes:
        app.add_routes(table)

    logger.info(f"[API] {len(app.router.routes())} routes registered, default feed scope: {feed_scope.value}")
    return app
