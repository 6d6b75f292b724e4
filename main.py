"""
FootLink API - Main entry point.

Social network backend for football players, coaches and clubs.
Serves the REST API over aiohttp with memory or Supabase storage.
"""

import asyncio
import logging
import sys
from aiohttp import web
from adapters.api import create_app, build_container
from adapters.api.seed import seed_demo_data
from config.features import features
from config.settings import settings
from core.domain.models import FeedScope

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(settings.log_file, encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE or settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)

# Silence noisy HTTP client logs from the Supabase SDK
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('hpack').setLevel(logging.WARNING)

# Expired sessions are purged on this interval
SESSION_PURGE_INTERVAL = 60 * 60  # seconds


async def purge_sessions_periodically(auth_service):
    while True:
        try:
            await auth_service.purge_expired_sessions()
        except Exception as e:
            logger.error(f"Session purge failed: {e}")
        await asyncio.sleep(SESSION_PURGE_INTERVAL)


async def main():
    """Main function - builds the container and serves the API until cancelled."""

    logger.info("=== FootLink API Starting ===")
    logger.info(f"Environment: {settings.env}, storage: {settings.storage_backend}")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    try:
        container = build_container(settings)
    except RuntimeError as e:
        logger.error(f"Storage setup failed: {e}")
        sys.exit(1)

    if settings.seed_on_start:
        await seed_demo_data(container)

    try:
        feed_scope = FeedScope(features.FEED_DEFAULT_SCOPE.lower())
    except ValueError:
        logger.warning(f"Unknown FEED_DEFAULT_SCOPE '{features.FEED_DEFAULT_SCOPE}', using global")
        feed_scope = FeedScope.GLOBAL

    app = create_app(
        container,
        feed_scope=feed_scope,
        insights_enabled=features.SCOUTING_INSIGHTS_ENABLED,
    )
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"FootLink API running on http://{settings.host}:{settings.port}")

    purge_task = asyncio.create_task(purge_sessions_periodically(container.auth_service))
    try:
        await asyncio.Event().wait()
    finally:
        purge_task.cancel()
        await runner.cleanup()
        logger.info("Web server stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
