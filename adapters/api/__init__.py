"""
REST API adapter (aiohttp).

Serves the web client: auth, profiles, feed, connections, listings and messages
under /api, plus /health.
"""

from adapters.api.app import create_app
from adapters.api.loader import Container, build_container, build_services, memory_repositories

__all__ = ["create_app", "Container", "build_container", "build_services", "memory_repositories"]
