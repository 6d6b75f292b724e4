import random

import pytest

from adapters.api.app import create_app
from adapters.api.loader import build_services, memory_repositories
from core.domain.models import FeedScope
from infrastructure.memory import MemoryStore

PASSWORD = "secret123"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def container(store):
    return build_services(memory_repositories(store), rng=random.Random(0))


@pytest.fixture
def make_user(container):
    """Register a user through the auth service and return it"""

    async def _make_user(username: str, **profile):
        return await container.auth_service.register(username, PASSWORD, **profile)

    return _make_user


@pytest.fixture
async def client(aiohttp_client, container):
    app = create_app(container, feed_scope=FeedScope.GLOBAL)
    return await aiohttp_client(app)


@pytest.fixture
def login(client):
    """Register + log in over HTTP, returning (user_id, auth headers)"""

    async def _login(username: str, full_name: str = None):
        resp = await client.post("/api/auth/register", json={
            "username": username,
            "password": PASSWORD,
            "confirm_password": PASSWORD,
            "full_name": full_name,
        })
        assert resp.status == 201, await resp.text()
        user = await resp.json()

        resp = await client.post("/api/auth/login", json={"username": username, "password": PASSWORD})
        assert resp.status == 200
        body = await resp.json()
        return user["id"], {"Authorization": f"Bearer {body['token']}"}

    return _login
