from datetime import datetime, timedelta, timezone

import pytest

from core.domain.errors import AuthenticationError, ConflictError, ValidationError
from core.domain.models import Session
from core.services.auth_service import hash_password, verify_password

PASSWORD = "secret123"


def test_password_hashing():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


async def test_register_login_resolve_logout(container, store):
    user = await container.auth_service.register("alice", PASSWORD, full_name="Alice")
    assert user.full_name == "Alice"
    assert store.password_hashes[user.id] != PASSWORD

    result = await container.auth_service.login("alice", PASSWORD)
    assert result.user.id == user.id
    assert await container.auth_service.resolve(result.token) == user.id

    await container.auth_service.logout(result.token)
    assert await container.auth_service.resolve(result.token) is None


async def test_register_rejects_duplicates_and_bad_input(container):
    await container.auth_service.register("alice", PASSWORD)
    with pytest.raises(ConflictError):
        await container.auth_service.register("alice", PASSWORD)
    with pytest.raises(ValidationError):
        await container.auth_service.register("al", PASSWORD)
    with pytest.raises(ValidationError):
        await container.auth_service.register("bobby", "123")
    with pytest.raises(ValidationError):
        await container.auth_service.register("bad name!", PASSWORD)


async def test_login_failures(container):
    await container.auth_service.register("alice", PASSWORD)
    with pytest.raises(AuthenticationError):
        await container.auth_service.login("alice", "wrong-password")
    with pytest.raises(AuthenticationError):
        await container.auth_service.login("nobody", PASSWORD)


async def test_expired_sessions(container, store):
    user = await container.auth_service.register("alice", PASSWORD)
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    await container.repos.sessions.create(Session(token="old", user_id=user.id, expires_at=past))
    await container.repos.sessions.create(Session(token="older", user_id=user.id, expires_at=past))

    assert await container.auth_service.resolve("old") is None
    assert "old" not in store.sessions

    assert await container.auth_service.purge_expired_sessions() == 1
    assert store.sessions == {}
    assert await container.auth_service.resolve(None) is None
