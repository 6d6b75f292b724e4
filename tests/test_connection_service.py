import pytest

from core.domain.errors import ConflictError, NotFoundError, PermissionDenied, ValidationError
from core.domain.models import ConnectionStatus


async def test_request_then_accept(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")

    connection = await container.connection_service.request_connection(alice.id, bob.id)
    assert connection.status == ConnectionStatus.PENDING
    assert connection.receiver_id == bob.id

    accepted = await container.connection_service.accept(connection.id, bob.id)
    assert accepted.status == ConnectionStatus.ACCEPTED

    for me, other in ((alice, bob), (bob, alice)):
        network = await container.connection_service.get_connections(me.id)
        assert len(network) == 1
        assert network[0].user.id == other.id
        assert network[0].id == connection.id


async def test_pending_is_only_on_receiver_side(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    connection = await container.connection_service.request_connection(alice.id, bob.id)

    bob_pending = await container.connection_service.get_pending_connections(bob.id)
    alice_pending = await container.connection_service.get_pending_connections(alice.id)
    alice_sent = await container.connection_service.get_sent_requests(alice.id)

    assert [c.id for c in bob_pending] == [connection.id]
    assert bob_pending[0].user.id == alice.id
    assert alice_pending == []
    assert [c.user.id for c in alice_sent] == [bob.id]
    assert await container.connection_service.get_connections(alice.id) == []


async def test_one_row_per_pair(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    await container.connection_service.request_connection(alice.id, bob.id)

    with pytest.raises(ConflictError):
        await container.connection_service.request_connection(alice.id, bob.id)
    with pytest.raises(ConflictError):
        await container.connection_service.request_connection(bob.id, alice.id)


async def test_request_validation(container, make_user):
    alice = await make_user("alice")
    with pytest.raises(ValidationError):
        await container.connection_service.request_connection(alice.id, alice.id)
    with pytest.raises(NotFoundError):
        await container.connection_service.request_connection(alice.id, 999)


async def test_only_receiver_can_answer(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    carol = await make_user("carol")
    connection = await container.connection_service.request_connection(alice.id, bob.id)

    with pytest.raises(PermissionDenied):
        await container.connection_service.accept(connection.id, alice.id)
    with pytest.raises(PermissionDenied):
        await container.connection_service.decline(connection.id, carol.id)
    with pytest.raises(NotFoundError):
        await container.connection_service.accept(999, bob.id)


async def test_terminal_states(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    connection = await container.connection_service.request_connection(alice.id, bob.id)

    declined = await container.connection_service.decline(connection.id, bob.id)
    assert declined.status == ConnectionStatus.DECLINED

    # same answer again is a no-op
    again = await container.connection_service.decline(connection.id, bob.id)
    assert again.status == ConnectionStatus.DECLINED

    with pytest.raises(ConflictError):
        await container.connection_service.accept(connection.id, bob.id)


async def test_suggestions_exclude_self_and_any_existing_row(container, make_user):
    users = [await make_user(name) for name in ("alice", "bobby", "carol", "dave", "erin", "frank")]
    alice, bob, carol, dave = users[:4]

    await container.connection_service.request_connection(alice.id, bob.id)
    accepted = await container.connection_service.request_connection(carol.id, alice.id)
    await container.connection_service.accept(accepted.id, alice.id)
    declined = await container.connection_service.request_connection(alice.id, dave.id)
    await container.connection_service.decline(declined.id, dave.id)

    suggestions = await container.connection_service.get_suggested_connections(alice.id)

    ids = [s.user.id for s in suggestions]
    assert alice.id not in ids
    assert not {bob.id, carol.id, dave.id} & set(ids)
    # newest accounts first
    assert ids == [users[5].id, users[4].id]


async def test_suggestions_respect_page_size(container, make_user):
    alice = await make_user("alice")
    for i in range(8):
        await make_user(f"player{i}")

    assert len(await container.connection_service.get_suggested_connections(alice.id)) == 5
    assert len(await container.connection_service.get_suggested_connections(alice.id, limit=2)) == 2


async def test_suggestions_swallow_storage_errors(container, make_user, monkeypatch):
    alice = await make_user("alice")

    async def broken(*args, **kwargs):
        raise RuntimeError("database is down")

    monkeypatch.setattr(container.repos.users, "list_excluding", broken)

    assert await container.connection_service.get_suggested_connections(alice.id) == []


async def test_connection_status_lookup(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    assert await container.connection_service.get_connection_status(alice.id, bob.id) is None

    connection = await container.connection_service.request_connection(alice.id, bob.id)

    found = await container.connection_service.get_connection_status(bob.id, alice.id)
    assert found.id == connection.id


async def test_suggestions_for_unknown_user_are_empty(container, make_user):
    await make_user("alice")
    assert await container.connection_service.get_suggested_connections(999) == []


async def test_suggestions_zero_limit_is_empty(container, make_user):
    alice = await make_user("alice")
    await make_user("bobby")
    assert await container.connection_service.get_suggested_connections(alice.id, limit=0) == []
