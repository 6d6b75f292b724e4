import pytest

from core.domain.errors import NotFoundError, PermissionDenied, ValidationError


async def test_conversations_group_both_directions(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    carol = await make_user("carol")

    await container.message_service.send_message(bob.id, alice.id, "Hi Alice")
    await container.message_service.send_message(alice.id, bob.id, "Hi Bob")
    await container.message_service.send_message(bob.id, alice.id, "Trial on Friday?")
    await container.message_service.send_message(carol.id, alice.id, "Welcome!")

    conversations = await container.message_service.get_conversations(alice.id)

    assert [c.user.id for c in conversations] == [carol.id, bob.id]
    with_bob = conversations[1]
    assert len(with_bob.messages) == 3
    assert with_bob.last_message == "Trial on Friday?"
    assert with_bob.unread == 2
    assert conversations[0].unread == 1

    # from bob's side only alice's message is unread
    bob_view = await container.message_service.get_conversations(bob.id)
    assert bob_view[0].unread == 1


async def test_mark_read(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    first = await container.message_service.send_message(bob.id, alice.id, "one")
    await container.message_service.send_message(bob.id, alice.id, "two")

    with pytest.raises(PermissionDenied):
        await container.message_service.mark_as_read(first.id, bob.id)
    with pytest.raises(NotFoundError):
        await container.message_service.mark_as_read(999, alice.id)

    await container.message_service.mark_as_read(first.id, alice.id)
    conversations = await container.message_service.get_conversations(alice.id)
    assert conversations[0].unread == 1

    assert await container.message_service.mark_conversation_read(alice.id, bob.id) == 1
    conversations = await container.message_service.get_conversations(alice.id)
    assert conversations[0].unread == 0


async def test_conversation_thread_is_oldest_first(container, make_user):
    alice = await make_user("alice")
    bob = await make_user("bobby")
    carol = await make_user("carol")
    await container.message_service.send_message(alice.id, bob.id, "1")
    await container.message_service.send_message(bob.id, alice.id, "2")
    await container.message_service.send_message(carol.id, alice.id, "other")

    thread = await container.message_service.get_conversation(alice.id, bob.id)
    assert [m.content for m in thread] == ["1", "2"]
    assert len(await container.message_service.get_messages(alice.id)) == 3


async def test_send_validation(container, make_user):
    alice = await make_user("alice")
    with pytest.raises(ValidationError):
        await container.message_service.send_message(alice.id, alice.id, "me")
    with pytest.raises(ValidationError):
        await container.message_service.send_message(alice.id, 999, " ")
    with pytest.raises(NotFoundError):
        await container.message_service.send_message(alice.id, 999, "hello?")
