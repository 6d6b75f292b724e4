"""
Message service - direct messages and the conversation views derived from them.
"""

import logging
from typing import Dict, List

from core.domain.models import Message, MessageCreate, Conversation, UserSummary
from core.domain.constants import MAX_MESSAGE_LENGTH
from core.domain.errors import NotFoundError, PermissionDenied, ValidationError
from core.interfaces.repositories import IMessageRepository, IUserRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Service for messaging"""

    def __init__(self, message_repo: IMessageRepository, user_repo: IUserRepository):
        self.message_repo = message_repo
        self.user_repo = user_repo

    async def send_message(self, sender_id: int, receiver_id: int, content: str) -> Message:
        content = (content or "").strip()
        if not content:
            raise ValidationError("Message cannot be empty")
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")
        if sender_id == receiver_id:
            raise ValidationError("You cannot message yourself")
        if not await self.user_repo.get_by_id(receiver_id):
            raise NotFoundError("Recipient not found")

        message = await self.message_repo.create(MessageCreate(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
        ))
        logger.info(f"[MESSAGES] {sender_id} -> {receiver_id} (message {message.id})")
        return message

    async def get_messages(self, user_id: int) -> List[Message]:
        """Everything the user sent or received, oldest first"""
        return await self.message_repo.get_for_user(user_id)

    async def get_conversation(self, user_id: int, other_id: int) -> List[Message]:
        """Messages between two users in either direction, oldest first"""
        return await self.message_repo.get_between(user_id, other_id)

    async def get_conversations(self, user_id: int) -> List[Conversation]:
        """
        One entry per other party: last message, unread count (messages
        received and not read) and the full thread. Most recent first.
        """
        messages = await self.message_repo.get_for_user(user_id)
        threads: Dict[int, List[Message]] = {}
        for message in messages:
            other_id = message.receiver_id if message.sender_id == user_id else message.sender_id
            threads.setdefault(other_id, []).append(message)

        users = {u.id: u for u in await self.user_repo.get_by_ids(set(threads))}
        conversations = []
        for other_id, thread in threads.items():
            other = users.get(other_id)
            if not other:
                continue
            last = thread[-1]
            conversations.append(Conversation(
                user=UserSummary.from_user(other),
                last_message=last.content,
                last_message_at=last.created_at,
                unread=sum(1 for m in thread if m.receiver_id == user_id and not m.read),
                messages=thread,
            ))

        # serial ids follow insertion order
        conversations.sort(key=lambda c: c.messages[-1].id, reverse=True)
        return conversations

    async def mark_as_read(self, message_id: int, actor_id: int) -> None:
        """Only the receiver can mark a message as read"""
        message = await self.message_repo.get_by_id(message_id)
        if not message:
            raise NotFoundError("Message not found")
        if message.receiver_id != actor_id:
            raise PermissionDenied("Only the recipient can mark a message as read")
        await self.message_repo.mark_as_read(message_id)

    async def mark_conversation_read(self, user_id: int, other_id: int) -> int:
        """Mark everything other_id sent to user_id as read"""
        return await self.message_repo.mark_all_read(sender_id=other_id, receiver_id=user_id)
