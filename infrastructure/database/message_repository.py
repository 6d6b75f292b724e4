"""
Supabase implementation of Message repository.
"""

from typing import Optional, List

from core.domain.models import Message, MessageCreate
from core.interfaces.repositories import IMessageRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseMessageRepository(SupabaseRepository, IMessageRepository):
    """Supabase implementation of message repository"""

    table_name = "messages"

    def _to_model(self, data: dict) -> Message:
        return Message(
            id=data["id"],
            sender_id=data["sender_id"],
            receiver_id=data["receiver_id"],
            content=data["content"],
            read=data.get("read") or False,
            created_at=data.get("created_at"),
        )

    @run_sync
    def _create_sync(self, message_data: MessageCreate) -> dict:
        data = {
            "sender_id": message_data.sender_id,
            "receiver_id": message_data.receiver_id,
            "content": message_data.content,
            "read": False,
        }
        response = self._table().insert(data).execute()
        return response.data[0]

    async def create(self, message_data: MessageCreate) -> Message:
        data = await self._create_sync(message_data)
        return self._to_model(data)

    @run_sync
    def _get_by_id_sync(self, message_id: int) -> Optional[dict]:
        response = self._table().select("*").eq("id", message_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        data = await self._get_by_id_sync(message_id)
        return self._to_model(data) if data else None

    @run_sync
    def _get_for_user_sync(self, user_id: int) -> List[dict]:
        response = self._table().select("*")\
            .or_(f"sender_id.eq.{user_id},receiver_id.eq.{user_id}")\
            .order("created_at")\
            .order("id")\
            .execute()
        return response.data or []

    async def get_for_user(self, user_id: int) -> List[Message]:
        data = await self._get_for_user_sync(user_id)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_between_sync(self, user_a_id: int, user_b_id: int) -> List[dict]:
        response = self._table().select("*")\
            .or_(
                f"and(sender_id.eq.{user_a_id},receiver_id.eq.{user_b_id}),"
                f"and(sender_id.eq.{user_b_id},receiver_id.eq.{user_a_id})"
            )\
            .order("created_at")\
            .order("id")\
            .execute()
        return response.data or []

    async def get_between(self, user_a_id: int, user_b_id: int) -> List[Message]:
        data = await self._get_between_sync(user_a_id, user_b_id)
        return [self._to_model(d) for d in data]

    @run_sync
    def _mark_as_read_sync(self, message_id: int) -> None:
        self._table().update({"read": True}).eq("id", message_id).execute()

    async def mark_as_read(self, message_id: int) -> None:
        await self._mark_as_read_sync(message_id)

    @run_sync
    def _mark_all_read_sync(self, sender_id: int, receiver_id: int) -> int:
        response = self._table().update({"read": True})\
            .eq("sender_id", sender_id)\
            .eq("receiver_id", receiver_id)\
            .eq("read", False)\
            .execute()
        return len(response.data) if response.data else 0

    async def mark_all_read(self, sender_id: int, receiver_id: int) -> int:
        return await self._mark_all_read_sync(sender_id, receiver_id)
