"""
Supabase implementation of Connection repository.
"""

from typing import Optional, List

from postgrest.exceptions import APIError

from core.domain.errors import ConflictError
from core.domain.models import Connection, ConnectionStatus
from core.interfaces.repositories import IConnectionRepository
from infrastructure.database.base import SupabaseRepository, is_unique_violation
from infrastructure.database.supabase_client import run_sync


class SupabaseConnectionRepository(SupabaseRepository, IConnectionRepository):
    """Supabase implementation of connection repository"""

    table_name = "connections"

    def _to_model(self, data: dict) -> Connection:
        """Convert database row to Connection model"""
        return Connection(
            id=data["id"],
            requester_id=data["requester_id"],
            receiver_id=data["receiver_id"],
            status=ConnectionStatus(data.get("status", "pending")),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_by_id_sync(self, connection_id: int) -> Optional[dict]:
        response = self._table().select("*").eq("id", connection_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, connection_id: int) -> Optional[Connection]:
        data = await self._get_by_id_sync(connection_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, requester_id: int, receiver_id: int) -> dict:
        data = {
            "requester_id": requester_id,
            "receiver_id": receiver_id,
            "status": ConnectionStatus.PENDING.value,
        }
        try:
            response = self._table().insert(data).execute()
        except APIError as e:
            # connections_pair_key is unique on (least(ids), greatest(ids))
            if is_unique_violation(e):
                raise ConflictError("Connection already exists") from e
            raise
        return response.data[0]

    async def create(self, requester_id: int, receiver_id: int) -> Connection:
        data = await self._create_sync(requester_id, receiver_id)
        return self._to_model(data)

    @run_sync
    def _get_between_sync(self, user_a_id: int, user_b_id: int) -> Optional[dict]:
        # Check both directions (A-B and B-A)
        response = self._table().select("*")\
            .or_(
                f"and(requester_id.eq.{user_a_id},receiver_id.eq.{user_b_id}),"
                f"and(requester_id.eq.{user_b_id},receiver_id.eq.{user_a_id})"
            )\
            .order("id")\
            .execute()
        return response.data[0] if response.data else None

    async def get_between(self, user_a_id: int, user_b_id: int) -> Optional[Connection]:
        data = await self._get_between_sync(user_a_id, user_b_id)
        return self._to_model(data) if data else None

    @run_sync
    def _get_user_connections_sync(self, user_id: int, status: Optional[ConnectionStatus]) -> List[dict]:
        query = self._table().select("*")\
            .or_(f"requester_id.eq.{user_id},receiver_id.eq.{user_id}")
        if status:
            query = query.eq("status", status.value)
        response = query.order("created_at").order("id").execute()
        return response.data or []

    async def get_user_connections(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
    ) -> List[Connection]:
        data = await self._get_user_connections_sync(user_id, status)
        return [self._to_model(d) for d in data]

    @run_sync
    def _update_status_sync(self, connection_id: int, status: ConnectionStatus) -> Optional[dict]:
        response = self._table()\
            .update({"status": status.value})\
            .eq("id", connection_id)\
            .execute()
        return response.data[0] if response.data else None

    async def update_status(self, connection_id: int, status: ConnectionStatus) -> Optional[Connection]:
        data = await self._update_status_sync(connection_id, status)
        return self._to_model(data) if data else None
