"""
Supabase implementation of Session repository.
"""

from datetime import datetime
from typing import Optional

from core.domain.models import Session
from core.interfaces.repositories import ISessionRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseSessionRepository(SupabaseRepository, ISessionRepository):
    """Supabase implementation of session repository"""

    table_name = "sessions"

    def _to_model(self, data: dict) -> Session:
        return Session(
            token=data["token"],
            user_id=data["user_id"],
            created_at=data.get("created_at"),
            expires_at=data["expires_at"],
        )

    @run_sync
    def _create_sync(self, session: Session) -> dict:
        data = {
            "token": session.token,
            "user_id": session.user_id,
            "expires_at": session.expires_at.isoformat(),
        }
        response = self._table().insert(data).execute()
        return response.data[0]

    async def create(self, session: Session) -> Session:
        data = await self._create_sync(session)
        return self._to_model(data)

    @run_sync
    def _get_sync(self, token: str) -> Optional[dict]:
        response = self._table().select("*").eq("token", token).execute()
        return response.data[0] if response.data else None

    async def get(self, token: str) -> Optional[Session]:
        data = await self._get_sync(token)
        return self._to_model(data) if data else None

    @run_sync
    def _delete_sync(self, token: str) -> None:
        self._table().delete().eq("token", token).execute()

    async def delete(self, token: str) -> None:
        await self._delete_sync(token)

    @run_sync
    def _delete_expired_sync(self, now: datetime) -> int:
        response = self._table().delete().lte("expires_at", now.isoformat()).execute()
        return len(response.data) if response.data else 0

    async def delete_expired(self, now: datetime) -> int:
        return await self._delete_expired_sync(now)
