"""
Supabase implementation of Event repository.
"""

from typing import Optional, List

from core.domain.models import Event, EventCreate
from core.interfaces.repositories import IEventRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseEventRepository(SupabaseRepository, IEventRepository):
    """Supabase implementation of event repository"""

    table_name = "events"

    def _to_model(self, data: dict) -> Event:
        """Convert database row to Event model"""
        return Event(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            date=data["date"],
            location=data["location"],
            type=data["type"],
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_all_sync(self, event_type: Optional[str]) -> List[dict]:
        query = self._table().select("*")
        if event_type:
            query = query.eq("type", event_type)
        response = query.order("date").execute()
        return response.data or []

    async def get_all(self, event_type: Optional[str] = None) -> List[Event]:
        data = await self._get_all_sync(event_type)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, event_id: int) -> Optional[dict]:
        response = self._table().select("*").eq("id", event_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        data = await self._get_by_id_sync(event_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, event_data: EventCreate) -> dict:
        data = {
            "title": event_data.title,
            "description": event_data.description,
            "date": event_data.date.isoformat(),
            "location": event_data.location,
            "type": event_data.type,
        }
        response = self._table().insert(data).execute()
        return response.data[0]

    async def create(self, data: EventCreate) -> Event:
        row = await self._create_sync(data)
        return self._to_model(row)
