"""
Supabase implementation of Opportunity repository.
"""

from typing import Optional, List

from core.domain.models import Opportunity, OpportunityCreate
from core.interfaces.repositories import IOpportunityRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseOpportunityRepository(SupabaseRepository, IOpportunityRepository):
    """Supabase implementation of opportunity repository"""

    table_name = "opportunities"

    def _to_model(self, data: dict) -> Opportunity:
        return Opportunity(
            id=data["id"],
            title=data["title"],
            club=data["club"],
            location=data["location"],
            category=data["category"],
            position=data.get("position"),
            description=data.get("description"),
            salary=data.get("salary"),
            type=data.get("type"),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_all_sync(self, category: Optional[str]) -> List[dict]:
        query = self._table().select("*")
        if category:
            query = query.eq("category", category)
        response = query.order("created_at", desc=True).execute()
        return response.data or []

    async def get_all(self, category: Optional[str] = None) -> List[Opportunity]:
        data = await self._get_all_sync(category)
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, opportunity_id: int) -> Optional[dict]:
        response = self._table().select("*").eq("id", opportunity_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, opportunity_id: int) -> Optional[Opportunity]:
        data = await self._get_by_id_sync(opportunity_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, data: OpportunityCreate) -> dict:
        response = self._table().insert(data.model_dump()).execute()
        return response.data[0]

    async def create(self, data: OpportunityCreate) -> Opportunity:
        row = await self._create_sync(data)
        return self._to_model(row)
