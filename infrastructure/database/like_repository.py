"""
Supabase implementation of Like repository.
The likes table carries a unique (post_id, user_id) constraint; counts are read,
never stored on the post row.
"""

from typing import List, Set

from core.interfaces.repositories import ILikeRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseLikeRepository(SupabaseRepository, ILikeRepository):
    """Supabase implementation of like repository"""

    table_name = "likes"

    @run_sync
    def _exists_sync(self, post_id: int, user_id: int) -> bool:
        response = self._table().select("id")\
            .eq("post_id", post_id)\
            .eq("user_id", user_id)\
            .execute()
        return len(response.data) > 0 if response.data else False

    async def exists(self, post_id: int, user_id: int) -> bool:
        return await self._exists_sync(post_id, user_id)

    @run_sync
    def _add_sync(self, post_id: int, user_id: int) -> bool:
        # Duplicate rows are dropped by the unique constraint instead of raising
        response = self._table()\
            .upsert(
                {"post_id": post_id, "user_id": user_id},
                on_conflict="post_id,user_id",
                ignore_duplicates=True,
            )\
            .execute()
        return bool(response.data)

    async def add(self, post_id: int, user_id: int) -> bool:
        return await self._add_sync(post_id, user_id)

    @run_sync
    def _remove_sync(self, post_id: int, user_id: int) -> bool:
        response = self._table().delete()\
            .eq("post_id", post_id)\
            .eq("user_id", user_id)\
            .execute()
        return bool(response.data)

    async def remove(self, post_id: int, user_id: int) -> bool:
        return await self._remove_sync(post_id, user_id)

    @run_sync
    def _count_sync(self, post_id: int) -> int:
        response = self._table().select("id", count="exact")\
            .eq("post_id", post_id)\
            .execute()
        return response.count or 0

    async def count(self, post_id: int) -> int:
        return await self._count_sync(post_id)

    @run_sync
    def _liked_post_ids_sync(self, user_id: int, post_ids: List[int]) -> List[dict]:
        response = self._table().select("post_id")\
            .eq("user_id", user_id)\
            .in_("post_id", post_ids)\
            .execute()
        return response.data or []

    async def liked_post_ids(self, user_id: int, post_ids: Set[int]) -> Set[int]:
        if not post_ids:
            return set()
        data = await self._liked_post_ids_sync(user_id, sorted(post_ids))
        return {row["post_id"] for row in data}
