"""
Supabase implementation of Post repository.
"""

from typing import Optional, List, Set

from core.domain.models import Post, PostCreate, PostType
from core.interfaces.repositories import IPostRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabasePostRepository(SupabaseRepository, IPostRepository):
    """Supabase implementation of post repository"""

    table_name = "posts"

    def _to_model(self, data: dict) -> Post:
        """Convert database row to Post model"""
        return Post(
            id=data["id"],
            author_id=data["author_id"],
            content=data["content"],
            type=PostType(data.get("type") or "text"),
            media_url=data.get("media_url"),
            achievement_title=data.get("achievement_title"),
            achievement_subtitle=data.get("achievement_subtitle"),
            stats_data=data.get("stats_data"),
            original_post_id=data.get("original_post_id"),
            original_author_name=data.get("original_author_name"),
            original_author_avatar=data.get("original_author_avatar"),
            original_content=data.get("original_content"),
            views=data.get("views") or 0,
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_by_id_sync(self, post_id: int) -> Optional[dict]:
        response = self._table().select("*").eq("id", post_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        data = await self._get_by_id_sync(post_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, author_id: int, post_data: PostCreate) -> dict:
        data = {
            "author_id": author_id,
            "content": post_data.content,
            "type": post_data.type.value,
            "media_url": post_data.media_url,
            "achievement_title": post_data.achievement_title,
            "achievement_subtitle": post_data.achievement_subtitle,
            "stats_data": post_data.stats_data,
            "original_post_id": post_data.original_post_id,
            "original_author_name": post_data.original_author_name,
            "original_author_avatar": post_data.original_author_avatar,
            "original_content": post_data.original_content,
        }
        response = self._table().insert(data).execute()
        return response.data[0]

    async def create(self, author_id: int, post_data: PostCreate) -> Post:
        data = await self._create_sync(author_id, post_data)
        return self._to_model(data)

    @run_sync
    def _list_posts_sync(self, author_ids: Optional[List[int]], post_type: Optional[PostType]) -> List[dict]:
        query = self._table().select("*")
        if author_ids is not None:
            query = query.in_("author_id", author_ids)
        if post_type is not None:
            query = query.eq("type", post_type.value)
        response = query.order("created_at", desc=True).order("id", desc=True).execute()
        return response.data or []

    async def list_posts(
        self,
        author_ids: Optional[Set[int]] = None,
        post_type: Optional[PostType] = None,
    ) -> List[Post]:
        if author_ids is not None and not author_ids:
            return []
        ids = sorted(author_ids) if author_ids is not None else None
        data = await self._list_posts_sync(ids, post_type)
        return [self._to_model(d) for d in data]
