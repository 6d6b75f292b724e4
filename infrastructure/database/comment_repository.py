"""
Supabase implementation of Comment repository.
"""

from typing import List, Set

from core.domain.models import Comment, CommentCreate
from core.interfaces.repositories import ICommentRepository
from infrastructure.database.base import SupabaseRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseCommentRepository(SupabaseRepository, ICommentRepository):
    """Supabase implementation of comment repository"""

    table_name = "comments"

    def _to_model(self, data: dict) -> Comment:
        return Comment(
            id=data["id"],
            post_id=data["post_id"],
            author_id=data["author_id"],
            content=data["content"],
            created_at=data.get("created_at"),
        )

    @run_sync
    def _create_sync(self, comment_data: CommentCreate) -> dict:
        data = {
            "post_id": comment_data.post_id,
            "author_id": comment_data.author_id,
            "content": comment_data.content,
        }
        response = self._table().insert(data).execute()
        return response.data[0]

    async def create(self, comment_data: CommentCreate) -> Comment:
        data = await self._create_sync(comment_data)
        return self._to_model(data)

    @run_sync
    def _get_by_posts_sync(self, post_ids: List[int]) -> List[dict]:
        response = self._table().select("*")\
            .in_("post_id", post_ids)\
            .order("created_at")\
            .order("id")\
            .execute()
        return response.data or []

    async def get_by_post(self, post_id: int) -> List[Comment]:
        return await self.get_by_posts({post_id})

    async def get_by_posts(self, post_ids: Set[int]) -> List[Comment]:
        if not post_ids:
            return []
        data = await self._get_by_posts_sync(sorted(post_ids))
        return [self._to_model(d) for d in data]
