"""
Comment service - comments live under a post and are always shown with it.
"""

import logging
from typing import List

from core.domain.models import CommentCreate, FeedComment, UserSummary
from core.domain.constants import MAX_COMMENT_LENGTH
from core.domain.errors import NotFoundError, ValidationError
from core.interfaces.repositories import ICommentRepository, IPostRepository, IUserRepository

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment operations"""

    def __init__(
        self,
        comment_repo: ICommentRepository,
        post_repo: IPostRepository,
        user_repo: IUserRepository,
    ):
        self.comment_repo = comment_repo
        self.post_repo = post_repo
        self.user_repo = user_repo

    async def add_comment(self, post_id: int, author_id: int, content: str) -> FeedComment:
        content = (content or "").strip()
        if not content:
            raise ValidationError("Comment cannot be empty")
        if len(content) > MAX_COMMENT_LENGTH:
            raise ValidationError(f"Comment must be at most {MAX_COMMENT_LENGTH} characters")
        if not await self.post_repo.get_by_id(post_id):
            raise NotFoundError("Post not found")
        author = await self.user_repo.get_by_id(author_id)
        if not author:
            raise NotFoundError("User not found")

        comment = await self.comment_repo.create(CommentCreate(
            post_id=post_id,
            author_id=author_id,
            content=content,
        ))
        logger.info(f"[COMMENTS] User {author_id} commented on post {post_id}")
        return FeedComment(**comment.model_dump(), author=UserSummary.from_user(author))

    async def get_comments(self, post_id: int) -> List[FeedComment]:
        """Comments of a post with their authors, oldest first"""
        if not await self.post_repo.get_by_id(post_id):
            raise NotFoundError("Post not found")
        comments = await self.comment_repo.get_by_post(post_id)
        users = {u.id: u for u in await self.user_repo.get_by_ids({c.author_id for c in comments})}
        return [
            FeedComment(**c.model_dump(), author=UserSummary.for_author(c.author_id, users.get(c.author_id)))
            for c in comments
        ]
