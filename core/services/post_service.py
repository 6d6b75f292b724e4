"""
Post service - feed assembly, likes and shares.
"""

import logging
from typing import Optional, List, Set

from core.domain.models import (
    Post, PostCreate, PostType, FeedPost, FeedComment, Comment,
    User, UserSummary, LikeResult, ConnectionStatus, FeedScope,
)
from core.domain.constants import MAX_POST_LENGTH, resolve_feed_filter
from core.domain.errors import NotFoundError, ValidationError
from core.interfaces.repositories import (
    IPostRepository,
    ICommentRepository,
    ILikeRepository,
    IUserRepository,
    IConnectionRepository,
)

logger = logging.getLogger(__name__)


class PostService:
    """Service for posts and the feed"""

    def __init__(
        self,
        post_repo: IPostRepository,
        comment_repo: ICommentRepository,
        like_repo: ILikeRepository,
        user_repo: IUserRepository,
        connection_repo: IConnectionRepository,
    ):
        self.post_repo = post_repo
        self.comment_repo = comment_repo
        self.like_repo = like_repo
        self.user_repo = user_repo
        self.connection_repo = connection_repo

    # === FEED ===

    async def get_feed(
        self,
        viewer_id: Optional[int] = None,
        filter_label: Optional[str] = None,
        scope: FeedScope = FeedScope.GLOBAL,
    ) -> List[FeedPost]:
        """
        Posts visible to the viewer, newest first.

        GLOBAL: every post. CONNECTIONS: posts by the viewer and by users with an
        accepted connection to the viewer; no peers means an empty feed.
        filter_label is a UI category ("highlights", "matches", ...) or a raw post type.
        """
        try:
            post_type = resolve_feed_filter(filter_label)
        except ValueError:
            raise ValidationError(f"Unknown feed filter '{filter_label}'")

        author_ids: Optional[Set[int]] = None
        if scope == FeedScope.CONNECTIONS:
            if viewer_id is None:
                return []
            peers = await self.get_peer_ids(viewer_id)
            if not peers:
                return []
            author_ids = peers | {viewer_id}

        posts = await self.post_repo.list_posts(author_ids=author_ids, post_type=post_type)
        logger.debug(f"[POSTS] Feed for viewer={viewer_id} scope={scope.value} filter={filter_label}: {len(posts)} posts")
        return await self._hydrate(posts, viewer_id)

    async def get_peer_ids(self, user_id: int) -> Set[int]:
        """Ids of users with an accepted connection to user_id"""
        rows = await self.connection_repo.get_user_connections(user_id, ConnectionStatus.ACCEPTED)
        return {row.other_party(user_id) for row in rows}

    async def get_posts_by_user(self, author_id: int, viewer_id: Optional[int] = None) -> List[FeedPost]:
        posts = await self.post_repo.list_posts(author_ids={author_id})
        return await self._hydrate(posts, viewer_id)

    async def get_post(self, post_id: int, viewer_id: Optional[int] = None) -> FeedPost:
        post = await self.post_repo.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        hydrated = await self._hydrate([post], viewer_id)
        return hydrated[0]

    async def _hydrate(self, posts: List[Post], viewer_id: Optional[int]) -> List[FeedPost]:
        """Attach author, comments (with their authors), like count and has_liked"""
        if not posts:
            return []
        post_ids = {p.id for p in posts}
        comments = await self.comment_repo.get_by_posts(post_ids)

        user_ids = {p.author_id for p in posts} | {c.author_id for c in comments}
        users = {u.id: u for u in await self.user_repo.get_by_ids(user_ids)}

        comments_by_post: dict = {}
        for comment in comments:
            comments_by_post.setdefault(comment.post_id, []).append(
                self._to_feed_comment(comment, users.get(comment.author_id))
            )

        liked: Set[int] = set()
        if viewer_id is not None:
            liked = await self.like_repo.liked_post_ids(viewer_id, post_ids)

        result = []
        for post in posts:
            author = users.get(post.author_id)
            result.append(FeedPost(
                **post.model_dump(),
                author=UserSummary.for_author(post.author_id, author),
                comments=comments_by_post.get(post.id, []),
                likes=await self.like_repo.count(post.id),
                has_liked=post.id in liked,
            ))
        return result

    @staticmethod
    def _to_feed_comment(comment: Comment, author: Optional[User]) -> FeedComment:
        return FeedComment(
            **comment.model_dump(),
            author=UserSummary.for_author(comment.author_id, author),
        )

    # === WRITES ===

    async def create_post(self, author_id: int, post_data: PostCreate) -> FeedPost:
        """Create a post. Shared posts go through share_post."""
        if post_data.type == PostType.SHARED:
            raise ValidationError("Use the share endpoint to share a post")
        if not post_data.content.strip():
            raise ValidationError("Post content cannot be empty")
        if len(post_data.content) > MAX_POST_LENGTH:
            raise ValidationError(f"Post must be at most {MAX_POST_LENGTH} characters")
        if post_data.type == PostType.ACHIEVEMENT and not post_data.achievement_title:
            raise ValidationError("Achievement posts need an achievement_title")

        # Snapshot fields only make sense on shared posts
        clean = post_data.model_copy(update={
            "original_post_id": None,
            "original_author_name": None,
            "original_author_avatar": None,
            "original_content": None,
        })
        post = await self.post_repo.create(author_id, clean)
        logger.info(f"[POSTS] User {author_id} created {post.type.value} post {post.id}")
        return await self.get_post(post.id, author_id)

    async def share_post(self, post_id: int, user_id: int, content: Optional[str] = None) -> FeedPost:
        """
        Repost as a copy: the original author's display fields and content are
        snapshotted now, later edits to the original do not propagate.
        """
        original = await self.post_repo.get_by_id(post_id)
        if not original:
            raise NotFoundError("Post not found")
        author = await self.user_repo.get_by_id(original.author_id)
        author_summary = UserSummary.for_author(original.author_id, author)

        share = PostCreate(
            content=(content or "").strip() or original.content,
            type=PostType.SHARED,
            media_url=original.media_url,
            original_post_id=original.id,
            original_author_name=author_summary.full_name,
            original_author_avatar=author_summary.avatar_url,
            original_content=original.content,
        )
        post = await self.post_repo.create(user_id, share)
        logger.info(f"[POSTS] User {user_id} shared post {post_id} as {post.id}")
        return await self.get_post(post.id, user_id)

    # === LIKES ===

    async def toggle_like(self, post_id: int, user_id: int) -> LikeResult:
        """
        Like the post if the user has not yet, otherwise unlike it.
        The count is read from the likes table, so there is no counter to drift.
        """
        if not await self.post_repo.get_by_id(post_id):
            raise NotFoundError("Post not found")

        if await self.like_repo.exists(post_id, user_id):
            await self.like_repo.remove(post_id, user_id)
            liked = False
        else:
            await self.like_repo.add(post_id, user_id)
            liked = True

        likes = await self.like_repo.count(post_id)
        logger.debug(f"[POSTS] User {user_id} {'liked' if liked else 'unliked'} post {post_id} ({likes})")
        return LikeResult(post_id=post_id, liked=liked, likes=likes)

    async def has_user_liked_post(self, post_id: int, user_id: int) -> bool:
        return await self.like_repo.exists(post_id, user_id)

    async def get_like_count(self, post_id: int) -> int:
        return await self.like_repo.count(post_id)
