"""
API loader - builds repositories and services for the chosen storage backend.
Every service gets its repositories injected; nothing reaches for a global client.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from config.settings import Settings
from config.features import features
from core.interfaces.repositories import (
    IUserRepository,
    IPostRepository,
    ICommentRepository,
    ILikeRepository,
    IConnectionRepository,
    IOpportunityRepository,
    IEventRepository,
    IMessageRepository,
    ISessionRepository,
)
from core.services import (
    UserService,
    AuthService,
    PostService,
    CommentService,
    ConnectionService,
    OpportunityService,
    EventService,
    MessageService,
)
from infrastructure.memory import (
    MemoryStore,
    MemoryUserRepository,
    MemoryPostRepository,
    MemoryCommentRepository,
    MemoryLikeRepository,
    MemoryConnectionRepository,
    MemoryOpportunityRepository,
    MemoryEventRepository,
    MemoryMessageRepository,
    MemorySessionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    users: IUserRepository
    posts: IPostRepository
    comments: ICommentRepository
    likes: ILikeRepository
    connections: IConnectionRepository
    opportunities: IOpportunityRepository
    events: IEventRepository
    messages: IMessageRepository
    sessions: ISessionRepository


@dataclass
class Container:
    """Services handed to the web layer"""
    repos: Repositories
    user_service: UserService
    auth_service: AuthService
    post_service: PostService
    comment_service: CommentService
    connection_service: ConnectionService
    opportunity_service: OpportunityService
    event_service: EventService
    message_service: MessageService


def memory_repositories(store: Optional[MemoryStore] = None) -> Repositories:
    store = store or MemoryStore()
    return Repositories(
        users=MemoryUserRepository(store),
        posts=MemoryPostRepository(store),
        comments=MemoryCommentRepository(store),
        likes=MemoryLikeRepository(store),
        connections=MemoryConnectionRepository(store),
        opportunities=MemoryOpportunityRepository(store),
        events=MemoryEventRepository(store),
        messages=MemoryMessageRepository(store),
        sessions=MemorySessionRepository(store),
    )


def supabase_repositories(settings: Settings) -> Repositories:
    # Imported here so the memory backend runs without Supabase credentials
    from infrastructure.database import (
        create_supabase_client,
        SupabaseUserRepository,
        SupabasePostRepository,
        SupabaseCommentRepository,
        SupabaseLikeRepository,
        SupabaseConnectionRepository,
        SupabaseOpportunityRepository,
        SupabaseEventRepository,
        SupabaseMessageRepository,
        SupabaseSessionRepository,
    )
    from infrastructure.database.supabase_client import configure_executor

    configure_executor(settings.db_max_workers)
    client = create_supabase_client(settings.supabase_url, settings.supabase_api_key, settings.db_schema)
    return Repositories(
        users=SupabaseUserRepository(client),
        posts=SupabasePostRepository(client),
        comments=SupabaseCommentRepository(client),
        likes=SupabaseLikeRepository(client),
        connections=SupabaseConnectionRepository(client),
        opportunities=SupabaseOpportunityRepository(client),
        events=SupabaseEventRepository(client),
        messages=SupabaseMessageRepository(client),
        sessions=SupabaseSessionRepository(client),
    )


def build_services(
    repos: Repositories,
    session_ttl_hours: int = 24 * 30,
    suggested_page_size: int = features.SUGGESTED_PAGE_SIZE,
    rng: Optional[random.Random] = None,
) -> Container:
    return Container(
        repos=repos,
        user_service=UserService(user_repo=repos.users, rng=rng),
        auth_service=AuthService(
            user_repo=repos.users,
            session_repo=repos.sessions,
            session_ttl_hours=session_ttl_hours,
        ),
        post_service=PostService(
            post_repo=repos.posts,
            comment_repo=repos.comments,
            like_repo=repos.likes,
            user_repo=repos.users,
            connection_repo=repos.connections,
        ),
        comment_service=CommentService(
            comment_repo=repos.comments,
            post_repo=repos.posts,
            user_repo=repos.users,
        ),
        connection_service=ConnectionService(
            connection_repo=repos.connections,
            user_repo=repos.users,
            suggested_page_size=suggested_page_size,
        ),
        opportunity_service=OpportunityService(opportunity_repo=repos.opportunities),
        event_service=EventService(event_repo=repos.events),
        message_service=MessageService(message_repo=repos.messages, user_repo=repos.users),
    )


def build_container(settings: Settings) -> Container:
    """Container for the configured storage backend"""
    logger.info(f"Storage backend: {settings.storage_backend}")
    if settings.storage_backend == "supabase":
        repos = supabase_repositories(settings)
    else:
        repos = memory_repositories()
    return build_services(repos, session_ttl_hours=settings.session_ttl_hours)
