from infrastructure.database.supabase_client import create_supabase_client
from infrastructure.database.user_repository import SupabaseUserRepository
from infrastructure.database.post_repository import SupabasePostRepository
from infrastructure.database.comment_repository import SupabaseCommentRepository
from infrastructure.database.like_repository import SupabaseLikeRepository
from infrastructure.database.connection_repository import SupabaseConnectionRepository
from infrastructure.database.opportunity_repository import SupabaseOpportunityRepository
from infrastructure.database.event_repository import SupabaseEventRepository
from infrastructure.database.message_repository import SupabaseMessageRepository
from infrastructure.database.session_repository import SupabaseSessionRepository

__all__ = [
    "create_supabase_client",
    "SupabaseUserRepository",
    "SupabasePostRepository",
    "SupabaseCommentRepository",
    "SupabaseLikeRepository",
    "SupabaseConnectionRepository",
    "SupabaseOpportunityRepository",
    "SupabaseEventRepository",
    "SupabaseMessageRepository",
    "SupabaseSessionRepository",
]
