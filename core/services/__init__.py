from core.services.user_service import UserService
from core.services.auth_service import AuthService
from core.services.post_service import PostService
from core.services.comment_service import CommentService
from core.services.connection_service import ConnectionService
from core.services.opportunity_service import OpportunityService
from core.services.event_service import EventService
from core.services.message_service import MessageService

__all__ = [
    "UserService",
    "AuthService",
    "PostService",
    "CommentService",
    "ConnectionService",
    "OpportunityService",
    "EventService",
    "MessageService",
]
