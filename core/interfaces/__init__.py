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

__all__ = [
    "IUserRepository",
    "IPostRepository",
    "ICommentRepository",
    "ILikeRepository",
    "IConnectionRepository",
    "IOpportunityRepository",
    "IEventRepository",
    "IMessageRepository",
    "ISessionRepository",
]
