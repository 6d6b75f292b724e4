from infrastructure.memory.store import MemoryStore
from infrastructure.memory.repositories import (
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

__all__ = [
    "MemoryStore",
    "MemoryUserRepository",
    "MemoryPostRepository",
    "MemoryCommentRepository",
    "MemoryLikeRepository",
    "MemoryConnectionRepository",
    "MemoryOpportunityRepository",
    "MemoryEventRepository",
    "MemoryMessageRepository",
    "MemorySessionRepository",
]
