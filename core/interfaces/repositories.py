"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (in-memory -> Supabase -> PostgreSQL, etc.)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Set
from core.domain.models import (
    User, UserCreate, UserUpdate,
    Post, PostCreate, PostType,
    Comment, CommentCreate,
    Connection, ConnectionStatus,
    Opportunity, OpportunityCreate,
    Event, EventCreate,
    Message, MessageCreate,
    Session,
)


class IUserRepository(ABC):
    """Interface for user data access"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Set[int]) -> List[User]:
        """Get several users at once (missing ids are skipped)"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by unique handle"""
        pass

    @abstractmethod
    async def get_password_hash(self, user_id: int) -> Optional[str]:
        """Get the stored password hash for a user"""
        pass

    @abstractmethod
    async def create(self, user_data: UserCreate) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user_id: int, user_data: UserUpdate) -> Optional[User]:
        """Update profile fields; returns None if the user does not exist"""
        pass

    @abstractmethod
    async def search(self, query: str, limit: int) -> List[User]:
        """Case-insensitive match on username, full name or club"""
        pass

    @abstractmethod
    async def list_excluding(self, exclude_ids: Set[int], limit: int) -> List[User]:
        """Newest users whose id is not in exclude_ids"""
        pass


class IPostRepository(ABC):
    """Interface for post data access"""

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID"""
        pass

    @abstractmethod
    async def create(self, author_id: int, post_data: PostCreate) -> Post:
        """Create a new post"""
        pass

    @abstractmethod
    async def list_posts(
        self,
        author_ids: Optional[Set[int]] = None,
        post_type: Optional[PostType] = None,
    ) -> List[Post]:
        """Posts newest first, optionally restricted to authors and/or type"""
        pass


class ICommentRepository(ABC):
    """Interface for comment data access"""

    @abstractmethod
    async def create(self, comment_data: CommentCreate) -> Comment:
        """Create a new comment"""
        pass

    @abstractmethod
    async def get_by_post(self, post_id: int) -> List[Comment]:
        """Comments of a post, oldest first"""
        pass

    @abstractmethod
    async def get_by_posts(self, post_ids: Set[int]) -> List[Comment]:
        """Comments of several posts, oldest first"""
        pass


class ILikeRepository(ABC):
    """Interface for like data access. One like per (post, user)."""

    @abstractmethod
    async def exists(self, post_id: int, user_id: int) -> bool:
        """Check if the user already liked the post"""
        pass

    @abstractmethod
    async def add(self, post_id: int, user_id: int) -> bool:
        """Insert a like; returns False if it already existed"""
        pass

    @abstractmethod
    async def remove(self, post_id: int, user_id: int) -> bool:
        """Delete a like; returns False if there was none"""
        pass

    @abstractmethod
    async def count(self, post_id: int) -> int:
        """Number of likes for a post"""
        pass

    @abstractmethod
    async def liked_post_ids(self, user_id: int, post_ids: Set[int]) -> Set[int]:
        """Subset of post_ids the user has liked"""
        pass


class IConnectionRepository(ABC):
    """Interface for connection data access"""

    @abstractmethod
    async def get_by_id(self, connection_id: int) -> Optional[Connection]:
        """Get connection by ID"""
        pass

    @abstractmethod
    async def create(self, requester_id: int, receiver_id: int) -> Connection:
        """Create a pending connection request"""
        pass

    @abstractmethod
    async def get_between(self, user_a_id: int, user_b_id: int) -> Optional[Connection]:
        """Connection row for the unordered pair, in either direction"""
        pass

    @abstractmethod
    async def get_user_connections(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
    ) -> List[Connection]:
        """Rows where the user is requester or receiver"""
        pass

    @abstractmethod
    async def update_status(self, connection_id: int, status: ConnectionStatus) -> Optional[Connection]:
        """Update connection status"""
        pass


class IOpportunityRepository(ABC):
    """Interface for opportunity data access"""

    @abstractmethod
    async def get_all(self, category: Optional[str] = None) -> List[Opportunity]:
        """Opportunities newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, opportunity_id: int) -> Optional[Opportunity]:
        pass

    @abstractmethod
    async def create(self, data: OpportunityCreate) -> Opportunity:
        pass


class IEventRepository(ABC):
    """Interface for event data access"""

    @abstractmethod
    async def get_all(self, event_type: Optional[str] = None) -> List[Event]:
        """Events by date, soonest first"""
        pass

    @abstractmethod
    async def get_by_id(self, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def create(self, data: EventCreate) -> Event:
        pass


class IMessageRepository(ABC):
    """Interface for message data access"""

    @abstractmethod
    async def create(self, message_data: MessageCreate) -> Message:
        """Create a new message"""
        pass

    @abstractmethod
    async def get_by_id(self, message_id: int) -> Optional[Message]:
        pass

    @abstractmethod
    async def get_for_user(self, user_id: int) -> List[Message]:
        """Messages sent or received by the user, oldest first"""
        pass

    @abstractmethod
    async def get_between(self, user_a_id: int, user_b_id: int) -> List[Message]:
        """Messages between two users in either direction, oldest first"""
        pass

    @abstractmethod
    async def mark_as_read(self, message_id: int) -> None:
        """Mark message as read"""
        pass

    @abstractmethod
    async def mark_all_read(self, sender_id: int, receiver_id: int) -> int:
        """Mark everything sender sent to receiver as read; returns how many changed"""
        pass


class ISessionRepository(ABC):
    """Interface for login sessions"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        pass

    @abstractmethod
    async def get(self, token: str) -> Optional[Session]:
        pass

    @abstractmethod
    async def delete(self, token: str) -> None:
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Drop sessions past expiry; returns how many were removed"""
        pass
