"""
In-memory implementations of the repository interfaces.
Same signatures and ordering rules as the Supabase repositories.
"""

from datetime import datetime
from typing import Optional, List, Set

from core.domain.models import (
    User, UserCreate, UserUpdate,
    Post, PostCreate, PostType,
    Comment, CommentCreate,
    Like,
    Connection, ConnectionStatus,
    Opportunity, OpportunityCreate,
    Event, EventCreate,
    Message, MessageCreate,
    Session,
)
from core.domain.errors import ConflictError
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
from infrastructure.memory.store import MemoryStore, utcnow


def _newest_first(rows):
    return sorted(rows, key=lambda r: (r.created_at, r.id), reverse=True)


def _oldest_first(rows):
    return sorted(rows, key=lambda r: (r.created_at, r.id))


class MemoryUserRepository(IUserRepository):
    """In-memory implementation of user repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> Optional[User]:
        user = self.store.users.get(user_id)
        return user.model_copy() if user else None

    async def get_by_ids(self, user_ids: Set[int]) -> List[User]:
        return [self.store.users[i].model_copy() for i in sorted(user_ids) if i in self.store.users]

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self.store.users.values():
            if user.username == username:
                return user.model_copy()
        return None

    async def get_password_hash(self, user_id: int) -> Optional[str]:
        return self.store.password_hashes.get(user_id)

    async def create(self, user_data: UserCreate) -> User:
        if await self.get_by_username(user_data.username):
            raise ConflictError(f"Username '{user_data.username}' already taken")
        user_id = self.store.next_id("users")
        user = User(
            id=user_id,
            created_at=utcnow(),
            **user_data.model_dump(exclude={"password_hash"}),
        )
        self.store.users[user_id] = user
        self.store.password_hashes[user_id] = user_data.password_hash
        return user.model_copy()

    async def update(self, user_id: int, user_data: UserUpdate) -> Optional[User]:
        user = self.store.users.get(user_id)
        if not user:
            return None
        changes = user_data.model_dump(exclude_unset=True)
        updated = user.model_copy(update=changes)
        self.store.users[user_id] = updated
        return updated.model_copy()

    async def search(self, query: str, limit: int) -> List[User]:
        needle = query.lower()
        found = [
            u for u in self.store.users.values()
            if needle in u.username.lower()
            or needle in (u.full_name or "").lower()
            or needle in (u.club or "").lower()
        ]
        return [u.model_copy() for u in sorted(found, key=lambda u: u.id)[:limit]]

    async def list_excluding(self, exclude_ids: Set[int], limit: int) -> List[User]:
        candidates = [u for u in self.store.users.values() if u.id not in exclude_ids]
        return [u.model_copy() for u in _newest_first(candidates)[:limit]]


class MemoryPostRepository(IPostRepository):
    """In-memory implementation of post repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        post = self.store.posts.get(post_id)
        return post.model_copy() if post else None

    async def create(self, author_id: int, post_data: PostCreate) -> Post:
        post_id = self.store.next_id("posts")
        post = Post(id=post_id, author_id=author_id, created_at=utcnow(), **post_data.model_dump())
        self.store.posts[post_id] = post
        return post.model_copy()

    async def list_posts(
        self,
        author_ids: Optional[Set[int]] = None,
        post_type: Optional[PostType] = None,
    ) -> List[Post]:
        posts = [
            p for p in self.store.posts.values()
            if (author_ids is None or p.author_id in author_ids)
            and (post_type is None or p.type == post_type)
        ]
        return [p.model_copy() for p in _newest_first(posts)]


class MemoryCommentRepository(ICommentRepository):
    """In-memory implementation of comment repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def create(self, comment_data: CommentCreate) -> Comment:
        comment_id = self.store.next_id("comments")
        comment = Comment(id=comment_id, created_at=utcnow(), **comment_data.model_dump())
        self.store.comments[comment_id] = comment
        return comment.model_copy()

    async def get_by_post(self, post_id: int) -> List[Comment]:
        return await self.get_by_posts({post_id})

    async def get_by_posts(self, post_ids: Set[int]) -> List[Comment]:
        comments = [c for c in self.store.comments.values() if c.post_id in post_ids]
        return [c.model_copy() for c in _oldest_first(comments)]


class MemoryLikeRepository(ILikeRepository):
    """In-memory implementation of like repository; the (post, user) key enforces uniqueness"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def exists(self, post_id: int, user_id: int) -> bool:
        return (post_id, user_id) in self.store.likes

    async def add(self, post_id: int, user_id: int) -> bool:
        key = (post_id, user_id)
        if key in self.store.likes:
            return False
        self.store.likes[key] = Like(
            id=self.store.next_id("likes"),
            post_id=post_id,
            user_id=user_id,
            created_at=utcnow(),
        )
        return True

    async def remove(self, post_id: int, user_id: int) -> bool:
        return self.store.likes.pop((post_id, user_id), None) is not None

    async def count(self, post_id: int) -> int:
        return sum(1 for (p, _) in self.store.likes if p == post_id)

    async def liked_post_ids(self, user_id: int, post_ids: Set[int]) -> Set[int]:
        return {p for (p, u) in self.store.likes if u == user_id and p in post_ids}


class MemoryConnectionRepository(IConnectionRepository):
    """In-memory implementation of connection repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_by_id(self, connection_id: int) -> Optional[Connection]:
        connection = self.store.connections.get(connection_id)
        return connection.model_copy() if connection else None

    async def create(self, requester_id: int, receiver_id: int) -> Connection:
        if await self.get_between(requester_id, receiver_id):
            raise ConflictError("Connection already exists")
        connection_id = self.store.next_id("connections")
        connection = Connection(
            id=connection_id,
            requester_id=requester_id,
            receiver_id=receiver_id,
            status=ConnectionStatus.PENDING,
            created_at=utcnow(),
        )
        self.store.connections[connection_id] = connection
        return connection.model_copy()

    async def get_between(self, user_a_id: int, user_b_id: int) -> Optional[Connection]:
        pair = {user_a_id, user_b_id}
        for connection in self.store.connections.values():
            if {connection.requester_id, connection.receiver_id} == pair:
                return connection.model_copy()
        return None

    async def get_user_connections(
        self,
        user_id: int,
        status: Optional[ConnectionStatus] = None,
    ) -> List[Connection]:
        rows = [
            c for c in self.store.connections.values()
            if c.involves(user_id) and (status is None or c.status == status)
        ]
        return [c.model_copy() for c in _oldest_first(rows)]

    async def update_status(self, connection_id: int, status: ConnectionStatus) -> Optional[Connection]:
        connection = self.store.connections.get(connection_id)
        if not connection:
            return None
        connection.status = status
        return connection.model_copy()


class MemoryOpportunityRepository(IOpportunityRepository):
    """In-memory implementation of opportunity repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_all(self, category: Optional[str] = None) -> List[Opportunity]:
        rows = [
            o for o in self.store.opportunities.values()
            if category is None or o.category == category
        ]
        return [o.model_copy() for o in _newest_first(rows)]

    async def get_by_id(self, opportunity_id: int) -> Optional[Opportunity]:
        opportunity = self.store.opportunities.get(opportunity_id)
        return opportunity.model_copy() if opportunity else None

    async def create(self, data: OpportunityCreate) -> Opportunity:
        opportunity_id = self.store.next_id("opportunities")
        opportunity = Opportunity(id=opportunity_id, created_at=utcnow(), **data.model_dump())
        self.store.opportunities[opportunity_id] = opportunity
        return opportunity.model_copy()


class MemoryEventRepository(IEventRepository):
    """In-memory implementation of event repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_all(self, event_type: Optional[str] = None) -> List[Event]:
        rows = [
            e for e in self.store.events.values()
            if event_type is None or e.type == event_type
        ]
        return [e.model_copy() for e in sorted(rows, key=lambda e: (e.date, e.id))]

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        event = self.store.events.get(event_id)
        return event.model_copy() if event else None

    async def create(self, data: EventCreate) -> Event:
        event_id = self.store.next_id("events")
        event = Event(id=event_id, created_at=utcnow(), **data.model_dump())
        self.store.events[event_id] = event
        return event.model_copy()


class MemoryMessageRepository(IMessageRepository):
    """In-memory implementation of message repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def create(self, message_data: MessageCreate) -> Message:
        message_id = self.store.next_id("messages")
        message = Message(id=message_id, read=False, created_at=utcnow(), **message_data.model_dump())
        self.store.messages[message_id] = message
        return message.model_copy()

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        message = self.store.messages.get(message_id)
        return message.model_copy() if message else None

    async def get_for_user(self, user_id: int) -> List[Message]:
        rows = [
            m for m in self.store.messages.values()
            if user_id in (m.sender_id, m.receiver_id)
        ]
        return [m.model_copy() for m in _oldest_first(rows)]

    async def get_between(self, user_a_id: int, user_b_id: int) -> List[Message]:
        pair = {user_a_id, user_b_id}
        rows = [m for m in self.store.messages.values() if {m.sender_id, m.receiver_id} == pair]
        return [m.model_copy() for m in _oldest_first(rows)]

    async def mark_as_read(self, message_id: int) -> None:
        message = self.store.messages.get(message_id)
        if message:
            message.read = True

    async def mark_all_read(self, sender_id: int, receiver_id: int) -> int:
        changed = 0
        for message in self.store.messages.values():
            if message.sender_id == sender_id and message.receiver_id == receiver_id and not message.read:
                message.read = True
                changed += 1
        return changed


class MemorySessionRepository(ISessionRepository):
    """In-memory implementation of session repository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    async def create(self, session: Session) -> Session:
        stored = session.model_copy(update={"created_at": session.created_at or utcnow()})
        self.store.sessions[session.token] = stored
        return stored.model_copy()

    async def get(self, token: str) -> Optional[Session]:
        session = self.store.sessions.get(token)
        return session.model_copy() if session else None

    async def delete(self, token: str) -> None:
        self.store.sessions.pop(token, None)

    async def delete_expired(self, now: datetime) -> int:
        expired = [t for t, s in self.store.sessions.items() if s.expires_at <= now]
        for token in expired:
            del self.store.sessions[token]
        return len(expired)
