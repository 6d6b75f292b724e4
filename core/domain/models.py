"""
Domain models - the core of business logic.
These models are storage-agnostic (work with the in-memory store, Supabase, API, etc.)
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from enum import Enum


# === ENUMS ===

class PostType(str, Enum):
    TEXT = "text"
    VIDEO = "video"
    ACHIEVEMENT = "achievement"
    STATS = "stats"
    SHARED = "shared"


class ConnectionStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class FeedScope(str, Enum):
    """Which posts a viewer gets to see"""
    GLOBAL = "global"
    CONNECTIONS = "connections"


# === USER ===

class UserBase(BaseModel):
    """Profile fields shared by create/read models"""
    full_name: Optional[str] = None
    position: Optional[str] = None  # e.g. "Midfielder", "Head Coach", "Scout"
    club: Optional[str] = None  # free text, not a reference to a club account
    location: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None


class UserCreate(UserBase):
    """Data for creating a new user"""
    username: str
    password_hash: str


class User(UserBase):
    """Full user model (never carries the password hash)"""
    id: int
    username: str
    verified: bool = False
    is_pro: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    """Data for updating a profile"""
    full_name: Optional[str] = None
    position: Optional[str] = None
    club: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None


class UserSummary(BaseModel):
    """Lightweight projection used wherever another user is embedded"""
    id: int
    username: str
    full_name: str
    position: Optional[str] = None
    club: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            username=user.username,
            full_name=user.full_name or user.username,
            position=user.position,
            club=user.club,
            avatar_url=user.avatar_url,
        )

    @classmethod
    def for_author(cls, user_id: int, user: Optional[User]) -> "UserSummary":
        """Summary of user, or a placeholder when the account no longer resolves"""
        if user:
            return cls.from_user(user)
        return cls(id=user_id, username="unknown", full_name="Unknown user")


# === POST ===

class PostCreate(BaseModel):
    """Data for creating a post. Which optional fields matter depends on `type`."""
    content: str = Field(min_length=1)
    type: PostType = PostType.TEXT
    media_url: Optional[str] = None
    achievement_title: Optional[str] = None
    achievement_subtitle: Optional[str] = None
    stats_data: Optional[Dict[str, Any]] = None
    # Snapshot of the original post, only for type=shared
    original_post_id: Optional[int] = None
    original_author_name: Optional[str] = None
    original_author_avatar: Optional[str] = None
    original_content: Optional[str] = None


class Post(PostCreate):
    """Stored post row"""
    id: int
    author_id: int
    views: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FeedComment(BaseModel):
    """Comment with its author embedded"""
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: Optional[datetime] = None
    author: UserSummary


class FeedPost(Post):
    """Post hydrated for display: author, comments, computed like count"""
    author: UserSummary
    comments: List[FeedComment] = Field(default_factory=list)
    likes: int = 0
    has_liked: bool = False


class LikeResult(BaseModel):
    """Outcome of a like toggle"""
    post_id: int
    liked: bool
    likes: int


# === COMMENT ===

class CommentCreate(BaseModel):
    post_id: int
    author_id: int
    content: str


class Comment(BaseModel):
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === LIKE ===

class Like(BaseModel):
    id: int
    post_id: int
    user_id: int
    created_at: Optional[datetime] = None


# === CONNECTION ===

class Connection(BaseModel):
    """Directed request; becomes an undirected edge once accepted"""
    id: int
    requester_id: int
    receiver_id: int
    status: ConnectionStatus = ConnectionStatus.PENDING
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    def other_party(self, user_id: int) -> int:
        """Id of the user on the other side of this row, relative to user_id"""
        return self.receiver_id if self.requester_id == user_id else self.requester_id

    def involves(self, user_id: int) -> bool:
        return user_id in (self.requester_id, self.receiver_id)


class UserConnection(BaseModel):
    """A connection row seen from one side: the row id plus the other user"""
    id: int
    status: ConnectionStatus
    user: UserSummary


class SuggestedConnection(BaseModel):
    """Someone the user may want to connect with. A value, not a stored row."""
    user: UserSummary


# === OPPORTUNITY ===

class OpportunityCreate(BaseModel):
    title: str
    club: str
    location: str
    category: str  # e.g. "trial", "job", "training"
    position: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    type: Optional[str] = None  # e.g. "full-time", "contract"


class Opportunity(OpportunityCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === EVENT ===

class EventCreate(BaseModel):
    title: str
    description: str
    date: datetime
    location: str
    type: str  # free-text tag, e.g. "showcase", "tournament", "workshop"

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, v: datetime) -> datetime:
        # naive dates are taken as UTC so listings can compare them
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class Event(EventCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === MESSAGE ===

class MessageCreate(BaseModel):
    sender_id: int
    receiver_id: int
    content: str


class Message(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    read: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class Conversation(BaseModel):
    """All messages between the user and one other party (derived, not stored)"""
    user: UserSummary
    last_message: str
    last_message_at: Optional[datetime] = None
    unread: int = 0
    messages: List[Message] = Field(default_factory=list)


# === SCOUTING ===

class ScoutingData(BaseModel):
    profile_views: int = 0
    highlight_views: int = 0
    opportunity_matches: int = 0


# === AUTH ===

class Session(BaseModel):
    token: str
    user_id: int
    created_at: Optional[datetime] = None
    expires_at: datetime


class AuthResult(BaseModel):
    """Returned on login: the session token plus the signed-in user"""
    token: str
    expires_at: datetime
    user: User
