"""
In-memory store - dict-backed tables for local development and tests.
Single point of state shared by all in-memory repositories.
"""

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterator, Tuple

from core.domain.models import (
    User, Post, Comment, Like, Connection,
    Opportunity, Event, Message, Session,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MemoryStore:
    """Tables keyed by primary key, with a serial id counter per table"""
    users: Dict[int, User] = field(default_factory=dict)
    password_hashes: Dict[int, str] = field(default_factory=dict)
    posts: Dict[int, Post] = field(default_factory=dict)
    comments: Dict[int, Comment] = field(default_factory=dict)
    likes: Dict[Tuple[int, int], Like] = field(default_factory=dict)  # (post_id, user_id)
    connections: Dict[int, Connection] = field(default_factory=dict)
    opportunities: Dict[int, Opportunity] = field(default_factory=dict)
    events: Dict[int, Event] = field(default_factory=dict)
    messages: Dict[int, Message] = field(default_factory=dict)
    sessions: Dict[str, Session] = field(default_factory=dict)
    _counters: Dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Serial primary key for a table, starting at 1"""
        if table not in self._counters:
            self._counters[table] = itertools.count(1)
        return next(self._counters[table])

    def clear(self) -> None:
        for table in (
            self.users, self.password_hashes, self.posts, self.comments, self.likes,
            self.connections, self.opportunities, self.events, self.messages, self.sessions,
        ):
            table.clear()
        self._counters.clear()
