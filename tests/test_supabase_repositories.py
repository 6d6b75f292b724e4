"""
Supabase repositories against a recording stand-in for the query builder:
checks row mapping and the filters each call sends.
"""

from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from core.domain.errors import ConflictError
from core.domain.models import ConnectionStatus, PostType, UserCreate
from infrastructure.database import (
    SupabaseConnectionRepository,
    SupabaseLikeRepository,
    SupabasePostRepository,
    SupabaseUserRepository,
)
from infrastructure.database.user_repository import USER_COLUMNS


class FakeQuery:
    """Chainable builder that records every call and answers execute() with a canned response"""

    def __init__(self, table, response=None, error=None):
        self.table = table
        self.calls = []
        self.response = response or SimpleNamespace(data=[], count=None)
        self.error = error

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return record

    @property
    def not_(self):
        self.calls.append(("not_", (), {}))
        return self

    def execute(self):
        if self.error:
            raise self.error
        return self.response


class FakeClient:
    def __init__(self):
        self.queries = []
        self._responses = []

    def respond(self, data=None, count=None, error=None):
        self._responses.append((SimpleNamespace(data=data or [], count=count), error))

    def table(self, name):
        response, error = self._responses.pop(0) if self._responses else (None, None)
        query = FakeQuery(name, response, error)
        self.queries.append(query)
        return query


@pytest.fixture
def client():
    return FakeClient()


USER_ROW = {
    "id": 7, "username": "leomessi", "full_name": "Lionel Messi", "position": "Forward",
    "club": "Inter Miami CF", "location": "Miami, USA", "bio": None, "avatar_url": None,
    "cover_url": None, "verified": None, "is_pro": True, "created_at": "2024-03-01T12:00:00+00:00",
}


async def test_user_row_mapping_hides_password(client):
    client.respond(data=[USER_ROW])
    repo = SupabaseUserRepository(client)

    user = await repo.get_by_id(7)

    assert user.username == "leomessi"
    assert user.verified is False
    assert user.is_pro is True
    query = client.queries[0]
    assert query.table == "users"
    assert query.calls[0] == ("select", (USER_COLUMNS,), {})
    assert "password_hash" not in USER_COLUMNS


async def test_user_duplicate_username_is_conflict(client):
    client.respond(error=APIError({"code": "23505", "message": "duplicate key value"}))
    repo = SupabaseUserRepository(client)

    with pytest.raises(ConflictError):
        await repo.create(UserCreate(username="leomessi", password_hash="x"))


async def test_user_search_strips_filter_syntax(client):
    client.respond(data=[USER_ROW])
    repo = SupabaseUserRepository(client)

    users = await repo.search("messi),(", 20)

    assert [u.id for u in users] == [7]
    name, args, _ = client.queries[0].calls[1]
    assert name == "or_"
    assert args[0] == "username.ilike.%messi%,full_name.ilike.%messi%,club.ilike.%messi%"


async def test_list_excluding_uses_not_in(client):
    client.respond(data=[USER_ROW])
    repo = SupabaseUserRepository(client)

    await repo.list_excluding({3, 1}, 5)

    calls = client.queries[0].calls
    assert ("not_", (), {}) in calls
    assert ("in_", ("id", [1, 3]), {}) in calls
    assert ("order", ("created_at",), {"desc": True}) in calls
    assert ("limit", (5,), {}) in calls


async def test_post_listing_filters(client):
    client.respond(data=[{"id": 1, "author_id": 7, "content": "Goal!", "type": "video", "views": None}])
    repo = SupabasePostRepository(client)

    posts = await repo.list_posts(author_ids={7, 2}, post_type=PostType.VIDEO)

    assert posts[0].type == PostType.VIDEO
    assert posts[0].views == 0
    calls = client.queries[0].calls
    assert ("in_", ("author_id", [2, 7]), {}) in calls
    assert ("eq", ("type", "video"), {}) in calls


async def test_like_count_reads_exact_count(client):
    client.respond(count=3)
    repo = SupabaseLikeRepository(client)

    assert await repo.count(11) == 3
    assert client.queries[0].calls[0] == ("select", ("id",), {"count": "exact"})


async def test_like_add_ignores_duplicates(client):
    client.respond(data=[])
    repo = SupabaseLikeRepository(client)

    assert await repo.add(11, 7) is False
    name, args, kwargs = client.queries[0].calls[0]
    assert name == "upsert"
    assert kwargs == {"on_conflict": "post_id,user_id", "ignore_duplicates": True}


async def test_connection_lookup_checks_both_directions(client):
    client.respond(data=[{"id": 4, "requester_id": 2, "receiver_id": 1, "status": "accepted"}])
    repo = SupabaseConnectionRepository(client)

    connection = await repo.get_between(1, 2)

    assert connection.status == ConnectionStatus.ACCEPTED
    assert connection.other_party(1) == 2
    name, args, _ = client.queries[0].calls[1]
    assert name == "or_"
    assert args[0] == (
        "and(requester_id.eq.1,receiver_id.eq.2),"
        "and(requester_id.eq.2,receiver_id.eq.1)"
    )


async def test_connection_pair_violation_is_conflict(client):
    client.respond(error=APIError({"code": "23505", "message": "connections_pair_key"}))
    repo = SupabaseConnectionRepository(client)

    with pytest.raises(ConflictError):
        await repo.create(1, 2)
