"""
Supabase implementation of User repository.
"""

import re
from typing import Optional, List, Set

from postgrest.exceptions import APIError

from core.domain.errors import ConflictError
from core.domain.models import User, UserCreate, UserUpdate
from core.interfaces.repositories import IUserRepository
from infrastructure.database.base import SupabaseRepository, is_unique_violation
from infrastructure.database.supabase_client import run_sync

# Characters that would break a PostgREST or() filter expression
_FILTER_UNSAFE = re.compile(r"[,()*%\\]")

# Everything except the password hash
USER_COLUMNS = (
    "id,username,full_name,position,club,location,bio,"
    "avatar_url,cover_url,verified,is_pro,created_at"
)


class SupabaseUserRepository(SupabaseRepository, IUserRepository):
    """Supabase implementation of user repository"""

    table_name = "users"

    def _to_model(self, data: dict) -> User:
        """Convert database row to User model"""
        return User(
            id=data["id"],
            username=data["username"],
            full_name=data.get("full_name"),
            position=data.get("position"),
            club=data.get("club"),
            location=data.get("location"),
            bio=data.get("bio"),
            avatar_url=data.get("avatar_url"),
            cover_url=data.get("cover_url"),
            verified=data.get("verified") or False,
            is_pro=data.get("is_pro") or False,
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_by_id_sync(self, user_id: int) -> Optional[dict]:
        response = self._table().select(USER_COLUMNS).eq("id", user_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, user_id: int) -> Optional[User]:
        data = await self._get_by_id_sync(user_id)
        return self._to_model(data) if data else None

    @run_sync
    def _get_by_ids_sync(self, user_ids: List[int]) -> List[dict]:
        response = self._table().select(USER_COLUMNS).in_("id", user_ids).execute()
        return response.data or []

    async def get_by_ids(self, user_ids: Set[int]) -> List[User]:
        if not user_ids:
            return []
        data = await self._get_by_ids_sync(sorted(user_ids))
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_username_sync(self, username: str) -> Optional[dict]:
        response = self._table().select(USER_COLUMNS).eq("username", username).execute()
        return response.data[0] if response.data else None

    async def get_by_username(self, username: str) -> Optional[User]:
        data = await self._get_by_username_sync(username)
        return self._to_model(data) if data else None

    @run_sync
    def _get_password_hash_sync(self, user_id: int) -> Optional[str]:
        response = self._table().select("password_hash").eq("id", user_id).execute()
        return response.data[0]["password_hash"] if response.data else None

    async def get_password_hash(self, user_id: int) -> Optional[str]:
        return await self._get_password_hash_sync(user_id)

    @run_sync
    def _create_sync(self, user_data: UserCreate) -> dict:
        data = {
            "username": user_data.username,
            "password_hash": user_data.password_hash,
            "full_name": user_data.full_name,
            "position": user_data.position,
            "club": user_data.club,
            "location": user_data.location,
            "bio": user_data.bio,
            "avatar_url": user_data.avatar_url,
            "cover_url": user_data.cover_url,
        }
        try:
            response = self._table().insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise ConflictError(f"Username '{user_data.username}' already taken") from e
            raise
        return response.data[0]

    async def create(self, user_data: UserCreate) -> User:
        data = await self._create_sync(user_data)
        return self._to_model(data)

    @run_sync
    def _update_sync(self, user_id: int, user_data: UserUpdate) -> Optional[dict]:
        update_dict = user_data.model_dump(exclude_unset=True)
        if not update_dict:
            response = self._table().select(USER_COLUMNS).eq("id", user_id).execute()
        else:
            response = self._table().update(update_dict).eq("id", user_id).execute()
        return response.data[0] if response.data else None

    async def update(self, user_id: int, user_data: UserUpdate) -> Optional[User]:
        data = await self._update_sync(user_id, user_data)
        return self._to_model(data) if data else None

    @run_sync
    def _search_sync(self, query: str, limit: int) -> List[dict]:
        term = _FILTER_UNSAFE.sub("", query)
        if not term:
            return []
        response = self._table().select(USER_COLUMNS)\
            .or_(f"username.ilike.%{term}%,full_name.ilike.%{term}%,club.ilike.%{term}%")\
            .order("id")\
            .limit(limit)\
            .execute()
        return response.data or []

    async def search(self, query: str, limit: int) -> List[User]:
        data = await self._search_sync(query, limit)
        return [self._to_model(d) for d in data]

    @run_sync
    def _list_excluding_sync(self, exclude_ids: List[int], limit: int) -> List[dict]:
        query = self._table().select(USER_COLUMNS)
        if exclude_ids:
            query = query.not_.in_("id", exclude_ids)
        response = query.order("created_at", desc=True).limit(limit).execute()
        return response.data or []

    async def list_excluding(self, exclude_ids: Set[int], limit: int) -> List[User]:
        data = await self._list_excluding_sync(sorted(exclude_ids), limit)
        return [self._to_model(d) for d in data]
