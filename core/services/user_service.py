"""
User service - business logic for profile operations.
Storage-agnostic, works through interfaces.
"""

import logging
import random
from typing import Optional, List

from core.domain.models import User, UserUpdate, ScoutingData
from core.domain.constants import (
    MIN_SEARCH_LENGTH, MAX_SEARCH_RESULTS, MAX_BIO_LENGTH,
    SCOUTING_PROFILE_VIEWS, SCOUTING_HIGHLIGHT_VIEWS, SCOUTING_OPPORTUNITY_MATCHES,
)
from core.domain.errors import NotFoundError, PermissionDenied, ValidationError
from core.interfaces.repositories import IUserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations"""

    def __init__(self, user_repo: IUserRepository, rng: Optional[random.Random] = None):
        self.user_repo = user_repo
        self.rng = rng or random.Random()

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return await self.user_repo.get_by_id(user_id)

    async def require_user(self, user_id: int) -> User:
        """Get user by ID or raise NotFoundError"""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self.user_repo.get_by_username(username)

    async def update_profile(self, user_id: int, actor_id: int, update: UserUpdate) -> User:
        """Update a profile. Only the owner may edit it."""
        if user_id != actor_id:
            raise PermissionDenied("You can only edit your own profile")
        if update.bio and len(update.bio) > MAX_BIO_LENGTH:
            raise ValidationError(f"Bio must be at most {MAX_BIO_LENGTH} characters")

        logger.info(f"[USERS] Updating user {user_id}")
        user = await self.user_repo.update(user_id, update)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def search_users(self, query: str) -> List[User]:
        """Search by username, full name or club. Short queries return nothing."""
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        return await self.user_repo.search(query, MAX_SEARCH_RESULTS)

    async def get_scouting_insights(self, user_id: int) -> ScoutingData:
        """
        Profile analytics for the scouting widget.
        These are mock numbers, not computed from real activity.
        """
        try:
            if not await self.user_repo.get_by_id(user_id):
                return ScoutingData()
        except Exception as e:
            logger.error(f"[USERS] Scouting insights lookup failed for {user_id}: {e}")
            return ScoutingData()

        def roll(base_spread: tuple) -> int:
            base, spread = base_spread
            return base + self.rng.randrange(spread)

        return ScoutingData(
            profile_views=roll(SCOUTING_PROFILE_VIEWS),
            highlight_views=roll(SCOUTING_HIGHLIGHT_VIEWS),
            opportunity_matches=roll(SCOUTING_OPPORTUNITY_MATCHES),
        )
