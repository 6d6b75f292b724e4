"""
Auth service - registration, login and bearer-token sessions.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from passlib.context import CryptContext

from core.domain.models import User, UserCreate, Session, AuthResult
from core.domain.constants import (
    MIN_USERNAME_LENGTH, MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH,
    SESSION_TOKEN_BYTES, DEFAULT_SESSION_TTL_HOURS,
)
from core.domain.errors import AuthenticationError, ConflictError, ValidationError
from core.interfaces.repositories import IUserRepository, ISessionRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


class AuthService:
    """Service for account creation and session handling"""

    def __init__(
        self,
        user_repo: IUserRepository,
        session_repo: ISessionRepository,
        session_ttl_hours: int = DEFAULT_SESSION_TTL_HOURS,
    ):
        self.user_repo = user_repo
        self.session_repo = session_repo
        self.session_ttl = timedelta(hours=session_ttl_hours)

    def _validate_credentials(self, username: str, password: str) -> None:
        if not (MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH):
            raise ValidationError(
                f"Username must be {MIN_USERNAME_LENGTH}-{MAX_USERNAME_LENGTH} characters"
            )
        if not username.replace("_", "").replace(".", "").isalnum():
            raise ValidationError("Username may only contain letters, digits, '.' and '_'")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    async def register(
        self,
        username: str,
        password: str,
        full_name: Optional[str] = None,
        **profile,
    ) -> User:
        """Create an account. Usernames are unique."""
        username = username.strip()
        self._validate_credentials(username, password)

        if await self.user_repo.get_by_username(username):
            raise ConflictError("Username already taken")

        user = await self.user_repo.create(UserCreate(
            username=username,
            password_hash=hash_password(password),
            full_name=full_name,
            **profile,
        ))
        logger.info(f"[AUTH] Registered user {user.id} ({user.username})")
        return user

    async def login(self, username: str, password: str) -> AuthResult:
        """Check credentials and open a session"""
        user = await self.user_repo.get_by_username(username.strip())
        password_hash = await self.user_repo.get_password_hash(user.id) if user else None
        if not user or not password_hash or not verify_password(password, password_hash):
            logger.info(f"[AUTH] Failed login for '{username}'")
            raise AuthenticationError("Invalid credentials")

        now = datetime.now(timezone.utc)
        session = await self.session_repo.create(Session(
            token=secrets.token_urlsafe(SESSION_TOKEN_BYTES),
            user_id=user.id,
            created_at=now,
            expires_at=now + self.session_ttl,
        ))
        logger.info(f"[AUTH] User {user.id} logged in")
        return AuthResult(token=session.token, expires_at=session.expires_at, user=user)

    async def logout(self, token: str) -> None:
        await self.session_repo.delete(token)

    async def resolve(self, token: Optional[str]) -> Optional[int]:
        """User id behind a bearer token, or None for missing/unknown/expired tokens"""
        if not token:
            return None
        session = await self.session_repo.get(token)
        if not session:
            return None
        if session.expires_at <= datetime.now(timezone.utc):
            await self.session_repo.delete(token)
            return None
        return session.user_id

    async def purge_expired_sessions(self) -> int:
        removed = await self.session_repo.delete_expired(datetime.now(timezone.utc))
        if removed:
            logger.info(f"[AUTH] Purged {removed} expired sessions")
        return removed
