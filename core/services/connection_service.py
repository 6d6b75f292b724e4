"""
Connection service - the social graph.

A connection row is a directed request (requester -> receiver). It becomes an
undirected network edge once the receiver accepts it:

    pending --accept--> accepted
    pending --decline--> declined

accepted and declined are terminal.
"""

import logging
from typing import Optional, List

from core.domain.models import (
    Connection, ConnectionStatus, User, UserSummary,
    UserConnection, SuggestedConnection,
)
from core.domain.constants import SUGGESTED_PAGE_SIZE
from core.domain.errors import (
    ConflictError, NotFoundError, PermissionDenied, ValidationError,
)
from core.interfaces.repositories import IConnectionRepository, IUserRepository

logger = logging.getLogger(__name__)


class ConnectionService:
    """Service for connection requests and network views"""

    def __init__(
        self,
        connection_repo: IConnectionRepository,
        user_repo: IUserRepository,
        suggested_page_size: int = SUGGESTED_PAGE_SIZE,
    ):
        self.connection_repo = connection_repo
        self.user_repo = user_repo
        self.suggested_page_size = suggested_page_size

    async def _as_user_connections(self, rows: List[Connection], user_id: int) -> List[UserConnection]:
        """Pair each row with the other party, resolved relative to user_id"""
        others = {u.id: u for u in await self.user_repo.get_by_ids({r.other_party(user_id) for r in rows})}
        result = []
        for row in rows:
            other: Optional[User] = others.get(row.other_party(user_id))
            if not other:
                logger.warning(f"[CONNECTIONS] Connection {row.id} points at missing user {row.other_party(user_id)}")
                continue
            result.append(UserConnection(id=row.id, status=row.status, user=UserSummary.from_user(other)))
        return result

    # === VIEWS ===

    async def get_connections(self, user_id: int) -> List[UserConnection]:
        """Established network: accepted rows where the user is on either side"""
        rows = await self.connection_repo.get_user_connections(user_id, ConnectionStatus.ACCEPTED)
        return await self._as_user_connections(rows, user_id)

    async def get_pending_connections(self, user_id: int) -> List[UserConnection]:
        """Requests waiting for this user's answer"""
        rows = await self.connection_repo.get_user_connections(user_id, ConnectionStatus.PENDING)
        incoming = [r for r in rows if r.receiver_id == user_id]
        return await self._as_user_connections(incoming, user_id)

    async def get_sent_requests(self, user_id: int) -> List[UserConnection]:
        """Requests this user sent that are still unanswered"""
        rows = await self.connection_repo.get_user_connections(user_id, ConnectionStatus.PENDING)
        outgoing = [r for r in rows if r.requester_id == user_id]
        return await self._as_user_connections(outgoing, user_id)

    async def get_connection_status(self, user_id: int, other_id: int) -> Optional[Connection]:
        """The row between two users, in either direction, if any"""
        return await self.connection_repo.get_between(user_id, other_id)

    async def get_suggested_connections(
        self,
        user_id: int,
        limit: Optional[int] = None,
    ) -> List[SuggestedConnection]:
        """
        People the user has no connection row with (any status), newest first.
        Suggestions are non-critical: storage failures give an empty list.
        """
        if limit is None:
            limit = self.suggested_page_size
        if limit <= 0:
            return []
        try:
            if not await self.user_repo.get_by_id(user_id):
                return []
            rows = await self.connection_repo.get_user_connections(user_id)
            exclude = {row.other_party(user_id) for row in rows}
            exclude.add(user_id)
            users = await self.user_repo.list_excluding(exclude, limit)
        except Exception as e:
            logger.error(f"[CONNECTIONS] Failed to load suggestions for {user_id}: {e}")
            return []
        return [SuggestedConnection(user=UserSummary.from_user(u)) for u in users[:limit]]

    # === WRITES ===

    async def request_connection(self, requester_id: int, receiver_id: int) -> Connection:
        """Send a connection request. One row per pair of users, whatever its status."""
        if requester_id == receiver_id:
            raise ValidationError("You cannot connect with yourself")
        if not await self.user_repo.get_by_id(receiver_id):
            raise NotFoundError("Target user not found")

        existing = await self.connection_repo.get_between(requester_id, receiver_id)
        if existing:
            raise ConflictError(f"Connection already exists ({existing.status.value})")

        connection = await self.connection_repo.create(requester_id, receiver_id)
        logger.info(f"[CONNECTIONS] {requester_id} -> {receiver_id} requested (connection {connection.id})")
        return connection

    async def accept(self, connection_id: int, actor_id: int) -> Connection:
        return await self._transition(connection_id, actor_id, ConnectionStatus.ACCEPTED)

    async def decline(self, connection_id: int, actor_id: int) -> Connection:
        return await self._transition(connection_id, actor_id, ConnectionStatus.DECLINED)

    async def _transition(self, connection_id: int, actor_id: int, target: ConnectionStatus) -> Connection:
        """
        Move a pending row to a terminal status. Only the receiver may answer.
        Repeating the same answer returns the row unchanged; changing a terminal
        answer is a conflict.
        """
        connection = await self.connection_repo.get_by_id(connection_id)
        if not connection:
            raise NotFoundError("Connection not found")
        if connection.receiver_id != actor_id:
            raise PermissionDenied("Only the receiver can answer a connection request")
        if connection.status == target:
            return connection
        if connection.status != ConnectionStatus.PENDING:
            raise ConflictError(f"Connection is already {connection.status.value}")

        updated = await self.connection_repo.update_status(connection_id, target)
        if not updated:
            raise NotFoundError("Connection not found")
        logger.info(f"[CONNECTIONS] Connection {connection_id} {target.value} by {actor_id}")
        return updated
