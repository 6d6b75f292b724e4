"""
Event service - calendar entries (showcases, tournaments, workshops).
"""

import logging
from typing import Optional, List

from core.domain.models import Event, EventCreate
from core.domain.errors import NotFoundError, ValidationError
from core.interfaces.repositories import IEventRepository

logger = logging.getLogger(__name__)


class EventService:
    """Service for event-related operations"""

    def __init__(self, event_repo: IEventRepository):
        self.event_repo = event_repo

    async def get_events(self, event_type: Optional[str] = None) -> List[Event]:
        """Events by date, soonest first"""
        return await self.event_repo.get_all(event_type)

    async def get_event(self, event_id: int) -> Event:
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    async def create_event(self, event_data: EventCreate) -> Event:
        if not event_data.title.strip():
            raise ValidationError("Event title cannot be empty")
        event = await self.event_repo.create(event_data)
        logger.info(f"[EVENTS] Created event {event.id} '{event.title}' on {event.date.date()}")
        return event
