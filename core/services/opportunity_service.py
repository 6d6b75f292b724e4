"""
Opportunity service - job, trial and training listings.
"""

import logging
from typing import Optional, List

from core.domain.models import Opportunity, OpportunityCreate
from core.domain.errors import NotFoundError, ValidationError
from core.interfaces.repositories import IOpportunityRepository

logger = logging.getLogger(__name__)


class OpportunityService:
    """Service for opportunity listings"""

    def __init__(self, opportunity_repo: IOpportunityRepository):
        self.opportunity_repo = opportunity_repo

    async def get_opportunities(self, category: Optional[str] = None) -> List[Opportunity]:
        """Listings newest first, optionally for one category"""
        return await self.opportunity_repo.get_all(category)

    async def get_opportunity(self, opportunity_id: int) -> Opportunity:
        opportunity = await self.opportunity_repo.get_by_id(opportunity_id)
        if not opportunity:
            raise NotFoundError("Opportunity not found")
        return opportunity

    async def create_opportunity(self, data: OpportunityCreate) -> Opportunity:
        if not data.title.strip():
            raise ValidationError("Opportunity title cannot be empty")
        opportunity = await self.opportunity_repo.create(data)
        logger.info(f"[OPPORTUNITIES] Created opportunity {opportunity.id} at {opportunity.club}")
        return opportunity
