"""Business profile use cases"""

import logging
from typing import Optional
from src.app.repositories.entity_repository import BusinessProfileRepository
from src.domain.business import Business

logger = logging.getLogger(__name__)


class GetBusinessProfile:
    """Use Case: Load the business profile (None until one is saved)"""

    def __init__(self, business_repo: BusinessProfileRepository):
        self.business_repo = business_repo

    async def execute(self) -> Optional[Business]:
        return await self.business_repo.get()


class SaveBusinessProfile:
    """
    Use Case: Replace the business profile

    The profile is a singleton; saving overwrites the previous one.
    """

    def __init__(self, business_repo: BusinessProfileRepository):
        self.business_repo = business_repo

    async def execute(self, business: Business) -> Optional[Business]:
        saved = await self.business_repo.save(business)
        if saved is None:
            logger.error(f"Failed to save business profile {business.name!r}")
            return None
        logger.info(f"Saved business profile {saved.name!r} ({saved.currency})")
        return saved
