"""Client directory use cases"""

import logging
from typing import List, Optional
from src.app.repositories.entity_repository import ClientRepository
from src.domain.client import Client
from .dtos import SaveClientCommandDTO

logger = logging.getLogger(__name__)


class SaveClient:
    """
    Use Case: Create or update a client

    Business Rules:
    1. Name must be non-blank (enforced by SaveClientCommandDTO)
    2. Existing invoices keep their snapshot; editing a client never
       rewrites invoices
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, command: SaveClientCommandDTO) -> Optional[Client]:
        fields = command.model_dump(exclude_none=True)
        client = await self.client_repo.save(Client(**fields))
        if client is None:
            logger.error(f"Failed to save client {command.name}")
            return None
        logger.info(f"Saved client {client.id} ({client.name})")
        return client


class GetClient:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: str) -> Optional[Client]:
        return await self.client_repo.get(client_id)


class ListClients:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self) -> List[Client]:
        return await self.client_repo.list_all()


class DeleteClient:
    """
    Use Case: Delete a client

    Invoices that reference the client are left untouched and keep
    rendering from their own snapshot.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: str) -> bool:
        deleted = await self.client_repo.delete(client_id)
        if deleted:
            logger.info(f"Deleted client {client_id}")
        else:
            logger.error(f"Failed to delete client {client_id}")
        return deleted
