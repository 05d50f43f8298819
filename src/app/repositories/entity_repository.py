"""Typed entity repositories

Convert Entity Store records to domain models and back.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar
from pydantic import ValidationError
from src.app.repositories.entity_store import EntityStore, Collection, Record
from src.domain.base import BaseModel
from src.domain.business import Business
from src.domain.calculations import recompute_invoice
from src.domain.client import Client
from src.domain.invoice import Invoice
from src.domain.product import Product

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class EntityRepository(Generic[T]):
    """
    Repository over one entity collection

    Records that fail validation are logged and skipped so a single bad
    record never hides the rest of the collection.
    """

    def __init__(self, store: EntityStore, collection: Collection, model: Type[T]):
        self.store = store
        self.collection = collection
        self.model = model

    def _to_entity(self, record: Record) -> Optional[T]:
        try:
            return self.model.from_record(record)
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid {self.collection.value} record "
                f"{record.get('id') if isinstance(record, dict) else record!r}: {e}"
            )
            return None

    async def list_all(self) -> List[T]:
        records = await self.store.get_all(self.collection)
        entities = [self._to_entity(record) for record in records]
        return [entity for entity in entities if entity is not None]

    async def get(self, entity_id: str) -> Optional[T]:
        record = await self.store.get_by_id(self.collection, entity_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def save(self, entity: T) -> Optional[T]:
        """
        Persist an entity (insert or replace by id)

        Returns:
            The entity as persisted, or None when the store reports a write failure
        """
        if not await self.store.upsert(self.collection, entity.to_record()):
            return None
        return entity

    async def delete(self, entity_id: str) -> bool:
        return await self.store.delete(self.collection, entity_id)


class InvoiceRepository(EntityRepository[Invoice]):
    """Invoice repository; derived amounts are recomputed before every write"""

    def __init__(self, store: EntityStore):
        super().__init__(store, Collection.INVOICES, Invoice)

    async def save(self, entity: Invoice) -> Optional[Invoice]:
        return await super().save(recompute_invoice(entity))


class ClientRepository(EntityRepository[Client]):
    def __init__(self, store: EntityStore):
        super().__init__(store, Collection.CLIENTS, Client)


class ProductRepository(EntityRepository[Product]):
    def __init__(self, store: EntityStore):
        super().__init__(store, Collection.PRODUCTS, Product)


class BusinessProfileRepository:
    """Repository for the singleton business profile"""

    def __init__(self, store: EntityStore):
        self.store = store

    async def get(self) -> Optional[Business]:
        record = await self.store.get_business()
        if record is None:
            return None
        try:
            return Business.from_record(record)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid business profile: {e}")
            return None

    async def save(self, business: Business) -> Optional[Business]:
        if not await self.store.set_business(business.to_record()):
            return None
        return business
