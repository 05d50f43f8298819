from .entity_store import EntityStore, Collection, BUSINESS_KEY
from .entity_repository import (
    EntityRepository,
    InvoiceRepository,
    ClientRepository,
    ProductRepository,
    BusinessProfileRepository,
)

__all__ = [
    "EntityStore",
    "Collection",
    "BUSINESS_KEY",
    "EntityRepository",
    "InvoiceRepository",
    "ClientRepository",
    "ProductRepository",
    "BusinessProfileRepository",
]
