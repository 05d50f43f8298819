"""Entity Store Interface

Defines the contract for local key-value persistence of entity collections.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class Collection(str, Enum):
    """Keyed entity collections, each stored as a JSON array"""
    INVOICES = "invoices"
    CLIENTS = "clients"
    PRODUCTS = "products"


BUSINESS_KEY = "business"


class EntityStore(ABC):
    """
    Store interface for entity records

    Records are plain JSON dicts keyed by their "id" field. Implementations
    never raise on storage failures: reads degrade to an empty/absent value
    and writes report False.
    """

    @abstractmethod
    async def get_all(self, collection: Collection) -> List[Record]:
        """
        Retrieve every record of a collection in stored order

        Args:
            collection: Collection to read

        Returns:
            List of records (empty when the collection is missing or unreadable)
        """
        pass

    @abstractmethod
    async def get_by_id(self, collection: Collection, record_id: str) -> Optional[Record]:
        """
        Retrieve one record by id

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, collection: Collection, record: Record) -> bool:
        """
        Insert the record, or replace it in place when its id is known

        Returns:
            True if written, False on storage failure
        """
        pass

    @abstractmethod
    async def delete(self, collection: Collection, record_id: str) -> bool:
        """
        Hard-delete a record; unknown ids are a no-op

        Returns:
            True if the collection was written, False on storage failure
        """
        pass

    @abstractmethod
    async def get_business(self) -> Optional[Record]:
        """
        Retrieve the singleton business profile

        Returns:
            Business record if set, None otherwise
        """
        pass

    @abstractmethod
    async def set_business(self, record: Record) -> bool:
        """
        Replace the singleton business profile

        Returns:
            True if written, False on storage failure
        """
        pass
