"""JSON File Entity Store Implementation

Implements the Entity Store on a local directory of JSON files,
one file per key:

    {data_dir}/invoices.json   JSON array of invoice records
    {data_dir}/clients.json    JSON array of client records
    {data_dir}/products.json   JSON array of product records
    {data_dir}/business.json   JSON object (singleton profile)

Writes replace the whole collection (read, modify, write back). The
read-modify-write is not locked, so two in-flight saves to the same
collection are last-write-wins. Only the temp write and rename of one key
are serialized by a per-key asyncio lock.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import aiofiles

from src.app.repositories.entity_store import EntityStore, Collection, Record, BUSINESS_KEY

logger = logging.getLogger(__name__)


class JsonFileEntityStore(EntityStore):
    """
    JSON file implementation of EntityStore

    Failures are logged and degrade to empty/absent values instead of
    propagating to callers.
    """

    def __init__(self, data_dir: Union[str, Path]):
        """
        Initialize the store

        Args:
            data_dir: Directory holding the collection files (created on first write)
        """
        self.data_dir = Path(data_dir)
        self.locks: Dict[str, asyncio.Lock] = {}

    def _get_lock(self, key: str) -> asyncio.Lock:
        if key not in self.locks:
            self.locks[key] = asyncio.Lock()
        return self.locks[key]

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    async def _read(self, key: str) -> Optional[Any]:
        """Read and decode one key; None when missing or unreadable"""
        path = self._path(key)
        if not path.exists():
            return None

        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                content = await f.read()
            return json.loads(content) if content.strip() else None
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {key} from {path}: {e}")
            return None

    async def _write(self, key: str, value: Any) -> bool:
        """Encode and write one key via a temp file and rename"""
        path = self._path(key)
        temp_path = path.with_name(f"{path.name}.tmp")

        async with self._get_lock(key):
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                    await f.write(json.dumps(value, indent=2, ensure_ascii=False))
                os.replace(temp_path, path)
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error saving {key} to {path}: {e}")
                return False

    async def get_all(self, collection: Collection) -> List[Record]:
        value = await self._read(collection.value)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.error(
                f"Error getting {collection.value}: expected a JSON array, "
                f"found {type(value).__name__}"
            )
            return []
        return value

    async def get_by_id(self, collection: Collection, record_id: str) -> Optional[Record]:
        for record in await self.get_all(collection):
            if isinstance(record, dict) and record.get("id") == record_id:
                return record
        return None

    async def upsert(self, collection: Collection, record: Record) -> bool:
        records = await self.get_all(collection)
        index = next(
            (
                i for i, existing in enumerate(records)
                if isinstance(existing, dict) and existing.get("id") == record.get("id")
            ),
            None,
        )

        if index is None:
            records.append(record)
        else:
            records[index] = record

        saved = await self._write(collection.value, records)
        if saved:
            logger.debug(f"Saved {collection.value} record {record.get('id')}")
        return saved

    async def delete(self, collection: Collection, record_id: str) -> bool:
        records = await self.get_all(collection)
        remaining = [
            record for record in records
            if not (isinstance(record, dict) and record.get("id") == record_id)
        ]

        saved = await self._write(collection.value, remaining)
        if saved and len(remaining) != len(records):
            logger.info(f"Deleted {collection.value} record {record_id}")
        return saved

    async def get_business(self) -> Optional[Record]:
        value = await self._read(BUSINESS_KEY)
        if value is not None and not isinstance(value, dict):
            logger.error(
                f"Error getting business: expected a JSON object, found {type(value).__name__}"
            )
            return None
        return value

    async def set_business(self, record: Record) -> bool:
        return await self._write(BUSINESS_KEY, record)
