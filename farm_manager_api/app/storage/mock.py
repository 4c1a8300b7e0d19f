"""
In-memory storage backend with simulated latency.

The mock backend keeps an ordered list of storage records per
instance.  It is seeded once at construction from fixture data (one
JSON file per table, see :func:`load_seed`) and exposes the same async
contract as the remote backend, so services and routes can run
without network access.

Every call first awaits ``asyncio.sleep(delay)``; the mutation itself
is synchronous.  Concurrent writers are not guarded against: two
interleaved calls may observe each other's partial effects around the
sleep.  This is acceptable for local development and tests and is not
safe for a multi-client server.
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional

from farm_manager_api.app.core.errors import NotFound
from farm_manager_api.app.storage.base import StorageBackend, StorageRecord, parse_id

logger = logging.getLogger(__name__)

CREATED_FIELD = "CreatedOn"
UPDATED_FIELD = "ModifiedOn"

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def load_seed(table: str, data_dir: Optional[str] = None) -> List[StorageRecord]:
    """Load the fixture records for ``table``.

    Looks for ``<table>.json`` in ``data_dir`` (or the fixtures shipped
    with the package).  A missing file yields an empty list.  No schema
    validation is performed.
    """
    base = Path(data_dir) if data_dir else DATA_DIR
    path = base / f"{table}.json"
    if not path.exists():
        logger.warning("No seed data for %s at %s", table, path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    logger.debug("Loaded %d seed records for %s", len(records), table)
    return records


class MockBackend(StorageBackend):
    """Per-instance in-memory table."""

    def __init__(
        self,
        table: str,
        seed: Optional[Iterable[StorageRecord]] = None,
        delay: float = 0.3,
    ) -> None:
        self.table = table
        self.delay = delay
        self._records: List[StorageRecord] = copy.deepcopy(list(seed or []))

    async def _pause(self) -> None:
        await asyncio.sleep(self.delay)

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.get("Id") == record_id:
                return index
        raise NotFound(self.table, record_id)

    def _next_id(self) -> int:
        ids = [record["Id"] for record in self._records if isinstance(record.get("Id"), int)]
        return max(ids) + 1 if ids else 1

    async def list(self) -> List[StorageRecord]:
        await self._pause()
        return copy.deepcopy(self._records)

    async def get(self, record_id: Any) -> StorageRecord:
        rid = parse_id(record_id, self.table)
        await self._pause()
        return copy.deepcopy(self._records[self._index_of(rid)])

    async def insert(self, record: StorageRecord) -> StorageRecord:
        await self._pause()
        now = _utcnow()
        stored = copy.deepcopy(record)
        stored["Id"] = self._next_id()
        stored[CREATED_FIELD] = now
        stored[UPDATED_FIELD] = now
        self._records.append(stored)
        logger.debug("Created %s %s", self.table, stored["Id"])
        return copy.deepcopy(stored)

    async def replace(self, record_id: Any, record: StorageRecord) -> StorageRecord:
        rid = parse_id(record_id, self.table)
        await self._pause()
        index = self._index_of(rid)
        merged = {**self._records[index], **copy.deepcopy(record)}
        merged["Id"] = rid
        merged[UPDATED_FIELD] = _utcnow()
        self._records[index] = merged
        logger.debug("Updated %s %s", self.table, rid)
        return copy.deepcopy(merged)

    async def remove(self, record_id: Any) -> bool:
        rid = parse_id(record_id, self.table)
        await self._pause()
        index = self._index_of(rid)
        del self._records[index]
        logger.debug("Deleted %s %s", self.table, rid)
        return True
