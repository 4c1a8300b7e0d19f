"""
Storage backend backed by the hosted record store.

Each operation is a single request through
:class:`~farm_manager_api.app.core.records_client.RecordsClient`,
executed in a worker thread because the client is blocking.  Record
ordering of :meth:`RemoteBackend.list` is whatever the provider
returns.

``replace`` sends exactly the record it is given: the provider
overwrites the named columns and the caller must resend every field
it wants to keep consistent.  This differs from the mock backend,
which merges.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Sequence

from farm_manager_api.app.core.errors import RequestFailed
from farm_manager_api.app.core.records_client import RecordsClient
from farm_manager_api.app.storage import results
from farm_manager_api.app.storage.base import StorageBackend, StorageRecord, parse_id


class RemoteBackend(StorageBackend):
    """Remote table accessed through the records API."""

    def __init__(self, client: RecordsClient, table: str, field_names: Sequence[str]) -> None:
        self.client = client
        self.table = table
        self.field_names = list(field_names)

    def _selector(self) -> dict:
        return {"fields": [{"field": {"Name": name}} for name in self.field_names]}

    def _first_record(self, succeeded: List[dict], action: str) -> StorageRecord:
        data = succeeded[0].get("data")
        if not data:
            raise RequestFailed(f"No {self.table} record returned by {action}")
        return data

    async def list(self) -> List[StorageRecord]:
        response = await asyncio.to_thread(self.client.fetch_records, self.table, self._selector())
        return results.unwrap_list(response, self.table)

    async def get(self, record_id: Any) -> StorageRecord:
        rid = parse_id(record_id, self.table)
        response = await asyncio.to_thread(
            self.client.get_record_by_id, self.table, rid, self._selector()
        )
        return results.unwrap_single(response, self.table, rid)

    async def insert(self, record: StorageRecord) -> StorageRecord:
        params = {"records": [dict(record)]}
        response = await asyncio.to_thread(self.client.create_records, self.table, params)
        succeeded = results.unwrap_batch(response, self.table, "create")
        return self._first_record(succeeded, "create")

    async def replace(self, record_id: Any, record: StorageRecord) -> StorageRecord:
        rid = parse_id(record_id, self.table)
        params = {"records": [{**record, "Id": rid}]}
        response = await asyncio.to_thread(self.client.update_records, self.table, params)
        succeeded = results.unwrap_batch(response, self.table, "update", [rid])
        return self._first_record(succeeded, "update")

    async def remove(self, record_id: Any) -> bool:
        rid = parse_id(record_id, self.table)
        params = {"RecordIds": [rid]}
        response = await asyncio.to_thread(self.client.delete_records, self.table, params)
        results.unwrap_batch(response, self.table, "delete", [rid])
        return True
