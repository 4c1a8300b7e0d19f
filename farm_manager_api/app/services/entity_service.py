"""
Generic entity service.

One :class:`EntityService` instance binds an :class:`EntityConfig`
(table name + field declarations) to a storage backend and exposes
the five operations used by UI collaborators.  Entity-specific
services subclass it to add lookups such as farmer search.

Ids are validated before any backend call.  Errors raised by the
backend are passed through unchanged; there are no retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from farm_manager_api.app.services import field_mapper
from farm_manager_api.app.services.field_mapper import Field
from farm_manager_api.app.storage.base import StorageBackend, parse_id

Record = Dict[str, Any]
WriteHook = Callable[[Record, Record, bool], None]


@dataclass(frozen=True)
class EntityConfig:
    """Declarative description of one entity.

    ``on_write`` hooks run after the UI record has been mapped and may
    add derived storage columns.  They receive ``(ui_record,
    storage_record, creating)``.  ``extra_columns`` are provider columns
    (such as ``CreatedOn``) requested from the remote store on top of
    the declared fields.
    """

    name: str
    table: str
    fields: Tuple[Field, ...]
    on_write: Tuple[WriteHook, ...] = field(default_factory=tuple)
    extra_columns: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def field_names(self) -> List[str]:
        names = field_mapper.project(self.fields)
        return names + [name for name in self.extra_columns if name not in names]


class EntityService:
    """CRUD facade over one storage backend."""

    def __init__(self, config: EntityConfig, backend: StorageBackend) -> None:
        self.config = config
        self.backend = backend
        self.logger = logging.getLogger(f"{__name__}.{config.name}")

    # ------------------------------------------------------------------
    # Mapping helpers
    # ------------------------------------------------------------------
    def to_ui(self, storage_record: Record) -> Record:
        return field_mapper.from_storage(storage_record, self.config.fields)

    def to_storage(self, ui_record: Record, *, creating: bool) -> Record:
        storage = field_mapper.to_storage(ui_record, self.config.fields, fill_defaults=creating)
        for hook in self.config.on_write:
            hook(ui_record, storage, creating)
        return storage

    def _parse_id(self, record_id: Any) -> int:
        return parse_id(record_id, self.config.name)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def get_all(self) -> List[Record]:
        """Return every record in UI shape; an empty table gives ``[]``."""
        records = await self.backend.list()
        return [self.to_ui(record) for record in records]

    async def get_by_id(self, record_id: Any) -> Record:
        """Return one record.

        Raises
        ------
        InvalidArgument
            ``record_id`` is not an integer.
        NotFound
            No record has that id.
        """
        rid = self._parse_id(record_id)
        record = await self.backend.get(rid)
        return self.to_ui(record)

    async def create(self, ui_record: Record) -> Record:
        """Create a record and return it with the ``Id`` the backend assigned."""
        stored = await self.backend.insert(self.to_storage(ui_record, creating=True))
        self.logger.info("Created %s %s", self.config.name, stored.get("Id"))
        return self.to_ui(stored)

    async def update(self, record_id: Any, ui_record: Record) -> Record:
        """Update a record from a full UI record.

        Only fields present in ``ui_record`` are sent.  The mock backend
        keeps the others; the remote backend expects them all.
        """
        rid = self._parse_id(record_id)
        stored = await self.backend.replace(rid, self.to_storage(ui_record, creating=False))
        self.logger.info("Updated %s %s", self.config.name, rid)
        return self.to_ui(stored)

    async def delete(self, record_id: Any) -> bool:
        """Delete a record.  A second delete of the same id raises ``NotFound``."""
        rid = self._parse_id(record_id)
        deleted = await self.backend.remove(rid)
        self.logger.info("Deleted %s %s", self.config.name, rid)
        return deleted

    async def find(self, predicate: Callable[[Record], bool]) -> List[Record]:
        """Return the records matching ``predicate``, filtered client-side."""
        return [record for record in await self.get_all() if predicate(record)]

