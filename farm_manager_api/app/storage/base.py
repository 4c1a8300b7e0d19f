"""
Storage backend contract.

Every backend exposes the same four asynchronous operations over
storage-shaped records (``dict`` with an integer ``Id``).  Backends
raise the exceptions from :mod:`farm_manager_api.app.core.errors`;
they never return ``None`` or ``False`` to signal a missing record.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, List

from farm_manager_api.app.core.errors import InvalidArgument

StorageRecord = Dict[str, Any]


def parse_id(value: Any, label: str = "record") -> int:
    """Return ``value`` as an integer id or raise :class:`InvalidArgument`.

    Integers and integer strings (surrounding whitespace allowed) are
    accepted.  Booleans, fractional floats and anything else are not.
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid {label} ID: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidArgument(f"Invalid {label} ID: {value!r}")


class StorageBackend(abc.ABC):
    """Abstract record store for one entity table."""

    table: str

    @abc.abstractmethod
    async def list(self) -> List[StorageRecord]:
        """Return every record.  Order is only guaranteed by the mock backend."""

    @abc.abstractmethod
    async def get(self, record_id: Any) -> StorageRecord:
        """Return one record or raise ``NotFound``/``InvalidArgument``."""

    @abc.abstractmethod
    async def insert(self, record: StorageRecord) -> StorageRecord:
        """Store a new record and return it with its assigned ``Id``."""

    @abc.abstractmethod
    async def replace(self, record_id: Any, record: StorageRecord) -> StorageRecord:
        """Overwrite the named fields of an existing record.

        The mock backend merges ``record`` into the stored one, keeping
        fields that are not named.  The remote backend sends ``record``
        as-is and the provider expects it to be complete.
        """

    @abc.abstractmethod
    async def remove(self, record_id: Any) -> bool:
        """Delete a record; returns ``True`` or raises ``NotFound``."""
