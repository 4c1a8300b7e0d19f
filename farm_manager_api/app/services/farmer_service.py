"""Farmer service: generic CRUD plus free-text search."""

from __future__ import annotations

from typing import List

from farm_manager_api.app.services.entities import FARMER
from farm_manager_api.app.services.entity_service import EntityService, Record
from farm_manager_api.app.storage.base import StorageBackend

SEARCH_FIELDS = ("name", "email", "farmName")


class FarmerService(EntityService):
    """Service for farmer records."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(FARMER, backend)

    async def search(self, query: str) -> List[Record]:
        """Return farmers whose name, email, farm name or a primary crop
        contains ``query`` (case-insensitive).  A blank query matches all.
        """
        term = (query or "").strip().lower()
        if not term:
            return await self.get_all()

        def matches(farmer: Record) -> bool:
            for key in SEARCH_FIELDS:
                value = farmer.get(key)
                if value and term in str(value).lower():
                    return True
            return any(term in crop.lower() for crop in farmer.get("primaryCrops") or [])

        return await self.find(matches)
