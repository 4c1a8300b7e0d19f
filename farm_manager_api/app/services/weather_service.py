"""
Weather service.

Weather rows are stored one per observation: the current conditions
plus the forecast for one day.  The newest row (by the backend's
``CreatedOn`` stamp, requested explicitly from the remote store,
falling back to ``Id``) provides the current snapshot and the newest
``days`` rows make up the forecast.  An empty table yields a fixed
default snapshot so the dashboard always has something to render;
backend errors are not masked.
"""

from __future__ import annotations

from typing import Any, Dict, List

from farm_manager_api.app.services.entities import WEATHER
from farm_manager_api.app.services.entity_service import EntityService, Record
from farm_manager_api.app.storage.base import StorageBackend

DEFAULT_LOCATION = "Farm Location"


def default_snapshot(days: int = 1, today: bool = False) -> Dict[str, Any]:
    """Fallback snapshot for an empty table.

    The current-conditions view labels its single day ``Today``; a
    forecast numbers its days from ``Day 1``.
    """
    forecast = [
        {"day": "Today" if today else f"Day {i + 1}", "condition": "Sunny", "high": 25 - i, "low": 18 - i}
        for i in range(days)
    ]
    return {
        "location": DEFAULT_LOCATION,
        "temperature": 22,
        "condition": "Sunny",
        "humidity": 65,
        "windSpeed": 8,
        "visibility": 10,
        "alerts": [],
        "forecast": forecast,
    }


class WeatherService(EntityService):
    """Service for weather observations."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(WEATHER, backend)

    async def _newest(self, limit: int) -> List[Record]:
        raw = await self.backend.list()
        raw.sort(key=lambda row: (str(row.get("CreatedOn") or ""), row.get("Id") or 0), reverse=True)
        return [self.to_ui(row) for row in raw[:limit]]

    @staticmethod
    def _snapshot(rows: List[Record]) -> Dict[str, Any]:
        newest = rows[0]
        return {
            "location": newest.get("location"),
            "temperature": newest.get("temperature"),
            "condition": newest.get("condition"),
            "humidity": newest.get("humidity"),
            "windSpeed": newest.get("windSpeed"),
            "visibility": newest.get("visibility"),
            "alerts": newest.get("alerts") or [],
            "forecast": [
                {
                    "day": row.get("forecastDay"),
                    "condition": row.get("forecastCondition"),
                    "high": row.get("forecastHigh"),
                    "low": row.get("forecastLow"),
                }
                for row in rows
            ],
        }

    async def get_current(self) -> Dict[str, Any]:
        """Return the latest conditions with a one-day forecast."""
        rows = await self._newest(1)
        if not rows:
            return default_snapshot(1, today=True)
        return self._snapshot(rows)

    async def get_forecast(self, days: int = 3) -> Dict[str, Any]:
        """Return the latest conditions with up to ``days`` forecast entries."""
        days = max(1, int(days))
        rows = await self._newest(days)
        if not rows:
            return default_snapshot(days)
        return self._snapshot(rows)
