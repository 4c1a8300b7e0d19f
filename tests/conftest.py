"""Pytest configuration and fixtures for Farm Manager tests.

Provides mock-backed service registries, an HTTP client bound to the
ASGI app and a fake ``requests`` session for the records API client.
"""

import copy
import json
from typing import Any, AsyncGenerator, Dict, List, Optional

import pytest
import pytest_asyncio
import requests
from httpx import ASGITransport, AsyncClient

from farm_manager_api.app.core.records_client import RecordsClient
from farm_manager_api.app.main import create_app
from farm_manager_api.app.services.registry import ServiceRegistry, mock_backends


# ── Seed data ────────────────────────────────────────────────────

CROP_SEED = [
    {"Id": i, "Name": name, "name_c": name, "variety_c": "Standard", "planted_date_c": "2024-03-01",
     "area_c": 10.0 * i, "status_c": status, "expected_harvest_c": None, "farm_id_c": {"Id": 1, "Name": "Home"}}
    for i, (name, status) in enumerate(
        [("Wheat", "growing"), ("Barley", "planted"), ("Oats", "growing"), ("Rye", "ready"), ("Peas", "harvested")],
        start=1,
    )
]

FARMER_SEED = [
    {"Id": 1, "Name": "John Smith", "name_c": "John Smith", "email_c": "john@example.com",
     "farm_name_c": "Green Valley", "primary_crops_c": "Corn, Wheat", "status_c": "active",
     "total_farms_c": 2, "active_crops_c": 2, "pending_tasks_c": 1},
    {"Id": 2, "Name": "Maria Garcia", "name_c": "Maria Garcia", "email_c": "maria@orchards.test",
     "farm_name_c": "Sunrise Orchards", "primary_crops_c": "Apples,Pears", "status_c": "active"},
]

TASK_SEED = [
    {"Id": 1, "Name": "Irrigate", "title_c": "Irrigate", "due_date_c": "2024-06-01T08:00:00Z",
     "priority_c": "high", "completed_c": False, "completed_at_c": None, "farm_id_c": 1,
     "crop_id_c": {"Id": 1}, "internal_external_c": "internal"},
    {"Id": 2, "Name": "Fertilize", "title_c": "Fertilize", "due_date_c": "2024-06-20T08:00:00Z",
     "priority_c": "medium", "completed_c": True, "completed_at_c": "2024-06-02T10:00:00Z",
     "farm_id_c": 1, "crop_id_c": 2, "internal_external_c": None},
    {"Id": 3, "Name": "Repair fence", "title_c": "Repair fence", "due_date_c": "2024-07-15T08:00:00Z",
     "priority_c": "low", "completed_c": False, "completed_at_c": None, "farm_id_c": 1,
     "crop_id_c": None, "internal_external_c": "external"},
]

SUBTASK_SEED = [
    {"Id": 1, "Name": "Open valves", "name_c": "Open valves", "task_id_c": {"Id": 1, "Name": "Irrigate"}, "completed_c": True},
    {"Id": 2, "Name": "Log usage", "name_c": "Log usage", "task_id_c": 1, "completed_c": False},
    {"Id": 3, "Name": "Buy posts", "name_c": "Buy posts", "task_id_c": 3, "completed_c": False},
]

TRANSACTION_SEED = [
    {"Id": 1, "type_c": "expense", "category_c": "seeds", "amount_c": 500.0, "description_c": "Seed",
     "date_c": "2024-06-03T00:00:00Z", "farm_id_c": 1},
    {"Id": 2, "type_c": "income", "category_c": "crop_sales", "amount_c": 2000.0, "description_c": "Sale",
     "date_c": "2024-06-10T00:00:00Z", "farm_id_c": 1},
    {"Id": 3, "type_c": "expense", "category_c": "fuel", "amount_c": 150.0, "description_c": "Diesel",
     "date_c": "2024-05-28T00:00:00Z", "farm_id_c": {"Id": 1}},
]

SEEDS = {
    "farmer_c": FARMER_SEED,
    "farm_c": [],
    "crop_c": CROP_SEED,
    "task_c": TASK_SEED,
    "subtask_c": SUBTASK_SEED,
    "transaction_c": TRANSACTION_SEED,
    "weather_c": [],
}


@pytest.fixture
def seeds() -> Dict[str, List[Dict[str, Any]]]:
    return copy.deepcopy(SEEDS)


@pytest.fixture
def registry(seeds) -> ServiceRegistry:
    """Registry with zero-latency mock backends seeded from ``SEEDS``."""
    return ServiceRegistry.from_backends(mock_backends(seeds=seeds, delay=0))


@pytest_asyncio.fixture
async def client(registry) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app serving ``registry``."""
    app = create_app(registry)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http


# ── Fake records API ─────────────────────────────────────────────

class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Records requests and replays queued responses (or raises queued errors)."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.queue: List[Any] = []

    def respond(self, payload: Any = None, status_code: int = 200) -> None:
        self.queue.append(FakeResponse(status_code, payload))

    def fail(self, exc: Exception) -> None:
        self.queue.append(exc)

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout})
        if not self.queue:
            raise AssertionError(f"Unexpected request {method} {url}")
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def records_client(fake_session) -> RecordsClient:
    return RecordsClient(
        base_url="https://records.test/v1/",
        project_id="proj-123",
        public_key="pk-abc",
        timeout=5,
        session=fake_session,  # type: ignore[arg-type]
    )


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
