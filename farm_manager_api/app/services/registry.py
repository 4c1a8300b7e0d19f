"""
Service registry.

Builds one service per entity, each bound to its own storage backend.
The backend kind is chosen once, explicitly, from
``Settings.storage_backend``; nothing reads the environment after
construction.  Tests build a registry around whatever backends they
like via :meth:`ServiceRegistry.from_backends`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from farm_manager_api.app.core.config import Settings
from farm_manager_api.app.core.records_client import RecordsClient
from farm_manager_api.app.services.dashboard_service import DashboardService
from farm_manager_api.app.services.entities import ALL_ENTITIES, CROP, FARM, TRANSACTION
from farm_manager_api.app.services.entity_service import EntityService
from farm_manager_api.app.services.farmer_service import FarmerService
from farm_manager_api.app.services.subtask_service import SubtaskService
from farm_manager_api.app.services.task_service import TaskService
from farm_manager_api.app.services.weather_service import WeatherService
from farm_manager_api.app.storage import MockBackend, RemoteBackend, StorageBackend, load_seed

logger = logging.getLogger(__name__)

BACKEND_KINDS = ("mock", "remote")


@dataclass
class ServiceRegistry:
    """One service per entity plus the dashboard aggregator."""

    farmers: FarmerService
    farms: EntityService
    crops: EntityService
    tasks: TaskService
    subtasks: SubtaskService
    transactions: EntityService
    weather: WeatherService

    @property
    def dashboard(self) -> DashboardService:
        return DashboardService(self.crops, self.tasks, self.transactions)

    @classmethod
    def from_backends(cls, backends: Dict[str, StorageBackend]) -> "ServiceRegistry":
        """Build the registry from a ``{table: backend}`` mapping."""
        return cls(
            farmers=FarmerService(backends["farmer_c"]),
            farms=EntityService(FARM, backends["farm_c"]),
            crops=EntityService(CROP, backends["crop_c"]),
            tasks=TaskService(backends["task_c"]),
            subtasks=SubtaskService(backends["subtask_c"]),
            transactions=EntityService(TRANSACTION, backends["transaction_c"]),
            weather=WeatherService(backends["weather_c"]),
        )


def mock_backends(
    seeds: Optional[Dict[str, list]] = None,
    delay: float = 0.0,
    data_dir: Optional[str] = None,
) -> Dict[str, StorageBackend]:
    """Create one mock backend per entity.

    ``seeds`` maps table names to fixture records; tables it does not
    name are seeded from the JSON fixtures.  Each backend owns its own
    copy of the data.
    """
    backends: Dict[str, StorageBackend] = {}
    for config in ALL_ENTITIES:
        if seeds is not None and config.table in seeds:
            seed = seeds[config.table]
        else:
            seed = load_seed(config.table, data_dir)
        backends[config.table] = MockBackend(config.table, seed=seed, delay=delay)
    return backends


def remote_backends(client: RecordsClient) -> Dict[str, StorageBackend]:
    """Create one remote backend per entity sharing ``client``."""
    return {
        config.table: RemoteBackend(client, config.table, config.field_names)
        for config in ALL_ENTITIES
    }


def _records_client(settings: Settings) -> RecordsClient:
    return RecordsClient(
        base_url=settings.records_api_url,
        project_id=settings.records_project_id,
        public_key=settings.records_public_key,
        timeout=settings.records_timeout,
    )


def build_registry(
    settings: Settings,
    client_factory: Callable[[Settings], RecordsClient] = _records_client,
) -> ServiceRegistry:
    """Build the registry for the backend named in ``settings``."""
    kind = settings.storage_backend
    if kind not in BACKEND_KINDS:
        raise ValueError(f"Unknown STORAGE_BACKEND {kind!r}; expected one of {BACKEND_KINDS}")
    if kind == "remote":
        if not settings.records_project_id:
            logger.warning("RECORDS_PROJECT_ID is empty; remote calls will likely be rejected")
        backends = remote_backends(client_factory(settings))
    else:
        backends = mock_backends(
            delay=settings.mock_delay_ms / 1000.0,
            data_dir=settings.mock_data_dir or None,
        )
    logger.info("Using %s storage backend", kind)
    return ServiceRegistry.from_backends(backends)


__all__ = [
    "ServiceRegistry",
    "build_registry",
    "mock_backends",
    "remote_backends",
]
