"""Subtask service: generic CRUD plus lookup by parent task."""

from __future__ import annotations

from typing import Any, List

from farm_manager_api.app.services.entities import SUBTASK
from farm_manager_api.app.services.entity_service import EntityService, Record
from farm_manager_api.app.storage.base import StorageBackend, parse_id


class SubtaskService(EntityService):
    """Service for subtasks.  Deleting a task does not cascade here."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(SUBTASK, backend)

    async def get_by_task_id(self, task_id: Any) -> List[Record]:
        """Return the subtasks owned by ``task_id`` in backend order."""
        tid = parse_id(task_id, "task")
        return await self.find(lambda subtask: subtask.get("taskId") == tid)
