"""Task service: generic CRUD plus completion toggling."""

from __future__ import annotations

from typing import Any

from farm_manager_api.app.services.entities import TASK, utcnow_iso
from farm_manager_api.app.services.entity_service import EntityService, Record
from farm_manager_api.app.storage.base import StorageBackend


class TaskService(EntityService):
    """Service for farm tasks.

    ``completedAt`` is kept in step with ``completed`` on every write by
    the task's write hook: it is stamped when a task becomes completed
    and cleared when it is reopened.
    """

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(TASK, backend)

    async def update(self, task_id: Any, ui_record: Record) -> Record:
        """Update a task, keeping the stored ``completedAt`` of a task that
        was already completed when the update does not carry one.
        """
        if ui_record.get("completed") and not ui_record.get("completedAt"):
            current = await self.get_by_id(task_id)
            if current.get("completed") and current.get("completedAt"):
                ui_record = {**ui_record, "completedAt": current["completedAt"]}
        return await super().update(task_id, ui_record)

    async def set_completed(self, task_id: Any, completed: bool) -> Record:
        """Mark a task completed or pending.

        ``completedAt`` is stamped when the task becomes completed (an
        existing stamp is kept) and cleared otherwise.  The full record
        is resent because the remote backend does not merge.
        """
        task = await self.get_by_id(task_id)
        task.pop("Id", None)
        task["completed"] = bool(completed)
        if not completed:
            task["completedAt"] = None
        elif not task.get("completedAt"):
            task["completedAt"] = utcnow_iso()
        return await self.update(task_id, task)
