"""
Task endpoints for API v1.

Adds ``POST /tasks/{id}/complete`` to flip a task between completed
and pending, and ``GET /tasks/{id}/subtasks`` to list its subtasks.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from farm_manager_api.app.api.deps import get_registry
from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.task import SubtaskRead, TaskCompletion, TaskCreate, TaskRead
from farm_manager_api.app.services.registry import ServiceRegistry

router = crud_router("tasks", TaskCreate, TaskRead)


@router.post("/{task_id}/complete", response_model=TaskRead)
async def complete_task(
    task_id: str,
    body: TaskCompletion = TaskCompletion(),
    registry: ServiceRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Mark a task completed (default) or back to pending."""
    return await registry.tasks.set_completed(task_id, body.completed)


@router.get("/{task_id}/subtasks", response_model=List[SubtaskRead])
async def list_task_subtasks(
    task_id: str,
    registry: ServiceRegistry = Depends(get_registry),
) -> List[Dict[str, Any]]:
    """Return the subtasks of a task (empty if it has none)."""
    return await registry.subtasks.get_by_task_id(task_id)
