"""Subtask endpoints for API v1."""

from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.task import SubtaskCreate, SubtaskRead, SubtaskUpdate

router = crud_router("subtasks", SubtaskCreate, SubtaskRead, SubtaskUpdate)
