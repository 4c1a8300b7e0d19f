"""
Router factory for the standard entity endpoints.

Every entity exposes the same five routes on top of its
:class:`~farm_manager_api.app.services.entity_service.EntityService`::

    GET    /            list
    GET    /{id}        retrieve
    POST   /            create
    PUT    /{id}        full update
    DELETE /{id}        delete

Ids are accepted as strings so the service's id validation is the
single gate (a non-numeric id answers 400, not 422).  Service errors
are translated to HTTP responses by the handlers in ``main.py``.
"""

from typing import Any, Dict, List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from farm_manager_api.app.api.deps import get_registry
from farm_manager_api.app.schemas.common import ErrorResponse
from farm_manager_api.app.services.entity_service import EntityService
from farm_manager_api.app.services.registry import ServiceRegistry


def crud_router(
    attr: str,
    create_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    update_schema: Type[BaseModel] | None = None,
) -> APIRouter:
    """Build a router for the service stored as ``registry.<attr>``."""
    update_schema = update_schema or create_schema
    router = APIRouter(
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
            status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
            status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
        }
    )

    def service(registry: ServiceRegistry = Depends(get_registry)) -> EntityService:
        return getattr(registry, attr)

    @router.get("/", response_model=List[read_schema])
    async def list_records(svc: EntityService = Depends(service)) -> List[Dict[str, Any]]:
        return await svc.get_all()

    @router.get("/{record_id}", response_model=read_schema)
    async def get_record(record_id: str, svc: EntityService = Depends(service)) -> Dict[str, Any]:
        return await svc.get_by_id(record_id)

    @router.post("/", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: create_schema,  # type: ignore[valid-type]
        svc: EntityService = Depends(service),
    ) -> Dict[str, Any]:
        return await svc.create(payload.to_record())

    @router.put("/{record_id}", response_model=read_schema)
    async def update_record(
        record_id: str,
        payload: update_schema,  # type: ignore[valid-type]
        svc: EntityService = Depends(service),
    ) -> Dict[str, Any]:
        return await svc.update(record_id, payload.to_record())

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(record_id: str, svc: EntityService = Depends(service)) -> None:
        await svc.delete(record_id)
        return None

    return router
