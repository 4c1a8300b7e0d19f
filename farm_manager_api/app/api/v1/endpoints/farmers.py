"""
Farmer endpoints for API v1.

Besides the standard CRUD routes, ``GET /farmers/search?q=`` performs
a case-insensitive substring search over name, email, farm name and
primary crops.  The search route is registered before the generic
``/{record_id}`` route so ``search`` is not taken for an id.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from farm_manager_api.app.api.deps import get_registry
from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.farmer import FarmerCreate, FarmerRead
from farm_manager_api.app.services.registry import ServiceRegistry

router = APIRouter()


@router.get("/search", response_model=List[FarmerRead])
async def search_farmers(
    q: str = Query("", description="Text to look for"),
    registry: ServiceRegistry = Depends(get_registry),
) -> List[Dict[str, Any]]:
    """Return farmers matching ``q``; an empty query lists everyone."""
    return await registry.farmers.search(q)


router.include_router(crud_router("farmers", FarmerCreate, FarmerRead))
