"""Farm endpoints for API v1."""

from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.farm import FarmCreate, FarmRead

router = crud_router("farms", FarmCreate, FarmRead)
