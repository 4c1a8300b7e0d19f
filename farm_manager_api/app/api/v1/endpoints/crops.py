"""Crop endpoints for API v1."""

from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.crop import CropCreate, CropRead

router = crud_router("crops", CropCreate, CropRead)
