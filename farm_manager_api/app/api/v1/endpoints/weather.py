"""
Weather endpoints for API v1.

``/weather/current`` and ``/weather/forecast`` return snapshots built
from the newest observations; the standard CRUD routes manage the
observations themselves.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from farm_manager_api.app.api.deps import get_registry
from farm_manager_api.app.api.v1.crud import crud_router
from farm_manager_api.app.schemas.weather import WeatherCreate, WeatherRead, WeatherSnapshot
from farm_manager_api.app.services.registry import ServiceRegistry

router = APIRouter()


@router.get("/current", response_model=WeatherSnapshot)
async def current_weather(registry: ServiceRegistry = Depends(get_registry)) -> Dict[str, Any]:
    return await registry.weather.get_current()


@router.get("/forecast", response_model=WeatherSnapshot)
async def weather_forecast(
    days: int = Query(3, ge=1, le=14),
    registry: ServiceRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    return await registry.weather.get_forecast(days)


router.include_router(crud_router("weather", WeatherCreate, WeatherRead))
