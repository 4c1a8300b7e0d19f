"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import crops, dashboard, farmers, farms, subtasks, tasks, transactions, weather

router = APIRouter()

router.include_router(farmers.router, prefix="/farmers", tags=["farmers"])
router.include_router(farms.router, prefix="/farms", tags=["farms"])
router.include_router(crops.router, prefix="/crops", tags=["crops"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(subtasks.router, prefix="/subtasks", tags=["subtasks"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(weather.router, prefix="/weather", tags=["weather"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
