"""Dashboard endpoints for API v1."""

from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, Depends, Query

from farm_manager_api.app.api.deps import get_registry
from farm_manager_api.app.schemas.dashboard import DashboardSummary, FinanceSummary
from farm_manager_api.app.services.registry import ServiceRegistry

router = APIRouter()


@router.get("/summary", response_model=DashboardSummary)
async def dashboard_summary(registry: ServiceRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Crop, task and monthly finance figures for the landing page."""
    return await registry.dashboard.summary()


@router.get("/finances", response_model=FinanceSummary)
async def finance_summary(
    kind: Optional[Literal["income", "expense"]] = Query(None, alias="type"),
    registry: ServiceRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Income/expense totals and transactions, newest first."""
    return await registry.dashboard.finance_summary(kind=kind)
