"""Pydantic schemas for the dashboard and finance summaries."""

from typing import Dict, List, Optional

from .common import CamelModel
from .task import TaskRead
from .transaction import TransactionRead


class Activity(CamelModel):
    id: str
    type: str
    message: str
    date: Optional[str] = None


class DashboardSummary(CamelModel):
    total_crops: int
    growing_crops: int
    crop_status_counts: Dict[str, int]
    pending_tasks: int
    overdue_tasks: int
    monthly_income: float
    monthly_expenses: float
    monthly_income_count: int
    upcoming_tasks: List[TaskRead]
    recent_activities: List[Activity]


class FinanceSummary(CamelModel):
    total_income: float
    total_expenses: float
    net_profit: float
    monthly_income: float
    monthly_expenses: float
    transactions: List[TransactionRead]
