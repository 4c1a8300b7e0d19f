"""
Dashboard and finance summaries.

These figures were previously computed in the browser from the full
crop, task and transaction lists.  They are derived here from the same
lists returned by the entity services, so they work unchanged with
either storage backend.  ``now`` can be injected to make the monthly
and overdue figures deterministic.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from farm_manager_api.app.services.entities import CROP_STATUSES
from farm_manager_api.app.services.entity_service import EntityService, Record

UPCOMING_TASKS = 5
RECENT_ACTIVITIES = 5


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO date or timestamp; naive values are taken as UTC."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _in_month(record: Record, now: datetime) -> bool:
    when = parse_timestamp(record.get("date"))
    return bool(when) and when.year == now.year and when.month == now.month


def _total(transactions: List[Record], kind: str) -> float:
    return sum(float(t.get("amount") or 0) for t in transactions if t.get("type") == kind)


def _sort_key(value: Any) -> datetime:
    return parse_timestamp(value) or datetime.min.replace(tzinfo=timezone.utc)


class DashboardService:
    """Aggregates figures across crops, tasks and transactions."""

    def __init__(self, crops: EntityService, tasks: EntityService, transactions: EntityService) -> None:
        self.crops = crops
        self.tasks = tasks
        self.transactions = transactions

    async def summary(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Return the dashboard figures."""
        now = now or datetime.now(timezone.utc)
        crops, tasks, transactions = await asyncio.gather(
            self.crops.get_all(), self.tasks.get_all(), self.transactions.get_all()
        )

        open_tasks = [task for task in tasks if not task.get("completed")]
        overdue = [
            task
            for task in open_tasks
            if parse_timestamp(task.get("dueDate")) and parse_timestamp(task.get("dueDate")) < now
        ]
        monthly = [t for t in transactions if _in_month(t, now)]
        upcoming = sorted(open_tasks, key=lambda task: _sort_key(task.get("dueDate")))[:UPCOMING_TASKS]

        activities = [
            {
                "id": f"crop-{crop.get('Id')}",
                "type": "crop",
                "message": f"Added {crop.get('name')} crop",
                "date": crop.get("plantedDate"),
            }
            for crop in crops[-3:]
        ]
        completed = [task for task in tasks if task.get("completed") and task.get("completedAt")]
        activities += [
            {
                "id": f"task-{task.get('Id')}",
                "type": "task",
                "message": f"Completed: {task.get('title')}",
                "date": task.get("completedAt"),
            }
            for task in completed[-3:]
        ]
        activities.sort(key=lambda item: _sort_key(item["date"]), reverse=True)

        return {
            "totalCrops": len(crops),
            "growingCrops": sum(1 for crop in crops if crop.get("status") == "growing"),
            "cropStatusCounts": {
                status: sum(1 for crop in crops if crop.get("status") == status) for status in CROP_STATUSES
            },
            "pendingTasks": len(open_tasks),
            "overdueTasks": len(overdue),
            "monthlyIncome": _total(monthly, "income"),
            "monthlyExpenses": _total(monthly, "expense"),
            "monthlyIncomeCount": sum(1 for t in monthly if t.get("type") == "income"),
            "upcomingTasks": upcoming,
            "recentActivities": activities[:RECENT_ACTIVITIES],
        }

    async def finance_summary(
        self,
        now: Optional[datetime] = None,
        kind: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return income/expense totals and the transactions, newest first.

        ``kind`` (``income`` or ``expense``) filters the returned list;
        totals always cover every transaction.
        """
        now = now or datetime.now(timezone.utc)
        transactions = await self.transactions.get_all()
        monthly = [t for t in transactions if _in_month(t, now)]
        total_income = _total(transactions, "income")
        total_expenses = _total(transactions, "expense")
        listed = [t for t in transactions if kind is None or t.get("type") == kind]
        listed.sort(key=lambda t: _sort_key(t.get("date")), reverse=True)
        return {
            "totalIncome": total_income,
            "totalExpenses": total_expenses,
            "netProfit": total_income - total_expenses,
            "monthlyIncome": _total(monthly, "income"),
            "monthlyExpenses": _total(monthly, "expense"),
            "transactions": listed,
        }
