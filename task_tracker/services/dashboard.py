# task_tracker/services/dashboard.py
"""
Dashboard statistics.

The base counts use the same role-scoped filter as task listing. The
per-employee breakdown, the last-7-days activity and the employee count are
computed for admins only; for employees those keys are left out entirely.
"""

from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func

from task_tracker.database import Database
from task_tracker.models import Employee, Role, Task, TaskStatus
from task_tracker.models.base import utcnow
from task_tracker.services.task_access import ScopedTaskAccess
from task_tracker.utils.auth import IdentityContext

RECENT_ACTIVITY_DAYS = 7


def completion_rate(completed: int, total: int) -> int:
    """Percentage of completed tasks, rounded half up; 0 when there are none"""
    if total == 0:
        return 0
    return (completed * 200 + total) // (total * 2)


class DashboardStats:
    def __init__(self, database: Database, tasks: ScopedTaskAccess):
        self.database = database
        self.tasks = tasks

    def summary(self, identity: IdentityContext, now: Optional[datetime] = None) -> Dict[str, Any]:
        task_filter = self.tasks.task_filter(identity)

        with self.database.session() as db:
            rows = (
                task_filter.apply(db.query(Task.status, func.count(Task.id)))
                .group_by(Task.status)
                .all()
            )
        by_status = {TaskStatus(status): count for status, count in rows}

        total = sum(by_status.values())
        completed = by_status.get(TaskStatus.COMPLETED, 0)
        stats = {
            "total_tasks": total,
            "completed": completed,
            "in_progress": by_status.get(TaskStatus.IN_PROGRESS, 0),
            "pending": by_status.get(TaskStatus.PENDING, 0),
            "completion_rate": completion_rate(completed, total),
        }

        if identity.role is Role.ADMIN:
            stats.update(
                tasks_per_employee=self.tasks_per_employee(),
                recent_activity=self.recent_activity(now or utcnow()),
                total_employees=self.total_employees(),
            )
        elif identity.role is not Role.EMPLOYEE:
            raise ValueError(f"Unhandled role: {identity.role!r}")

        return stats

    def tasks_per_employee(self) -> List[Dict[str, Any]]:
        completed_expr = func.sum(case((Task.status == TaskStatus.COMPLETED, 1), else_=0))
        with self.database.session() as db:
            rows = (
                db.query(Employee.id, Employee.name, func.count(Task.id), completed_expr)
                .join(Task, Task.employee_id == Employee.id)
                .group_by(Employee.id, Employee.name)
                .order_by(Employee.name, Employee.id)
                .all()
            )
        return [
            {
                "employee_id": employee_id,
                "employee_name": name,
                "task_count": task_count,
                "completed": int(completed or 0),
                "completion_rate": completion_rate(int(completed or 0), task_count),
            }
            for employee_id, name, task_count, completed in rows
        ]

    def recent_activity(self, now: datetime) -> List[Dict[str, Any]]:
        """Tasks created in the last 7 days, bucketed by UTC calendar day"""
        since = now - timedelta(days=RECENT_ACTIVITY_DAYS)
        with self.database.session() as db:
            rows = (
                db.query(Task.created_at, Task.status)
                .filter(Task.created_at >= since)
                .order_by(Task.created_at)
                .all()
            )

        buckets: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        for created_at, status in rows:
            day = created_at.date().isoformat()
            bucket = buckets.setdefault(day, {"date": day, "tasks_created": 0, "tasks_completed": 0})
            bucket["tasks_created"] += 1
            if TaskStatus(status) is TaskStatus.COMPLETED:
                bucket["tasks_completed"] += 1
        return list(buckets.values())

    def total_employees(self) -> int:
        with self.database.session() as db:
            return db.query(func.count(Employee.id)).scalar() or 0
