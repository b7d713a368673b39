from typing import List, Optional

from task_tracker.schemas.base import CamelModel


class EmployeeTaskBreakdown(CamelModel):
    employee_id: int
    employee_name: str
    task_count: int
    completed: int
    completion_rate: int


class DailyActivity(CamelModel):
    date: str
    tasks_created: int
    tasks_completed: int


class DashboardOut(CamelModel):
    total_tasks: int
    completed: int
    in_progress: int
    pending: int
    completion_rate: int

    # Admin only; left unset (and excluded from the response) for employees
    tasks_per_employee: Optional[List[EmployeeTaskBreakdown]] = None
    recent_activity: Optional[List[DailyActivity]] = None
    total_employees: Optional[int] = None
