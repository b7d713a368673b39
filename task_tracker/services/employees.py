# task_tracker/services/employees.py
import logging
from typing import Any, Dict, List

from sqlalchemy import func

from task_tracker.database import Database
from task_tracker.models import Employee, Task

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    """Employees that tasks can be assigned to"""

    def __init__(self, database: Database):
        self.database = database

    def list_with_task_counts(self) -> List[Dict[str, Any]]:
        with self.database.session() as db:
            rows = (
                db.query(Employee, func.count(Task.id))
                .outerjoin(Task, Task.employee_id == Employee.id)
                .group_by(Employee.id)
                .order_by(Employee.id)
                .all()
            )
        return [
            {
                "id": employee.id,
                "name": employee.name,
                "created_at": employee.created_at,
                "task_count": task_count,
            }
            for employee, task_count in rows
        ]

    def create(self, name: str) -> Employee:
        with self.database.session() as db:
            employee = Employee(name=name.strip())
            db.add(employee)
            db.commit()
            db.refresh(employee)

        logger.info("Created employee id=%s", employee.id)
        return employee

    def exists(self, employee_id: int) -> bool:
        with self.database.session() as db:
            return db.get(Employee, employee_id) is not None
