# task_tracker/services/task_access.py
"""
Role-scoped access to tasks.

Every read starts from `task_filter`, which narrows the query by the caller's
role: employees only ever see their own tasks, admins see everything unless
they ask for one employee. Writes check the employee reference inside the same
transaction as the insert/update.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import false
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, joinedload

from task_tracker.database import Database
from task_tracker.exceptions import InvalidReference, NotFound
from task_tracker.models import Employee, Role, Task, TaskStatus
from task_tracker.utils.auth import IdentityContext

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status", "employee_id")


@dataclass(frozen=True)
class TaskFilter:
    employee_id: Optional[int] = None
    status: Optional[TaskStatus] = None
    match_none: bool = False

    def apply(self, query: Query) -> Query:
        if self.match_none:
            return query.filter(false())
        if self.employee_id is not None:
            query = query.filter(Task.employee_id == self.employee_id)
        if self.status is not None:
            query = query.filter(Task.status == self.status)
        return query


def _require_employee(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if employee is None:
        raise InvalidReference("Invalid employeeId")
    return employee


class ScopedTaskAccess:
    def __init__(self, database: Database):
        self.database = database

    def task_filter(
        self,
        identity: IdentityContext,
        employee_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> TaskFilter:
        """Storage filter for `identity`; the caller's employee_id is ignored for employees"""
        status = TaskStatus(status) if status is not None else None

        if identity.role is Role.EMPLOYEE:
            if identity.employee_id is None:
                # An employee account without a linked Employee owns no tasks
                logger.warning("Employee user id=%s has no linked employee", identity.user_id)
                return TaskFilter(status=status, match_none=True)
            return TaskFilter(employee_id=identity.employee_id, status=status)
        if identity.role is Role.ADMIN:
            return TaskFilter(employee_id=employee_id, status=status)
        raise ValueError(f"Unhandled role: {identity.role!r}")

    def list_tasks(
        self,
        identity: IdentityContext,
        employee_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[Task]:
        task_filter = self.task_filter(identity, employee_id=employee_id, status=status)
        with self.database.session() as db:
            query = db.query(Task).options(joinedload(Task.employee))
            return (
                task_filter.apply(query)
                .order_by(Task.created_at.desc(), Task.id.desc())
                .all()
            )

    def create_task(
        self,
        title: str,
        employee_id: int,
        description: str = "",
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        with self.database.session() as db:
            employee = _require_employee(db, employee_id)
            task = Task(
                title=title,
                description=description or "",
                status=TaskStatus(status),
                employee_id=employee.id,
            )
            db.add(task)
            try:
                db.commit()
            except IntegrityError:
                # Employee vanished between the check and the insert
                db.rollback()
                raise InvalidReference("Invalid employeeId")
            db.refresh(task)
            task.employee  # load before the session closes

        logger.info("Created task id=%s for employee id=%s", task.id, task.employee_id)
        return task

    def update_task(self, task_id: int, changes: Dict[str, Any]) -> Task:
        """Apply a partial update. Any status may replace any other."""
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with self.database.session() as db:
            task = db.get(Task, task_id)
            if task is None:
                raise NotFound("Task not found")

            if "employee_id" in changes:
                _require_employee(db, changes["employee_id"])

            for key, value in changes.items():
                setattr(task, key, value)

            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                if "employee_id" not in changes:
                    raise
                raise InvalidReference("Invalid employeeId")
            db.refresh(task)
            task.employee

        logger.info("Updated task id=%s fields=%s", task_id, sorted(changes))
        return task
