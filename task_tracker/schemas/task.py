# task_tracker/schemas/task.py
from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints, field_validator, model_validator

from task_tracker.models.task import TaskStatus
from task_tracker.schemas.base import CamelModel, EntityId
from task_tracker.schemas.employee import EmployeeRef

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TaskCreate(CamelModel):
    title: Title
    description: Optional[str] = ""
    status: TaskStatus = TaskStatus.PENDING
    employee_id: EntityId

    @field_validator("description")
    @classmethod
    def empty_description(cls, value):
        return value or ""


class TaskUpdate(CamelModel):
    """Partial update; only fields present in the body are applied"""

    title: Optional[Title] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    employee_id: Optional[EntityId] = None

    @model_validator(mode="after")
    def no_null_required_fields(self):
        for name in ("title", "status", "employee_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if "description" in data and data["description"] is None:
            data["description"] = ""
        return data


class TaskOut(CamelModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    employee_id: int
    employee: EmployeeRef
    created_at: datetime
    updated_at: Optional[datetime] = None
