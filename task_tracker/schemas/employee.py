from datetime import datetime

from pydantic import Field

from task_tracker.schemas.base import CamelModel


class EmployeeCreate(CamelModel):
    name: str = Field(min_length=1)


class EmployeeRef(CamelModel):
    id: int
    name: str


class EmployeeOut(EmployeeRef):
    created_at: datetime


class EmployeeWithTaskCount(EmployeeOut):
    task_count: int
