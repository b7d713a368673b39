from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from task_tracker.models.user import Role
from task_tracker.schemas.base import CamelModel


class UserRegister(CamelModel):
    name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Role = Role.EMPLOYEE


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: Role
    employee_id: Optional[int] = None
    is_active: bool
    created_at: datetime
