# task_tracker/routers/employees.py
from typing import List

from fastapi import APIRouter, Depends, status

from task_tracker.models.user import Role
from task_tracker.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeWithTaskCount
from task_tracker.utils.auth import get_container, require_roles

router = APIRouter(dependencies=[Depends(require_roles(Role.ADMIN))])


@router.get("", response_model=List[EmployeeWithTaskCount])
def get_employees(container=Depends(get_container)):
    """All employees with the number of tasks assigned to each"""
    return container.employees.list_with_task_counts()


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, container=Depends(get_container)):
    return container.employees.create(payload.name)
