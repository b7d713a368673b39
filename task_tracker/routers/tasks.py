# task_tracker/routers/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi import status as http_status

from task_tracker.models.task import TaskStatus
from task_tracker.models.user import Role
from task_tracker.schemas.base import MAX_ID
from task_tracker.schemas.task import TaskCreate, TaskOut, TaskUpdate
from task_tracker.utils.auth import IdentityContext, current_identity, get_container, require_roles

router = APIRouter()


@router.get("", response_model=List[TaskOut])
def get_tasks(
    employee_id: Optional[int] = Query(default=None, alias="employeeId", le=MAX_ID),
    status: Optional[TaskStatus] = None,
    identity: IdentityContext = Depends(current_identity),
    container=Depends(get_container),
):
    """Tasks visible to the caller, newest first.

    Employees always get their own tasks; `employeeId` only narrows the list
    for admins.
    """
    return container.tasks.list_tasks(identity, employee_id=employee_id, status=status)


@router.post(
    "",
    response_model=TaskOut,
    status_code=http_status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles(Role.ADMIN))],
)
def create_task(payload: TaskCreate, container=Depends(get_container)):
    return container.tasks.create_task(
        title=payload.title,
        employee_id=payload.employee_id,
        description=payload.description,
        status=payload.status,
    )


@router.put(
    "/{task_id}",
    response_model=TaskOut,
    dependencies=[Depends(require_roles(Role.ADMIN))],
)
def update_task(
    payload: TaskUpdate,
    task_id: int = Path(le=MAX_ID),
    container=Depends(get_container),
):
    return container.tasks.update_task(task_id, payload.changes())
