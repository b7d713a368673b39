# task_tracker/routers/user.py
from fastapi import APIRouter, Depends, Path

from task_tracker.models.user import Role
from task_tracker.schemas.base import MAX_ID
from task_tracker.schemas.user import UserOut
from task_tracker.utils.auth import get_container, require_roles

router = APIRouter()


@router.patch(
    "/{user_id}/deactivate",
    response_model=UserOut,
    dependencies=[Depends(require_roles(Role.ADMIN))],
)
def deactivate_user(user_id: int = Path(le=MAX_ID), container=Depends(get_container)):
    """Deactivate a user; their existing tokens stop working immediately"""
    return container.credentials.deactivate(user_id)
