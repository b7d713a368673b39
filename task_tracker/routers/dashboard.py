# task_tracker/routers/dashboard.py
from fastapi import APIRouter, Depends

from task_tracker.schemas.dashboard import DashboardOut
from task_tracker.utils.auth import IdentityContext, current_identity, get_container

router = APIRouter()


@router.get("", response_model=DashboardOut, response_model_exclude_none=True)
def get_dashboard(
    identity: IdentityContext = Depends(current_identity),
    container=Depends(get_container),
):
    """Task statistics scoped to the caller; admins also get team-wide figures"""
    return container.dashboard.summary(identity)
