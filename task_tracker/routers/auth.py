# task_tracker/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from pydantic import Field

from task_tracker.exceptions import Unauthenticated, UnauthenticatedReason
from task_tracker.schemas.base import CamelModel
from task_tracker.schemas.tokens import Token
from task_tracker.schemas.user import UserLogin, UserOut, UserRegister
from task_tracker.utils.auth import IdentityContext, authenticate, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class PasswordChange(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, container=Depends(get_container)):
    user = container.credentials.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return {"token": container.tokens.issue(user.id), "user": user}


@router.post("/login", response_model=Token)
def login(payload: UserLogin, container=Depends(get_container)):
    user = container.credentials.authenticate(payload.email, payload.password)
    if user is None:
        raise Unauthenticated(UnauthenticatedReason.INVALID, "Invalid credentials")

    logger.info("User id=%s logged in", user.id)
    return {"token": container.tokens.issue(user.id), "user": user}


@router.get("/me", response_model=UserOut)
def me(identity: IdentityContext = Depends(authenticate), container=Depends(get_container)):
    """Get current user information"""
    user = container.credentials.get(identity.user_id)
    if user is None:
        raise Unauthenticated(UnauthenticatedReason.INVALID)
    return user


@router.put("/password", response_model=UserOut)
def change_password(
    payload: PasswordChange,
    identity: IdentityContext = Depends(authenticate),
    container=Depends(get_container),
):
    return container.credentials.change_password(
        identity.user_id, payload.current_password, payload.new_password
    )
