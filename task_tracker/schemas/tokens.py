# task_tracker/schemas/tokens.py
from task_tracker.schemas.base import CamelModel
from task_tracker.schemas.user import UserOut


class Token(CamelModel):
    token: str
    user: UserOut
