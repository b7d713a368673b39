# task_tracker/services/credential_store.py
"""
Persisted user records: registration, credential checks and the two
mutations a user record supports (deactivation and password change).
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from task_tracker.database import Database
from task_tracker.exceptions import NotFound, ValidationError
from task_tracker.models import Employee, Role, User
from task_tracker.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class CredentialStore:
    def __init__(self, database: Database, bcrypt_rounds: int = 12):
        self.database = database
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, name: str, email: str, password: str, role: Role = Role.EMPLOYEE) -> User:
        """Create a user; an employee-role user gets its Employee record in the same transaction"""
        email = normalize_email(email)
        role = Role(role)
        with self.database.session() as db:
            if db.query(User).filter(User.email == email).first():
                raise ValidationError("Email already registered")

            user = User(
                name=name,
                email=email,
                hashed_password=hash_password(password, self.bcrypt_rounds),
                role=role,
            )
            if role is Role.EMPLOYEE:
                user.employee = Employee(name=name)
            elif role is not Role.ADMIN:
                raise ValueError(f"Unhandled role: {role!r}")

            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                # Lost a race with another registration for the same email
                db.rollback()
                raise ValidationError("Email already registered")
            db.refresh(user)

        logger.info("Registered %s user %s (id=%s)", user.role.value, user.email, user.id)
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the active user for these credentials, or None.

        Unknown email, wrong password and an inactive account all return None.
        """
        with self.database.session() as db:
            user = db.query(User).filter(User.email == normalize_email(email)).first()

        if user is None or not verify_password(password, user.hashed_password):
            return None
        if not user.is_active:
            logger.info("Login refused for inactive user id=%s", user.id)
            return None
        return user

    def get(self, user_id: int) -> Optional[User]:
        with self.database.session() as db:
            return db.get(User, user_id)

    def deactivate(self, user_id: int) -> User:
        with self.database.session() as db:
            user = db.get(User, user_id)
            if user is None:
                raise NotFound("User not found")
            user.is_active = False
            db.commit()
            db.refresh(user)

        logger.info("Deactivated user id=%s", user_id)
        return user

    def change_password(self, user_id: int, current_password: str, new_password: str) -> User:
        if len(new_password) < 6:
            raise ValidationError(
                errors=[{"field": "newPassword", "message": "Password must be at least 6 characters long"}]
            )
        with self.database.session() as db:
            user = db.get(User, user_id)
            if user is None:
                raise NotFound("User not found")
            if not verify_password(current_password, user.hashed_password):
                raise ValidationError(
                    errors=[{"field": "currentPassword", "message": "Current password is incorrect"}]
                )
            user.hashed_password = hash_password(new_password, self.bcrypt_rounds)
            db.commit()
            db.refresh(user)

        logger.info("Password changed for user id=%s", user_id)
        return user
