"""
Shared fixtures: an in-memory SQLite container, the app built on it, a test
client and a few seeded identities.
"""

from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from task_tracker.app import create_app
from task_tracker.config.settings import Settings
from task_tracker.container import build_container
from task_tracker.models import Employee, Role, Task, TaskStatus
from task_tracker.utils.auth import IdentityContext

TEST_SECRET = "test-secret"
PASSWORD = "password123"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite://",
        bcrypt_rounds=4,
        log_level="DEBUG",
    )


@pytest.fixture
def container(settings):
    container = build_container(settings)
    yield container
    container.close()


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin(container):
    return container.credentials.register("Admin User", "admin@demo.com", PASSWORD, Role.ADMIN)


@pytest.fixture
def alice(container):
    """Employee-role user; registration creates the linked Employee"""
    return container.credentials.register("Alice", "alice@demo.com", PASSWORD, Role.EMPLOYEE)


@pytest.fixture
def bob(container):
    return container.credentials.register("Bob", "bob@demo.com", PASSWORD, Role.EMPLOYEE)


@pytest.fixture
def admin_identity(admin) -> IdentityContext:
    return IdentityContext(user_id=admin.id, role=Role.ADMIN)


@pytest.fixture
def alice_identity(alice) -> IdentityContext:
    return IdentityContext(user_id=alice.id, role=Role.EMPLOYEE, employee_id=alice.employee_id)


def auth_header(container, user) -> dict:
    return {"Authorization": f"Bearer {container.tokens.issue(user.id)}"}


def add_task(
    container,
    employee_id: int,
    status: TaskStatus = TaskStatus.PENDING,
    title: str = "Task",
    created_at: Optional[datetime] = None,
) -> Task:
    """Insert a task directly, optionally backdated"""
    with container.database.session() as db:
        task = Task(title=title, status=status, employee_id=employee_id)
        if created_at is not None:
            task.created_at = created_at
        db.add(task)
        db.commit()
        db.refresh(task)
        return task


def add_employee(container, name: str) -> Employee:
    return container.employees.create(name)
