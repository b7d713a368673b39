# task_tracker/seed.py
"""
Demo data for local development: three employees, an admin, two employee
logins and a handful of tasks.
"""

import logging
from typing import Dict

from task_tracker.container import Container
from task_tracker.models import Employee, Role, TaskStatus, User
from task_tracker.utils.security import hash_password

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_EMPLOYEES = ["Alice Johnson", "Bob Smith", "Carol Davis"]

# employee: index into DEMO_EMPLOYEES, or None for accounts without one
DEMO_USERS = [
    {"name": "Admin User", "email": "admin@demo.com", "role": Role.ADMIN, "employee": None},
    {"name": "Alice Johnson", "email": "employee@demo.com", "role": Role.EMPLOYEE, "employee": 0},
    {"name": "Bob Smith", "email": "bob@demo.com", "role": Role.EMPLOYEE, "employee": 1},
]

DEMO_TASKS = [
    {"title": "Prepare monthly report", "description": "Compile the monthly sales report", "status": TaskStatus.IN_PROGRESS, "employee": 0},
    {"title": "Deploy release", "description": "Deploy v1.2.0 to production", "status": TaskStatus.PENDING, "employee": 1},
    {"title": "Fix login bug", "description": "Resolve 500 on login", "status": TaskStatus.COMPLETED, "employee": 0},
    {"title": "Design landing page", "description": "Create hero section", "status": TaskStatus.PENDING, "employee": 2},
    {"title": "Update documentation", "description": "Update API documentation", "status": TaskStatus.COMPLETED, "employee": 1},
    {"title": "Setup CI/CD pipeline", "description": "Configure automated deployment", "status": TaskStatus.IN_PROGRESS, "employee": 0},
    {"title": "Code review", "description": "Review pull requests", "status": TaskStatus.PENDING, "employee": 2},
]


def seed_demo_data(container: Container, reset: bool = True) -> Dict[str, int]:
    """Populate the database with demo data; `reset` drops and recreates the schema first"""
    database = container.database
    if reset:
        database.drop_all()
        database.create_all()

    with database.session() as db:
        employees = [Employee(name=name) for name in DEMO_EMPLOYEES]
        db.add_all(employees)
        db.flush()

        rounds = container.credentials.bcrypt_rounds
        for user_data in DEMO_USERS:
            index = user_data["employee"]
            db.add(User(
                name=user_data["name"],
                email=user_data["email"],
                hashed_password=hash_password(DEMO_PASSWORD, rounds),
                role=user_data["role"],
                employee_id=employees[index].id if index is not None else None,
            ))
        db.commit()

    # Tasks go through the same path as the API so references are checked
    for task_data in DEMO_TASKS:
        container.tasks.create_task(
            title=task_data["title"],
            description=task_data["description"],
            status=task_data["status"],
            employee_id=employees[task_data["employee"]].id,
        )

    counts = {
        "employees": len(DEMO_EMPLOYEES),
        "users": len(DEMO_USERS),
        "tasks": len(DEMO_TASKS),
    }
    logger.info("Seeded demo data: %s", counts)
    return counts
