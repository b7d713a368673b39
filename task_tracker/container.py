# task_tracker/container.py
"""
Process-wide service wiring.

`build_container` is the single initialization point: it opens the database,
creates the schema and constructs every service once. `Container.close` is
the matching teardown, called from the app's shutdown hook.
"""

import logging
from dataclasses import dataclass

from task_tracker.config.settings import Settings
from task_tracker.database import Database
from task_tracker.services.credential_store import CredentialStore
from task_tracker.services.dashboard import DashboardStats
from task_tracker.services.employees import EmployeeDirectory
from task_tracker.services.task_access import ScopedTaskAccess
from task_tracker.utils.security import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    database: Database

    tokens: TokenService
    credentials: CredentialStore
    employees: EmployeeDirectory
    tasks: ScopedTaskAccess
    dashboard: DashboardStats

    def close(self) -> None:
        self.database.close()


def build_container(settings: Settings) -> Container:
    database = Database(settings.database_url, sslmode=settings.database_sslmode)
    database.create_all()

    tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.jwt_expires_minutes,
    )
    tasks = ScopedTaskAccess(database)

    container = Container(
        settings=settings,
        database=database,
        tokens=tokens,
        credentials=CredentialStore(database, bcrypt_rounds=settings.bcrypt_rounds),
        employees=EmployeeDirectory(database),
        tasks=tasks,
        dashboard=DashboardStats(database, tasks),
    )
    logger.info("Services initialized")
    return container
