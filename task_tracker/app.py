# task_tracker/app.py
import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_tracker import __version__
from task_tracker.config.settings import Settings
from task_tracker.container import Container, build_container
from task_tracker.exceptions import register_exception_handlers
from task_tracker.routers import auth, dashboard, employees, tasks, user
from task_tracker.utils.auth import authenticate

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """Build the API. Configuration errors (e.g. no JWT_SECRET) raise here, at startup."""
    if container is not None:
        settings = container.settings
    settings = settings or Settings.from_env()

    logging.basicConfig(level=settings.log_level)

    container = container or build_container(settings)

    app = FastAPI(title="Employee Task Tracker API", version=__version__)
    app.state.container = container

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Route registration
    prefix = settings.api_prefix.rstrip("/")
    protected = [Depends(authenticate)]
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["Authentication"])
    app.include_router(user.router, prefix=f"{prefix}/users", tags=["Users"], dependencies=protected)
    app.include_router(employees.router, prefix=f"{prefix}/employees", tags=["Employees"], dependencies=protected)
    app.include_router(tasks.router, prefix=f"{prefix}/tasks", tags=["Tasks"], dependencies=protected)
    app.include_router(dashboard.router, prefix=f"{prefix}/dashboard", tags=["Dashboard"], dependencies=protected)

    @app.on_event("shutdown")
    def shutdown_event():
        logger.info("Shutting down Task Tracker API...")
        container.close()

    # Root route
    @app.get("/")
    def read_root():
        return {
            "message": "Employee Task Tracker API",
            "version": __version__,
            "features": ["Authentication", "Role-based Access", "Advanced Dashboard"],
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Task Tracker API ready (prefix=%s)", prefix or "/")
    return app
