# task_tracker/database.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and session factory for one process.

    Created once at startup by the container; `close()` disposes the engine
    at shutdown.
    """

    def __init__(self, url: str, sslmode: Optional[str] = None):
        self.url = url
        is_sqlite = url.startswith("sqlite")

        if is_sqlite:
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live and die with their connection
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        elif sslmode:
            # If you're using PostgreSQL on Render or similar, set sslmode=require
            engine_kwargs = {"connect_args": {"sslmode": sslmode}}
        else:
            engine_kwargs = {}

        self.engine = create_engine(url, **engine_kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def create_all(self) -> None:
        # Import models so they register on Base.metadata
        from task_tracker import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready")

    def drop_all(self) -> None:
        from task_tracker import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session scoped to one operation; rolled back if the block raises"""
        db: Session = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
