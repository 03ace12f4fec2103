"""Database handle: engine, session factory and the per-request session dependency."""

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

logger = logging.getLogger(__name__)

IN_MEMORY_SQLITE_URLS = frozenset({"sqlite://", "sqlite:///:memory:"})


class Database:
    """
    Owns one SQLAlchemy engine for the lifetime of the process.

    Built once at startup (see app.main lifespan) and disposed on shutdown.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        kwargs: dict = {"pool_pre_ping": True, "echo": echo}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in IN_MEMORY_SQLITE_URLS:
                # One shared connection, otherwise every checkout sees an empty database.
                kwargs["poolclass"] = StaticPool
        self.url = url
        self.engine = create_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, echo=settings.DEBUG)

    def session(self) -> Session:
        return self.SessionLocal()

    def check_connected(self) -> bool:
        """Run a trivial query to verify the database is reachable."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database connectivity check failed: %s", e)
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency: the Database attached to the running application."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
