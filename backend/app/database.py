"""
database.py - SQLAlchemy database configuration for the club site.

Provides:
- Database: owns the engine and session factory for one SQLite file,
  opened at application start-up and disposed on shutdown
- Base class for the ORM models
- Dependency injection of request-scoped sessions for FastAPI endpoints
"""

import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for ORM models
Base = declarative_base()


class Database:
    """
    Explicitly constructed data-access handle.

    Usage:
        db = Database("sqlite:///./database.sqlite")
        db.create_all()
        with db.session() as session:
            ...
        db.dispose()
    """

    def __init__(self, url: str, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or self._create_engine(url)
        # Session factory - creates new database sessions
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _create_engine(url: str) -> Engine:
        connect_args = {}
        kwargs = {}
        if url.startswith("sqlite"):
            # check_same_thread=False for multi-threaded API access (required for FastAPI)
            connect_args["check_same_thread"] = False
            if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
                # One shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool
        return create_engine(url, connect_args=connect_args, **kwargs)

    def create_all(self) -> None:
        """Create any missing tables."""
        # Import registers the mapped classes on Base.metadata
        from . import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from . import models  # noqa: F401
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        """Return True when a trivial query succeeds."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        logger.info(f"Closing database {self.url}")
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency generator for FastAPI endpoint injection.

    Yields a session from the Database stored on app.state and ensures
    cleanup after request completion.

    Usage in FastAPI:
        @router.get("/api/teams")
        def list_teams(db: Session = Depends(get_db)):
            ...
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
