"""Database lifecycle — one engine per process, one session per request."""

from typing import Generator

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = structlog.get_logger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and session factory for the staff store."""

    def __init__(self, url: str, echo: bool = False):
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.url = url
        self.engine: Engine = create_engine(
            url, echo=echo, pool_pre_ping=True, connect_args=connect_args
        )
        self.SessionLocal = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    def initialize(self) -> None:
        """Create tables (no migrations are run)."""
        # Models must be imported so they register on Base.metadata
        from staff_admin.domain.models.staff_user import StaffUser  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified", url=self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Generator[Session, None, None]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
