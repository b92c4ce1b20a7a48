"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Bookshop API.

There is no module-level engine. A Database handle is constructed from a
Settings instance by the application factory and stored on app.state, so
each application (and each test) owns its own engine and session factory.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Services commit their own writes
4. Close session when request ends
"""

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookshop.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


class Database:
    """
    Engine and session factory for one application instance.

    Example:
        database = Database(settings)
        with database.session() as db:
            db.execute(select(Book)).scalars().all()
    """

    def __init__(self, settings: Settings) -> None:
        self.url = settings.database_url
        self.engine = self._create_engine(settings)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @staticmethod
    def _create_engine(settings: Settings) -> Engine:
        # SQLite has no server-side pool; pool sizing only applies elsewhere
        if settings.is_sqlite:
            return create_engine(
                settings.database_url,
                connect_args={"check_same_thread": False},
                echo=settings.debug,
            )

        return create_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            echo=settings.debug,
        )

    def session(self) -> Session:
        """Create a new session bound to this database."""
        return self.SessionLocal()

    def create_tables(self) -> None:
        """
        Create all database tables that do not exist yet.

        Use Alembic migrations for schema changes in production.
        """
        # Models must be imported so they register with Base.metadata
        import bookshop.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all database tables. Deletes all data."""
        import bookshop.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()
        logger.info("Database connections closed")


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Opens a session on the application's Database handle, yields it to the
    route handler, and closes it when the request ends.

    Usage in Routes:
        @router.get("/books")
        def get_books(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
