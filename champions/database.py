"""Database dependency injection.

Provides engine construction, per-request sessions and repository instances
for dependency injection in Flask routes and services.
"""

import logging
from functools import wraps
from typing import Generator

from flask import current_app
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from champions.repositories import ClubRepository, PlayerRepository

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine configured for the target database.

    Args:
        database_url: SQLAlchemy database URL
        echo: Log SQL statements

    Returns:
        SQLAlchemy engine
    """
    if database_url.startswith('postgresql'):
        # PostgreSQL specific configuration
        engine = create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=echo
        )
    elif database_url in ('sqlite://', 'sqlite:///:memory:'):
        # a single shared connection, otherwise every checkout sees an empty database
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=echo
        )
    else:
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False} if database_url.startswith('sqlite') else {},
            echo=echo
        )

    if engine.dialect.name == 'sqlite':
        enable_sqlite_foreign_keys(engine)

    logger.info(f"Database engine ready ({engine.dialect.name})")
    return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on FK enforcement (and ON DELETE CASCADE) for every SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db_session() -> Generator[Session, None, None]:
    """Get database session with automatic cleanup.

    Uses the session factory attached to the current Flask application.

    Yields:
        SQLAlchemy database session
    """
    session_factory = current_app.extensions["db_session_factory"]
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


class RepositoryContainer:
    """Storage handle shared by the domain services.

    Holds one session and lazily builds the repositories on top of it.
    """

    def __init__(self, db: Session):
        """Initialize repository container.

        Args:
            db: Database session
        """
        self.db = db
        self._club_repo = None
        self._player_repo = None

    @property
    def clubs(self) -> ClubRepository:
        """Get club repository."""
        if self._club_repo is None:
            self._club_repo = ClubRepository(self.db)
        return self._club_repo

    @property
    def players(self) -> PlayerRepository:
        """Get player repository."""
        if self._player_repo is None:
            self._player_repo = PlayerRepository(self.db)
        return self._player_repo


def with_repositories(func):
    """Decorator to inject repositories into route handlers.

    Usage:
        @bp.route('/clubs')
        @with_repositories
        def list_clubs(repos: RepositoryContainer):
            clubs = ClubService(repos).list_clubs()
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        with next(get_db_session()) as db:
            repos = RepositoryContainer(db)
            return func(repos, *args, **kwargs)
    return wrapper
