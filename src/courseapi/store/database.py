"""Database connection manager for the course registration store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from courseapi.config import DEFAULT_DATABASE_URL
from courseapi.logging import get_logger, sanitize_for_log
from courseapi.store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = get_logger("store")


class Database:
    """Database connection manager.

    Owns the single engine shared by every repository. The engine is created on
    first use and disposed by close(); a closed handle reconnects on next use.
    """

    def __init__(self, url: str = DEFAULT_DATABASE_URL) -> None:
        """Initialize database handle.

        Args:
            url: SQLAlchemy database URL. Use "sqlite:///:memory:" for in-memory DB.
        """
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at SQLite."""
        return make_url(self.url).get_backend_name() == "sqlite"

    @property
    def is_memory(self) -> bool:
        """Whether the URL points at an in-memory SQLite database."""
        database = make_url(self.url).database
        return self.is_sqlite and database in (None, "", ":memory:")

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            if self.is_memory:
                # Share one connection across threads (TestClient runs the app in another)
                self._engine = create_engine(
                    "sqlite:///:memory:",
                    echo=False,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            elif self.is_sqlite:
                database = make_url(self.url).database
                if database:
                    Path(database).parent.mkdir(parents=True, exist_ok=True)
                self._engine = create_engine(self.url, echo=False)
            else:
                self._engine = create_engine(self.url, echo=False, pool_pre_ping=True)

            if self.is_sqlite:
                wal = not self.is_memory

                @event.listens_for(self._engine, "connect")
                def set_sqlite_pragma(
                    dbapi_connection: object, _connection_record: object
                ) -> None:
                    cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
                    if wal:
                        cursor.execute("PRAGMA journal_mode=WAL")
                    cursor.execute("PRAGMA foreign_keys=ON")
                    cursor.close()

            logger.info("Opened database %s", sanitize_for_log(self.url))

        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
            )
        return self._session_factory

    def create_tables(self) -> None:
        """Create all tables if they don't exist."""
        Base.metadata.create_all(self.engine)

    def drop_tables(self) -> None:
        """Drop all tables. Use with caution!"""
        Base.metadata.drop_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session.

        Returns:
            A new SQLAlchemy session.
        """
        return self.session_factory()

    def close(self) -> None:
        """Close the database connection."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Closed database %s", sanitize_for_log(self.url))
