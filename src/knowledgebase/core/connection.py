"""Embedded store connection management for the knowledge base."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from knowledgebase.exceptions import ConnectionError
from knowledgebase.schema.models import Base

if TYPE_CHECKING:
    from sqlalchemy.engine.url import URL

logger = logging.getLogger(__name__)

DEFAULT_URL = "sqlite:///:memory:"


def _normalize_sqlite_url(url: str) -> str:
    """Normalize an embedded store location to a SQLite URL.

    Supports:
    - sqlite:///path/to/db.sqlite
    - sqlite:///:memory:
    - :memory: (shorthand for the in-memory store)
    - path/to/db.sqlite (bare file path)

    Args:
        url: Store URL or path

    Returns:
        Normalized URL
    """
    if url == ":memory:":
        return DEFAULT_URL
    if "://" not in url:
        return f"sqlite:///{url}"
    return url


class DatabaseConnection:
    """Owns the single connection handle to the embedded store.

    The handshake runs lazily on first use and only once: after it succeeds
    the connection stays up until ``close()``. A failed handshake leaves the
    connection disconnected, so the next use retries it.

    Not thread-safe on its own; callers serialize access (see ``Storage``).
    """

    SUPPORTED_DIALECTS = ("sqlite",)

    def __init__(self, url: str | URL = DEFAULT_URL, echo: bool = False) -> None:
        """Initialize the connection without connecting.

        Args:
            url: Store URL, e.g. "sqlite:///:memory:" or "sqlite:///path/to/kb.db"
            echo: Whether to echo SQL statements (for debugging)
        """
        self._url = _normalize_sqlite_url(str(url))
        self._echo = echo
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._connected = False

    @property
    def url(self) -> str:
        """The normalized store URL."""
        return self._url

    @property
    def is_connected(self) -> bool:
        """Whether the handshake has completed."""
        return self._connected

    def connect(self) -> Engine:
        """Run the connect handshake if it has not succeeded yet.

        Creates the engine on a single shared connection, applies SQLite
        pragmas and creates the document table.

        Returns:
            The connected SQLAlchemy engine

        Raises:
            ConnectionError: If the dialect is unsupported or the store fails to open
        """
        if self._connected and self._engine is not None:
            return self._engine

        try:
            dialect = make_url(self._url).get_backend_name()
        except ArgumentError as e:
            raise ConnectionError(f"Invalid store URL '{self._url}': {e}") from e
        if dialect not in self.SUPPORTED_DIALECTS:
            raise ConnectionError(
                f"Unsupported database dialect: {dialect}. "
                f"Supported: {', '.join(self.SUPPORTED_DIALECTS)}",
                {"dialect": dialect},
            )

        engine: Engine | None = None
        try:
            # One connection shared by every thread; Storage serializes access
            engine = create_engine(
                self._url,
                echo=self._echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
            with engine.connect() as conn:
                conn.execute(text("PRAGMA journal_mode = WAL"))
                conn.commit()
            Base.metadata.create_all(engine)
        except Exception as e:
            if engine is not None:
                engine.dispose()
            logger.error(f"Failed to connect to {self._url}: {e}")
            raise ConnectionError(f"Failed to open embedded store: {e}") from e

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine)
        self._connected = True
        logger.info(f"Connected to embedded store at {self._url}")
        return engine

    @property
    def engine(self) -> Engine:
        """Get the engine, connecting first if needed."""
        return self.connect()

    def get_session(self) -> Session:
        """Create a new session on the shared connection."""
        self.connect()
        if self._session_factory is None:
            raise ConnectionError(f"Store at {self._url} is not connected")
        return self._session_factory()

    def test_connection(self) -> bool:
        """Test if the store answers a trivial query.

        Returns:
            True if connection is successful

        Raises:
            ConnectionError: If connection test fails
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except ConnectionError:
            raise
        except Exception as e:
            raise ConnectionError(f"Store connection test failed: {e}") from e

    def close(self) -> None:
        """Dispose of the engine and return to the disconnected state."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
        self._connected = False
