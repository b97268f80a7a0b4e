"""Storage access layer: CRUD persistence for object types."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import pydantic
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from knowledgebase.core.connection import DEFAULT_URL, DatabaseConnection
from knowledgebase.core.locking import FairLock
from knowledgebase.core.types import ObjectType
from knowledgebase.exceptions import ObjectTypeAlreadyExistsError, StorageError, ValidationError
from knowledgebase.schema.models import ObjectTypeDocument

if TYPE_CHECKING:
    from sqlalchemy.engine.url import URL

logger = logging.getLogger(__name__)


class Storage:
    """Owns the connection to the embedded store and serializes access to it.

    Construct one per process and hand it to whatever serves requests. The
    store is connected lazily by the first operation. Every public operation
    holds a single FIFO lock for its whole duration, connect included, so at
    most one storage operation is in flight at a time.

    Example:
        storage = Storage("sqlite:///./knowledgebase.db")

        book = ObjectType(name="Book")
        book.add_attribute("isbn", DataType.STRING, is_id_part=True)
        storage.create_object_type(book)

        storage.list_object_types()  # [ObjectType(name='Book', ...)]
    """

    def __init__(self, url: str | URL = DEFAULT_URL, echo: bool = False) -> None:
        """Initialize storage without connecting.

        Args:
            url: Embedded store URL (SQLite)
            echo: Whether to echo SQL statements
        """
        self._connection = DatabaseConnection(url, echo=echo)
        self._lock = FairLock()

    @property
    def url(self) -> str:
        """The store URL."""
        return self._connection.url

    @property
    def is_connected(self) -> bool:
        """Whether the store has been connected."""
        return self._connection.is_connected

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Open a session on the shared connection, connecting if needed.

        Must be called with the lock held. Engine failures surface as
        StorageError; connect failures as ConnectionError.
        """
        try:
            with self._connection.get_session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Storage operation failed: {e}")
            raise StorageError(f"Storage operation failed: {e}") from e

    def _load(self, row: ObjectTypeDocument) -> ObjectType:
        """Rebuild an object type from its stored document."""
        try:
            return ObjectType.from_document(row.document)
        except (pydantic.ValidationError, ValidationError) as e:
            raise StorageError(
                f"Stored document '{row.name}' is not a valid object type: {e}",
                {"object_type_name": row.name},
            ) from e

    def list_object_types(self) -> list[ObjectType]:
        """List every stored object type, ordered by name.

        Returns:
            List of object types
        """
        with self._lock, self._session() as session:
            rows = session.scalars(
                select(ObjectTypeDocument).order_by(ObjectTypeDocument.name)
            ).all()
            object_types = [self._load(row) for row in rows]
        logger.debug(f"Listed {len(object_types)} object types")
        return object_types

    def get_object_type(self, name: str) -> ObjectType | None:
        """Get one stored object type by name.

        Args:
            name: Object type name

        Returns:
            The object type or None if it is not stored
        """
        with self._lock, self._session() as session:
            row = session.get(ObjectTypeDocument, name)
            return self._load(row) if row is not None else None

    def create_object_type(
        self, object_type: ObjectType, overwrite: bool = True
    ) -> ObjectType | None:
        """Store an object type keyed by its name.

        An existing document with the same name is replaced (last writer
        wins) unless overwrite=False.

        Args:
            object_type: Object type to store
            overwrite: Replace an existing document of the same name

        Returns:
            The stored object type as read back from the store

        Raises:
            ObjectTypeAlreadyExistsError: If overwrite=False and the name is taken
        """
        document = object_type.to_document()
        with self._lock, self._session() as session:
            row = session.get(ObjectTypeDocument, object_type.name)
            if row is None:
                row = ObjectTypeDocument(name=object_type.name, document=document)
                session.add(row)
            elif not overwrite:
                raise ObjectTypeAlreadyExistsError(object_type.name)
            else:
                logger.debug(f"Overwriting object type '{object_type.name}'")
                row.document = document
            session.commit()
            stored = self._load(row)
        logger.debug(f"Created object type '{object_type.name}'")
        return stored

    def update_object_type(self, object_type: ObjectType) -> ObjectType | None:
        """Replace the stored document for an object type.

        Args:
            object_type: New full value; its name selects the document

        Returns:
            The new stored value, or None if no document has that name
        """
        with self._lock, self._session() as session:
            row = session.get(ObjectTypeDocument, object_type.name)
            if row is None:
                logger.debug(f"Update skipped, object type '{object_type.name}' not found")
                return None
            row.document = object_type.to_document()
            session.commit()
            stored = self._load(row)
        logger.debug(f"Updated object type '{object_type.name}'")
        return stored

    def delete_object_type(self, object_type: ObjectType) -> ObjectType | None:
        """Remove the stored document for an object type.

        Args:
            object_type: Object type whose name selects the document

        Returns:
            The removed value, or None if no document has that name
        """
        with self._lock, self._session() as session:
            row = session.get(ObjectTypeDocument, object_type.name)
            if row is None:
                logger.debug(f"Delete skipped, object type '{object_type.name}' not found")
                return None
            removed = self._load(row)
            session.delete(row)
            session.commit()
        logger.debug(f"Deleted object type '{object_type.name}'")
        return removed

    def close(self) -> None:
        """Dispose of the connection. Only for shutdown and tests."""
        with self._lock:
            self._connection.close()

    def __enter__(self) -> Storage:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
