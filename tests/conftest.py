"""Shared test fixtures for the knowledge base."""

from collections.abc import Generator
from pathlib import Path

import pytest

from knowledgebase import DataType, ObjectType, Storage


@pytest.fixture
def storage() -> Generator[Storage, None, None]:
    """Create a Storage backed by an in-memory store."""
    store = Storage("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def file_url(tmp_path: Path) -> str:
    """URL of a SQLite file store in a temporary directory."""
    return f"sqlite:///{tmp_path / 'knowledgebase.db'}"


@pytest.fixture
def book() -> ObjectType:
    """A Book object type identified by isbn."""
    object_type = ObjectType(name="Book")
    object_type.add_attribute("isbn", DataType.STRING, is_id_part=True)
    object_type.add_attribute("title", DataType.STRING)
    object_type.add_attribute("pages", DataType.INT)
    object_type.add_attribute("in_print", DataType.BOOL)
    return object_type


@pytest.fixture
def author() -> ObjectType:
    """An Author object type with a two-part identity."""
    object_type = ObjectType(name="Author")
    object_type.add_attribute("first_name", DataType.STRING, is_id_part=True)
    object_type.add_attribute("last_name", DataType.STRING, is_id_part=True)
    object_type.add_attribute("rating", DataType.FLOAT)
    return object_type
