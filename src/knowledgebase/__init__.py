"""Knowledge Base - object type schemas persisted in an embedded document store.

An object type is a named schema of typed attributes, some of which form a
composite identity. Object types are stored whole, one JSON document per
name, in an embedded SQLite store.

Example:
    from knowledgebase import DataType, ObjectType, Storage

    storage = Storage("sqlite:///./knowledgebase.db")

    book = ObjectType(name="Book")
    book.add_attribute("isbn", DataType.STRING, is_id_part=True)
    book.add_attribute("pages", DataType.INT)
    storage.create_object_type(book)

    for object_type in storage.list_object_types():
        print(object_type.name, object_type.labels())
"""

from knowledgebase.core.engine import Storage
from knowledgebase.core.types import Attribute, DataType, ObjectType, new_object_type
from knowledgebase.exceptions import (
    AttributeAlreadyExistsError,
    ConnectionError,
    InvalidDataTypeError,
    KnowledgeBaseError,
    ObjectTypeAlreadyExistsError,
    ObjectTypeNotFoundError,
    StorageError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "Storage",
    # Schema model
    "DataType",
    "Attribute",
    "ObjectType",
    "new_object_type",
    # Exceptions
    "KnowledgeBaseError",
    "ConnectionError",
    "StorageError",
    "ValidationError",
    "AttributeAlreadyExistsError",
    "InvalidDataTypeError",
    "ObjectTypeAlreadyExistsError",
    "ObjectTypeNotFoundError",
]
