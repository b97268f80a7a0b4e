"""Core components for the knowledge base."""

from knowledgebase.core.connection import DatabaseConnection
from knowledgebase.core.engine import Storage
from knowledgebase.core.locking import FairLock
from knowledgebase.core.types import Attribute, DataType, ObjectType, new_object_type

__all__ = [
    "DatabaseConnection",
    "Storage",
    "FairLock",
    "DataType",
    "Attribute",
    "ObjectType",
    "new_object_type",
]
