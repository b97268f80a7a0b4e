"""Stored document layout for the knowledge base."""

from knowledgebase.schema.models import OBJECT_TYPE_TABLE, Base, ObjectTypeDocument

__all__ = [
    "OBJECT_TYPE_TABLE",
    "Base",
    "ObjectTypeDocument",
]
