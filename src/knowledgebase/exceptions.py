"""Custom exceptions for the knowledge base.

Error messages say what went wrong and, where it helps, what the valid
options are. Every exception carries a JSON-serializable context dict.
"""

from __future__ import annotations

from typing import Any


class KnowledgeBaseError(Exception):
    """Base exception for all knowledge base errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ConnectionError(KnowledgeBaseError):
    """Failed to connect to the embedded store."""

    pass


class StorageError(KnowledgeBaseError):
    """The embedded store rejected or failed a command."""

    pass


class ValidationError(KnowledgeBaseError):
    """An object type definition is invalid."""

    pass


class AttributeAlreadyExistsError(ValidationError):
    """Attribute name is already used on the object type."""

    def __init__(self, attribute_name: str, object_type_name: str) -> None:
        message = f"Attribute named '{attribute_name}' already exists on '{object_type_name}'."
        super().__init__(
            message, {"attribute_name": attribute_name, "object_type_name": object_type_name}
        )
        self.attribute_name = attribute_name
        self.object_type_name = object_type_name


class InvalidDataTypeError(ValidationError):
    """Unknown data type name."""

    def __init__(self, data_type: str) -> None:
        from knowledgebase.core.types import DataType

        valid_types = DataType.values()
        message = f"Invalid data type '{data_type}'. Valid types: {', '.join(valid_types)}"
        super().__init__(message, {"data_type": data_type, "valid_types": valid_types})
        self.data_type = data_type
        self.valid_types = valid_types



class ObjectTypeAlreadyExistsError(KnowledgeBaseError):
    """Object type already stored (when overwrite=False)."""

    def __init__(self, object_type_name: str) -> None:
        message = (
            f"Object type '{object_type_name}' already exists. "
            f"Use overwrite=True or update_object_type() to replace it."
        )
        super().__init__(message, {"object_type_name": object_type_name})
        self.object_type_name = object_type_name


class ObjectTypeNotFoundError(KnowledgeBaseError):
    """Object type is not stored."""

    def __init__(self, object_type_name: str, available: list[str] | None = None) -> None:
        available = available or []
        if available:
            message = (
                f"Object type '{object_type_name}' not found. "
                f"Available object types: {', '.join(available)}"
            )
        else:
            message = f"Object type '{object_type_name}' not found. No object types exist yet."

        super().__init__(
            message, {"object_type_name": object_type_name, "available_object_types": available}
        )
        self.object_type_name = object_type_name
        self.available_object_types = available
