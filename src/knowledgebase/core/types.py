"""Schema model for the knowledge base.

An ObjectType is a named schema made of ordered, typed attributes. Some
attributes are flagged as identity parts and together form the type's
composite key. All types are JSON-serializable; the document shape stored
for an object type is exactly its ``model_dump(mode="json")``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from knowledgebase.exceptions import (
    AttributeAlreadyExistsError,
    InvalidDataTypeError,
    ValidationError,
)


class DataType(StrEnum):
    """Primitive kinds an attribute can hold."""

    BOOL = "Bool"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid data type names."""
        return [t.value for t in cls]

    @classmethod
    def parse(cls, value: DataType | str) -> DataType:
        """Resolve a data type from its exact (case-sensitive) name."""
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidDataTypeError(str(value)) from e


class Attribute(BaseModel):
    """A named, typed field of an object type."""

    name: str = Field(..., description="Attribute name, unique within its object type")
    data_type: DataType = Field(default=DataType.BOOL, description="Attribute data type")
    is_id_part: bool = Field(
        default=False, description="Whether the attribute is part of the type's identity"
    )

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        """Display label, e.g. ``isbn: String``."""
        return f"{self.name}: {self.data_type.value}"


class ObjectType(BaseModel):
    """A named schema describing a kind of entity.

    Attributes keep their insertion order, which is also display order.
    ``id_parts`` lists the names of identity attributes in the order they
    were added.
    """

    name: str = Field(..., description="Object type name, used as the storage key")
    attributes: list[Attribute] = Field(default_factory=list)
    id_parts: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_attributes(self) -> ObjectType:
        """Enforce unique attribute names and consistent id_parts.

        When id_parts is not given it is derived from the attributes flagged
        is_id_part; when given it must list exactly those names, in order.
        """
        seen: set[str] = set()
        for attribute in self.attributes:
            if attribute.name in seen:
                raise AttributeAlreadyExistsError(attribute.name, self.name)
            seen.add(attribute.name)

        expected = [a.name for a in self.attributes if a.is_id_part]
        if "id_parts" not in self.model_fields_set:
            self.id_parts = expected
        elif self.id_parts != expected:
            raise ValidationError(
                f"id_parts of '{self.name}' must list the identity attributes in order: "
                f"expected {expected}, got {self.id_parts}.",
                {"object_type_name": self.name, "expected": expected, "id_parts": self.id_parts},
            )
        return self

    def get_attribute(self, name: str) -> Attribute | None:
        """Find an attribute by exact name.

        Args:
            name: Attribute name (case-sensitive)

        Returns:
            The attribute or None if the type has no attribute of that name
        """
        return next((a for a in self.attributes if a.name == name), None)

    def has_attribute(self, name: str) -> bool:
        """Check if an attribute with this exact name exists."""
        return self.get_attribute(name) is not None

    def attribute_is_absent(self, name: str) -> bool:
        """Check if no attribute with this exact name exists."""
        return self.get_attribute(name) is None

    def add_attribute(
        self,
        name: str,
        data_type: DataType | str = DataType.BOOL,
        is_id_part: bool = False,
    ) -> Attribute:
        """Append an attribute to this object type.

        The type is left untouched when this raises.

        Args:
            name: Attribute name, must not already be used on this type
            data_type: DataType or its name (e.g. "Int")
            is_id_part: Whether the attribute is part of the identity

        Returns:
            The appended attribute

        Raises:
            AttributeAlreadyExistsError: If the name is already used
            InvalidDataTypeError: If data_type is not a known name
        """
        if self.has_attribute(name):
            raise AttributeAlreadyExistsError(name, self.name)

        attribute = Attribute(
            name=name, data_type=DataType.parse(data_type), is_id_part=is_id_part
        )
        self.attributes.append(attribute)
        if is_id_part:
            self.id_parts.append(name)
        return attribute

    def labels(self) -> list[str]:
        """Labels of all attributes in display order."""
        return [a.label for a in self.attributes]

    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored document shape."""
        return self.model_dump(mode="json")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> ObjectType:
        """Build an object type from a stored document."""
        return cls.model_validate(document)


def new_object_type(name: str) -> ObjectType:
    """Create an object type with no attributes."""
    return ObjectType(name=name)
