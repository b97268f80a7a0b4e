"""Tests for the schema model."""

import pydantic
import pytest

from knowledgebase.core.types import Attribute, DataType, ObjectType, new_object_type
from knowledgebase.exceptions import (
    AttributeAlreadyExistsError,
    InvalidDataTypeError,
    ValidationError,
)


class TestDataType:
    """Tests for DataType enum."""

    def test_all_types_exist(self):
        """Exactly the four primitive kinds exist, in declaration order."""
        assert DataType.values() == ["Bool", "Int", "Float", "String"]

    def test_default_is_bool(self):
        """Attributes default to Bool."""
        assert Attribute(name="flag").data_type == DataType.BOOL

    def test_parse_by_name(self):
        """Can resolve a DataType from its name."""
        assert DataType.parse("Int") == DataType.INT
        assert DataType.parse(DataType.FLOAT) == DataType.FLOAT

    def test_parse_is_case_sensitive(self):
        """Lowercase names are not accepted."""
        with pytest.raises(InvalidDataTypeError) as exc_info:
            DataType.parse("int")
        assert "Valid types: Bool, Int, Float, String" in str(exc_info.value)


class TestAttribute:
    """Tests for Attribute model."""

    def test_label(self):
        """Label renders name and data type name."""
        attribute = Attribute(name="isbn", data_type=DataType.STRING, is_id_part=True)
        assert attribute.label == "isbn: String"

    def test_immutable(self):
        """Attributes cannot be changed after construction."""
        attribute = Attribute(name="isbn", data_type=DataType.STRING)
        with pytest.raises(pydantic.ValidationError):
            attribute.name = "other"  # type: ignore[misc]


class TestObjectType:
    """Tests for ObjectType model."""

    def test_new_object_type_is_empty(self):
        """A new object type has no attributes and no id parts."""
        object_type = new_object_type("Book")
        assert object_type.name == "Book"
        assert object_type.attributes == []
        assert object_type.id_parts == []

    def test_add_attribute(self):
        """Adding a new attribute appends it."""
        object_type = ObjectType(name="Book")
        attribute = object_type.add_attribute("isbn", DataType.STRING, True)

        assert attribute == Attribute(name="isbn", data_type=DataType.STRING, is_id_part=True)
        assert object_type.attributes == [attribute]
        assert object_type.id_parts == ["isbn"]

    def test_duplicate_attribute_rejected(self):
        """Adding the same name twice fails and leaves the type unchanged."""
        object_type = ObjectType(name="Book")
        object_type.add_attribute("isbn", DataType.STRING, True)
        before = object_type.model_copy(deep=True)

        with pytest.raises(AttributeAlreadyExistsError) as exc_info:
            object_type.add_attribute("isbn", DataType.INT, False)

        assert "already exists" in str(exc_info.value)
        assert isinstance(exc_info.value, ValidationError)
        assert object_type == before
        assert object_type.attributes == [
            Attribute(name="isbn", data_type=DataType.STRING, is_id_part=True)
        ]

    def test_attribute_names_are_case_sensitive(self):
        """Names differing only in case are distinct."""
        object_type = ObjectType(name="Book")
        object_type.add_attribute("isbn", DataType.STRING)
        object_type.add_attribute("ISBN", DataType.STRING)
        assert [a.name for a in object_type.attributes] == ["isbn", "ISBN"]

    def test_invalid_data_type_leaves_type_unchanged(self):
        """An unknown data type name fails before anything is appended."""
        object_type = ObjectType(name="Book")
        with pytest.raises(InvalidDataTypeError):
            object_type.add_attribute("isbn", "Text", True)
        assert object_type.attributes == []
        assert object_type.id_parts == []

    def test_data_type_by_name(self):
        """Data types can be passed by name."""
        object_type = ObjectType(name="Book")
        object_type.add_attribute("pages", "Int")
        assert object_type.attributes[0].data_type == DataType.INT

    def test_insertion_order_preserved(self, author: ObjectType):
        """Attributes keep insertion order; id_parts follow identity additions."""
        assert [a.name for a in author.attributes] == ["first_name", "last_name", "rating"]
        assert author.id_parts == ["first_name", "last_name"]

    def test_get_attribute(self, book: ObjectType):
        """Lookup by exact name."""
        attribute = book.get_attribute("pages")
        assert attribute is not None
        assert attribute.data_type == DataType.INT
        assert book.get_attribute("Pages") is None
        assert book.get_attribute("missing") is None

    def test_has_attribute_and_absent(self, book: ObjectType):
        """has_attribute and attribute_is_absent report opposite answers."""
        assert book.has_attribute("isbn") is True
        assert book.attribute_is_absent("isbn") is False
        assert book.has_attribute("missing") is False
        assert book.attribute_is_absent("missing") is True

    def test_labels(self, book: ObjectType):
        """Labels are rendered in display order."""
        assert book.labels() == [
            "isbn: String",
            "title: String",
            "pages: Int",
            "in_print: Bool",
        ]

    def test_document_shape(self, book: ObjectType):
        """Document maps model fields 1:1."""
        document = book.to_document()
        assert set(document) == {"name", "attributes", "id_parts"}
        assert document["attributes"][0] == {
            "name": "isbn",
            "data_type": "String",
            "is_id_part": True,
        }
        assert document["id_parts"] == ["isbn"]

    def test_from_document(self, author: ObjectType):
        """A type rebuilt from its document compares equal."""
        assert ObjectType.from_document(author.to_document()) == author

    def test_constructor_rejects_duplicate_attributes(self):
        """Duplicate names are rejected on construction, not only by add_attribute."""
        with pytest.raises(AttributeAlreadyExistsError) as exc_info:
            ObjectType(
                name="Book",
                attributes=[
                    Attribute(name="isbn", data_type=DataType.STRING),
                    Attribute(name="isbn", data_type=DataType.INT),
                ],
            )
        assert exc_info.value.context == {"attribute_name": "isbn", "object_type_name": "Book"}

    def test_from_document_rejects_duplicate_attributes(self):
        """A document repeating an attribute name is rejected."""
        document = {
            "name": "Book",
            "attributes": [
                {"name": "pages", "data_type": "Int", "is_id_part": False},
                {"name": "pages", "data_type": "String", "is_id_part": False},
            ],
            "id_parts": [],
        }
        with pytest.raises(AttributeAlreadyExistsError):
            ObjectType.from_document(document)

    def test_id_parts_derived_when_omitted(self):
        """Without id_parts, identity follows the flagged attributes in order."""
        object_type = ObjectType(
            name="Author",
            attributes=[
                Attribute(name="first_name", data_type=DataType.STRING, is_id_part=True),
                Attribute(name="rating", data_type=DataType.FLOAT),
                Attribute(name="last_name", data_type=DataType.STRING, is_id_part=True),
            ],
        )
        assert object_type.id_parts == ["first_name", "last_name"]

    def test_id_parts_must_match_flagged_attributes(self):
        """id_parts naming an unflagged or unknown attribute is rejected."""
        document = {
            "name": "Book",
            "attributes": [{"name": "isbn", "data_type": "String", "is_id_part": True}],
            "id_parts": ["title"],
        }
        with pytest.raises(ValidationError) as exc_info:
            ObjectType.from_document(document)
        assert exc_info.value.context["expected"] == ["isbn"]
        assert exc_info.value.context["id_parts"] == ["title"]

    def test_id_parts_order_must_match(self, author: ObjectType):
        """id_parts listed out of attribute order is rejected."""
        document = author.to_document()
        document["id_parts"] = ["last_name", "first_name"]
        with pytest.raises(ValidationError):
            ObjectType.from_document(document)


class TestInvalidDataTypeError:
    """Tests for the data type error context."""

    def test_valid_types_follow_enum(self):
        """Valid type names come from DataType itself."""
        error = InvalidDataTypeError("Text")
        assert error.valid_types == DataType.values()
        assert error.context == {"data_type": "Text", "valid_types": DataType.values()}
