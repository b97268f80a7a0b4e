"""Integration tests for the full object type workflow."""

import pytest

from knowledgebase import (
    Attribute,
    AttributeAlreadyExistsError,
    DataType,
    Storage,
    new_object_type,
)


class TestFullWorkflow:
    """End-to-end tests, as a UI session would drive the store."""

    def test_define_store_and_remove(self, file_url: str):
        """Define a type, persist it, read it back, change it, remove it."""
        storage = Storage(file_url)

        # 1. Listing view starts empty
        assert storage.list_object_types() == []

        # 2. Build a type in memory
        book = new_object_type("Book")
        book.add_attribute("isbn", DataType.STRING, True)
        assert book.attributes == [
            Attribute(name="isbn", data_type=DataType.STRING, is_id_part=True)
        ]

        # 3. A duplicate name is rejected and changes nothing
        with pytest.raises(AttributeAlreadyExistsError):
            book.add_attribute("isbn", DataType.INT, False)
        assert book.attributes == [
            Attribute(name="isbn", data_type=DataType.STRING, is_id_part=True)
        ]

        # 4. Persist and list it back
        assert storage.create_object_type(book) == book
        assert storage.list_object_types() == [book]

        # 5. Extend and update the whole document
        book.add_attribute("title", DataType.STRING)
        book.add_attribute("price", DataType.FLOAT)
        assert storage.update_object_type(book) == book

        stored = storage.list_object_types()[0]
        assert stored.labels() == ["isbn: String", "title: String", "price: Float"]
        assert stored.id_parts == ["isbn"]

        # 6. A fresh process sees the same document
        storage.close()
        reopened = Storage(file_url)
        assert reopened.list_object_types() == [book]

        # 7. Remove it
        assert reopened.delete_object_type(book) == book
        assert reopened.list_object_types() == []
        assert reopened.delete_object_type(book) is None
        reopened.close()
