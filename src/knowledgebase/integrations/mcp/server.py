"""MCP server for the knowledge base.

Exposes the object type CRUD operations as MCP tools, so UI sessions and
agents can call them remotely. All sessions share one Storage handle.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP  # type: ignore[import-not-found]

from knowledgebase import KnowledgeBaseError, ObjectType, Storage

# Configure logging to stderr (important for stdio transport)
logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)

# Create MCP server
mcp = FastMCP("knowledgebase")

# Global storage instance (set during server startup)
_storage: Storage | None = None


def get_storage() -> Storage:
    """Get the storage instance."""
    if _storage is None:
        raise RuntimeError("Storage not initialized. Call create_server() first.")
    return _storage


def _build_object_type(name: str, attributes: list[dict[str, Any]] | None) -> ObjectType:
    """Build an object type, applying the attribute uniqueness rule."""
    object_type = ObjectType(name=name)
    for attribute in attributes or []:
        object_type.add_attribute(
            name=attribute["name"],
            data_type=attribute.get("data_type", "Bool"),
            is_id_part=bool(attribute.get("is_id_part", False)),
        )
    return object_type


def _result(object_type: ObjectType | None) -> str:
    """Serialize an optional object type; None becomes a null document."""
    return json.dumps(
        {"object_type": object_type.to_document() if object_type is not None else None}
    )


def _error(error: Exception) -> str:
    if isinstance(error, KnowledgeBaseError):
        return json.dumps(error.to_dict())
    return json.dumps({"error": str(error)})


@mcp.tool()
def knowledgebase_list_object_types() -> str:
    """List every stored object type.

    Returns:
        JSON array of object type documents:
        {name, attributes: [{name, data_type, is_id_part}], id_parts}
    """
    try:
        return json.dumps([ot.to_document() for ot in get_storage().list_object_types()])
    except Exception as e:
        return _error(e)


@mcp.tool()
def knowledgebase_get_object_type(name: str) -> str:
    """Get a single object type by name.

    Args:
        name: Object type name

    Returns:
        JSON with "object_type" (null if not stored).
    """
    try:
        return _result(get_storage().get_object_type(name))
    except Exception as e:
        return _error(e)


@mcp.tool()
def knowledgebase_create_object_type(
    name: str,
    attributes: list[dict[str, Any]] | None = None,
    overwrite: bool = True,
) -> str:
    """Create an object type.

    Args:
        name: Object type name (e.g., "Book")
        attributes: List of attribute definitions, each with:
            - name: Attribute name (unique within the type)
            - data_type: One of Bool, Int, Float, String (default Bool)
            - is_id_part: Whether it is part of the identity (default false)
        overwrite: Replace an existing object type of the same name

    Returns:
        JSON with the stored "object_type", or an error.

    Example:
        knowledgebase_create_object_type(
            name="Book",
            attributes=[{"name": "isbn", "data_type": "String", "is_id_part": True}],
        )
    """
    try:
        object_type = _build_object_type(name, attributes)
        return _result(get_storage().create_object_type(object_type, overwrite=overwrite))
    except Exception as e:
        return _error(e)


@mcp.tool()
def knowledgebase_update_object_type(
    name: str,
    attributes: list[dict[str, Any]] | None = None,
) -> str:
    """Replace a stored object type with a new full definition.

    Args:
        name: Object type name
        attributes: Complete new list of attribute definitions

    Returns:
        JSON with the new "object_type", null if no object type has that name.
    """
    try:
        object_type = _build_object_type(name, attributes)
        return _result(get_storage().update_object_type(object_type))
    except Exception as e:
        return _error(e)


@mcp.tool()
def knowledgebase_delete_object_type(name: str) -> str:
    """Delete a stored object type.

    Args:
        name: Object type name

    Returns:
        JSON with the removed "object_type", null if it was not stored.
    """
    try:
        return _result(get_storage().delete_object_type(ObjectType(name=name)))
    except Exception as e:
        return _error(e)


def create_server(database_url: str, echo: bool = False) -> FastMCP:
    """Create and configure the MCP server with a storage handle.

    Args:
        database_url: Embedded store URL (e.g., "sqlite:///./knowledgebase.db")
        echo: Whether to echo SQL statements

    Returns:
        Configured FastMCP server instance
    """
    global _storage
    _storage = Storage(database_url, echo=echo)
    logger.info(f"Knowledge base storage configured with {database_url}")
    return mcp


def main() -> None:
    """Entry point for running the MCP server."""
    parser = argparse.ArgumentParser(description="Knowledge Base MCP Server")
    parser.add_argument(
        "--database",
        "-d",
        default="sqlite:///./knowledgebase.db",
        help="Embedded store URL (default: sqlite:///./knowledgebase.db)",
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Echo SQL statements",
    )
    args = parser.parse_args()

    create_server(args.database, echo=args.echo)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
