"""MCP (Model Context Protocol) integration for the knowledge base.

Serves the object type CRUD operations as tools over stdio.

Example:
    # Run the MCP server
    python -m knowledgebase.integrations.mcp.server --database sqlite:///./knowledgebase.db

    # Or via entry point (after pip install)
    knowledgebase-mcp --database sqlite:///./knowledgebase.db
"""

from knowledgebase.integrations.mcp.server import create_server, mcp

__all__ = ["mcp", "create_server"]
