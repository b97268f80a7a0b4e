"""Remote-call integrations.

Available integrations:
- knowledgebase.integrations.mcp - MCP (Model Context Protocol) server
"""
