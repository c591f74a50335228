"""MCP tools for Microsoft Graph.

This module exposes the directory and SharePoint operations as MCP tools:
- users: directory users
- applications: application registrations
- sites: sites with subsites and pages rendered to Markdown
- site_page_content: a single page rendered to Markdown or plain text

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions, client resolution and tool errors
- service.py: Business logic taking the client explicitly
"""

from graph_mcp.tools.router import (
    applications,
    register_graph_tools,
    resolve_client,
    site_page_content,
    sites,
    users,
)
from graph_mcp.tools.service import (
    list_applications,
    list_sites,
    list_users,
    page_content,
    to_json,
)

__all__ = [
    # MCP tool functions
    "users",
    "applications",
    "sites",
    "site_page_content",
    # Registration functions
    "register_graph_tools",
    "resolve_client",
    # Service functions
    "list_users",
    "list_applications",
    "list_sites",
    "page_content",
    "to_json",
]
