"""MCP tool definitions for Microsoft Graph."""

from __future__ import annotations

import logging
from typing import Awaitable

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from graph_mcp.core.clients import get_client
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.tools.service import list_applications, list_sites, list_users, page_content

logger = logging.getLogger(__name__)


def resolve_client() -> DirectoryClient:
    """Get the default client, reporting a missing one as a tool error.

    Raises:
        ToolError: If no client can be created
    """
    try:
        return get_client()
    except ValueError as e:
        raise ToolError(f"client not found: {e}") from e


async def _run(action: str, result: Awaitable[str]) -> str:
    try:
        return await result
    except Exception as e:
        logger.error(f"Failed to {action}: {type(e).__name__}: {e}")
        raise ToolError(f"failed to {action}: {type(e).__name__}: {e}") from e


async def users(name: str | None = None) -> str:
    """Interact with Microsoft Graph API for user operations.

    Args:
        name: The given name of the user. If not provided, all users will be returned.

    Returns:
        JSON object of users keyed by id
    """
    client = resolve_client()
    return await _run("get users", list_users(client, name))


async def applications(name: str | None = None) -> str:
    """Interact with Microsoft Graph API for application operations.

    Args:
        name: The name of the application. If not provided, all applications will be returned.

    Returns:
        JSON object of applications keyed by id
    """
    client = resolve_client()
    return await _run("get applications", list_applications(client, name))


async def sites(name: str | None = None) -> str:
    """Interact with Microsoft Graph API for site, subsites and pages operations.

    Each page carries its content rendered as Markdown.

    Args:
        name: The name of the site. If not provided, all sites will be returned.

    Returns:
        JSON object of sites keyed by id
    """
    client = resolve_client()
    return await _run("get sites", list_sites(client, name))


async def site_page_content(site_id: str, page_id: str, format: str = "markdown") -> str:
    """Render the content of a single SharePoint site page.

    Args:
        site_id: The id of the site owning the page
        page_id: The id of the page
        format: Output format, "markdown" (default) or "plain"

    Returns:
        The rendered page
    """
    client = resolve_client()
    return await _run("get page content", page_content(client, site_id, page_id, format))


def register_graph_tools(mcp: FastMCP) -> None:
    """Register the Graph tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(users)
    mcp.tool()(applications)
    mcp.tool()(sites)
    mcp.tool()(site_page_content)
