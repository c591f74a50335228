"""Business logic for the Graph MCP tools.

Every function takes the directory client explicitly and returns the
serialized tool result. Errors propagate to the router, which turns them
into tool errors.
"""

from __future__ import annotations

import json
from typing import Any

from graph_mcp.content.page import get_page_content
from graph_mcp.content.resolver import MARKDOWN
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.resources import get_applications, get_sites, get_users


def to_json(data: dict[str, Any]) -> str:
    """Serialize a resource collection with 2-space indentation."""
    return json.dumps(data, indent=2, default=str)


async def list_users(client: DirectoryClient, name: str | None = None) -> str:
    """List users as JSON keyed by id.

    Args:
        client: Directory client
        name: Optional given name filter

    Returns:
        JSON document of users
    """
    return to_json(await get_users(client, name))


async def list_applications(client: DirectoryClient, name: str | None = None) -> str:
    """List applications as JSON keyed by id.

    Args:
        client: Directory client
        name: Optional display name filter

    Returns:
        JSON document of applications
    """
    return to_json(await get_applications(client, name))


async def list_sites(client: DirectoryClient, name: str | None = None) -> str:
    """List sites, their subsites and their rendered pages as JSON.

    Args:
        client: Directory client
        name: Optional display name filter

    Returns:
        JSON document of sites
    """
    return to_json(await get_sites(client, name))


async def page_content(
    client: DirectoryClient, site_id: str, page_id: str, fmt: str = MARKDOWN
) -> str:
    """Render one site page."""
    return await get_page_content(client, site_id, page_id, fmt)
