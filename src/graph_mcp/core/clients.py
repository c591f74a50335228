"""Default Graph client for the MCP server."""

from __future__ import annotations

import logging

from graph_mcp.core.config import Settings, get_settings
from graph_mcp.graph import ClientSecretCredential, DirectoryClient, GraphClient

logger = logging.getLogger(__name__)

_default_client: DirectoryClient | None = None


def create_client(settings: Settings) -> GraphClient:
    """Create a Graph client from settings.

    Args:
        settings: Server settings carrying the app credentials

    Returns:
        A configured GraphClient

    Raises:
        ValueError: If any credential is missing
    """
    if not settings.has_credentials:
        raise ValueError(
            "missing Microsoft credentials: set MCP_MICROSOFT_TENANT_ID, "
            "MCP_MICROSOFT_CLIENT_ID and MCP_MICROSOFT_CLIENT_SECRET"
        )

    credential = ClientSecretCredential(
        settings.tenant_id,
        settings.client_id,
        settings.client_secret,
        authority=settings.authority,
        timeout=settings.timeout,
    )
    return GraphClient(credential, base_url=settings.graph_url, timeout=settings.timeout)


def get_client() -> DirectoryClient:
    """Get the default client, creating it from settings on first use.

    Raises:
        ValueError: If the client cannot be created
    """
    global _default_client
    if _default_client is None:
        _default_client = create_client(get_settings())
    return _default_client


def set_client(client: DirectoryClient | None) -> None:
    """Replace the default client (None resets it)."""
    global _default_client
    _default_client = client
